#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_parser_fuzzing.py
"""Property-based tests for parsing and conversion of arbitrary input."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from shortcode2blocks import analyze, convert, parse
from shortcode2blocks.ast import Shortcode, Text
from shortcode2blocks.catalog import KNOWN_TAGS

tag_names = st.sampled_from(sorted(KNOWN_TAGS))
attribute_values = st.text(alphabet=st.characters(exclude_characters='"[]\\'), max_size=20)


@st.composite
def shortcode_documents(draw, depth=0):
    """Generate documents made of known shortcodes, text and stray brackets."""
    parts = []
    for _ in range(draw(st.integers(min_value=0, max_value=3))):
        choice = draw(st.integers(min_value=0, max_value=3 if depth < 2 else 2))
        tag = draw(tag_names)
        if choice == 0:
            parts.append(draw(st.text(max_size=15)))
        elif choice == 1:
            key = draw(st.sampled_from(["width", "height", "title", "link", "css", "image", "src", "color"]))
            parts.append(f'[{tag} {key}="{draw(attribute_values)}"]')
        elif choice == 2:
            parts.append(draw(st.sampled_from(["[", "]", f"[/{tag}]", f"[[{tag}]]", f"[{tag}/]"])))
        else:
            parts.append(f"[{tag}]{draw(shortcode_documents(depth=depth + 1))}[/{tag}]")
    return "".join(parts)


@pytest.mark.fuzzing
class TestParserProperties:
    """Parsing and conversion never fail."""

    @given(st.text())
    def test_parse_arbitrary_text(self, text):
        nodes = parse(text)
        assert all(isinstance(node, (Text, Shortcode)) for node in nodes)

    @given(st.text().filter(lambda t: "[" not in t))
    def test_text_without_brackets_is_unchanged(self, text):
        assert convert(text).markup == text

    @given(shortcode_documents())
    def test_convert_generated_documents(self, text):
        result = convert(text, document_id=1)
        assert isinstance(result.markup, str)
        assert convert(text, document_id=1) == result

    @given(shortcode_documents())
    def test_analyze_matches_parsed_tree(self, text):
        total = 0
        stack = list(parse(text))
        while stack:
            node = stack.pop()
            if isinstance(node, Shortcode):
                total += 1
                stack.extend(node.children)
        assert sum(analyze(text).values()) == total
