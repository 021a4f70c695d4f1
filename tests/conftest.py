"""Pytest configuration and shared fixtures for the shortcode2blocks test suite.

This module registers the test markers, configures Hypothesis profiles and
provides fixtures shared across unit and integration tests.
"""

import os
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from hypothesis import Phase, Verbosity, settings

from shortcode2blocks.attachments import MappingAttachmentResolver
from shortcode2blocks.builder import BlockBuilder

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, deadline=None, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=30, deadline=None)
settings.register_profile(
    "debug",
    max_examples=10,
    deadline=None,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate],
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based fuzzing tests")


@pytest.fixture
def attachments() -> MappingAttachmentResolver:
    """Provide a resolver with two media library attachments.

    Returns
    -------
    MappingAttachmentResolver
        Attachment 42 has alt text and a caption; attachment 7 is a bare URL.

    """
    return MappingAttachmentResolver(
        {
            42: {"url": "https://cdn.example.com/hero.jpg", "alt": "Hero image", "caption": "Our team"},
            7: "https://cdn.example.com/logo.png",
        }
    )


@pytest.fixture
def builder(attachments) -> BlockBuilder:
    """Provide a block builder wired to the ``attachments`` resolver."""
    return BlockBuilder(attachment_resolver=attachments)


@pytest.fixture
def soup():
    """Provide a helper that parses an HTML fragment with BeautifulSoup."""

    def _parse(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")

    return _parse


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch) -> Path:
    """Run the test from an empty working directory without a config env var."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SHORTCODE2BLOCKS_CONFIG", raising=False)
    return tmp_path
