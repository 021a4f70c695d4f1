#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the shortcode2blocks library.

This module defines specialized exception classes for the error conditions
that can occur while configuring and running a conversion. Malformed shortcode
input is never an error (see ``shortcode2blocks.api``); these exceptions cover
invalid configuration, file access in the command-line layer, and defects in
the converter registry.

Exception Hierarchy
-------------------
- Shortcode2BlocksError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a component)

  - FileError (file access and I/O)
    - ConfigError (unreadable or invalid configuration files)

  - ConverterRegistryError (converter registry invariant violations)

"""

from typing import Any


class Shortcode2BlocksError(Exception):
    """Base exception class for all shortcode2blocks-specific errors.

    Parameters
    ----------
    message : str
        Description shown to the user
    original_error : Exception, optional
        Lower-level exception being wrapped, if any

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        Lower-level exception being wrapped

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Store the message and the wrapped exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Shortcode2BlocksError):
    """Raised when a conversion option or configuration value is rejected.

    Parameters
    ----------
    message : str
        Why the value was rejected
    parameter_name : str, optional
        Option or configuration key that was rejected
    parameter_value : any, optional
        Rejected value
    original_error : Exception, optional
        Lower-level exception being wrapped

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Record which option was rejected."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    Parameters
    ----------
    component_name : str
        Name of the component that received invalid options
    expected_type : type
        Options class the component accepts
    received_type : type
        Class of the object that was passed instead
    message : str, optional
        Overrides the generated message

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{component_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(Shortcode2BlocksError):
    """Raised when an input, output, attachment map or config file cannot be used.

    Parameters
    ----------
    message : str
        What went wrong with the file
    file_path : str, optional
        Path of the file involved
    original_error : Exception, optional
        Lower-level exception being wrapped

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Record the path of the failing file."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class ConfigError(FileError):
    """Exception raised when a configuration file cannot be loaded or is invalid."""


class ConverterRegistryError(Shortcode2BlocksError):
    """Exception raised when the converter registry violates its invariants.

    The registry must partition the convertible part of the tag catalog:
    every claimed tag belongs to the catalog and is claimed by exactly one
    converter. A violation is a programming defect, not a runtime condition.

    Parameters
    ----------
    message : str
        Description of the violation
    tag : str, optional
        The offending shortcode tag

    """

    def __init__(self, message: str, tag: str | None = None):
        """Initialize the registry error."""
        super().__init__(message)
        self.tag = tag


__all__ = [
    "Shortcode2BlocksError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "ConfigError",
    "ConverterRegistryError",
]
