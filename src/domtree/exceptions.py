#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the domtree library.

Grammar rules and list operations never raise: a malformed tree is reported
as a ``False`` verdict. These exceptions exist for the caller-facing
boundaries that opt into raising, such as ``validate(..., strict=True)`` and
option construction.

Exception Hierarchy
-------------------
- DomTreeError (base exception)

  - ValidationError (parameter/option validation)
    - GrammarError (tree rejected by the containment grammar)

"""

from typing import Any


class DomTreeError(Exception):
    """Base exception class for all domtree-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(DomTreeError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class GrammarError(ValidationError):
    """Exception raised when strict validation rejects a document tree.

    The error names the variant of the rejected root only. It does not say
    which descendant broke the grammar.

    Parameters
    ----------
    node_type : str
        Class name of the root node that was validated
    message : str, optional
        Custom error message. If not provided, a default message is generated

    """

    def __init__(self, node_type: str, message: str | None = None):
        """Initialize the grammar error."""
        if message is None:
            message = f"Document rooted at {node_type} is not well-formed"
        super().__init__(message, parameter_name="node", parameter_value=node_type)
        self.node_type = node_type
