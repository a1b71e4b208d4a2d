"""Exceptions raised by textkit."""

__docformat__ = 'google'

__all__ = [
    'InvalidArgument'
]

from typing import Any


class InvalidArgument(TypeError):
    """
    Raised when an argument is of a type the function cannot dispatch on.

    Args:
        message: Human readable description of the problem
        argument: The offending value, kept for callers that want to inspect it

    Example:
        >>> error = InvalidArgument('Invalid match arg: 42', argument=42)
        >>> error.argument
        42
        >>> str(error)
        'Invalid match arg: 42'
    """

    def __init__(self, message: str, *, argument: Any = None) -> None:
        super().__init__(message)
        self.argument = argument
