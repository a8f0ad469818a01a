"""Exception types for the numeric toolkit.

Out-of-domain inputs raise ``InvalidArgument``; wrong Python types raise the
built-in ``TypeError`` instead.
"""

from __future__ import annotations

from typing import Any


class InvalidArgument(ValueError):
    """Raised when an argument is outside the function's domain."""

    def __init__(self, argument: str, value: Any, message: str) -> None:
        self.argument = argument
        self.value = value
        super().__init__(message)


class EmptyInput(InvalidArgument):
    """Raised when a statistic is requested over an empty collection."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__("values", [], f"cannot calculate {operation} of an empty collection")
