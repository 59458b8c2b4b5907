"""
Error values for the query layer.

Every failure is an ``Error`` carrying an ``ErrorType`` and a message. Query
and navigation methods return them inside a ``Root`` instead of raising.
"""

from enum import IntEnum
from typing import Optional, Sequence


class ErrorType(IntEnum):
    """Closed set of failure kinds."""
    UNABLE_TO_PARSE = 0
    NODE_ELEMENT_EMPTY = 1
    ELEMENT_NOT_FOUND = 2
    NO_NEXT_SIBLING = 3
    NO_PREVIOUS_SIBLING = 4
    NO_NEXT_ELEMENT_SIBLING = 5
    NO_PREVIOUS_ELEMENT_SIBLING = 6


class Error(Exception):
    """
    A failure kind plus its message.

    Callers switch on ``error.type``; there is one class for all kinds.
    """

    def __init__(self, error_type: ErrorType, message: str, cause: Optional['Error'] = None):
        super().__init__(message)
        self.type = error_type
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"Error({self.type.name}, {self.message!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return self.type == other.type and self.message == other.message

    def __hash__(self) -> int:
        return hash((self.type, self.message))


MESSAGES = {
    ErrorType.UNABLE_TO_PARSE: "unable to parse the HTML",
    ErrorType.NODE_ELEMENT_EMPTY: "node element empty",
    ErrorType.NO_NEXT_SIBLING: "no next sibling found",
    ErrorType.NO_PREVIOUS_SIBLING: "no previous sibling found",
    ErrorType.NO_NEXT_ELEMENT_SIBLING: "no next element sibling found",
    ErrorType.NO_PREVIOUS_ELEMENT_SIBLING: "no previous element sibling found",
}


def new_error(error_type: ErrorType, cause: Optional[Error] = None) -> Error:
    """Build an error with the fixed message of its kind."""
    return Error(error_type, MESSAGES[error_type], cause)


def element_not_found(args: Sequence[str]) -> Error:
    """
    Build the ``ElementNotFound`` error for a query.

    The message is ``element `<tag>` with attributes `<rest joined by =>` not found``.
    """
    tag = args[0] if args else ""
    attrs = "=".join(args[1:])
    return Error(ErrorType.ELEMENT_NOT_FOUND, f"element `{tag}` with attributes `{attrs}` not found")
