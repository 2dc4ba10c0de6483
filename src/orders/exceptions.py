"""Errors raised by order orchestration.

Both build on Protean's exception hierarchy so callers that already handle
``ValidationError`` / ``InvalidOperationError`` keep working.
"""

from protean.exceptions import InvalidOperationError, ValidationError


class InvalidArgument(ValidationError):
    """Malformed input, rejected before any side effect."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__({field: [message]})


class InvalidOperation(InvalidOperationError):
    """Business rule violated after input validation (no stock, payment declined)."""

    def __init__(self, reason: str, **context) -> None:
        self.reason = reason
        self.context = context
        super().__init__(reason)
