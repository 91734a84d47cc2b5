class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MalformedTimestampError(ValidationError):
    """Raised when a punch or log timestamp cannot be parsed."""

    def __init__(self, raw: object, expected: str):
        super().__init__(f"Malformed timestamp {raw!r} (expected {expected})")
        self.raw = raw
        self.expected = expected
