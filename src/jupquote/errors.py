"""Exceptions raised while encoding and decoding quote payloads."""

from typing import Any, Optional


class JupQuoteError(Exception):
    """Base class for all jupquote errors."""


class DecodeError(JupQuoteError, ValueError):
    """A payload could not be decoded into a record.

    Subclasses ``ValueError`` so that pydantic wraps it when raised from a
    field validator; ``from_wire`` unwraps it again and fills in the record
    and field it belongs to.
    """

    def __init__(
        self,
        message: str,
        value: Any = None,
        field: Optional[str] = None,
        record: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.value = value
        self.field = field
        self.record = record

    def located(self, record: str, field: Optional[str]) -> "DecodeError":
        """Attach the record and field the error occurred in."""
        self.record = record
        self.field = field
        return self

    def __str__(self) -> str:
        where = ".".join(part for part in (self.record, self.field) if part)
        if where:
            return f"{where}: {self.message} (got {self.value!r})"
        return f"{self.message} (got {self.value!r})"


class FormatError(DecodeError):
    """Malformed decimal or base-58 text."""


class UnknownEnumValue(DecodeError):
    """Text outside the recognized set of an enum."""


class QuoteServiceError(JupQuoteError):
    """The quote service answered with a non-success status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"Quote service error {status_code}: {message}")
        self.status_code = status_code
        self.message = message
