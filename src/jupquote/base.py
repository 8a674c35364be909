"""Base model for records exchanged with the quote service."""

import logging
from collections.abc import Mapping
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from jupquote.errors import DecodeError
from jupquote.serde import WIRE_CONTEXT

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound="WireModel")


def _format_loc(loc: tuple) -> Optional[str]:
    """Render a pydantic error location as ``routePlan[0].swapInfo.inAmount``."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path or None


class WireModel(BaseModel):
    """Immutable record with camelCase wire keys.

    Encoding omits every field whose value is ``None``, so optional fields
    are either present with a value or absent, never ``null``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        arbitrary_types_allowed=True,
        extra="ignore",
    )

    def to_wire(self) -> dict[str, Any]:
        """Encode to a JSON-compatible dict using wire field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_wire(cls: type[ModelT], payload: Mapping[str, Any]) -> ModelT:
        """Decode a wire payload.

        Amounts must arrive as decimal strings and keys as base-58 strings;
        records built in Python also accept native ints and Pubkeys.

        Raises:
            FormatError: a decimal or base-58 field is malformed
            UnknownEnumValue: an enum field holds unrecognized text
            DecodeError: any other structural problem (missing key, wrong JSON
                type, out-of-range integer)
        """
        try:
            return cls.model_validate(payload, context={WIRE_CONTEXT: True})
        except ValidationError as e:
            error = _to_decode_error(cls.__name__, e)
            logger.debug(f"Failed to decode {cls.__name__}: {error}")
            raise error from e


def _to_decode_error(record: str, exc: ValidationError) -> DecodeError:
    """Turn the first pydantic error into a located DecodeError."""
    details = exc.errors()[0]
    field = _format_loc(details["loc"])

    cause = details.get("ctx", {}).get("error")
    if isinstance(cause, DecodeError):
        return cause.located(record, field)

    value = None if details["type"] == "missing" else details.get("input")
    return DecodeError(details["msg"], value=value, field=field, record=record)
