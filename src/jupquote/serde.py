"""Field codecs for the quote service wire format.

The quote service carries u64 amounts as decimal strings (JSON numbers lose
precision above 2**53) and public keys as base-58 strings. Each codec is a
``*_from_wire`` / ``*_to_wire`` function pair, bundled into an ``Annotated``
type so models declare the wire form once per field type:

    amount: U64
    input_mint: PubkeyField
    fee_amount: Optional[U64] = None

Records built in Python may pass native ints; payloads decoded with
``WireModel.from_wire`` must carry the string form. Plain integer, float and
boolean fields are strict in both cases.

Optional fields are omitted from the encoded output when ``None``; that part
is handled by ``WireModel.to_wire`` (see ``jupquote.base``).
"""

import re
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Union

from pydantic import BeforeValidator, Field, PlainSerializer, ValidationInfo
from solders.pubkey import Pubkey

from jupquote.errors import FormatError, UnknownEnumValue

U64_MAX = 2**64 - 1
U16_MAX = 2**16 - 1

# Validation context key set by WireModel.from_wire
WIRE_CONTEXT = "wire"

_DECIMAL_DIGITS = re.compile(r"[0-9]+")


def _from_wire(info: ValidationInfo) -> bool:
    return bool(info.context and info.context.get(WIRE_CONTEXT))


# ======================
# u64 <-> decimal string
# ======================


def u64_to_wire(value: int) -> str:
    return str(value)


def u64_from_wire(value: Union[str, int]) -> int:
    """Parse a decimal string (or accept a native int) as a u64.

    Raises:
        FormatError: text is not plain ASCII digits, or out of u64 range
    """
    if isinstance(value, bool):
        raise FormatError("Expected a decimal string, got a boolean", value=value)

    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        if not _DECIMAL_DIGITS.fullmatch(value):
            raise FormatError("Expected a string of decimal digits", value=value)
        number = int(value)
    else:
        raise FormatError(
            f"Expected a decimal string, got {type(value).__name__}", value=value
        )

    if number < 0 or number > U64_MAX:
        raise FormatError("Value out of range for u64", value=value)
    return number


def _validate_u64(value: Any, info: ValidationInfo) -> int:
    if _from_wire(info) and not isinstance(value, str):
        raise FormatError(
            f"Expected a decimal string, got {type(value).__name__}", value=value
        )
    return u64_from_wire(value)


# ======================
# Pubkey <-> base-58 string
# ======================


def pubkey_to_wire(value: Pubkey) -> str:
    return str(value)


def pubkey_from_wire(value: Union[str, Pubkey]) -> Pubkey:
    """Parse a base-58 string (or accept a Pubkey) as a 32-byte key.

    Raises:
        FormatError: not valid base-58, or does not decode to 32 bytes
    """
    if isinstance(value, Pubkey):
        return value
    if not isinstance(value, str):
        raise FormatError(
            f"Expected a base-58 string, got {type(value).__name__}", value=value
        )
    try:
        return Pubkey.from_string(value)
    except ValueError as e:
        raise FormatError(f"Invalid public key: {e}", value=value) from e


def _validate_pubkey(value: Any, info: ValidationInfo) -> Pubkey:
    if _from_wire(info) and not isinstance(value, str):
        raise FormatError(
            f"Expected a base-58 string, got {type(value).__name__}", value=value
        )
    return pubkey_from_wire(value)


# ======================
# Decimal <-> plain decimal text
# ======================


def decimal_to_wire(value: Decimal) -> str:
    """Render without exponent: ``0.0000001``, never ``1E-7``."""
    return format(value, "f")


# ======================
# DEX label list <-> comma-joined string
# ======================


def dexes_to_wire(value: list[str]) -> str:
    return ",".join(value)


def dexes_from_wire(value: Any) -> list[str]:
    """Split ``"Raydium,Orca"`` into labels; lists pass through."""
    if isinstance(value, str):
        return [label.strip() for label in value.split(",") if label.strip()]
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return list(value)
    raise FormatError("Expected a comma-separated list of DEX labels", value=value)


# ======================
# Enums with a textual wire form
# ======================


class WireEnum(str, Enum):
    """Enum whose members serialize as their value text."""

    @classmethod
    def parse(cls, text: Any) -> "WireEnum":
        """Look up a member by its wire text.

        Raises:
            UnknownEnumValue: text is not one of the member values
        """
        if isinstance(text, cls):
            return text
        for member in cls:
            if member.value == text:
                return member
        expected = ", ".join(repr(m.value) for m in cls)
        raise UnknownEnumValue(
            f"Not a valid {cls.__name__}, expected one of {expected}", value=text
        )

    def __str__(self) -> str:
        return self.value


# ======================
# Annotated field types
# ======================

U64 = Annotated[
    int,
    BeforeValidator(_validate_u64),
    PlainSerializer(u64_to_wire, return_type=str, when_used="json"),
]

PubkeyField = Annotated[
    Pubkey,
    BeforeValidator(_validate_pubkey),
    PlainSerializer(pubkey_to_wire, return_type=str, when_used="json"),
]

DexList = Annotated[
    list[str],
    BeforeValidator(dexes_from_wire),
    PlainSerializer(dexes_to_wire, return_type=str, when_used="json"),
]

DecimalStr = Annotated[
    Decimal,
    PlainSerializer(decimal_to_wire, return_type=str, when_used="json"),
]

# Plain JSON numbers on the wire; no coercion from strings or booleans.
U16 = Annotated[int, Field(strict=True, ge=0, le=U16_MAX)]

Percent = Annotated[int, Field(strict=True, ge=0, le=100)]

Count = Annotated[int, Field(strict=True, ge=0)]
