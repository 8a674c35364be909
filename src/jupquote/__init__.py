"""Wire-format records for the Jupiter swap quote API.

Records:
- QuoteRequest / InternalQuoteRequest: quote parameters
- QuoteResponse, PlatformFee: quote result
- RoutePlanStep, SwapInfo: route plan hops
"""

from solders.pubkey import Pubkey

from jupquote.config import Settings, configure_logging, get_settings
from jupquote.errors import (
    DecodeError,
    FormatError,
    JupQuoteError,
    QuoteServiceError,
    UnknownEnumValue,
)
from jupquote.quote import (
    DEFAULT_SLIPPAGE_BPS,
    InstructionVersion,
    InternalQuoteRequest,
    PlatformFee,
    QuoteRequest,
    QuoteResponse,
    SwapMode,
)
from jupquote.route_plan import RoutePlanStep, RoutePlanWithMetadata, SwapInfo
from jupquote.wire import build_quote_request, decode_quote_response

__all__ = [
    # Records
    "QuoteRequest",
    "InternalQuoteRequest",
    "QuoteResponse",
    "PlatformFee",
    "RoutePlanStep",
    "RoutePlanWithMetadata",
    "SwapInfo",
    "SwapMode",
    "InstructionVersion",
    "Pubkey",
    "DEFAULT_SLIPPAGE_BPS",
    # Errors
    "JupQuoteError",
    "DecodeError",
    "FormatError",
    "UnknownEnumValue",
    "QuoteServiceError",
    # Transport hand-off
    "build_quote_request",
    "decode_quote_response",
    # Configuration
    "Settings",
    "get_settings",
    "configure_logging",
]
