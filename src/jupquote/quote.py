"""Quote request and response records.

Field names are snake_case in Python and camelCase on the wire. Amounts are
in the token's smallest unit (lamports for SOL), already scaled by decimals.
"""

from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BeforeValidator, Field, StrictBool
from solders.pubkey import Pubkey

from jupquote.base import WireModel
from jupquote.route_plan import RoutePlanWithMetadata
from jupquote.serde import U16, U64, U64_MAX, Count, DecimalStr, DexList, PubkeyField, WireEnum

DEFAULT_SLIPPAGE_BPS = 50


class SwapMode(WireEnum):
    """Which side of the swap is fixed."""

    EXACT_IN = "ExactIn"  # input fixed, slippage on output
    EXACT_OUT = "ExactOut"  # output fixed, slippage on input

    @classmethod
    def default(cls) -> "SwapMode":
        return cls.EXACT_IN


class InstructionVersion(WireEnum):
    """Swap program instruction encoding."""

    V1 = "V1"
    V2 = "V2"

    @classmethod
    def default(cls) -> "InstructionVersion":
        return cls.V1


SwapModeField = Annotated[SwapMode, BeforeValidator(SwapMode.parse)]
InstructionVersionField = Annotated[
    InstructionVersion, BeforeValidator(InstructionVersion.parse)
]


class _QuoteParams(WireModel):
    """Fields shared by the client request and the internal request."""

    input_mint: PubkeyField = Field(default_factory=Pubkey.default, description="Mint being swapped")
    output_mint: PubkeyField = Field(default_factory=Pubkey.default, description="Mint wanted")
    amount: U64 = Field(default=0, description="Input or output amount, depending on swap_mode")
    slippage_bps: U16 = Field(default=DEFAULT_SLIPPAGE_BPS, description="Max slippage in basis points")
    swap_mode: Optional[SwapModeField] = None
    dexes: Optional[DexList] = Field(None, description="Only route through these DEXes")
    excluded_dexes: Optional[DexList] = Field(None, description="Never route through these DEXes")
    restrict_intermediate_tokens: Optional[StrictBool] = None
    only_direct_routes: Optional[StrictBool] = None
    as_legacy_transaction: Optional[StrictBool] = None
    platform_fee_bps: Optional[U16] = None
    max_accounts: Optional[Count] = Field(None, description="Upper bound on accounts in the route")
    instruction_version: Optional[InstructionVersionField] = None

    @property
    def effective_swap_mode(self) -> SwapMode:
        return self.swap_mode or SwapMode.default()

    @property
    def effective_instruction_version(self) -> InstructionVersion:
        return self.instruction_version or InstructionVersion.default()

    def to_query_params(self) -> dict[str, str]:
        """Flatten to ``str -> str`` for a GET query string."""
        params = {}
        for key, value in self.to_wire().items():
            if isinstance(value, bool):
                params[key] = "true" if value else "false"
            else:
                params[key] = str(value)
        return params


class QuoteRequest(_QuoteParams):
    """Parameters a client sends to obtain a quote and route plan."""

    def to_internal(self) -> "InternalQuoteRequest":
        return InternalQuoteRequest.from_request(self)


class InternalQuoteRequest(_QuoteParams):
    """Fixed field set consumed by the routing process.

    Only ever built from a ``QuoteRequest``; every field is copied unchanged.
    """

    @classmethod
    def from_request(cls, request: QuoteRequest) -> "InternalQuoteRequest":
        return cls(**{name: getattr(request, name) for name in cls.model_fields})


class PlatformFee(WireModel):
    """Fee collected by the integrating platform."""

    amount: U64
    fee_bps: U16


class QuoteResponse(WireModel):
    """Best quote and the route plan that achieves it."""

    input_mint: PubkeyField
    in_amount: U64 = Field(..., description="Input amount needed for the route")
    output_mint: PubkeyField
    out_amount: U64 = Field(..., description="Output amount expected from the route")
    other_amount_threshold: U64 = Field(
        ..., description="Minimum out for ExactIn, maximum in for ExactOut"
    )
    swap_mode: SwapModeField
    slippage_bps: U16
    platform_fee: Optional[PlatformFee] = None
    price_impact_pct: DecimalStr
    route_plan: RoutePlanWithMetadata
    context_slot: int = Field(default=0, strict=True, ge=0, le=U64_MAX, description="Slot the quote was computed at")
    time_taken: float = Field(default=0.0, strict=True, description="Seconds spent computing the quote")

    @property
    def route_labels(self) -> list[str]:
        """DEX labels in route order."""
        return [step.swap_info.label for step in self.route_plan]

    @property
    def is_multi_hop(self) -> bool:
        return len(self.route_plan) > 1

    @property
    def price_impact_percent(self) -> Decimal:
        """Price impact as a positive percentage."""
        return abs(self.price_impact_pct) * 100
