"""Route plan records returned inside a quote."""

from typing import Optional

from pydantic import Field

from jupquote.base import WireModel
from jupquote.serde import U16, U64, Percent, PubkeyField


class SwapInfo(WireModel):
    """One underlying AMM swap in a route.

    The fee fields are absent from lite API responses and decode to ``None``.
    """

    amm_key: PubkeyField = Field(..., description="AMM / pool account")
    label: str = Field(..., description="Human-readable DEX label, e.g. Raydium")
    input_mint: PubkeyField
    output_mint: PubkeyField
    in_amount: U64 = Field(..., description="Estimated input amount into the AMM")
    out_amount: U64 = Field(..., description="Estimated output amount from the AMM")
    fee_amount: Optional[U64] = None
    fee_mint: Optional[PubkeyField] = None


class RoutePlanStep(WireModel):
    """A hop in the route with its share of the total amount."""

    swap_info: SwapInfo
    percent: Percent = Field(..., description="Share of the amount routed through this hop")
    bps: Optional[U16] = Field(None, description="Share in basis points (absent in lite responses)")


# Topologically sorted hops; order is execution order.
RoutePlanWithMetadata = list[RoutePlanStep]
