"""Pytest configuration and fixtures."""

import os

import pytest
from solders.pubkey import Pubkey

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "true"
os.environ.pop("JUPITER_API_KEY", None)
os.environ.pop("JUPITER_API_URL", None)

from jupquote.config import get_settings

SOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
AMM_KEY = str(Pubkey(bytes(range(1, 33))))


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload settings for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sol_mint() -> Pubkey:
    return Pubkey.from_string(SOL_MINT)


@pytest.fixture
def usdc_mint() -> Pubkey:
    return Pubkey.from_string(USDC_MINT)


@pytest.fixture
def swap_info_payload() -> dict:
    """Single-hop swap info as returned by the lite API (no fee fields)."""
    return {
        "ammKey": AMM_KEY,
        "label": "ExampleDex",
        "inputMint": SOL_MINT,
        "outputMint": USDC_MINT,
        "inAmount": "1000000",
        "outAmount": "998500",
    }


@pytest.fixture
def quote_payload(swap_info_payload) -> dict:
    """Quote response payload with a single route step."""
    return {
        "inputMint": SOL_MINT,
        "inAmount": "1000000",
        "outputMint": USDC_MINT,
        "outAmount": "998500",
        "otherAmountThreshold": "993507",
        "swapMode": "ExactIn",
        "slippageBps": 50,
        "priceImpactPct": "0.0001",
        "routePlan": [{"swapInfo": swap_info_payload, "percent": 100}],
        "contextSlot": 301234567,
        "timeTaken": 0.012,
    }
