"""Hand-off points between the records and an HTTP transport.

Nothing here sends a request. ``build_quote_request`` produces an unsent
``httpx.Request`` for whatever client the caller owns, and
``decode_quote_response`` turns the received ``httpx.Response`` into a
``QuoteResponse``.

    request = build_quote_request(QuoteRequest(input_mint=sol, output_mint=usdc, amount=10**9))
    async with httpx.AsyncClient(timeout=30.0) as client:
        quote = decode_quote_response(await client.send(request))
"""

import logging
from typing import Optional

import httpx

from jupquote.config import Settings, get_settings
from jupquote.errors import DecodeError, QuoteServiceError
from jupquote.quote import QuoteRequest, QuoteResponse

logger = logging.getLogger(__name__)


def _get_headers(settings: Settings) -> dict:
    """Get API headers."""
    headers = {"Accept": "application/json"}
    if settings.jupiter_api_key:
        headers["Authorization"] = f"Bearer {settings.jupiter_api_key}"
    return headers


def build_quote_request(
    request: QuoteRequest, settings: Optional[Settings] = None
) -> httpx.Request:
    """Build the ``GET /quote`` request for a quote.

    If the caller never set ``slippage_bps`` explicitly, the configured
    ``default_slippage_bps`` is used.
    """
    settings = settings or get_settings()

    if "slippage_bps" not in request.model_fields_set:
        request = request.model_copy(update={"slippage_bps": settings.default_slippage_bps})

    logger.debug(
        f"Building quote request: {request.amount} {request.input_mint} -> "
        f"{request.output_mint} (slippage: {request.slippage_bps} bps)"
    )
    return httpx.Request(
        "GET",
        f"{settings.jupiter_api_url.rstrip('/')}/quote",
        params=request.to_query_params(),
        headers=_get_headers(settings),
    )


def decode_quote_response(response: httpx.Response) -> QuoteResponse:
    """Decode a quote service response.

    Raises:
        QuoteServiceError: non-2xx status
        DecodeError: body is not a valid quote payload
    """
    if not response.is_success:
        message = _error_message(response)
        logger.warning(f"Quote API error: {response.status_code} - {message}")
        raise QuoteServiceError(response.status_code, message)

    try:
        data = response.json()
    except ValueError as e:
        raise DecodeError("Response body is not JSON", value=response.text, record="QuoteResponse") from e

    quote = QuoteResponse.from_wire(data)
    logger.info(
        f"Quote: {quote.in_amount} {quote.input_mint} -> {quote.out_amount} {quote.output_mint} "
        f"via {' -> '.join(quote.route_labels) or 'no route'}"
    )
    return quote


def _error_message(response: httpx.Response) -> str:
    """Pull the service's ``{"error": ...}`` text, falling back to the raw body."""
    try:
        data = response.json()
    except ValueError:
        return response.text
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return response.text
