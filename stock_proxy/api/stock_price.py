"""
Stock price endpoint - forwards OHLC requests to the Entrade chart API
"""
import traceback
from typing import Optional
from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from stock_proxy.models import ErrorResponse, StockPriceQuery
from stock_proxy.upstream import build_entrade_url, fetch_ohlcs
from stock_proxy.utils.log_utils import get_logger

router = APIRouter()

logger = get_logger(__name__)

MISSING_PARAMS_MESSAGE = "Missing required query parameters: symbol, from, to, resolution"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.api_route(
    "/stock-price",
    methods=["GET", "HEAD"],
    responses={
        400: {"model": ErrorResponse, "description": "A query parameter is missing"},
        500: {"model": ErrorResponse, "description": "Upstream could not be reached or returned invalid JSON"},
    },
)
def get_stock_price(
    request: Request,
    symbol: Optional[str] = Query(None, description="Stock symbol, e.g. FPT"),
    from_: Optional[str] = Query(None, alias="from", description="Start of the range (unix seconds)"),
    to: Optional[str] = Query(None, description="End of the range (unix seconds)"),
    resolution: Optional[str] = Query(None, description="Candle resolution, e.g. D"),
):
    """
    Proxy OHLC data for one symbol from Entrade

    Query parameters (all required, passed through as-is):
    - symbol: Stock symbol
    - from: Range start
    - to: Range end
    - resolution: Candle resolution

    The upstream JSON is returned unchanged on success. Any other outcome is
    an {"error": ...} body: 400 for missing parameters, the upstream status
    for a non-2xx upstream reply, 500 when the upstream cannot be reached or
    its body is not JSON.
    """
    try:
        query = StockPriceQuery(symbol=symbol, from_=from_, to=to, resolution=resolution)
    except ValidationError:
        logger.error(f"Missing required query parameters: {dict(request.query_params)}")
        return error_response(400, MISSING_PARAMS_MESSAGE)

    config = request.app.state.config

    entrade_url = build_entrade_url(
        query.symbol,
        query.from_,
        query.to,
        query.resolution,
        template=config.entrade_url_template,
    )

    logger.info(f"[Proxy] Forwarding request for {query.symbol} to Entrade API: {entrade_url}")

    try:
        response = fetch_ohlcs(entrade_url)

        # requests' Response.ok also accepts 3xx
        if not 200 <= response.status_code < 300:
            error_text = response.text
            logger.error(
                f"[Proxy] Error from Entrade API for {query.symbol}: {response.status_code} - {error_text}"
            )
            return error_response(
                response.status_code,
                f"Entrade API response for {query.symbol} not OK: {response.status_code} - {error_text}",
            )

        data = response.json()
        logger.info(f"[Proxy] Successfully fetched and sent data for {query.symbol}.")
        return JSONResponse(content=data)

    except Exception as e:
        logger.error(f"[Proxy] Error proxying request for {query.symbol}: {e}")
        logger.error(f"Traceback: {traceback.format_exc()}")
        return error_response(500, f"Failed to fetch data for {query.symbol} through proxy: {e}")
