"""
Pydantic models for the stock price proxy endpoint
"""
from pydantic import BaseModel, Field


class StockPriceQuery(BaseModel):
    """
    Query parameters forwarded to Entrade

    Values are kept as strings; a missing (None) or empty value fails validation.
    """
    symbol: str = Field(..., min_length=1, description="Stock symbol/ticker")
    from_: str = Field(..., min_length=1, description="Start of the range (unix seconds)")
    to: str = Field(..., min_length=1, description="End of the range (unix seconds)")
    resolution: str = Field(..., min_length=1, description="Candle resolution (1, 15, 1H, D, ...)")


class ErrorResponse(BaseModel):
    """Error envelope returned on every non-success path"""
    error: str = Field(..., description="Human readable error message")

    class Config:
        json_schema_extra = {
            "example": {
                "error": "Missing required query parameters: symbol, from, to, resolution"
            }
        }
