"""
Pydantic models for request/response validation
"""
from stock_proxy.models.stock_price import (
    ErrorResponse,
    StockPriceQuery,
)

__all__ = [
    "ErrorResponse",
    "StockPriceQuery",
]
