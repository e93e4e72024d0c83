"""
Upstream market data clients
"""
from stock_proxy.upstream.entrade import (
    build_entrade_url,
    fetch_ohlcs,
)

__all__ = [
    "build_entrade_url",
    "fetch_ohlcs",
]
