"""
Entrade chart API access
"""
import requests

from stock_proxy.config import ENTRADE_URL_TEMPLATE


def build_entrade_url(
    symbol: str,
    from_: str,
    to: str,
    resolution: str,
    template: str = ENTRADE_URL_TEMPLATE,
) -> str:
    """
    Build the Entrade OHLC URL for one symbol.

    Values are substituted as given; query string order is
    from, to, symbol, resolution.

    Example:
        >>> build_entrade_url("FPT", "1000", "2000", "D")
        'https://services.entrade.com.vn/chart-api/v2/ohlcs/stock?from=1000&to=2000&symbol=FPT&resolution=D'
    """
    return template.format(from_=from_, to=to, symbol=symbol, resolution=resolution)


def fetch_ohlcs(url: str) -> requests.Response:
    """GET the Entrade URL with default client settings (no timeout, no extra headers)"""
    return requests.get(url)
