"""
Process configuration for the proxy server
Built once at launch and kept on app.state for the lifetime of the process
"""
import os
from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_PORT = 3001

# Only this frontend may read our responses
ALLOWED_ORIGIN = "https://my-stock-order-book.web.app"

ENTRADE_URL_TEMPLATE = (
    "https://services.entrade.com.vn/chart-api/v2/ohlcs/stock"
    "?from={from_}&to={to}&symbol={symbol}&resolution={resolution}"
)


class ProxyConfig(BaseModel):
    """Settings fixed for the process lifetime"""
    port: int = Field(DEFAULT_PORT, description="Port the HTTP server listens on")
    allowed_origin: str = Field(ALLOWED_ORIGIN, description="Single frontend origin allowed by CORS")
    entrade_url_template: str = Field(ENTRADE_URL_TEMPLATE, description="Upstream OHLC endpoint template")

    class Config:
        frozen = True

    @classmethod
    def from_env(cls) -> "ProxyConfig":
        """
        Build the configuration from the environment

        Reads PORT (after loading a .env file if one exists). Nothing else
        is taken from the environment.

        Raises:
            ValueError: if PORT is set but is not an integer
        """
        load_dotenv()

        port_env = os.getenv("PORT")
        if not port_env:
            return cls()

        try:
            port = int(port_env)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got '{port_env}'")

        return cls(port=port)
