"""
FastAPI application entry point for the Entrade stock price proxy
"""
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from stock_proxy.api import stock_price
from stock_proxy.config import ProxyConfig
from stock_proxy.utils.log_utils import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup information; nothing to clean up on shutdown"""
    port = app.state.config.port
    logger.info(f"Backend proxy server running on port {port}")
    logger.info(f"Access it locally at http://localhost:{port}")
    logger.info("Remember to deploy this server to a public hosting service for your deployed frontend to use it.")
    yield


def create_app(config: Optional[ProxyConfig] = None) -> FastAPI:
    """
    Build the proxy application

    Args:
        config: Process configuration. Read from the environment when omitted.
    """
    if config is None:
        config = ProxyConfig.from_env()

    app = FastAPI(
        title="Entrade Stock Price Proxy",
        description="CORS proxy forwarding OHLC requests to the Entrade chart API",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.allowed_origin],
        allow_credentials=False,
        allow_methods=["GET", "HEAD"],
        allow_headers=["*"],
    )

    # Registered after CORSMiddleware so it also wraps the preflight replies.
    # Every response names the one allowed origin, whatever Origin the caller sent
    @app.middleware("http")
    async def add_allowed_origin(request: Request, call_next):
        response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = config.allowed_origin
        return response

    app.include_router(stock_price.router, prefix="/api", tags=["stock-price"])

    return app


app = create_app()


def main():
    """Run the proxy with uvicorn on the configured port"""
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=app.state.config.port)


if __name__ == "__main__":
    main()
