"""Provides an app factory for the auth gateway."""

from typing import Callable, Optional
import logging

from fastapi import FastAPI, Request
from fastapi.responses import Response

from .app_logging import setup_logger
from .config import Settings, get_settings
from .routes import router
from .services import CognitoIdentityProvider, IdentityProvider


def create_app(settings: Optional[Settings] = None,
               provider: Optional[IdentityProvider] = None) -> FastAPI:
    """Initialize an instance of the auth gateway app."""
    setup_logger()
    logger = logging.getLogger(__name__)

    if settings is None:
        settings = get_settings()
    if provider is None:
        provider = CognitoIdentityProvider(settings)

    logger.info(f"Cognito client: {settings.client_id}")
    logger.info(f"Cognito region: {settings.region}")

    app = FastAPI(settings=settings, provider=provider)
    app.include_router(router)

    @app.middleware("http")
    async def apply_response_headers(request: Request, call_next: Callable) -> Response:
        """Apply response headers to all responses."""
        response: Response = await call_next(request)
        response.headers['Cache-Control'] = 'no-store'
        return response

    @app.get("/")
    async def root(request: Request):
        return "Hello"

    return app
