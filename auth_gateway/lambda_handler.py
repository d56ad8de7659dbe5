"""
AWS Lambda entry points.

Each function takes an API Gateway proxy event and returns a proxy result.
Settings and the Cognito client are built on the first invocation and reused
for as long as the Lambda environment stays warm.
"""

from base64 import b64decode
from functools import lru_cache
from typing import Any, Dict
import asyncio
import binascii
import json
import logging

from fastapi import status

from . import handlers
from .app_logging import setup_logger
from .config import get_settings
from .domain import IncomingRequest, OutgoingResponse, respond
from .exceptions import ConfigurationError, InvalidBody
from .handlers import Handler
from .services import CognitoIdentityProvider, IdentityProvider

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_provider() -> IdentityProvider:
    setup_logger()
    return CognitoIdentityProvider(get_settings())


def to_request(event: Dict[str, Any], read_body: bool = True) \
        -> IncomingRequest:
    """
    Get the headers and body of an API Gateway proxy event.

    Raises
    ------
    :class:`InvalidBody`
        Raised when a base64-encoded body does not decode to UTF-8 text.

    """
    headers = event.get('headers') or {}
    body = event.get('body') if read_body else None
    if body is not None and not isinstance(body, str):
        # Direct invocations may pass the payload as an already-parsed object.
        body = json.dumps(body)
    if body and event.get('isBase64Encoded'):
        try:
            body = b64decode(body, validate=True).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError) as e:
            raise InvalidBody('Body is not base64-encoded UTF-8') from e
    return IncomingRequest(
        headers={str(k): str(v) for k, v in headers.items() if v is not None},
        body=body
    )


def to_result(response: OutgoingResponse) -> Dict[str, Any]:
    return {
        'statusCode': response.status_code,
        'headers': {'Content-Type': 'application/json'},
        'body': response.body,
    }


def _invoke(handler: Handler, event: Dict[str, Any],
            read_body: bool = True) -> Dict[str, Any]:
    try:
        provider = get_provider()
        settings = get_settings()
    except ConfigurationError as e:
        logger.error('Configuration error: %s', e)
        return to_result(respond(status.HTTP_500_INTERNAL_SERVER_ERROR,
                                 'Service is not configured'))
    try:
        request = to_request(event, read_body)
    except InvalidBody as e:
        logger.debug('%s', e)
        return to_result(respond(status.HTTP_400_BAD_REQUEST, 'Invalid body'))
    return to_result(asyncio.run(handler(request, settings, provider)))


def authorize(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    return _invoke(handlers.authorize, event, read_body=False)


def authenticate(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    return _invoke(handlers.authenticate, event)


def register(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    return _invoke(handlers.register, event)


def confirm(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    return _invoke(handlers.confirm, event)
