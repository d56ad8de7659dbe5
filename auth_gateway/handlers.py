"""
Request handlers.

Each handler validates its request, calls the identity provider at most once,
and maps the outcome to an :class:`.OutgoingResponse`. They never raise for
bad input or provider errors.
"""

import json
from typing import Any, Awaitable, Callable, Dict, Union
import logging

from fastapi import status

from .config import Settings
from .domain import ConfirmationRequest, Credentials, Failure, \
    IncomingRequest, OutgoingResponse, RegistrationRequest, respond, \
    string_fields
from .secret_hash import calculate_secret_hash
from .services import IdentityProvider

logger = logging.getLogger(__name__)

BEARER = 'bearer '

Handler = Callable[[IncomingRequest, Settings, IdentityProvider],
                   Awaitable[OutgoingResponse]]


def _secret_hash(username: str, settings: Settings) -> str:
    return calculate_secret_hash(username, settings.client_id,
                                 settings.client_secret.get_secret_value())


def _parse_body(request: IncomingRequest) \
        -> Union[Dict[str, Any], OutgoingResponse]:
    """Decode the JSON body, or get the 400 response explaining why not."""
    if not request.body:
        return respond(status.HTTP_400_BAD_REQUEST, 'Missing body')
    try:
        data = json.loads(request.body)
    except (ValueError, RecursionError):
        logger.debug('Request body is not JSON')
        return respond(status.HTTP_400_BAD_REQUEST, 'Invalid body')
    if not isinstance(data, dict):
        logger.debug('Request body is not a JSON object')
        return respond(status.HTTP_400_BAD_REQUEST, 'Invalid body')
    return data


def _reason(outcome: Failure, default: str) -> str:
    return outcome.reason or default


def _bearer_token(header: str) -> str:
    if header[:len(BEARER)].lower() == BEARER:
        return header[len(BEARER):]
    return header


async def authorize(request: IncomingRequest, settings: Settings,
                    provider: IdentityProvider) -> OutgoingResponse:
    """Check that the bearer token in the request is accepted by Cognito."""
    header = request.get_header('Authorization')
    if not header:
        logger.info('Authorization header missing')
        return respond(status.HTTP_401_UNAUTHORIZED,
                       'Missing Authorization header')

    outcome = await provider.get_user(_bearer_token(header))
    if isinstance(outcome, Failure):
        logger.warning('Token rejected')
        return respond(status.HTTP_401_UNAUTHORIZED,
                       _reason(outcome, 'Unauthorized'))
    return respond(status.HTTP_200_OK, 'Authorized')


async def authenticate(request: IncomingRequest, settings: Settings,
                       provider: IdentityProvider) -> OutgoingResponse:
    """
    Exchange a username and password for an access token.

    The access token is returned under ``accessToken`` rather than
    ``message``.
    """
    data = _parse_body(request)
    if isinstance(data, OutgoingResponse):
        return data
    fields = string_fields(data, 'username', 'password')
    if len(fields) < 2:
        return respond(status.HTTP_400_BAD_REQUEST,
                       'Missing username or password')
    credentials = Credentials(**fields)

    outcome = await provider.initiate_auth(
        credentials.username, credentials.password,
        _secret_hash(credentials.username, settings)
    )
    if isinstance(outcome, Failure):
        logger.warning('Authentication failed for %s', credentials.username)
        return respond(status.HTTP_400_BAD_REQUEST,
                       _reason(outcome, 'Authentication failed'))

    # A challenge (e.g. NEW_PASSWORD_REQUIRED) comes back without a result.
    result = outcome.payload.get('AuthenticationResult') or {}
    access_token = result.get('AccessToken')
    if not access_token:
        logger.info('No access token for %s (challenge: %s)',
                    credentials.username, outcome.payload.get('ChallengeName'))
        return respond(status.HTTP_400_BAD_REQUEST,
                       'Invalid username or password')

    logger.info('Authenticated %s', credentials.username)
    return OutgoingResponse(status_code=status.HTTP_200_OK,
                            payload={'accessToken': access_token})


async def register(request: IncomingRequest, settings: Settings,
                   provider: IdentityProvider) -> OutgoingResponse:
    """Create an unconfirmed user with an email attribute."""
    data = _parse_body(request)
    if isinstance(data, OutgoingResponse):
        return data
    fields = string_fields(data, 'email', 'username', 'password')
    if len(fields) < 3:
        return respond(status.HTTP_400_BAD_REQUEST,
                       'Missing email, username, or password')
    registration = RegistrationRequest(**fields)

    outcome = await provider.sign_up(
        registration.email, registration.username, registration.password,
        _secret_hash(registration.username, settings)
    )
    if isinstance(outcome, Failure):
        logger.warning('Registration failed for %s', registration.username)
        return respond(status.HTTP_400_BAD_REQUEST,
                       _reason(outcome, 'User registration failed'))
    logger.info('Registered %s', registration.username)
    return respond(status.HTTP_200_OK, 'User created')


async def confirm(request: IncomingRequest, settings: Settings,
                  provider: IdentityProvider) -> OutgoingResponse:
    """Confirm a registered user with their verification code."""
    data = _parse_body(request)
    if isinstance(data, OutgoingResponse):
        return data
    fields = string_fields(data, 'username', 'code')
    if len(fields) < 2:
        return respond(status.HTTP_400_BAD_REQUEST,
                       'Missing username or code')
    confirmation = ConfirmationRequest(**fields)

    outcome = await provider.confirm_sign_up(
        confirmation.username, confirmation.code,
        _secret_hash(confirmation.username, settings)
    )
    if isinstance(outcome, Failure):
        logger.warning('Confirmation failed for %s', confirmation.username)
        return respond(status.HTTP_400_BAD_REQUEST,
                       _reason(outcome, 'Confirmation failed'))
    logger.info('Confirmed %s', confirmation.username)
    return respond(status.HTTP_200_OK, 'User confirmed')
