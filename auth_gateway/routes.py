"""Provides the HTTP routes for the auth gateway."""
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from . import handlers
from .config import Settings
from .domain import IncomingRequest, OutgoingResponse, respond
from .exceptions import InvalidBody
from .handlers import Handler
from .services import IdentityProvider

router = APIRouter()


async def _incoming(request: Request, read_body: bool = True) \
        -> IncomingRequest:
    """
    Get the headers and body of an HTTP request.

    Raises
    ------
    :class:`InvalidBody`
        Raised when the body is not UTF-8 text.

    """
    body = await request.body() if read_body else b''
    try:
        text = body.decode('utf-8') if body else None
    except UnicodeDecodeError as e:
        raise InvalidBody('Body is not UTF-8') from e
    return IncomingRequest(headers=dict(request.headers), body=text)


def _context(request: Request) -> tuple[Settings, IdentityProvider]:
    return request.app.extra['settings'], request.app.extra['provider']


def _json(response: OutgoingResponse) -> JSONResponse:
    return JSONResponse(content=response.payload,
                        status_code=response.status_code)


async def _handle(handler: Handler, request: Request,
                  read_body: bool = True) -> JSONResponse:
    settings, provider = _context(request)
    try:
        incoming = await _incoming(request, read_body)
    except InvalidBody:
        return _json(respond(status.HTTP_400_BAD_REQUEST, 'Invalid body'))
    return _json(await handler(incoming, settings, provider))


@router.post('/authorize')
async def authorize(request: Request) -> JSONResponse:
    """Check the bearer token in the Authorization header."""
    return await _handle(handlers.authorize, request, read_body=False)


@router.post('/authenticate')
async def authenticate(request: Request) -> JSONResponse:
    """Log in with a username and password."""
    return await _handle(handlers.authenticate, request)


@router.post('/register')
async def register(request: Request) -> JSONResponse:
    """Sign up a new user."""
    return await _handle(handlers.register, request)


@router.post('/confirm')
async def confirm(request: Request) -> JSONResponse:
    """Confirm a new user with their verification code."""
    return await _handle(handlers.confirm, request)
