"""Request, response and provider outcome values."""

import json
from typing import Any, Dict, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class IncomingRequest(BaseModel):
    """A request as received by one of the handlers."""

    headers: Optional[Dict[str, str]] = None
    body: Optional[str] = None

    def get_header(self, name: str) -> Optional[str]:
        """Get a header value, ignoring the case of the header name."""
        for key, value in (self.headers or {}).items():
            if key.lower() == name.lower():
                return value
        return None


class OutgoingResponse(BaseModel):
    """The status code and JSON payload produced by a handler."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    payload: Dict[str, Any]

    @property
    def body(self) -> str:
        return json.dumps(self.payload)


def respond(status_code: int, message: str) -> OutgoingResponse:
    """Build a response with a ``message`` payload."""
    return OutgoingResponse(status_code=status_code,
                            payload={'message': message})


class Credentials(BaseModel):
    username: str
    password: str = Field(repr=False)


class RegistrationRequest(BaseModel):
    email: str
    username: str
    password: str = Field(repr=False)


class ConfirmationRequest(BaseModel):
    username: str
    code: str


class Success(BaseModel):
    """The identity provider accepted the call."""

    ok: Literal[True] = True
    payload: Dict[str, Any] = {}


class Failure(BaseModel):
    """
    The identity provider rejected the call, or could not be reached.

    ``reason`` is the provider's own message, and may be empty.
    """

    ok: Literal[False] = False
    reason: str = ''
    code: Optional[str] = None
    """Provider error code, e.g. ``NotAuthorizedException``."""


ProviderOutcome = Union[Success, Failure]


def string_fields(data: Mapping[str, Any], *names: str) -> Dict[str, str]:
    """Pick the named fields of ``data`` that are non-empty strings."""
    return {name: data[name] for name in names
            if isinstance(data.get(name), str) and data[name]}
