"""Fixtures shared by the auth gateway tests."""
from unittest import mock

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from auth_gateway.config import Settings
from auth_gateway.domain import Success
from auth_gateway.factory import create_app
from auth_gateway.services import IdentityProvider

CLIENT_ID = 'example-client-id'
CLIENT_SECRET = 'example-client-secret'


@pytest.fixture
def settings():
    return Settings(client_id=CLIENT_ID,
                    client_secret=SecretStr(CLIENT_SECRET),
                    region='us-west-2')


@pytest.fixture
def provider():
    """An identity provider that accepts everything unless told otherwise."""
    _provider = mock.AsyncMock(spec=IdentityProvider)
    _provider.get_user.return_value = Success(payload={'Username': 'u1'})
    _provider.initiate_auth.return_value = Success(payload={
        'AuthenticationResult': {'AccessToken': 'access-token',
                                 'TokenType': 'Bearer'}
    })
    _provider.sign_up.return_value = Success(payload={'UserConfirmed': False})
    _provider.confirm_sign_up.return_value = Success(payload={})
    return _provider


@pytest.fixture
def client(settings, provider):
    """An HTTP client for the app, wired to the mock provider."""
    return TestClient(create_app(settings=settings, provider=provider))
