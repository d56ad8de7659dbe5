"""
Integration with the Cognito user pools API.

Each call returns a :class:`.Success` or a :class:`.Failure`. Errors raised by
boto3, whether Cognito rejected the call or it never reached Cognito, are
turned into a :class:`.Failure` here so that callers never have to handle
exceptions from the provider.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from starlette.concurrency import run_in_threadpool

from ..config import Settings
from ..domain import Failure, ProviderOutcome, Success

logger = logging.getLogger(__name__)


class IdentityProvider(ABC):
    """The identity provider operations that the handlers depend on."""

    @abstractmethod
    async def get_user(self, access_token: str) -> ProviderOutcome:
        """Look up the user that owns ``access_token``."""

    @abstractmethod
    async def initiate_auth(self, username: str, password: str,
                            secret_hash: str) -> ProviderOutcome:
        """Start a username/password authentication flow."""

    @abstractmethod
    async def sign_up(self, email: str, username: str, password: str,
                      secret_hash: str) -> ProviderOutcome:
        """Create an unconfirmed user."""

    @abstractmethod
    async def confirm_sign_up(self, username: str, code: str,
                              secret_hash: str) -> ProviderOutcome:
        """Confirm a user with the code they were sent."""


def create_client(settings: Settings) -> Any:
    """Create a low-level ``cognito-idp`` client for the configured region."""
    secret_access_key = None
    if settings.secret_access_key is not None:
        secret_access_key = settings.secret_access_key.get_secret_value()
    return boto3.client(
        'cognito-idp',
        region_name=settings.region,
        aws_access_key_id=settings.access_key_id,
        aws_secret_access_key=secret_access_key,
    )


class CognitoIdentityProvider(IdentityProvider):
    """
    Calls a Cognito user pool through a boto3 client.

    boto3 blocks, so every call runs in a worker thread. The client itself is
    thread-safe and shared by all calls.
    """

    def __init__(self, settings: Settings, client: Any = None) -> None:
        self.client_id = settings.client_id
        self.client = client if client is not None else create_client(settings)

    async def _call(self, operation: str, **params: Any) -> ProviderOutcome:
        method: Callable[..., Dict[str, Any]] = getattr(self.client, operation)
        try:
            response = await run_in_threadpool(method, **params)
        except ClientError as e:
            error = e.response.get('Error', {})
            code = error.get('Code')
            logger.warning('Cognito %s rejected: %s', operation, code)
            return Failure(reason=error.get('Message') or '', code=code)
        except BotoCoreError as e:
            logger.warning('Cognito %s failed: %s', operation,
                           type(e).__name__)
            return Failure(reason=str(e), code=type(e).__name__)
        response.pop('ResponseMetadata', None)
        return Success(payload=response)

    async def get_user(self, access_token: str) -> ProviderOutcome:
        return await self._call('get_user', AccessToken=access_token)

    async def initiate_auth(self, username: str, password: str,
                            secret_hash: str) -> ProviderOutcome:
        return await self._call(
            'initiate_auth',
            AuthFlow='USER_PASSWORD_AUTH',
            ClientId=self.client_id,
            AuthParameters={
                'USERNAME': username,
                'PASSWORD': password,
                'SECRET_HASH': secret_hash,
            },
        )

    async def sign_up(self, email: str, username: str, password: str,
                      secret_hash: str) -> ProviderOutcome:
        return await self._call(
            'sign_up',
            ClientId=self.client_id,
            Username=username,
            Password=password,
            SecretHash=secret_hash,
            UserAttributes=[{'Name': 'email', 'Value': email}],
        )

    async def confirm_sign_up(self, username: str, code: str,
                              secret_hash: str) -> ProviderOutcome:
        return await self._call(
            'confirm_sign_up',
            ClientId=self.client_id,
            Username=username,
            ConfirmationCode=code,
            SecretHash=secret_hash,
        )
