"""
Configuration for the auth gateway.

Settings are read from the environment:

``AWS_COGNITO_CLIENT_ID``
    Id of the Cognito app client that this gateway acts as. Required.
``AWS_COGNITO_CLIENT_SECRET``
    Secret of that app client. Only used to compute secret hashes.
``AWS_REGION``
    Region of the user pool. Defaults to ``us-east-1``.
``AWS_ACCESS_KEY_ID``, ``AWS_SECRET_ACCESS_KEY``
    Optional explicit credentials. When unset, boto3 resolves credentials on
    its own (e.g. from the Lambda execution role).
``LOG_LEVEL``
    Root log level. Defaults to ``INFO``.
"""

import os
from functools import lru_cache
from typing import Optional
import logging

from pydantic import BaseModel, ConfigDict, SecretStr

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_REGION = 'us-east-1'


class Settings(BaseModel):
    """Process-wide settings, read once at startup and never changed."""

    model_config = ConfigDict(frozen=True)

    client_id: str
    client_secret: SecretStr = SecretStr('')
    region: str = DEFAULT_REGION
    access_key_id: Optional[str] = None
    secret_access_key: Optional[SecretStr] = None

    @classmethod
    def from_env(cls) -> 'Settings':
        """
        Build settings from the process environment.

        Raises
        ------
        :class:`ConfigurationError`
            Raised when no Cognito client id is configured.

        """
        client_id = os.environ.get('AWS_COGNITO_CLIENT_ID', '')
        if not client_id:
            raise ConfigurationError('AWS_COGNITO_CLIENT_ID is not set')

        client_secret = os.environ.get('AWS_COGNITO_CLIENT_SECRET', '')
        if not client_secret:
            logger.warning('AWS_COGNITO_CLIENT_SECRET is not set; secret '
                           'hashes will be computed with an empty key')

        secret_access_key = os.environ.get('AWS_SECRET_ACCESS_KEY')
        return cls(
            client_id=client_id,
            client_secret=SecretStr(client_secret),
            region=os.environ.get('AWS_REGION') or DEFAULT_REGION,
            access_key_id=os.environ.get('AWS_ACCESS_KEY_ID') or None,
            secret_access_key=(SecretStr(secret_access_key)
                               if secret_access_key else None),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the settings for this process, reading the environment once."""
    return Settings.from_env()


def log_level() -> str:
    return os.environ.get('LOG_LEVEL', 'INFO').upper()
