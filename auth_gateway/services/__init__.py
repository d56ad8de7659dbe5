"""External services used by the auth gateway."""

from .cognito import CognitoIdentityProvider, IdentityProvider

__all__ = ('CognitoIdentityProvider', 'IdentityProvider')
