"""Tests for :mod:`auth_gateway.cli`."""

from unittest import TestCase, mock

from click.testing import CliRunner
from pydantic import SecretStr

from auth_gateway import cli
from auth_gateway.config import Settings
from auth_gateway.domain import Failure, Success
from auth_gateway.exceptions import ConfigurationError

SETTINGS = Settings(client_id='cid', client_secret=SecretStr('secret'))


@mock.patch('auth_gateway.cli.get_settings', return_value=SETTINGS)
@mock.patch('auth_gateway.cli.CognitoIdentityProvider')
class TestCLI(TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def test_authorize(self, mock_provider_cls, _):
        provider = mock_provider_cls.return_value
        provider.get_user = mock.AsyncMock(return_value=Success())
        result = self.runner.invoke(cli.cli, ['authorize', '--token', 'tok'])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('200 {"message": "Authorized"}', result.output)
        provider.get_user.assert_awaited_once_with('tok')

    def test_authenticate_prompts_for_password(self, mock_provider_cls, _):
        provider = mock_provider_cls.return_value
        provider.initiate_auth = mock.AsyncMock(return_value=Success(
            payload={'AuthenticationResult': {'AccessToken': 'access-token'}}
        ))
        result = self.runner.invoke(
            cli.cli, ['authenticate', '--username', 'u1'], input='p1\n'
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('200 {"accessToken": "access-token"}', result.output)
        self.assertEqual(provider.initiate_auth.await_args.args[:2],
                         ('u1', 'p1'))

    def test_register(self, mock_provider_cls, _):
        provider = mock_provider_cls.return_value
        provider.sign_up = mock.AsyncMock(return_value=Success())
        result = self.runner.invoke(
            cli.cli, ['register', '--email', 'a@b.com', '--username', 'u1',
                      '--password', 'p1']
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('200 {"message": "User created"}', result.output)

    def test_confirm_rejected(self, mock_provider_cls, _):
        """A non-2xx response gives a non-zero exit status."""
        provider = mock_provider_cls.return_value
        provider.confirm_sign_up = mock.AsyncMock(return_value=Failure(
            reason='Invalid verification code provided, please try again.'
        ))
        result = self.runner.invoke(
            cli.cli, ['confirm', '--username', 'u1', '--code', '000000']
        )
        self.assertEqual(result.exit_code, 1)
        self.assertIn('400 {"message": "Invalid verification code provided, '
                      'please try again."}', result.output)

    def test_not_configured(self, mock_provider_cls, mock_get_settings):
        mock_get_settings.side_effect = \
            ConfigurationError('AWS_COGNITO_CLIENT_ID is not set')
        result = self.runner.invoke(cli.cli, ['authorize', '--token', 'tok'])
        self.assertEqual(result.exit_code, 1)
        self.assertIn('AWS_COGNITO_CLIENT_ID is not set', result.output)
        mock_provider_cls.assert_not_called()
