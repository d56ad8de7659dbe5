"""
Command line access to the auth gateway handlers.

Useful for trying out a user pool by hand. Configure it the same way as the
deployed service:

.. code-block:: bash

   $ export AWS_COGNITO_CLIENT_ID=... AWS_COGNITO_CLIENT_SECRET=...
   $ auth-gateway register --email joe@bloggs.com --username jbloggs
   Password:
   Repeat for confirmation:
   200 {"message": "User created"}
   $ auth-gateway confirm --username jbloggs --code 139694
   200 {"message": "User confirmed"}
   $ auth-gateway authenticate --username jbloggs
   Password:
   200 {"accessToken": "eyJraWQiOi..."}
   $ auth-gateway authorize --token eyJraWQiOi...
   200 {"message": "Authorized"}

"""

import asyncio
import json
from typing import Any, Dict, Optional

import click

from . import handlers
from .app_logging import setup_logger
from .config import get_settings
from .domain import IncomingRequest
from .exceptions import ConfigurationError
from .handlers import Handler
from .services import CognitoIdentityProvider


def _run(handler: Handler, headers: Optional[Dict[str, str]] = None,
         body: Optional[Dict[str, Any]] = None) -> None:
    try:
        settings = get_settings()
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e
    provider = CognitoIdentityProvider(settings)
    request = IncomingRequest(headers=headers,
                              body=json.dumps(body) if body else None)
    response = asyncio.run(handler(request, settings, provider))
    click.echo(f'{response.status_code} {response.body}')
    if not 200 <= response.status_code < 300:
        raise click.exceptions.Exit(1)


@click.group()
@click.option('--verbose', is_flag=True, help='Log to stderr.')
def cli(verbose: bool) -> None:
    """Call the auth gateway handlers against the configured user pool."""
    if verbose:
        setup_logger()


@cli.command()
@click.option('--token', prompt='Access token')
def authorize(token: str) -> None:
    """Check an access token."""
    _run(handlers.authorize, headers={'Authorization': f'Bearer {token}'})


@cli.command()
@click.option('--username', prompt='Username')
@click.option('--password', prompt='Password', hide_input=True)
def authenticate(username: str, password: str) -> None:
    """Get an access token for a user."""
    _run(handlers.authenticate,
         body={'username': username, 'password': password})


@cli.command()
@click.option('--email', prompt='Email address')
@click.option('--username', prompt='Username')
@click.option('--password', prompt='Password', hide_input=True,
              confirmation_prompt=True)
def register(email: str, username: str, password: str) -> None:
    """Sign up a new user."""
    _run(handlers.register,
         body={'email': email, 'username': username, 'password': password})


@cli.command()
@click.option('--username', prompt='Username')
@click.option('--code', prompt='Confirmation code')
def confirm(username: str, code: str) -> None:
    """Confirm a user with the code they were sent."""
    _run(handlers.confirm, body={'username': username, 'code': code})


if __name__ == '__main__':
    cli()
