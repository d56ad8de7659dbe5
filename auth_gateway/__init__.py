"""
Lightweight gateway in front of an AWS Cognito user pool.

The auth gateway exposes four request handlers that delegate all account and
token logic to Cognito:

- ``authorize`` checks a bearer token passed in the ``Authorization`` header,
  and returns 200 (OK) if Cognito accepts it or 401 (Unauthorized) otherwise.
- ``authenticate`` exchanges a username and password for an access token.
- ``register`` creates a pending (unconfirmed) user.
- ``confirm`` activates a pending user with the code Cognito sent them.

Every handler makes at most one call to Cognito, and every outcome (including
provider errors) is turned into a status code and a JSON message body. The
handlers live in :mod:`auth_gateway.handlers`; they are served as AWS Lambda
functions (:mod:`auth_gateway.lambda_handler`), as a FastAPI app
(:mod:`auth_gateway.factory`), and from the command line
(:mod:`auth_gateway.cli`).

The app client secret is never sent to Cognito. Instead, calls that name a
user carry a keyed hash of the username (see :mod:`auth_gateway.secret_hash`).
"""
