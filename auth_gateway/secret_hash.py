"""Secret hash sent to Cognito on behalf of a user."""

from base64 import b64encode
import hashlib
import hmac


def calculate_secret_hash(username: str, client_id: str,
                          client_secret: str) -> str:
    """
    Compute the ``SECRET_HASH`` for ``username``.

    Cognito app clients that have a secret require this value on every call
    that names a user. It is the base64-encoded HMAC-SHA256 of the username
    followed by the client id, keyed with the client secret.

    An empty ``client_secret`` is not rejected here; it yields a hash that
    Cognito will refuse if the app client actually has a secret.

    Parameters
    ----------
    username : str
    client_id : str
        Cognito app client id.
    client_secret : str
        Cognito app client secret.

    Returns
    -------
    str

    """
    message = (username + client_id).encode('utf-8')
    digest = hmac.new(client_secret.encode('utf-8'), message,
                      hashlib.sha256).digest()
    return b64encode(digest).decode('ascii')
