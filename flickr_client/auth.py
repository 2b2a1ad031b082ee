"""
Authentication Module
Hold Flickr API credentials and sign outgoing requests with OAuth1.
"""

import os
from pathlib import Path
from threading import RLock
from typing import NamedTuple, Optional, Tuple, Union

import requests
from dotenv import dotenv_values, set_key
from tweepy import OAuth1UserHandler

from .exceptions import AuthenticationError, ConfigurationError
from .logger import logger

# AccessToken field -> key in a stored token file
_TOKEN_FILE_KEYS = {
    "token": "oauth_token",
    "token_secret": "oauth_token_secret",
    "username": "username",
    "user_id": "nsid",
    "display_name": "fullname",
    "granted_permissions": "perms",
}


class AccessToken(NamedTuple):
    """An OAuth1 access token and the account it was granted for."""

    token: str
    token_secret: str
    username: Optional[str] = None
    user_id: Optional[str] = None
    display_name: Optional[str] = None
    granted_permissions: Optional[str] = None

    def store(self, path: Union[str, Path]) -> None:
        """
        Write the token to a key-value file, replacing any previous contents.

        Args:
            path: File to write
        """
        path = Path(path)
        path.write_text("", encoding="utf-8")
        for field, key in _TOKEN_FILE_KEYS.items():
            value = getattr(self, field)
            if value is not None:
                set_key(str(path), key, value)
        logger.debug("Stored access token for %s in %s", self.username, path)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "AccessToken":
        """
        Read a token previously written by ``store``.

        Args:
            path: File to read

        Returns:
            The loaded AccessToken

        Raises:
            ConfigurationError: if the file is missing or lacks the token pair
        """
        path = Path(path)
        if not path.is_file():
            raise ConfigurationError(f"Access token file not found: {path}")
        values = dotenv_values(path)
        fields = {field: values.get(key) or None for field, key in _TOKEN_FILE_KEYS.items()}
        if not fields["token"] or not fields["token_secret"]:
            raise ConfigurationError(f"Access token file {path} has no oauth_token/oauth_token_secret")
        return cls(**fields)


class Credentials:
    """Hold the API key/secret pair and the current access token."""

    def __init__(self, api_key: Optional[str] = None, api_secret: Optional[str] = None,
                 access_token: Optional[AccessToken] = None):
        """
        Initialize credentials.

        Args:
            api_key: Flickr API key (or from env FLICKR_API_KEY)
            api_secret: Flickr API secret (or from env FLICKR_API_SECRET)
            access_token: OAuth access token, may be set later
        """
        self._api_key = api_key or os.getenv("FLICKR_API_KEY")
        self._api_secret = api_secret or os.getenv("FLICKR_API_SECRET")
        self._access_token = access_token
        self._lock = RLock()

        if not all([self._api_key, self._api_secret]):
            raise ConfigurationError("Missing API key or API secret")

    @property
    def api_key(self) -> str:
        if not self._api_key:
            raise ConfigurationError("Missing API key. Please initialize the client.")
        return self._api_key

    @property
    def api_secret(self) -> str:
        if not self._api_secret:
            raise ConfigurationError("Missing API secret. Please initialize the client.")
        return self._api_secret

    @property
    def access_token(self) -> Optional[AccessToken]:
        with self._lock:
            return self._access_token

    def set_access_token(self, access_token: AccessToken) -> None:
        """Replace the access token used to sign later requests."""
        with self._lock:
            self._access_token = access_token
        logger.debug("Access token replaced (user=%s)", access_token.username)

    def has_access_token(self) -> bool:
        return self.access_token is not None

    def snapshot(self) -> Tuple[str, str, Optional[AccessToken]]:
        """Return key, secret and token as read together under the lock."""
        with self._lock:
            return self.api_key, self.api_secret, self._access_token


class Signer:
    """Signs a prepared request in place."""

    def sign(self, request: requests.PreparedRequest, credentials: Credentials) -> requests.PreparedRequest:
        raise NotImplementedError


class OAuth1Signer(Signer):
    """HMAC-SHA1 OAuth1 signing over method, URL and query string."""

    def sign(self, request: requests.PreparedRequest, credentials: Credentials) -> requests.PreparedRequest:
        api_key, api_secret, token = credentials.snapshot()
        if token is None:
            raise AuthenticationError("Cannot sign request: no OAuth access token configured.")
        handler = OAuth1UserHandler(api_key, api_secret, token.token, token.token_secret)
        return handler.apply_auth()(request)
