"""
Exceptions
Error types raised by the Flickr client.
"""

from typing import Any, Optional


class FlickrClientError(Exception):
    """Base class for every error raised by the client."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(FlickrClientError):
    """A required credential or setting is missing."""


class AuthenticationError(FlickrClientError):
    """A call needed an access token and none was configured."""


class TransportError(FlickrClientError):
    """The request could not be built, sent, or answered."""


class DecodeError(FlickrClientError):
    """The response body was not valid JSON for the expected model."""


class InvalidArgumentError(FlickrClientError, ValueError):
    """A caller passed an unsupported method or an out-of-range value."""


class ServiceError(FlickrClientError):
    """Flickr answered with a non-zero status code."""

    def __init__(self, code: int, message: Optional[str], response: Any = None):
        super().__init__(f"Flickr returned non-zero status {code}: {message}")
        self.code = code
        self.message = message
        self.response = response
