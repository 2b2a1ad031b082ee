"""
flickr-client - Flickr API Client
A Python client for calling the Flickr REST API with OAuth-signed requests.
"""

__version__ = "0.1.0"
__author__ = "Developer"

from .auth import AccessToken, Credentials, OAuth1Signer, Signer
from .client import FlickrClient
from .constants import Method
from .diagnostics import DiagnosticsApi
from .exceptions import (AuthenticationError, ConfigurationError, DecodeError, FlickrClientError,
                         InvalidArgumentError, ServiceError, TransportError)
from .logger import LogInterface, LoggingLogger, NullLogger, StdoutLogger
from .oauth import OAuthApi
from .places import PlacesApi
from .responses import Response
from .transport import HttpTransport, Transport

__all__ = [
    "FlickrClient",
    "AccessToken",
    "Credentials",
    "Signer",
    "OAuth1Signer",
    "Method",
    "Transport",
    "HttpTransport",
    "Response",
    "LogInterface",
    "NullLogger",
    "StdoutLogger",
    "LoggingLogger",
    "PlacesApi",
    "OAuthApi",
    "DiagnosticsApi",
    "FlickrClientError",
    "ConfigurationError",
    "AuthenticationError",
    "TransportError",
    "DecodeError",
    "ServiceError",
    "InvalidArgumentError",
]
