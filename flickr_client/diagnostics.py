"""
Diagnostics API
Wrappers for flickr.test.echo and flickr.test.login.
"""

from typing import Dict, Optional

from .client import FlickrClient
from .responses import EchoResponse, LoginResponse


class DiagnosticsApi:
    def __init__(self, client: FlickrClient):
        self.client = client

    def echo(self, params: Optional[Dict[str, str]] = None) -> EchoResponse:
        """Send parameters to Flickr and get them back. Any parameter name is allowed."""
        request = {key: str(value) for key, value in (params or {}).items()}
        request["method"] = "flickr.test.echo"
        return self.client.flickr_get(request, EchoResponse, sign=False)

    def login(self) -> LoginResponse:
        """Return the user the access token belongs to."""
        return self.client.flickr_get({"method": "flickr.test.login"}, LoginResponse)
