"""
OAuth API
Check an access token against Flickr.
"""

from .auth import AccessToken
from .client import FlickrClient
from .responses import OAuthCredentials
from .utils import require_text


class OAuthApi:
    def __init__(self, client: FlickrClient):
        self.client = client

    def check_token(self, oauth_token: str) -> OAuthCredentials:
        """Return the account and permissions an OAuth token was granted for."""
        params = {
            "method": "flickr.auth.oauth.checkToken",
            "oauth_token": require_text("oauth_token", oauth_token),
        }
        return self.client.flickr_get(params, OAuthCredentials)

    @staticmethod
    def to_access_token(credentials: OAuthCredentials, token_secret: str) -> AccessToken:
        return AccessToken(
            token=require_text("oauth_token", credentials.oauth_token),
            token_secret=require_text("token_secret", token_secret),
            username=credentials.username,
            user_id=credentials.nsid,
            display_name=credentials.fullname,
            granted_permissions=credentials.perms,
        )
