"""
Constants
Fixed values shared by the Flickr client.
"""

from enum import Enum

REST_ENDPOINT = "https://api.flickr.com/services/rest"

CONNECT_TIMEOUT = 30
# Bulk operations can take minutes to answer
READ_TIMEOUT = 600

FORMAT_PARAM = "format"
NOJSONCALLBACK_PARAM = "nojsoncallback"
API_KEY_PARAM = "api_key"


class Method(Enum):
    """HTTP methods understood by the REST endpoint."""

    GET = "GET"
    POST = "POST"
