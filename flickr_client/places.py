"""
Places API
Thin wrappers for the flickr.places.* methods.
"""

from typing import Optional

from .client import FlickrClient
from .exceptions import InvalidArgumentError
from .responses import PlacesResponse
from .utils import check_range, require_text


class PlacesApi:
    """Look up Flickr places. None of these calls need to be signed."""

    def __init__(self, client: FlickrClient):
        self.client = client

    def find(self, query: str) -> PlacesResponse:
        """
        Return place IDs matching a query string.

        This is not a geocoder: a street address resolves to the city containing it.

        Args:
            query: Free-text place query
        """
        params = {
            "method": "flickr.places.find",
            "query": require_text("query", query),
        }
        return self.client.flickr_get(params, PlacesResponse, sign=False)

    def find_by_lat_lon(self, lat: float, lon: float, accuracy: Optional[int] = None) -> PlacesResponse:
        """
        Return the place containing a coordinate.

        Args:
            lat: Latitude, -90 to 90
            lon: Longitude, -180 to 180
            accuracy: World is 1, Country ~3, Region ~6, City ~11, Street ~16 (default 16)
        """
        params = {
            "method": "flickr.places.findByLatLon",
            "lat": str(check_range("lat", lat, -90, 90)),
            "lon": str(check_range("lon", lon, -180, 180)),
        }
        if accuracy is not None:
            params["accuracy"] = str(check_range("accuracy", accuracy, 1, 16))
        return self.client.flickr_get(params, PlacesResponse, sign=False)

    def get_children_with_photos_public(self, place_id: Optional[str] = None,
                                        woe_id: Optional[str] = None) -> PlacesResponse:
        """
        Return locations with public photos under a Places ID or a WOE ID.

        Exactly one of ``place_id`` and ``woe_id`` must be given.
        """
        if bool(place_id) == bool(woe_id):
            raise InvalidArgumentError("Exactly one of place_id or woe_id is required")
        params = {"method": "flickr.places.getChildrenWithPhotosPublic"}
        if place_id:
            params["place_id"] = require_text("place_id", place_id)
        else:
            params["woe_id"] = require_text("woe_id", woe_id)
        return self.client.flickr_get(params, PlacesResponse, sign=False)
