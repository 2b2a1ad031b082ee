"""
Responses
Typed models for Flickr JSON responses, and the decoder that builds them.

Every Flickr response carries ``stat``; failures add a numeric ``code`` and a
``message``. Fields a model does not declare are kept and readable as attributes.
Flickr wraps many scalar values as ``{"_content": value}``; the models unwrap them.
"""

from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .exceptions import DecodeError, ServiceError
from .logger import logger


def _unwrap(value: Any) -> Any:
    if isinstance(value, dict) and "_content" in value:
        return value["_content"]
    return value


class FlickrModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Response(FlickrModel):
    """The envelope shared by every response."""

    stat: Optional[str] = None
    code: int = 0
    message: Optional[str] = None

    @property
    def is_ok(self) -> bool:
        return self.stat == "ok"


class EchoResponse(Response):
    def echoed(self) -> Dict[str, Any]:
        """Parameters sent back by flickr.test.echo, unwrapped."""
        return {key: _unwrap(value) for key, value in (self.model_extra or {}).items()}


class User(FlickrModel):
    id: Optional[str] = None
    username: Optional[str] = None

    @field_validator("username", mode="before")
    @classmethod
    def _unwrap_username(cls, value):
        return _unwrap(value)


class LoginResponse(Response):
    user: Optional[User] = None


class Place(FlickrModel):
    place_id: Optional[str] = None
    woeid: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    place_url: Optional[str] = None
    place_type: Optional[str] = None
    place_type_id: Optional[int] = None
    timezone: Optional[str] = None
    name: Optional[str] = Field(None, alias="_content")
    woe_name: Optional[str] = None
    photo_count: Optional[int] = None


class Places(FlickrModel):
    query: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    accuracy: Optional[int] = None
    total: int = 0
    place: List[Place] = []


class PlacesResponse(Response):
    places: Optional[Places] = None

    def place_list(self) -> List[Place]:
        return self.places.place if self.places else []


class OAuthCredentials(Response):
    """Result of flickr.auth.oauth.checkToken."""

    oauth_token: Optional[str] = None
    perms: Optional[str] = None
    nsid: Optional[str] = None
    username: Optional[str] = None
    fullname: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _flatten_oauth(cls, data):
        if not isinstance(data, dict) or not isinstance(data.get("oauth"), dict):
            return data
        data = dict(data)
        oauth = data.pop("oauth")
        user = oauth.get("user") or {}
        data.setdefault("oauth_token", _unwrap(oauth.get("token")))
        data.setdefault("perms", _unwrap(oauth.get("perms")))
        for key in ("nsid", "username", "fullname"):
            data.setdefault(key, user.get(key))
        return data


T = TypeVar("T", bound=Response)


def decode(json_text: str, shape: Type[T]) -> T:
    """
    Parse a JSON response body into ``shape``.

    Raises:
        DecodeError: if the text is not JSON or does not fit the model
    """
    try:
        return shape.model_validate_json(json_text)
    except ValidationError as e:
        logger.debug("Could not decode %s: %s", shape.__name__, e)
        raise DecodeError(f"Could not decode response as {shape.__name__}.") from e


def check_status(response: T, raise_on_error: bool = True) -> T:
    """
    Apply the raise-on-error policy to a decoded response.

    Raises:
        ServiceError: if ``raise_on_error`` is set and the response code is non-zero
    """
    if raise_on_error and response.code != 0:
        raise ServiceError(response.code, response.message, response)
    return response
