"""
Utility Functions
Helper functions for building Flickr request parameters.
"""

from typing import Dict, Optional
from urllib.parse import quote_plus

from .exceptions import InvalidArgumentError, TransportError


def encode_params(params: Dict[str, str]) -> str:
    """
    Encode parameters as a query string.

    Args:
        params: Parameter names and values

    Returns:
        ``key=value`` pairs joined by ``&``, each part UTF-8 percent-encoded

    Raises:
        TransportError: if a key or value cannot be encoded as UTF-8
    """
    try:
        return "&".join(
            f"{quote_plus(str(key), encoding='utf-8')}={quote_plus(str(value), encoding='utf-8')}"
            for key, value in params.items()
        )
    except UnicodeEncodeError as e:
        raise TransportError("Error encoding request parameters.") from e


def require_text(name: str, value: Optional[str]) -> str:
    """
    Validate a required string argument.

    Returns:
        The value with surrounding whitespace removed
    """
    if value is None or not str(value).strip():
        raise InvalidArgumentError(f"{name} is required")
    return str(value).strip()


def check_range(name: str, value: float, low: float, high: float) -> float:
    """Validate that a number lies within ``[low, high]``."""
    if value is None:
        raise InvalidArgumentError(f"{name} is required")
    if not low <= value <= high:
        raise InvalidArgumentError(f"{name} must be between {low} and {high}, got {value}")
    return value
