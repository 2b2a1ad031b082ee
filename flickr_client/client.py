"""
Flickr API Client
Main client for calling the Flickr REST API.
"""

from typing import Dict, Optional, Tuple, Type, Union

from .auth import AccessToken, Credentials, OAuth1Signer, Signer
from .config import Config
from .constants import (API_KEY_PARAM, CONNECT_TIMEOUT, FORMAT_PARAM, NOJSONCALLBACK_PARAM,
                        READ_TIMEOUT, REST_ENDPOINT, Method)
from .exceptions import AuthenticationError, InvalidArgumentError, TransportError
from .logger import LogInterface, NullLogger, logger
from .responses import T, check_status, decode
from .transport import HttpTransport, Transport
from .utils import encode_params


class FlickrClient:
    """
    Flickr REST API client.

    Every call goes through one pipeline: the fixed ``format``, ``nojsoncallback``
    and ``api_key`` parameters are added, the parameters are encoded into the query
    string, the request is sent (signed if asked), and the JSON body is decoded
    into the requested response model.

    By default a non-zero Flickr status code raises ``ServiceError``. With
    ``raise_on_error=False`` the decoded response is returned as-is and the caller
    must check ``code`` itself.
    """

    def __init__(self, api_key: Optional[str] = None, api_secret: Optional[str] = None,
                 access_token: Optional[AccessToken] = None, *,
                 raise_on_error: bool = True, verbose_logging: bool = False,
                 log_sink: Optional[LogInterface] = None, transport: Optional[Transport] = None,
                 signer: Optional[Signer] = None, endpoint: str = REST_ENDPOINT,
                 timeout: Tuple[float, float] = (CONNECT_TIMEOUT, READ_TIMEOUT)):
        """
        Initialize the client.

        Args:
            api_key: Flickr API key (or from env FLICKR_API_KEY)
            api_secret: Flickr API secret (or from env FLICKR_API_SECRET)
            access_token: OAuth access token; required before making calls
            raise_on_error: Raise ServiceError on non-zero Flickr status codes
            verbose_logging: Send parameters, URLs and responses to ``log_sink``
            log_sink: Destination for verbose output (defaults to NullLogger)
            transport: HTTP transport (defaults to HttpTransport)
            signer: Request signer (defaults to OAuth1Signer)
            endpoint: REST endpoint URL
            timeout: (connect, read) timeouts in seconds for the default transport
        """
        self.credentials = Credentials(api_key, api_secret, access_token)
        self.signer = signer or OAuth1Signer()
        self.endpoint = endpoint
        self.raise_on_error = raise_on_error
        sink = log_sink or NullLogger()
        self.transport = transport or HttpTransport(
            self.credentials, self.signer, timeout=timeout, log_sink=sink
        )
        self.log_sink = sink
        self.verbose_logging = verbose_logging

    @classmethod
    def from_config(cls, **kwargs) -> "FlickrClient":
        """Build a client from ``Config``, loading the token file if one is set."""
        access_token = None
        if Config.FLICKR_TOKEN_FILE:
            access_token = AccessToken.load(Config.FLICKR_TOKEN_FILE)
        kwargs.setdefault("raise_on_error", Config.RAISE_ON_ERROR)
        kwargs.setdefault("verbose_logging", Config.VERBOSE_LOGGING)
        kwargs.setdefault("endpoint", Config.FLICKR_ENDPOINT)
        kwargs.setdefault("timeout", (Config.CONNECT_TIMEOUT, Config.READ_TIMEOUT))
        return cls(Config.FLICKR_API_KEY, Config.FLICKR_API_SECRET, access_token, **kwargs)

    @property
    def log_sink(self) -> LogInterface:
        return self._log_sink

    @log_sink.setter
    def log_sink(self, value: LogInterface):
        self._log_sink = value or NullLogger()
        if isinstance(self.transport, HttpTransport):
            self.transport.log_sink = self._log_sink

    @property
    def verbose_logging(self) -> bool:
        return self._verbose_logging

    @verbose_logging.setter
    def verbose_logging(self, value: bool):
        self._verbose_logging = value
        if isinstance(self.transport, HttpTransport):
            self.transport.verbose = value

    @property
    def api_key(self) -> str:
        return self.credentials.api_key

    @property
    def access_token(self) -> Optional[AccessToken]:
        return self.credentials.access_token

    def set_access_token(self, access_token: AccessToken):
        """Use a different access token for all later requests."""
        self.credentials.set_access_token(access_token)

    def flickr_get(self, params: Dict[str, str], shape: Type[T], sign: bool = True) -> T:
        """Call Flickr with GET and decode the response into ``shape``."""
        return self.call(params, Method.GET, shape, sign)

    def flickr_post(self, params: Dict[str, str], shape: Type[T], sign: bool = True) -> T:
        """Call Flickr with POST and decode the response into ``shape``."""
        return self.call(params, Method.POST, shape, sign)

    def call(self, params: Dict[str, str], method: Union[Method, str], shape: Type[T],
             sign: bool = True) -> T:
        """
        Call Flickr and return the decoded response.

        Args:
            params: Request parameters, usually including ``method``
            method: Method.GET or Method.POST
            shape: Response model to decode into
            sign: Sign the request with OAuth

        Returns:
            The decoded response

        Raises:
            AuthenticationError: if no access token is configured
            InvalidArgumentError: if ``method`` is not GET or POST
            TransportError: if the request fails or the response is empty
            DecodeError: if the response does not fit ``shape``
            ServiceError: if Flickr reports an error and ``raise_on_error`` is set
        """
        return self.json_to_model(self.call_raw(params, method, sign), shape)

    def call_raw(self, params: Dict[str, str], method: Union[Method, str], sign: bool = True) -> str:
        """
        Call Flickr and return the response body without decoding it.

        Some endpoints return malformed structures; fetch the text here, repair it,
        then pass it to ``json_to_model``.
        """
        if not self.credentials.has_access_token():
            raise AuthenticationError("Client has not been configured with an OAuth access token.")
        method = self._resolve_method(method)

        request_params = dict(params)
        request_params[FORMAT_PARAM] = "json"
        request_params[NOJSONCALLBACK_PARAM] = "1"
        request_params[API_KEY_PARAM] = self.api_key

        if self.verbose_logging:
            self.log_sink.log("----------PARAMETERS----------")
            for key, value in request_params.items():
                self.log_sink.log(f"{key}={value}")
            self.log_sink.log("--------END PARAMETERS--------")

        encoded = encode_params(request_params)
        if method is Method.POST:
            body = self.transport.post(self.endpoint, encoded, sign)
        else:
            body = self.transport.get(self.endpoint, encoded, sign)

        if not body:
            raise TransportError("Empty response from Flickr.")
        if self.verbose_logging:
            self.log_sink.log(f"RESPONSE is {body}")
        logger.debug("%s %s returned %d chars", method.value, params.get("method"), len(body))
        return body

    def json_to_model(self, json_text: str, shape: Type[T]) -> T:
        """Decode a response body and apply the raise-on-error policy."""
        return check_status(decode(json_text, shape), self.raise_on_error)

    @staticmethod
    def _resolve_method(method: Union[Method, str]) -> Method:
        if isinstance(method, Method):
            return method
        try:
            return Method(str(method).upper())
        except ValueError as e:
            raise InvalidArgumentError(f"Unsupported method: {method}") from e
