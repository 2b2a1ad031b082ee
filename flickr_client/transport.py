"""
Transport
Blocking HTTP GET/POST against the Flickr REST endpoint.

Both methods put the encoded parameters in the query string. POST requests carry
no body, which is what the REST endpoint expects.
"""

from typing import Optional, Tuple

import requests

from .auth import Credentials, Signer
from .constants import CONNECT_TIMEOUT, READ_TIMEOUT, Method
from .exceptions import TransportError
from .logger import LogInterface, NullLogger, logger


class Transport:
    """Sends an encoded request and returns the response body."""

    def get(self, url: str, encoded_params: str, sign: bool) -> str:
        raise NotImplementedError

    def post(self, url: str, encoded_params: str, sign: bool) -> str:
        raise NotImplementedError


class HttpTransport(Transport):
    """Transport backed by ``requests``, one session per call."""

    def __init__(self, credentials: Credentials, signer: Signer,
                 timeout: Tuple[float, float] = (CONNECT_TIMEOUT, READ_TIMEOUT),
                 log_sink: Optional[LogInterface] = None, verbose: bool = False):
        self.credentials = credentials
        self.signer = signer
        self.timeout = timeout
        self.log_sink = log_sink or NullLogger()
        self.verbose = verbose

    def get(self, url: str, encoded_params: str, sign: bool) -> str:
        return self._send(Method.GET, url, encoded_params, sign)

    def post(self, url: str, encoded_params: str, sign: bool) -> str:
        return self._send(Method.POST, url, encoded_params, sign)

    def _send(self, method: Method, url: str, encoded_params: str, sign: bool) -> str:
        full_url = f"{url}?{encoded_params}" if encoded_params else url
        if self.verbose:
            self.log_sink.log(f"{method.value} URL is {full_url}")

        try:
            request = requests.Request(method.value, full_url).prepare()
            if sign:
                request = self.signer.sign(request, self.credentials)
            with requests.Session() as session:
                response = session.send(request, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method.value, url, e)
            raise TransportError(f"Error while performing {method.value} operation.") from e

        body = response.text
        if not response.ok and not body:
            raise TransportError(f"{method.value} returned HTTP {response.status_code} with no body.")
        logger.debug("%s %s -> HTTP %s (%d chars)", method.value, url, response.status_code, len(body))
        return body
