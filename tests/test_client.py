"""Tests for the Flickr API client pipeline."""

import pytest

from flickr_client.auth import AccessToken
from flickr_client.client import FlickrClient
from flickr_client.constants import Method
from flickr_client.exceptions import (AuthenticationError, DecodeError, InvalidArgumentError,
                                      ServiceError, TransportError)
from flickr_client.responses import EchoResponse, Response


class RecordingSink:
    def __init__(self):
        self.messages = []

    def log(self, message):
        self.messages.append(message)


def test_client_initialization(client, access_token):
    """Test FlickrClient initialization."""
    assert client.api_key == "test_key"
    assert client.credentials.api_secret == "test_secret"
    assert client.access_token == access_token
    assert client.raise_on_error is True
    assert client.verbose_logging is False


def test_echo_returns_parsed_response(stub_transport):
    """Test an unsigned GET echo round trip."""
    transport = stub_transport
    transport.body = '{"stat":"ok","foo":"bar"}'
    client = FlickrClient("test_key", "test_secret", transport=transport)
    client.set_access_token(AccessToken("t", "s"))

    resp = client.call({"method": "test.echo", "foo": "bar"}, Method.GET, Response, sign=False)

    assert resp.stat == "ok"
    assert resp.foo == "bar"
    assert resp.code == 0
    assert transport.calls[0][0] == "GET"
    assert transport.calls[0][3] is False


def test_service_error_raised(client, stub_transport):
    """Test that a non-zero code raises ServiceError with the code and message."""
    stub_transport.body = '{"stat":"fail","code":1,"message":"bad"}'

    with pytest.raises(ServiceError) as excinfo:
        client.call({"method": "test.echo", "foo": "bar"}, Method.GET, Response, sign=False)

    assert excinfo.value.code == 1
    assert excinfo.value.message == "bad"
    assert excinfo.value.response.stat == "fail"


def test_service_error_returned_when_raising_disabled(client, stub_transport):
    """Test that the envelope is returned when raise_on_error is off."""
    client.raise_on_error = False
    stub_transport.body = '{"stat":"fail","code":98,"message":"Invalid auth token"}'

    resp = client.flickr_get({"method": "flickr.test.login"}, Response)

    assert resp.stat == "fail"
    assert resp.code == 98
    assert resp.message == "Invalid auth token"
    assert not resp.is_ok


def test_call_without_access_token_does_no_io(stub_transport):
    """Test that calls without a token fail before reaching the transport."""
    transport = stub_transport
    client = FlickrClient("test_key", "test_secret", transport=transport)

    with pytest.raises(AuthenticationError):
        client.flickr_get({"method": "flickr.test.login"}, Response)
    with pytest.raises(AuthenticationError):
        client.call_raw({"method": "flickr.test.echo"}, Method.GET, sign=False)

    assert transport.calls == []


@pytest.mark.parametrize("method", ["DELETE", None, 42])
def test_unsupported_method(client, stub_transport, method):
    """Test that methods other than GET and POST are rejected before any I/O."""
    with pytest.raises(InvalidArgumentError):
        client.call({"method": "flickr.test.echo"}, method, Response)
    assert stub_transport.calls == []


def test_method_names_accepted(client, stub_transport):
    """Test that method names are accepted as well as Method members."""
    client.call({"method": "flickr.test.echo"}, "post", Response)
    assert stub_transport.calls[-1][0] == "POST"


def test_fixed_params_injected_and_win(client, stub_transport):
    """Test that format, nojsoncallback and api_key override caller values."""
    params = {"method": "flickr.test.echo", "format": "xml", "api_key": "other", "nojsoncallback": "0"}

    client.flickr_get(params, Response)

    sent = stub_transport.last_params()
    assert sent["format"] == "json"
    assert sent["nojsoncallback"] == "1"
    assert sent["api_key"] == "test_key"
    assert sent["method"] == "flickr.test.echo"
    # caller's dict is left alone
    assert params["format"] == "xml"


def test_post_dispatch(client, stub_transport):
    """Test that flickr_post goes through Transport.post and signs by default."""
    client.flickr_post({"method": "flickr.photos.setMeta", "photo_id": "1", "title": "a b"}, Response)

    verb, url, encoded, sign = stub_transport.calls[-1]
    assert verb == "POST"
    assert url == "https://api.flickr.com/services/rest"
    assert "title=a+b" in encoded.split("&")
    assert sign is True


@pytest.mark.parametrize("body", ["", None])
def test_empty_response(client, stub_transport, body):
    """Test that an empty body is a transport failure."""
    stub_transport.body = body
    with pytest.raises(TransportError):
        client.flickr_get({"method": "flickr.test.echo"}, Response)


def test_invalid_json(client, stub_transport):
    """Test that a non-JSON body raises DecodeError."""
    stub_transport.body = "<rsp stat='ok'/>"
    with pytest.raises(DecodeError):
        client.flickr_get({"method": "flickr.test.echo"}, Response)


def test_raw_then_decode(client, stub_transport):
    """Test fetching raw JSON, repairing it, then decoding."""
    stub_transport.body = '{"stat":"ok","method":{"_content":"flickr.test.echo"},"foo":{"_content":"bar"},}'

    raw = client.call_raw({"method": "flickr.test.echo", "foo": "bar"}, Method.GET, sign=False)
    assert raw == stub_transport.body
    resp = client.json_to_model(raw.replace("},}", "}}"), EchoResponse)

    assert resp.echoed() == {"method": "flickr.test.echo", "foo": "bar"}


def test_raw_then_decode_applies_policy(client):
    """Test that json_to_model raises on service errors too."""
    with pytest.raises(ServiceError) as excinfo:
        client.json_to_model('{"stat":"fail","code":100,"message":"Invalid API Key"}', Response)
    assert excinfo.value.code == 100


def test_verbose_logging(stub_transport, access_token):
    """Test that parameters and the response go to the injected sink."""
    sink = RecordingSink()
    client = FlickrClient("test_key", "test_secret", access_token, transport=stub_transport,
                          verbose_logging=True, log_sink=sink)

    client.flickr_get({"method": "flickr.test.echo"}, Response)

    assert "method=flickr.test.echo" in sink.messages
    assert "api_key=test_key" in sink.messages
    assert sink.messages[-1] == 'RESPONSE is {"stat":"ok"}'


def test_quiet_by_default(client, stub_transport):
    """Test that nothing is logged to the sink unless verbose logging is on."""
    sink = RecordingSink()
    client.log_sink = sink
    client.flickr_get({"method": "flickr.test.echo"}, Response)
    assert sink.messages == []
