"""Shared fixtures for Flickr client tests."""

from urllib.parse import parse_qsl

import pytest

from flickr_client.auth import AccessToken
from flickr_client.client import FlickrClient
from flickr_client.transport import Transport


class StubTransport(Transport):
    """Records every request and answers with a canned body."""

    def __init__(self, body='{"stat":"ok"}'):
        self.body = body
        self.calls = []

    def get(self, url, encoded_params, sign):
        self.calls.append(("GET", url, encoded_params, sign))
        return self.body

    def post(self, url, encoded_params, sign):
        self.calls.append(("POST", url, encoded_params, sign))
        return self.body

    def last_params(self):
        return dict(parse_qsl(self.calls[-1][2]))


@pytest.fixture
def stub_transport():
    return StubTransport()


@pytest.fixture
def access_token():
    return AccessToken(
        token="72157-token",
        token_secret="token-secret",
        username="jdoe",
        user_id="12345678@N00",
        display_name="Jane Doe",
        granted_permissions="write",
    )


@pytest.fixture
def client(stub_transport, access_token):
    return FlickrClient(
        api_key="test_key",
        api_secret="test_secret",
        access_token=access_token,
        transport=stub_transport,
    )
