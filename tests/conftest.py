from unittest import mock

import pytest

from arbprobe.domain.endpoint import Endpoint
from arbprobe.providers.auto import get_provider_from_uri
from arbprobe.service.rpc_client import RpcClient
from tests.helpers import make_provider


@pytest.fixture
def provider():
    return make_provider()


@pytest.fixture
def client(provider):
    return RpcClient(provider, Endpoint(url='https://rpc.test'))


@pytest.fixture
def providers_by_url():
    """
    Routes connect() to fake providers by URL.

    Tests fill the returned dict; URLs missing from it go through the real
    get_provider_from_uri, so malformed ones still fail the usual way.
    """
    providers: dict = {}

    def fake_get_provider_from_uri(uri_string, timeout=None):
        if uri_string in providers:
            return providers[uri_string]
        return get_provider_from_uri(uri_string, timeout=timeout)

    with mock.patch(
        'arbprobe.service.rpc_client.get_provider_from_uri',
        side_effect=fake_get_provider_from_uri,
    ):
        yield providers
