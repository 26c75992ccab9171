import json

import pytest

from icssdk.api import RestAPITripper
from icssdk.client import Client, new_client
from icssdk.cluster_api import get_cluster_list
from icssdk.common_types import ICSApi
from icssdk.errors import SDKError
from icssdk.response import Response


class FakeTripper(RestAPITripper):
    def __init__(self, *replies):
        self.replies = list(replies) or [Response(200, "200 OK", b"{}")]
        self.calls = []

    def _answer(self, method, api, body):
        self.calls.append((method, api, body))
        return self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]

    def get_trip(self, api, body):
        return self._answer("get", api, body)

    def post_trip(self, api, body):
        return self._answer("post", api, body)

    def put_trip(self, api, body):
        return self._answer("put", api, body)

    def delete_trip(self, api, body):
        return self._answer("delete", api, body)


def test_new_client_is_valid_and_sends_nothing():
    tripper = FakeTripper()
    client = new_client(tripper)
    assert client.valid() is True
    assert client.tripper is tripper
    assert tripper.calls == []


def test_client_without_transport_is_invalid():
    assert Client().valid() is False


@pytest.mark.parametrize("method", ["get", "post", "put", "delete"])
def test_client_delegates_trips(method):
    reply = Response(200, "200 OK", b"[]")
    tripper = FakeTripper(reply)
    client = new_client(tripper)
    api = ICSApi(api="/x", token=True)
    result = getattr(client, f"{method}_trip")(api, {"a": 1})
    assert result is reply
    assert tripper.calls == [(method, api, {"a": 1})]


def test_client_works_as_transport_for_calls():
    body = json.dumps({"items": [{"name": "c1"}]}).encode()
    client = new_client(FakeTripper(Response(200, "200 OK", body)))
    assert [c.name for c in get_cluster_list(client)] == ["c1"]


def test_calls_without_transport_fail():
    with pytest.raises(SDKError) as info:
        get_cluster_list(Client())
    assert info.value.code == "404"