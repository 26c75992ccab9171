import json

import pytest

from icssdk.api import RestAPITripper
from icssdk.client import new_client
from icssdk.cluster_service import ClusterService, new_cluster_service
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


CLUSTERS = Response(
    200,
    "200 OK",
    json.dumps({"items": [{"name": "alpha", "id": "c-1"}, {"name": "beta", "id": "c-2"}]}).encode(),
)


def make_service():
    tripper = FakeTripper(CLUSTERS)
    return new_cluster_service(new_client(tripper)), tripper


def test_new_cluster_service_uses_client():
    service, _ = make_service()
    assert isinstance(service, ClusterService)
    assert service.tripper.valid() is True


def test_get_cluster_list():
    service, tripper = make_service()
    clusters = service.get_cluster_list()
    assert [c.id for c in clusters] == ["c-1", "c-2"]
    assert tripper.calls[0][1].api == "/clusters"


def test_get_cluster_by_name():
    service, _ = make_service()
    assert service.get_cluster_by_name("beta").id == "c-2"


def test_get_cluster_by_name_not_found():
    service, _ = make_service()
    with pytest.raises(LookupError, match="Cluster not found by name gamma"):
        service.get_cluster_by_name("gamma")


def test_get_cluster_by_name_propagates_errors():
    service = new_cluster_service(new_client(FakeTripper(Response(500, "500", b""))))
    with pytest.raises(SDKError) as info:
        service.get_cluster_by_name("alpha")
    assert info.value.code == "500"