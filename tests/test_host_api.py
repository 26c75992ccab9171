import json

import pytest

from icssdk.api import RestAPITripper
from icssdk.errors import SDKError
from icssdk.host_api import (
    get_avail_host_list_by_storage_id,
    get_host_accessible_datastore_list,
    get_host_avail_storages,
    get_host_by_id,
    get_host_health_info_by_id,
    get_host_list,
    get_host_list_by_dc,
    get_host_list_by_storage_id,
    get_host_list_by_switch_id,
)
from icssdk.response import Response


class FakeTripper(RestAPITripper):
    def __init__(self, status=200, payload=None, raw=None):
        if raw is None:
            raw = b"" if payload is None else json.dumps(payload).encode()
        self.response = Response(status_code=status, body=raw)
        self.calls = []

    def _record(self, method, api, body):
        self.calls.append((method, api.api, api.token, body))
        return self.response

    def get_trip(self, api, body):
        return self._record("GET", api, body)

    def post_trip(self, api, body):
        return self._record("POST", api, body)

    def put_trip(self, api, body):
        return self._record("PUT", api, body)

    def delete_trip(self, api, body):
        return self._record("DELETE", api, body)


def test_host_by_id():
    tripper = FakeTripper(payload={"id": "h1", "ip": "10.0.0.5", "powerstate": "ON"})
    host = get_host_by_id(tripper, "h1")
    assert (host.id, host.ip, host.power_state) == ("h1", "10.0.0.5", "ON")
    assert tripper.calls == [("GET", "/hosts/h1", True, None)]


def test_host_by_empty_id_uses_anonymous():
    tripper = FakeTripper(payload={})
    get_host_by_id(tripper, "")
    assert tripper.calls[0][1] == "/hosts/anonymous"


def test_host_health():
    tripper = FakeTripper(payload={"id": "h1", "score": 87.5})
    info = get_host_health_info_by_id(tripper, "h1")
    assert info.score == 87.5
    assert tripper.calls[0][1] == "/hosts/h1/healthperform"


def test_host_avail_storages_list():
    tripper = FakeTripper(payload=[{"id": "s1"}, {"id": "s2", "name": "nfs"}])
    storages = get_host_avail_storages(tripper, "h1")
    assert [s.id for s in storages] == ["s1", "s2"]
    assert tripper.calls[0][1] == "/hosts/h1/availstorages"


def test_host_avail_storages_null_is_empty():
    assert get_host_avail_storages(FakeTripper(raw=b"null"), "h1") == []


def test_host_avail_storages_object_is_decode_error():
    with pytest.raises(SDKError) as info:
        get_host_avail_storages(FakeTripper(payload={"id": "s1"}), "h1")
    assert info.value.code == "400"


def test_host_list():
    tripper = FakeTripper(payload={"totalSize": 1, "items": [{"id": "h1"}]})
    page = get_host_list(tripper)
    assert page.total_size == 1
    assert page.items[0].id == "h1"
    assert tripper.calls[0][1] == "/hosts"


@pytest.mark.parametrize(
    "call, arg, path",
    [
        (get_host_list_by_storage_id, "st1", "/storages/st1/hosts"),
        (get_host_list_by_switch_id, "sw1", "/vswitchs/sw1/hosts"),
        (get_host_list_by_dc, "dc1", "/datacenters/dc1/hosts"),
    ],
)
def test_host_page_paths(call, arg, path):
    tripper = FakeTripper(payload={"items": [{"id": "h9"}]})
    page = call(tripper, arg)
    assert page.items[0].id == "h9"
    assert tripper.calls[0][1] == path


def test_avail_hosts_by_storage():
    tripper = FakeTripper(payload=[{"id": "h1"}])
    hosts = get_avail_host_list_by_storage_id(tripper, "st1")
    assert [h.id for h in hosts] == ["h1"]
    assert tripper.calls[0][1] == "/storages/st1/availhosts"


def test_accessible_datastores_path_has_no_leading_slash():
    tripper = FakeTripper(payload=[{"id": "ds"}])
    stores = get_host_accessible_datastore_list(tripper, "h2")
    assert stores[0].id == "ds"
    assert tripper.calls[0][1] == "hosts/h2/availstorages"


def test_forbidden_raises_with_status_code():
    with pytest.raises(SDKError) as info:
        get_host_list(FakeTripper(status=403, payload={"message": "no"}))
    assert info.value.code == "403"