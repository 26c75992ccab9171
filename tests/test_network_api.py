import json

import pytest

from icssdk.api import RestAPITripper
from icssdk.errors import SDKError
from icssdk.network_api import (
    get_network_by_id,
    get_network_list,
    get_sdn_network_by_id,
    get_sdn_network_list,
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


def test_network_list_returns_items():
    tripper = FakeTripper(payload={"items": [{"id": "n1", "vlan": 10}, {"id": "n2"}]})
    networks = get_network_list(tripper)
    assert [n.id for n in networks] == ["n1", "n2"]
    assert networks[0].vlan == 10
    assert tripper.calls == [("GET", "/networks", True, None)]


def test_network_list_empty_body():
    assert get_network_list(FakeTripper()) == []


def test_network_by_id():
    tripper = FakeTripper(payload={"id": "n1", "vswitchDto": {"name": "sw"}, "vmcount": 4})
    network = get_network_by_id(tripper, "n1")
    assert network.vswitch_dto.name == "sw"
    assert network.vm_count == 4
    assert tripper.calls[0][1] == "/networks/n1"


def test_sdn_network_list():
    payload = {
        "items": [
            {
                "id": "s1",
                "subnetKeys": [{"cidr": "10.1.0.0/24", "pools": [{"start": "10.1.0.2", "end": "10.1.0.9"}]}],
            }
        ]
    }
    tripper = FakeTripper(payload=payload)
    networks = get_sdn_network_list(tripper)
    pool = networks[0].subnet_keys[0].pools[0]
    assert (pool.start, pool.end) == ("10.1.0.2", "10.1.0.9")
    assert tripper.calls[0][1] == "/networks?type=extension"


def test_sdn_network_by_id():
    tripper = FakeTripper(payload={"id": "s7", "providerSegID": "100"})
    network = get_sdn_network_by_id(tripper, "s7")
    assert network.provider_seg_id == "100"
    assert tripper.calls[0][1] == "/networks/s7?type=extension"


def test_bad_json_is_decode_error():
    with pytest.raises(SDKError) as info:
        get_network_by_id(FakeTripper(raw=b"{not json"), "n1")
    assert info.value.code == "400"
    assert str(info.value).startswith("SDK unmarshal data error: ")


def test_unauthorized_raises():
    with pytest.raises(SDKError) as info:
        get_sdn_network_list(FakeTripper(status=401, payload={"error": "denied"}))
    assert info.value.code == "401"