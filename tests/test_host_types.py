import json

import pytest

from icssdk.common_types import Tag
from icssdk.host_types import Host, HostHealthInfo, HostPageResponse


def test_power_state_uses_lowercase_key():
    host = Host.from_dict({"powerstate": "on"})
    assert host.power_state == "on"
    assert host.to_dict()["powerstate"] == "on"


def test_camel_case_keys():
    data = Host(all_p_nics_count=2, used_v_cpus=3, port_ip="10.0.0.1").to_dict()
    assert data["allPNicsCount"] == 2
    assert data["usedVCpus"] == 3
    assert data["portIp"] == "10.0.0.1"


def test_omitempty_fields_left_out_when_zero():
    data = Host().to_dict()
    assert "totalMemInByte" not in data
    assert "sdsDomainId" not in data
    assert "hostTotalMemInMB" not in data
    assert "hugePageEnabled" not in data
    assert data["hugePageUsedInByte"] == 0
    assert data["hugePageFreeInByte"] == 0
    assert data["hostTotalMemInByte"] == 0


def test_omitempty_fields_kept_when_set():
    data = Host(total_mem_in_byte=1024, host_total_mem_in_mb=1.5).to_dict()
    assert data["totalMemInByte"] == 1024
    assert data["hostTotalMemInMB"] == 1.5


def test_round_trip_with_nested_tags():
    host = Host(
        id="h1",
        name="node",
        tags=[Tag(id="t1", name="prod")],
        cpu_model=["x86"],
        cpu_usage=12.5,
        pnics={"eth0": "up"},
    )
    again = Host.from_json(host.to_json())
    assert again == host
    assert again.tags[0].name == "prod"


def test_int_into_float_field_is_float():
    host = Host.from_dict({"cpuUsage": 7})
    assert host.cpu_usage == 7.0
    assert isinstance(host.cpu_usage, float)


def test_wrong_type_raises():
    with pytest.raises(ValueError):
        Host.from_dict({"cpuSocket": "two"})


def test_page_response_items():
    text = json.dumps({"totalPage": 1, "currentPage": 1, "totalSize": 2,
                       "items": [{"id": "a"}, {"id": "b"}]})
    page = HostPageResponse.from_json(text)
    assert page.total_size == 2
    assert [h.id for h in page.items] == ["a", "b"]


def test_health_info_round_trip():
    info = HostHealthInfo(id="h", score=90.0, network_total=3.0)
    assert HostHealthInfo.from_dict(info.to_dict()) == info
    assert info.to_dict()["networkTotal"] == 3.0