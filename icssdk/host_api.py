"""Host calls."""

from __future__ import annotations

from .api import RestAPITripper, _fetch, _fetch_list
from .host_types import Host, HostHealthInfo, HostPageResponse
from .storage_types import Storage


def get_host_by_id(tripper: RestAPITripper, host_uuid: str) -> Host:
    """Return a host by its id."""
    return _fetch(tripper.get_trip, f"/hosts/{host_uuid or 'anonymous'}", Host)


def get_host_health_info_by_id(tripper: RestAPITripper, host_uuid: str) -> HostHealthInfo:
    """Return the health scores of a host."""
    path = f"/hosts/{host_uuid or 'anonymous'}/healthperform"
    return _fetch(tripper.get_trip, path, HostHealthInfo)


def get_host_avail_storages(tripper: RestAPITripper, host_uuid: str) -> list[Storage]:
    """Return the storages a host can use."""
    path = f"/hosts/{host_uuid or 'anonymous'}/availstorages"
    return _fetch_list(tripper.get_trip, path, Storage)


def get_host_list(tripper: RestAPITripper) -> HostPageResponse:
    """Return all hosts."""
    return _fetch(tripper.get_trip, "/hosts", HostPageResponse)


def get_host_list_by_storage_id(tripper: RestAPITripper, storage_id: str) -> HostPageResponse:
    """Return the hosts attached to a storage."""
    return _fetch(tripper.get_trip, f"/storages/{storage_id}/hosts", HostPageResponse)


def get_avail_host_list_by_storage_id(tripper: RestAPITripper, storage_id: str) -> list[Host]:
    """Return the hosts a storage can be attached to."""
    return _fetch_list(tripper.get_trip, f"/storages/{storage_id}/availhosts", Host)


def get_host_list_by_switch_id(tripper: RestAPITripper, switch_id: str) -> HostPageResponse:
    """Return the hosts connected to a virtual switch."""
    return _fetch(tripper.get_trip, f"/vswitchs/{switch_id}/hosts", HostPageResponse)


def get_host_list_by_dc(tripper: RestAPITripper, datacenter_path: str) -> HostPageResponse:
    """Return the hosts of a datacenter."""
    return _fetch(tripper.get_trip, f"/datacenters/{datacenter_path}/hosts", HostPageResponse)


def get_host_accessible_datastore_list(tripper: RestAPITripper, host_id: str) -> list[Storage]:
    """Return the datastores a host can reach."""
    return _fetch_list(tripper.get_trip, f"hosts/{host_id}/availstorages", Storage)