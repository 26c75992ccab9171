"""Datacenter calls."""

from __future__ import annotations

from .api import RestAPITripper, _fetch
from .datacenter_types import Datacenter, DatacenterPageResponse
from .vm_types import VMPageResponse


def get_all_datacenter_list(tripper: RestAPITripper) -> DatacenterPageResponse:
    """Return all datacenters."""
    return _fetch(tripper.get_trip, "/datacenters", DatacenterPageResponse)


def get_datacenter_by_id(tripper: RestAPITripper, datacenter_id: str) -> Datacenter:
    """Return a datacenter by its id."""
    return _fetch(tripper.get_trip, f"/datacenters/{datacenter_id or 'anonymous'}", Datacenter)


def get_datacenter_by_name(tripper: RestAPITripper, datacenter_name: str) -> Datacenter:
    """Return a datacenter by its name."""
    path = f"/datacenters?datacenterName={datacenter_name or 'anonymous'}"
    return _fetch(tripper.get_trip, path, Datacenter)


def get_datacenter_vm_by_id(tripper: RestAPITripper, datacenter_id: str) -> VMPageResponse:
    """Return the virtual machines of a datacenter."""
    path = f"/datacenters/{datacenter_id or 'anonymous'}/vms"
    return _fetch(tripper.get_trip, path, VMPageResponse)