"""Virtual application (vApp) calls."""

from __future__ import annotations

from collections.abc import Iterable

from .api import RestAPITripper, _fetch
from .common_types import Task
from .vapp_types import Vapp, VappCreateReq, VappListRsp


def _vapp_action(tripper: RestAPITripper, vapp_id: str, action: str) -> Task:
    return _fetch(tripper.put_trip, f"/vclusters/{vapp_id}?action={action}", Task)


def get_vapp_list(tripper: RestAPITripper) -> list[Vapp]:
    """Return all vApps."""
    return _fetch(tripper.get_trip, "/vclusters", VappListRsp).items


def create_vapp(tripper: RestAPITripper, req: VappCreateReq) -> Task:
    """Create a vApp; return the task doing it."""
    return _fetch(tripper.post_trip, "/vclusters", Task, req)


def delete_vapp(tripper: RestAPITripper, vapp_id: str) -> Task:
    """Delete a vApp; return the task doing it."""
    return _fetch(tripper.delete_trip, f"/vclusters/{vapp_id}", Task)


def add_vm_to_vapp(tripper: RestAPITripper, vapp_id: str, vm_ids: Iterable[str]) -> Task:
    """Move virtual machines into a vApp; return the task doing it."""
    path = f"/vclusters/{vapp_id}/vms?action=shiftIn"
    return _fetch(tripper.put_trip, path, Task, list(vm_ids))


def delete_vm_from_vapp(tripper: RestAPITripper, vapp_id: str, vm_ids: Iterable[str]) -> Task:
    """Move virtual machines out of a vApp; return the task doing it."""
    path = f"/vclusters/{vapp_id}/vms?action=shiftOut"
    return _fetch(tripper.put_trip, path, Task, list(vm_ids))


def power_on_vapp(tripper: RestAPITripper, vapp_id: str) -> Task:
    """Power a vApp on; return the task doing it."""
    return _vapp_action(tripper, vapp_id, "powerOn")


def power_off_vapp(tripper: RestAPITripper, vapp_id: str) -> Task:
    """Power a vApp off; return the task doing it."""
    return _vapp_action(tripper, vapp_id, "powerOff")


def power_off_vapp_safely(tripper: RestAPITripper, vapp_id: str) -> Task:
    """Shut a vApp down from its guests; return the task doing it."""
    return _vapp_action(tripper, vapp_id, "safelypowerOff")


def restart_vapp(tripper: RestAPITripper, vapp_id: str) -> Task:
    """Restart a vApp; return the task doing it."""
    return _vapp_action(tripper, vapp_id, "restart")