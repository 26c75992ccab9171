"""Virtual machine and template calls."""

from __future__ import annotations

from .api import RestAPITripper, _fetch
from .common_types import Task
from .vm_types import VirtualMachine, VMPageReq, VMPageResponse

_DEFAULT_RATE_LIMIT = 40


def _flag(value: bool) -> str:
    return "true" if value else "false"


def _single(page: VMPageResponse) -> VirtualMachine:
    if page.total_size == 1 and page.items:
        return page.items[0]
    return VirtualMachine()


def _vm_action(tripper: RestAPITripper, vm_id: str, action: str) -> Task:
    path = f"/vms/{vm_id or 'anonymous'}?action={action}"
    return _fetch(tripper.put_trip, path, Task)


def get_vm_by_id(tripper: RestAPITripper, vm_id: str) -> VirtualMachine:
    """Return a virtual machine by its id."""
    return _fetch(tripper.get_trip, f"/vms/{vm_id or 'anonymous'}", VirtualMachine)


def get_vm_by_ip(tripper: RestAPITripper, ip_address: str) -> VirtualMachine:
    """Return the virtual machine with a NIC at this address, or an empty one."""
    if len(ip_address) <= 6:
        ip_address = "255.255.255.255"
    path = f"/vms?pageSize=1&currentPage=1&sortField=&sort=desc&vnicIp={ip_address}"
    return _single(_fetch(tripper.get_trip, path, VMPageResponse))


def get_vm_by_name(tripper: RestAPITripper, name: str) -> VirtualMachine:
    """Return the virtual machine with this name, or an empty one."""
    path = f"/vms?pageSize=1&currentPage=1&sortField=&sort=desc&name={name or 'vm@anonymous'}"
    return _single(_fetch(tripper.get_trip, path, VMPageResponse))


def get_vm_page_list(tripper: RestAPITripper, req: VMPageReq | None) -> VMPageResponse:
    """Return one page of virtual machines."""
    return _fetch(tripper.get_trip, "/vms", VMPageResponse, req)


def power_on_vm_by_id(tripper: RestAPITripper, vm_id: str) -> Task:
    """Power a virtual machine on; return the task doing it."""
    return _vm_action(tripper, vm_id, "poweron")


def power_off_vm_by_id(tripper: RestAPITripper, vm_id: str) -> Task:
    """Power a virtual machine off; return the task doing it."""
    return _vm_action(tripper, vm_id, "poweroff")


def shutdown_vm_by_id(tripper: RestAPITripper, vm_id: str) -> Task:
    """Shut a virtual machine down from the guest; return the task doing it."""
    return _vm_action(tripper, vm_id, "shutdown")


def restart_vm_by_id(tripper: RestAPITripper, vm_id: str) -> Task:
    """Restart a virtual machine; return the task doing it."""
    return _vm_action(tripper, vm_id, "restart")


def delete_vm_by_id(tripper: RestAPITripper, vm_id: str, delete_file: bool, remove_data: bool) -> Task:
    """Delete a virtual machine; return the task doing it."""
    path = f"/vms/{vm_id or 'anonymous'}?deleteFile={_flag(delete_file)}&removeData={_flag(remove_data)}"
    return _fetch(tripper.delete_trip, path, Task)


def get_vm_list(tripper: RestAPITripper) -> VMPageResponse:
    """Return all virtual machines."""
    return _fetch(tripper.get_trip, "/vms", VMPageResponse)


def set_vm(tripper: RestAPITripper, vm_info: VirtualMachine) -> Task:
    """Update a virtual machine; return the task doing it."""
    return _fetch(tripper.put_trip, f"/vms/{vm_info.id}", Task, vm_info)


def create_vm_by_template(tripper: RestAPITripper, vm_spec: VirtualMachine, quick_clone: bool) -> Task:
    """Create a virtual machine from a template; return the task doing it."""
    path = f"/vms?action=createByTemplate&quickClone={_flag(quick_clone)}"
    return _fetch(tripper.post_trip, path, Task, vm_spec)


def import_vm(
    tripper: RestAPITripper,
    vm_spec: VirtualMachine,
    ova_file_path: str,
    host_uuid: str,
    rate_limit: int,
) -> Task:
    """Import a virtual machine from an OVA file; return the task doing it.

    A rate limit outside 20..100 is replaced by 40.
    """
    if rate_limit < 20 or rate_limit > 100:
        rate_limit = _DEFAULT_RATE_LIMIT
    path = f"/vms/ovfs?action=import&ovaFile={ova_file_path}&hostId={host_uuid}&rateLimit={rate_limit}"
    return _fetch(tripper.put_trip, path, Task, vm_spec)


def get_ova_config(
    tripper: RestAPITripper, ova_file_path: str, host_uuid: str, image_host_uuid: str
) -> VirtualMachine:
    """Return the virtual machine described by an OVA file."""
    path = f"/vms/ovfs?action=preimport&hostUuid={host_uuid}&filePath={ova_file_path}&imageHostId={image_host_uuid}"
    return _fetch(tripper.put_trip, path, VirtualMachine)


def get_vm_template_list(tripper: RestAPITripper) -> VMPageResponse:
    """Return all virtual machine templates."""
    return _fetch(tripper.get_trip, "/vmtemplates", VMPageResponse)


def get_vm_template_by_id(tripper: RestAPITripper, vmt_id: str) -> VirtualMachine:
    """Return a virtual machine template by its id."""
    return _fetch(tripper.get_trip, f"/vmtemplates/{vmt_id or 'anonymous'}", VirtualMachine)