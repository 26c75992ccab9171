"""Virtual application (vApp) types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .model import Model

_OMIT = {"json": ",omitempty"}


@dataclass
class Vapp(Model):
    id: str = ""
    data_center_id: str = ""
    name: str = ""
    cpu_count: str = field(default="", metadata={"json": "cpucount"})
    memory: str = ""
    memory_in_byte: int = field(default=0, metadata=_OMIT)
    active_vm_count: str = field(default="", metadata={"json": "activevircount"})
    vm_count: str = field(default="", metadata={"json": "vircount"})
    state: str = ""
    health: str = field(default="", metadata=_OMIT)
    product: str = field(default="", metadata=_OMIT)
    version: str = field(default="", metadata=_OMIT)
    supplier: str = field(default="", metadata=_OMIT)
    can_power_on: bool = False
    can_power_off: bool = False
    can_restart: bool = False
    data_center_name: str = ""
    status_count: dict[str, int] = field(default_factory=dict)
    # Kept locally only; never sent to or read from the service.
    description: str = field(default="", metadata={"json": "-"})
    vapp_type: Any = None
    node_count: Any = None
    vms_to_add: Any = field(default=None, metadata=_OMIT)


@dataclass
class VappListRsp(Model):
    items: list[Vapp] = field(default_factory=list)


@dataclass
class VappCreateReq(Model):
    name: str = ""
    description: str = ""
    data_center_id: str = ""
    data_center_name: str = field(default="", metadata={"json": "dataCenterNamei,omitempty"})