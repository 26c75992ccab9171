"""Datacenter types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .common_types import PageResponse
from .model import Model

_OMIT = {"json": ",omitempty"}


@dataclass
class Datacenter(Model):
    id: str = ""
    name: str = ""
    nfs_path: str = ""
    nfs_version: str = field(default="", metadata=_OMIT)
    type: str = ""
    description: str = ""
    host_num: int = 0
    vm_num: int = 0
    pod_num: int = 0
    cluster_num: int = 0
    cfs_domain_num: int = 0
    sds_domain_num: int = 0
    storage_num: int = 0
    image_iso_num: int = 0
    net_num: int = 0
    neutron_net_num: int = 0
    cpu_capacity: str = ""
    cpu_available: str = ""
    cpu_used: str = ""
    cpu_utilization: str = ""
    cpu_socket_num: int = 0
    cpu_core_num: int = 0
    cpu_num: int = 0
    memory_capacity: str = ""
    memory_available: str = ""
    memory_used_in_byte: int = field(default=0, metadata=_OMIT)
    memory_capacity_in_byte: int = field(default=0, metadata=_OMIT)
    memory_available_in_byte: int = field(default=0, metadata=_OMIT)
    memory_used: str = ""
    memory_utilization: str = ""
    storage_capacity: str = ""
    storage_available: str = ""
    storage_used: str = ""
    storage_utilization: str = ""
    storage_capacity_in_byte: int = field(default=0, metadata=_OMIT)
    storage_available_in_byte: int = field(default=0, metadata=_OMIT)
    storage_used_in_byte: int = field(default=0, metadata=_OMIT)
    datastore_num: int = 0
    local_store_num: int = field(default=0, metadata={"json": "localstoreNum"})
    cfs_store_num: int = field(default=0, metadata={"json": "cfsstoreNum"})
    raw_store_num: int = field(default=0, metadata={"json": "rawstoreNum"})
    nfs_store_num: int = field(default=0, metadata={"json": "nfsstoreNum"})
    xactive_store_num: int = field(default=0, metadata={"json": "xactivestoreNum"})
    network_type: str = ""
    vswitch_dtos: Any = None
    sdn_network_dtos: list[Any] = field(default_factory=list)
    sdn_init: bool = False
    sdn_speed_up: bool = False
    sdn_config_dto: Any = None
    cpu_arch_type: str = ""
    vm_total_cpu: int = field(default=0, metadata=_OMIT)
    vm_total_mem_in_mb: int = field(default=0, metadata={"json": "vmTotalMemInMB,omitempty"})
    host_total_mem_in_mb: float = field(default=0.0, metadata={"json": "hostTotalMemInMB,omitempty"})
    vm_total_mem_in_byte: int = field(default=0, metadata=_OMIT)
    host_total_mem_in_byte: int = field(default=0, metadata=_OMIT)
    cpu_total_ratio: float = field(default=0.0, metadata=_OMIT)
    mem_total_ratio: float = field(default=0.0, metadata=_OMIT)
    virtual_volume_storage_in_gb: float = field(
        default=0.0, metadata={"json": "virtualVolumeStorageInGB,omitempty"}
    )
    host_total_storage_in_gb: float = field(
        default=0.0, metadata={"json": "hostTotalStorageInGB,omitempty"}
    )
    virtual_volume_storage_in_byte: int = field(default=0, metadata=_OMIT)
    host_total_storage_in_byte: int = field(default=0, metadata=_OMIT)
    storage_ratio: float = field(default=0.0, metadata=_OMIT)


@dataclass
class DatacenterPageResponse(PageResponse):
    items: list[Datacenter] = field(default_factory=list)