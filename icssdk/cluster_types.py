"""Cluster types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .common_types import Tag
from .datacenter_types import Datacenter
from .model import Model

_OMIT = {"json": ",omitempty"}


@dataclass
class ClusterDrs(Model):
    """Dynamic resource scheduling settings of a cluster."""

    id: str = field(default="", metadata=_OMIT)
    cluster_id: str = field(default="", metadata={"json": "clusterID,omitempty"})
    drs_enabled: bool = False
    cpu_threshold: int = 0
    memory_threshold: int = 0
    vm_migration_count: int = 0
    rel_migrate_enabled: bool = False
    dpm_enabled: bool = False
    cpu_low_threshold: int = 0
    mem_low_threshold: int = 0
    min_reserve_host: int = 0


@dataclass
class ClusterHA(Model):
    """High availability settings of a cluster."""

    id: str = field(default="", metadata=_OMIT)
    cluster_id: str = field(default="", metadata={"json": "clusterID,omitempty"})
    ha_enabled: bool = False
    ha_max_limit: int = 0
    access_control_enabled: bool = False
    access_control_strategy: str = field(default="", metadata=_OMIT)
    failover_hosts: list[Any] = field(default_factory=list)
    failover_host_ids: list[str] = field(default_factory=list)
    ha_priority: str = field(default="", metadata=_OMIT)
    net_ha_enabled: bool = False
    net_tolerance: str = ""
    net_process_strategy: str = ""
    container_ha_enabled: bool = False
    cpu_reserve: int = 0
    memory_reserve: int = 0
    used_cpu: float = 0.0
    total_cpu: float = 0.0
    used_memory: float = 0.0
    total_memory: int = 0
    used_memory_in_byte: int = field(default=0, metadata=_OMIT)
    total_memory_in_byte: int = field(default=0, metadata=_OMIT)
    cdp_process_strategy: str = field(default="", metadata=_OMIT)


@dataclass
class Cluster(Model):
    name: str = ""
    id: str = ""
    host_num: int = 0
    free_cpu: str = ""
    used_cpu: str = ""
    total_cpu: str = ""
    cpu_core_num: int = 0
    cpu_socket_num: int = 0
    cpu_num: int = 0
    free_memory: str = ""
    used_memory: str = ""
    total_memory: str = ""
    free_memory_in_byte: int = field(default=0, metadata=_OMIT)
    used_memory_in_byte: int = field(default=0, metadata=_OMIT)
    total_memory_in_byte: int = field(default=0, metadata=_OMIT)
    free_storage: str = field(default="", metadata=_OMIT)
    used_storage: str = field(default="", metadata=_OMIT)
    total_storage: str = field(default="", metadata=_OMIT)
    vcpu_used: int = 0
    drs: ClusterDrs = field(default_factory=ClusterDrs)
    ha: ClusterHA = field(default_factory=ClusterHA)
    data_center_dto: Datacenter = field(default_factory=Datacenter)
    host_ids: list[str] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)
    cpu_free_percent: float = 0.0
    mem_free_percent: float = 0.0
    vm_total_cpu: int = field(default=0, metadata=_OMIT)
    vm_total_mem_in_mb: int = field(default=0, metadata={"json": "vmTotalMemInMB,omitempty"})
    host_total_mem_in_mb: float = field(default=0.0, metadata={"json": "hostTotalMemInMB,omitempty"})
    vm_total_mem_in_byte: int = field(default=0, metadata=_OMIT)
    host_total_mem_in_byte: int = field(default=0, metadata=_OMIT)
    cpu_total_ratio: float = field(default=0.0, metadata=_OMIT)
    mem_total_ratio: float = field(default=0.0, metadata=_OMIT)
    total_storage_in_byte: int = field(default=0, metadata=_OMIT)
    used_storage_in_byte: int = field(default=0, metadata=_OMIT)
    free_storage_in_byte: int = field(default=0, metadata=_OMIT)
    storage_usage: float = field(default=0.0, metadata=_OMIT)
    virtual_volume_storage_in_byte: int = field(default=0, metadata=_OMIT)
    host_total_storage_in_byte: int = field(default=0, metadata=_OMIT)
    storage_ratio: float = field(default=0.0, metadata=_OMIT)
    cpu_usage: float = field(default=0.0, metadata=_OMIT)
    memory_usage: float = field(default=0.0, metadata=_OMIT)
    cpu_arch_type: str = field(default="", metadata=_OMIT)
    vm_num: int = 0
    pod_num: int = 0


@dataclass
class ClusterListRsp(Model):
    items: list[Cluster] = field(default_factory=list)