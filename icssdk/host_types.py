"""Host types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .common_types import Tag
from .model import Model

_OMIT = {"json": ",omitempty"}


@dataclass
class Host(Model):
    id: str = ""
    ip: str = ""
    switch_uplink_port_dto: Any = None
    uplink_topo_dto: Any = None
    pnics: Any = None
    disks: Any = None
    name: str = ""
    host_name: str = ""
    node_version: str = ""
    display_node_version: str = ""
    display_hotfix_version: str = ""
    password: str = ""
    data_center_id: str = ""
    data_center_name: str = ""
    cluster_name: str = ""
    cluster_id: str = ""
    status: str = ""
    cpu_socket: int = 0
    cpu_core_per_socket: int = 0
    cpu_thread_per_core: int = 0
    logic_cpu_num: int = 0
    logical_processor: int = 0
    cpu_frequency: float = 0.0
    cpu_usage: float = 0.0
    cpu_total_hz: float = 0.0
    free_cpu: float = 0.0
    used_cpu: float = 0.0
    total_mem: float = 0.0
    logic_total_mem: float = 0.0
    total_mem_in_byte: int = field(default=0, metadata=_OMIT)
    logic_total_mem_in_byte: int = field(default=0, metadata=_OMIT)
    memory_usage: float = 0.0
    free_memory: float = 0.0
    used_memory: float = 0.0
    free_memory_in_byte: int = field(default=0, metadata=_OMIT)
    used_memory_in_byte: int = field(default=0, metadata=_OMIT)
    logic_used_memory: float = 0.0
    logic_free_memory: float = 0.0
    logic_used_memory_in_byte: int = 0
    logic_free_memory_in_byte: int = field(default=0, metadata=_OMIT)
    pnic_num: int = 0
    normal_run_time: float = 0.0
    model: str = ""
    cpu_type: str = ""
    vt_degree: float = 0.0
    power_state: str = field(default="", metadata={"json": "powerstate"})
    host_bmc_dto: Any = None
    tags: list[Tag] = field(default_factory=list)
    mount_path: str = ""
    mon_mount_state: str = ""
    cpu_model: list[str] = field(default_factory=list)
    network_dtos: Any = None
    port_ip: str = ""
    monstatus: bool = False
    host_iqn: str = ""
    vxlan_port_dto: Any = None
    sdn_up_links: Any = None
    all_p_nics_count: int = 0
    available_p_nics_count: int = 0
    cfs_domain_status: str = ""
    serial_number: str = ""
    manufacturer: str = ""
    indicator_status: str = ""
    entry_temperature: str = ""
    multicast_enabled: bool = False
    broadcast_limit_enabled: bool = False
    pcies: Any = None
    vgpu_enable: bool = False
    special_failover: bool = False
    vswitch_dtos: Any = None
    hotfix_version: str = ""
    vm_mig_band_width: str = ""
    vm_mig_band_width_flag: bool = False
    dpdk_enabled: bool = False
    huge_page_total: float = 0.0
    huge_page_used: float = 0.0
    huge_page_free: float = 0.0
    huge_page_total_in_byte: int = field(default=0, metadata=_OMIT)
    huge_page_used_in_byte: int = 0
    huge_page_free_in_byte: int = 0
    storage_usage: float = 0.0
    node_form: str = ""
    cpu_arch_type: str = ""
    cpu_vendor: str = ""
    log_partition_size: int = 0
    root_partition_size: int = 0
    cpuflags: str = ""
    allocated_vcpu_num: int = 0
    allocated_memory: int = 0
    allocated_memory_in_byte: int = 0
    kms_configured: bool = False
    datastores: Any = None
    scvm_allowed: bool = False
    used_v_cpus: int = 0
    container_status: str = ""
    antivirus_status: str = ""
    total_local_datastore_capacity_in_byte: int = 0
    used_local_datastore_capacity_in_byte: int = 0
    local_data_store_usage: float = 0.0
    local_data_store_multiplex_ratio: float = 0.0
    ups: Any = None
    sds_domain_id: str = field(default="", metadata=_OMIT)
    host_total_mem_in_mb: float = field(default=0.0, metadata={"json": "hostTotalMemInMB,omitempty"})
    host_total_mem_in_byte: int = 0
    cpu_total_ratio: float = field(default=0.0, metadata=_OMIT)
    mem_total_ratio: float = field(default=0.0, metadata=_OMIT)
    huge_page_enabled: bool = field(default=False, metadata=_OMIT)
    huge_page_actived: bool = field(default=False, metadata=_OMIT)
    total_data_store_capacity_in_byte: int = 0
    used_data_store_capacity_in_byte: int = 0
    data_store_usage: float = 0.0


@dataclass
class HostPageResponse(Model):
    total_page: int = 0
    current_page: int = 0
    total_size: int = 0
    items: list[Host] = field(default_factory=list)


@dataclass
class HostHealthInfo(Model):
    id: str = ""
    ip: str = ""
    score: float = 0.0
    cpu_score: float = 0.0
    cpu_perf: float = 0.0
    cpu_used: float = 0.0
    cpu_total: float = 0.0
    mem_score: float = 0.0
    mem_perf: float = 0.0
    mem_used: float = 0.0
    mem_total: float = 0.0
    storage_score: float = 0.0
    storage_perf: float = 0.0
    storage_used: float = 0.0
    storage_total: float = 0.0
    network_score: float = 0.0
    network_perf: float = 0.0
    network_used: float = 0.0
    network_total: float = 0.0