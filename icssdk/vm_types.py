"""Virtual machine types and the devices attached to them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .common_types import PageReq, PageResponse
from .model import Model
from .volume_types import Volume

_OMIT = {"json": ",omitempty"}


@dataclass
class Disk(Model):
    id: str = field(default="", metadata=_OMIT)
    label: str = ""
    scsi_id: str = ""
    enabled: bool = False
    write_bps: int = 0
    read_bps: int = 0
    total_bps: int = 0
    total_iops: int = 0
    write_iops: int = 0
    read_iops: int = 0
    volume: Volume = field(default_factory=Volume)
    bus_model: str = ""
    usage: float = 0.0
    mon_read_iops: float = 0.0
    mon_write_iops: float = 0.0
    read_throughput: float = 0.0
    write_throughput: float = 0.0
    read_write_model: str = ""
    enable_native_io: bool = field(default=False, metadata={"json": "enableNativeIO"})
    enable_kernel_io: bool = field(default=False, metadata={"json": "enableKernelIO"})
    l2_cache_size: int = 0
    queue_num: int = 0


@dataclass
class Nic(Model):
    id: str = ""
    auto_generated: bool = False
    name: str = ""
    nolocal_name: str = ""
    inner_name: str = field(default="", metadata=_OMIT)
    dev_name: str = ""
    ip: str = field(default="", metadata=_OMIT)
    ipv6: str = field(default="", metadata=_OMIT)
    netmask: str = field(default="", metadata=_OMIT)
    gateway: str = field(default="", metadata=_OMIT)
    mac: str = ""
    model: str = ""
    device_id: str = ""
    device_name: str = ""
    device_type: str = ""
    switch_type: str = ""
    vswitch_id: str = ""
    uplink_rate: int = 0
    uplink_burst: int = 0
    downlink_rate: int = 0
    downlink_burst: int = 0
    downlink_queue: str = field(default="", metadata=_OMIT)
    enable: bool = False
    status: str = ""
    inbound_rate: float = 0.0
    outbound_rate: float = 0.0
    connect_status: bool = False
    vm_name: str = field(default="", metadata=_OMIT)
    vm_id: str = field(default="", metadata=_OMIT)
    vm_status: str = field(default="", metadata=_OMIT)
    vm_template: bool = False
    network_name: str = ""
    network_vlan: str = field(default="", metadata=_OMIT)
    vlan_range: Any = None
    network_id: str = ""
    network_type: Any = None
    another_network_type: str = ""
    host_ip: str = field(default="", metadata=_OMIT)
    host_status: str = field(default="", metadata=_OMIT)
    host_id: str = field(default="", metadata=_OMIT)
    direct_obj_name: str = field(default="", metadata=_OMIT)
    total_octets: float = 0.0
    total_dropped: float = 0.0
    total_packets: float = 0.0
    total_bytes: float = 0.0
    total_errors: float = 0.0
    write_octets: float = 0.0
    write_dropped: float = 0.0
    write_packets: float = 0.0
    write_bytes: float = 0.0
    write_errors: float = 0.0
    read_octets: float = 0.0
    read_dropped: float = 0.0
    read_packets: float = 0.0
    read_bytes: float = 0.0
    read_errors: float = 0.0
    security_groups: Any = None
    advanced_net_ip: Any = None
    port_id: Any = None
    sdn_vf_id: Any = field(default=None, metadata={"json": "sdnVFId"})
    openstack_id: Any = None
    bind_ip_enable: bool = False
    bind_ip: Any = None
    priority_enabled: bool = False
    net_priority: str = ""
    vm_type: str = ""
    system_vm_type: Any = None
    dhcp: bool = False
    dhcp_ip: Any = None
    used_dpdk: bool = False
    queues: int = 0
    speed: str = ""
    float_ip: str = ""
    nat_gateway_id: str = ""
    queue_length_set: bool = False
    send_queue_length: int = 0
    receive_queue_length: int = 0
    static_ip: bool = False
    user_ip: str = ""
    ipv4_primary_dns: str = field(default="", metadata={"json": "ipv4PrimaryDNS"})
    ipv4_second_dns: str = field(default="", metadata={"json": "ipv4SecondDNS"})
    ipv4_netmask: str = ""
    ipv4_gateway: str = ""
    tenant_id: str = ""


@dataclass
class Floppy(Model):
    path: str = ""
    data_store: Any = None
    vfd_type: str = ""


@dataclass
class Cdrom(Model):
    path: str = ""
    type: str = ""
    connected: bool = False
    start_connected: bool = False
    cifs_dto: Any = None
    data_store: Any = None


@dataclass
class GuestOSAuthInfo(Model):
    """Credentials and domain settings applied inside the guest."""

    user_name: str = ""
    user_pwd: str = ""
    domain: str = ""
    domain_ou: str = field(default="", metadata={"json": "domainOU"})
    domain_admin: str = ""
    domain_admin_pass: str = ""
    initialize_sid: bool = False
    scripts: Any = None


@dataclass
class GuestOsInfo(Model):
    """What the guest operating system supports."""

    model: str = ""
    socket_limit: int = 0
    support_cpu_hot_plug: bool = False
    support_cpu_hot_reduce: bool = False
    support_mem_hot_plug: bool = False
    support_mem_hot_reduce: bool = False
    support_disk_hot_plug: bool = False
    support_uefi_boot_mode: bool = False
    support_vnic_hot_plug: bool = False
    support_static_ip: bool = False


@dataclass
class CloudInit(Model):
    meta_data: str = field(default="", metadata={"json": "metadata"})
    user_data: str = field(default="", metadata={"json": "userdata"})
    data_source_type: str = ""


@dataclass
class BootDevice(Model):
    id: str = ""
    order: int = 0
    boot_device_type: str = ""
    boot_device_id: str = ""
    config_id: str = ""


@dataclass
class GraphicsCard(Model):
    graphics_card_model: str = ""
    graphics_card_memory: int = 0
    screen_numbers: int = 0


@dataclass
class CdpInfo(Model):
    """Continuous data protection settings."""

    cdp_backup_datastore_id: str = ""
    backup_data_store_name: str = ""
    start_time: str = ""
    end_time: str = ""
    enable_cdp: bool = field(default=False, metadata={"json": "enableCDP"})
    cdp_avg_write_mbps: int = field(default=0, metadata={"json": "cdpAvgWriteMBps"})
    cdp_remain_times: int = 0
    cdp_log_space_size: int = 0
    cdp_log_space_size_in_byte: int = 0
    interval_time: int = 0


@dataclass
class VirtualMachine(Model):
    id: str = ""
    custom_vm_id: str = ""
    name: str = ""
    power_state: str = field(default="", metadata={"json": "state"})
    status: str = ""
    host_id: str = ""
    host_name: str = ""
    host_ip: str = ""
    host_status: str = ""
    host_memory: float = 0.0
    data_center_id: str = ""
    ha_enabled: bool = False
    router_flag: bool = False
    migratable: bool = False
    host_binded: bool = False
    tools_installed: bool = False
    tools_version: str = ""
    tools_type: str = ""
    tools_version_status: str = ""
    tools_running_status: str = ""
    tools_need_update: bool = False
    description: str = ""
    ha_max_limit: int = 0
    template: bool = False
    initialized: bool = False
    guestos_label: str = ""
    guestos_type: str = ""
    guest_os_info: GuestOsInfo = field(default_factory=GuestOsInfo)
    inner_name: str = ""
    uuid: str = ""
    max_memory: int = 0
    max_memory_in_byte: int = 0
    memory: int = 0
    memory_in_byte: int = 0
    memory_usage: float = 0.0
    mem_hotplug_enabled: bool = False
    mem_hotplug_numa_enabled: bool = False
    enable_huge_mem_page: bool = False
    trans_priority: Any = None
    cpu_num: int = 0
    cpu_socket: int = 0
    cpu_core: int = 0
    cpu_usage: float = 0.0
    max_cpu_num: int = 0
    cpu_hotplug_enabled: bool = False
    cpu_model_type: str = ""
    cpu_model_enabled: bool = False
    running_time: float = 0.0
    running_time_in_seconds: int = 0
    shut_down_time: float = 0.0
    status_changed_reason: str = ""
    boot: str = ""
    boot_mode: str = ""
    nvram_file_path: str = field(default="", metadata=_OMIT)
    pflash_file_path: str = field(default="", metadata=_OMIT)
    bios_serial_number: str = ""
    boot_devices: list[BootDevice] = field(default_factory=list)
    splash_time: int = 0
    storage_priority: int = 0
    usb: Any = field(default=None, metadata=_OMIT)
    usbs: list[Any] = field(default_factory=list, metadata=_OMIT)
    cdrom: Cdrom = field(default_factory=Cdrom, metadata=_OMIT)
    script_location: Any = None
    cloud_init: CloudInit = field(default_factory=CloudInit, metadata=_OMIT)
    floppy: Any = field(default=None, metadata=_OMIT)
    disks: list[Disk] = field(default_factory=list)
    del_volumes: Any = None
    nics: list[Nic] = field(default_factory=list)
    gpus: list[Any] = field(default_factory=list, metadata=_OMIT)
    vm_pcis: list[Any] = field(default_factory=list)
    config_location: str = ""
    hotplug_enabled: bool = False
    vnc_port: int = 0
    vnc_passwd: str = ""
    vnc_share_policy: str = ""
    cpu_bind_type: str = ""
    vcpu_pin: str = ""
    vcpu_pins: list[str] = field(default_factory=list)
    cpu_shares: int = 0
    panick_policy: str = ""
    data_store_id: str = ""
    sdsdomain_id: str = ""
    clock_model: str = ""
    cpu_limit: int = 0
    mem_shares: int = 0
    cpu_reservation: int = 0
    mem_reservation: int = 0
    mem_reservation_in_byte: int = 0
    last_backup: Any = None
    vm_type: str = ""
    system_vm_type: Any = None
    mem_balloon_enabled: bool = False
    completed: bool = False
    graphics_card_model: str = ""
    graphics_card_memory: int = 0
    graphics_cards: list[GraphicsCard] = field(default_factory=list)
    vm_host_name: str = ""
    disk_total_size: float = 0.0
    disk_total_size_in_byte: int = 0
    disk_used_size: float = 0.0
    disk_usage: float = 0.0
    tags: Any = None
    start_priority: str = ""
    owner_name: str = ""
    version: str = ""
    enable_replicate: bool = False
    replication_datastore_id: str = ""
    replication_datastore_name: str = ""
    recovery_flag: bool = False
    spice_usb_num: int = 0
    cdp_info: CdpInfo = field(default_factory=CdpInfo)
    guest_os_auth_info: GuestOSAuthInfo = field(
        default_factory=GuestOSAuthInfo, metadata={"json": "guestOSAuthInfo"}
    )
    aware_numa_enabled: bool = False
    drx_enabled: bool = False
    recyled: bool = False
    hidden: bool = False
    delete_time: str = ""
    destoryed_time: str = ""
    secret_level: str = ""
    source_from: str = ""
    source_from_id: str = ""
    source_from_resource_name: str = ""
    vm_data_store_id: str = ""
    encrypt_flag: bool = False
    secret_key_id: str = ""
    cpu_arch_type: str = ""
    cpu_vendor: str = field(default="", metadata=_OMIT)
    support_quiesce: bool = False
    net_ha_enabled: bool = False
    vm_data_store_name: str = ""
    protection_group_id: str = field(default="", metadata=_OMIT)
    protection_group_name: str = field(default="", metadata=_OMIT)
    local_website_id: str = ""
    sys_init_result: Any = None
    create_time: str = ""
    disk_kbps: float = 0.0
    disk_iops: float = 0.0
    update_time: str = ""
    add_to_group_available: bool = False
    add_to_group_tip: Any = None
    add_to_group_time: Any = None
    recovery_start_interval: int = 0
    recovery_start_sequence: int = 0
    serial_port_devices: Any = None
    watch_dogs: list[Any] = field(default_factory=list)
    ups_central: bool = False
    enable_integrity_check: bool = False
    identification_code: str = ""
    auto_sync_time_enabled: bool = False
    enable_anti_virus: bool = False
    host_antivirus_status: str = field(default="", metadata=_OMIT)
    display_node_version: str = ""
    vapp_id: str = ""
    vmfpga_devs: list[Any] = field(default_factory=list)


@dataclass
class VMPageResponse(PageResponse):
    items: list[VirtualMachine] = field(default_factory=list)


@dataclass
class VMPageReq(PageReq):
    """Paging parameters for listing virtual machines."""