"""Network, virtual switch and SDN network types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .datacenter_types import Datacenter
from .host_types import Host
from .model import Model

_OMIT = {"json": ",omitempty"}


@dataclass
class Switch(Model):
    """A virtual switch."""

    id: str = ""
    name: str = ""
    resource_id: str = ""
    controller_ip: str = field(default="", metadata={"json": "controllerIP"})
    data_center_dto: Datacenter = field(default_factory=Datacenter)
    host_dtos: list[Host] = field(default_factory=list)
    switch_type: str = ""
    app_type: str = ""
    description: str = ""
    network_dtos: Any = None
    sdn_network_dtos: Any = None
    vm_dtos: Any = None
    host_num: int = 0
    pnic_num: int = 0
    network_num: int = 0
    vm_num: int = 0
    prod_num: int = 0
    max_vfs: int = field(default=0, metadata={"json": "maxvfs"})
    third_party_sdn: bool = field(default=False, metadata={"json": "thirdPartySDN"})
    hierarchy: bool = False
    connect_storage: bool = False
    connect_manage: bool = False
    connect_switches: Any = None
    dhcp_protection: bool = False
    neutron_name: Any = None
    neutron_password: Any = None
    connect_scvm: bool = False
    switch_uplink_type: str = ""
    computer_net_num: int = 0
    data_net_num: int = 0
    migrate_net_num: int = 0
    vm_mig_band_width: str = ""
    enable_dpdk: bool = False
    sflow_status: bool = False
    netflow_status: bool = False
    multicast_status: bool = False
    mirror_status: bool = False
    br_limit_status: bool = False
    hidden: bool = False
    network_topoly: bool = False
    arbitrative_ip: str = ""
    hb_auto_create: bool = False
    enable_fcoe: bool = False
    enable_sc: bool = False
    enable_trust: bool = False
    mtu: int = 0
    connect_in_cloud_os: bool = False
    iam_server_dto: Any = None


@dataclass
class Network(Model):
    id: str = ""
    name: str = ""
    resource_id: str = ""
    vlan: int = 0
    vlan_flag: bool = False
    mtu: int = 0
    type: str = ""
    vswitch_dto: Switch = field(default_factory=Switch)
    pnic_dto: Any = None
    port_dtos: list[Any] = field(default_factory=list)
    vm_dtos: Any = None
    vnic_dtos: Any = None
    vm_count: int = field(default=0, metadata={"json": "vmcount"})
    vnic_count: int = field(default=0, metadata={"json": "vniccount"})
    connect_mode: str = ""
    description: str = ""
    uplink_rate: int = 0
    uplink_burst: int = 0
    downlink_rate: int = 0
    downlink_burst: int = 0
    qos_enabled: bool = False
    data_service_type: Any = None
    user_vlan: Any = None
    tpid_type: Any = None
    permit_del: bool = False
    cidr: str = ""
    cidr_type: int = 0
    gateway: str = ""
    dhcp_enabled: bool = False
    gateway_enabled: bool = False
    dns: str = ""
    data_center_dto: Any = None
    network_topoly: bool = False
    use_types: Any = None
    start_ip: str = ""
    end_ip: str = ""
    pools: list[Any] = field(default_factory=list)
    used_by_hb_link: bool = False


@dataclass
class NetworkPageResponse(Model):
    total_page: int = 0
    current_page: int = 0
    total_size: int = 0
    items: list[Network] = field(default_factory=list)


@dataclass
class SubnetPool(Model):
    """An address range handed out by a subnet."""

    start: str = ""
    end: str = ""


@dataclass
class SdnSubnet(Model):
    id: str = ""
    name: str = ""
    cidr: str = ""
    enable_dhcp: bool = field(default=False, metadata={"json": "enableDHCP"})
    gateway: str = ""
    router_id: str = field(default="", metadata=_OMIT)
    router_name: str = field(default="", metadata=_OMIT)
    subnet_id: str = ""
    subnet_name: str = ""
    pools: list[SubnetPool] = field(default_factory=list)
    network_topoly: bool = False


@dataclass
class SdnNetwork(Model):
    id: str = ""
    name: str = ""
    data_center_dto: Datacenter = field(default_factory=Datacenter)
    subnet_keys: list[SdnSubnet] = field(default_factory=list)
    status: str = ""
    router_external: bool = False
    network_topoly: bool = False
    provider_seg_id: str = field(default="", metadata={"json": "providerSegID"})
    network_type: str = ""
    provider_phy_net: str = ""
    subnet_dto: Any = None
    subnet_count: int = 0
    port_count: int = 0
    vswitch_id: str = field(default="", metadata=_OMIT)
    type: str = ""
    router_dtos: Any = None
    firewall_dto: Any = None
    used_ip: int = 0
    total_ip: int = 0
    miredirect_status: bool = False
    multicast_status: bool = False
    port_forwarding_cnt: int = 0
    l2_gateway_status: bool = False
    qos_enabled: bool = False
    uplink_rate: int = 0
    downlink_rate: int = 0


@dataclass
class SdnNetworkPageResponse(Model):
    total_page: int = 0
    current_page: int = 0
    total_size: int = 0
    items: list[SdnNetwork] = field(default_factory=list)