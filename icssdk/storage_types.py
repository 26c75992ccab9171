"""Storage and image file types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .common_types import PageReq, PageResponse
from .model import Model

_OMIT = {"json": ",omitempty"}


@dataclass
class DataCenterOrHost(Model):
    """Where a datastore lives: a datacenter or a single host."""

    data_center_or_host: str = ""
    data_center_name: str = field(default="", metadata=_OMIT)
    host_name: str = field(default="", metadata=_OMIT)
    status: str = field(default="", metadata=_OMIT)


@dataclass
class Storage(Model):
    data_store_type: str = ""
    id: str = ""
    name: str = ""
    mount_path: str = ""
    capacity: float = 0.0
    capacity_in_byte: int = field(default=0, metadata=_OMIT)
    used_capacity: float = 0.0
    used_capacity_in_byte: int = field(default=0, metadata=_OMIT)
    avail_capacity: float = 0.0
    avail_capacity_in_byte: int = field(default=0, metadata=_OMIT)
    data_center_id: str = ""
    host_id: str = field(default="", metadata=_OMIT)
    mount_status: str = field(default="", metadata=_OMIT)
    host_ip: str = field(default="", metadata=_OMIT)
    uuid: str = ""
    absolute_path: str = field(default="", metadata=_OMIT)
    data_center_name: str = field(default="", metadata=_OMIT)
    data_center_or_host_dto: DataCenterOrHost = field(default_factory=DataCenterOrHost)
    block_device_dto: Any = field(default=None, metadata=_OMIT)
    xactive_store_name: str = field(default="", metadata=_OMIT)
    xactive_store_id: str = field(default="", metadata=_OMIT)
    data_center_dto: Any = field(default=None, metadata=_OMIT)
    host_numbers: int = 0
    pod_host_numbers: int = 0
    vm_numbers: int = 0
    volumes_numbers: int = 0
    vm_template_numbers: int = 0
    pod_numbers: int = 0
    tags: Any = field(default=None, metadata=_OMIT)
    max_slots: int = 0
    creating: bool = False
    storage_back_up: bool = False
    extension_type: str = ""
    can_be_image_storage: bool = False
    multiplex_ratio: float = 0.0
    oplimit: bool = False
    maxop: int = 0
    mount_state_count: Any = None
    datastore_role: Any = None
    can_create_xactive: bool = False
    accelerator: str = ""
    iscsi_server_id: str = ""
    can_umount: bool = False
    iops: float = 0.0
    kbps: float = 0.0
    max_read_rate: int = 0
    max_write_rate: int = 0
    depth_read_rate: int = 0
    depth_write_rate: int = 0
    read_bandwidth: Any = None
    write_bandwidth: Any = None
    max_read_delay: float = 0.0
    max_write_delay: float = 0.0
    depth_read_delay: float = 0.0
    depth_write_delay: float = 0.0
    block_device_uuid: str = ""
    op_host_ip: str = ""
    is_mount: bool = False
    detect_io_rate: Any = field(default=None, metadata={"json": "detectIORate"})
    host_dto: Any = None
    scvm_on: bool = False
    alloc_policy: str = field(default="", metadata=_OMIT)


@dataclass
class StoragePageResponse(PageResponse):
    items: list[Storage] = field(default_factory=list)


@dataclass
class StoragePageReq(PageReq):
    """Paging parameters for listing storages."""


@dataclass
class ImageFileInfo(Model):
    name: str = ""
    source_type: str = ""
    format: str = ""
    file_type: str = ""
    date: str = ""
    path: str = ""
    ftp_server: str = ""
    data_store_id: str = ""
    data_store_name: str = ""
    server_id: str = ""
    md5: str = ""
    file_size_in_byte: int = 0
    real_size_in_byte: int = 0


@dataclass
class ImageFilePageResponse(PageResponse):
    items: list[ImageFileInfo] = field(default_factory=list)