"""Volume types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .model import Model

_OMIT = {"json": ",omitempty"}


@dataclass
class RelatedVmInfo(Model):
    id: str = ""
    name: str = ""
    text: str = ""
    state: str = ""


@dataclass
class Volume(Model):
    id: str = ""
    uuid: str = ""
    size: float = 0.0
    size_in_byte: int = 0
    real_size: float = 0.0
    real_size_in_byte: float = 0.0
    name: str = ""
    file_name: str = ""
    offset: int = 0
    shared: bool = False
    delete_model: str = ""
    volume_policy: str = ""
    format: str = ""
    block_device_id: str = field(default="", metadata=_OMIT)
    disk_type: str = field(default="", metadata=_OMIT)
    data_store_id: str = ""
    data_store_name: str = ""
    data_store_size: float = 0.0
    data_store_size_in_byte: int = field(default=0, metadata=_OMIT)
    free_storage: float = 0.0
    data_store_type: str = ""
    data_store_replicate: int = 0
    vm_name: str = field(default="", metadata=_OMIT)
    vm_status: str = field(default="", metadata=_OMIT)
    type: str = field(default="", metadata=_OMIT)
    description: str = field(default="", metadata=_OMIT)
    bootable: bool = False
    volume_status: str = ""
    mounted_host_ids: list[str] = field(default_factory=list)
    md5: str = field(default="", metadata=_OMIT)
    data_size: int = 0
    open_stack_id: str = field(default="", metadata=_OMIT)
    vv_source_dto: Any = None
    format_disk: bool = False
    to_be_converted: bool = False
    related_vms: list[RelatedVmInfo] = field(default_factory=list)
    xactive_data_store_id: str = ""
    cluster_size: int = 0
    scsi_id: str = ""
    secondary_uuid: str = ""
    usage: str = ""
    secondary_volumes: Any = None
    mount_dir: Any = None
    open_mode: Any = None
    encrypted: bool = False
    datastore_strategy: Any = None
    replicate: int = 0
    work_mode: Any = None


@dataclass
class VolumeReq(Model):
    """Request body for creating a volume."""

    name: str = ""
    size: str = ""
    data_store_type: str = ""
    data_store_id: str = ""
    volume_policy: str = ""
    description: str = ""
    bootable: bool = False
    shared: bool = False
    format: str = ""
    usage: str = ""


@dataclass
class VolumeListRsp(Model):
    items: list[Volume] = field(default_factory=list)