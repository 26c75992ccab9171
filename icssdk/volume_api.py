"""Volume calls."""

from __future__ import annotations

from .api import RestAPITripper, _fetch
from .common_types import Task
from .volume_types import Volume, VolumeListRsp, VolumeReq


def create_volume(tripper: RestAPITripper, volume: VolumeReq) -> Task:
    """Create a volume; return the task doing it."""
    return _fetch(tripper.post_trip, "/volumes", Task, volume)


def delete_volume(tripper: RestAPITripper, volume_id: str, delete_volume: bool) -> Task:
    """Delete a volume, removing its data if asked; return the task doing it."""
    remove = "true" if delete_volume else "false"
    return _fetch(tripper.delete_trip, f"/volumes/{volume_id}?removeData={remove}", Task)


def set_volume(tripper: RestAPITripper, volume_id: str, volume: Volume) -> Task:
    """Update a volume; return the task doing it."""
    return _fetch(tripper.put_trip, f"/volumes/{volume_id}", Task, volume)


def get_volume_info_by_id(tripper: RestAPITripper, volume_id: str) -> Volume:
    """Return a volume by its id."""
    return _fetch(tripper.get_trip, f"/volumes/{volume_id or 'anonymous'}", Volume)


def get_volumes_in_datastore(tripper: RestAPITripper, datastore_id: str) -> VolumeListRsp:
    """Return the volumes on a datastore."""
    path = f"/storages/{datastore_id or 'anonymous'}/volumes"
    return _fetch(tripper.get_trip, path, VolumeListRsp)