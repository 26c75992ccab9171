"""Storage and image file calls."""

from __future__ import annotations

from .api import RestAPITripper, _fetch
from .storage_types import ImageFilePageResponse, Storage, StoragePageReq, StoragePageResponse


def get_storage_page_list(tripper: RestAPITripper, req: StoragePageReq | None) -> StoragePageResponse:
    """Return one page of storages."""
    return _fetch(tripper.get_trip, "/storages", StoragePageResponse, req)


def get_storage_info(tripper: RestAPITripper, storage_id: str) -> Storage:
    """Return a storage by its id."""
    return _fetch(tripper.get_trip, f"/storages/{storage_id or 'anonymous'}", Storage)


def get_storage_list(tripper: RestAPITripper) -> StoragePageResponse:
    """Return all storages."""
    return _fetch(tripper.get_trip, "/storages", StoragePageResponse)


def get_image_storage_list(tripper: RestAPITripper) -> StoragePageResponse:
    """Return the storages that hold images."""
    return _fetch(tripper.get_trip, "/storages?extype=IMAGE_STORAGE", StoragePageResponse)


def get_image_file_list(tripper: RestAPITripper, storage_id: str) -> ImageFilePageResponse:
    """Return the image files on a storage."""
    return _fetch(tripper.get_trip, f"/storages/{storage_id}/files", ImageFilePageResponse)