"""Tag calls."""

from __future__ import annotations

from .api import RestAPITripper, _fetch, _fetch_list
from .common_types import Tag, TreeItem


def get_tag_by_id(tripper: RestAPITripper, tag_id: str) -> Tag:
    """Return a tag by its id."""
    return _fetch(tripper.get_trip, f"/tags/{tag_id or 'anonymous'}", Tag)


def list_attached_tags(tripper: RestAPITripper, target_type: str, ref: str) -> list[TreeItem]:
    """Return the tags bound to a resource, as a tree."""
    path = f"/tags/bindings?format=tree&tagSourceType={target_type}&sourceIds={ref}"
    return _fetch_list(tripper.get_trip, path, TreeItem)