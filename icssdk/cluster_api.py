"""Cluster calls."""

from __future__ import annotations

from .api import RestAPITripper, _fetch
from .cluster_types import Cluster, ClusterListRsp


def get_cluster_list(tripper: RestAPITripper) -> list[Cluster]:
    """Return all clusters."""
    return _fetch(tripper.get_trip, "/clusters", ClusterListRsp).items