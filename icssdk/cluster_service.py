"""Cluster service."""

from __future__ import annotations

from dataclasses import dataclass

from .client import Client
from .cluster_api import get_cluster_list
from .cluster_types import Cluster
from .rest_service import RestAPI


@dataclass
class ClusterService(RestAPI):
    """Looks up clusters."""

    def get_cluster_list(self) -> list[Cluster]:
        """Return all clusters."""
        return get_cluster_list(self.tripper)

    def get_cluster_by_name(self, name: str) -> Cluster:
        """Return the first cluster with this name; raise LookupError if none."""
        for cluster in get_cluster_list(self.tripper):
            if cluster.name == name:
                return cluster
        raise LookupError(f"Cluster not found by name {name}")


def new_cluster_service(client: Client) -> ClusterService:
    """Create a cluster service over a client."""
    return ClusterService(client)