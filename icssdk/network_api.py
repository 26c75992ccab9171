"""Network calls."""

from __future__ import annotations

from .api import RestAPITripper, _fetch
from .network_types import Network, NetworkPageResponse, SdnNetwork, SdnNetworkPageResponse


def get_network_list(tripper: RestAPITripper) -> list[Network]:
    """Return all networks."""
    return _fetch(tripper.get_trip, "/networks", NetworkPageResponse).items


def get_network_by_id(tripper: RestAPITripper, network_id: str) -> Network:
    """Return a network by its id."""
    return _fetch(tripper.get_trip, f"/networks/{network_id}", Network)


def get_sdn_network_list(tripper: RestAPITripper) -> list[SdnNetwork]:
    """Return all SDN networks."""
    return _fetch(tripper.get_trip, "/networks?type=extension", SdnNetworkPageResponse).items


def get_sdn_network_by_id(tripper: RestAPITripper, sdn_network_id: str) -> SdnNetwork:
    """Return an SDN network by its id."""
    return _fetch(tripper.get_trip, f"/networks/{sdn_network_id}?type=extension", SdnNetwork)