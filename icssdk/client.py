"""SDK client holding the transport."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .api import RestAPITripper, get_service_content
from .common_types import ICSApi
from .response import Response

NAMESPACE = "client"
VERSION = "5.8"
PATH = "/"


@dataclass
class Client(RestAPITripper):
    """A client that sends every request through its transport."""

    tripper: RestAPITripper | None = None

    def valid(self) -> bool:
        """Return whether the client has a transport and is ready for use."""
        return self.tripper is not None

    def _transport(self) -> RestAPITripper:
        if self.tripper is None:
            raise RuntimeError("client has no transport")
        return self.tripper

    def get_trip(self, api: ICSApi, body: Any) -> Response:
        return self._transport().get_trip(api, body)

    def post_trip(self, api: ICSApi, body: Any) -> Response:
        return self._transport().post_trip(api, body)

    def put_trip(self, api: ICSApi, body: Any) -> Response:
        return self._transport().put_trip(api, body)

    def delete_trip(self, api: ICSApi, body: Any) -> Response:
        return self._transport().delete_trip(api, body)


def new_client(tripper: RestAPITripper) -> Client:
    """Create a client over a transport after fetching the service content."""
    get_service_content(tripper)
    return Client(tripper)