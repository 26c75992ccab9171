"""HTTP response as seen by the SDK."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Response:
    """A received HTTP response; the defaults stand for no response at all."""

    status_code: int = 0
    status: str = ""
    body: bytes = b""

    def is_success(self) -> bool:
        """True for a status code from 200 to 299."""
        return 199 < self.status_code < 300

    def is_error(self) -> bool:
        """True for a status code of 400 or above."""
        return self.status_code > 399