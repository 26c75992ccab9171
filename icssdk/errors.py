"""Errors raised by the SDK."""

from __future__ import annotations


class SDKError(Exception):
    """An error reported by the service or raised while handling its reply."""

    def __init__(self, code: str, message: str, params: str = "") -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.params = params

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"SDKError(code={self.code!r}, message={self.message!r}, params={self.params!r})"