"""Transport interface and the session, task and system calls."""

from __future__ import annotations

import abc
import base64
import datetime
import json
from collections.abc import Callable
from typing import Any, TypeVar

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from .common_types import ICSApi, Login, LoginPolicy, LoginResponse, ServiceContent, Task, TaskInfo, UserSession
from .errors import SDKError
from .model import Model
from .response import Response

M = TypeVar("M", bound=Model)

_Trip = Callable[[ICSApi, Any], Response]


class RestAPITripper(abc.ABC):
    """Sends requests to the service.

    ``body`` is a model, a JSON-ready value or None. Implementations raise on
    transport failures and return the response for any HTTP status.
    """

    @abc.abstractmethod
    def get_trip(self, api: ICSApi, body: Any) -> Response:
        """Send a GET request."""

    @abc.abstractmethod
    def post_trip(self, api: ICSApi, body: Any) -> Response:
        """Send a POST request."""

    @abc.abstractmethod
    def put_trip(self, api: ICSApi, body: Any) -> Response:
        """Send a PUT request."""

    @abc.abstractmethod
    def delete_trip(self, api: ICSApi, body: Any) -> Response:
        """Send a DELETE request."""


def json_error(err: Exception) -> SDKError:
    """Wrap a decoding failure in an SDKError."""
    return SDKError("400", f"SDK unmarshal data error: {err}")


def handle_response(resp: Response) -> bytes:
    """Return the body of a successful response or raise SDKError."""
    if resp.status_code == 200:
        return resp.body
    if resp.status_code in (202, 401, 403):
        try:
            detail = json.loads(resp.body)
        except ValueError as exc:
            raise SDKError("501", f"Service response error: {exc}") from exc
        raise SDKError(str(resp.status_code), f"Service response error: {detail}")
    raise SDKError("500", f"Service unknown error. StatusCode:{resp.status_code}")


def _trip(trip: _Trip, path: str, body: Any = None, *, token: bool = True) -> Response:
    try:
        return trip(ICSApi(api=path, token=token), body)
    except SDKError:
        raise
    except Exception as exc:
        raise SDKError("404", str(exc)) from exc


def _send(trip: _Trip, path: str, body: Any = None, *, token: bool = True) -> bytes:
    return handle_response(_trip(trip, path, body, token=token))


def _fetch(trip: _Trip, path: str, kind: type[M], body: Any = None, *, token: bool = True) -> M:
    raw = _send(trip, path, body, token=token)
    if not raw:
        return kind()
    try:
        return kind.from_json(raw)
    except ValueError as exc:
        raise json_error(exc) from exc


def _fetch_list(trip: _Trip, path: str, item: type[M], body: Any = None) -> list[M]:
    raw = _send(trip, path, body)
    if not raw:
        return []
    try:
        data = json.loads(raw)
        if data is None:
            return []
        if not isinstance(data, list):
            raise ValueError(f"cannot decode {type(data).__name__} into list of {item.__name__}")
        return [item() if element is None else item.from_dict(element) for element in data]
    except ValueError as exc:
        raise json_error(exc) from exc


def valid_user_session(tripper: RestAPITripper, user: UserSession) -> None:
    """Raise SDKError unless the user's session is accepted by the service."""
    user_id = user.user_id or "anonymous"
    resp = _trip(tripper.get_trip, f"/users/{user_id}/themes")
    if resp.status_code == 200:
        return
    if resp.status_code == 401:
        raise SDKError("401", "the session is not authenticated")
    raise SDKError("400", "Client Request Error")


def login(tripper: RestAPITripper, req: Login) -> LoginResponse:
    """Log in with a username and password."""
    return _fetch(tripper.post_trip, "/system/user/sdklogin", LoginResponse, req, token=False)


def logout(tripper: RestAPITripper) -> Task:
    """End the current session."""
    return _fetch(tripper.get_trip, "/logout", Task)


def get_task_info(tripper: RestAPITripper, task: Task | None) -> TaskInfo | None:
    """Return the state of a task, or None when there is no task id."""
    if task is None or not task.task_id:
        return None
    return _fetch(tripper.get_trip, f"/tasks/{task.task_id}", TaskInfo)


def get_public_key(tripper: RestAPITripper) -> str:
    """Return the service's public key as base64 text."""
    return _send(tripper.get_trip, "/system/publickey").decode("utf-8", errors="replace")


def get_login_policy(tripper: RestAPITripper) -> LoginPolicy:
    """Return the service's login policy."""
    return _fetch(tripper.get_trip, "/system/loginpolicy", LoginPolicy)


def generate_check_params(tripper: RestAPITripper, params: str) -> str:
    """Encrypt params with the service's RSA public key; return base64 text."""
    try:
        public_key = get_public_key(tripper)
    except SDKError as exc:
        raise SDKError(exc.code, f"Failed to get public key. Err: {exc}") from exc
    try:
        der = base64.b64decode(public_key, validate=True)
    except ValueError as exc:
        raise ValueError(f"Failed to decode public key. Err: {exc}") from exc
    try:
        key = serialization.load_der_public_key(der)
    except ValueError as exc:
        raise ValueError(f"Failed to parse public key. Err: {exc}") from exc
    if not isinstance(key, rsa.RSAPublicKey):
        raise ValueError("Failed to parse public key. Err: not an RSA public key")
    try:
        encrypted = key.encrypt(params.encode("utf-8"), padding.PKCS1v15())
    except ValueError as exc:
        raise ValueError(f"Failed to encrypt params {params!r}. Err: {exc}") from exc
    return base64.b64encode(encrypted).decode("ascii")


def get_service_content(tripper: RestAPITripper) -> ServiceContent:
    """Return the service content, which carries no data."""
    return ServiceContent()


def get_current_time(tripper: RestAPITripper) -> datetime.datetime:
    """Return the zero time; the service offers no clock."""
    return datetime.datetime(1, 1, 1, tzinfo=datetime.timezone.utc)