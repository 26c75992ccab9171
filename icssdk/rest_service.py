"""Base for services: task tracking and policy checks."""

from __future__ import annotations

import time
from dataclasses import dataclass

from . import api
from .api import RestAPITripper
from .common_types import Task, TaskInfo
from .errors import SDKError

_DONE_STATES = ("FINISHED", "ERROR")


@dataclass
class RestAPI:
    """Calls shared by all services, made through one transport."""

    tripper: RestAPITripper
    poll_interval: float = 0.1
    max_polls: int = 72000

    def get_task_info(self, task: Task | None) -> TaskInfo | None:
        """Return the current state of a task."""
        return api.get_task_info(self.tripper, task)

    def trace_task_process(self, task: Task | None) -> TaskInfo | None:
        """Wait until a task finishes, fails or cannot be polled; return its state."""
        self._wait(task)
        return api.get_task_info(self.tripper, task)

    def _wait(self, task: Task | None) -> None:
        count = 1
        while True:
            try:
                info = api.get_task_info(self.tripper, task)
            except SDKError:
                return
            if info is None or info.state in _DONE_STATES:
                return
            if count > self.max_polls:
                return
            time.sleep(self.poll_interval)
            count += 1

    def is_delete_need_identity_auth(self) -> bool:
        """Return whether deleting needs the user to authenticate again."""
        try:
            policy = api.get_login_policy(self.tripper)
        except SDKError as exc:
            raise SDKError(exc.code, f"Failed to get login policy. Err: {exc}") from exc
        return policy.enable == "1"