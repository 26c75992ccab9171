import json

import pytest

from icssdk.api import RestAPITripper
from icssdk.common_types import Task
from icssdk.errors import SDKError
from icssdk.response import Response
from icssdk.rest_service import RestAPI


class FakeTripper(RestAPITripper):
    def __init__(self, *replies):
        self.replies = list(replies) or [Response(200, "200 OK", b"{}")]
        self.calls = []

    def _answer(self, method, api, body):
        self.calls.append((method, api, body))
        return self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]

    def get_trip(self, api, body):
        return self._answer("get", api, body)

    def post_trip(self, api, body):
        return self._answer("post", api, body)

    def put_trip(self, api, body):
        return self._answer("put", api, body)

    def delete_trip(self, api, body):
        return self._answer("delete", api, body)


def ok(data):
    return Response(200, "200 OK", json.dumps(data).encode())


def state(name):
    return ok({"id": "task-1", "state": name})


TASK = Task(task_id="task-1")


def test_get_task_info():
    tripper = FakeTripper(state("RUNNING"))
    info = RestAPI(tripper).get_task_info(TASK)
    assert tripper.calls[0][1].api == "/tasks/task-1"
    assert info.state == "RUNNING"


def test_get_task_info_without_id_sends_nothing():
    tripper = FakeTripper()
    assert RestAPI(tripper).get_task_info(Task()) is None
    assert tripper.calls == []


def test_trace_waits_until_finished():
    tripper = FakeTripper(state("RUNNING"), state("RUNNING"), state("FINISHED"))
    info = RestAPI(tripper, poll_interval=0).trace_task_process(TASK)
    assert info.state == "FINISHED"
    assert len(tripper.calls) == 4
    assert all(call[1].api == "/tasks/task-1" for call in tripper.calls)


def test_trace_stops_on_error_state():
    tripper = FakeTripper(state("ERROR"))
    info = RestAPI(tripper, poll_interval=0).trace_task_process(TASK)
    assert info.state == "ERROR"
    assert len(tripper.calls) == 2


def test_trace_stops_after_max_polls():
    tripper = FakeTripper(state("RUNNING"))
    info = RestAPI(tripper, poll_interval=0, max_polls=2).trace_task_process(TASK)
    assert info.state == "RUNNING"
    assert len(tripper.calls) == 4


def test_trace_stops_polling_on_failure():
    tripper = FakeTripper(Response(500, "500", b""), state("FINISHED"))
    info = RestAPI(tripper, poll_interval=0).trace_task_process(TASK)
    assert info.state == "FINISHED"
    assert len(tripper.calls) == 2


def test_trace_without_task():
    tripper = FakeTripper()
    assert RestAPI(tripper, poll_interval=0).trace_task_process(None) is None
    assert tripper.calls == []


@pytest.mark.parametrize("enable, expected", [("1", True), ("0", False), ("", False)])
def test_is_delete_need_identity_auth(enable, expected):
    tripper = FakeTripper(ok({"enable": enable}))
    assert RestAPI(tripper).is_delete_need_identity_auth() is expected
    assert tripper.calls[0][1].api == "/system/loginpolicy"


def test_is_delete_need_identity_auth_failure():
    tripper = FakeTripper(Response(500, "500", b""))
    with pytest.raises(SDKError) as info:
        RestAPI(tripper).is_delete_need_identity_auth()
    assert str(info.value).startswith("Failed to get login policy. Err: ")
    assert info.value.code == "500"