import json

import pytest

from icssdk import vapp_api
from icssdk.api import RestAPITripper
from icssdk.errors import SDKError
from icssdk.response import Response
from icssdk.vapp_types import VappCreateReq


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


TASK = {"taskId": "task-1", "resourceId": "res-1"}


def test_get_vapp_list():
    tripper = FakeTripper(ok({"items": [{"id": "v1", "name": "app"}]}))
    vapps = vapp_api.get_vapp_list(tripper)
    assert tripper.calls[0][0] == "get"
    assert tripper.calls[0][1].api == "/vclusters"
    assert [(v.id, v.name) for v in vapps] == [("v1", "app")]


def test_create_vapp_posts_request():
    req = VappCreateReq(name="app", data_center_id="dc-1")
    tripper = FakeTripper(ok(TASK))
    task = vapp_api.create_vapp(tripper, req)
    method, api, body = tripper.calls[0]
    assert (method, api.api, body) == ("post", "/vclusters", req)
    assert task.task_id == "task-1"


def test_delete_vapp():
    tripper = FakeTripper(ok(TASK))
    vapp_api.delete_vapp(tripper, "v1")
    assert tripper.calls[0][0] == "delete"
    assert tripper.calls[0][1].api == "/vclusters/v1"


@pytest.mark.parametrize(
    "func, action",
    [(vapp_api.add_vm_to_vapp, "shiftIn"), (vapp_api.delete_vm_from_vapp, "shiftOut")],
)
def test_move_vms(func, action):
    tripper = FakeTripper(ok(TASK))
    task = func(tripper, "v1", ("vm-1", "vm-2"))
    method, api, body = tripper.calls[0]
    assert method == "put"
    assert api.api == f"/vclusters/v1/vms?action={action}"
    assert body == ["vm-1", "vm-2"]
    assert task.resource_id == "res-1"


@pytest.mark.parametrize(
    "func, action",
    [
        (vapp_api.power_on_vapp, "powerOn"),
        (vapp_api.power_off_vapp, "powerOff"),
        (vapp_api.power_off_vapp_safely, "safelypowerOff"),
        (vapp_api.restart_vapp, "restart"),
    ],
)
def test_power_actions(func, action):
    tripper = FakeTripper(ok(TASK))
    func(tripper, "v1")
    method, api, body = tripper.calls[0]
    assert (method, api.api, body) == ("put", f"/vclusters/v1?action={action}", None)


def test_forbidden_reply_raises():
    tripper = FakeTripper(Response(403, "403", b'{"message": "denied"}'))
    with pytest.raises(SDKError) as info:
        vapp_api.restart_vapp(tripper, "v1")
    assert info.value.code == "403"