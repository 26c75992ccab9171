# icssdk

A Python client library for the ICS virtualization management REST API.
It models the objects the service returns (virtual machines, hosts,
clusters, datacenters, storages, volumes, networks, vApps, tags and tasks)
as dataclasses and wraps each REST endpoint in a plain function.

## Installation

```
pip install icssdk
```

The only runtime dependency is `cryptography`, used to encrypt parameters
with the service's RSA public key.

## Transport

Every call goes through a `RestAPITripper` (from `icssdk.api`): an abstract
class with the methods `get_trip`, `post_trip`, `put_trip` and
`delete_trip`. Each takes an `ICSApi` (its `api` member is the request
path, its `token` member says whether the call needs the session's
credentials) and a body, which is a model, a JSON-ready value or `None`.
Each returns an `icssdk.response.Response` with `status_code`, `status`
and `body` for any HTTP status, and raises on transport failures; the
calls turn such an exception into an `SDKError` with code `"404"`.

The package does not ship an HTTP transport, and it does not keep or send
session credentials itself: you supply a `RestAPITripper` built on the HTTP
library of your choice. A minimal sketch with the standard library:

```python
import json
import urllib.error
import urllib.request

from icssdk.api import RestAPITripper
from icssdk.model import Model
from icssdk.response import Response


class UrllibTripper(RestAPITripper):
    def __init__(self, base_url):
        self.base_url = base_url.rstrip("/")

    def _send(self, method, api, body):
        if isinstance(body, Model):
            body = body.to_dict()
        data = None if body is None else json.dumps(body).encode("utf-8")
        request = urllib.request.Request(
            self.base_url + "/" + api.api.lstrip("/"),
            data=data,
            method=method,
            headers={"Content-Type": "application/json"},
        )
        # When api.token is true, add the session credentials your service expects.
        try:
            with urllib.request.urlopen(request) as reply:
                return Response(reply.status, reply.reason, reply.read())
        except urllib.error.HTTPError as err:
            return Response(err.code, str(err.reason), err.read())

    def get_trip(self, api, body):
        return self._send("GET", api, body)

    def post_trip(self, api, body):
        return self._send("POST", api, body)

    def put_trip(self, api, body):
        return self._send("PUT", api, body)

    def delete_trip(self, api, body):
        return self._send("DELETE", api, body)
```

## Usage

```python
from icssdk import vm_api
from icssdk.client import new_client
from icssdk.cluster_service import new_cluster_service
from icssdk.errors import SDKError

tripper = UrllibTripper("https://ics.example.com/api")
client = new_client(tripper)
clusters = new_cluster_service(client)

try:
    cluster = clusters.get_cluster_by_name("cluster")
    vm = vm_api.get_vm_by_name(client, "web-01")
    task = vm_api.power_on_vm_by_id(client, vm.id)
    info = clusters.trace_task_process(task)
    if info is not None:
        print(info.state)
except SDKError as err:
    print(err.code, err.message)
except LookupError as err:
    print(err)
```

`Client` is itself a `RestAPITripper` that forwards every request to the
transport it holds; `Client.valid()` tells whether it has one.

## Errors

- `icssdk.errors.SDKError` carries `code`, `message` and `params`.
  `handle_response` in `icssdk.api` returns the body of a 200 response;
  for 202, 401 and 403 it raises with that status as the code (or `"501"`
  when the body is not JSON), and for any other status it raises with
  code `"500"`. A body that cannot be decoded into the expected model
  raises with code `"400"`.
- `ClusterService.get_cluster_by_name` raises `LookupError` when no
  cluster has the name.
- `generate_check_params` raises `ValueError` when the public key cannot
  be decoded, parsed as an RSA key, or used to encrypt.

## Modules

- `icssdk.api`: the `RestAPITripper` interface, `handle_response`,
  `json_error`, `login`, `logout`, `valid_user_session`, `get_task_info`,
  `get_public_key`, `get_login_policy`, `generate_check_params`,
  `get_service_content` and `get_current_time`.
- `icssdk.vm_api`, `icssdk.host_api`, `icssdk.cluster_api`,
  `icssdk.datacenter_api`, `icssdk.storage_api`, `icssdk.volume_api`,
  `icssdk.network_api`, `icssdk.vapp_api`, `icssdk.tag_api`: one function
  per endpoint. Lookups by an empty id use the id `anonymous`;
  `vm_api.import_vm` replaces a rate limit outside 20 to 100 with 40.
- `icssdk.client`: `Client` and `new_client`.
- `icssdk.rest_service.RestAPI`: `get_task_info`, `trace_task_process`
  (polls every `poll_interval` seconds, at most `max_polls` times, until
  the task is `FINISHED` or `ERROR`) and `is_delete_need_identity_auth`.
- `icssdk.cluster_service`: `ClusterService` and `new_cluster_service`.
- `icssdk.model`: the `Model` base class with `from_dict`, `to_dict`,
  `from_json` and `to_json`, the `VirtualMachinePowerState` enum, and
  `register_type` / `lookup_type`.
- `icssdk.common_types`, `icssdk.cluster_types`, `icssdk.datacenter_types`,
  `icssdk.host_types`, `icssdk.storage_types`, `icssdk.volume_types`,
  `icssdk.vm_types`, `icssdk.network_types`, `icssdk.vapp_types`: the
  dataclasses for requests and responses.

## What it does not do

There is no HTTP transport, no logging in from a URL and no session
manager that keeps the login: `new_client` only wraps the transport you
give it, and `api.login` returns the `LoginResponse` for you to keep.
There is no command-line program.

## Running the tests

```
pip install icssdk[test]
pytest
```