"""Common request and response types: sessions, pages, tasks and tags."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .model import Model, register_type


@dataclass
class ManagedObjectReference(Model):
    type: str = field(default="", metadata={"json": "Type"})
    value: str = field(default="", metadata={"json": "Value"})


@dataclass
class ErrorMsg(Model):
    code: str = ""
    message: str = ""
    params: str = ""


@dataclass
class Common(Model):
    """An empty request body."""


@dataclass
class PageReq(Model):
    page_size: int = 0
    current_page: int = 0
    sort_field: str = ""
    sort: str = ""


@dataclass
class PageResponse(Model):
    total_page: int = 0
    current_page: int = 0
    total_size: int = 0
    items: list[Any] = field(default_factory=list)


@dataclass
class TreeItem(Model):
    id: str = ""
    text: str = ""
    icon_cls: str = ""
    checked: bool = False
    view_id: str = ""
    children: list[TreeItem] = field(default_factory=list)


@dataclass
class ICSApi(Model):
    """An API path and whether the call carries the session token."""

    api: str = ""
    token: bool = False


@dataclass
class LoginPolicy(Model):
    enable: str = ""


@dataclass
class Login(Model):
    """Login form."""

    username: str = ""
    password: str = ""
    domain: str = ""
    locale: str = ""


@dataclass
class LoginResponse(Model):
    user_id: str = ""
    sesson_id: str = ""
    validated: bool = False
    message: str = ""
    username: str = ""
    password: str = ""
    captcha: str = ""
    locale: str = ""
    domain: str = ""
    remains: int = 0
    ip: str = ""
    operator: str = ""
    login_time: str = ""
    create_date: str = ""
    role_type: str = ""
    themes: str = ""


@dataclass
class UserSession(Model):
    user_id: str = ""
    username: str = ""
    sesson_id: str = ""
    role_type: str = ""
    locale: str = ""
    ip: str = ""
    themes: str = ""
    create_date: str = ""
    login_time: str = ""


@dataclass
class ServiceContent(Model):
    pass


@dataclass
class DynamicData(Model):
    pass


@dataclass
class OptionType(DynamicData):
    value_is_readonly: bool | None = None


@dataclass
class OptionValue(DynamicData):
    key: str = ""
    value: Any = None


@dataclass
class Task(Model):
    task_id: str = ""
    resource_id: str = ""


@dataclass
class TaskInfo(Model):
    id: str = ""
    name: str = ""
    detail: str = ""
    state: str = ""
    start_time: str = ""
    end_time: str = ""
    actor_name: str = ""
    error: str = ""
    cancelable: bool = False
    canceled: bool = False
    target_name: str = ""
    target_id: str = ""
    target_type: str = ""
    events: list[Any] = field(default_factory=list)
    process_id: str = ""
    progress: int = 0
    child_tasks: list[TaskInfo] = field(default_factory=list)


@dataclass
class Tag(Model):
    id: str = ""
    name: str = field(default="", metadata={"json": "tagName"})
    user_name: str = ""
    create_time: str = ""
    description: str = ""
    checked: bool = False


@dataclass
class TagBinding(Model):
    tags: list[Tag] = field(default_factory=list)
    source_ids: list[str] = field(default_factory=list)
    tag_source_type: str = ""


register_type("DynamicData", DynamicData)
register_type("OptionType", OptionType)
register_type("OptionValue", OptionValue)
register_type("BaseOptionType", OptionType)
register_type("BaseOptionValue", OptionValue)