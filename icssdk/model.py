"""Base model with JSON mapping, the type registry and shared enums."""

from __future__ import annotations

import dataclasses
import enum
import json
import types
import typing
from functools import lru_cache
from typing import Any

API_VERSION = "5.8"


class VirtualMachinePowerState(str, enum.Enum):
    """Power state of a virtual machine."""

    POWERED_OFF = "poweredOff"
    POWERED_ON = "poweredOn"
    SUSPENDED = "suspended"


_TYPES: dict[str, type] = {}


def register_type(name: str, kind: type) -> None:
    """Register a type under a name."""
    _TYPES[name] = kind


def lookup_type(name: str) -> type | None:
    """Find a registered type, also trying the name without a "types:" prefix."""
    kind = _TYPES.get(name)
    if kind is None:
        kind = _TYPES.get(name.removeprefix("types:"))
    return kind


register_type("VirtualMachinePowerState", VirtualMachinePowerState)


@dataclasses.dataclass(frozen=True)
class _FieldSpec:
    attr: str
    key: str
    omitempty: bool
    kind: Any


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _resolve(kind: Any, owner: type) -> Any:
    """Turn a forward reference into the class it names."""
    if isinstance(kind, typing.ForwardRef):
        kind = kind.__forward_arg__
    if not isinstance(kind, str):
        return kind
    name = kind.strip()
    if name == owner.__name__:
        return owner
    found = lookup_type(name)
    if found is None:
        raise TypeError(f"cannot resolve type {name!r} in {owner.__name__}")
    return found


@lru_cache(maxsize=None)
def _specs(cls: type) -> tuple[_FieldSpec, ...]:
    specs = []
    for f in dataclasses.fields(cls):
        name, _, options = f.metadata.get("json", "").partition(",")
        if name == "-":
            continue
        specs.append(
            _FieldSpec(
                attr=f.name,
                key=name or _camel(f.name),
                omitempty="omitempty" in options.split(","),
                kind=f.type,
            )
        )
    return tuple(specs)


def _is_union(kind: Any) -> bool:
    origin = typing.get_origin(kind)
    return origin is typing.Union or origin is types.UnionType


def _zero(kind: Any) -> Any:
    origin = typing.get_origin(kind)
    if origin is list:
        return []
    if origin is dict:
        return {}
    if isinstance(kind, type):
        if issubclass(kind, Model):
            return kind()
        if kind in (str, int, float, bool):
            return kind()
    return None


def _mismatch(value: Any, where: str) -> ValueError:
    return ValueError(f"cannot decode {type(value).__name__} {value!r} into {where}")


def _decode(kind: Any, value: Any, where: str, owner: type) -> Any:
    kind = _resolve(kind, owner)
    if kind is Any:
        return value
    if _is_union(kind):
        if value is None:
            return None
        inner = next(arg for arg in typing.get_args(kind) if arg is not type(None))
        return _decode(inner, value, where, owner)
    if value is None:
        return _zero(kind)
    origin = typing.get_origin(kind)
    if origin is list:
        if not isinstance(value, list):
            raise _mismatch(value, where)
        (item,) = typing.get_args(kind) or (Any,)
        return [_decode(item, element, f"{where}[]", owner) for element in value]
    if origin is dict:
        if not isinstance(value, dict):
            raise _mismatch(value, where)
        _, item = typing.get_args(kind) or (str, Any)
        return {
            key: _decode(item, element, f"{where}[{key!r}]", owner)
            for key, element in value.items()
        }
    if not isinstance(kind, type):
        return value
    if issubclass(kind, Model):
        return kind.from_dict(value)
    if issubclass(kind, enum.Enum):
        try:
            return kind(value)
        except ValueError:
            raise _mismatch(value, where) from None
    if kind is bool:
        if not isinstance(value, bool):
            raise _mismatch(value, where)
        return value
    if kind is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise _mismatch(value, where)
        return value
    if kind is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise _mismatch(value, where)
        return float(value)
    if kind is str:
        if not isinstance(value, str):
            raise _mismatch(value, where)
        return value
    return value


def _encode(value: Any) -> Any:
    if isinstance(value, Model):
        return value.to_dict()
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    if isinstance(value, dict):
        return {key: _encode(item) for key, item in value.items()}
    return value


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return False


class Model:
    """Base for dataclasses that map to JSON objects.

    Field annotations must be evaluated types; a forward reference may name
    the class itself or a registered type. The JSON key of a field is its
    name in camelCase unless the field's metadata holds a "json" tag of the
    form "name[,omitempty]"; the tag "-" leaves a field out. Keys are matched
    exactly first, then ignoring case.
    """

    @classmethod
    def from_dict(cls, data: Any):
        """Build an instance from a decoded JSON object."""
        if not isinstance(data, dict):
            raise _mismatch(data, cls.__name__)
        folded = {key.lower(): key for key in data if isinstance(key, str)}
        values = {}
        for spec in _specs(cls):
            key = spec.key if spec.key in data else folded.get(spec.key.lower())
            if key is None:
                continue
            raw = data[key]
            if raw is None and not (spec.kind is Any or _is_union(spec.kind)):
                continue
            values[spec.attr] = _decode(spec.kind, raw, f"{cls.__name__}.{spec.attr}", cls)
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object for this instance."""
        result: dict[str, Any] = {}
        for spec in _specs(type(self)):
            value = getattr(self, spec.attr)
            if spec.omitempty and _is_empty(value):
                continue
            result[spec.key] = _encode(value)
        return result

    @classmethod
    def from_json(cls, text: str | bytes):
        """Build an instance from JSON text; a JSON null gives the defaults."""
        data = json.loads(text)
        if data is None:
            return cls()
        return cls.from_dict(data)

    def to_json(self) -> str:
        """Return compact JSON text for this instance."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)