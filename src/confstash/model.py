# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Conversions between caller config values and plain mappings.

A config type takes part in load/store through one of these capabilities:

- ``to_dict()`` / ``from_dict(data)`` hooks defined on the type,
- a dataclass (nested dataclass fields, including ``Inner | None`` and
  ``list[Inner]``, are rebuilt from nested tables),
- a ``Mapping`` type such as ``dict``,
- any other type that accepts the document keys as keyword arguments.

Defaults come from calling the type with no arguments.
"""

from __future__ import annotations

import dataclasses
import types
import typing
from collections.abc import Mapping
from typing import Any, TypeVar

T = TypeVar("T")


def to_mapping(value: Any) -> dict[str, Any]:
    """Return the plain mapping form of a config value.

    Raises:
        TypeError: If the value offers no way to be turned into a mapping.
    """
    hook = getattr(value, "to_dict", None)
    if callable(hook):
        data = hook()
    elif dataclasses.is_dataclass(value) and not isinstance(value, type):
        data = dataclasses.asdict(value)
    elif isinstance(value, Mapping):
        data = dict(value)
    else:
        msg = f"cannot serialize value of type {type(value).__name__}"
        raise TypeError(msg)

    if not isinstance(data, Mapping):
        msg = f"{type(value).__name__} must serialize to a mapping, got {type(data).__name__}"
        raise TypeError(msg)
    return dict(data)


def from_mapping(config_type: type[T], data: Any) -> T:
    """Build an instance of ``config_type`` from a decoded document."""
    if not isinstance(data, Mapping):
        msg = f"expected a mapping at document root, got {type(data).__name__}"
        raise TypeError(msg)

    hook = getattr(config_type, "from_dict", None)
    if callable(hook):
        return hook(data)
    if dataclasses.is_dataclass(config_type):
        return _build_dataclass(config_type, data)
    if isinstance(config_type, type) and issubclass(config_type, Mapping):
        return config_type(data)  # type: ignore[call-arg]
    return config_type(**data)


def default_of(config_type: type[T]) -> T:
    """Construct the default value of ``config_type``."""
    return config_type()


def _build_dataclass(cls: type[T], data: Mapping[str, Any]) -> T:
    try:
        hints = typing.get_type_hints(cls)
    except NameError as e:
        msg = f"cannot resolve field types of {cls.__name__}: {e}"
        raise TypeError(msg) from e

    kwargs: dict[str, Any] = {}
    for f in dataclasses.fields(cls):  # type: ignore[arg-type]
        if not f.init or f.name not in data:
            continue
        kwargs[f.name] = _coerce(hints.get(f.name), data[f.name])
    return cls(**kwargs)


def _coerce(hint: Any, value: Any) -> Any:
    if isinstance(value, Mapping):
        nested = _dataclass_in(hint)
        if nested is not None:
            return _build_dataclass(nested, value)
    elif isinstance(value, list) and typing.get_origin(hint) is list:
        (item_hint,) = typing.get_args(hint) or (None,)
        return [_coerce(item_hint, item) for item in value]
    return value


def _dataclass_in(hint: Any) -> type | None:
    """Return the dataclass a field hint names, looking through ``X | None``."""
    if isinstance(hint, type) and dataclasses.is_dataclass(hint):
        return hint
    if typing.get_origin(hint) in (typing.Union, types.UnionType):
        candidates = [
            arg
            for arg in typing.get_args(hint)
            if isinstance(arg, type) and dataclasses.is_dataclass(arg)
        ]
        if len(candidates) == 1:
            return candidates[0]
    return None
