# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""TOML codec (build feature ``toml_conf``)."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from typing import Any

import tomli_w

from confstash.codecs.base import Codec
from confstash.errors import BadTomlData, SerializeTomlError


def _without_none(value: Any) -> Any:
    """Drop ``None``-valued keys at every depth; TOML has no null."""
    if isinstance(value, Mapping):
        return {k: _without_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [_without_none(v) for v in value]
    return value


class TomlCodec(Codec):
    """Reads with :mod:`tomllib`, writes with :mod:`tomli_w`.

    Keys whose value is ``None`` are left out of the document, so optional
    fields read back as their defaults.
    """

    name = "toml_conf"
    extension = "toml"
    decode_error = BadTomlData
    encode_error = SerializeTomlError

    @classmethod
    def dumps(cls, data: dict[str, Any]) -> str:
        return tomli_w.dumps(_without_none(data))

    @classmethod
    def loads(cls, text: str) -> Any:
        return tomllib.loads(text)
