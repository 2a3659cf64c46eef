# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""YAML codec (build feature ``yaml_conf``)."""

from __future__ import annotations

from typing import Any

import yaml

from confstash.codecs.base import Codec
from confstash.errors import BadYamlData, SerializeYamlError


class YamlCodec(Codec):
    """Safe-loader/safe-dumper YAML via PyYAML."""

    name = "yaml_conf"
    extension = "yml"
    decode_error = BadYamlData
    encode_error = SerializeYamlError

    @classmethod
    def dumps(cls, data: dict[str, Any]) -> str:
        return yaml.safe_dump(data, sort_keys=False, default_flow_style=False, allow_unicode=True)

    @classmethod
    def loads(cls, text: str) -> Any:
        data = yaml.safe_load(text)
        # only an empty document means an empty mapping
        return {} if data is None else data
