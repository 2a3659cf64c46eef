"""Configuration codecs for confstash."""

from __future__ import annotations

from confstash.codecs.base import Codec
from confstash.codecs.registry import (
    CODECS,
    FeatureSelectionError,
    get_codec,
    list_available_features,
    select_codec,
)
from confstash.codecs.toml_conf import TomlCodec
from confstash.codecs.yaml_conf import YamlCodec

__all__ = [
    "CODECS",
    "Codec",
    "FeatureSelectionError",
    "TomlCodec",
    "YamlCodec",
    "get_codec",
    "list_available_features",
    "select_codec",
]
