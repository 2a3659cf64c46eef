# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Codec registry and build-feature selection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from confstash.codecs.toml_conf import TomlCodec
from confstash.codecs.yaml_conf import YamlCodec

if TYPE_CHECKING:
    from collections.abc import Iterable

    from confstash.codecs.base import Codec


# Registry of codecs keyed by the build feature that enables them
CODECS: dict[str, type[Codec]] = {
    "toml_conf": TomlCodec,
    "yaml_conf": YamlCodec,
}


class FeatureSelectionError(ImportError):
    """Raised when the build enables zero or several codec features."""


def get_codec(feature: str) -> type[Codec]:
    """
    Get a codec class by feature name.

    Args:
        feature (str): Name of the feature (e.g., 'toml_conf', 'yaml_conf')

    Returns:
        type[Codec]: Codec class

    Raises:
        ValueError: If the feature name is unknown
    """
    try:
        return CODECS[feature]
    except KeyError as err:
        available = ", ".join(CODECS.keys())
        msg = f"Unknown codec feature: {feature}. Available features: {available}"
        raise ValueError(msg) from err


def list_available_features() -> list[str]:
    """
    List names of all codec features.

    Returns:
        list[str]: List of feature names
    """
    return list(CODECS.keys())


def select_codec(features: Iterable[str]) -> type[Codec]:
    """
    Resolve the single codec enabled by a set of build features.

    Args:
        features (Iterable[str]): Enabled build features

    Returns:
        type[Codec]: The one enabled codec

    Raises:
        ValueError: If a feature name is unknown
        FeatureSelectionError: If zero or more than one codec is enabled
    """
    selected = sorted({get_codec(feature).name for feature in features})
    if not selected:
        msg = (
            "Exactly one config language feature must be enabled to use confstash. "
            "Please enable one of either the `toml_conf` or `yaml_conf` features."
        )
        raise FeatureSelectionError(msg)
    if len(selected) > 1:
        msg = (
            "Exactly one config language feature must be enabled to use confstash. "
            f"Please disable all but one of: {', '.join(selected)}. "
            "NOTE: `toml_conf` is the default feature."
        )
        raise FeatureSelectionError(msg)
    return CODECS[selected[0]]
