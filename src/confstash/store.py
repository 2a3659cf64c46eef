# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Load and store application configuration files.

The module-level functions use the codec selected by the build features in
:mod:`confstash.features`. :class:`ConfigFiles` binds the same operations to
an explicit codec.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

from confstash.codecs.base import Codec
from confstash.codecs.registry import select_codec
from confstash.errors import GeneralLoadError
from confstash.features import ENABLED_FEATURES
from confstash.model import default_of
from confstash.paths import configuration_file_path
from confstash.reader import read_config
from confstash.writer import write_config

T = TypeVar("T")

CODEC: type[Codec] = select_codec(ENABLED_FEATURES)
EXTENSION: str = CODEC.extension


@dataclass(frozen=True)
class ConfigFiles:
    """Configuration file operations bound to one codec."""

    codec: type[Codec] = CODEC

    @property
    def extension(self) -> str:
        """File extension of configuration files handled here."""
        return self.codec.extension

    def get_configuration_file_path(self, app_name: str, config_name: str | None = None) -> Path:
        """Return the path :meth:`load` and :meth:`store` use for an application."""
        return configuration_file_path(app_name, config_name, self.extension)

    def load(self, app_name: str, config_name: str | None = None, *, config_type: type[T]) -> T:
        """Load an application's configuration from its platform location."""
        return self.load_path(self.get_configuration_file_path(app_name, config_name), config_type)

    def load_path(self, path: str | Path, config_type: type[T]) -> T:
        """Load a configuration from an explicit path.

        A missing file raises :class:`GeneralLoadError`; see
        :meth:`load_path_or_default` for the default-on-absence variant.
        """
        return read_config(path, config_type, self.codec)

    def store(self, app_name: str, config_name: str | None, value: Any) -> None:
        """Store an application's configuration at its platform location."""
        self.store_path(self.get_configuration_file_path(app_name, config_name), value)

    def store_path(self, path: str | Path, value: Any) -> None:
        """Atomically store a configuration at an explicit path."""
        write_config(path, value, self.codec)

    def load_or_default(
        self, app_name: str, config_name: str | None = None, *, config_type: type[T]
    ) -> T:
        """Like :meth:`load`, but create the file from defaults when it is missing."""
        return self.load_path_or_default(
            self.get_configuration_file_path(app_name, config_name), config_type
        )

    def load_path_or_default(self, path: str | Path, config_type: type[T]) -> T:
        """Like :meth:`load_path`, but create the file from defaults when it is missing.

        Only a missing file is treated this way. Permission problems, unreadable
        content and bad documents propagate as usual.
        """
        try:
            return self.load_path(path, config_type)
        except GeneralLoadError as e:
            if not isinstance(e.cause, FileNotFoundError):
                raise
        config = default_of(config_type)
        self.store_path(path, config)
        return config


_files = ConfigFiles()


def get_configuration_file_path(app_name: str, config_name: str | None = None) -> Path:
    """
    Get the configuration file path used by :func:`load` and :func:`store`.

    Useful for showing users where their configuration lives.

    Args:
        app_name (str): Application name
        config_name (str | None): File stem, ``"default-config"`` when omitted

    Returns:
        Path: ``<platform config dir>/<config_name>.<EXTENSION>``

    Raises:
        BadConfigDirectory: If no configuration directory can be derived
    """
    return _files.get_configuration_file_path(app_name, config_name)


def load(app_name: str, config_name: str | None = None, *, config_type: type[T]) -> T:
    """
    Load an application configuration from disk.

    Args:
        app_name (str): Application name
        config_name (str | None): File stem, ``"default-config"`` when omitted
        config_type (type[T]): Type to decode the configuration into

    Returns:
        T: The stored configuration

    Raises:
        BadConfigDirectory: If no configuration directory can be derived
        GeneralLoadError: If the file cannot be opened, including when it is missing
        ReadConfigurationFileError: If the file cannot be read
        ConfyError: The codec's bad-data error if the document is invalid
    """
    return _files.load(app_name, config_name, config_type=config_type)


def load_path(path: str | Path, config_type: type[T]) -> T:
    """Load a configuration from an explicit path. Errors as for :func:`load`."""
    return _files.load_path(path, config_type)


def load_or_default(app_name: str, config_name: str | None = None, *, config_type: type[T]) -> T:
    """
    Load an application configuration, creating it from defaults if missing.

    The default is ``config_type()``; it is stored atomically before being
    returned so the next :func:`load` finds it.
    """
    return _files.load_or_default(app_name, config_name, config_type=config_type)


def load_path_or_default(path: str | Path, config_type: type[T]) -> T:
    """Path-explicit variant of :func:`load_or_default`."""
    return _files.load_path_or_default(path, config_type)


def store(app_name: str, config_name: str | None, value: Any) -> None:
    """
    Save a configuration, creating the file and its directory if needed.

    This also serves to create a configuration with values other than the
    type's defaults, or for types that have no default at all.

    Args:
        app_name (str): Application name
        config_name (str | None): File stem, ``"default-config"`` when ``None``
        value (Any): Configuration value to store

    Raises:
        BadConfigDirectory: If no configuration directory can be derived
        DirectoryCreationFailed: If the directory cannot be created
        ConfyError: The codec's serialize error if the value cannot be encoded
        OpenConfigurationFileError: If the staging file cannot be created
        WriteConfigurationFileError: If writing or renaming fails
    """
    _files.store(app_name, config_name, value)


def store_path(path: str | Path, value: Any) -> None:
    """Atomically save a configuration at an explicit path. Errors as for :func:`store`."""
    _files.store_path(path, value)
