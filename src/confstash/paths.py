# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Platform-conventional locations for configuration files.

Paths are computed on every call and nothing here touches the filesystem.
"""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_config_dir

from confstash.errors import BadConfigDirectory

DEFAULT_CONFIG_NAME = "default-config"


def configuration_directory(app_name: str) -> Path:
    """Return the per-user configuration directory for an application.

    Raises:
        BadConfigDirectory: If no home directory can be determined or the
            directory is not representable as text.
    """
    if not app_name:
        msg = "application name must not be empty"
        raise BadConfigDirectory(msg)
    try:
        config_dir = user_config_dir(app_name, appauthor=False, roaming=True)
    except (RuntimeError, KeyError, OSError) as e:
        msg = "could not determine home directory path"
        raise BadConfigDirectory(msg) from e
    if not config_dir or not Path(config_dir).is_absolute():
        # "~" left unexpanded when neither HOME nor the passwd entry is usable
        msg = "could not determine home directory path"
        raise BadConfigDirectory(msg)

    try:
        config_dir.encode("utf-8")
    except UnicodeEncodeError as e:
        # lone surrogates from undecodable bytes in the environment
        msg = f'"{config_dir}" is not valid Unicode'
        raise BadConfigDirectory(msg) from e
    return Path(config_dir)


def configuration_file_path(app_name: str, config_name: str | None, extension: str) -> Path:
    """Return ``<config dir>/<config name>.<extension>`` for an application."""
    if config_name is None:
        config_name = DEFAULT_CONFIG_NAME
    return configuration_directory(app_name) / f"{config_name}.{extension}"
