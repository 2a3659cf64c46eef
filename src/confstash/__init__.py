# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Zero-boilerplate configuration files.

confstash finds the platform's per-user configuration directory, reads and
writes one TOML (or YAML) file there, and never leaves a half-written file
behind when a store fails.
"""

from __future__ import annotations

from confstash.errors import (
    BadConfigDirectory,
    BadTomlData,
    BadYamlData,
    ConfyError,
    DirectoryCreationFailed,
    GeneralLoadError,
    OpenConfigurationFileError,
    ReadConfigurationFileError,
    SerializeTomlError,
    SerializeYamlError,
    WriteConfigurationFileError,
)
from confstash.paths import DEFAULT_CONFIG_NAME
from confstash.store import (
    CODEC,
    EXTENSION,
    ConfigFiles,
    get_configuration_file_path,
    load,
    load_or_default,
    load_path,
    load_path_or_default,
    store,
    store_path,
)

__all__ = [
    "CODEC",
    "DEFAULT_CONFIG_NAME",
    "EXTENSION",
    "BadConfigDirectory",
    "BadTomlData",
    "BadYamlData",
    "ConfigFiles",
    "ConfyError",
    "DirectoryCreationFailed",
    "GeneralLoadError",
    "OpenConfigurationFileError",
    "ReadConfigurationFileError",
    "SerializeTomlError",
    "SerializeYamlError",
    "WriteConfigurationFileError",
    "get_configuration_file_path",
    "load",
    "load_or_default",
    "load_path",
    "load_path_or_default",
    "store",
    "store_path",
]
