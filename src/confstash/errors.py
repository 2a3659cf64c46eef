# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Errors raised by confstash.

Every failure is a direct subclass of :class:`ConfyError`. Each one carries at
most one inner cause, available as ``.cause`` and chained as ``__cause__``.
"""

from __future__ import annotations


class ConfyError(Exception):
    """Base exception for configuration load and store failures."""

    message = "Configuration error"

    def __init__(self, cause: BaseException | None = None) -> None:
        super().__init__(self.message)
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


class BadTomlData(ConfyError):
    """Raised when a TOML document cannot be decoded into the config type."""

    message = "Bad TOML data"


class BadYamlData(ConfyError):
    """Raised when a YAML document cannot be decoded into the config type."""

    message = "Bad YAML data"


class DirectoryCreationFailed(ConfyError):
    """Raised when the configuration directory cannot be created."""

    message = "Failed to create directory"


class GeneralLoadError(ConfyError):
    """Raised when the configuration file cannot be opened for reading."""

    message = "Failed to load configuration file"


class BadConfigDirectory(ConfyError):
    """Raised when no usable configuration directory can be derived."""

    message = "Bad configuration directory"

    def __init__(self, reason: str) -> None:
        super().__init__()
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.message}: {self.reason}"


class SerializeTomlError(ConfyError):
    """Raised when a value cannot be encoded as TOML."""

    message = "Failed to serialize configuration data into TOML"


class SerializeYamlError(ConfyError):
    """Raised when a value cannot be encoded as YAML."""

    message = "Failed to serialize configuration data into YAML"


class WriteConfigurationFileError(ConfyError):
    """Raised when writing, syncing or renaming the staged file fails."""

    message = "Failed to write configuration file"


class ReadConfigurationFileError(ConfyError):
    """Raised when an opened configuration file cannot be read as text."""

    message = "Failed to read configuration file"


class OpenConfigurationFileError(ConfyError):
    """Raised when the staging file cannot be opened for writing."""

    message = "Failed to open configuration file"


__all__ = [
    "BadConfigDirectory",
    "BadTomlData",
    "BadYamlData",
    "ConfyError",
    "DirectoryCreationFailed",
    "GeneralLoadError",
    "OpenConfigurationFileError",
    "ReadConfigurationFileError",
    "SerializeTomlError",
    "SerializeYamlError",
    "WriteConfigurationFileError",
]
