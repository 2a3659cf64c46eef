# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Atomic replacement of configuration files.

A store never opens the target for writing. The value is encoded first, the
bytes go to a sibling staging file which is flushed and synced, and the
staging file is then renamed over the target. Whatever fails, the target
either keeps its previous bytes or holds the complete new image.

Staging files are named ``<stem>.<pid>_<tid>_<nanos>_<attempt>`` next to the
target. Process and thread identity keep concurrent writers apart, the clock
separates successive writes of one thread, and the attempt counter keeps the
search moving when the clock is coarse or frozen.
"""

from __future__ import annotations

import os
import threading
import time
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any

from confstash.errors import (
    BadConfigDirectory,
    DirectoryCreationFailed,
    OpenConfigurationFileError,
    WriteConfigurationFileError,
)
from confstash.logging import get_logger

if TYPE_CHECKING:
    from confstash.codecs.base import Codec

logger = get_logger(__name__)


def write_config(path: str | Path, value: Any, codec: type[Codec]) -> None:
    """
    Encode a value and atomically replace the file at ``path`` with it.

    Args:
        path (str | Path): Target configuration file
        value (Any): Configuration value to store
        codec (type[Codec]): Codec used to encode the value

    Raises:
        BadConfigDirectory: If ``path`` is a filesystem root
        DirectoryCreationFailed: If the parent directory cannot be created
        ConfyError: The codec's encode error if the value cannot be encoded
        OpenConfigurationFileError: If the staging file cannot be created
        WriteConfigurationFileError: If writing, syncing or renaming fails
    """
    path = Path(path)
    config_dir = prepare_directory(path)

    # nothing on disk is opened for writing until encoding succeeded
    data = codec.encode(value).encode("utf-8")

    staging, f = open_staging_file(path)
    try:
        _write_all(f, data)
        _fsync_directory(config_dir)
        _replace(staging, path)
    except BaseException:
        _discard(staging)
        raise
    logger.debug("Stored %d bytes at %s", len(data), path)


def prepare_directory(path: Path) -> Path:
    """Create the parent directory of ``path`` and return it.

    Raises:
        BadConfigDirectory: If ``path`` has no parent
        DirectoryCreationFailed: If the directory cannot be created
    """
    config_dir = path.parent
    if config_dir == path:
        msg = f'"{path}" is a root or prefix'
        raise BadConfigDirectory(msg)
    try:
        config_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationFailed(e) from e
    return config_dir


def staging_path(path: Path, attempt: int) -> Path:
    """Return a staging candidate for ``path`` unique to this writer and moment."""
    stamp = f"{os.getpid()}_{threading.get_ident()}_{time.time_ns()}_{attempt}"
    return path.with_suffix(f".{stamp}")


def open_staging_file(path: Path) -> tuple[Path, IO[bytes]]:
    """Create a fresh staging file next to ``path``.

    Candidates that already exist are skipped; exclusive creation closes the
    window between the existence check and the open.

    Raises:
        OpenConfigurationFileError: If the staging file cannot be created
    """
    attempt = 0
    while True:
        attempt += 1
        candidate = staging_path(path, attempt)
        if candidate.exists():
            continue
        try:
            f = open(candidate, "xb")  # noqa: SIM115
        except FileExistsError:
            continue
        except OSError as e:
            raise OpenConfigurationFileError(e) from e
        logger.debug("Staging %s via %s", path, candidate.name)
        return candidate, f


def _write_all(f: IO[bytes], data: bytes) -> None:
    try:
        with f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
    except OSError as e:
        raise WriteConfigurationFileError(e) from e


def _fsync_directory(directory: Path) -> None:
    # directories cannot be opened for syncing on Windows
    if os.name == "nt":
        return
    try:
        fd = os.open(directory, os.O_RDONLY | getattr(os, "O_DIRECTORY", 0))
        try:
            os.fsync(fd)
        finally:
            os.close(fd)
    except OSError as e:
        raise WriteConfigurationFileError(e) from e


def _replace(staging: Path, path: Path) -> None:
    try:
        os.replace(staging, path)
    except OSError as e:
        raise WriteConfigurationFileError(e) from e


def _discard(staging: Path) -> None:
    try:
        staging.unlink(missing_ok=True)
    except OSError as e:
        # the original failure is what the caller needs to see
        logger.debug("Could not remove staging file %s: %s", staging, e)
