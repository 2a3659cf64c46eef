# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Reading configuration files."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

from confstash.errors import GeneralLoadError, ReadConfigurationFileError
from confstash.logging import get_logger

if TYPE_CHECKING:
    from confstash.codecs.base import Codec

T = TypeVar("T")

logger = get_logger(__name__)


def read_config(path: str | Path, config_type: type[T], codec: type[Codec]) -> T:
    """
    Read and decode a configuration file.

    A missing file is reported like any other open failure; callers that
    want a default on absence check ``isinstance(err.cause, FileNotFoundError)``.

    Args:
        path (str | Path): Configuration file to read
        config_type (type[T]): Type to decode the document into
        codec (type[Codec]): Codec of the document

    Returns:
        T: The decoded configuration value

    Raises:
        GeneralLoadError: If the file cannot be opened
        ReadConfigurationFileError: If the file cannot be read as UTF-8 text
        ConfyError: The codec's decode error if the document is invalid
    """
    path = Path(path)
    try:
        f = open(path, "rb")  # noqa: SIM115
    except OSError as e:
        raise GeneralLoadError(e) from e

    with f:
        try:
            text = f.read().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ReadConfigurationFileError(e) from e

    logger.debug("Read %d characters from %s", len(text), path)
    return codec.decode(text, config_type)
