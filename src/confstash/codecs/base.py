# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Base class and interface for configuration codecs."""

from __future__ import annotations

import abc
from typing import Any, ClassVar, TypeVar

from confstash.errors import ConfyError
from confstash.model import from_mapping, to_mapping

T = TypeVar("T")


class Codec(abc.ABC):
    """A textual serialization format for configuration values.

    Subclasses supply the parse/dump primitives of a concrete format and the
    error types raised for it. Codecs hold no state; all methods are
    classmethods so the codec class itself is what the facade binds to.
    """

    #: Build feature that selects this codec.
    name: ClassVar[str]
    #: File extension of configuration files written by this codec.
    extension: ClassVar[str]
    #: Raised when a document cannot be decoded.
    decode_error: ClassVar[type[ConfyError]]
    #: Raised when a value cannot be encoded.
    encode_error: ClassVar[type[ConfyError]]

    @classmethod
    @abc.abstractmethod
    def dumps(cls, data: dict[str, Any]) -> str:
        """Render a plain mapping as a document."""

    @classmethod
    @abc.abstractmethod
    def loads(cls, text: str) -> Any:
        """Parse a whole document into plain data."""

    @classmethod
    def encode(cls, value: Any) -> str:
        """Encode a config value as human-readable text.

        Raises:
            ConfyError: The codec's ``encode_error`` wrapping the failure.
        """
        try:
            return cls.dumps(to_mapping(value))
        except Exception as e:  # caller hooks may raise anything
            raise cls.encode_error(e) from e

    @classmethod
    def decode(cls, text: str, config_type: type[T]) -> T:
        """Decode a full document into an instance of ``config_type``.

        Raises:
            ConfyError: The codec's ``decode_error`` wrapping the failure.
        """
        try:
            return from_mapping(config_type, cls.loads(text))
        except Exception as e:  # parser and constructor errors alike
            raise cls.decode_error(e) from e
