"""Tests for the error hierarchy."""

# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
import pytest

from confstash import errors
from confstash.errors import (
    BadConfigDirectory,
    ConfyError,
    GeneralLoadError,
    SerializeTomlError,
    WriteConfigurationFileError,
)


class TestConfyError:
    """Test suite for error rendering and causes."""

    def test_renders_kind_and_cause(self):
        """Test errors render as '<kind>: <cause>'."""
        cause = FileNotFoundError(2, "No such file or directory")
        err = GeneralLoadError(cause)
        assert err.cause is cause
        assert str(err) == f"Failed to load configuration file: {cause}"

    def test_renders_kind_without_cause(self):
        """Test errors without a cause render only their kind."""
        assert str(WriteConfigurationFileError()) == "Failed to write configuration file"

    def test_bad_config_directory_carries_reason(self):
        """Test the directory error renders its diagnostic."""
        err = BadConfigDirectory('"/" is a root or prefix')
        assert err.reason == '"/" is a root or prefix'
        assert err.cause is None
        assert str(err) == 'Bad configuration directory: "/" is a root or prefix'

    def test_serialize_message_names_format(self):
        """Test serialization errors name their format."""
        err = SerializeTomlError(TypeError("boom"))
        assert str(err) == "Failed to serialize configuration data into TOML: boom"

    def test_hierarchy_is_flat(self):
        """Test every exported error derives directly from ConfyError."""
        for name in errors.__all__:
            cls = getattr(errors, name)
            if cls is ConfyError:
                continue
            assert cls.__bases__ == (ConfyError,), name

    def test_catchable_as_base(self):
        """Test callers can catch the whole family at once."""
        with pytest.raises(ConfyError):
            raise GeneralLoadError(OSError("nope"))
