"""Test configuration and global fixtures for confstash tests."""

# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
import pytest

from confstash import EXTENSION


@pytest.fixture
def config_path(tmp_path):
    """Path shaped like ``get_configuration_file_path("example-app", "example-config")``."""
    return tmp_path / "example-app" / f"example-config.{EXTENSION}"


@pytest.fixture
def isolated_home(monkeypatch, tmp_path):
    """Point HOME and XDG_CONFIG_HOME into the temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    return home


@pytest.fixture
def create_config_file(tmp_path):
    """Create a file with raw content under the temporary directory."""

    def _create_file(content, filename=f"config.{EXTENSION}"):
        path = tmp_path / filename
        path.write_bytes(content.encode("utf-8") if isinstance(content, str) else content)
        return path

    return _create_file
