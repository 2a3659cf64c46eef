"""Tests for config value conversions."""

# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from confstash.model import default_of, from_mapping, to_mapping


@dataclass
class Window:
    width: int = 800
    height: int = 600


@dataclass
class AppConfig:
    name: str = "demo"
    window: Window = field(default_factory=Window)
    tags: list[str] = field(default_factory=list)


class Hooked:
    def __init__(self, value: int = 0) -> None:
        self.value = value

    def to_dict(self):
        return {"v": self.value}

    @classmethod
    def from_dict(cls, data):
        return cls(value=data["v"])


class Plain:
    def __init__(self, host: str = "localhost", port: int = 80) -> None:
        self.host = host
        self.port = port


class TestToMapping:
    """Test suite for turning values into mappings."""

    def test_dataclass_is_converted_recursively(self):
        """Test nested dataclasses become nested dicts."""
        cfg = AppConfig(name="x", window=Window(1, 2), tags=["a"])
        assert to_mapping(cfg) == {"name": "x", "window": {"width": 1, "height": 2}, "tags": ["a"]}

    def test_to_dict_hook_wins(self):
        """Test a to_dict method is used when present."""
        assert to_mapping(Hooked(3)) == {"v": 3}

    def test_mapping_is_copied(self):
        """Test plain mappings pass through as dicts."""
        data = {"a": 1}
        result = to_mapping(data)
        assert result == data
        assert result is not data

    def test_unsupported_value_raises(self):
        """Test values with no mapping form are rejected."""
        with pytest.raises(TypeError, match="cannot serialize value of type Plain"):
            to_mapping(Plain())

    def test_hook_must_return_mapping(self):
        """Test a to_dict hook returning a non-mapping is rejected."""

        class Bad:
            def to_dict(self):
                return [1, 2]

        with pytest.raises(TypeError, match="must serialize to a mapping"):
            to_mapping(Bad())


class TestFromMapping:
    """Test suite for rebuilding typed values."""

    def test_nested_dataclass_rebuilt(self):
        """Test nested tables become nested dataclasses."""
        cfg = from_mapping(AppConfig, {"name": "x", "window": {"width": 1, "height": 2}})
        assert cfg == AppConfig(name="x", window=Window(1, 2))

    def test_missing_fields_use_defaults(self):
        """Test absent keys fall back to field defaults."""
        assert from_mapping(AppConfig, {}) == AppConfig()

    def test_unknown_keys_ignored(self):
        """Test keys without a matching field are dropped."""
        assert from_mapping(Window, {"width": 5, "depth": 9}) == Window(width=5)

    def test_missing_required_field_raises(self):
        """Test dataclasses without defaults need every field."""

        @dataclass
        class Required:
            token: str

        with pytest.raises(TypeError):
            from_mapping(Required, {})

    def test_from_dict_hook(self):
        """Test a from_dict classmethod is used when present."""
        assert from_mapping(Hooked, {"v": 7}).value == 7

    def test_mapping_type(self):
        """Test dict targets receive the document as-is."""
        assert from_mapping(dict, {"a": {"b": 1}}) == {"a": {"b": 1}}

    def test_keyword_constructor(self):
        """Test other types receive keys as keyword arguments."""
        plain = from_mapping(Plain, {"host": "example.org", "port": 8080})
        assert (plain.host, plain.port) == ("example.org", 8080)

    def test_non_mapping_document_raises(self):
        """Test a scalar document root is rejected."""
        with pytest.raises(TypeError, match="expected a mapping"):
            from_mapping(AppConfig, ["not", "a", "table"])


def test_default_of_calls_type():
    """Test defaults come from the no-argument constructor."""
    assert default_of(AppConfig) == AppConfig()
    assert default_of(dict) == {}


@dataclass
class Plugin:
    name: str = ""
    enabled: bool = True


@dataclass
class Extended:
    window: Window | None = None
    plugins: list[Plugin] = field(default_factory=list)


@dataclass
class Dangling:
    inner: MissingType | None = None  # noqa: F821


class TestNestedHints:
    """Test suite for nested dataclasses behind container hints."""

    def test_optional_nested_dataclass_rebuilt(self):
        """Test an ``Inner | None`` field is rebuilt from its table."""
        cfg = from_mapping(Extended, {"window": {"width": 3, "height": 4}})
        assert cfg.window == Window(3, 4)

    def test_optional_nested_absent_stays_none(self):
        """Test an omitted optional field keeps its None default."""
        assert from_mapping(Extended, {}).window is None

    def test_list_of_dataclasses_rebuilt(self):
        """Test each table in a list field becomes a dataclass."""
        cfg = from_mapping(Extended, {"plugins": [{"name": "a"}, {"name": "b", "enabled": False}]})
        assert cfg.plugins == [Plugin("a"), Plugin("b", enabled=False)]

    def test_round_trip_keeps_shape(self):
        """Test to_mapping then from_mapping gives back an equal value."""
        cfg = Extended(window=Window(1, 2), plugins=[Plugin("x")])
        assert from_mapping(Extended, to_mapping(cfg)) == cfg

    def test_unresolvable_hint_raises(self):
        """Test field types that cannot be resolved are an error, not a dict."""
        with pytest.raises(TypeError, match="cannot resolve field types of Dangling"):
            from_mapping(Dangling, {"inner": {"a": 1}})
