"""Tests for ghostlyzer.routing.params — converter validation."""

import pytest

from ghostlyzer.routing.params import CONVERTERS, format_param


class TestConverters:
    def test_all_types_registered(self) -> None:
        assert set(CONVERTERS) == {"str", "int", "float", "path"}

    def test_path_regex_matches_slashes(self) -> None:
        pattern, _ = CONVERTERS["path"]
        assert pattern == r".+"


class TestFormatParam:
    def test_str(self) -> None:
        assert format_param("hello", "str") == "hello"

    def test_str_rejects_slash(self) -> None:
        with pytest.raises(ValueError):
            format_param("a/b", "str")

    def test_int(self) -> None:
        assert format_param(42, "int") == "42"
        assert format_param("-7", "int") == "-7"

    def test_int_rejects_float(self) -> None:
        with pytest.raises(ValueError):
            format_param(3.5, "int")

    def test_bool_rejected(self) -> None:
        with pytest.raises(ValueError):
            format_param(True, "int")

    def test_float(self) -> None:
        assert format_param(3.14, "float") == "3.14"
        assert format_param(10, "float") == "10"

    def test_path_keeps_slashes(self) -> None:
        assert format_param("docs/api/v2", "path") == "docs/api/v2"

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(KeyError):
            format_param("value", "uuid")
