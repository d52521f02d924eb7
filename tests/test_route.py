"""Tests for ghostlyzer.routing.route — PathSegment, RouteTemplate, parse_path."""

import pytest

from ghostlyzer.routing.route import PathSegment, RouteTemplate, parse_path


class TestPathSegment:
    def test_static(self) -> None:
        seg = PathSegment(value="users")
        assert seg.value == "users"
        assert seg.is_param is False
        assert seg.param_name is None
        assert seg.param_type == "str"

    def test_frozen(self) -> None:
        seg = PathSegment(value="users")
        with pytest.raises(AttributeError):
            seg.value = "other"  # type: ignore[misc]


class TestParsePath:
    def test_static_path(self) -> None:
        assert parse_path("/users/list") == [PathSegment("users"), PathSegment("list")]

    def test_root(self) -> None:
        assert parse_path("/") == []

    def test_untyped_param(self) -> None:
        (seg,) = parse_path("/{name}")
        assert seg.is_param is True
        assert seg.param_name == "name"
        assert seg.param_type == "str"

    def test_typed_param(self) -> None:
        _, seg = parse_path("/users/{id:int}")
        assert seg.param_name == "id"
        assert seg.param_type == "int"

    def test_transformer_constraint(self) -> None:
        (seg,) = parse_path("/{action:slugify}")
        assert seg.param_name == "action"
        assert seg.param_type == "slugify"

    def test_ignores_empty_parts(self) -> None:
        assert parse_path("//users//") == [PathSegment("users")]


class TestRouteTemplate:
    def test_param_names(self) -> None:
        template = RouteTemplate(
            name="user",
            path="/users/{id:int}/{tab}",
            segments=tuple(parse_path("/users/{id:int}/{tab}")),
        )
        assert template.param_names == ("id", "tab")

    def test_malformed_placeholder_is_literal(self) -> None:
        (seg,) = parse_path("/{a}{b}")
        assert seg.is_param is False
        assert seg.param_name is None
        assert seg.value == "{a}{b}"
