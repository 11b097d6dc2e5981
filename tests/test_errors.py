"""Tests for the ComponentError hierarchy."""

from __future__ import annotations

import pytest

from chat_components.errors import (
    ComponentError,
    ComponentSyntaxError,
    DepthExceededError,
    SchemaMismatchError,
    TypeMismatchError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls",
        [ComponentSyntaxError, SchemaMismatchError, TypeMismatchError],
    )
    def test_subclasses_component_error(self, cls: type[ComponentError]) -> None:
        assert issubclass(cls, ComponentError)

    def test_depth_exceeded_is_component_error(self) -> None:
        assert isinstance(DepthExceededError(8), ComponentError)

    def test_component_error_is_value_error(self) -> None:
        assert issubclass(ComponentError, ValueError)

    def test_kinds_are_distinct(self) -> None:
        assert not issubclass(SchemaMismatchError, TypeMismatchError)
        assert not issubclass(TypeMismatchError, SchemaMismatchError)


class TestMessages:
    def test_root_error_has_no_location(self) -> None:
        err = SchemaMismatchError("no shape")
        assert str(err) == "no shape"
        assert err.path == ""
        assert err.message == "no shape"

    def test_nested_error_names_path(self) -> None:
        err = TypeMismatchError("'bold' must be a boolean", "/extra/0/bold")
        assert str(err) == "at '/extra/0/bold': 'bold' must be a boolean"

    def test_depth_exceeded(self) -> None:
        err = DepthExceededError(4, "/with/0")
        assert err.max_depth == 4
        assert err.path == "/with/0"
        assert "max_depth=4" in str(err)

    def test_syntax_error_location(self) -> None:
        err = ComponentSyntaxError("invalid JSON: Expecting value", lineno=2, colno=7)
        assert err.lineno == 2
        assert err.colno == 7
        assert str(err) == "invalid JSON: Expecting value (line 2, column 7)"

    def test_syntax_error_without_location(self) -> None:
        err = ComponentSyntaxError("invalid JSON: nesting too deep")
        assert err.lineno is None
        assert str(err) == "invalid JSON: nesting too deep"
