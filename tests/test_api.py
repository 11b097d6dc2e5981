"""Unit tests for the public API functions: parse, resolve, render, to_document."""

from __future__ import annotations

import pytest

from chat_components import (
    ChatConfig,
    ChatMessage,
    ComponentError,
    OpaqueRendering,
    SchemaMismatchError,
    parse,
    render,
    resolve,
    to_document,
)
from chat_components.tree import MixedString, RawString, TranslationNode


class TestParse:
    def test_returns_chat_message(self) -> None:
        msg = parse('{"translate":"chat.type.text","with":["Steve","hi"]}')
        assert isinstance(msg, ChatMessage)
        assert msg.text == "[chat.type.text] Steve hi"

    def test_config_passthrough(self) -> None:
        config = ChatConfig(opaque_rendering=OpaqueRendering.PLACEHOLDER)
        assert parse('{"selector":"@p"}', config=config).text == "<selector:@p>"

    def test_no_state_between_calls(self) -> None:
        raw = '{"text":"a"}'
        first = parse(raw)
        second = parse(raw)
        assert first == second
        assert first is not second

    def test_errors_share_a_base_class(self) -> None:
        with pytest.raises(ComponentError):
            parse("{}")
        with pytest.raises(ComponentError):
            parse("not json")


class TestResolveAndRender:
    def test_resolve(self) -> None:
        assert resolve("hi") == RawString("hi")
        assert resolve({"text": "hi"}) == MixedString("hi")

    def test_resolve_rejects_empty_object(self) -> None:
        with pytest.raises(SchemaMismatchError):
            resolve({})

    def test_render(self) -> None:
        node = TranslationNode("k", (RawString("a"), RawString("b")))
        assert render(node) == "[k] a b"

    def test_render_twice_is_identical(self) -> None:
        node = resolve({"text": "a", "extra": [{"translate": "b", "with": ["c"]}]})
        assert render(node) == render(node) == "a[b] c"

    def test_to_document_inverts_resolve(self) -> None:
        doc = {"translate": "k", "with": [{"text": "a", "italic": True}]}
        assert to_document(resolve(doc)) == doc
