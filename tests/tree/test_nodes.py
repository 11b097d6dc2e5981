"""Tests for the component node dataclasses and the NodeKind StrEnum.

Verifies:
- NodeKind has exactly 5 members with lowercase string values (StrEnum property)
- Every node class exposes its kind as a class attribute
- Attributes defaults are all absent (None), and extra=None differs from extra=()
- Nodes are immutable and compare by value
- Each node instance gets an independent default Attributes record
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from chat_components.tree.events import ClickAction, ClickEvent, HoverAction, HoverEvent
from chat_components.tree.nodes import (
    Attributes,
    KeybindNode,
    MixedString,
    NodeKind,
    RawString,
    ScoreNode,
    SelectorNode,
    TranslationNode,
)


class TestNodeKind:
    """Tests for the NodeKind StrEnum."""

    def test_has_exactly_five_members(self) -> None:
        assert len(NodeKind) == 5

    def test_members_are_str_instances(self) -> None:
        for member in NodeKind:
            assert isinstance(member, str), f"{member!r} is not a str instance"

    def test_values_are_lowercased(self) -> None:
        assert NodeKind.STRING == "string"
        assert NodeKind.TRANSLATION == "translation"
        assert NodeKind.KEYBIND == "keybind"
        assert NodeKind.SCORE == "score"
        assert NodeKind.SELECTOR == "selector"

    def test_declaration_order_is_resolution_priority(self) -> None:
        assert list(NodeKind) == [
            NodeKind.STRING,
            NodeKind.TRANSLATION,
            NodeKind.KEYBIND,
            NodeKind.SCORE,
            NodeKind.SELECTOR,
        ]


class TestNodeKindAttribute:
    """Every node class carries its NodeKind as a class attribute."""

    @pytest.mark.parametrize(
        ("node", "kind"),
        [
            (RawString("a"), NodeKind.STRING),
            (MixedString("a"), NodeKind.STRING),
            (TranslationNode("k"), NodeKind.TRANSLATION),
            (KeybindNode("key.jump"), NodeKind.KEYBIND),
            (ScoreNode({"name": "@p", "objective": "kills"}), NodeKind.SCORE),
            (SelectorNode("@a"), NodeKind.SELECTOR),
        ],
    )
    def test_kind(self, node: object, kind: NodeKind) -> None:
        assert node.kind is kind  # type: ignore[attr-defined]

    def test_kind_is_not_a_field(self) -> None:
        # kind is a ClassVar, so it is not part of the constructor or repr
        assert "kind" not in repr(KeybindNode("key.jump"))


class TestAttributes:
    """Tests for the Attributes record."""

    def test_defaults_are_all_absent(self) -> None:
        attrs = Attributes()
        assert attrs.bold is None
        assert attrs.italic is None
        assert attrs.underlined is None
        assert attrs.strikethrough is None
        assert attrs.obfuscated is None
        assert attrs.color is None
        assert attrs.insertion is None
        assert attrs.click_event is None
        assert attrs.hover_event is None
        assert attrs.extra is None

    def test_absent_extra_differs_from_empty_extra(self) -> None:
        assert Attributes() != Attributes(extra=())

    def test_is_frozen(self) -> None:
        attrs = Attributes(bold=True)
        with pytest.raises(FrozenInstanceError):
            attrs.bold = False  # type: ignore[misc]

    def test_carries_events(self) -> None:
        click = ClickEvent(ClickAction.OPEN_URL, "https://example.com")
        hover = HoverEvent(HoverAction.SHOW_TEXT, RawString("tip"))
        attrs = Attributes(click_event=click, hover_event=hover)
        assert attrs.click_event == click
        assert attrs.hover_event is not None
        assert attrs.hover_event.value == RawString("tip")


class TestNodes:
    """Construction, defaults, equality and immutability of node dataclasses."""

    def test_mixed_string_default_attributes(self) -> None:
        assert MixedString("a").attributes == Attributes()

    def test_default_attributes_are_independent_instances(self) -> None:
        a = KeybindNode("key.jump")
        b = KeybindNode("key.jump")
        assert a.attributes is not b.attributes
        assert a == b

    def test_translation_defaults_to_no_arguments(self) -> None:
        node = TranslationNode("chat.type.text")
        assert node.with_ == ()
        assert node.attributes == Attributes()

    def test_raw_and_mixed_with_same_text_are_different(self) -> None:
        assert RawString("a") != MixedString("a")

    def test_equality_is_structural(self) -> None:
        a = TranslationNode("k", (RawString("x"),), Attributes(color="red"))
        b = TranslationNode("k", (RawString("x"),), Attributes(color="red"))
        assert a == b

    def test_argument_order_matters_for_equality(self) -> None:
        a = TranslationNode("k", (RawString("x"), RawString("y")))
        b = TranslationNode("k", (RawString("y"), RawString("x")))
        assert a != b

    def test_nodes_are_frozen(self) -> None:
        node = MixedString("a")
        with pytest.raises(FrozenInstanceError):
            node.text = "b"  # type: ignore[misc]

    def test_score_value_is_kept_verbatim(self) -> None:
        score = {"name": "@p", "objective": "kills", "value": "7"}
        assert ScoreNode(score).score is score
