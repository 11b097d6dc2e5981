"""Renderer: flattens a Component tree into display text.

Rendering rules:
- RawString     -> its text.
- MixedString   -> its text, then each ``extra`` child in order.
- Translation   -> "[key]", then " " + each ``with`` argument in order, then
                   each ``extra`` child.  No locale lookup happens: the key is
                   a placeholder for the translated pattern.
- Keybind, Score, Selector -> their structural dump (``repr`` text) by default, or
                   a ``<kind:value>`` placeholder plus ``extra`` children under
                   ``OpaqueRendering.PLACEHOLDER``.  They are never dropped.

Style flags and click/hover events are never consulted.  Rendering is a pure
function of the tree and the config.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, assert_never

from chat_components.config import ChatConfig, OpaqueRendering
from chat_components.tree.nodes import (
    Attributes,
    Component,
    KeybindNode,
    MixedString,
    RawString,
    ScoreNode,
    SelectorNode,
    TranslationNode,
)

__all__ = ["Renderer"]


def _compact_json(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _structural_dump(value: Any) -> str:
    """Return the same text as ``repr(value)`` without recursing.

    Dataclass nodes, tuples, lists and dicts are expanded through an explicit
    stack, so hover chains and deep opaque JSON values cost no interpreter
    frames.  Every other value falls back to its own ``repr``.
    """
    parts: list[str] = []
    # (is_literal, item): literals are emitted as is, other items expanded
    stack: list[tuple[bool, Any]] = [(False, value)]
    while stack:
        literal, item = stack.pop()
        if literal:
            parts.append(item)
            continue

        pending: list[tuple[bool, Any]]
        if is_dataclass(item) and not isinstance(item, type):
            pending = [(True, f"{type(item).__qualname__}(")]
            shown = [f for f in fields(item) if f.repr]
            for idx, f in enumerate(shown):
                if idx:
                    pending.append((True, ", "))
                pending.append((True, f"{f.name}="))
                pending.append((False, getattr(item, f.name)))
            pending.append((True, ")"))
        elif isinstance(item, (tuple, list)):
            opener, closer = ("(", ")") if isinstance(item, tuple) else ("[", "]")
            if isinstance(item, tuple) and len(item) == 1:
                closer = ",)"
            pending = [(True, opener)]
            for idx, element in enumerate(item):
                if idx:
                    pending.append((True, ", "))
                pending.append((False, element))
            pending.append((True, closer))
        elif isinstance(item, dict):
            pending = [(True, "{")]
            for idx, (key, element) in enumerate(item.items()):
                if idx:
                    pending.append((True, ", "))
                pending.extend([(False, key), (True, ": "), (False, element)])
            pending.append((True, "}"))
        else:
            parts.append(repr(item))
            continue
        stack.extend(reversed(pending))
    return "".join(parts)


@dataclass
class Renderer:
    """Renders Component trees to plain text.

    Example::
        renderer = Renderer()
        renderer.render(TranslationNode("chat.type.text", (RawString("Steve"),)))
        # "[chat.type.text] Steve"
    """

    config: ChatConfig = field(default_factory=ChatConfig)

    def render(self, component: Component) -> str:
        """Return the flat text of ``component`` and all its descendants."""
        parts: list[str] = []
        self._render_into(component, parts)
        return "".join(parts)

    def _render_into(self, component: Component, parts: list[str]) -> None:
        match component:
            case RawString(text=text):
                parts.append(text)
            case MixedString(text=text, attributes=attributes):
                parts.append(text)
                self._render_extra(attributes, parts)
            case TranslationNode(translate=key, with_=args, attributes=attributes):
                parts.append(f"[{key}]")
                for arg in args:
                    parts.append(" ")
                    self._render_into(arg, parts)
                self._render_extra(attributes, parts)
            case KeybindNode() | ScoreNode() | SelectorNode():
                self._render_opaque(component, parts)
            case _:
                assert_never(component)

    def _render_extra(self, attributes: Attributes, parts: list[str]) -> None:
        if attributes.extra is None:
            return
        for child in attributes.extra:
            self._render_into(child, parts)

    def _render_opaque(
        self, node: KeybindNode | ScoreNode | SelectorNode, parts: list[str]
    ) -> None:
        """Render a node whose meaning depends on game state we do not have."""
        if self.config.opaque_rendering is OpaqueRendering.DEBUG:
            parts.append(_structural_dump(node))
            return

        match node:
            case KeybindNode(keybind=keybind):
                parts.append(f"<keybind:{keybind}>")
            case ScoreNode(score=score):
                parts.append(f"<score:{_compact_json(score)}>")
            case SelectorNode(selector=selector):
                shown = selector if isinstance(selector, str) else _compact_json(selector)
                parts.append(f"<selector:{shown}>")
            case _:
                assert_never(node)
        self._render_extra(node.attributes, parts)
