"""Encoder: converts a Component tree back into a wire-format JSON document.

The inverse of NodeResolver.  ``RawString`` becomes a bare string; every
other node becomes an object holding its required key(s) followed by the
attributes that are present, under their wire names.  Absent attributes are
omitted, so ``resolve(to_document(node)) == node`` for any resolved tree.
"""

from __future__ import annotations

from typing import Any, assert_never

from chat_components.tree.events import ClickEvent, HoverEvent
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

__all__ = ["to_document"]

# Attribute field name -> wire key, in wire order
_SCALAR_FIELDS = (
    ("bold", "bold"),
    ("italic", "italic"),
    ("underlined", "underlined"),
    ("strikethrough", "strikethrough"),
    ("obfuscated", "obfuscated"),
    ("color", "color"),
    ("insertion", "insertion"),
)


def to_document(component: Component) -> Any:
    """Return the JSON-serializable wire document for ``component``.

    Args:
        component: Root of a component tree.

    Returns:
        A ``str`` for raw strings, a ``dict`` for every other node.
    """
    match component:
        case RawString(text=text):
            return text
        case MixedString(text=text, attributes=attributes):
            return _with_attributes({"text": text}, attributes)
        case TranslationNode(translate=key, with_=args, attributes=attributes):
            doc = {"translate": key, "with": [to_document(arg) for arg in args]}
            return _with_attributes(doc, attributes)
        case KeybindNode(keybind=keybind, attributes=attributes):
            return _with_attributes({"keybind": keybind}, attributes)
        case ScoreNode(score=score, attributes=attributes):
            return _with_attributes({"score": score}, attributes)
        case SelectorNode(selector=selector, attributes=attributes):
            return _with_attributes({"selector": selector}, attributes)
        case _:
            assert_never(component)


def _with_attributes(doc: dict[str, Any], attributes: Attributes) -> dict[str, Any]:
    for name, key in _SCALAR_FIELDS:
        value = getattr(attributes, name)
        if value is not None:
            doc[key] = value
    if attributes.click_event is not None:
        doc["clickEvent"] = _click_event(attributes.click_event)
    if attributes.hover_event is not None:
        doc["hoverEvent"] = _hover_event(attributes.hover_event)
    if attributes.extra is not None:
        doc["extra"] = [to_document(child) for child in attributes.extra]
    return doc


def _click_event(event: ClickEvent) -> dict[str, Any]:
    return {"action": str(event.action), "value": event.value}


def _hover_event(event: HoverEvent) -> dict[str, Any]:
    return {"action": str(event.action), "value": to_document(event.value)}
