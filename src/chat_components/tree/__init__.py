"""Tree subpackage for the chat component model.

Re-exports the public API for the tree module:
- Component and its node dataclasses (RawString, MixedString, TranslationNode,
  KeybindNode, ScoreNode, SelectorNode) plus the shared Attributes record
- NodeKind: StrEnum of the five component kinds
- ClickEvent / HoverEvent and their action enums
- NodeResolver: converts a decoded JSON document into a typed Component tree
- to_document: converts a Component tree back into a wire-format document
"""

from chat_components.tree.encoder import to_document
from chat_components.tree.events import ClickAction, ClickEvent, HoverAction, HoverEvent
from chat_components.tree.nodes import (
    Attributes,
    Component,
    KeybindNode,
    MixedString,
    NodeKind,
    RawString,
    ScoreNode,
    SelectorNode,
    StringNode,
    TranslationNode,
)
from chat_components.tree.resolver import JsonValue, NodeResolver

__all__ = [
    "Attributes",
    "ClickAction",
    "ClickEvent",
    "Component",
    "HoverAction",
    "HoverEvent",
    "JsonValue",
    "KeybindNode",
    "MixedString",
    "NodeKind",
    "NodeResolver",
    "RawString",
    "ScoreNode",
    "SelectorNode",
    "StringNode",
    "TranslationNode",
    "to_document",
]
