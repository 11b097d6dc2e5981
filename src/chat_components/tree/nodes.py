"""Component node dataclasses and the NodeKind StrEnum.

Provides the immutable tree types produced by NodeResolver and consumed by the
Renderer and the encoder.  ``Component`` is a closed union: code that
dispatches over it uses ``match`` with ``assert_never`` so that adding a node
kind is a visible change at every dispatch site.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any, ClassVar, TypeAlias

from chat_components.tree.events import ClickEvent, HoverEvent

__all__ = [
    "Attributes",
    "Component",
    "KeybindNode",
    "MixedString",
    "NodeKind",
    "RawString",
    "ScoreNode",
    "SelectorNode",
    "StringNode",
    "TranslationNode",
]


class NodeKind(StrEnum):
    """Enumeration of the five component kinds, in resolution priority order.

    - STRING      -> "string"      : literal text (raw or with attributes)
    - TRANSLATION -> "translation" : translation key plus arguments
    - KEYBIND     -> "keybind"     : keybind identifier
    - SCORE       -> "score"       : opaque scoreboard reference
    - SELECTOR    -> "selector"    : opaque entity selector
    """

    STRING = auto()
    TRANSLATION = auto()
    KEYBIND = auto()
    SCORE = auto()
    SELECTOR = auto()


@dataclass(frozen=True, slots=True)
class Attributes:
    """Formatting and interactivity fields shared by every non-raw node.

    Every field is independently optional; ``None`` means the key was absent
    from the document.  Attributes are never inherited: an ``extra`` child or
    a ``with`` argument carries only its own.

    Attributes:
        bold, italic, underlined, strikethrough, obfuscated: Style flags.
        color:       Color name (e.g. "yellow") or hex string, kept verbatim.
        insertion:   Text inserted into the chat box on shift-click.
        click_event: Action performed on click.
        hover_event: Tooltip shown on hover.
        extra:       Child components rendered after the node's own content,
                     in stored order.  ``()`` and ``None`` are distinct.
    """

    bold: bool | None = None
    italic: bool | None = None
    underlined: bool | None = None
    strikethrough: bool | None = None
    obfuscated: bool | None = None
    color: str | None = None
    insertion: str | None = None
    click_event: ClickEvent | None = None
    hover_event: HoverEvent | None = None
    extra: tuple[Component, ...] | None = None


@dataclass(frozen=True, slots=True)
class RawString:
    """A bare JSON string: text only, no attributes, no children."""

    kind: ClassVar[NodeKind] = NodeKind.STRING

    text: str


@dataclass(frozen=True, slots=True)
class MixedString:
    """A ``{"text": ...}`` object: text plus attributes."""

    kind: ClassVar[NodeKind] = NodeKind.STRING

    text: str
    attributes: Attributes = field(default_factory=Attributes)


@dataclass(frozen=True, slots=True)
class TranslationNode:
    """A translation key with its ordered argument components.

    The key is not looked up in any locale; rendering shows it bracketed.
    """

    kind: ClassVar[NodeKind] = NodeKind.TRANSLATION

    translate: str
    with_: tuple[Component, ...] = ()
    attributes: Attributes = field(default_factory=Attributes)


@dataclass(frozen=True, slots=True)
class KeybindNode:
    """A keybind identifier such as ``key.jump``."""

    kind: ClassVar[NodeKind] = NodeKind.KEYBIND

    keybind: str
    attributes: Attributes = field(default_factory=Attributes)


@dataclass(frozen=True, slots=True)
class ScoreNode:
    """A scoreboard reference.  ``score`` is the untouched JSON value."""

    kind: ClassVar[NodeKind] = NodeKind.SCORE

    score: Any
    attributes: Attributes = field(default_factory=Attributes)


@dataclass(frozen=True, slots=True)
class SelectorNode:
    """An entity selector reference.  ``selector`` is the untouched JSON value."""

    kind: ClassVar[NodeKind] = NodeKind.SELECTOR

    selector: Any
    attributes: Attributes = field(default_factory=Attributes)


StringNode: TypeAlias = RawString | MixedString
Component: TypeAlias = (
    RawString | MixedString | TranslationNode | KeybindNode | ScoreNode | SelectorNode
)
