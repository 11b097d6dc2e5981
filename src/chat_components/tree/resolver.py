"""NodeResolver: converts a decoded JSON chat document into a Component tree.

Documents carry no discriminant tag, so the node kind is sniffed from the keys
that are present.  Kinds are tried in a fixed priority order (string,
translation, keybind, score, selector) and the first whose required keys are
present with valid types wins.  An object with both "text" and "translate"
is therefore a string node; "translate" is just an unrecognised key there.

JSON Pointer paths (RFC 6901) are built during traversal for error reporting:
- Root is "" (empty string)
- Each level appends "/{key_or_index}"
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from chat_components.config import ChatConfig
from chat_components.errors import (
    DepthExceededError,
    SchemaMismatchError,
    TypeMismatchError,
)
from chat_components.tree.events import ClickAction, ClickEvent, HoverAction, HoverEvent
from chat_components.tree.nodes import (
    Attributes,
    Component,
    KeybindNode,
    MixedString,
    RawString,
    ScoreNode,
    SelectorNode,
    StringNode,
    TranslationNode,
)

__all__ = ["JsonValue", "NodeResolver"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None

# Keys whose presence marks an object as a candidate for each kind
_REQUIRED_KEYS = ("text", "translate", "keybind", "score", "selector")

_STYLE_FLAGS = ("bold", "italic", "underlined", "strikethrough", "obfuscated")


def _type_name(value: Any) -> str:
    """Return the JSON name of a decoded value's type."""
    # bool before int: bool subclasses int
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "array"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (int, float)):
        return "number"
    if value is None:
        return "null"
    return type(value).__name__


def _is_string(doc: dict[str, Any]) -> bool:
    return isinstance(doc.get("text"), str)


def _is_translation(doc: dict[str, Any]) -> bool:
    return isinstance(doc.get("translate"), str) and isinstance(
        doc.get("with", []), list
    )


def _is_keybind(doc: dict[str, Any]) -> bool:
    return isinstance(doc.get("keybind"), str)


def _is_score(doc: dict[str, Any]) -> bool:
    return "score" in doc


def _is_selector(doc: dict[str, Any]) -> bool:
    return "selector" in doc


@dataclass
class NodeResolver:
    """Resolves decoded JSON documents into typed Component trees.

    Dispatch for objects walks ``_SHAPES``, an ordered tuple of
    (predicate, builder) pairs; the order is the tie-break between documents
    that satisfy more than one shape and must not change.

    Depth is counted per component: the root is depth 0, and every ``extra``
    child, ``with`` argument and hover value is one level deeper than its
    parent.  A component deeper than ``config.max_depth`` raises
    ``DepthExceededError`` before its contents are looked at.

    Example::
        resolver = NodeResolver()
        node = resolver.resolve({"text": "hi", "bold": True})
        # node: MixedString(text="hi", attributes=Attributes(bold=True))
    """

    config: ChatConfig = field(default_factory=ChatConfig)

    def resolve(self, document: JsonValue) -> Component:
        """Resolve a decoded JSON value into a Component.

        Args:
            document: A JSON string or object as produced by ``json.loads``.

        Returns:
            The root Component of the resolved tree.

        Raises:
            SchemaMismatchError: If an object matches no component shape.
            TypeMismatchError:   If a recognised key has the wrong value type.
            DepthExceededError:  If nesting exceeds ``config.max_depth``.
        """
        return self._resolve(document, "", 0)

    def _resolve(self, doc: Any, path: str, depth: int) -> Component:
        if depth > self.config.max_depth:
            raise DepthExceededError(self.config.max_depth, path)

        if isinstance(doc, str):
            return RawString(doc)

        if not isinstance(doc, dict):
            msg = f"expected a string or an object, got {_type_name(doc)}"
            raise TypeMismatchError(msg, path)

        for predicate, builder in _SHAPES:
            if predicate(doc):
                return builder(self, doc, path, depth)

        raise self._mismatch(doc, path)

    @staticmethod
    def _mismatch(doc: dict[str, Any], path: str) -> Exception:
        """Build the error for an object no shape accepted."""
        for key in _REQUIRED_KEYS:
            if key not in doc:
                continue
            if key == "translate" and isinstance(doc[key], str):
                msg = f"'with' must be an array, got {_type_name(doc['with'])}"
                return TypeMismatchError(msg, f"{path}/with")
            msg = f"{key!r} must be a string, got {_type_name(doc[key])}"
            return TypeMismatchError(msg, f"{path}/{key}")

        expected = ", ".join(repr(key) for key in _REQUIRED_KEYS)
        msg = f"object matches no component shape (expected one of: {expected})"
        return SchemaMismatchError(msg, path)

    # ------------------------------------------------------------------
    # Builders, one per node kind
    # ------------------------------------------------------------------

    def _build_string(self, doc: dict[str, Any], path: str, depth: int) -> Component:
        return MixedString(doc["text"], self._attributes(doc, path, depth))

    def _build_translation(
        self, doc: dict[str, Any], path: str, depth: int
    ) -> Component:
        args: list[Component] = []
        for idx, arg in enumerate(doc.get("with", [])):
            args.append(self._resolve(arg, f"{path}/with/{idx}", depth + 1))
        return TranslationNode(
            doc["translate"], tuple(args), self._attributes(doc, path, depth)
        )

    def _build_keybind(self, doc: dict[str, Any], path: str, depth: int) -> Component:
        return KeybindNode(doc["keybind"], self._attributes(doc, path, depth))

    def _build_score(self, doc: dict[str, Any], path: str, depth: int) -> Component:
        return ScoreNode(doc["score"], self._attributes(doc, path, depth))

    def _build_selector(
        self, doc: dict[str, Any], path: str, depth: int
    ) -> Component:
        return SelectorNode(doc["selector"], self._attributes(doc, path, depth))

    # ------------------------------------------------------------------
    # Attributes and events
    # ------------------------------------------------------------------

    def _attributes(self, doc: dict[str, Any], path: str, depth: int) -> Attributes:
        """Parse the recognised attribute keys of ``doc``; others are ignored."""
        flags: dict[str, bool | None] = {}
        for key in _STYLE_FLAGS:
            flags[key] = self._optional(doc, key, bool, "a boolean", path)

        color = self._optional(doc, "color", str, "a string", path)
        insertion = self._optional(doc, "insertion", str, "a string", path)

        click_event = None
        if doc.get("clickEvent") is not None:
            click_event = self._click_event(doc["clickEvent"], f"{path}/clickEvent")

        hover_event = None
        if doc.get("hoverEvent") is not None:
            hover_event = self._hover_event(
                doc["hoverEvent"], f"{path}/hoverEvent", depth
            )

        extra: tuple[Component, ...] | None = None
        raw_extra = doc.get("extra")
        if raw_extra is not None:
            if not isinstance(raw_extra, list):
                msg = f"'extra' must be an array, got {_type_name(raw_extra)}"
                raise TypeMismatchError(msg, f"{path}/extra")
            children: list[Component] = []
            for idx, child in enumerate(raw_extra):
                children.append(self._resolve(child, f"{path}/extra/{idx}", depth + 1))
            extra = tuple(children)

        return Attributes(
            **flags,
            color=color,
            insertion=insertion,
            click_event=click_event,
            hover_event=hover_event,
            extra=extra,
        )

    @staticmethod
    def _optional(
        doc: dict[str, Any], key: str, kind: type, expected: str, path: str
    ) -> Any:
        """Return ``doc[key]`` if present and of type ``kind``; None if absent or null."""
        value = doc.get(key)
        if value is None:
            return None
        if not isinstance(value, kind):
            msg = f"{key!r} must be {expected}, got {_type_name(value)}"
            raise TypeMismatchError(msg, f"{path}/{key}")
        return value

    @staticmethod
    def _event_parts(event: Any, path: str) -> tuple[str, Any]:
        """Validate the ``{"action": ..., "value": ...}`` envelope of an event."""
        if not isinstance(event, dict):
            msg = f"event must be an object, got {_type_name(event)}"
            raise TypeMismatchError(msg, path)
        for key in ("action", "value"):
            if key not in event:
                raise SchemaMismatchError(f"event is missing {key!r}", path)
        action = event["action"]
        if not isinstance(action, str):
            msg = f"'action' must be a string, got {_type_name(action)}"
            raise TypeMismatchError(msg, f"{path}/action")
        return action, event["value"]

    def _click_event(self, event: Any, path: str) -> ClickEvent:
        tag, value = self._event_parts(event, path)
        try:
            action = ClickAction(tag)
        except ValueError:
            raise SchemaMismatchError(f"unknown click action {tag!r}", path) from None

        if action is ClickAction.CHANGE_PAGE:
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                msg = f"change_page value must be a non-negative integer, got {value!r}"
                raise TypeMismatchError(msg, f"{path}/value")
        elif not isinstance(value, str):
            msg = f"{tag} value must be a string, got {_type_name(value)}"
            raise TypeMismatchError(msg, f"{path}/value")
        return ClickEvent(action, value)

    def _hover_event(self, event: Any, path: str, depth: int) -> HoverEvent:
        tag, value = self._event_parts(event, path)
        try:
            action = HoverAction(tag)
        except ValueError:
            raise SchemaMismatchError(f"unknown hover action {tag!r}", path) from None
        return HoverEvent(action, self._string_node(value, f"{path}/value", depth + 1))

    def _string_node(self, doc: Any, path: str, depth: int) -> StringNode:
        """Resolve a value that must be a string node (raw or ``{"text": ...}``)."""
        if depth > self.config.max_depth:
            raise DepthExceededError(self.config.max_depth, path)
        if isinstance(doc, str):
            return RawString(doc)
        if not isinstance(doc, dict):
            msg = f"expected a string or a text object, got {_type_name(doc)}"
            raise TypeMismatchError(msg, path)
        if "text" not in doc:
            raise SchemaMismatchError("text object is missing 'text'", path)
        if not _is_string(doc):
            msg = f"'text' must be a string, got {_type_name(doc['text'])}"
            raise TypeMismatchError(msg, f"{path}/text")
        return MixedString(doc["text"], self._attributes(doc, path, depth))


# Resolution priority; first matching predicate wins.
_SHAPES: tuple[
    tuple[Callable[[dict[str, Any]], bool], Callable[..., Component]], ...
] = (
    (_is_string, NodeResolver._build_string),
    (_is_translation, NodeResolver._build_translation),
    (_is_keybind, NodeResolver._build_keybind),
    (_is_score, NodeResolver._build_score),
    (_is_selector, NodeResolver._build_selector),
)
