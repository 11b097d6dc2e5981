"""Public API functions for chat-components.

This module provides the user-facing functions: parse, resolve, render and
to_document.  Each call creates a fresh ChatParser to guarantee zero global
state (and no shared cache) between calls; long-running clients that want
caching should hold a ChatParser instance instead.
"""

from __future__ import annotations

from typing import Any

from chat_components.config import ChatConfig
from chat_components.parser import ChatParser
from chat_components.result import ChatMessage
from chat_components.tree.encoder import to_document
from chat_components.tree.nodes import Component

__all__ = ["parse", "render", "resolve", "to_document"]


def parse(raw: str, config: ChatConfig | None = None) -> ChatMessage:
    """Decode, resolve and render one serialized chat document.

    Args:
        raw:    JSON text of a chat component.
        config: Resolver/renderer parameters.  Defaults to ``ChatConfig()`` when None.

    Returns:
        A ``ChatMessage`` holding the raw text, the resolved tree and its
        rendered text.

    Raises:
        ComponentSyntaxError: If ``raw`` is not a str of valid JSON.
        SchemaMismatchError, TypeMismatchError, DepthExceededError:
            If the document is not a valid component tree.
    """
    return ChatParser(config=config).parse(raw)


def resolve(document: Any, config: ChatConfig | None = None) -> Component:
    """Resolve an already-decoded JSON value into a Component tree.

    Args:
        document: A JSON string or object as produced by ``json.loads``.
        config:   Resolver parameters.  Defaults to ``ChatConfig()`` when None.

    Returns:
        The root Component.
    """
    return ChatParser(config=config).resolve(document)


def render(component: Component, config: ChatConfig | None = None) -> str:
    """Render a Component tree to flat text.

    Args:
        component: Root of the tree to render.
        config:    Renderer parameters.  Defaults to ``ChatConfig()`` when None.

    Returns:
        The concatenated text of the tree.
    """
    return ChatParser(config=config).render(component)
