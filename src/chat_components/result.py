"""ChatMessage dataclass for parse output.

This module provides the result type returned by parse() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from chat_components.tree.nodes import Component

__all__ = ["ChatMessage"]


@dataclass(frozen=True, slots=True)
class ChatMessage:
    """Result of a parse() call.

    Attributes:
        raw:       The serialized JSON text exactly as received.
        component: Root of the resolved tree, kept for presentation layers
                   that want colors, styles or click/hover events.
        text:      The rendered flat text of ``component``.
    """

    raw: str
    component: Component
    text: str

    def __str__(self) -> str:
        return self.text
