"""Predicates over resolved chat trees used by client read loops.

A vanilla server echoes every player chat line back to all players, the
sender included, as ``{"translate": "chat.type.text", "with": [<sender>,
<message>]}`` where the sender is a text object (it carries the click and
hover events for the player name).  A client that already printed what its
user typed uses ``is_own_echo`` to skip the echo.
"""

from __future__ import annotations

from chat_components.tree.nodes import Component, MixedString, TranslationNode

__all__ = ["PLAYER_CHAT_KEY", "chat_sender", "is_own_echo", "is_player_chat"]

PLAYER_CHAT_KEY = "chat.type.text"


def chat_sender(component: Component) -> str | None:
    """Return the sender name of a player chat message, or None for anything else."""
    if not isinstance(component, TranslationNode):
        return None
    if component.translate != PLAYER_CHAT_KEY or not component.with_:
        return None
    sender = component.with_[0]
    if not isinstance(sender, MixedString):
        return None
    return sender.text


def is_player_chat(component: Component) -> bool:
    """Return True if ``component`` is a chat line sent by a player."""
    return chat_sender(component) is not None


def is_own_echo(component: Component, username: str) -> bool:
    """Return True if ``component`` is the server's echo of ``username``'s own chat."""
    return chat_sender(component) == username
