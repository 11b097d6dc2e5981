"""Click and hover event types attached to chat components.

Events are interactivity metadata: a presentation layer may use them to make
text clickable or show a tooltip.  The renderer never looks at them.

On the wire both are objects of the form ``{"action": <tag>, "value": ...}``
where the action tag selects the variant and fixes the shape of ``value``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chat_components.tree.nodes import StringNode

__all__ = ["ClickAction", "ClickEvent", "HoverAction", "HoverEvent"]


class ClickAction(StrEnum):
    """Action tags of a click event (values are the wire tags).

    CHANGE_PAGE carries a non-negative page number; all others carry a string.
    """

    OPEN_URL = auto()
    OPEN_FILE = auto()
    RUN_COMMAND = auto()
    TWITCH_USER_INFO = auto()
    SUGGEST_COMMAND = auto()
    CHANGE_PAGE = auto()


class HoverAction(StrEnum):
    """Action tags of a hover event.  Every variant carries a string node."""

    SHOW_TEXT = auto()
    SHOW_ITEM = auto()
    SHOW_ENTITY = auto()
    SHOW_ACHIEVEMENT = auto()


@dataclass(frozen=True, slots=True)
class ClickEvent:
    """What happens when the player clicks the component.

    Attributes:
        action: Which click behaviour this is.
        value:  Page number (int) for CHANGE_PAGE, a string otherwise.
    """

    action: ClickAction
    value: str | int


@dataclass(frozen=True, slots=True)
class HoverEvent:
    """What is shown when the player hovers over the component."""

    action: HoverAction
    value: StringNode
