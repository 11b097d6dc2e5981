"""ChatConfig and OpaqueRendering for resolver and renderer configuration.

ChatConfig is a frozen (immutable) dataclass holding the parameters shared by
the resolver and the renderer.  OpaqueRendering selects how nodes whose value
cannot be resolved without live game state (keybind, score, selector) are
turned into text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["DEFAULT_MAX_DEPTH", "MAX_DEPTH_LIMIT", "ChatConfig", "OpaqueRendering"]

DEFAULT_MAX_DEPTH = 64

# Resolution costs about three interpreter frames per nesting level and
# rendering about two (opaque nodes are dumped without recursion); 128 levels
# keeps both under the default recursion limit of 1000.
MAX_DEPTH_LIMIT = 128


class OpaqueRendering(StrEnum):
    """How keybind, score and selector nodes are rendered.

    - DEBUG:       The node's structural dump (the text of its ``repr``).
    - PLACEHOLDER: A short tag such as ``<keybind:key.jump>``, followed by the
                   node's ``extra`` children.
    """

    DEBUG = auto()
    PLACEHOLDER = auto()


@dataclass(frozen=True, slots=True)
class ChatConfig:
    """Immutable configuration for resolving and rendering chat components.

    Attributes:
        max_depth: Deepest component nesting accepted by the resolver, counting
            the root as depth 0.  Each ``extra`` child, ``with`` argument and
            hover event value adds one level.  Must be in [1, 128].
        opaque_rendering: Rendering mode for keybind/score/selector nodes.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    opaque_rendering: OpaqueRendering = OpaqueRendering.DEBUG

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            msg = f"max_depth must be an int, got {type(self.max_depth).__name__}"
            raise ValueError(msg)
        if not 1 <= self.max_depth <= MAX_DEPTH_LIMIT:
            msg = f"max_depth must be in [1, {MAX_DEPTH_LIMIT}], got {self.max_depth}"
            raise ValueError(msg)
        if not isinstance(self.opaque_rendering, OpaqueRendering):
            msg = (
                "opaque_rendering must be an OpaqueRendering, "
                f"got {self.opaque_rendering!r}"
            )
            raise ValueError(msg)
