"""ChatParser: orchestrator that wires JSON decoding + NodeResolver + Renderer.

This is the central wiring layer between the raw tree stages and the public
API.  It turns one serialized chat document (a chat message or a disconnect
reason as received from the server) into a ChatMessage holding the raw text,
the resolved tree and the rendered text.

Architecture:
- parse() decodes the JSON text, resolves it into a Component tree, renders
  the tree and returns a ChatMessage.
- Results are cached per instance in an LRU cache keyed by the raw text.
  Servers repeat many documents verbatim (join/leave messages, death
  messages), and the tree is immutable, so a cached ChatMessage can be handed
  out again as is.  Failed parses are never cached.
- Two separate ChatParser instances never share cache state.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from cachetools import LRUCache

from chat_components.config import ChatConfig
from chat_components.errors import ComponentError, ComponentSyntaxError
from chat_components.renderer import Renderer
from chat_components.result import ChatMessage
from chat_components.tree.resolver import NodeResolver

if TYPE_CHECKING:
    from chat_components.tree.nodes import Component
    from chat_components.tree.resolver import JsonValue

__all__ = ["ChatParser"]

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> None:
    """``parse_constant`` hook: NaN and the infinities are not JSON."""
    raise ComponentSyntaxError(f"invalid JSON: {name} is not a JSON value")


class ChatParser:
    """Parses serialized chat documents into ChatMessage results.

    Example::

        from chat_components.parser import ChatParser

        parser = ChatParser()
        msg = parser.parse('{"translate":"chat.type.text","with":["Steve","hi"]}')
        print(msg.text)        # [chat.type.text] Steve hi
        print(msg.component)   # TranslationNode(...)
    """

    def __init__(
        self,
        config: ChatConfig | None = None,
        max_cache_size: int = 512,
    ) -> None:
        """Initialise the parser.

        Args:
            config: Resolver/renderer parameters.  Defaults to ``ChatConfig()``.
            max_cache_size: Maximum number of parsed messages held in the
                per-instance LRU cache.  When exceeded, the least-recently-used
                entry is silently evicted.  Defaults to 512.
                This is an infrastructure parameter; it is NOT part of
                ``ChatConfig`` (which governs parsing behaviour only).
        """
        if max_cache_size < 1:
            msg = f"max_cache_size must be >= 1, got {max_cache_size}"
            raise ValueError(msg)
        self._config: ChatConfig = config if config is not None else ChatConfig()
        self._resolver = NodeResolver(config=self._config)
        self._renderer = Renderer(config=self._config)
        self._cache: LRUCache[str, ChatMessage] = LRUCache(maxsize=max_cache_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> ChatConfig:
        """The configuration shared by the resolver and the renderer."""
        return self._config

    @property
    def max_cache_size(self) -> int:
        """The maximum number of messages this parser's cache can hold."""
        return int(self._cache.maxsize)

    @property
    def cache_size(self) -> int:
        """The current number of messages stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, raw: str) -> ChatMessage:
        """Decode, resolve and render one serialized chat document.

        Args:
            raw: JSON text of a chat component, as received from the server.

        Returns:
            A ``ChatMessage`` with ``raw``, ``component`` and ``text`` set.

        Raises:
            ComponentSyntaxError: If ``raw`` is not a str of valid JSON.
            SchemaMismatchError, TypeMismatchError, DepthExceededError:
                If the decoded document is not a valid component tree.
        """
        if not isinstance(raw, str):
            msg = f"expected JSON text as str, got {type(raw).__name__}"
            logger.debug("Rejected chat document: %s", msg)
            raise ComponentSyntaxError(msg)

        cached = self._cache.get(raw)
        if cached is not None:
            return cached

        try:
            document = json.loads(raw, parse_constant=_reject_constant)
        except ComponentSyntaxError as exc:
            logger.debug("Rejected chat document: %s", exc)
            raise
        except json.JSONDecodeError as exc:
            logger.debug("Rejected chat document: invalid JSON: %s", exc.msg)
            raise ComponentSyntaxError(
                f"invalid JSON: {exc.msg}", lineno=exc.lineno, colno=exc.colno
            ) from exc
        except RecursionError as exc:
            # json.loads guards its own recursion and gives up on absurd nesting
            logger.debug("Rejected chat document: JSON nesting too deep")
            raise ComponentSyntaxError("invalid JSON: nesting too deep") from exc

        try:
            component = self._resolver.resolve(document)
        except ComponentError as exc:
            logger.debug("Rejected chat document: %s", exc)
            raise

        message = ChatMessage(raw=raw, component=component, text=self.render(component))
        self._cache[raw] = message
        logger.debug(
            "Parsed %s component (%d chars, cache %d/%d)",
            component.kind,
            len(raw),
            self.cache_size,
            self.max_cache_size,
        )
        return message

    def resolve(self, document: JsonValue) -> Component:
        """Resolve an already-decoded JSON value into a Component tree."""
        return self._resolver.resolve(document)

    def render(self, component: Component) -> str:
        """Render a Component tree to flat text."""
        return self._renderer.render(component)
