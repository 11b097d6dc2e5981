"""Chat components - resolve and render Minecraft-protocol chat JSON."""

from __future__ import annotations

from chat_components.api import parse, render, resolve, to_document
from chat_components.config import ChatConfig, OpaqueRendering
from chat_components.errors import (
    ComponentError,
    ComponentSyntaxError,
    DepthExceededError,
    SchemaMismatchError,
    TypeMismatchError,
)
from chat_components.parser import ChatParser
from chat_components.result import ChatMessage

__version__: str = "0.1.0"
__all__: list[str] = [
    "ChatConfig",
    "ChatMessage",
    "ChatParser",
    "ComponentError",
    "ComponentSyntaxError",
    "DepthExceededError",
    "OpaqueRendering",
    "SchemaMismatchError",
    "TypeMismatchError",
    "parse",
    "render",
    "resolve",
    "to_document",
]
