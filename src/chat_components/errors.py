"""Exception classes for chat-components.

Every failure to turn a serialized chat document into a component tree
raises a subclass of ``ComponentError``.  All of them are recoverable: the
caller decides what to show the user (typically the raw text).

- ComponentSyntaxError: the input is not valid JSON at all.
- SchemaMismatchError:  valid JSON, but no component shape matched.
- TypeMismatchError:    a recognised key carried a value of the wrong type.
- DepthExceededError:   nesting went deeper than ``ChatConfig.max_depth``.
"""

from __future__ import annotations

__all__ = [
    "ComponentError",
    "ComponentSyntaxError",
    "DepthExceededError",
    "SchemaMismatchError",
    "TypeMismatchError",
]


class ComponentError(ValueError):
    """Base exception for all chat-components errors.

    Attributes:
        message: Human-readable description without the location prefix.
        path:    JSON Pointer (RFC 6901) to the offending value.  Root is "".
    """

    def __init__(self, message: str, path: str = "") -> None:
        self.message = message
        self.path = path
        location = f"at {path!r}: " if path else ""
        super().__init__(f"{location}{message}")


class ComponentSyntaxError(ComponentError):
    """The raw text could not be decoded as JSON."""

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        colno: int | None = None,
    ) -> None:
        self.lineno = lineno
        self.colno = colno
        if lineno is not None and colno is not None:
            message = f"{message} (line {lineno}, column {colno})"
        super().__init__(message)


class SchemaMismatchError(ComponentError):
    """A JSON object matched none of the known component shapes."""


class TypeMismatchError(ComponentError):
    """A recognised key was present with a value of the wrong type."""


class DepthExceededError(ComponentError):
    """Component nesting exceeded the configured maximum depth."""

    def __init__(self, max_depth: int, path: str = "") -> None:
        self.max_depth = max_depth
        super().__init__(f"component nesting exceeds max_depth={max_depth}", path)
