"""Exceptions for disqualified."""

from __future__ import annotations

from typing import Any


class TypeNameError(TypeError):
    """Object cannot be rendered as a qualified type name.

    Raised by ``type_name`` when given something that is neither a type,
    a typing construct, a function, nor a dotted name string.

    Attributes:
        obj: The object that could not be named
        message: Human-readable error message
    """

    def __init__(self, obj: Any, message: str | None = None) -> None:
        self.obj = obj
        self.message = message or self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        return (
            f"Cannot derive a qualified type name from {self.obj!r} "
            f"(instance of {type(self.obj).__name__}). "
            f"Pass a class, function, or typing construct instead."
        )
