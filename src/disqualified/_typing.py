"""Qualified names for Python type forms.

Renders classes, functions and typing constructs in the ``::`` path
convention understood by ``shorten``, so that Python objects can be
named the same way a reflection facility names them.

Key exports:
    - type_name: Fully-qualified ``::`` name of a type form
"""

from __future__ import annotations

from types import UnionType
from typing import (
    Annotated,
    Any,
    ForwardRef,
    Literal,
    TypeVar,
    Union,
    get_args,
    get_origin,
)

from disqualified.exceptions import TypeNameError
from disqualified.short_name import SEPARATOR

_LOCALS_SEGMENT = "<locals>"


def _dotted_to_path(dotted: str) -> str:
    return dotted.replace(".", SEPARATOR)


def _qualified_path(obj: Any) -> str:
    """Join an object's module and qualname with the path separator.

    Local-scope markers are dropped so that classes defined inside a
    function read as ``module::outer::Inner``.
    """
    qualname = getattr(obj, "__qualname__", None) or getattr(obj, "__name__", None)
    if not isinstance(qualname, str):
        raise TypeNameError(obj)

    segments = [segment for segment in qualname.split(".") if segment != _LOCALS_SEGMENT]
    module = getattr(obj, "__module__", None)
    if isinstance(module, str) and module:
        segments = [*module.split("."), *segments]
    return SEPARATOR.join(segments)


def _join_args(args: tuple[Any, ...] | list[Any]) -> str:
    return ", ".join(type_name(arg) for arg in args)


def _generic_name(tp: Any, origin: Any) -> str:
    """Render a parametrized generic alias."""
    args = get_args(tp)

    # Annotated metadata is not part of the type's name
    if origin is Annotated:
        return type_name(args[0])

    # Literal arguments are values, not types
    if origin is Literal:
        return f"typing{SEPARATOR}Literal<{', '.join(repr(arg) for arg in args)}>"

    # Handle both Union and UnionType (| syntax)
    if origin in {Union, UnionType}:
        return f"typing{SEPARATOR}Union<{_join_args(args)}>"

    if origin is tuple and not (args and args[-1] is Ellipsis):
        if len(args) == 1:
            return f"({type_name(args[0])},)"
        return f"({_join_args(args)})"

    base = _qualified_path(origin)
    if not args:
        return base
    return f"{base}<{_join_args(args)}>"


def type_name(tp: Any) -> str:
    """Return the fully-qualified ``::`` name of a Python type form.

    Args:
        tp: A class, function, generic alias, Union, Literal, TypeVar,
            ForwardRef, or a dotted name string

    Returns:
        The qualified name, e.g. ``builtins::dict<builtins::str, builtins::int>``

    Raises:
        TypeNameError: If ``tp`` has no nameable identity (e.g. a plain instance)

    Example:
        >>> type_name(list[int])
        'builtins::list<builtins::int>'
        >>> type_name(tuple[int, str])
        '(builtins::int, builtins::str)'
        >>> type_name("pkg.models.User")
        'pkg::models::User'
    """
    if tp is None or tp is type(None):
        return "None"
    if tp is Ellipsis:
        return "..."
    if isinstance(tp, str):
        return _dotted_to_path(tp)
    if isinstance(tp, ForwardRef):
        return _dotted_to_path(tp.__forward_arg__)
    if isinstance(tp, TypeVar):
        return tp.__name__
    # Callable parameter lists arrive as plain lists
    if isinstance(tp, list):
        return f"[{_join_args(tp)}]"

    origin = get_origin(tp)
    if origin is not None:
        return _generic_name(tp, origin)

    return _qualified_path(tp)
