"""Short names for fully-qualified type paths.

A qualified name such as ``alloc::vec::Vec<core::option::Option<u32>>``
is shortened to ``Vec<Option<u32>>`` by stripping the module prefix of
every identifier while keeping generics, tuples and arrays intact.

Key exports:
    - shorten: Compute the short form of a qualified name
    - collapse_type_name: Drop the module prefix of a single identifier
    - ShortName: Value wrapper that renders as its short form
    - DisplayShortName: Adapter that shortens any value's text when formatted
"""

from __future__ import annotations

import re
from typing import Any

SEPARATOR = "::"
SPECIAL_TYPE_CHARS = " <>()[],;"

_SPECIAL_RE = re.compile("[" + re.escape(SPECIAL_TYPE_CHARS) + "]")
_CLOSING_CHARS = frozenset(">)]")


def _is_type_segment(segment: str) -> bool:
    first = segment[:1]
    return first.isascii() and first.isupper()


def collapse_type_name(span: str) -> str:
    """Strip the module prefix from a single path.

    Returns the text after the last ``::`` in ``span``. When the segment
    before that separator starts with an ASCII uppercase letter it names an
    enum or type, so it is kept along with its item.

    Args:
        span: A path fragment, possibly ending in one boundary character

    Returns:
        The collapsed fragment, or ``span`` itself if it has no separator

    Examples:
        >>> collapse_type_name("bevy_prelude::make_fun_game")
        'make_fun_game'
        >>> collapse_type_name("bevy_render::RenderSet::Prepare")
        'RenderSet::Prepare'
        >>> collapse_type_name("Option::None")
        'Option::None'
    """
    last = span.rfind(SEPARATOR)
    if last == -1:
        return span

    previous = span.rfind(SEPARATOR, 0, last)
    owner_start = 0 if previous == -1 else previous + len(SEPARATOR)
    if _is_type_segment(span[owner_start:last]):
        return span[owner_start:] if owner_start else span
    return span[last + len(SEPARATOR) :]


def shorten(name: str) -> str:
    """Remove module paths from every identifier in a qualified type name.

    Walks the name once. Text between boundary characters is collapsed and
    the boundary characters are copied verbatim, so nesting of any depth
    comes out in its original shape. A ``::`` directly after a closing
    ``>``, ``)`` or ``]`` continues the path (``Vec<T>::new``) and is kept.

    Names without boundary characters never build a new string: the
    result is a slice of ``name``, or ``name`` itself when nothing is
    stripped.

    Args:
        name: A fully-qualified type name

    Returns:
        The short name

    Examples:
        >>> shorten("alloc::vec::Vec<core::option::Option<u32>>")
        'Vec<Option<u32>>'
        >>> shorten("bevy_asset::assets::Assets<bevy_scene::Scene>::asset_event_system")
        'Assets<Scene>::asset_event_system'
    """
    parts: list[str] | None = None
    cursor = 0

    while True:
        match = _SPECIAL_RE.search(name, cursor)
        if match is None:
            if parts is None:
                return collapse_type_name(name)
            parts.append(collapse_type_name(name[cursor:]))
            return "".join(parts)

        if parts is None:
            parts = []
        end = match.end()
        parts.append(collapse_type_name(name[cursor:end]))

        if match.group() in _CLOSING_CHARS and name.startswith(SEPARATOR, end):
            parts.append(SEPARATOR)
            cursor = end + len(SEPARATOR)
        else:
            cursor = end


class ShortName:
    """A qualified type name that displays as its short form.

    The short form is computed on demand each time the name is rendered;
    the instance only holds the original text.

    Attributes:
        original: The unshortened name

    Example:
        >>> name = ShortName("bevy_render::camera::Camera3d")
        >>> str(name)
        'Camera3d'
        >>> name.original
        'bevy_render::camera::Camera3d'
        >>> f"{name:>10}"
        '  Camera3d'
    """

    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        if not isinstance(name, str):
            raise TypeError(f"ShortName expects a str, got {type(name).__name__}")
        self._name = name

    @classmethod
    def of(cls, tp: Any) -> ShortName:
        """Build a ShortName from a Python type, class, or function.

        Example:
            >>> str(ShortName.of(dict[str, list[int]]))
            'dict<str, list<int>>'
        """
        from disqualified._typing import type_name

        return cls(type_name(tp))

    @property
    def original(self) -> str:
        """The name before shortening."""
        return self._name

    @property
    def short(self) -> str:
        """The name with every module path removed."""
        return shorten(self._name)

    def __str__(self) -> str:
        return shorten(self._name)

    def __format__(self, format_spec: str) -> str:
        return format(shorten(self._name), format_spec)

    def __repr__(self) -> str:
        return f"ShortName({self._name!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ShortName):
            return self._name == other._name
        return NotImplemented

    def __hash__(self) -> int:
        return hash((ShortName, self._name))


class DisplayShortName:
    """Render any value's text in short-name form when formatted.

    Useful where only formatting is needed, e.g. lazy logging arguments:

        logger.debug("running %s", DisplayShortName(system_name))
    """

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __str__(self) -> str:
        return shorten(str(self.value))

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __repr__(self) -> str:
        return f"DisplayShortName({self.value!r})"
