"""Disqualified - Lazily shorten fully-qualified type names."""

from disqualified._typing import type_name
from disqualified.exceptions import TypeNameError
from disqualified.short_name import (
    SEPARATOR,
    SPECIAL_TYPE_CHARS,
    DisplayShortName,
    ShortName,
    collapse_type_name,
    shorten,
)

__all__ = [
    "SEPARATOR",
    "SPECIAL_TYPE_CHARS",
    "DisplayShortName",
    "ShortName",
    "TypeNameError",
    "collapse_type_name",
    "shorten",
    "type_name",
]
