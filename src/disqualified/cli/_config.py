"""Project-level configuration from pyproject.toml.

Reads the [tool.disqualified] section to provide named import aliases
and default settings for the CLI.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisqualifiedConfig:
    """Configuration from [tool.disqualified] in pyproject.toml."""

    aliases: dict[str, str] = field(default_factory=dict)
    show_original: bool = False


def find_pyproject(start: Path | None = None) -> Path | None:
    """Walk up from start directory to find pyproject.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> DisqualifiedConfig:
    """Load [tool.disqualified] from the nearest pyproject.toml.

    Returns default config if no pyproject.toml or no [tool.disqualified] section.
    """
    path = find_pyproject(start)
    if path is None:
        return DisqualifiedConfig()

    if sys.version_info >= (3, 11):
        import tomllib
    else:
        import tomli as tomllib

    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("tool", {}).get("disqualified", {})
    if not section:
        return DisqualifiedConfig()

    logger.debug("Loaded [tool.disqualified] from %s", path)
    return DisqualifiedConfig(
        aliases=section.get("aliases", {}),
        show_original=bool(section.get("show_original", False)),
    )
