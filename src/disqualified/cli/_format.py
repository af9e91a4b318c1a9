"""Formatting utilities for CLI output.

Handles human-readable tables, value truncation, and JSON envelope wrapping.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

# JSON envelope version, bump on breaking changes to JSON structure
SCHEMA_VERSION = 1

MAX_LINES = 100


def json_envelope(command: str, data: Any) -> dict[str, Any]:
    """Wrap data in the standard JSON output envelope."""
    return {
        "schema_version": SCHEMA_VERSION,
        "command": command,
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "data": data,
    }


def print_json(command: str, data: Any, output: str | None = None) -> None:
    """Print JSON envelope to stdout or write to file."""
    envelope = json_envelope(command, data)
    text = json.dumps(envelope, indent=2, ensure_ascii=False)

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text)
        size_kb = len(text.encode()) / 1024
        print(f"Wrote {command} output to {output} ({size_kb:.1f}KB)")
    else:
        print(text)


def truncate_value(text: str, max_chars: int = 80) -> str:
    """Truncate text for display."""
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + "…"


def print_table(headers: list[str], rows: list[list[str]], indent: int = 2) -> list[str]:
    """Format a table with aligned columns.

    Returns list of lines (does not print).
    """
    if not rows:
        return []

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            if i < len(widths):
                widths[i] = max(widths[i], len(cell))

    prefix = " " * indent
    lines = [
        prefix + "  ".join(h.ljust(widths[i]) for i, h in enumerate(headers)),
        prefix + "  ".join("─" * w for w in widths),
    ]
    for row in rows:
        cells = [cell.ljust(widths[i]) for i, cell in enumerate(row) if i < len(widths)]
        lines.append((prefix + "  ".join(cells)).rstrip())

    return lines


def print_lines(lines: list[str], max_lines: int = MAX_LINES) -> None:
    """Print lines with truncation warning if too many."""
    for line in lines[:max_lines]:
        print(line)
    if len(lines) > max_lines:
        remaining = len(lines) - max_lines
        print(f"\n  # ... {remaining} more lines (use --json for the full list)")
