"""CLI commands for shortening names.

Provides `disqualified shorten`, `disqualified of` and `disqualified aliases`
as top-level commands.
"""

from __future__ import annotations

import importlib
import logging
import sys
from typing import Annotated, Any

import typer

from disqualified._typing import type_name
from disqualified.cli._config import load_config
from disqualified.cli._format import print_json, print_lines, print_table, truncate_value
from disqualified.exceptions import TypeNameError
from disqualified.short_name import shorten

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Input resolution
# ---------------------------------------------------------------------------


def _read_names(names: list[str] | None) -> list[str]:
    """Use positional names, or one name per non-blank stdin line."""
    if names:
        return names
    lines = [line.strip() for line in sys.stdin.read().splitlines()]
    result = [line for line in lines if line]
    logger.debug("Read %d names from stdin", len(result))
    return result


def _import_target(module_path: str) -> Any:
    """Import an object from a 'module:attribute' path.

    Dotted attributes are followed, so 'pkg.mod:Outer.Inner' works.
    """
    module_name, _, attr_path = module_path.partition(":")

    try:
        if "." not in sys.path:
            sys.path.insert(0, ".")
        module = importlib.import_module(module_name)
    except ImportError as e:
        print(f"Error: Could not import module '{module_name}': {e}")
        raise typer.Exit(1) from e

    obj: Any = module
    for attr in attr_path.split("."):
        obj = getattr(obj, attr, None)
        if obj is None:
            print(f"Error: Module '{module_name}' has no attribute '{attr_path}'")
            raise typer.Exit(1)

    logger.debug("Imported %s", module_path)
    return obj


def _resolve_target(target: str) -> Any:
    """Load an object by 'module:attr' path or registered alias."""
    if ":" in target:
        return _import_target(target)

    config = load_config()
    module_path = config.aliases.get(target)
    if module_path is None:
        print(f"Error: '{target}' not found in [tool.disqualified.aliases]")
        print("Hint: Use 'module:attribute' format or register in pyproject.toml:")
        print(f'  [tool.disqualified.aliases]\n  {target} = "my_module:MyType"')
        raise typer.Exit(1)
    return _import_target(module_path)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def register_commands(app: typer.Typer) -> None:
    """Register shorten, of and aliases as top-level commands."""

    @app.command("shorten")
    def shorten_cmd(
        names: Annotated[
            list[str] | None,
            typer.Argument(help="Qualified names to shorten (reads stdin lines if omitted)"),
        ] = None,
        original: Annotated[
            bool | None,
            typer.Option("--original/--no-original", help="Show original names alongside short names"),
        ] = None,
        as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
        output: Annotated[str | None, typer.Option("--output", help="Write JSON to file")] = None,
    ):
        """Shorten fully-qualified type names."""
        resolved = _read_names(names)
        pairs = [(name, shorten(name)) for name in resolved]

        if as_json or output:
            data = [{"original": name, "short": short} for name, short in pairs]
            print_json("shorten", data, output)
            return

        show_original = load_config().show_original if original is None else original
        if not show_original:
            for _, short in pairs:
                print(short)
            return

        rows = [[short, truncate_value(name)] for name, short in pairs]
        print_lines(print_table(["Short", "Original"], rows))

    @app.command("of")
    def of_cmd(
        target: Annotated[str, typer.Argument(help="Object as 'module:attribute' or registered alias")],
        as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
        output: Annotated[str | None, typer.Option("--output", help="Write JSON to file")] = None,
    ):
        """Show the short name of an importable class, function, or type alias."""
        obj = _resolve_target(target)
        try:
            full = type_name(obj)
        except TypeNameError as e:
            print(f"Error: {e}")
            raise typer.Exit(1) from e

        if as_json or output:
            print_json("of", {"target": target, "original": full, "short": shorten(full)}, output)
            return
        print(shorten(full))

    @app.command("aliases")
    def aliases_cmd(
        as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    ):
        """List aliases registered in [tool.disqualified.aliases]."""
        config = load_config()

        if as_json:
            print_json("aliases", {"aliases": config.aliases})
            return

        if not config.aliases:
            print("\n  No aliases registered in pyproject.toml.")
            print("  Add entries under [tool.disqualified.aliases]:")
            print('    [tool.disqualified.aliases]\n    camera = "my_module:Camera"')
            return

        rows = [[name, path] for name, path in sorted(config.aliases.items())]
        print(f"\n  Registered aliases ({len(config.aliases)}):\n")
        print_lines(print_table(["Name", "Module Path"], rows))
