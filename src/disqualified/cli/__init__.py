"""Disqualified CLI: shorten qualified type names from the shell.

Entry point for the `disqualified` command. Requires ``pip install disqualified[cli]``.

Commands:
    shorten     Shorten names given as arguments or read from stdin
    of          Show the short name of an importable class or function
    aliases     List aliases registered in pyproject.toml
"""

from __future__ import annotations


def _require_typer():
    """Check that typer is available."""
    try:
        import typer  # noqa: F401
    except ImportError:
        import sys

        print("Error: typer is required for the CLI. Install with: pip install disqualified[cli]", file=sys.stderr)
        raise SystemExit(1) from None


def create_app():
    """Create the Typer app with all subcommands."""
    _require_typer()

    import typer

    from disqualified.cli.shorten_cmd import register_commands

    app = typer.Typer(
        name="disqualified",
        help="Strip module paths from fully-qualified type names.",
        no_args_is_help=True,
    )
    register_commands(app)

    return app


def main():
    """CLI entry point."""
    app = create_app()
    app()
