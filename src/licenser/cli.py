# Copyright (C) 2025 Francesca Falcone and Mattia Tagliente
# All Rights Reserved

# licenser/cli.py
from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from licenser.exceptions import LicenserError
from licenser.orchestrator import run

USAGE = "usage: licenser <project name> <author name and email>*"


def _force_utf8_stdio():
    """Forces stdout and stderr to use UTF-8 encoding."""
    for stream_name in ("stdout", "stderr"):
        stream = getattr(sys, stream_name, None)
        if stream and hasattr(stream, "reconfigure"):
            try:
                stream.reconfigure(encoding="utf-8")
            except (TypeError, ValueError):
                # Some wrapped streams (IDE terminals, test runners) refuse
                # reconfiguration; they are already text streams we can use.
                pass


app = typer.Typer(add_completion=False, help="Add MIT LICENSE, AUTHORS and copyright notices")

err_console = Console(stderr=True, markup=False, emoji=False, highlight=False, soft_wrap=True)


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _echo(line: str) -> None:
    # Progress lines are written raw; Rich would expand tabs in file names.
    typer.echo(line)


def _fail(msg: str, code: int = 2) -> None:
    err_console.print(f"ERROR {msg}")
    raise typer.Exit(code)


@app.command(
    # Names and authors are taken verbatim, even when they start with "-".
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
def license_cmd(
    project_name: str | None = typer.Argument(None, help="Project name used in every notice"),
    authors: list[str] | None = typer.Argument(
        None, help="Author lines for AUTHORS, e.g. 'Jane Doe <jane@example.com>'"
    ),
):
    """
    Write LICENSE and AUTHORS in the current directory (unless present), then
    prepend a copyright comment to every recognized source file below it.
    """
    _force_utf8_stdio()
    _configure_logging()

    if project_name is None:
        err_console.print(USAGE)
        raise typer.Exit(1)

    try:
        run(project_name, authors or [], root=Path("."), echo=_echo)
    except LicenserError as e:
        _fail(str(e))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
