"""Typer CLI application for genmodule."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.markup import escape
from typer import Argument, Exit, Option, Typer

import genmodule
from genmodule.cli._renderer import render_module
from genmodule.cli._types import Artifact
from genmodule.cli._writer import (
    OutputDirectoryNotFoundError,
    resolve_output_dir,
    write_artifact,
)
from genmodule.core.config import RenderContext

app = Typer(add_completion=False)
_console = Console()

USAGE = """\
Usage: genmodule [arguments]

Generates Swift Module (Wireframe, DataManager, Interactor, Presenter, and ViewController) on Desktop

Arguments:
1. Module name          Example: Home
2. Appname              Example: Broccoli
3. Company name         Example: Bojan\\ Stefanovic"""


def _print_artifacts() -> None:
    _console.print()
    _console.print("[bold cyan]◆[/]  Generated files")
    _console.print("[dim]│[/]")
    for a in Artifact:
        _console.print(f"[dim]│[/]  [bold cyan]{'<M>' + a.suffix:<24}[/] [bold]{a.label}[/]")
        _console.print(f"[dim]│[/]  {' ' * 24} [dim]{a.description}[/]")
        _console.print("[dim]│[/]")
    _console.print()


def _list_files_callback(value: bool) -> None:
    if value:
        _print_artifacts()
        raise Exit()


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"genmodule v{genmodule.__version__}")
        raise Exit()


@app.command(
    context_settings={"help_option_names": ["-h", "--help"], "allow_extra_args": True},
)
def generate(
    module_name: Annotated[
        str | None, Argument(help="Module name, e.g. Home", show_default=False)
    ] = None,
    app_name: Annotated[
        str | None, Argument(help="Application name, e.g. Broccoli", show_default=False)
    ] = None,
    author: Annotated[
        str | None, Argument(help="Author or company name", show_default=False)
    ] = None,
    output_dir: Annotated[
        Path | None,
        Option(
            "--output-dir",
            "-o",
            help="Write the files here instead of the desktop.",
            show_default=False,
        ),
    ] = None,
    created: Annotated[
        datetime | None,
        Option(
            "--date",
            formats=["%Y-%m-%d"],
            help="Creation date written into the file headers. Defaults to today.",
            show_default=False,
        ),
    ] = None,
    list_files: Annotated[
        bool,
        Option(
            "--list-files",
            "-l",
            help="List the generated files and exit.",
            callback=_list_files_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
    version: Annotated[
        bool,
        Option(
            "--version",
            "-V",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Generate a VIPER module skeleton for MODULE_NAME."""
    if module_name is None or app_name is None or author is None:
        _console.print(USAGE, markup=False, highlight=False, soft_wrap=True)
        raise Exit(code=1)

    when = created.date() if created is not None else date.today()
    context = RenderContext.create(module_name, app_name, author, when=when)
    files = render_module(context)

    try:
        target = resolve_output_dir(output_dir)
    except OutputDirectoryNotFoundError as e:
        _console.print(f"[bold red]Error:[/] Output directory not found: {escape(str(e))}")
        raise Exit(code=1) from None

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  genmodule v{genmodule.__version__}")
    _console.print("[dim]│[/]")
    _console.print(f"[bold green]◇[/]  Writing {escape(module_name)} to {escape(str(target))}/...")

    for artifact in Artifact:
        filename = artifact.filename(module_name)
        try:
            write_artifact(target, filename, files[filename])
        except OSError as e:
            _console.print("[dim]│[/]")
            _console.print(f"[bold red]Error:[/] Could not write {escape(filename)}: {escape(str(e))}")
            raise Exit(code=1) from None
        _console.print(f"[dim]│[/]  {escape(filename)} [dim]({artifact.description})[/]")

    _console.print("[dim]│[/]")
    _console.print("[bold cyan]●[/]  Success.")
    _console.print()
