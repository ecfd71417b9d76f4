from __future__ import annotations

from pathlib import Path

import typer

from brewship import __version__
from brewship.core.errors import ErrorCode
from brewship.core.result import Err
from brewship.output.console import ConsoleProtocol, RichConsole, Style
from brewship.output.errors import print_release_error, release_error_exit_code
from brewship.services.release.model import ReleaseResult
from brewship.services.release.service import ReleaseService

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
)


def _confirm(message: str) -> bool:
    return typer.confirm(message, default=False)


def _print_summary(result: ReleaseResult, console: ConsoleProtocol) -> None:
    meta = result.metadata
    console.header(f"Released {meta.binary_name} {meta.version_tag}")
    console.print(f"tarball: {result.artifact.tarball_name}", Style.DIM)
    console.print(f"sha256:  {result.artifact.sha256}", Style.DIM)
    console.print(f"url:     {meta.download_url}", Style.DIM)
    console.print(f"formula: {meta.tap}/{result.formula_path}", Style.DIM)


@app.command()
def release(
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    """Tag, package and publish the project binary, then update its Homebrew formula.

    Run from inside the project's git repository. Destructive steps ask for
    confirmation (default: no).
    """
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))

    console = RichConsole()
    service = ReleaseService(cwd=Path.cwd(), console=console, confirm=_confirm)
    result = service.run()
    if isinstance(result, Err):
        print_release_error(result.error, console)
        raise typer.Exit(code=release_error_exit_code(result.error))

    _print_summary(result.value, console)


def main() -> None:
    app()
