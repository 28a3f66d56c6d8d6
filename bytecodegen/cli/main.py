"""Typer CLI for the bytecode export generator.

Running ``bytecodegen`` with no arguments reads the configured forge
artifacts and rewrites the generated TypeScript bytecode module.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from bytecodegen import __version__
from bytecodegen.cli.config import ExporterConfig, validate_config
from bytecodegen.sdk.exporter import generate


app = typer.Typer(
    name="bytecodegen",
    help="Export compiled contract bytecode as TypeScript constants",
    add_completion=False,
    rich_markup_mode="rich"
)
console = Console()


def version_callback(show_version: bool) -> None:
    """Show version and exit."""
    if show_version:
        console.print(f"bytecodegen version {__version__}")
        raise typer.Exit()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def main(
    verbose: bool = typer.Option(False, "--verbose", help="Log each artifact read and print a summary"),
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True
    )
) -> None:
    """Generate the bytecode module from forge build artifacts."""
    _setup_logging(verbose)
    try:
        config = ExporterConfig()
        validate_config(config)

        result = generate(config.entries(), config.output_path)

        if verbose:
            console.print(
                f"✅ Wrote {len(result.constants)} bytecode constants to [bold]{result.output_path}[/bold]"
            )

    except Exception as e:
        console.print(f"❌ Error generating bytecode: {escape(str(e))}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
