"""CLI entry point for pdfsweep."""

from __future__ import annotations

import os
from functools import partial
from pathlib import Path
from typing import Annotated

import typer
from rich import print as rprint
from rich.markup import escape

from pdfsweep.automation import create_host
from pdfsweep.config import CONFIG_ENV_VAR, load_config
from pdfsweep.converter import ConversionRunner
from pdfsweep.log import configure_logging

app = typer.Typer(
    name="pdfsweep",
    help="Convert Word, PowerPoint and Excel documents under a folder to PDF.",
    add_completion=False,
)


@app.command()
def main(
    root: Annotated[
        Path | None,
        typer.Argument(help="Folder to scan (default: current directory)"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Reconvert documents that already have a PDF"),
    ] = False,
) -> None:
    """Convert office documents under ROOT to PDFs placed beside them."""
    try:
        cfg = load_config(os.environ.get(CONFIG_ENV_VAR))
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    configure_logging(cfg)
    runner = ConversionRunner(partial(create_host, config=cfg.automation))

    try:
        summary = runner.run(root or Path.cwd(), force_recompile=force)
    except Exception as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        done = len(runner.summary.converted)
        if done:
            rprint(f"[yellow]{done} file(s) converted before the failure.[/yellow]")
        raise typer.Exit(1)

    if summary.converted:
        by_type = ", ".join(
            f"{doc_type.value}: {n}" for doc_type, n in summary.counts.items() if n
        )
        rprint(
            f"[green]Converted {len(summary.converted)} file(s)[/green] ({by_type}); "
            f"{summary.skipped} already had a PDF"
        )
