"""CLI commands: fwpolicy print / write — emit the compiled ruleset."""

from __future__ import annotations

from pathlib import Path

import click

from fwpolicy.cli.common import compile_from_context, console, handle_errors


@click.command("print")
@click.pass_context
def print_(ctx: click.Context) -> None:
    """Print the compiled ruleset to standard output."""
    with handle_errors():
        text = compile_from_context(ctx)
    click.echo(text, nl=False)


@click.command()
@click.argument("file", type=click.Path(dir_okay=False, writable=True))
@click.pass_context
def write(ctx: click.Context, file: str) -> None:
    """Write the compiled ruleset to FILE."""
    with handle_errors():
        text = compile_from_context(ctx)
        Path(file).write_text(text, encoding="utf-8")
    console.print(f"Wrote ruleset to [cyan]{file}[/cyan]")
