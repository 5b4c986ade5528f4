"""CLI command: fwpolicy verify — check the ruleset without loading it."""

from __future__ import annotations

import click

from fwpolicy.cli.common import (
    compile_from_context,
    console,
    handle_errors,
    make_runner,
    report_failure,
)


@click.command()
@click.pass_context
def verify(ctx: click.Context) -> None:
    """Compile the policy and test it with iptables-restore --test."""
    with handle_errors():
        text = compile_from_context(ctx)
        result = make_runner(ctx).verify(text)

    if not result.ok:
        report_failure("Verification", result.diagnostics)
    console.print("[green]Verification successful[/green]")
