"""CLI command: fwpolicy apply — load the ruleset into the kernel."""

from __future__ import annotations

import socket

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
def apply(ctx: click.Context) -> None:
    """Compile the policy and commit it with iptables-restore."""
    with handle_errors():
        text = compile_from_context(ctx)
        result = make_runner(ctx).apply(text)

    if not result.ok:
        report_failure("Apply", result.diagnostics)
    console.print(f"[green]Rules applied on {socket.gethostname()}[/green]")
