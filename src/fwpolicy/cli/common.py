"""Shared CLI plumbing — compile from context and map errors to exit codes."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager

import click
from rich.console import Console
from rich.markup import escape

from fwpolicy.compiler import compile_policy
from fwpolicy.config import FwPolicyConfig
from fwpolicy.errors import PolicyError
from fwpolicy.policy.loader import load_policy
from fwpolicy.runner import RestoreError, RestoreRunner

console = Console(stderr=True)


@contextmanager
def handle_errors() -> Iterator[None]:
    """Turn loader, compiler and runner failures into a message and exit 1."""
    try:
        yield
    except (PolicyError, RestoreError) as e:
        console.print(f"[red]{type(e).__name__}:[/red] {escape(str(e))}")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)


def compile_from_context(ctx: click.Context) -> str:
    """Load and compile the policy named by the global --config option."""
    document = load_policy(ctx.obj["config_path"])
    return compile_policy(document)


def make_runner(ctx: click.Context) -> RestoreRunner:
    config: FwPolicyConfig = ctx.obj["config"]
    command = config.restore6_command if ctx.obj["ipv6"] else config.restore_command
    return RestoreRunner(command=command, timeout=config.timeout)


def report_failure(action: str, diagnostics: str) -> None:
    console.print(f"[red]{action} failed[/red]")
    if diagnostics:
        console.print(escape(diagnostics), highlight=False, soft_wrap=True)
    sys.exit(1)
