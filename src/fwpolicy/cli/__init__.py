"""CLI entry point — Click group with global options."""

from __future__ import annotations

import logging

import click

from fwpolicy import __version__
from fwpolicy.config import FwPolicyConfig


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="fwpolicy")
@click.option(
    "--config",
    "-c",
    "config_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to the YAML policy file.",
)
@click.option("--ipv6", "-6", is_flag=True, help="Use ip6tables-restore.")
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="Seconds to wait for the restore command (0 waits forever).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.pass_context
def main(
    ctx: click.Context,
    config_path: str,
    ipv6: bool,
    timeout: float | None,
    verbose: bool,
) -> None:
    """fwpolicy — compile a YAML firewall policy and verify or apply it."""
    config = FwPolicyConfig.load()
    config.verbose = config.verbose or verbose
    if timeout is not None:
        config.timeout = timeout if timeout > 0 else None

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["config"] = config
    ctx.obj["ipv6"] = ipv6

    level = logging.DEBUG if config.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)


def _register_commands() -> None:
    from fwpolicy.cli.apply import apply  # noqa: F811
    from fwpolicy.cli.output import print_, write  # noqa: F811
    from fwpolicy.cli.verify import verify  # noqa: F811

    main.add_command(verify)
    main.add_command(apply)
    main.add_command(print_)
    main.add_command(write)


_register_commands()
