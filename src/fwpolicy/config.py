"""Global configuration — restore commands, timeouts, env vars."""

from __future__ import annotations

import os
from dataclasses import dataclass

import click


@dataclass
class FwPolicyConfig:
    """Application-wide configuration."""

    restore_command: str = "iptables-restore"
    restore6_command: str = "ip6tables-restore"
    timeout: float | None = 30.0
    verbose: bool = False

    @classmethod
    def load(cls) -> FwPolicyConfig:
        """Load config from environment variables over the defaults."""
        config = cls()

        env_cmd = os.environ.get("FWPOLICY_RESTORE_COMMAND")
        if env_cmd:
            config.restore_command = env_cmd

        env_cmd6 = os.environ.get("FWPOLICY_RESTORE6_COMMAND")
        if env_cmd6:
            config.restore6_command = env_cmd6

        # 0 disables the timeout
        env_timeout = os.environ.get("FWPOLICY_TIMEOUT")
        if env_timeout:
            try:
                value = float(env_timeout)
            except ValueError as e:
                raise click.BadParameter(
                    f"{env_timeout!r} is not a number of seconds",
                    param_hint="FWPOLICY_TIMEOUT",
                ) from e
            config.timeout = value if value > 0 else None

        if os.environ.get("FWPOLICY_VERBOSE", "").lower() in ("1", "true", "yes"):
            config.verbose = True

        return config
