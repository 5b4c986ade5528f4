"""Restore runner — pipe compiled rules into iptables-restore."""

from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class RestoreError(RuntimeError):
    """The restore command could not be run to completion."""


class RestoreUnavailable(RestoreError):
    """The restore command is not installed or not executable."""


class RestoreTimeout(RestoreError):
    """The restore command did not finish within the timeout."""


@dataclass(frozen=True)
class RestoreResult:
    """Exit status and captured output of one restore invocation."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def diagnostics(self) -> str:
        return "\n".join(s for s in (self.stderr.strip(), self.stdout.strip()) if s)


class RestoreRunner:
    """Runs iptables-restore (or a compatible command) on compiled text.

    One subprocess per call. stdout and stderr are drained while stdin is
    written, and the process is always reaped, even on timeout.
    """

    def __init__(
        self,
        command: str = "iptables-restore",
        timeout: float | None = 30.0,
    ) -> None:
        self._argv = shlex.split(command)
        self._timeout = timeout

    def verify(self, text: str) -> RestoreResult:
        """Parse and check the ruleset without committing it."""
        return self._run(["--test"], text)

    def apply(self, text: str) -> RestoreResult:
        """Atomically replace the loaded ruleset."""
        return self._run([], text)

    def _run(self, extra: list[str], text: str) -> RestoreResult:
        argv = [*self._argv, *extra]
        logger.info("Running %s", " ".join(argv))
        try:
            with subprocess.Popen(
                argv,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
            ) as proc:
                try:
                    stdout, stderr = proc.communicate(text, timeout=self._timeout)
                except subprocess.TimeoutExpired as e:
                    proc.kill()
                    proc.communicate()
                    raise RestoreTimeout(
                        f"{argv[0]} did not finish within {self._timeout}s"
                    ) from e
        except (FileNotFoundError, PermissionError) as e:
            raise RestoreUnavailable(f"Cannot run {argv[0]}: {e}") from e

        logger.debug("%s exited with code %d", argv[0], proc.returncode)
        return RestoreResult(returncode=proc.returncode, stdout=stdout, stderr=stderr)
