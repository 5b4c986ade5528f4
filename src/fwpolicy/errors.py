"""Compile-time error kinds surfaced to the CLI."""

from __future__ import annotations


class PolicyError(ValueError):
    """Base class for every error raised while loading or compiling a policy."""


class MalformedPolicy(PolicyError):
    """The document, a table, or a chain has the wrong shape."""


class MalformedRuleSpec(PolicyError):
    """A rule entry or its action options have the wrong shape."""


class UnresolvedJumpTarget(PolicyError):
    """A rule jumps to a chain that the table does not define."""

    def __init__(self, table: str, chain: str, position: int, target: str) -> None:
        self.table = table
        self.chain = chain
        self.position = position
        self.target = target
        super().__init__(
            f"table '{table}', chain '{chain}', rule {position}: "
            f"jump target '{target}' is not defined in this table"
        )


class InvalidDefaultPolicyTarget(PolicyError):
    """A default policy was set on a chain that is not built in."""

    def __init__(self, table: str, chain: str) -> None:
        self.table = table
        self.chain = chain
        super().__init__(
            f"table '{table}', chain '{chain}': default policy is only "
            "allowed on built-in chains"
        )
