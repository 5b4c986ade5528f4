"""Policy data models — immutable dataclasses used across the entire codebase."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

BUILTIN_CHAINS: dict[str, frozenset[str]] = {
    "filter": frozenset({"input", "output", "forward"}),
    "nat": frozenset({"prerouting", "postrouting", "output"}),
    "mangle": frozenset({"prerouting", "input", "forward", "output", "postrouting"}),
    "raw": frozenset({"prerouting", "output"}),
    "security": frozenset({"input", "output", "forward"}),
}


class Verdict(enum.Enum):
    """Terminal decision for a matching packet."""

    ACCEPT = "accept"
    DROP = "drop"
    REJECT = "reject"
    RETURN = "return"

    @classmethod
    def parse(cls, value: str) -> Verdict | None:
        """Return the verdict named by *value*, or None for anything else."""
        try:
            return cls(value.lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class Rule:
    """A single rule: match criteria plus an optional action."""

    match: tuple[tuple[str, Any], ...] = ()
    action: str | None = None
    action_options: tuple[tuple[str, Any], ...] = ()


@dataclass(frozen=True)
class Chain:
    """A named, ordered list of rules."""

    name: str
    default: Verdict | None = None
    default_rule_action: str | None = None
    rules: tuple[Rule, ...] = ()

    def is_builtin(self, table: str) -> bool:
        return self.name.lower() in BUILTIN_CHAINS.get(table.lower(), frozenset())


@dataclass(frozen=True)
class Table:
    """A table and its chains in declaration order."""

    name: str
    chains: tuple[Chain, ...] = ()

    def chain(self, name: str) -> Chain | None:
        for chain in self.chains:
            if chain.name == name:
                return chain
        return None


@dataclass(frozen=True)
class PolicyDocument:
    """A complete policy: tables in document order."""

    tables: tuple[Table, ...] = ()


# Targets provided by iptables extensions; a rule naming one is not a jump.
EXTENSION_TARGETS: frozenset[str] = frozenset(
    {
        "audit",
        "checksum",
        "classify",
        "connmark",
        "ct",
        "dnat",
        "dscp",
        "log",
        "mark",
        "masquerade",
        "netmap",
        "nflog",
        "nfqueue",
        "notrack",
        "redirect",
        "snat",
        "tcpmss",
        "tee",
        "tos",
        "tproxy",
        "ttl",
    }
)


def is_target(action: str, table: Table | None = None) -> bool:
    """True for verdicts and extension targets, False for chain jumps.

    A chain declared in *table* shadows an extension target of the same
    name, so a table with a custom "log" chain jumps to it.
    """
    if Verdict.parse(action) is not None:
        return True
    if table is not None and table.chain(action) is not None:
        return False
    return action.lower() in EXTENSION_TARGETS
