"""Table and chain resolution — directive ordering and jump checking."""

from __future__ import annotations

import logging

from fwpolicy.compiler.assembler import assemble_rule, effective_action
from fwpolicy.compiler.translate import chain_name
from fwpolicy.errors import InvalidDefaultPolicyTarget, MalformedPolicy, UnresolvedJumpTarget
from fwpolicy.policy.models import PolicyDocument, Table, is_target

logger = logging.getLogger(__name__)


def resolve_jumps(table: Table) -> None:
    """Check that every jump names a chain defined in *table*.

    Verdicts and extension targets (LOG, MASQUERADE, ...) are not jumps
    unless the table declares a chain with that name.

    Cycles between custom chains are allowed: a jump is a conditional
    branch, so A -> B -> A is a valid ruleset.
    """
    for chain in table.chains:
        for position, rule in enumerate(chain.rules, start=1):
            action = effective_action(rule, chain)
            if not is_target(action, table) and table.chain(action) is None:
                raise UnresolvedJumpTarget(table.name, chain.name, position, action)


def compile_table(table: Table) -> list[str]:
    """Compile one table into its lines, from ``*table`` to ``COMMIT``.

    All -P and -N directives come before the first -A line, so a rule may
    jump to a chain declared later in the document.
    """
    _check_chains(table)
    resolve_jumps(table)

    lines = [f"*{table.name}"]
    for chain in table.chains:
        if chain.default is not None:
            lines.append(f"-P {chain_name(chain.name)} {chain.default.value.upper()}")
    for chain in table.chains:
        if not chain.is_builtin(table.name):
            lines.append(f"-N {chain_name(chain.name)}")
    for chain in table.chains:
        for rule in chain.rules:
            lines.append(assemble_rule(rule, chain, table))
    lines.append("COMMIT")

    logger.debug(
        "Compiled table '%s': %d chains, %d lines",
        table.name,
        len(table.chains),
        len(lines),
    )
    return lines


def compile_policy(document: PolicyDocument) -> str:
    """Compile a whole document. Either returns all of the text or raises."""
    lines: list[str] = []
    for table in document.tables:
        lines.extend(compile_table(table))
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def _check_chains(table: Table) -> None:
    seen: dict[str, str] = {}
    for chain in table.chains:
        rendered = chain_name(chain.name)
        if rendered in seen:
            raise MalformedPolicy(
                f"table '{table.name}': chains '{seen[rendered]}' and "
                f"'{chain.name}' both render as {rendered}"
            )
        seen[rendered] = chain.name

        if chain.default is not None and not chain.is_builtin(table.name):
            raise InvalidDefaultPolicyTarget(table.name, chain.name)
