"""Rule assembler — one RuleSpec to one -A line."""

from __future__ import annotations

from fwpolicy.compiler.translate import chain_name, translate_action, translate_match
from fwpolicy.policy.models import Chain, Rule, Table, Verdict


def effective_action(rule: Rule, chain: Chain) -> str:
    """The rule's action, else the chain's default_rule_action, else accept."""
    return rule.action or chain.default_rule_action or Verdict.ACCEPT.value


def assemble_rule(rule: Rule, chain: Chain, table: Table | None = None) -> str:
    declared = [c.name for c in table.chains] if table is not None else []
    tokens = [
        "-A",
        chain_name(chain.name),
        *translate_match(rule.match),
        *translate_action(effective_action(rule, chain), rule.action_options, declared),
    ]
    return " ".join(tokens)
