"""Load PolicyDocument objects from YAML files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from fwpolicy.errors import MalformedPolicy, MalformedRuleSpec
from fwpolicy.policy.models import Chain, PolicyDocument, Rule, Table, Verdict

logger = logging.getLogger(__name__)

# Keys of a rule mapping that are not match criteria.
_RULE_KEYS = ("action", "action_options")
_CHAIN_KEYS = ("default", "default_rule_action", "rules")


def load_policy(path: str | Path) -> PolicyDocument:
    """Load a policy document from a YAML file path."""
    logger.debug("Loading policy from %s", path)
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedPolicy(f"Policy {path} is not valid UTF-8: {e}") from e
    return load_policy_from_string(text)


def load_policy_from_string(text: str) -> PolicyDocument:
    """Parse a YAML string into a PolicyDocument."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise MalformedPolicy(f"Policy is not valid YAML: {e}") from e
    if data is None:
        return PolicyDocument()
    if not isinstance(data, dict):
        raise MalformedPolicy("Policy YAML must be a mapping of tables")
    return PolicyDocument(
        tables=tuple(_build_table(str(name), spec) for name, spec in data.items())
    )


def _build_table(name: str, data: Any) -> Table:
    if data is None:
        return Table(name=name)
    if not isinstance(data, dict):
        raise MalformedPolicy(f"Table '{name}' must be a mapping of chains")
    return Table(
        name=name,
        chains=tuple(
            _build_chain(name, str(chain), spec) for chain, spec in data.items()
        ),
    )


def _build_chain(table: str, name: str, data: Any) -> Chain:
    if data is None:
        return Chain(name=name)
    if not isinstance(data, dict):
        raise MalformedPolicy(f"Chain '{table}/{name}' must be a mapping")

    for key in data:
        if key not in _CHAIN_KEYS:
            logger.warning("Ignoring unknown key '%s' in chain '%s/%s'", key, table, name)

    default = None
    if data.get("default") is not None:
        default = Verdict.parse(str(data["default"]))
        if default is None:
            raise MalformedPolicy(
                f"Chain '{table}/{name}': default must be one of "
                f"{', '.join(v.value for v in Verdict)}, got {data['default']!r}"
            )

    default_rule_action = data.get("default_rule_action")
    if default_rule_action is not None:
        if not isinstance(default_rule_action, str) or Verdict.parse(default_rule_action) is None:
            raise MalformedPolicy(
                f"Chain '{table}/{name}': default_rule_action must be a verdict, "
                f"got {default_rule_action!r}"
            )

    rules_data = data.get("rules") or []
    if not isinstance(rules_data, list):
        raise MalformedPolicy(f"Chain '{table}/{name}': rules must be a list")

    return Chain(
        name=name,
        default=default,
        default_rule_action=default_rule_action,
        rules=tuple(
            _build_rule(table, name, position, r)
            for position, r in enumerate(rules_data, start=1)
        ),
    )


def _build_rule(table: str, chain: str, position: int, data: Any) -> Rule:
    where = f"table '{table}', chain '{chain}', rule {position}"
    if not isinstance(data, dict):
        raise MalformedRuleSpec(f"{where}: rule must be a mapping, got {data!r}")

    action = data.get("action")
    if action is not None and not isinstance(action, str):
        raise MalformedRuleSpec(f"{where}: action must be a string, got {action!r}")

    options = data.get("action_options") or {}
    if not isinstance(options, dict):
        raise MalformedRuleSpec(f"{where}: action_options must be a mapping")
    for key, value in options.items():
        if isinstance(value, (dict, list)):
            raise MalformedRuleSpec(
                f"{where}: action option '{key}' must be a scalar, got {value!r}"
            )
        if value is False:
            raise MalformedRuleSpec(_false_message(where, "action option", key))

    match = tuple((str(k), v) for k, v in data.items() if k not in _RULE_KEYS)
    for key, value in match:
        items = value if isinstance(value, list) else [value]
        if any(isinstance(item, (dict, list)) for item in items):
            raise MalformedRuleSpec(
                f"{where}: match '{key}' must be a scalar or a list of scalars, "
                f"got {value!r}"
            )
        if any(item is False for item in items):
            raise MalformedRuleSpec(_false_message(where, "match", key))
    match = tuple(
        (key, tuple(value) if isinstance(value, list) else value) for key, value in match
    )

    return Rule(
        match=match,
        action=action,
        action_options=tuple((str(k), v) for k, v in options.items()),
    )


def _false_message(where: str, kind: str, key: str) -> str:
    # YAML 1.1 reads no/off/false as False
    return (
        f"{where}: {kind} '{key}' is false; quote the value "
        f"(e.g. '{key}: \"no\"') or remove the key"
    )
