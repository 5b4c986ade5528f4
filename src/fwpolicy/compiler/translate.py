"""Match and action translation — key/value criteria to iptables flag tokens."""

from __future__ import annotations

from collections.abc import Collection, Iterable
from typing import Any

from fwpolicy.policy.models import is_target

MATCH_FLAGS: dict[str, str] = {
    "src": "-s",
    "dst": "-d",
    "protocol": "-p",
    "dport": "--dport",
    "sport": "--sport",
    "in-interface": "-i",
    "out-interface": "-o",
    "match": "-m",
    "state": "--state",
    "icmp-type": "--icmp-type",
    "limit": "--limit",
}

_NEGATION = "! "


def chain_name(name: str) -> str:
    """Render a chain name the way it appears in -P/-N/-A/-j directives."""
    return name.upper()


def match_flag(key: str) -> str:
    """Return the canonical flag for *key*, passing unknown keys through."""
    return MATCH_FLAGS.get(key, f"--{key}")


def translate_match(match: Iterable[tuple[str, Any]]) -> list[str]:
    """Translate match criteria into flag tokens, in authored order."""
    tokens: list[str] = []
    for key, value in match:
        tokens.extend(_flag_tokens(match_flag(key), value))
    return tokens


def translate_action(
    action: str,
    options: Iterable[tuple[str, Any]] = (),
    chains: Collection[str] = (),
) -> list[str]:
    """Translate a verdict, target or jump plus its options into flag tokens.

    A name in *chains* is always a jump, even when it is also an extension
    target. Anything else that is not a verdict or extension target is a
    custom chain; whether that chain exists is checked by the resolver.
    """
    if action in chains or not is_target(action):
        target = chain_name(action)
    else:
        target = action.upper()
    tokens = ["-j", target]
    for key, value in options:
        tokens.extend(_flag_tokens(f"--{key}", value))
    return tokens


def _flag_tokens(flag: str, value: Any) -> list[str]:
    # None/True are bare flags (e.g. "syn: ~"); the loader rejects False.
    if value is None or value is True:
        return [flag]
    if isinstance(value, (list, tuple)):
        tokens: list[str] = []
        for item in value:
            tokens.extend(_flag_tokens(flag, item))
        return tokens

    text = str(value)
    if text.startswith(_NEGATION):
        return ["!", flag, _quote(text[len(_NEGATION) :].strip())]
    return [flag, _quote(text)]


def _quote(text: str) -> str:
    if text and not any(c.isspace() for c in text) and '"' not in text:
        return text
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
