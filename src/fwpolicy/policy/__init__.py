"""Policy document model and YAML loader."""

from fwpolicy.policy.loader import load_policy, load_policy_from_string
from fwpolicy.policy.models import Chain, PolicyDocument, Rule, Table, Verdict

__all__ = [
    "Chain",
    "PolicyDocument",
    "Rule",
    "Table",
    "Verdict",
    "load_policy",
    "load_policy_from_string",
]
