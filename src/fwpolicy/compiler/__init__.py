"""Policy-to-rule compiler producing iptables-restore input."""

from fwpolicy.compiler.assembler import assemble_rule, effective_action
from fwpolicy.compiler.resolver import compile_policy, compile_table, resolve_jumps
from fwpolicy.compiler.translate import translate_action, translate_match

__all__ = [
    "assemble_rule",
    "compile_policy",
    "compile_table",
    "effective_action",
    "resolve_jumps",
    "translate_action",
    "translate_match",
]
