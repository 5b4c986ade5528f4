"""Tests for policy data models."""

from fwpolicy.policy.models import BUILTIN_CHAINS, Chain, Rule, Table, Verdict, is_target


def test_verdict_values():
    assert Verdict.ACCEPT.value == "accept"
    assert Verdict.DROP.value == "drop"
    assert Verdict.REJECT.value == "reject"
    assert Verdict.RETURN.value == "return"


def test_verdict_parse_is_case_insensitive():
    assert Verdict.parse("DROP") == Verdict.DROP
    assert Verdict.parse("Accept") == Verdict.ACCEPT


def test_verdict_parse_unknown_is_none():
    assert Verdict.parse("foo") is None


def test_rule_defaults():
    rule = Rule()
    assert rule.match == ()
    assert rule.action is None
    assert rule.action_options == ()


def test_builtin_chains_per_table():
    assert Chain(name="input").is_builtin("filter")
    assert Chain(name="INPUT").is_builtin("filter")
    assert not Chain(name="input").is_builtin("nat")
    assert Chain(name="postrouting").is_builtin("mangle")
    assert not Chain(name="foo").is_builtin("filter")


def test_unknown_table_has_no_builtins():
    assert "bogus" not in BUILTIN_CHAINS
    assert not Chain(name="input").is_builtin("bogus")


def test_table_chain_lookup():
    table = Table(name="filter", chains=(Chain(name="input"), Chain(name="foo")))
    assert table.chain("foo") is table.chains[1]
    assert table.chain("missing") is None


def test_is_target():
    assert is_target("accept")
    assert is_target("MASQUERADE")
    assert is_target("log")
    assert not is_target("foo")


def test_declared_chain_is_not_a_target():
    table = Table(name="filter", chains=(Chain(name="input"), Chain(name="log")))
    assert is_target("log")
    assert not is_target("log", table)
    assert is_target("drop", table)
