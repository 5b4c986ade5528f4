"""Tests for environment-driven configuration."""

from __future__ import annotations

import click
import pytest

from fwpolicy.config import FwPolicyConfig


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    for var in ("FWPOLICY_RESTORE_COMMAND", "FWPOLICY_RESTORE6_COMMAND", "FWPOLICY_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)
    config = FwPolicyConfig.load()
    assert config.restore_command == "iptables-restore"
    assert config.restore6_command == "ip6tables-restore"
    assert config.timeout == 30.0


def test_env_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FWPOLICY_RESTORE_COMMAND", "iptables-legacy-restore")
    monkeypatch.setenv("FWPOLICY_RESTORE6_COMMAND", "ip6tables-legacy-restore")
    monkeypatch.setenv("FWPOLICY_TIMEOUT", "5")
    config = FwPolicyConfig.load()
    assert config.restore_command == "iptables-legacy-restore"
    assert config.restore6_command == "ip6tables-legacy-restore"
    assert config.timeout == 5.0


def test_zero_timeout_disables(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FWPOLICY_TIMEOUT", "0")
    assert FwPolicyConfig.load().timeout is None


def test_bad_timeout_is_a_usage_error(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FWPOLICY_TIMEOUT", "soon")
    with pytest.raises(click.BadParameter, match="soon"):
        FwPolicyConfig.load()


def test_verbose_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("FWPOLICY_TIMEOUT", raising=False)
    monkeypatch.setenv("FWPOLICY_VERBOSE", "1")
    assert FwPolicyConfig.load().verbose
    monkeypatch.setenv("FWPOLICY_VERBOSE", "")
    assert not FwPolicyConfig.load().verbose
