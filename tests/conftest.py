"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from fwpolicy.policy.models import Chain, PolicyDocument, Rule, Table, Verdict


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def example_policy_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "example_policy.yaml"


@pytest.fixture
def unresolved_policy_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "unresolved_jump.yaml"


@pytest.fixture
def simple_document() -> PolicyDocument:
    return PolicyDocument(
        tables=(
            Table(
                name="filter",
                chains=(
                    Chain(
                        name="input",
                        default=Verdict.DROP,
                        rules=(
                            Rule(match=(("in-interface", "lo"),)),
                            Rule(
                                match=(("protocol", "tcp"), ("dport", 22)),
                                action="accept",
                            ),
                        ),
                    ),
                ),
            ),
        )
    )


@pytest.fixture
def forward_jump_table() -> Table:
    """Chain 'a' jumps to 'b', which is declared after it."""
    return Table(
        name="filter",
        chains=(
            Chain(name="a", rules=(Rule(match=(("src", "1.1.1.1"),), action="b"),)),
            Chain(name="b", rules=(Rule(action="drop"),)),
        ),
    )
