"""Tests for the intervention policy."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from readmission.config import ScoringConfig
from readmission.services.interventions import HIGH_RISK_INTERVENTIONS, InterventionPlanner

HIGH_RISK = ["Daily nurse check-ins", "Medication review"]


@pytest.fixture
def planner() -> InterventionPlanner:
    return InterventionPlanner(ScoringConfig())


@pytest.mark.parametrize("score", [0.0, 3.5, 6.99, 7.0, -1.0])
def test_no_interventions_at_or_below_threshold(planner: InterventionPlanner, score: float) -> None:
    assert planner.plan(score) == []


@pytest.mark.parametrize("score", [7.01, 7.2, 12.0, 1e6])
def test_high_risk_set_above_threshold(planner: InterventionPlanner, score: float) -> None:
    assert planner.plan(score) == HIGH_RISK


@given(score=st.floats(allow_nan=False))
def test_only_two_possible_outcomes(score: float) -> None:
    result = InterventionPlanner(ScoringConfig()).plan(score)
    assert result in ([], HIGH_RISK)
    assert (result == HIGH_RISK) == (score > 7.0)


def test_results_are_plain_strings(planner: InterventionPlanner) -> None:
    result = planner.plan(9.0)
    assert all(type(item) is str for item in result)
    assert [item.value for item in HIGH_RISK_INTERVENTIONS] == HIGH_RISK


def test_each_call_returns_a_fresh_list(planner: InterventionPlanner) -> None:
    first = planner.plan(9.0)
    first.append("Discharge")

    assert planner.plan(9.0) == HIGH_RISK


def test_custom_threshold() -> None:
    planner = InterventionPlanner(ScoringConfig(intervention_threshold=2.0))

    assert planner.plan(2.0) == []
    assert planner.plan(2.5) == HIGH_RISK


def test_threshold_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INTERVENTION_THRESHOLD", "1.0")
    assert InterventionPlanner().plan(1.5) == HIGH_RISK
