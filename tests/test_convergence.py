# tests/test_convergence.py
"""
NoImprovement criterion.

Covers:
- first check only records the baseline
- patience=1 stops on the first non-improving objective (equal counts)
- strict improvement resets the stale count
- reset() clears state and history
"""

from __future__ import annotations

import pytest

from medoidsearch.utils.convergence import NoImprovement
from medoidsearch.base import InvalidArgumentError


def test_first_check_records_baseline():
    crit = NoImprovement()
    assert crit.check({"iteration": 0, "objective": 100.0}) is False
    assert crit.history == []


def test_greedy_stops_on_equal_objective():
    crit = NoImprovement(patience=1)
    assert crit.check({"iteration": 0, "objective": 10.0}) is False
    assert crit.check({"iteration": 1, "objective": 7.0}) is False
    assert crit.check({"iteration": 2, "objective": 7.0}) is True


def test_greedy_stops_on_worse_objective():
    crit = NoImprovement()
    crit.check({"iteration": 0, "objective": 10.0})
    assert crit.check({"iteration": 1, "objective": 11.0}) is True


def test_patience_counts_consecutive_stale_steps():
    crit = NoImprovement(patience=2)
    assert crit.check({"iteration": 0, "objective": 10.0}) is False
    assert crit.check({"iteration": 1, "objective": 12.0}) is False  # stale 1
    assert crit.check({"iteration": 2, "objective": 9.0}) is False   # improved, reset
    assert crit.check({"iteration": 3, "objective": 9.5}) is False   # stale 1
    assert crit.check({"iteration": 4, "objective": 9.0}) is True    # stale 2

    assert [h["improved"] for h in crit.history] == [False, True, False, False]
    assert crit.history[-1]["stale_count"] == 2


def test_improvement_is_against_best_not_previous():
    crit = NoImprovement(patience=3)
    crit.check({"iteration": 0, "objective": 5.0})
    crit.check({"iteration": 1, "objective": 8.0})
    # lower than the previous step but not than the best
    crit.check({"iteration": 2, "objective": 6.0})
    assert crit.history[-1]["improved"] is False
    assert crit.history[-1]["stale_count"] == 2


def test_reset_clears_state():
    crit = NoImprovement()
    crit.check({"iteration": 0, "objective": 1.0})
    crit.check({"iteration": 1, "objective": 1.0})
    crit.reset()
    assert crit.history == []
    assert crit.check({"iteration": 0, "objective": 1.0}) is False


@pytest.mark.parametrize("patience", [0, -1, 1.5, None])
def test_invalid_patience(patience):
    with pytest.raises(InvalidArgumentError):
        NoImprovement(patience=patience)
