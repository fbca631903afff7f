"""
Tests for the structural rules and the attempt counter.

These tests verify:
1. The three rules on hand-picked combinations
2. is_valid() bumps the counter exactly once per call
3. Candidate shape checks and normalization
4. The exact number of valid 5-of-36 combinations
"""

from itertools import combinations

import pytest

import combo_rules
from combo_rules import (
    AttemptCounter,
    RULE_ARITH,
    RULE_CLUSTER,
    RULE_MIN_GAP,
    check_candidate,
    failed_rules,
    has_tight_cluster,
    is_arithmetic_progression,
    is_valid,
    min_gap_ok,
    normalize,
)


# =============================================================================
# VALIDATOR CASES
# =============================================================================

@pytest.mark.parametrize("candidate, expected", [
    ((1, 4, 7, 10, 13), False),   # constant gap 3
    ((1, 5, 9, 14, 20), True),
    ((1, 2, 3, 10, 20), False),   # adjacent gap 1
    ((1, 6, 10, 15, 20), True),
    ((1, 4, 8, 11, 15), True),    # 3,4,3,4 is not a full progression
    ((2, 8, 14, 20, 26), False),  # constant gap 6
    ((3, 9, 17, 24, 33), True),
])
def test_is_valid_cases(candidate, expected):
    counter = AttemptCounter()
    assert is_valid(candidate, counter) is expected
    assert counter.value == 1


def test_min_gap_rule():
    assert min_gap_ok((1, 4, 7, 11, 20))
    assert not min_gap_ok((1, 4, 6, 11, 20))


def test_arithmetic_progression_needs_all_four_gaps():
    assert is_arithmetic_progression((5, 10, 15, 20, 25))
    assert not is_arithmetic_progression((5, 10, 15, 20, 26))
    assert not is_arithmetic_progression((1, 4, 7, 10, 20))


def test_tight_cluster_windows():
    assert has_tight_cluster((1, 3, 6, 20, 30))    # (1,6) span 5
    assert has_tight_cluster((1, 10, 12, 15, 30))  # (10,15) span 5
    assert has_tight_cluster((1, 10, 20, 22, 25))  # (20,25) span 5
    assert not has_tight_cluster((1, 4, 7, 10, 13))


def test_failed_rules_lists_every_broken_rule():
    assert failed_rules((1, 2, 3, 10, 20)) == [RULE_MIN_GAP, RULE_CLUSTER]
    assert failed_rules((1, 4, 7, 10, 13)) == [RULE_ARITH]
    assert failed_rules((1, 5, 9, 14, 20)) == []


def test_failed_rules_leaves_counters_alone():
    before = combo_rules.ATTEMPTS.value
    failed_rules((1, 2, 3, 4, 5))
    assert combo_rules.ATTEMPTS.value == before


# =============================================================================
# ATTEMPT COUNTER
# =============================================================================

def test_counter_counts_rejections_too():
    counter = AttemptCounter()
    is_valid((1, 2, 3, 4, 5), counter)
    is_valid((1, 4, 7, 10, 13), counter)
    is_valid((1, 5, 9, 14, 20), counter)
    assert counter.value == 3


def test_counter_is_monotonic_until_reset():
    counter = AttemptCounter()
    seen = []
    for _ in range(5):
        seen.append(counter.increment())
    assert seen == [1, 2, 3, 4, 5]
    counter.reset()
    assert counter.value == 0


def test_default_counter_is_process_wide():
    start = combo_rules.ATTEMPTS.value
    is_valid((1, 5, 9, 14, 20))
    is_valid((1, 2, 3, 4, 5))
    assert combo_rules.ATTEMPTS.value == start + 2


# =============================================================================
# SHAPE / NORMALIZATION
# =============================================================================

def test_normalize_ignores_order():
    assert normalize([20, 1, 14, 9, 5]) == normalize((5, 9, 1, 20, 14)) == (1, 5, 9, 14, 20)


@pytest.mark.parametrize("numbers, message", [
    ([1, 2, 3, 4], "Expected 5"),
    ([1, 2, 3, 4, 4], "Duplicate"),
    ([0, 5, 10, 15, 20], "out of range"),
    ([5, 10, 15, 20, 37], "out of range"),
])
def test_check_candidate_rejects_bad_shapes(numbers, message):
    with pytest.raises(ValueError, match=message):
        check_candidate(numbers)


def test_check_candidate_returns_sorted_tuple():
    assert check_candidate([33, 3, 24, 9, 17]) == (3, 9, 17, 24, 33)


# =============================================================================
# EXHAUSTIVE COUNT
# =============================================================================

def test_exact_number_of_valid_combinations():
    # gap >= 3 everywhere: C(28, 5) = 98280, minus 84 full progressions
    counter = AttemptCounter()
    valid = sum(1 for c in combinations(range(1, 37), 5) if is_valid(c, counter))
    assert valid == 98196
    assert counter.value == 376992
