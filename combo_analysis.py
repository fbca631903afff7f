# combo_analysis.py
# Batch statistics for the 5/36 generator:
# - acceptance rate, attempts per combination, best-effort count
# - rejections per rule
# - per-number frequency + chi-square against a flat pool

from collections import Counter

import numpy as np
import pandas as pd

from combo_generator import ComboGenerator, STATUS_BEST_EFFORT, STATUS_VALID
from combo_rules import AttemptCounter, POOL_MIN, POOL_MAX, failed_rules

# ================================
# Config
# ================================

DEBUG_BATCH = False    # print every generation of a batch


# Run a batch of generations
# runs [INTEGER] - Number of generate_valid() calls
# generator [ComboGenerator] - generator to drive; a fresh one with a private counter if None
# rand_int, max_attempts - only for the fresh generator; passing them with generator is an error
def run_batch(runs, generator=None, rand_int=None, max_attempts=None):
    if int(runs) < 1:
        raise ValueError(f"Batch size must be at least 1, got {runs}")
    if generator is not None and (rand_int is not None or max_attempts is not None):
        raise ValueError("Pass either a generator or rand_int/max_attempts, not both")
    if generator is None:
        kwargs = {"rand_int": rand_int, "counter": AttemptCounter()}
        if max_attempts is not None:
            kwargs["max_attempts"] = max_attempts
        generator = ComboGenerator(**kwargs)

    results = []
    for i in range(int(runs)):
        result = generator.generate_valid()
        if DEBUG_BATCH:
            print(f"{i+1}. {result} ({result.status}, {result.attempts} attempts)")
        results.append(result)
    return results

# Frequency of each number across a list of combinations (1..36, zeros included)
def number_frequency(combos, pool_min=POOL_MIN, pool_max=POOL_MAX):
    freq = Counter(n for combo in combos for n in combo)
    counts = pd.Series({n: freq.get(n, 0) for n in range(pool_min, pool_max + 1)}, name="count")
    counts.index.name = "number"
    return counts

# Pearson chi-square of observed counts against a flat expectation
def chi_square_uniformity(counts):
    observed = np.asarray(counts, dtype=float)
    if observed.size == 0 or observed.sum() == 0:
        raise ValueError("Need at least one observation for a chi-square score")
    expected = observed.sum() / observed.size
    return float(np.sum((observed - expected) ** 2 / expected))

# How often each rule rejects raw candidates
def rule_failure_breakdown(candidates):
    breakdown = Counter()
    for candidate in candidates:
        for rule in failed_rules(candidate):
            breakdown[rule] += 1
    return breakdown

# Rejections per rule summed over the batch (one candidate can break several rules)
def batch_rule_failures(results):
    totals = Counter()
    for r in results:
        totals.update(dict(r.rule_failures))
    return totals

def summarize_batch(results):
    if not results:
        raise ValueError("Cannot summarize an empty batch")
    attempts = np.array([r.attempts for r in results])
    valid = sum(1 for r in results if r.status == STATUS_VALID)
    best_effort = sum(1 for r in results if r.status == STATUS_BEST_EFFORT)
    freq = number_frequency([r.numbers for r in results])
    return {
        "runs": len(results),
        "total_attempts": int(attempts.sum()),
        "mean_attempts": round(float(attempts.mean()), 2),
        "max_attempts": int(attempts.max()),
        "acceptance_rate": round(valid / float(attempts.sum()), 4),
        "best_effort": best_effort,
        "rule_failures": batch_rule_failures(results),
        "chi_square": round(chi_square_uniformity(freq.values), 2),
        "dof": (POOL_MAX - POOL_MIN),
        "frequency": freq,
    }

# Share of uniform 5-subsets passing every rule, estimated from raw samples
def estimate_acceptance(samples, rand_int=None):
    if int(samples) < 1:
        raise ValueError(f"Sample size must be at least 1, got {samples}")
    gen = ComboGenerator(rand_int=rand_int, counter=AttemptCounter())
    raw = [gen.sample() for _ in range(int(samples))]
    breakdown = rule_failure_breakdown(raw)
    passed = sum(1 for c in raw if not failed_rules(c))
    return passed / float(len(raw)), breakdown
