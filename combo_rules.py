# combo_rules.py
# Structural rules for 5-of-36 combinations + the attempt counter

import threading

# ================================
# Config
# ================================

# ---- Pool ----
POOL_MIN = 1
POOL_MAX = 36
K_NUMS   = 5

# ---- Rules ----
MIN_GAP      = 3    # adjacent numbers must be at least this far apart
CLUSTER_SPAN = 5    # n[i+2] - n[i] at or below this is a tight cluster

RULE_MIN_GAP   = "min_gap"
RULE_ARITH     = "arithmetic_progression"
RULE_CLUSTER   = "tight_cluster"


# ================================
# Attempt counter
# ================================

class AttemptCounter:
    """Counts validation calls. Only goes down through reset()."""

    def __init__(self, start=0):
        self._value = int(start)
        self._lock = threading.Lock()

    @property
    def value(self):
        return self._value

    def increment(self):
        with self._lock:
            self._value += 1
            return self._value

    def reset(self):
        with self._lock:
            self._value = 0

    def __repr__(self):
        return f"AttemptCounter({self._value})"


# process-wide counter used when no counter is passed in
ATTEMPTS = AttemptCounter()


# ================================
# Helpers
# ================================

def normalize(numbers):
    return tuple(sorted(int(n) for n in numbers))

def check_candidate(numbers, pool_min=POOL_MIN, pool_max=POOL_MAX, k=K_NUMS):
    """Raise ValueError unless numbers is k distinct ints inside the pool."""
    nums = list(numbers)
    if len(nums) != k:
        raise ValueError(f"Expected {k} numbers, got {len(nums)}: {nums}")
    if len(set(nums)) != len(nums):
        raise ValueError(f"Duplicate numbers in combination: {nums}")
    out_of_range = [n for n in nums if not (pool_min <= n <= pool_max)]
    if out_of_range:
        raise ValueError(f"Numbers out of range ({pool_min}-{pool_max}): {out_of_range}")
    return normalize(nums)

def gaps(candidate):
    return [candidate[i+1] - candidate[i] for i in range(len(candidate)-1)]


# ================================
# Rules
# ================================

# Rule 1: every adjacent pair at least MIN_GAP apart
def min_gap_ok(candidate, min_gap=MIN_GAP):
    return all(g >= min_gap for g in gaps(candidate))

# Rule 2: all consecutive differences equal -> arithmetic progression
# Partial progressions (e.g. 3,4,3,4) are fine.
def is_arithmetic_progression(candidate):
    diffs = gaps(candidate)
    return len(set(diffs)) == 1

# Rule 3: three numbers (two positions apart) inside a span of CLUSTER_SPAN
def has_tight_cluster(candidate, span=CLUSTER_SPAN):
    for i in range(len(candidate) - 2):
        if candidate[i+2] - candidate[i] <= span:
            return True
    return False

def failed_rules(candidate):
    """Names of every rule the candidate breaks. Does not touch any counter."""
    failed = []
    if not min_gap_ok(candidate):
        failed.append(RULE_MIN_GAP)
    if is_arithmetic_progression(candidate):
        failed.append(RULE_ARITH)
    if has_tight_cluster(candidate):
        failed.append(RULE_CLUSTER)
    return failed

# candidate [TUPLE] - ascending 5 numbers
# counter [AttemptCounter] - bumped once per call; process-wide ATTEMPTS if None
def is_valid(candidate, counter=None):
    (counter if counter is not None else ATTEMPTS).increment()

    if not min_gap_ok(candidate):
        return False
    if is_arithmetic_progression(candidate):
        return False
    if has_tight_cluster(candidate):
        return False
    return True
