# combo_generator.py
# Rejection-sampling generator for 5-of-36 combinations:
# - Fisher-Yates shuffle of 1..36, first 5, sorted
# - Validate against combo_rules, retry up to MAX_ATTEMPTS
# - Ceiling hit -> last candidate comes back tagged "best_effort"

import numbers
import random
from collections import Counter
from dataclasses import dataclass, field

import numpy as np

from combo_rules import ATTEMPTS, AttemptCounter, POOL_MIN, POOL_MAX, K_NUMS, failed_rules, is_valid

# ================================
# Config
# ================================

MAX_ATTEMPTS = 10000

STATUS_VALID       = "valid"
STATUS_BEST_EFFORT = "best_effort"


# ================================
# Random sources
# A source is rand_int(n) -> int in [0, n)
# ================================

def python_random_source(seed=None):
    rng = random.Random(seed)
    return rng.randrange

def numpy_random_source(seed=None):
    rng = np.random.default_rng(seed)

    def rand_int(n):
        return int(rng.integers(0, n))
    return rand_int


# ================================
# Shuffler
# ================================

def fisher_yates_shuffle(items, rand_int):
    """Shuffle items in place, walking i from the last index down to 1."""
    for i in range(len(items) - 1, 0, -1):
        j = rand_int(i + 1)
        if not (0 <= j <= i):
            raise ValueError(f"Random source returned {j}, expected a value in [0, {i}]")
        items[i], items[j] = items[j], items[i]
    return items

def sample(rand_int, pool_min=POOL_MIN, pool_max=POOL_MAX, k=K_NUMS):
    all_nums = list(range(pool_min, pool_max + 1))
    fisher_yates_shuffle(all_nums, rand_int)
    return tuple(sorted(all_nums[:k]))


# ================================
# Retry driver
# ================================

@dataclass(frozen=True)
class GenerationResult:
    numbers: tuple
    status: str
    attempts: int
    # (rule, count) pairs over the rejected candidates of this call
    rule_failures: tuple = field(default=(), compare=False)

    @property
    def is_valid(self):
        return self.status == STATUS_VALID

    def __str__(self):
        return "-".join(str(n) for n in self.numbers)


class ComboGenerator:
    """Samples candidates until one passes every rule or max_attempts runs out.

    rand_int and counter are injectable so tests can pin the random stream and
    look at an isolated attempt count.
    """

    def __init__(self, rand_int=None, counter=None, max_attempts=MAX_ATTEMPTS):
        if isinstance(max_attempts, bool) or not isinstance(max_attempts, numbers.Integral):
            raise ValueError(f"max_attempts must be an integer, got {max_attempts!r}")
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        self.rand_int = rand_int if rand_int is not None else python_random_source()
        self.counter = counter if counter is not None else AttemptCounter()
        self.max_attempts = int(max_attempts)

    @property
    def total_attempts(self):
        return self.counter.value

    def sample(self):
        return sample(self.rand_int)

    def generate_valid(self):
        candidate = None
        rejected = Counter()
        for attempt in range(1, self.max_attempts + 1):
            candidate = self.sample()
            if is_valid(candidate, self.counter):
                return GenerationResult(candidate, STATUS_VALID, attempt, tuple(sorted(rejected.items())))
            rejected.update(failed_rules(candidate))
        return GenerationResult(candidate, STATUS_BEST_EFFORT, self.max_attempts, tuple(sorted(rejected.items())))


# ================================
# Module-level API (process-wide counter)
# ================================

_default_generator = None

def default_generator():
    global _default_generator
    if _default_generator is None:
        _default_generator = ComboGenerator(counter=ATTEMPTS)
    return _default_generator

def generate_valid():
    return default_generator().generate_valid()

def total_attempts():
    return ATTEMPTS.value

def reset_attempts():
    ATTEMPTS.reset()
