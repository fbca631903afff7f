# combo_history.py
# Bounded, newest-first log of generated combinations

import datetime

import pandas as pd

from combo_rules import K_NUMS

# ================================
# Config
# ================================

MAX_HISTORY = 10


class GenerationRecord:
    def __init__(self, numbers, timestamp=None):
        self.numbers = tuple(numbers)
        self.timestamp = timestamp if timestamp is not None else datetime.datetime.now()

    @property
    def short_time(self):
        return self.timestamp.strftime("%H:%M")

    @property
    def full_date(self):
        return self.timestamp.strftime("%m/%d/%Y %H:%M:%S")

    def __eq__(self, other):
        if not isinstance(other, GenerationRecord):
            return NotImplemented
        return self.numbers == other.numbers and self.timestamp == other.timestamp

    def __repr__(self):
        return f"GenerationRecord({'-'.join(str(n) for n in self.numbers)} @ {self.full_date})"


class GenerationHistory:
    """Keeps the last max_size records (newest first) and a lifetime count.

    clear() drops the records but not the generation count.
    """

    def __init__(self, max_size=MAX_HISTORY):
        if int(max_size) < 1:
            raise ValueError(f"History size must be at least 1, got {max_size}")
        self.max_size = int(max_size)
        self.records = []
        self.generation_count = 0

    def add(self, numbers, timestamp=None):
        record = GenerationRecord(numbers, timestamp)
        self.records.insert(0, record)
        # keep only the newest max_size entries
        del self.records[self.max_size:]
        self.generation_count += 1
        return record

    def clear(self):
        self.records = []

    def latest(self):
        return self.records[0] if self.records else None

    def __len__(self):
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    # Table view: Draw Date + N1..N5, newest first
    def to_frame(self):
        cols = [f"N{i+1}" for i in range(K_NUMS)]
        rows = [[r.timestamp] + list(r.numbers) for r in self.records]
        df = pd.DataFrame(rows, columns=["DrawDate"] + cols)
        return df.astype({c: int for c in cols})
