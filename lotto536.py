# lotto536.py
# 5/36 combination generator (command line)
#
# EXAMPLE USAGE: python3 lotto536.py -n 3 --history
#                python3 lotto536.py --batch 2000 --seed 7
#                python3 lotto536.py --check 3 9 17 24 33

import argparse
import sys

import pandas as pd

from combo_analysis import run_batch, summarize_batch
from combo_generator import ComboGenerator, MAX_ATTEMPTS, python_random_source
from combo_history import GenerationHistory, MAX_HISTORY
from combo_rules import AttemptCounter, check_candidate, failed_rules, is_valid


def print_result(result, max_attempts):
    if result.is_valid:
        print(f"Found valid combination after {result.attempts} attempts: {result}")
    else:
        print(f"WARNING: Could not find valid combination after {max_attempts} attempts")
        print(f"Best-effort combination (fails rules): {result}")

def print_history(history):
    print(f"\nLast {len(history)} generations (newest first):")
    if not len(history):
        print("No history yet. Generate some numbers!")
        return
    df = history.to_frame()
    df["DrawDate"] = [r.full_date for r in history]
    print(df.to_string(index=False))

def print_summary(summary):
    print(f"\nBatch of {summary['runs']} generations:")
    print(f"  total attempts:   {summary['total_attempts']}")
    print(f"  mean attempts:    {summary['mean_attempts']}")
    print(f"  max attempts:     {summary['max_attempts']}")
    print(f"  acceptance rate:  {summary['acceptance_rate']}")
    print(f"  best-effort:      {summary['best_effort']}")
    print(f"  chi-square:       {summary['chi_square']} (dof={summary['dof']})")
    print("\nRejections by rule:")
    if not summary["rule_failures"]:
        print("  none")
    for rule, count in summary["rule_failures"].most_common():
        print(f"  {rule}: {count}")
    print("\nNumber frequency:")
    with pd.option_context("display.max_rows", None):
        print(summary["frequency"].to_frame().T.to_string())

def print_check(numbers):
    candidate = check_candidate(numbers)
    label = "-".join(str(n) for n in candidate)
    if is_valid(candidate, AttemptCounter()):
        print(f"{label} is valid")
    else:
        print(f"{label} is invalid: {', '.join(failed_rules(candidate))}")

def build_parser():
    parser = argparse.ArgumentParser(description="Generate 5/36 lotto combinations")
    parser.add_argument("-n", "--count", type=int, default=None, help="Number of combinations to generate (default 1)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible run")
    parser.add_argument("--max-attempts", type=int, default=MAX_ATTEMPTS, help="Attempt ceiling per combination")
    parser.add_argument("--history", action="store_true", help=f"Show the last {MAX_HISTORY} generations")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--batch", type=int, default=None, help="Run N generations and print statistics instead")
    mode.add_argument("--check", type=int, nargs="+", default=None, metavar="N", help="Check 5 numbers against the rules")
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        if (args.batch is not None or args.check is not None) and (args.history or args.count is not None):
            raise ValueError("--count and --history cannot be combined with --batch or --check")

        if args.check is not None:
            print_check(args.check)
            return 0

        rand_int = python_random_source(args.seed)
        generator = ComboGenerator(rand_int=rand_int, max_attempts=args.max_attempts)

        if args.batch is not None:
            results = run_batch(args.batch, generator=generator)
            print_summary(summarize_batch(results))
            return 0

        count = 1 if args.count is None else args.count
        if count < 1:
            raise ValueError(f"--count must be at least 1, got {count}")

        history = GenerationHistory()
        for _ in range(count):
            result = generator.generate_valid()
            print_result(result, generator.max_attempts)
            history.add(result.numbers)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print(f"\nTotal attempts: {generator.total_attempts}")
    print(f"Total generations: {history.generation_count}")
    if args.history:
        print_history(history)
    return 0


if __name__ == "__main__":
    sys.exit(main())
