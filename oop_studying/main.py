"""
main.py — OOP Studying entry point
==================================
Runs the selected object-oriented demonstrations. With no options nothing
runs, so pick what to see:

Usage:
    oop-studying [--demo NAME ...] [--all] [--summary]
    python -m oop_studying --demo overriding --demo scope
"""

import argparse
import sys

from .report import print_dispatch_table
from .tester import DEMOS, demo_key


def build_parser():
    parser = argparse.ArgumentParser(description="Object-oriented programming demonstrations")
    parser.add_argument("--demo", action="append", default=[], metavar="NAME",
                        help=f"Demo to run, repeatable ({', '.join(DEMOS)})")
    parser.add_argument("--all", action="store_true",
                        help="Run every demo in order")
    parser.add_argument("--summary", action="store_true",
                        help="Print which class answers each method call")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        # 1. Resolve every name first so a typo runs nothing, even with --all
        keys = [demo_key(name) for name in args.demo]
    except ValueError as e:
        print(f"❌ Error: {e}")
        return 1

    # 2. Run them in the order requested; --all wins over --demo
    for key in (list(DEMOS) if args.all else keys):
        print(f"--- {key.capitalize()} ---")
        DEMOS[key]()

    # 3. Optional summary
    if args.summary:
        print_dispatch_table()

    return 0


if __name__ == "__main__":
    sys.exit(main())
