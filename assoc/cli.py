"""
Association-List Command-Line Interface (CLI)

Runs the engine operations over CSV pair files (one ``key,value`` row per
pair). Keys are compared as strings; ``--ignore-case`` switches to a
case-insensitive key equality.

Usage examples:
    python -m assoc.cli show --file a.csv
    python -m assoc.cli find --file a.csv --key 2
    python -m assoc.cli replace --file a.csv --key 3 --value z --out a2.csv
    python -m assoc.cli diff --left a.csv --right b.csv
    python -m assoc.cli join --left a.csv --right b.csv --sep "+"
    python -m assoc.cli disj --left a.csv --right b.csv
"""

import argparse
import logging
import operator
import sys

from . import config
from .dao.pair_files import load_pairs, save_pairs
from .datastructures import ABSENT, diff, disj, find, fold, join, replace
from .errors import AssocListError

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Utility: key equality and output
# -------------------------------------------------------------------
def _casefold_equal(a, b):
    return a.casefold() == b.casefold()


def key_equal_for(args):
    """Pick the key-equality predicate requested on the command line."""
    return _casefold_equal if args.ignore_case else operator.eq


def print_pairs(al):
    """Display pairs one per line as ``key<TAB>value``."""
    if not al:
        print("No pairs.")
        return
    for key, value in al:
        print(f"{key}\t{value}")


def emit(al, args):
    """Write `al` to ``--out`` when given, otherwise print it."""
    if args.out:
        n = save_pairs(args.out, al)
        print(f"Wrote {n} pairs to {args.out}")
    else:
        print_pairs(al)


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_show(args):
    """Print every pair of a file."""
    print_pairs(load_pairs(args.file))


def cmd_find(args):
    """Look up one key; exit status 1 when it is absent."""
    value = find(load_pairs(args.file), args.key, key_equal_for(args))
    if value is ABSENT:
        print("<absent>")
        return 1
    print(value)
    return 0


def cmd_replace(args):
    """Insert/update a key, or delete it when no --value is given."""
    new_value = ABSENT if args.value is None else args.value
    al, old = replace(load_pairs(args.file), args.key, key_equal_for(args), new_value)
    print(f"Previous value: {'<absent>' if old is ABSENT else old}")
    emit(al, args)


def cmd_diff(args):
    """Pairs of --left whose key is not in --right."""
    emit(diff(load_pairs(args.left), load_pairs(args.right), key_equal_for(args)), args)


def cmd_join(args):
    """Keys in both files, values concatenated with --sep."""
    sep = args.sep
    al = join(load_pairs(args.left), load_pairs(args.right), key_equal_for(args), lambda a, b: a + sep + b)
    emit(al, args)


def cmd_disj(args):
    """Keys in either file, present values concatenated with --sep."""
    sep = args.sep

    def combine(a, b):
        return sep.join(v for v in (a, b) if v is not ABSENT)

    emit(disj(load_pairs(args.left), load_pairs(args.right), key_equal_for(args), combine), args)


def cmd_count(args):
    """Count the pairs of a file."""
    print(fold(load_pairs(args.file), 0, lambda k, v, acc: acc + 1))


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m assoc.cli", description="Association-list CLI")
    p.add_argument("--log-level", default=config.LOG_LEVEL,
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--ignore-case", action="store_true", help="Compare keys case-insensitively")
    sub = p.add_subparsers(dest="cmd", required=True)

    # --- single-file commands ---
    s = sub.add_parser("show", help="Print all pairs")
    s.add_argument("--file", required=True)
    s.set_defaults(func=cmd_show)

    s = sub.add_parser("find", help="Look up a key")
    s.add_argument("--file", required=True)
    s.add_argument("--key", required=True)
    s.set_defaults(func=cmd_find)

    s = sub.add_parser("replace", help="Insert, update or delete a key")
    s.add_argument("--file", required=True)
    s.add_argument("--key", required=True)
    s.add_argument("--value", default=None, help="Omit to delete the key")
    s.add_argument("--out")
    s.set_defaults(func=cmd_replace)

    s = sub.add_parser("count", help="Count pairs")
    s.add_argument("--file", required=True)
    s.set_defaults(func=cmd_count)

    # --- two-file merges ---
    s = sub.add_parser("diff", help="Left pairs whose key is not in right")
    s.add_argument("--left", required=True)
    s.add_argument("--right", required=True)
    s.add_argument("--out")
    s.set_defaults(func=cmd_diff)

    s = sub.add_parser("join", help="Keys in both files")
    s.add_argument("--left", required=True)
    s.add_argument("--right", required=True)
    s.add_argument("--sep", default="")
    s.add_argument("--out")
    s.set_defaults(func=cmd_join)

    s = sub.add_parser("disj", help="Keys in either file")
    s.add_argument("--left", required=True)
    s.add_argument("--right", required=True)
    s.add_argument("--sep", default="")
    s.add_argument("--out")
    s.set_defaults(func=cmd_disj)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m assoc.cli`; returns the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    try:
        status = args.func(args)
    except (AssocListError, OSError) as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return status or 0


if __name__ == "__main__":
    sys.exit(main())
