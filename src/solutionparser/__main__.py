# -------------------------------------
# solutionparser CLI entry point
# -------------------------------------
"""
CLI entry point.

Usage:
    python -m solutionparser "I eat [an apple/a banana]." --locale en
    python -m solutionparser --file patterns.txt --locale de --output solutions.csv
    cat patterns.txt | python -m solutionparser --locale fr --count
"""
from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

import yaml

from .collation import Collator
from .export import to_csv, to_text, write_output
from .locales import LocaleError, get_locale, list_locales, use_locales
from .patterns import describe_pattern, parse_patterns
from .solutions import _selftest, iter_solutions, unfold_solutions


def _read_lines(args: argparse.Namespace) -> list[str]:
    if args.patterns:
        return list(args.patterns)
    if args.file:
        return Path(args.file).read_text(encoding="utf-8").splitlines()
    return sys.stdin.read().splitlines()


def _main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="solutionparser",
        description="Expand solution patterns such as 'I eat [an apple/a banana].' into literal sentences.",
    )
    p.add_argument("patterns", nargs="*", help="Patterns (default: read from --file or stdin, one per line)")
    p.add_argument("--file", "-f", metavar="PATH", help="Read patterns from a file, one per line")
    p.add_argument("--locale", "-l", default="en", help="Locale of the patterns (default: en)")
    p.add_argument("--locales", metavar="YAML_PATH", help="Use a custom locale table")
    p.add_argument("--list-locales", action="store_true", help="List supported locales and exit")
    p.add_argument("--csv", action="store_true", help="Print sentences as CSV (one quoted sentence per line)")
    p.add_argument("--output", "-o", metavar="PATH", help="Write sentences to a file (.csv for CSV, text otherwise)")
    p.add_argument("--count", action="store_true", help="Print the number of solutions and sentences")
    p.add_argument("--references", action="store_true", help="Print one reference per solution ('*' marks solutions with choices)")
    p.add_argument("--structure", action="store_true", help="Print the parsed pattern structure")
    p.add_argument("--limit", type=int, default=0, help="Limit printed lines (0 = no limit)")
    p.add_argument("--verbose", "-v", action="store_true", help="Print statistics to stderr")
    p.add_argument("--selftest", action="store_true", help="Run selftest and exit")
    args = p.parse_args(argv)
    if args.limit < 0:
        p.error("--limit must be >= 0")

    if args.selftest:
        _selftest()
        return 0

    try:
        if args.locales:
            use_locales(args.locales)
        if args.list_locales:
            for loc in list_locales():
                print(f"{loc.code}\t{loc.name}" + ("" if loc.separators else "\t(no word separators)"))
            return 0
        locale = get_locale(args.locale).code
    except (OSError, yaml.YAMLError, LocaleError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        lines = _read_lines(args)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    t0 = time.perf_counter()
    collator = Collator(locale)
    pattern_set = parse_patterns(lines, locale, collator)
    t1 = time.perf_counter()

    if args.structure:
        for pattern in pattern_set.patterns:
            for line in describe_pattern(pattern):
                print(line)
        return 0

    solutions = list(iter_solutions(pattern_set))
    cached = len(collator)
    collator.clear()
    t2 = time.perf_counter()

    if args.count:
        print(f"patterns:  {len(pattern_set.patterns)}")
        print(f"solutions: {pattern_set.size}")
        print(f"sentences: {sum(s.size for s in solutions)}")
        return 0

    if args.references:
        out = [("* " if s.is_complex else "  ") + s.reference for s in solutions]
    else:
        out = unfold_solutions(solutions)
    t3 = time.perf_counter()

    if args.verbose:
        print(
            f"patterns={len(pattern_set.patterns)} solutions={pattern_set.size} lines={len(out)} "
            f"comparisons={cached} parse={t1 - t0:.3f}s index={t2 - t1:.3f}s unfold={t3 - t2:.3f}s",
            file=sys.stderr,
        )

    if args.output:
        path = write_output(out, args.output)
        if args.verbose:
            print(f"wrote {len(out)} lines to {path}", file=sys.stderr)
        return 0

    if args.limit:
        out = out[: args.limit]

    if args.csv:
        sys.stdout.write(to_csv(out))
    elif out:
        print(to_text(out))
    return 0


def main() -> None:
    raise SystemExit(_main())


if __name__ == "__main__":
    main()
