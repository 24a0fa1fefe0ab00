#!/usr/bin/env python3
"""Run the range list demo or apply add/remove operations from a file."""

import argparse
import logging
from pathlib import Path
from typing import List, Tuple

from rangelist import RangeList
from rangelist.config import load_settings
from rangelist.observability import configure_logging

logger = logging.getLogger("rangelist.cli")

DEMO_STEPS: List[Tuple[str, int, int]] = [
    ("add", 1, 5),
    ("add", 10, 20),
    ("add", 20, 20),
    ("add", 20, 21),
    ("add", 2, 4),
    ("add", 3, 8),
    ("remove", 10, 10),
    ("remove", 10, 11),
    ("remove", 15, 17),
    ("remove", 3, 19),
    ("remove", 10, 15),
    ("add", 3, 19),
]

OPERATIONS = {"add", "remove"}


def parse_operations(lines) -> List[Tuple[int, str, int, int]]:
    """Parse ``add LOW HIGH`` / ``remove LOW HIGH`` lines.

    Returns ``(line_number, operation, low, high)`` tuples and raises
    ``ValueError`` naming the first malformed line.
    """
    parsed = []
    for number, line in enumerate(lines, start=1):
        text = line.split("#", 1)[0].strip()
        if not text:
            continue
        parts = text.split()
        if len(parts) != 3 or parts[0].lower() not in OPERATIONS:
            raise ValueError(f"line {number}: expected 'add|remove LOW HIGH', got {text!r}")
        try:
            low, high = int(parts[1]), int(parts[2])
        except ValueError:
            raise ValueError(f"line {number}: bounds must be integers, got {text!r}") from None
        parsed.append((number, parts[0].lower(), low, high))
    return parsed


def run(steps, trace: bool = False) -> RangeList:
    range_list = RangeList()
    for _, operation, low, high in steps:
        getattr(range_list, operation)(low, high)
        if trace:
            print(f"{operation} [{low},{high}) -> {range_list.to_display_string()}")
    return range_list


def run_demo() -> RangeList:
    steps = [(i, op, low, high) for i, (op, low, high) in enumerate(DEMO_STEPS, start=1)]
    return run(steps, trace=True)


def apply_file(path: str, trace: bool = False) -> RangeList:
    with open(Path(path), "r", encoding="utf-8") as f:
        steps = parse_operations(f)
    logger.debug("Applying %d operations from %s", len(steps), path)
    range_list = run(steps, trace=trace)
    if not trace:
        print(range_list.to_display_string())
    return range_list


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Maintain a list of half-open integer ranges")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("demo", help="Run the reference add/remove sequence")

    a = sub.add_parser("apply", help="Apply operations read from a file")
    a.add_argument("file", help="File with one 'add|remove LOW HIGH' per line")
    a.add_argument("--trace", action="store_true", help="Print the list after every operation")

    args = parser.parse_args(argv)
    configure_logging(load_settings())

    if args.command == "demo":
        run_demo()
    elif args.command == "apply":
        try:
            apply_file(args.file, trace=args.trace)
        except (OSError, ValueError) as exc:
            parser.error(str(exc))


if __name__ == "__main__":
    main()
