#!/usr/bin/env python3
"""
Load "<data> <priority>" lines into a priority queue, print it, then drain it.
Usage: python cli.py [FILE] [--order asc|desc]
Reads stdin when FILE is omitted or "-". Loads .env from the project root first.
"""

import argparse
import logging
import os
import sys
from typing import Iterable, List, Optional, Tuple

from dotenv import load_dotenv

from config import VALID_ORDERS, get_default_order, get_log_level
from pqueue import PQueue

logger = logging.getLogger(__name__)


def parse_line(line: str) -> Optional[Tuple[str, int]]:
    """Split a line into (data, priority). Returns None for blank and comment lines."""
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None
    parts = stripped.rsplit(None, 1)
    if len(parts) != 2:
        raise ValueError(f"expected '<data> <priority>', got {stripped!r}")
    data, raw_priority = parts
    try:
        priority = int(raw_priority)
    except ValueError:
        raise ValueError(f"priority must be an integer, got {raw_priority!r}") from None
    return data, priority


def load_queue(lines: Iterable[str], queue: PQueue) -> int:
    """Insert every well-formed line into queue. Returns the number of skipped lines."""
    skipped = 0
    for lineno, line in enumerate(lines, start=1):
        try:
            parsed = parse_line(line)
        except ValueError as e:
            logger.warning("Skip line %d: %s", lineno, e)
            skipped += 1
            continue
        if parsed is not None:
            queue.insert(*parsed)
    return skipped


def drain(queue: PQueue) -> List[str]:
    """Pop every item, returning the data in pop order."""
    out = []
    while queue.length() > 0:
        out.append(queue.pop())
    return out


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("file", nargs="?", default="-", help="input file, '-' for stdin")
    parser.add_argument(
        "--order",
        choices=VALID_ORDERS,
        default=None,
        help="queue order (default: PQUEUE_ORDER or desc)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), ".env"))
    logging.basicConfig(level=get_log_level(), format="%(asctime)s %(levelname)s %(message)s")

    args = build_parser().parse_args(argv)
    queue: PQueue = PQueue(args.order or get_default_order())

    try:
        if args.file == "-":
            skipped = load_queue(sys.stdin, queue)
        else:
            with open(args.file, encoding="utf-8") as fh:
                skipped = load_queue(fh, queue)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read %s: %s", args.file, e)
        print(f"ERROR: cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    logger.info("Loaded %d items (%d skipped), order=%s", queue.length(), skipped, queue.order.value)
    print(queue.format())
    for data in drain(queue):
        print(data)
    return 0


if __name__ == "__main__":
    sys.exit(main())
