"""
backed-enum Command Line
========================

Inspect an enum definition file and try reverse lookups against it.

Usage:
    python -m backed_enum roles.json
    python -m backed_enum statuses.yaml --lookup active --lookup ACTIVE
    backed-enum roles.json --lookup 2 --keep-numeric-keys

Output:
    One `NAME = value` line per case, in definition order, followed by one
    `raw -> NAME` (or `raw -> (no match)`) line per lookup.

Exit Codes:
    0: All lookups matched
    1: At least one lookup missed
    2: The definition could not be loaded or validated
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from backed_enum.adapters import load_definition
from backed_enum.collection import BackedEnum, build_backed_enum
from backed_enum.config import settings, setup_logging
from backed_enum.models import EnumCase


logger = logging.getLogger(__name__)


def _lookup(collection: BackedEnum, raw: str) -> Optional[EnumCase]:
    """Try `raw` as given, then as an int, then as a float."""
    found = collection.from_value(raw)
    if found is not None:
        return found

    for convert in (int, float):
        try:
            number = convert(raw)
        except ValueError:
            continue
        found = collection.from_value(number)
        if found is not None:
            return found

    return None


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="backed-enum",
        description="Inspect a backed enum definition file (JSON or YAML)",
    )
    parser.add_argument(
        "path",
        type=str,
        help="Path to the definition file",
    )
    parser.add_argument(
        "--lookup",
        action="append",
        default=[],
        metavar="VALUE",
        help="Backing value to resolve (repeatable)",
    )
    parser.add_argument(
        "--name",
        type=str,
        default=None,
        help="Collection name (default: file name without suffix)",
    )
    parser.add_argument(
        "--keep-numeric-keys",
        action="store_true",
        help="Do not drop numeric-looking keys from the definition",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help=f"Log level (default: {settings.logging.level})",
    )

    args = parser.parse_args(argv)

    run_settings = settings
    if args.log_level:
        run_settings = settings.model_copy(update={
            "logging": settings.logging.model_copy(update={"level": args.log_level}),
        })
    setup_logging(run_settings)

    try:
        definition = load_definition(
            args.path,
            filter_numeric_keys=False if args.keep_numeric_keys else None,
        )
        collection = build_backed_enum(
            definition,
            name=args.name or Path(args.path).stem,
        )
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load {args.path}: {e}")
        return 2

    for case in collection:
        print(f"{case.name} = {case.value!r}")

    missed = False
    for raw in args.lookup:
        case = _lookup(collection, raw)
        if case is None:
            print(f"{raw} -> (no match)")
            missed = True
        else:
            print(f"{raw} -> {case.name}")

    return 1 if missed else 0


if __name__ == "__main__":
    sys.exit(main())
