import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from handrank.parser import MalformedLineError
from .runner import LOGGER, ScoringConfig, run


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Camel Cards hand ranking and scoring")
    parser.add_argument("input", type=Path, help="File with one '<hand> <stake>' record per line")
    parser.add_argument("--output", type=Path, default=None, help="Write wildcard-ranked hands here")
    parser.add_argument(
        "--strongest-first",
        action="store_true",
        help="List ranked hands from strongest to weakest (default is weakest first)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every ranked hand")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    config = ScoringConfig(
        input_path=args.input,
        output_path=args.output,
        strongest_first=args.strongest_first,
    )

    try:
        report = run(config)
    except MalformedLineError as exc:
        LOGGER.error("Malformed input in %s: %s", config.input_path, exc)
        return 2
    except OSError as exc:
        LOGGER.error("Cannot read or write scoring files: %s", exc)
        return 2

    print(f"standard: {report.standard}")
    print(f"wildcard: {report.wildcard}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
