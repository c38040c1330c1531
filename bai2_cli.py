"""
bai2_cli.py
Command-line entry point. Parses a BAI2 file and prints it as JSON, or
writes the balances / transactions tables as CSV.

Optional env vars (command-line flags take precedence):
    BAI2_LOG_LEVEL          logging level, default WARNING
    BAI2_DEFAULT_CURRENCY   currency for groups that leave it blank, default USD
    BAI2_STRICT             "1"/"true" to fail on control total mismatches
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from bai2_errors import Bai2Error
from bai2_parser import balances_frame, parse_bai2, to_json, transactions_frame

logger = logging.getLogger("bai2")

OUTPUT_FORMATS = ("json", "balances-csv", "transactions-csv")
_TRUTHY = ("1", "true", "yes", "on")


def get_config() -> dict:
    config = {}
    config["BAI2_LOG_LEVEL"]        = (os.environ.get("BAI2_LOG_LEVEL") or "WARNING").upper()
    config["BAI2_DEFAULT_CURRENCY"] = os.environ.get("BAI2_DEFAULT_CURRENCY") or "USD"
    config["BAI2_STRICT"]           = (os.environ.get("BAI2_STRICT") or "").strip().lower() in _TRUTHY
    return config


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bai2", description="Parse a BAI2 file")
    parser.add_argument("path", help="path to your BAI2 file")
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default="json",
        help="output format (default: json)",
    )
    parser.add_argument("--output", "-o", help="write to this file instead of stdout")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="fail when trailer control totals disagree with the records read",
    )
    parser.add_argument("--currency", help="default currency code for groups without one")
    parser.add_argument("--log-level", help="logging level (DEBUG, INFO, WARNING, ...)")
    return parser


def render(file_rec, output_format: str) -> str:
    if output_format == "balances-csv":
        return balances_frame(file_rec).to_csv(index=False)
    if output_format == "transactions-csv":
        return transactions_frame(file_rec).to_csv(index=False)
    return to_json(file_rec) + "\n"


def main(argv: Optional[List[str]] = None) -> int:
    config = get_config()
    args = build_arg_parser().parse_args(argv)

    setup_logging(args.log_level or config["BAI2_LOG_LEVEL"])
    strict = config["BAI2_STRICT"] if args.strict is None else args.strict
    currency = args.currency or config["BAI2_DEFAULT_CURRENCY"]

    try:
        with open(args.path, "r", encoding="utf-8", errors="replace") as f:
            content = f.read()
    except OSError as e:
        logger.error(f"could not read file `{args.path}`: {e}")
        print(f"could not read file `{args.path}`", file=sys.stderr)
        return 2

    try:
        file_rec = parse_bai2(content, default_currency=currency, strict=strict)
    except Bai2Error as e:
        logger.error(f"Failed to parse {args.path}: {e}")
        print(f"Failed to parse file: {e}", file=sys.stderr)
        return 1

    output = render(file_rec, args.format)
    if args.output:
        with open(args.output, "w", newline="", encoding="utf-8") as f:
            f.write(output)
        logger.info(f"Wrote {args.format} output to {args.output}")
    else:
        sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
