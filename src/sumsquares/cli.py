"""Command line interface for sumsquares."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

import yaml
from pydantic import ValidationError

from .config import load_config, load_settings
from .core import SumSquaresError, sum_squares
from .verify import check

logger = logging.getLogger(__name__)


def format_result(bound: int, total: int) -> str:
    return f"Sum of squares 1..{bound} = {total}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sumsquares", description="Sum the squares of 1..N")
    parser.add_argument("--bound", type=int, help="Inclusive upper bound (default 10)")
    parser.add_argument("--width", type=int, help="Signed integer width in bits; overflow is an error")
    parser.add_argument("--verify", action="store_true", help="Check the total against the closed form")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--log-level", help="Logging level")
    return parser


def _overrides(args: argparse.Namespace) -> dict[str, Any]:
    values = {"bound": args.bound, "width": args.width, "log_level": args.log_level}
    return {key: value for key, value in values.items() if value is not None}


def run(args: argparse.Namespace) -> int:
    settings = load_settings(**load_config(args.config, overrides=_overrides(args)))
    logging.getLogger().setLevel(settings.log_level)
    logger.info("Computing sum of squares for bound %d", settings.bound)
    total = sum_squares(settings.bound, width=settings.width)
    if args.verify:
        check(settings.bound, total)
        logger.info("Closed form agrees for bound %d", settings.bound)
    print(format_result(settings.bound, total))
    return 0


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.WARNING)
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return run(args)
    except (SumSquaresError, ValidationError, OSError, yaml.YAMLError) as exc:
        logger.debug("run failed", exc_info=True)
        raise SystemExit(f"sumsquares: {exc}") from exc


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main(sys.argv[1:]))
