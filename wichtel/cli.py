"""Command line entry point: ``wichtel draw names.txt``."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from wichtel_core import UnsatisfiableError, draw, extract, render_text

from .config import load_env, make_rng, runtime_config

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wichtel", description="Draw a gift-exchange circle")
    sub = parser.add_subparsers(dest="command", required=True)

    p_draw = sub.add_parser("draw", help="Draw one assignment from a names file")
    p_draw.add_argument("file", type=Path, help="Text file, one 'First Last' per line")
    p_draw.add_argument("--seed", type=int, default=None, help="Seed for a reproducible draw")
    p_draw.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Give up after N rejected candidates (default: unbounded)",
    )
    p_draw.add_argument("--json", action="store_true", help="Print the result as JSON")
    p_draw.add_argument("--env-file", default=None, help="Path to .env file")
    p_draw.add_argument("-v", "--verbose", action="store_true", help="Log every rejected attempt")
    return parser


def _cmd_draw(args: argparse.Namespace) -> int:
    load_env(args.env_file)
    try:
        cfg = runtime_config()
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else cfg.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        text = args.file.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Cannot read {args.file}: {exc}", file=sys.stderr)
        return 1

    participants = extract(text)
    if len(participants) < 2:
        print(
            f"Need at least two participants, found {len(participants)} in {args.file}",
            file=sys.stderr,
        )
        return 1

    seed = args.seed if args.seed is not None else cfg.seed
    max_attempts = args.max_attempts if args.max_attempts is not None else cfg.max_attempts
    logger.info("Drawing for %d participants (seed=%s, max_attempts=%s)",
                len(participants), seed, max_attempts)

    try:
        result = draw(participants, rng=make_rng(seed), max_attempts=max_attempts)
    except (UnsatisfiableError, ValueError) as exc:
        print(f"Draw failed: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(render_text(result.pairings))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.command == "draw":
        return _cmd_draw(args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
