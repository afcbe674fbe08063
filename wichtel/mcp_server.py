"""wichtel MCP server.

Exposes participant extraction and the gift-exchange draw as tools.
"""
from __future__ import annotations

import argparse
import os
from typing import Any

from mcp.server.fastmcp import FastMCP

from wichtel_core import Rejection, UnsatisfiableError, cycle_order, draw, extract, render_lines

from .config import load_env, make_rng, runtime_config

mcp = FastMCP(
    "wichtel",
    instructions=(
        "Gift-exchange draw for families. "
        "Reads one 'First Last' name per line and returns a single gift-giving "
        "circle with no self gifts, no gifts inside a family and no repeated "
        "family-to-family direction."
    ),
)

_ENV_FILE: str | None = None

# Tool cap when neither the caller nor WICHTEL_MAX_ATTEMPTS sets one.
DEFAULT_MAX_ATTEMPTS = 10_000
REJECTION_LOG_LIMIT = 20


@mcp.tool()
def extract_participants(text: str) -> list[dict[str, Any]]:
    """Parse names text into participants, skipping lines without a name."""
    return [p.to_dict() for p in extract(text)]


@mcp.tool()
def draw_assignment(
    text: str,
    seed: int | None = None,
    max_attempts: int | None = None,
) -> dict[str, Any]:
    """Draw one gift-giving circle for the names in ``text``.

    Falls back to WICHTEL_SEED / WICHTEL_MAX_ATTEMPTS when arguments are
    omitted, and to DEFAULT_MAX_ATTEMPTS when neither sets a cap.
    Returns pairings, attempt count, rejection counts, the first rejected
    attempts, the reveal order and rendered lines.
    """
    load_env(_ENV_FILE or os.getenv("WICHTEL_ENV_FILE"))
    cfg = runtime_config()
    participants = extract(text)
    if len(participants) < 2:
        raise ValueError(f"Need at least two participants, found {len(participants)}")

    if max_attempts is None:
        max_attempts = cfg.max_attempts or DEFAULT_MAX_ATTEMPTS

    rejected: list[dict[str, Any]] = []

    def _record(attempt: int, rejection: Rejection) -> None:
        if len(rejected) < REJECTION_LOG_LIMIT:
            rejected.append({"attempt": attempt, **rejection.to_dict()})

    try:
        result = draw(
            participants,
            rng=make_rng(seed if seed is not None else cfg.seed),
            max_attempts=max_attempts,
            on_reject=_record,
        )
    except UnsatisfiableError as exc:
        return {
            "error": "unsatisfiable",
            "detail": str(exc),
            "attempts": exc.attempts,
            "rejections": dict(exc.rejections),
            "rejected_attempts": rejected,
        }

    payload = result.to_dict()
    payload["rejected_attempts"] = rejected
    payload["cycle_order"] = [p.to_dict() for p in cycle_order(result.pairings)]
    payload["lines"] = render_lines(result.pairings)
    return payload


def main() -> None:
    global _ENV_FILE

    parser = argparse.ArgumentParser(description="Run wichtel MCP server")
    parser.add_argument("--env-file", default=None, help="Path to .env file")
    parser.add_argument(
        "--transport",
        default="stdio",
        choices=["stdio", "sse", "streamable-http"],
        help="MCP transport (default: stdio)",
    )
    args = parser.parse_args()
    _ENV_FILE = args.env_file
    mcp.run(transport=args.transport)


if __name__ == "__main__":
    main()
