"""Command line entry point: `python -m coins_api serve|show`.

Usage examples:
  python -m coins_api serve --port 8080
  python -m coins_api show --random 5
"""

import argparse
import sys

import uvicorn

from coins_api.config import get_settings
from coins_api.core.combination_engine import enumerate_all, random_combination
from coins_api.core.format_report import format_all_report, format_random_report


def _positive_or_zero(s: str) -> int:
    try:
        n = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {s}")
    if n < 0:
        raise argparse.ArgumentTypeError("count must be >= 0")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coins-api", description="Coin combinations service.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API.")
    serve.add_argument("--host", default=None, help="Bind address (default from settings).")
    serve.add_argument("--port", type=int, default=None, help="Bind port (default from settings).")

    show = sub.add_parser("show", help="Print all combinations and some random ones.")
    show.add_argument(
        "--random", type=_positive_or_zero, default=5, dest="random_count",
        help="How many random combinations to print (default 5).",
    )
    return parser


def run_show(random_count: int) -> list[str]:
    lines = format_all_report(enumerate_all())
    lines.append("")
    lines += format_random_report(random_combination() for _ in range(random_count))
    return lines


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "show":
        print("\n".join(run_show(args.random_count)))
        return 0

    settings = get_settings()
    uvicorn.run(
        "coins_api.main:app",
        host=args.host if args.host is not None else settings.host,
        port=args.port if args.port is not None else settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
