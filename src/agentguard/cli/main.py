"""CLI entrypoint for AgentGuard."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from agentguard import __version__
from agentguard.cli.handlers import (
    handle_activity,
    handle_hook,
    handle_results,
    handle_scan,
    handle_stats,
    handle_summary,
)
from agentguard.config import load_config
from agentguard.constants.branding import CLI_DESCRIPTION
from agentguard.constants.store import RECENT_EVENTS_DEFAULT_LIMIT
from agentguard.exceptions import ConfigError

HOOK_CHOICES: tuple[str, ...] = ("pre-tool-use", "post-tool-use")


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-c", "--config", type=Path, help="Explicit config file")
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    common.add_argument("--no-color", action="store_true", help="Disable colored output")

    parser = argparse.ArgumentParser(
        prog="agentguard",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan = subparsers.add_parser("scan", parents=[common], help="Scan a file or directory")
    scan.add_argument("path", type=Path, nargs="?", default=Path("."), help="File or directory to scan")
    scan.add_argument("--json", action="store_true", help="Print the scan result as JSON")
    scan.add_argument("--dry-run", action="store_true", help="Scan without saving the result")

    subparsers.add_parser("results", parents=[common], help="Show the latest scan result")
    subparsers.add_parser("summary", parents=[common], help="Show the scan history summary")

    activity = subparsers.add_parser("activity", parents=[common], help="Show recent hook activity")
    activity.add_argument(
        "-n",
        "--limit",
        type=int,
        default=RECENT_EVENTS_DEFAULT_LIMIT,
        help=f"Maximum events to show, newest first (default: {RECENT_EVENTS_DEFAULT_LIMIT})",
    )

    subparsers.add_parser("stats", parents=[common], help="Show hook activity statistics")

    hook = subparsers.add_parser("hook", parents=[common], help="Run a hook adapter over stdin/stdout")
    hook.add_argument("event", choices=HOOK_CHOICES, help="Hook event to handle")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "hook":
        level = logging.DEBUG if args.verbose else logging.WARNING
    else:
        level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s", stream=sys.stderr)

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    if args.command == "scan":
        use_color = not args.no_color and sys.stdout.isatty()
        return handle_scan(args.path, config, as_json=args.json, dry_run=args.dry_run, color=use_color)
    if args.command == "results":
        return handle_results(config)
    if args.command == "summary":
        return handle_summary(config)
    if args.command == "activity":
        return handle_activity(config, limit=args.limit)
    if args.command == "stats":
        return handle_stats(config)
    if args.command == "hook":
        return handle_hook(args.event, config)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
