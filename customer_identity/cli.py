from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .commands import find_matches as cmd_find_matches
from .commands import history as cmd_history
from .commands import resolve as cmd_resolve
from .commands import seed as cmd_seed
from .commands import selftest as cmd_selftest
from .commands import stats as cmd_stats
from .config import Settings, find_config
from .store import CustomerStore

LOG_FORMAT = "%(levelname).1s | %(name)s | %(message)s"

C_RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",  # Cyan
    logging.INFO: "\033[37m",  # Light gray
    logging.WARNING: "\033[33m",  # Yellow
    logging.ERROR: "\033[31m",  # Red
    logging.CRITICAL: "\033[35m",  # Magenta
}


class ColorFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{C_RESET}"


class WarningBufferHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.WARNING)
        self.records: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
        except Exception:  # pragma: no cover
            msg = record.getMessage()
        self.records.append(msg)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Customer identity resolution for marketplace imports")
    parser.add_argument("--config", type=Path, help="Path to config.yaml")
    parser.add_argument("--log-level", default="INFO", help="Python logging level")

    subparsers = parser.add_subparsers(dest="command", required=True)
    seed_parser = subparsers.add_parser("seed", help="Add historical customer names (one per line)")
    seed_parser.add_argument("file", type=Path)

    find_parser = subparsers.add_parser(
        "find-matches", help="List known customers matching a (redacted) name"
    )
    find_parser.add_argument("name")
    find_parser.add_argument("--min-similarity", type=float, default=None)
    find_parser.add_argument("--max-results", type=int, default=None)
    find_parser.add_argument("--json", action="store_true", help="Emit machine-readable JSON to stdout")

    resolve_parser = subparsers.add_parser(
        "resolve", help="Resolve an import's customer names (one per line) against known customers"
    )
    resolve_parser.add_argument("file", type=Path)
    resolve_parser.add_argument(
        "--dry-run", action="store_true", help="Report resolutions without storing them"
    )
    resolve_parser.add_argument("--json", action="store_true", help="Emit machine-readable JSON to stdout")

    stats_parser = subparsers.add_parser("stats", help="Show redaction statistics for known customers")
    stats_parser.add_argument("--json", action="store_true", help="Emit machine-readable JSON to stdout")

    selftest_parser = subparsers.add_parser(
        "self-test", help="Run the built-in redacted-name scenarios through the import policy"
    )
    selftest_parser.add_argument(
        "--strict",
        action="store_true",
        help="Use the strict best-match lookup (min confidence 80, no suggestions) instead",
    )

    history_parser = subparsers.add_parser("history", help="Show recent resolution decisions")
    history_parser.add_argument(
        "--limit", type=int, default=50, help="Number of records to show (max 1000)"
    )
    history_parser.add_argument(
        "--outcome", default=None, help="Filter by outcome (matched-existing or new-identity)"
    )
    history_parser.add_argument("--json", action="store_true", help="Emit machine-readable JSON to stdout")
    return parser


def configure_logging(level_name: str) -> WarningBufferHandler:
    log_level = getattr(logging, level_name.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)

    color_handler = logging.StreamHandler()
    color_handler.setFormatter(ColorFormatter(LOG_FORMAT))
    root_logger.addHandler(color_handler)

    warn_buffer = WarningBufferHandler()
    warn_buffer.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(warn_buffer)
    return warn_buffer


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = Settings.load(find_config(args.config))
    warn_buffer = configure_logging(args.log_level)

    if args.command == "self-test":
        report = cmd_selftest.run(
            min_confidence=settings.matching.min_confidence, strict=args.strict
        )
        for line in report.checks:
            print(line)
        print(f"Success rate: {report.success_rate:.0f}%")
        if not report.ok:
            raise SystemExit(1)
        return

    input_path = getattr(args, "file", None)
    if input_path is not None and not input_path.exists():
        logging.getLogger(__name__).error("Input file not found: %s", input_path)
        raise SystemExit(1)

    store = CustomerStore(settings.store.path)
    try:
        match args.command:
            case "seed":
                cmd_seed.run(store, args.file)
            case "find-matches":
                cmd_find_matches.run(
                    store,
                    args.name,
                    settings.matching,
                    min_similarity=args.min_similarity,
                    max_results=args.max_results,
                    json_output=args.json,
                )
            case "resolve":
                cmd_resolve.run(
                    store,
                    settings,
                    args.file,
                    dry_run=args.dry_run,
                    json_output=args.json,
                )
            case "stats":
                cmd_stats.run(store, json_output=args.json)
            case "history":
                cmd_history.run(
                    store,
                    limit=args.limit,
                    outcome=args.outcome,
                    json_output=args.json,
                )
    finally:
        store.close()

    if warn_buffer.records:
        print(f"\n{len(warn_buffer.records)} warning(s) during this run:")
        for line in warn_buffer.records:
            print(f"  {line}")


if __name__ == "__main__":
    main()
