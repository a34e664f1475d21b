"""Main CLI entry-point."""
from __future__ import annotations

import asyncio
import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings

_BRIGHT_GREEN = "\033[1;92m"
_CYAN = "\033[96m"
_RESET = "\033[0m"


def _g(s: str) -> str:
    return f"{_BRIGHT_GREEN}{s}{_RESET}"


def _c(s: str) -> str:
    return f"{_CYAN}{s}{_RESET}"


def _print_banner() -> None:
    div = "═" * 48
    print(_g(div))
    print(_g("  CHAMPION STATS"))
    print(_c(f"  Recent matches per champion · {settings.RIOT_REGION}"))
    print(_g(div))


def main(argv: list[str]) -> int:
    try:
        settings.validate()
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    settings.create_directories()
    bootstrap_logging(
        service="champion-stats",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="champion_stats.jsonl",
    )
    try:
        # Lazy import keeps the logging setup ahead of module-level loggers.
        from presentation.cli import ChampionStatsCommand

        if argv:
            name = " ".join(argv)
        else:
            _print_banner()
            try:
                name = input("  Summoner name: ")
            except (EOFError, KeyboardInterrupt):
                print("\nNo summoner name given.", file=sys.stderr)
                return 1
        return asyncio.run(ChampionStatsCommand().run(name))
    finally:
        shutdown_logging()


def run() -> None:
    """Console-script entry point."""
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
