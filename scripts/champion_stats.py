from __future__ import annotations

import asyncio

import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))
from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings
from presentation.cli import ChampionStatsCommand


def main(argv: list[str]) -> int:
    if not argv:
        print("usage: champion_stats.py <summoner name>", file=sys.stderr)
        return 2
    try:
        settings.validate()
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    settings.create_directories()
    bootstrap_logging(service="champion-stats", level=settings.LOG_LEVEL, log_dir=settings.LOG_DIR, log_file_name="champion_stats.jsonl")
    try:
        return asyncio.run(ChampionStatsCommand().run(" ".join(argv)))
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
