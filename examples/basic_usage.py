#!/usr/bin/env python3
"""
Basic Usage Example - Reality Stats Report Engine

This script demonstrates the basic usage of the report engine over the
sample snapshot in examples/sample_shows.yaml. It shows how to:
- Load the configuration and apply its logging section
- Build an in-memory gateway from a YAML snapshot
- Run every report through the engine
- Handle not-found and invalid-argument outcomes

Run: python examples/basic_usage.py
"""

import json
from dataclasses import asdict
from pathlib import Path

from reality_stats.config.loader import ConfigLoader
from reality_stats.data.gateway import InMemoryShowGateway
from reality_stats.engine import ReportEngine
from reality_stats.errors import InvalidArgumentError, NotFoundError
from reality_stats.logging import configure_logging

SAMPLE_FILE = Path(__file__).parent / "sample_shows.yaml"


def print_result(title: str, result) -> None:
    """Print a report result as indented JSON."""
    print(f"\n=== {title} ===")
    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))


def main() -> None:
    # config/reports.yaml, with log output limited to warnings for this run
    config = ConfigLoader.create().load_config({"logging": {"level": "WARNING"}})
    configure_logging(**asdict(config.logging))

    gateway = InMemoryShowGateway.from_file(config.gateway.data_file or SAMPLE_FILE)
    engine = ReportEngine(gateway, config)

    print("Available reports:")
    for entry in engine.describe_reports():
        print(f"  - {entry['report']}: {entry['description']}")

    print_result("Show catalog", engine.list_shows())
    print_result("Prize overview", engine.prize_overview())
    print_result("Age demographics (big brother)", engine.age_demographics("big brother"))
    print_result("Prizes >= 100000", engine.prizes_above("100000"))
    print_result("Show totals", engine.show_totals())
    print_result("Audience ranking", engine.audience_ranking())

    try:
        engine.age_demographics("casa de verao")
    except NotFoundError as e:
        print(f"\nExpected not-found: {e}")

    try:
        engine.prizes_above("-5")
    except InvalidArgumentError as e:
        print(f"Expected invalid argument: {e} (value={e.value!r})")


if __name__ == "__main__":
    main()
