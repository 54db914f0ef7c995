#!/usr/bin/env python3
"""
Workflow: Loyalty Report
========================
Prints customers who visit the same hotel on the same weekday through a month.

Usage:
    # Current month
    uv run python -m workflows.loyalty_report

    # A specific month
    uv run python -m workflows.loyalty_report --month 10 --year 2024

    # Every month that has visits
    uv run python -m workflows.loyalty_report --all

    # Dump JSON instead of a summary
    uv run python -m workflows.loyalty_report --month 10 --year 2024 --json

    # Read records from another folder
    uv run python -m workflows.loyalty_report --all --data-dir ./fixtures
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from loguru import logger

from db.client import init_db, close_db
from services.loyalty.service import Service


def setup_logging(debug: bool = False):
    """Configure loguru logging."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<level>{level: <8}</level> | {message}",
        level="DEBUG" if debug else "INFO",
    )


def format_pattern(p) -> str:
    dates = ", ".join(d.isoformat() for d in p.visit_dates)
    return (
        f"{p.customer_name} @ {p.hotel_name} - {p.day_of_week}s in {p.month} {p.year} "
        f"({p.visit_count} visits: {dates})"
    )


async def run(args) -> int:
    await init_db(args.data_dir)
    try:
        service = Service()

        if args.all:
            patterns = await service.all_months()
            if args.json:
                print(json.dumps([p.model_dump(mode="json", by_alias=True) for p in patterns], indent=2))
                return 0
            logger.info(f"Loyal patterns across all months: {len(patterns)}")
            for p in patterns:
                logger.info(f"  {format_pattern(p)}")
            return 0

        try:
            report = await service.monthly(args.month, args.year)
        except ValueError as e:
            logger.error(str(e))
            return 2

        if args.json:
            print(report.model_dump_json(by_alias=True, indent=2))
            return 0

        logger.info(f"Loyal customers for {report.month} {report.year}: {report.total_loyal_customers}")
        for p in report.loyal_customers:
            logger.info(f"  {format_pattern(p)}")
        return 0
    finally:
        await close_db()


def main():
    parser = argparse.ArgumentParser(description="Report loyal hotel customers")
    parser.add_argument("--month", type=int, help="Month 1-12 (default: current)")
    parser.add_argument("--year", type=int, help="Year (default: current)")
    parser.add_argument("--all", action="store_true", help="Analyze every month that has visits")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a summary")
    parser.add_argument("--data-dir", help="Folder holding customers/hotels/visitations JSON")
    parser.add_argument("--debug", action="store_true", help="Log per-group decisions")
    args = parser.parse_args()

    if args.all and (args.month or args.year):
        parser.error("--all cannot be combined with --month/--year")

    setup_logging(args.debug)
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
