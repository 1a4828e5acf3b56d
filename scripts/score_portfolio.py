#!/usr/bin/env python
"""
Score a partner portfolio exported from a spreadsheet or form.

Usage:
    python scripts/score_portfolio.py portfolio.csv
    python scripts/score_portfolio.py portfolio.json --firm "Acme Capital"
    python scripts/score_portfolio.py portfolio.csv --summary-only
"""

import argparse
import json
import sys
from pathlib import Path

import structlog

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import get_settings
from app.logging_config import configure_logging
from app.pipelines import PartnerPlanPipeline, PortfolioFileError, load_portfolio

log = structlog.get_logger("score_portfolio")


def main() -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Score a partner portfolio and print the plan as JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("path", type=Path, help="Portfolio file (.csv or .json)")
    parser.add_argument("--firm", default=None, help="Partner firm name for the plan")
    parser.add_argument(
        "--summary-only",
        action="store_true",
        help="Print only the portfolio summary",
    )
    args = parser.parse_args()

    configure_logging(get_settings(), stream=sys.stderr)

    try:
        items = load_portfolio(args.path)
    except PortfolioFileError as e:
        log.error("portfolio_load_failed", path=str(args.path), error=str(e))
        return 1

    plan = PartnerPlanPipeline().run(items, firm_name=args.firm)
    payload = (
        plan.summary.model_dump(by_alias=True)
        if args.summary_only
        else plan.model_dump(by_alias=True)
    )
    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
