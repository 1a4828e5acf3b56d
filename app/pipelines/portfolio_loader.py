"""Load portfolio items from spreadsheet (CSV) or JSON exports."""
import csv
import json
from pathlib import Path
from typing import Any, Iterable, List, Mapping

import structlog
from pydantic import ValidationError

from app.models.portfolio import PortfolioItem

logger = structlog.get_logger(__name__)


class PortfolioFileError(ValueError):
    """Raised when a portfolio file cannot be read or has invalid rows."""


def _clean_row(row: Mapping[str, Any]) -> dict:
    # Spreadsheet cells come back as "" when empty and may carry stray spaces
    cleaned = {}
    for key, value in row.items():
        if key is None:
            continue
        key = key.strip()
        if isinstance(value, str):
            value = value.strip() or None
        cleaned[key] = value
    return cleaned


def parse_portfolio_rows(rows: Iterable[Mapping[str, Any]]) -> List[PortfolioItem]:
    """Validate raw rows into PortfolioItems.

    Only ``name`` is required; categorical values are passed through
    unchecked so the scoring engine can score unknown values as 0.
    Rows with every cell empty are skipped.

    Raises:
        PortfolioFileError: If a row is not a mapping or has no name.
    """
    items: List[PortfolioItem] = []
    for index, row in enumerate(rows, start=1):
        if not isinstance(row, Mapping):
            raise PortfolioFileError(f"Row {index}: expected an object, got {type(row).__name__}")
        cleaned = _clean_row(row)
        if cleaned and all(value is None for value in cleaned.values()):
            # Blank spreadsheet line
            continue
        if cleaned.get("name") is None:
            raise PortfolioFileError(f"Row {index}: missing name")
        try:
            items.append(PortfolioItem(**cleaned))
        except ValidationError as e:
            raise PortfolioFileError(f"Row {index}: {e.errors()[0]['msg']}") from e
    return items


def load_portfolio(path: Path) -> List[PortfolioItem]:
    """Read a ``.csv`` or ``.json`` portfolio file.

    Args:
        path: CSV with a header row of PortfolioItem field names, or JSON
              holding a list of objects (or ``{"items": [...]}``).

    Returns:
        Parsed portfolio items, in file order.

    Raises:
        PortfolioFileError: Unsupported extension, unreadable file or bad rows.
    """
    suffix = path.suffix.lower()
    try:
        if suffix == ".csv":
            with path.open(newline="", encoding="utf-8-sig") as f:
                rows = list(csv.DictReader(f))
        elif suffix == ".json":
            with path.open(encoding="utf-8") as f:
                data = json.load(f)
            rows = data.get("items") if isinstance(data, dict) else data
            if not isinstance(rows, list):
                raise PortfolioFileError('JSON portfolio must be a list of objects or {"items": [...]}')
        else:
            raise PortfolioFileError(f"Unsupported portfolio file type: {suffix or '<none>'}")
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, csv.Error) as e:
        raise PortfolioFileError(f"Could not read {path}: {e}") from e

    items = parse_portfolio_rows(rows)
    logger.info("portfolio_loaded", path=str(path), item_count=len(items))
    return items
