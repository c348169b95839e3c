"""Parse the published weight sheet CSV into validated records."""

from __future__ import annotations

import csv
import logging
import math
from datetime import date, datetime
from typing import List, Optional, Sequence, Tuple

from ...domain.body_metrics.bmi import make_record
from ...models.records import BodyProfile, WeightRecord

logger = logging.getLogger(__name__)

DATE_HEADER_HINTS = ("dia", "date")
WEIGHT_HEADER_HINTS = ("pes", "weight")


def _find_column(headers: Sequence[str], hints: Sequence[str], fallback: int) -> int:
    for index, header in enumerate(headers):
        if any(hint in header for hint in hints):
            return index
    return fallback


def detect_columns(header_row: Sequence[str]) -> Tuple[int, int]:
    """Return the ``(date, weight)`` column indexes for a header row."""

    headers = [cell.strip().lower() for cell in header_row]
    return (
        _find_column(headers, DATE_HEADER_HINTS, 0),
        _find_column(headers, WEIGHT_HEADER_HINTS, 1),
    )


def parse_sheet_date(text: str) -> Optional[date]:
    """Parse ``DD/MM/YYYY`` or ``DD/MM/YY`` cells, falling back to ISO-8601."""

    text = text.strip()
    parts = text.split("/")
    if len(parts) == 3:
        try:
            day, month, year = (int(part) for part in parts)
        except ValueError:
            return None
        if year < 100:
            year += 2000
        if not 1900 < year < 2100:
            return None
        try:
            return date(year, month, day)
        except ValueError:
            return None

    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def parse_sheet_weight(text: str) -> Optional[float]:
    """Parse a weight cell, accepting a decimal comma such as ``72,50``."""

    cleaned = text.replace('"', "").strip().replace(",", ".", 1)
    try:
        value = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def parse_weight_csv(text: str, profile: BodyProfile) -> List[WeightRecord]:
    """Turn the sheet export into records sorted ascending by date.

    Rows without a parseable date or a positive weight are skipped. Rows that
    share a date are all kept.
    """

    rows = [row for row in csv.reader(text.splitlines()) if any(cell.strip() for cell in row)]
    if len(rows) < 2:
        return []

    date_index, weight_index = detect_columns(rows[0])
    records: List[WeightRecord] = []
    skipped = 0
    for row in rows[1:]:
        if len(row) <= max(date_index, weight_index):
            skipped += 1
            continue
        label = row[date_index].strip()
        day = parse_sheet_date(label) if label else None
        weight = parse_sheet_weight(row[weight_index])
        if day is None or weight is None:
            logger.debug("Skipping sheet row %r", row)
            skipped += 1
            continue
        records.append(make_record(day, weight, profile, original_label=label))

    if skipped:
        logger.warning("Skipped %d invalid rows while parsing the weight sheet", skipped)
    return sorted(records, key=lambda record: record.date)
