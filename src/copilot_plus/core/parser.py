"""
CSV record parser for Copilot Money exports.

Turns raw export text into header-keyed rows and works out which header
plays which column role. Exports from different app versions label
their columns inconsistently, so roles are matched loosely against the
lowercased, trimmed header labels.
"""

import csv
import io
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from copilot_plus.config import MAX_PARSE_ERRORS
from copilot_plus.core.exceptions import (
    EmptyInputError,
    MissingRequiredColumnError,
    ParseIntegrityError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnRule:
    """
    Maps a column role onto header labels.

    Required roles match any header containing the role name; optional
    roles need an exact match.
    """

    role: str
    key: str
    required: bool = False

    def matches(self, label: str) -> bool:
        if self.required:
            return self.role in label
        return label == self.role


# Evaluated in order against normalized header labels.
COLUMN_RULES: List[ColumnRule] = [
    ColumnRule("date", "date", required=True),
    ColumnRule("amount", "amount", required=True),
    ColumnRule("name", "name"),
    ColumnRule("category", "category"),
    ColumnRule("parent category", "parent_category"),
    ColumnRule("excluded", "excluded"),
    ColumnRule("type", "type"),
]


@dataclass(frozen=True)
class ColumnMap:
    """Header label chosen for each column role (None when absent)."""

    date: str
    amount: str
    name: Optional[str] = None
    category: Optional[str] = None
    parent_category: Optional[str] = None
    excluded: Optional[str] = None
    type: Optional[str] = None


@dataclass
class ParsedTable:
    rows: List[Dict[str, str]]
    columns: ColumnMap
    error_count: int = 0


def normalize_label(label: str) -> str:
    return label.strip().lower()


def resolve_column(rule: ColumnRule, headers: List[str]) -> Optional[str]:
    """
    Pick the header for a rule.

    An exact label match always wins over a containing one, so that a
    "Date" column is preferred to e.g. "Posted Date" when both exist.
    """
    candidates = [h for h in headers if rule.matches(normalize_label(h))]
    if not candidates:
        return None
    for header in candidates:
        if normalize_label(header) == rule.role:
            return header
    return candidates[0]


def detect_columns(headers: List[str]) -> ColumnMap:
    """
    Resolve every column role against the header row.

    Raises:
        MissingRequiredColumnError: If date or amount has no matching header
    """
    resolved: Dict[str, Optional[str]] = {}
    for rule in COLUMN_RULES:
        header = resolve_column(rule, headers)
        if header is None and rule.required:
            raise MissingRequiredColumnError(rule.role)
        resolved[rule.key] = header
    return ColumnMap(**resolved)  # type: ignore[arg-type]


def _is_empty_line(record: List[str]) -> bool:
    """Only truly empty lines are skipped; ",,," is a row of empty fields."""
    return not record or record == [""]


def parse_csv(text: str) -> ParsedTable:
    """
    Parse export text into header-keyed rows.

    Rows whose field count differs from the header are malformed; a few
    are tolerated (padded or truncated to the header width), more than
    MAX_PARSE_ERRORS fails the whole parse.

    Args:
        text: Full CSV content including the header row

    Returns:
        ParsedTable with rows and the detected column map

    Raises:
        ParseIntegrityError: If too many rows are malformed
        EmptyInputError: If there are no data rows
        MissingRequiredColumnError: If date or amount has no matching header
    """
    if text.startswith("\ufeff"):
        text = text[1:]

    reader = csv.reader(io.StringIO(text, newline=""))
    headers: Optional[List[str]] = None
    rows: List[Dict[str, str]] = []
    error_count = 0

    while True:
        try:
            record = next(reader)
        except StopIteration:
            break
        except csv.Error as e:
            logger.debug(f"CSV tokenizer error on line {reader.line_num}: {e}")
            error_count += 1
            continue

        if _is_empty_line(record):
            continue
        if headers is None:
            headers = record
            continue

        if len(record) != len(headers):
            error_count += 1
            record = (record + [""] * len(headers))[: len(headers)]
        rows.append(dict(zip(headers, record)))

    if error_count > MAX_PARSE_ERRORS:
        raise ParseIntegrityError(error_count)
    if headers is None or not rows:
        raise EmptyInputError()

    columns = detect_columns(headers)
    logger.debug(
        f"Parsed {len(rows)} rows, {error_count} malformed; columns: {columns}"
    )
    return ParsedTable(rows=rows, columns=columns, error_count=error_count)
