"""
Export ingestion: text in, FinancialModel out.
"""

import logging

from copilot_plus.core.aggregator import assign_colors, build_aggregates, rank_categories
from copilot_plus.core.model import FinancialModel
from copilot_plus.core.normalizer import normalize_rows
from copilot_plus.core.parser import parse_csv

logger = logging.getLogger(__name__)


def ingest(text: str) -> FinancialModel:
    """
    Build a complete model from export text.

    Either returns a fully built model or raises; nothing is partially
    built.

    Args:
        text: Full CSV export content

    Returns:
        FinancialModel

    Raises:
        EmptyInputError: If there are no data rows
        MissingRequiredColumnError: If date or amount has no matching header
        ParseIntegrityError: If too many rows are malformed
    """
    table = parse_csv(text)
    rows = list(normalize_rows(table.rows, table.columns))
    aggregates, index = build_aggregates(rows)

    category_order = rank_categories(aggregates)
    model = FinancialModel(
        aggregates=aggregates,
        index=index,
        category_order=category_order,
        colors=assign_colors(category_order),
    )

    dropped = len(table.rows) - len(rows)
    if dropped:
        logger.debug(f"Dropped {dropped} rows that failed validation")
    logger.info(
        f"Loaded {len(rows)} transactions from {len(table.rows)} rows "
        f"across {len(model.years)} years ({', '.join(model.years) or 'none'})"
    )
    return model
