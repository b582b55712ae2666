"""
Transaction model for Copilot Plus data.
"""

from typing import Iterable, List

from pydantic import BaseModel, Field, computed_field, field_validator

from copilot_plus.utils.date_utils import month_of, year_of
from copilot_plus.utils.money import round_cents


class Transaction(BaseModel):
    """
    A single spending transaction from a Copilot Money export.

    Amounts are stored rounded to cents. There is no identity: two
    identical export rows produce two equal transactions.
    """

    model_config = {"strict": True, "frozen": True, "populate_by_name": True}

    date: str = Field(pattern=r"^[0-9]{4}")
    name: str
    amount: float

    @computed_field  # type: ignore[prop-decorator]
    @property
    def year(self) -> str:
        """Four-digit year prefix of the date."""
        return year_of(self.date)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def month(self) -> str:
        """Two-digit month at offset 5 of the date."""
        return month_of(self.date)

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: float) -> float:
        """Amounts are non-negative and rounded to cents."""
        if v < 0:
            raise ValueError(f"Amount {v} must not be negative")
        return round_cents(v)


def sort_newest_first(transactions: Iterable[Transaction]) -> List[Transaction]:
    """Sort by date string, descending. Equal dates keep their order."""
    return sorted(transactions, key=lambda txn: txn.date, reverse=True)
