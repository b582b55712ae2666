"""
Presentation selection state, kept apart from the financial model.
"""

from pydantic import BaseModel, field_validator

from copilot_plus.config import ALL_MONTHS
from copilot_plus.utils.date_utils import normalize_month


class ViewState(BaseModel):
    """The year and month filter a client is currently looking at."""

    model_config = {"frozen": True}

    year: str
    month: str = ALL_MONTHS

    @field_validator("month", mode="before")
    @classmethod
    def validate_month(cls, v: object) -> str:
        return normalize_month(v)  # type: ignore[arg-type]

    def with_year(self, year: str) -> "ViewState":
        """Switch year; the month filter resets to the full year."""
        return self.model_copy(update={"year": year, "month": ALL_MONTHS})

    def with_month(self, month: object) -> "ViewState":
        return self.model_copy(update={"month": normalize_month(month)})  # type: ignore[arg-type]
