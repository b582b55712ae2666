"""
Category breakdown models for Copilot Plus data.
"""

from typing import List

from pydantic import BaseModel, Field


class SubcategoryShare(BaseModel):
    """Amount spent in one subcategory."""

    name: str
    amount: float


class CategoryShare(BaseModel):
    """
    Amount spent in a parent category for a period.

    Categories are listed in global category order and carry the colour
    assigned to them when the model was built.
    """

    name: str
    amount: float
    pct_of_total: float
    color: str
    subcategories: List[SubcategoryShare] = Field(default_factory=list)
