"""
Core functionality for Copilot Plus.
"""

from copilot_plus.core.exceptions import (
    CopilotPlusError,
    EmptyInputError,
    IngestionError,
    InsufficientHistoryError,
    MissingRequiredColumnError,
    ModelNotLoadedError,
    ParseIntegrityError,
)
from copilot_plus.core.ingest import ingest
from copilot_plus.core.model import FinancialModel
from copilot_plus.core.session import ModelSession

__all__ = [
    "FinancialModel",
    "ModelSession",
    "ingest",
    "CopilotPlusError",
    "EmptyInputError",
    "IngestionError",
    "InsufficientHistoryError",
    "MissingRequiredColumnError",
    "ModelNotLoadedError",
    "ParseIntegrityError",
]
