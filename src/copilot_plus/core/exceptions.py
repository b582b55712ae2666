"""
Custom exceptions for Copilot Plus.
"""

from typing import List, Optional


class CopilotPlusError(Exception):
    """Base exception for Copilot Plus errors."""
    pass


class IngestionError(CopilotPlusError):
    """Raised when an export cannot be turned into a model."""
    pass


class EmptyInputError(IngestionError):
    """Raised when the export has no data rows."""

    def __init__(self, message: str = "No data rows found in CSV."):
        super().__init__(message)


class MissingRequiredColumnError(IngestionError):
    """Raised when no header matches a required column role."""

    def __init__(self, column: str):
        self.column = column
        super().__init__(f'Missing required column: "{column}"')


class ParseIntegrityError(IngestionError):
    """Raised when too many rows fail tokenization."""

    def __init__(self, error_count: int):
        self.error_count = error_count
        super().__init__(
            f"Too many CSV parse errors ({error_count}). Check your file format."
        )


class InsufficientHistoryError(CopilotPlusError):
    """Raised when trend analysis has fewer than two full years to compare."""

    def __init__(self, full_years: Optional[List[str]] = None):
        self.full_years = list(full_years or [])
        super().__init__(
            "Need at least 2 years of data to show trends "
            f"(full years available: {len(self.full_years)})."
        )


class ModelNotLoadedError(CopilotPlusError):
    """Raised when no export has been loaded yet."""
    pass
