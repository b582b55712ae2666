"""
Pytest configuration and fixtures for copilot-plus tests.
"""

from pathlib import Path

import pytest

from copilot_plus.core.ingest import ingest
from copilot_plus.core.model import FinancialModel

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def sample_csv_path() -> Path:
    """Path to the sample Copilot Money export.

    The export covers 2022 (4 months), 2023 (5 months) and a partial
    2024 (2 months), plus rows that validation must drop.
    """
    return FIXTURES / "sample_export.csv"


@pytest.fixture(scope="session")
def sample_csv_text(sample_csv_path: Path) -> str:
    return sample_csv_path.read_text(encoding="utf-8")


@pytest.fixture(scope="session")
def sample_model(sample_csv_text: str) -> FinancialModel:
    """Model built once from the sample export."""
    return ingest(sample_csv_text)
