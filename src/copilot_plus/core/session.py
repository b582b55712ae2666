"""
Holder for the currently loaded model.
"""

import logging
from pathlib import Path
from typing import Optional

from copilot_plus.core.exceptions import ModelNotLoadedError
from copilot_plus.core.ingest import ingest
from copilot_plus.core.model import FinancialModel

logger = logging.getLogger(__name__)


class ModelSession:
    """
    Keeps the current FinancialModel and swaps it on reload.

    A new export is fully ingested before it replaces the current model,
    so a failed load leaves the previous model in place.
    """

    def __init__(self, csv_path: Optional[Path] = None):
        """
        Initialize the session.

        Args:
            csv_path: Optional export to load lazily on first access
        """
        self.csv_path = csv_path
        self.source: Optional[str] = None
        self._model: Optional[FinancialModel] = None

    def is_loaded(self) -> bool:
        return self._model is not None

    def is_available(self) -> bool:
        """True if a model is loaded or an export path is waiting to be loaded."""
        return self._model is not None or (self.csv_path is not None and self.csv_path.exists())

    @property
    def model(self) -> FinancialModel:
        """
        The current model, loading csv_path on first access.

        Raises:
            ModelNotLoadedError: If nothing is loaded and no export path is set
        """
        if self._model is None:
            if self.csv_path is None:
                raise ModelNotLoadedError(
                    "No export loaded. Use load_export with a Copilot Money CSV export."
                )
            return self.load_file(self.csv_path)
        return self._model

    def load_text(self, text: str, source: str = "<text>") -> FinancialModel:
        """Ingest export text and make it the current model."""
        model = ingest(text)
        self._model = model
        self.source = source
        return model

    def load_file(self, path: Path) -> FinancialModel:
        """
        Read and ingest an export file.

        Raises:
            FileNotFoundError: If path does not exist
            IngestionError: If the export cannot be ingested
        """
        logger.info(f"Loading export from {path}")
        text = path.read_text(encoding="utf-8-sig")
        return self.load_text(text, source=str(path))
