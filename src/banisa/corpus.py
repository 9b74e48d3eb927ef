import logging
import os
from typing import Any, Iterable, List, Mapping

import pandas as pd
from pydantic import ValidationError

from .exceptions import EmptyCorpusError
from .models import ClueRecord

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("question", "answer", "movie", "word")


def load_records(rows: Iterable[Mapping[str, Any]]) -> List[ClueRecord]:
    """Validate raw corpus rows, skipping the malformed ones.

    Raises EmptyCorpusError when no row survives validation.
    """
    records: List[ClueRecord] = []
    for position, row in enumerate(rows):
        try:
            records.append(ClueRecord.model_validate(dict(row)))
        except ValidationError as e:
            logger.warning(f"Skipping corpus row {position}: {e.error_count()} invalid field(s)")

    if not records:
        raise EmptyCorpusError("Corpus contains no usable clue records.")
    return records


class CorpusManager:
    """Loads the quiz corpus from a CSV file and keeps it for reuse."""

    def __init__(self, path: str):
        self.path = path
        self.records: List[ClueRecord] = []

    def load(self) -> List[ClueRecord]:
        if not os.path.exists(self.path):
            raise EmptyCorpusError(f"Corpus file {self.path} not found.")

        try:
            df = pd.read_csv(self.path, encoding="utf-8", dtype=str, keep_default_na=False)
        except (OSError, pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as e:
            raise EmptyCorpusError(f"Failed to read {self.path}: {e}") from e

        df.columns = [str(column).strip().lower() for column in df.columns]
        missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
        if missing:
            raise EmptyCorpusError(f"Corpus file {self.path} is missing columns: {missing}")

        self.records = load_records(df.to_dict("records"))
        logger.info(f"Loaded {len(self.records)} clue records from {self.path}")
        return self.records

    def get_records(self) -> List[ClueRecord]:
        """Return the loaded records, reading the file on first use."""
        if not self.records:
            self.load()
        return self.records
