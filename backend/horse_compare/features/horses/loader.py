"""CSV loader for horse race results.

Expected format (header row required, extra columns ignored):

    horseId,entryFee,finishTime
    1, 250.0, 62.4
    1, 250.0, 61.9
    2, 100.0, 64.0
"""

from __future__ import annotations

import csv
import io
import logging
import math
from pathlib import Path
from typing import Iterable, Mapping

from horse_compare.shared.constants import REQUIRED_COLUMNS, RaceColumn

from .exceptions import ParseError
from .store import RecordStore

logger = logging.getLogger(__name__)


def _parse_field(row: Mapping[str, str | None], column: RaceColumn, convert, line: int):
    raw = row.get(column.value)
    if raw is None or not raw.strip():
        raise ParseError(f"Line {line}: missing field '{column.value}'")
    try:
        return convert(raw.strip())
    except ValueError:
        raise ParseError(
            f"Line {line}: cannot parse {column.value}={raw.strip()!r}"
        ) from None


def _check_non_negative(value: float, column: RaceColumn, line: int) -> float:
    """Finite and >= 0. Zero times pass here and fail later as DivisionError."""
    if not math.isfinite(value) or value < 0:
        raise ParseError(
            f"Line {line}: {column.value} must be a finite non-negative number, got {value}"
        )
    return value


class RaceResultsLoader:
    """Builds a finalized RecordStore from race result rows.

    The first parse failure aborts the whole load; a partially loaded store
    is never returned.
    """

    def load_file(self, path: str | Path) -> RecordStore:
        path = Path(path)
        logger.info(f"Loading race results from {path}")
        try:
            with open(path, encoding="utf-8-sig", newline="") as f:
                store = self.load_csv(f)
        except OSError as e:
            raise ParseError(f"Cannot read race results file {path}: {e}") from e

        logger.info(f"Loaded {len(store)} horses from {path.name}")
        return store

    def load_text(self, text: str) -> RecordStore:
        return self.load_csv(io.StringIO(text.lstrip("\ufeff")))

    def load_csv(self, stream: Iterable[str]) -> RecordStore:
        reader = csv.DictReader(stream, skipinitialspace=True)
        header = reader.fieldnames or []
        missing = [c.value for c in REQUIRED_COLUMNS if c.value not in header]
        if missing:
            raise ParseError(f"Missing columns: {', '.join(missing)}")

        rows = ((reader.line_num, row) for row in reader)
        return self.load_rows(rows)

    def load_rows(
        self,
        rows: Iterable[tuple[int, Mapping[str, str | None]]],
    ) -> RecordStore:
        """Load (line_number, row) pairs into a new store and finalize it."""
        store = RecordStore()
        count = 0
        for line, row in rows:
            self._add_row(store, row, line)
            count += 1

        store.finalize()
        logger.debug(f"Parsed {count} race rows into {len(store)} horses")
        return store

    @staticmethod
    def _add_row(store: RecordStore, row: Mapping[str, str | None], line: int) -> None:
        horse_id = _parse_field(row, RaceColumn.HORSE_ID, int, line)
        entry_fee = _parse_field(row, RaceColumn.ENTRY_FEE, float, line)
        finish_time = _parse_field(row, RaceColumn.FINISH_TIME, float, line)
        _check_non_negative(entry_fee, RaceColumn.ENTRY_FEE, line)
        _check_non_negative(finish_time, RaceColumn.FINISH_TIME, line)

        store.find_or_create(horse_id, entry_fee)
        store.append_finish_time(horse_id, finish_time)
