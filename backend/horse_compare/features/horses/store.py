"""In-memory record store — populated once while loading, read-only afterwards."""

from __future__ import annotations

import logging
from typing import Iterator

from .exceptions import NotFoundError, StoreFinalizedError
from .models import RaceRecord

logger = logging.getLogger(__name__)


class RecordStore:
    """Race records keyed by horse id, addressable by 1-based rank.

    Rank 1 is the smallest horse id. The rank table only exists after
    `finalize()`; from then on the store rejects every mutation and can be
    shared between concurrent requests without locking.
    """

    def __init__(self):
        self._records: dict[int, RaceRecord] = {}
        self._ranked: tuple[RaceRecord, ...] | None = None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RaceRecord]:
        """Records in rank order (falls back to id order before finalize)."""
        if self._ranked is not None:
            return iter(self._ranked)
        return iter(sorted(self._records.values(), key=lambda r: r.entity_id))

    @property
    def finalized(self) -> bool:
        return self._ranked is not None

    def find_or_create(self, entity_id: int, entry_cost: float) -> RaceRecord:
        """Return the record for `entity_id`, creating an empty one if needed.

        The entry cost of an existing record is left untouched.
        """
        self._check_mutable()
        record = self._records.get(entity_id)
        if record is None:
            record = RaceRecord(entity_id=entity_id, entry_cost=entry_cost)
            self._records[entity_id] = record
        return record

    def append_finish_time(self, entity_id: int, finish_time: float) -> None:
        self._check_mutable()
        record = self._records.get(entity_id)
        if record is None:
            raise NotFoundError(f"Horse not found: {entity_id}")
        record.finish_times.append(finish_time)

    def finalize(self) -> None:
        """Sort every record's finish times and build the rank table.

        Calling it again is a no-op.
        """
        if self._ranked is not None:
            return

        for record in self._records.values():
            record.finish_times.sort()

        self._ranked = tuple(
            sorted(self._records.values(), key=lambda r: r.entity_id)
        )
        logger.debug(f"Record store finalized with {len(self._ranked)} horses")

    def lookup_by_index(self, rank: int) -> RaceRecord:
        """Record at 1-based `rank` in horse-id order."""
        if self._ranked is None:
            raise NotFoundError("Record store is not finalized")
        if rank < 1 or rank > len(self._ranked):
            raise NotFoundError(
                f"Horse rank {rank} out of range (1..{len(self._ranked)})"
            )
        return self._ranked[rank - 1]

    def get(self, entity_id: int) -> RaceRecord | None:
        return self._records.get(entity_id)

    def _check_mutable(self) -> None:
        if self._ranked is not None:
            raise StoreFinalizedError(
                "Record store is finalized; reload into a new store instead"
            )
