"""
------------------------------------------------------------------------------
Project:        SuratLog
File:           suratlog/repositories/letter_repo.py
Version:        1.0.0
Producer:       PPKK Registry Team
Description:    In-memory record store for letters. Keeps the canonical
                newest-first insertion order; display order is always derived
                elsewhere and never stored here.
------------------------------------------------------------------------------
"""

import uuid
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional, Set

from suratlog.logger import get_logger
from suratlog.models.letter import CandidateLike, LetterRecord, finalize_candidate

logger = get_logger("store")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC timestamp with millisecond precision ('...T08:30:00.000Z')."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment.isoformat(timespec="milliseconds") + "Z"


class LetterRepository:
    """
    Holds the ordered collection of letter records.
    Newest insertions come first. Ids are never reused, even after removal.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        """
        Args:
            clock: Source of the current time for created_at. Defaults to UTC now.
        """
        self._records: List[LetterRecord] = []
        self._issued_ids: Set[str] = set()
        self._clock = clock or _utc_now

    def __len__(self) -> int:
        return len(self._records)

    def all(self) -> List[LetterRecord]:
        """Snapshot of the store in canonical (newest-first) order."""
        return list(self._records)

    def get(self, record_id: str) -> Optional[LetterRecord]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def _next_id(self) -> str:
        new_id = str(uuid.uuid4())
        while new_id in self._issued_ids:
            new_id = str(uuid.uuid4())
        self._issued_ids.add(new_id)
        return new_id

    def insert(self, candidate: CandidateLike) -> LetterRecord:
        """
        Finalizes a candidate and prepends it to the store.

        Args:
            candidate: Entry form data. Missing text fields become ''.

        Returns:
            The stored record with its fresh id and created_at.
        """
        record = finalize_candidate(
            candidate,
            record_id=self._next_id(),
            created_at=format_timestamp(self._clock()),
        )
        self._records.insert(0, record)
        logger.info(f"Inserted letter {record.id} ({record.type.value}, ref={record.reference!r})")
        return record

    def load(self, records: Iterable[LetterRecord]) -> None:
        """
        Appends existing records in the given order, keeping their ids.
        Records whose id is already known are skipped.
        """
        for record in records:
            if record.id in self._issued_ids:
                logger.warning(f"Skipping record with already issued id {record.id}")
                continue
            self._issued_ids.add(record.id)
            self._records.append(record)

    def update(self, record_id: str, officer: str) -> None:
        """
        Replaces the assigned officer of one record.
        Unknown ids are ignored.
        """
        for idx, record in enumerate(self._records):
            if record.id == record_id:
                self._records[idx] = record.model_copy(update={"assigned_officer": officer or ""})
                logger.info(f"Assigned officer {officer!r} to letter {record_id}")
                return
        logger.debug(f"Update ignored, letter {record_id} not found")

    def remove(self, record_id: str) -> None:
        """
        Permanently removes one record. Unknown ids are ignored.
        Confirmation is the caller's responsibility.
        """
        for idx, record in enumerate(self._records):
            if record.id == record_id:
                del self._records[idx]
                logger.info(f"Removed letter {record_id}")
                return
        logger.debug(f"Remove ignored, letter {record_id} not found")
