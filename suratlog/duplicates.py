"""
------------------------------------------------------------------------------
Project:        SuratLog
File:           suratlog/duplicates.py
Version:        1.0.0
Producer:       PPKK Registry Team
Description:    Duplicate detection for letters. A letter counts as a duplicate
                when reference and counterparty match case-insensitively and
                the letter date matches exactly.
------------------------------------------------------------------------------
"""

from typing import Dict, List, Optional, Tuple

from suratlog.logger import get_logger
from suratlog.models.letter import CandidateLike, LetterRecord, coerce_candidate
from suratlog.repositories.letter_repo import LetterRepository

logger = get_logger("duplicates")

DuplicateKey = Tuple[str, str, str]


def duplicate_key(reference: Optional[str], date: Optional[str], from_to: Optional[str]) -> DuplicateKey:
    """Normalized (reference, date, counterparty) triple."""
    return ((reference or "").lower(), date or "", (from_to or "").lower())


class DuplicateDetector:
    """
    Identifies letters already present in the store.
    Only the narrow three-field key is compared; near misses are not reported.
    """

    def __init__(self, repository: LetterRepository):
        self.repository = repository

    def find_duplicate(self, candidate: CandidateLike) -> Optional[LetterRecord]:
        """
        Returns the first stored record (newest first) sharing the
        candidate's duplicate key, or None.
        """
        cand = coerce_candidate(candidate)
        key = duplicate_key(cand.reference, cand.date, cand.from_to)
        for record in self.repository.all():
            if duplicate_key(record.reference, record.date, record.from_to) == key:
                logger.info(f"Candidate ref={cand.reference!r} duplicates letter {record.id}")
                return record
        return None

    def find_all_duplicates(self) -> List[List[LetterRecord]]:
        """
        Audits the whole store for records sharing a key.
        Such groups only exist where a duplicate warning was overridden.
        Groups and their members follow store order.
        """
        groups: Dict[DuplicateKey, List[LetterRecord]] = {}
        for record in self.repository.all():
            key = duplicate_key(record.reference, record.date, record.from_to)
            groups.setdefault(key, []).append(record)
        return [group for group in groups.values() if len(group) > 1]
