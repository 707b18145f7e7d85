"""
------------------------------------------------------------------------------
Project:        SuratLog
File:           suratlog/models/__init__.py
Version:        1.0.0
Producer:       PPKK Registry Team
Description:    Domain models: letter records, entry-form candidates, type
                enumerations and summary statistics.
------------------------------------------------------------------------------
"""

from .types import LetterType, TypeFilter
from .letter import (
    CANDIDATE_DEFAULTS,
    LetterCandidate,
    LetterRecord,
    coerce_candidate,
    finalize_candidate,
    parse_letter_date,
)
from .reporting import SummaryStats

__all__ = [
    "CANDIDATE_DEFAULTS",
    "LetterCandidate",
    "LetterRecord",
    "LetterType",
    "SummaryStats",
    "TypeFilter",
    "coerce_candidate",
    "finalize_candidate",
    "parse_letter_date",
]
