"""
------------------------------------------------------------------------------
Project:        SuratLog
File:           suratlog/models/letter.py
Version:        1.0.0
Producer:       PPKK Registry Team
Description:    Core domain model for a logged letter. Defines the record
                schema, the entry-form candidate and the single construction
                step that turns a candidate into a finalized record.
------------------------------------------------------------------------------
"""

import re
from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from suratlog.models.types import LetterType


def _normalize_type(v: Any) -> Any:
    if v is None or (isinstance(v, str) and not v.strip()):
        return None
    return LetterType.parse(v)


def _normalize_date(v: Any) -> Any:
    if isinstance(v, datetime):
        return v.date().isoformat()
    if isinstance(v, date):
        return v.isoformat()
    return v


class LetterRecord(BaseModel):
    """
    A single correspondence entry in the register.
    Identity, direction and insertion time are fixed at creation.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    id: str = Field(frozen=True)
    type: LetterType = Field(frozen=True)
    from_to: str = ""
    reference: str = ""
    date: str = ""
    subject: str = ""
    related_file: str = ""
    assigned_officer: str = ""
    created_at: str = Field(default="", frozen=True)

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> LetterType:
        """Accepts register labels ('Masuk') as well as English names."""
        resolved = _normalize_type(v)
        return resolved if resolved is not None else LetterType.INCOMING

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, v: Any) -> Any:
        """Stores calendar dates as ISO strings."""
        return _normalize_date(v)


class LetterCandidate(BaseModel):
    """
    Raw input of the entry form. Every field may be missing;
    defaults are applied by finalize_candidate().
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    type: Optional[LetterType] = None
    from_to: Optional[str] = None
    reference: Optional[str] = None
    date: Optional[str] = None
    subject: Optional[str] = None
    related_file: Optional[str] = None
    assigned_officer: Optional[str] = None

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> Optional[LetterType]:
        return _normalize_type(v)

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, v: Any) -> Any:
        return _normalize_date(v)


# Default for every business field of a new record
CANDIDATE_DEFAULTS: Dict[str, Any] = {
    "type": LetterType.INCOMING,
    "from_to": "",
    "reference": "",
    "date": "",
    "subject": "",
    "related_file": "",
    "assigned_officer": "",
}

CandidateLike = Union[LetterCandidate, LetterRecord, Mapping[str, Any]]


def coerce_candidate(data: CandidateLike) -> LetterCandidate:
    """Converts form data, a mapping or an existing record into a LetterCandidate."""
    if isinstance(data, LetterCandidate):
        return data
    if isinstance(data, LetterRecord):
        return LetterCandidate.model_validate(data.model_dump(include=set(CANDIDATE_DEFAULTS)))
    return LetterCandidate.model_validate(dict(data))


def finalize_candidate(candidate: CandidateLike, record_id: str, created_at: str) -> LetterRecord:
    """
    Builds a complete LetterRecord from a candidate.
    Missing or None fields take their value from CANDIDATE_DEFAULTS.
    """
    cand = coerce_candidate(candidate)
    values: Dict[str, Any] = {}
    for field_name, default in CANDIDATE_DEFAULTS.items():
        value = getattr(cand, field_name)
        values[field_name] = default if value is None else value
    return LetterRecord(id=record_id, created_at=created_at, **values)


# YYYY-MM-DD, optionally followed by THH:MM[:SS[.fff]][Z|+HH:MM]
_LETTER_DATE_RE = re.compile(
    r"^([0-9]{4})-([0-9]{2})-([0-9]{2})"
    r"(?:T([0-9]{2}):([0-9]{2})(?::([0-9]{2})(?:\.[0-9]{1,6})?)?(?:Z|[+-][0-9]{2}:[0-9]{2})?)?$"
)


def parse_letter_date(value: Any) -> Optional[date]:
    """
    Parses a letter date. Accepts zero-padded YYYY-MM-DD, optionally with
    a time part THH:MM[:SS[.fff]] and a 'Z' or +HH:MM offset; only the
    calendar date is kept. Anything else (unpadded, compact or week dates,
    out-of-range values) returns None.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value or not isinstance(value, str):
        return None
    match = _LETTER_DATE_RE.match(value.strip())
    if not match:
        return None
    year, month, day, hour, minute, second = match.groups()
    if hour is not None and (int(hour) > 23 or int(minute) > 59 or int(second or 0) > 59):
        return None
    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        return None
