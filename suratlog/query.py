"""
------------------------------------------------------------------------------
Project:        SuratLog
File:           suratlog/query.py
Version:        1.0.0
Producer:       PPKK Registry Team
Description:    Query engine for the register. Derives the filtered, date-sorted
                view and the per-month summary counts from a store snapshot
                without ever mutating it.
------------------------------------------------------------------------------
"""

from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Tuple

from suratlog.logger import get_logger
from suratlog.models.letter import LetterRecord, parse_letter_date
from suratlog.models.reporting import SummaryStats
from suratlog.models.types import LetterType, TypeFilter

logger = get_logger("query")


def matches_search(record: LetterRecord, search_term: Optional[str]) -> bool:
    """Case-insensitive substring match on subject, reference and counterparty."""
    if not search_term:
        return True
    needle = search_term.lower()
    return (
        needle in record.subject.lower()
        or needle in record.reference.lower()
        or needle in record.from_to.lower()
    )


def _sort_key(record: LetterRecord) -> Tuple[bool, date]:
    # Unparseable dates rank below every valid date
    parsed = parse_letter_date(record.date)
    return (parsed is not None, parsed or date.min)


def build_view(
    records: Iterable[LetterRecord],
    search_term: Optional[str] = "",
    type_filter: Any = TypeFilter.ALL,
) -> List[LetterRecord]:
    """
    Filters records by type and search term and sorts them by letter date,
    most recent first. Equal dates keep their store order.

    Args:
        records: Store snapshot in canonical order.
        search_term: Free text; empty matches everything.
        type_filter: 'all', 'incoming', 'outgoing' (or any form TypeFilter.parse accepts).

    Returns:
        A new list; the input is left untouched.
    """
    active_filter = TypeFilter.parse(type_filter)
    selected = [
        r for r in records
        if active_filter.accepts(r.type) and matches_search(r, search_term)
    ]
    # sorted() is stable, also with reverse=True
    return sorted(selected, key=_sort_key, reverse=True)


def summarize(
    records: Iterable[LetterRecord],
    reference_month: Optional[int] = None,
    reference_year: Optional[int] = None,
    today: Optional[date] = None,
) -> SummaryStats:
    """
    Counts records dated in one month, split by letter type.
    Month and year default to the current date at call time.
    Records with unparseable dates are never counted.
    """
    today = today or date.today()
    month = reference_month if reference_month is not None else today.month
    year = reference_year if reference_year is not None else today.year

    stats = SummaryStats()
    for record in records:
        parsed = parse_letter_date(record.date)
        if parsed is None:
            if record.date:
                logger.debug(f"Letter {record.id} has invalid date {record.date!r}, not counted")
            continue
        if parsed.month != month or parsed.year != year:
            continue
        if record.type is LetterType.INCOMING:
            stats.incoming_count += 1
        else:
            stats.outgoing_count += 1
    return stats


def monthly_breakdown(records: Iterable[LetterRecord]) -> Dict[str, SummaryStats]:
    """
    Groups type counts by YYYY-MM, newest month first.
    Records with unparseable dates are skipped.
    """
    monthly: Dict[str, SummaryStats] = {}
    for record in records:
        parsed = parse_letter_date(record.date)
        if parsed is None:
            continue
        month_key = f"{parsed.year:04d}-{parsed.month:02d}"
        bucket = monthly.setdefault(month_key, SummaryStats())
        if record.type is LetterType.INCOMING:
            bucket.incoming_count += 1
        else:
            bucket.outgoing_count += 1
    return dict(sorted(monthly.items(), reverse=True))
