"""
------------------------------------------------------------------------------
Project:        SuratLog
File:           suratlog/registry.py
Version:        1.0.0
Producer:       PPKK Registry Team
Description:    Letter registry service. Entry point for the presentation
                layer: submission with duplicate interception, officer
                assignment, deletion, the register view, the monthly summary
                and report export.
------------------------------------------------------------------------------
"""

from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from suratlog.duplicates import DuplicateDetector
from suratlog.exporter import LetterExporter
from suratlog.logger import get_logger
from suratlog.models.letter import CandidateLike, LetterRecord, coerce_candidate
from suratlog.models.reporting import SummaryStats
from suratlog.models.types import TypeFilter
from suratlog.query import build_view, monthly_breakdown, summarize
from suratlog.reporting import EXPORT_PREFIX, ReportGenerator
from suratlog.repositories.letter_repo import LetterRepository
from suratlog.sample_data import sample_records

logger = get_logger("registry")


@dataclass
class SubmissionResult:
    """
    Outcome of a submission. Exactly one of `record` (stored) or
    `duplicate` (stored letter that blocked the insert) is set.
    """
    record: Optional[LetterRecord] = None
    duplicate: Optional[LetterRecord] = None
    pending: Optional[CandidateLike] = None

    @property
    def is_duplicate(self) -> bool:
        return self.duplicate is not None


class LetterRegistry:
    """
    Orchestrates the record store, duplicate detection, queries and export
    for a single register.
    """

    def __init__(
        self,
        repository: Optional[LetterRepository] = None,
        clock: Optional[Callable[[], datetime]] = None,
        export_prefix: str = EXPORT_PREFIX,
        export_dir: Optional[Union[str, Path]] = None,
    ) -> None:
        """
        Args:
            repository: Record store. A fresh in-memory store is created if omitted.
            clock: Time source for new records when the store is created here.
            export_prefix: File name prefix of CSV reports.
            export_dir: Default destination of export_csv().
        """
        self.repository = repository or LetterRepository(clock=clock)
        self.detector = DuplicateDetector(self.repository)
        self.export_prefix = export_prefix
        self.export_dir = Path(export_dir) if export_dir is not None else None

    def load_sample_records(self) -> None:
        """Seeds the register with the demo letters."""
        self.repository.load(sample_records())

    def submit(self, candidate: CandidateLike, force: bool = False) -> SubmissionResult:
        """
        Stores a new letter unless it duplicates an existing one.

        Args:
            candidate: Entry form data.
            force: Skip duplicate detection (user chose to save anyway).

        Returns:
            SubmissionResult with the stored record, or with the blocking
            duplicate and the untouched candidate as `pending`.
        """
        if not force:
            duplicate = self.detector.find_duplicate(candidate)
            if duplicate is not None:
                logger.warning(
                    f"Possible double entry: ref={duplicate.reference!r} "
                    f"date={duplicate.date!r} from/to={duplicate.from_to!r}"
                )
                return SubmissionResult(duplicate=duplicate, pending=candidate)

        record = self.repository.insert(coerce_candidate(candidate))
        return SubmissionResult(record=record)

    def confirm(self, result: SubmissionResult) -> SubmissionResult:
        """
        Overrides a duplicate warning and stores the pending candidate.
        Results without a pending candidate are returned unchanged.
        """
        if result.pending is None:
            return result
        logger.info("Duplicate warning overridden by user")
        return self.submit(result.pending, force=True)

    def assign_officer(self, record_id: str, officer: str) -> None:
        self.repository.update(record_id, officer)

    def delete(self, record_id: str) -> None:
        """Removes a letter. Call only after the user confirmed the deletion."""
        self.repository.remove(record_id)

    def records(self) -> List[LetterRecord]:
        return self.repository.all()

    def view(self, search_term: str = "", type_filter: Any = TypeFilter.ALL) -> List[LetterRecord]:
        return build_view(self.repository.all(), search_term, type_filter)

    def summary(self, today: Optional[date] = None) -> SummaryStats:
        """Letters dated in the current month, per type."""
        return summarize(self.repository.all(), today=today)

    def monthly_summary(self) -> Dict[str, SummaryStats]:
        return monthly_breakdown(self.repository.all())

    def find_all_duplicates(self) -> List[List[LetterRecord]]:
        return self.detector.find_all_duplicates()

    def export_text(self, search_term: str = "", type_filter: Any = TypeFilter.ALL) -> str:
        """CSV text of the current view; '' if the view is empty."""
        return ReportGenerator.to_delimited_text(self.view(search_term, type_filter))

    def export_csv(
        self,
        target_dir: Optional[Union[str, Path]] = None,
        search_term: str = "",
        type_filter: Any = TypeFilter.ALL,
        today: Optional[date] = None,
    ) -> Optional[Path]:
        """
        Delivers the current view as a CSV report.

        Args:
            target_dir: Destination directory. Defaults to the registry's export_dir.

        Returns:
            The delivered file, or None if nothing matched the view.

        Raises:
            ValueError: If neither target_dir nor export_dir is set.
        """
        target_dir = target_dir if target_dir is not None else self.export_dir
        if target_dir is None:
            raise ValueError("No export directory given and none configured")
        return LetterExporter.export_to_csv(
            self.view(search_term, type_filter), target_dir, today=today, prefix=self.export_prefix
        )
