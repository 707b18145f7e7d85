"""
------------------------------------------------------------------------------
Project:        SuratLog
File:           suratlog/reporting.py
Version:        1.0.0
Producer:       PPKK Registry Team
Description:    Report formatting for the register. Builds the delimited text
                of a view (Laporan Surat) and the report file name.
------------------------------------------------------------------------------
"""

from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from suratlog.logger import get_logger
from suratlog.models.letter import LetterRecord

logger = get_logger("reporting")

EXPORT_PREFIX = "Laporan_Surat_PPKK"
EXPORT_EXTENSION = ".csv"
EXPORT_MIME_TYPE = "text/csv"

EXPORT_HEADERS: List[str] = ["Bil", "Jenis", "Daripada/Kepada", "Rujukan", "Tarikh", "Perkara", "Fail", "Pegawai"]


def quote_field(value: Optional[str]) -> str:
    """Wraps a text field in double quotes, doubling embedded quotes."""
    text = value or ""
    return '"' + text.replace('"', '""') + '"'


def export_filename(today: Optional[date] = None, prefix: str = EXPORT_PREFIX) -> str:
    """Report file name: '<prefix>_<YYYY-MM-DD>.csv'."""
    today = today or date.today()
    return f"{prefix}_{today.isoformat()}{EXPORT_EXTENSION}"


class ReportGenerator:
    """Formats register views into report rows and text."""

    @staticmethod
    def to_rows(records: Sequence[LetterRecord]) -> List[Dict[str, Any]]:
        """
        One dict per record keyed by EXPORT_HEADERS, unquoted.
        Bil is the 1-based position in the given sequence.
        """
        rows: List[Dict[str, Any]] = []
        for idx, record in enumerate(records, start=1):
            rows.append({
                "Bil": idx,
                "Jenis": record.type.value,
                "Daripada/Kepada": record.from_to,
                "Rujukan": record.reference,
                "Tarikh": record.date,
                "Perkara": record.subject,
                "Fail": record.related_file,
                "Pegawai": record.assigned_officer,
            })
        return rows

    @staticmethod
    def to_delimited_text(records: Sequence[LetterRecord]) -> str:
        """
        Returns the CSV report of a view, rows in the given order.

        Sequence number, type label and date are written as-is; every other
        field is quoted. Rows are joined with '\\n' without a trailing newline.
        The date is written verbatim, so a malformed date containing ',' or '"'
        shifts the columns of its row; ISO dates never do.
        An empty sequence yields '' (nothing to export).
        """
        if not records:
            return ""

        lines = [",".join(EXPORT_HEADERS)]
        for idx, record in enumerate(records, start=1):
            lines.append(",".join([
                str(idx),
                record.type.value,
                quote_field(record.from_to),
                quote_field(record.reference),
                record.date,
                quote_field(record.subject),
                quote_field(record.related_file),
                quote_field(record.assigned_officer),
            ]))
        logger.debug(f"Formatted report with {len(records)} rows")
        return "\n".join(lines)
