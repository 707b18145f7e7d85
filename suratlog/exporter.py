"""
------------------------------------------------------------------------------
Project:        SuratLog
File:           suratlog/exporter.py
Version:        1.0.0
Producer:       PPKK Registry Team
Description:    Export service for register reports. Produces the transient CSV
                artifact offered for download, delivers it to a directory and
                writes an optional Excel workbook of the same view.
------------------------------------------------------------------------------
"""

import shutil
import tempfile
from contextlib import contextmanager
from datetime import date
from pathlib import Path
from typing import Iterator, Optional, Sequence, Union

import pandas as pd

from suratlog.logger import get_logger
from suratlog.models.letter import LetterRecord
from suratlog.reporting import EXPORT_HEADERS, EXPORT_PREFIX, ReportGenerator, export_filename

logger = get_logger("export")


class LetterExporter:
    """
    Handles exporting register views to CSV and Excel files.
    """

    @staticmethod
    @contextmanager
    def export_artifact(
        records: Sequence[LetterRecord],
        today: Optional[date] = None,
        prefix: str = EXPORT_PREFIX,
    ) -> Iterator[Optional[Path]]:
        """
        Creates the CSV report in a private temporary directory and yields
        its path. The artifact is removed when the block exits, whatever
        the outcome.

        Yields:
            Path of the report, or None for an empty view (no file produced).
        """
        if not records:
            logger.info("Export skipped: view is empty")
            yield None
            return

        work_dir = Path(tempfile.mkdtemp(prefix="suratlog_export_"))
        try:
            artifact = work_dir / export_filename(today, prefix)
            with open(artifact, "w", encoding="utf-8", newline="") as f:
                f.write(ReportGenerator.to_delimited_text(records))
            logger.debug(f"Created export artifact {artifact}")
            yield artifact
        finally:
            shutil.rmtree(work_dir, ignore_errors=True)
            logger.debug(f"Released export artifact in {work_dir}")

    @staticmethod
    def export_to_csv(
        records: Sequence[LetterRecord],
        target_dir: Union[str, Path],
        today: Optional[date] = None,
        prefix: str = EXPORT_PREFIX,
    ) -> Optional[Path]:
        """
        Delivers the CSV report into a directory.

        Args:
            records: The already filtered and sorted view.
            target_dir: Destination directory, created if missing.
            today: Date used in the file name. Defaults to today.
            prefix: File name prefix.

        Returns:
            The delivered file, or None if the view was empty.
        """
        with LetterExporter.export_artifact(records, today, prefix) as artifact:
            if artifact is None:
                return None
            target = Path(target_dir)
            target.mkdir(parents=True, exist_ok=True)
            destination = target / artifact.name
            shutil.copyfile(artifact, destination)

        logger.info(f"Exported {len(records)} letters to {destination}")
        return destination

    @staticmethod
    def export_to_excel(records: Sequence[LetterRecord], output_path: Union[str, Path]) -> bool:
        """
        Writes the view as a single-sheet Excel workbook with the report columns.

        Returns:
            False (and writes nothing) for an empty view.
        """
        if not records:
            logger.info("Excel export skipped: view is empty")
            return False

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        df = pd.DataFrame(ReportGenerator.to_rows(records), columns=EXPORT_HEADERS)

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df.to_excel(writer, index=False, sheet_name="Laporan")
            worksheet = writer.sheets["Laporan"]
            for i, col in enumerate(df.columns):
                if col == "Bil":
                    worksheet.set_column(i, i, 6)
                elif col in ("Jenis", "Tarikh"):
                    worksheet.set_column(i, i, 12)
                elif col == "Perkara":
                    worksheet.set_column(i, i, 50)  # Wider for text
                else:
                    worksheet.set_column(i, i, 25)

        logger.info(f"Exported {len(records)} letters to {output_path}")
        return True
