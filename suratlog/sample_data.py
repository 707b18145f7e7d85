"""
------------------------------------------------------------------------------
Project:        SuratLog
File:           suratlog/sample_data.py
Version:        1.0.0
Producer:       PPKK Registry Team
Description:    Demo letters used to seed a fresh register.
------------------------------------------------------------------------------
"""

from typing import List

from suratlog.models.letter import LetterRecord
from suratlog.models.types import LetterType


def sample_records() -> List[LetterRecord]:
    """Returns new copies of the three demo letters, newest insertion last."""
    return [
        LetterRecord(
            id="1",
            type=LetterType.INCOMING,
            from_to="Jabatan Laut Malaysia",
            reference="JLM/KK/2024/001",
            date="2024-02-15",
            subject="Permohonan Kebenaran Berlabuh Kapal MV Aurora",
            related_file="Fail Berlabuh 2024",
            assigned_officer="En. Ahmad Fauzi",
            created_at="2024-02-15T08:30:00.000Z",
        ),
        LetterRecord(
            id="2",
            type=LetterType.OUTGOING,
            from_to="Sabah Ports Sdn Bhd",
            reference="PPKK/ADM/2024/045",
            date="2024-02-20",
            subject="Notis Penyelenggaraan Dermaga 4",
            related_file="Penyelenggaraan Dermaga",
            assigned_officer="Pn. Siti Aminah",
            created_at="2024-02-20T10:15:00.000Z",
        ),
        LetterRecord(
            id="3",
            type=LetterType.INCOMING,
            from_to="Kementerian Pengangkutan",
            reference="MOT/KK/SEC/88",
            date="2024-02-21",
            subject="Garis Panduan Keselamatan Pelabuhan Baru",
            related_file="Keselamatan Pelabuhan",
            assigned_officer="En. Robert Ling",
            created_at="2024-02-21T14:45:00.000Z",
        ),
    ]
