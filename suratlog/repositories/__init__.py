"""
------------------------------------------------------------------------------
Project:        SuratLog
File:           suratlog/repositories/__init__.py
Version:        1.0.0
Producer:       PPKK Registry Team
Description:    Package initializer for repositories. Exports the in-memory
                LetterRepository that owns the canonical record order.
------------------------------------------------------------------------------
"""

from .letter_repo import LetterRepository
