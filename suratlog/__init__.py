"""
------------------------------------------------------------------------------
Project:        SuratLog
File:           suratlog/__init__.py
Version:        1.0.0
Producer:       PPKK Registry Team
Description:    Core logic package for SuratLog, the correspondence register of
                the PPKK office. Contains the letter model, the in-memory
                record store, duplicate detection, queries and report export.
------------------------------------------------------------------------------
"""

__version__ = "1.0.0"
