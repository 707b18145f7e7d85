"""
------------------------------------------------------------------------------
Project:        SuratLog
File:           suratlog/models/types.py
Version:        1.0.0
Producer:       PPKK Registry Team
Description:    Centralized enumeration and type definitions.
------------------------------------------------------------------------------
"""

from enum import Enum
from typing import Any


class LetterType(str, Enum):
    """Direction of a letter. The value is the register label (Jenis)."""
    INCOMING = "Masuk"
    OUTGOING = "Keluar"

    @classmethod
    def parse(cls, value: Any) -> "LetterType":
        """
        Resolves a letter type from its label ('Masuk'), its English name
        ('incoming') or an existing member. Case-insensitive.

        Raises:
            ValueError: If the value names no letter type.
        """
        if isinstance(value, cls):
            return value
        token = str(value).strip().lower()
        for member in cls:
            if token in (member.value.lower(), member.name.lower()):
                return member
        raise ValueError(f"Unknown letter type: {value!r}")


class TypeFilter(str, Enum):
    """Type filter of the register view."""
    ALL = "all"
    INCOMING = "incoming"
    OUTGOING = "outgoing"

    @classmethod
    def parse(cls, value: Any) -> "TypeFilter":
        """
        Resolves a filter value. Accepts members, LetterType members,
        None or '' (meaning all), English words and the Malay labels
        'Semua', 'Masuk', 'Keluar'.

        Raises:
            ValueError: If the value names no filter.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.ALL
        if isinstance(value, LetterType):
            return cls.INCOMING if value is LetterType.INCOMING else cls.OUTGOING
        token = str(value).strip().lower()
        if not token:
            return cls.ALL
        token = _LEGACY_FILTER_LABELS.get(token, token)
        try:
            return cls(token)
        except ValueError:
            raise ValueError(f"Unknown type filter: {value!r}") from None

    def accepts(self, letter_type: LetterType) -> bool:
        """Returns True if a record of the given type passes this filter."""
        if self is TypeFilter.ALL:
            return True
        if self is TypeFilter.INCOMING:
            return letter_type is LetterType.INCOMING
        return letter_type is LetterType.OUTGOING


# Malay labels of the register form
_LEGACY_FILTER_LABELS = {"semua": "all", "masuk": "incoming", "keluar": "outgoing"}
