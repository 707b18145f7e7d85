import pytest
from datetime import datetime, timezone

from suratlog.models.letter import LetterCandidate
from suratlog.models.types import LetterType
from suratlog.registry import LetterRegistry
from suratlog.repositories.letter_repo import LetterRepository

FIXED_NOW = datetime(2024, 3, 15, 9, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def repo(fixed_clock):
    return LetterRepository(clock=fixed_clock)


@pytest.fixture
def registry(fixed_clock):
    return LetterRegistry(clock=fixed_clock)


@pytest.fixture
def letter_a():
    return LetterCandidate(
        type=LetterType.INCOMING,
        from_to="Agency X",
        reference="REF-1",
        date="2024-03-01",
        subject="S1",
    )


@pytest.fixture
def ini_config(tmp_path):
    """AppConfig backed by a throwaway INI file instead of the user's settings."""
    from PyQt6.QtCore import QSettings
    from suratlog.config import AppConfig

    app_config = AppConfig(profile="test")
    app_config.settings = QSettings(str(tmp_path / "suratlog-test.ini"), QSettings.Format.IniFormat)
    yield app_config
    AppConfig._active_profile = None
