"""
------------------------------------------------------------------------------
Project:        SuratLog
File:           suratlog/app.py
Version:        1.0.0
Producer:       PPKK Registry Team
Description:    Application bootstrap. Applies the configured logging and
                builds a ready-to-use LetterRegistry for the presentation layer.
------------------------------------------------------------------------------
"""

from typing import Optional

from suratlog.config import AppConfig
from suratlog.logger import get_logger, setup_logging
from suratlog.registry import LetterRegistry


def create_registry(
    app_config: Optional[AppConfig] = None,
    with_samples: bool = False,
    log_to_file: bool = False,
) -> LetterRegistry:
    """
    Builds a registry from the application configuration.

    Args:
        app_config: Configuration manager. A default AppConfig is created if omitted.
        with_samples: Seed the register with the demo letters.
        log_to_file: Also write logs to the configured log file.
    """
    app_config = app_config or AppConfig()
    setup_logging(
        level=app_config.get_log_level(),
        log_file=str(app_config.get_log_file_path()) if log_to_file else None,
        component_levels=app_config.get_log_components(),
    )

    registry = LetterRegistry(
        export_prefix=app_config.get_export_prefix(),
        export_dir=app_config.get_export_dir(),
    )
    if with_samples:
        registry.load_sample_records()
    get_logger("core").info(f"Register ready with {len(registry.repository)} letters")
    return registry
