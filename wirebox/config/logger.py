# wirebox/config/logger.py

import os
from typing import Optional

from wirebox.config.settings import Settings
from wirebox.shared.logger.container_logger import ContainerLogger

# Private singleton instance
_logger: Optional[ContainerLogger] = None


def build_logger(settings: Settings) -> ContainerLogger:
    """Create a ContainerLogger from app_name, log_file, log_level and json_logs."""
    # Ensure the log directory exists
    log_dir = os.path.dirname(settings.app.log_file)
    if log_dir and not os.path.exists(log_dir):
        os.makedirs(log_dir, exist_ok=True)

    return ContainerLogger(
        name=settings.app.app_name,
        log_file=settings.app.log_file or None,
        level=settings.app.log_level,
        json_format=settings.app.json_logs,
    )


def get_logger(settings: Optional[Settings] = None) -> ContainerLogger:
    """
    Return a ContainerLogger.
    With explicit settings, a logger configured from them; without, the
    process-wide logger built from environment settings on first call.
    """
    global _logger
    if settings is not None:
        return build_logger(settings)
    if _logger is None:
        _logger = build_logger(Settings())
    return _logger
