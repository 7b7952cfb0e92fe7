"""Logging configuration helper."""
import logging
from logging import Logger
from archive_tool.config.settings import Settings

# APScheduler logs every job start/finish at INFO; only show that when debugging.
SCHEDULER_LOGGER = "apscheduler"

def configure_logging(settings: Settings) -> None:
    """Configure root logging from the -v/-q/LOG_LEVEL choice in settings."""
    level = getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    logging.getLogger().setLevel(level)
    logging.getLogger(SCHEDULER_LOGGER).setLevel(level if level <= logging.DEBUG else max(level, logging.WARNING))

def get_logger(name: str) -> Logger:
    """Get a named logger."""
    return logging.getLogger(name)
