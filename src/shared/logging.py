import logging
import sys
from typing import Optional, TextIO

from .config import Config


class LoggingManager:
    """Installs the stderr log handler used by the benchmark commands."""

    HANDLER_NAME = "storage_bench.console"

    @classmethod
    def setup_logging(cls, settings: Config, level: Optional[str] = None,
                      stream: Optional[TextIO] = None) -> None:
        """Configure the root logger from already loaded settings.

        Records go to stderr so that stdout carries only the report. Calling
        this again replaces the handler installed by the previous call.

        Args:
            settings: Loaded settings; supplies the default level and the
                levels applied to third-party loggers
            level: Overrides ``settings.log_level`` (DEBUG, INFO, WARNING, ...)
            stream: Destination stream, stderr by default
        """
        level_name = (level or settings.log_level).upper()
        numeric_level = getattr(logging, level_name, logging.INFO)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.set_name(cls.HANDLER_NAME)
        handler.setLevel(numeric_level)
        handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))

        root_logger = logging.getLogger()
        for existing in list(root_logger.handlers):
            if existing.get_name() == cls.HANDLER_NAME:
                root_logger.removeHandler(existing)
        root_logger.setLevel(numeric_level)
        root_logger.addHandler(handler)

        # Quieten chatty client libraries
        for logger_name, library_level in settings.library_log_levels.items():
            logging.getLogger(logger_name).setLevel(
                getattr(logging, library_level.upper(), logging.WARNING)
            )
