"""
Logging configuration with JSON formatter for structured logging.
"""
import logging
import sys
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger
from core.settings import Settings, settings as default_settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with additional fields."""

    def __init__(self, *args: Any, app_settings: Optional[Settings] = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.app_settings = app_settings or default_settings

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any]
    ) -> None:
        """Add custom fields to log record."""
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = self.formatTime(record, self.datefmt)
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno

        # Application context
        log_record['app_name'] = self.app_settings.app_name
        log_record['environment'] = self.app_settings.app_env

        if record.exc_info:
            log_record['exc_info'] = self.formatException(record.exc_info)


def setup_logging(app_settings: Optional[Settings] = None, level: Optional[str] = None) -> None:
    """
    Configure application logging.

    JSON output for staging/production, human-readable output for
    development. Records go to stderr; stdout is reserved for CLI output.

    Args:
        app_settings: Settings to read environment and level from
        level: Explicit level overriding the configured one
    """
    app_settings = app_settings or default_settings
    use_json = app_settings.app_env in ["production", "staging"]

    if use_json:
        formatter = CustomJsonFormatter(
            fmt='%(timestamp)s %(level)s %(name)s %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S',
            app_settings=app_settings,
        )
    else:
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    log_level = (level or app_settings.log_level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.debug(
        "Logging configured",
        extra={
            "log_level": log_level,
            "environment": app_settings.app_env,
            "json_logging": use_json
        }
    )
