"""
Logging configuration for the API process.

JSON records for deployed environments, plain text lines for local runs.
Every record carries the service name so marketplace logs can be told
apart once shipped to a shared collector.
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

# Loggers owned by this service; the rest of the process stays at WARNING
SERVICE_LOGGERS = ("solosphere", "main")


class ServiceJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter stamping each record with the service name and source.
    """

    def __init__(self, *args, service: str = "solosphere", **kwargs):
        super().__init__(*args, **kwargs)
        self.service = service

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        log_record['service'] = self.service
        log_record['level'] = record.levelname
        log_record['logger'] = record.name

        if record.levelno >= logging.WARNING:
            log_record['source'] = f"{record.pathname}:{record.lineno}"


def setup_logging(log_level: str = "INFO", json_logs: bool = True, service: str = "solosphere") -> logging.Handler:
    """
    Configure the root logger for the API.

    The service loggers log at `log_level`; third-party libraries only
    surface warnings, except uvicorn's access log.

    Args:
        log_level: Level for the service loggers (DEBUG, INFO, ...)
        json_logs: Emit JSON records instead of human-readable lines
        service: Name stamped on every JSON record

    Returns:
        The installed console handler
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)

    if json_logs:
        formatter = ServiceJsonFormatter('%(message)s', service=service)
    else:
        formatter = logging.Formatter(
            f'%(asctime)s - {service} - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    level = getattr(logging, log_level.upper())
    for name in SERVICE_LOGGERS:
        logging.getLogger(name).setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)

    return console_handler
