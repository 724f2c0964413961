"""Structlog configuration: JSON file logs plus a colored console stream."""

import logging
import logging.handlers
import os
import time
from pathlib import Path

import structlog

from core.logging.processors import (
    add_process_info,
    add_request_context,
    add_service_context,
    console_renderer,
)

DEFAULT_LOG_FILE_PATH = "./logs/pet-admin-service.log"
MAX_LOG_FILE_BYTES = 100 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 240


def _foreign_pre_chain(include_service: bool) -> list:
    """Processors applied to records emitted through plain ``logging``."""
    chain = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_request_context,
    ]
    if include_service:
        chain += [add_service_context, add_process_info]
    return chain


def setup_logging() -> None:
    """Configure structlog with JSON file output and colored console output.

    File output is JSON with request/service/process metadata, rotated at
    100MB with 240 backups. Console output is always on and reads
    ``[LEVEL] timestamp | request_id | logger | event key=value ...``.

    Environment variables:
    - LOG_FILE_PATH: log file location (default: ./logs/pet-admin-service.log)
    - LOG_LEVEL: logging level (default: INFO)
    - LOG_TO_FILE: set to "false" to disable the JSON file handler
    - SERVICE_NAME / ENVIRONMENT: added to every JSON event
    """
    log_file_path = os.getenv("LOG_FILE_PATH", DEFAULT_LOG_FILE_PATH)
    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)
    log_to_file = os.getenv("LOG_TO_FILE", "true").lower() == "true"

    handlers: list[logging.Handler] = []

    if log_to_file:
        Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_file_path,
            maxBytes=MAX_LOG_FILE_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(),
                foreign_pre_chain=_foreign_pre_chain(include_service=True),
            )
        )
        handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=console_renderer,
            foreign_pre_chain=_foreign_pre_chain(include_service=False),
        )
    )
    handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            add_request_context,
            add_service_context,
            add_process_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)
    for handler in handlers:
        handler.setLevel(log_level)
        root_logger.addHandler(handler)

    structlog.get_logger(__name__).info(
        "logging_configured",
        log_file=log_file_path if log_to_file else None,
        log_level=log_level_name,
    )


def cleanup_old_logs(
    log_file_path: str | None = None, retention_days: int = 10
) -> int:
    """Remove rotated log files older than the retention period.

    Args:
        log_file_path: Path to the main log file. If None, uses LOG_FILE_PATH.
        retention_days: Number of days to retain logs (default: 10).

    Returns:
        Number of files deleted.
    """
    if log_file_path is None:
        log_file_path = os.getenv("LOG_FILE_PATH", DEFAULT_LOG_FILE_PATH)

    log_dir = Path(log_file_path).parent
    log_name = Path(log_file_path).name
    cutoff = time.time() - retention_days * 24 * 60 * 60
    logger = structlog.get_logger(__name__)

    deleted_count = 0
    for log_file in log_dir.glob(f"{log_name}.*"):
        if log_file.stat().st_mtime >= cutoff:
            continue
        try:
            log_file.unlink()
            deleted_count += 1
        except OSError as e:
            logger.warning("log_file_delete_failed", file=str(log_file), error=str(e))

    if deleted_count:
        logger.info(
            "old_log_files_removed",
            deleted_count=deleted_count,
            retention_days=retention_days,
        )
    return deleted_count
