"""
Centralized logging configuration for treasury operations.
Console output stays human-readable; the optional log file receives
structured JSON entries with context details.
"""

import logging
import logging.handlers
import sys
import os
import json
from datetime import datetime, timezone
from typing import Dict, Any, Optional


class ConsoleFormatter(logging.Formatter):
    """Plain message lines for the operator; tracebacks go to the log file only."""

    def format(self, record):
        return record.getMessage()


class StructuredFormatter(logging.Formatter):
    """
    Custom formatter that outputs structured log messages with context.
    """

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        if hasattr(record, 'context'):
            log_entry["context"] = record.context

        if hasattr(record, 'tx_context'):
            log_entry["tx_context"] = record.tx_context

        return json.dumps(log_entry, default=str)


class OperatorLogger:
    """
    Logger for the transfer operator with context-aware event helpers.
    """

    def __init__(self, name: str, log_level: str = "INFO", log_file: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

        # Close and drop handlers left by an earlier get_logger call
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

        level = getattr(logging, log_level.upper())

        # Progress lines go to stdout, warnings and failures to stderr
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setLevel(level)
        stdout_handler.addFilter(lambda record: record.levelno < logging.WARNING)
        stdout_handler.setFormatter(ConsoleFormatter())
        self.logger.addHandler(stdout_handler)

        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(max(level, logging.WARNING))
        stderr_handler.setFormatter(ConsoleFormatter())
        self.logger.addHandler(stderr_handler)

        if log_file:
            try:
                log_dir = os.path.dirname(log_file)
                if log_dir and not os.path.exists(log_dir):
                    os.makedirs(log_dir)

                file_handler = logging.handlers.RotatingFileHandler(
                    log_file,
                    maxBytes=10*1024*1024,  # 10MB
                    backupCount=5
                )
                # File receives everything, including tracebacks
                file_handler.setLevel(logging.DEBUG)
                file_handler.setFormatter(StructuredFormatter())
                self.logger.addHandler(file_handler)

            except OSError as e:
                self.logger.error(f"Failed to setup file logging: {e}")

    def info(self, message: str, **context):
        self.logger.info(message, extra={"context": context} if context else None)

    def warning(self, message: str, **context):
        self.logger.warning(message, extra={"context": context} if context else None)

    def error(self, message: str, **context):
        self.logger.error(message, extra={"context": context} if context else None)

    def log_startup(self, config_details: Dict[str, Any]):
        """Log the run's configuration (without sensitive info)"""
        startup_context = {
            "event_type": "startup",
            "config": config_details,
        }
        self.logger.debug(
            "Treasury transfer starting",
            extra={"context": startup_context}
        )

    def log_transaction(self, stage: str, tx_hash: str, details: Dict[str, Any] = None):
        """Log a transaction lifecycle event (submitted / confirmed)"""
        tx_context = {
            "event_type": "transaction",
            "stage": stage,
            "tx_hash": tx_hash,
        }
        if details:
            tx_context.update(details)

        self.logger.debug(
            f"Transaction {stage}: {tx_hash}",
            extra={"tx_context": tx_context}
        )

    def log_error(self, error: Exception, context: Dict[str, Any] = None, severity: str = "ERROR"):
        """Log errors with full context and stack trace"""
        error_context = {
            "event_type": "error",
            "error_type": type(error).__name__,
            "error_message": str(error),
        }

        if context:
            error_context["context"] = context

        log_method = getattr(self.logger, severity.lower(), self.logger.error)
        log_method(
            f"Error occurred: {type(error).__name__}: {str(error)}",
            extra={"context": error_context},
            exc_info=error
        )


def get_logger(name: str, log_level: str = "INFO", log_file: Optional[str] = None) -> OperatorLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (usually module name)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path

    Returns:
        Configured OperatorLogger instance
    """
    return OperatorLogger(name, log_level, log_file)
