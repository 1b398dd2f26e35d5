"""Structured logging configuration for Interview Practice API."""

import logging
import sys
from pythonjsonlogger import jsonlogger
from config import config

# Context keys whose values never reach the log output
REDACTED_FIELDS = ('password', 'hashed_password')


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that tags records with app/database and masks credentials."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['app'] = 'interview-practice'
        log_record['environment'] = 'production' if not config.api_debug else 'development'
        log_record['database'] = config.mongodb_db
        log_record['level'] = record.levelname
        for key in REDACTED_FIELDS:
            if key in log_record:
                log_record[key] = '***'


def setup_logging():
    """Configure structured JSON logging."""
    logger = logging.getLogger('interview_practice')
    logger.setLevel(logging.DEBUG if config.api_debug else logging.INFO)

    # Remove existing handlers
    logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if config.api_debug else logging.INFO)
    console_handler.setFormatter(CustomJsonFormatter(
        '%(timestamp)s %(level)s %(name)s %(message)s %(module)s %(lineno)d',
        rename_fields={'timestamp': '@timestamp', 'level': 'severity'}
    ))

    logger.addHandler(console_handler)
    # Emitted only through the handler above
    logger.propagate = False

    return logger


logger = setup_logging()


def log_info(message: str, **context):
    """Log info message with additional context."""
    logger.info(message, extra=context)


def log_error(message: str, **context):
    """Log error message with traceback and additional context."""
    logger.error(message, extra=context, exc_info=True)


def log_warning(message: str, **context):
    """Log warning message with additional context."""
    logger.warning(message, extra=context)


def log_debug(message: str, **context):
    """Log debug message with additional context."""
    logger.debug(message, extra=context)
