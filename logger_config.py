"""
Logging setup for the ECS node handlers.

Records go to stdout so the Lambda runtime forwards them to CloudWatch Logs.
Every line carries the correlation id that utils.decorators attaches to a
handler invocation.
"""
import logging
import os
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s'

# Third-party loggers that are noisy at DEBUG/INFO
QUIET_LOGGERS = ('botocore', 'boto3', 'urllib3')


class CorrelationIdFilter(logging.Filter):
    """Give records logged without a correlation id a placeholder value."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, 'correlation_id'):
            record.correlation_id = '-'
        return True


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (defaults to this module's name)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name or __name__)

    if logger.handlers:
        return logger

    log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    logger.setLevel(getattr(logging, log_level, logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logger.level)
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    logger.addHandler(handler)

    logger.propagate = False

    for quiet in QUIET_LOGGERS:
        logging.getLogger(quiet).setLevel(logging.WARNING)

    return logger
