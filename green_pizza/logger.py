# logger.py

import logging
import sys

# Structured JSON line, one per record
LOG_FORMAT = '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s", "request_id": "%(request_id)s"}'
DATE_FORMAT = '%Y-%m-%dT%H:%M:%S'

# Named logger instance
logger = logging.getLogger("green_pizza")


class RequestIdFilter(logging.Filter):
    """ Fill in request_id for records logged without one. """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = "N/A"
        return True


def configure_logging(level: str = "INFO"):
    """ Attach the JSON handler to the service logger. Safe to call more than once. """
    logger.setLevel(level.upper())
    if not any(getattr(h, "_green_pizza", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        handler.addFilter(RequestIdFilter())
        handler._green_pizza = True
        logger.addHandler(handler)
    # keep records off the root logger so uvicorn's own format is left alone
    logger.propagate = False


def log_info(message: str, request_id: str = "N/A"):
    logger.info(message, extra={"request_id": request_id})

def log_error(message: str, request_id: str = "N/A"):
    logger.error(message, extra={"request_id": request_id})

def log_debug(message: str, request_id: str = "N/A"):
    logger.debug(message, extra={"request_id": request_id})

def log_warning(message: str, request_id: str = "N/A"):
    logger.warning(message, extra={"request_id": request_id})
