# relay/logger.py
import logging
import structlog

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}

def configure_logging(level: str = "INFO") -> None:
    min_level = _LEVELS.get(level.upper(), logging.INFO)

    # uvicorn and httpx log through stdlib; keep them at the same level
    logging.basicConfig(level=min_level)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        logger_factory=structlog.PrintLoggerFactory(),
    )

def get_logger():
    return structlog.get_logger()
