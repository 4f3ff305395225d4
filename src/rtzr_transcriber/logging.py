import logging
import os
import sys

from pythonjsonlogger import jsonlogger

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configures structured JSON logging for the transcriber.

    Every record is written to stdout as one JSON object with timestamp,
    level, logger name, message and the ddtrace correlation ids. The root
    logger and the Uvicorn loggers share the handler so API access logs and
    orchestration logs come out in the same shape.

    Args:
        level: Log level name. Falls back to LOG_LEVEL, then INFO.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    formatter = jsonlogger.JsonFormatter(
        _LOG_FORMAT,
        rename_fields={"asctime": "timestamp", "levelname": "level"},
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level_name)
    root_logger.handlers = [stream_handler]

    for logger_name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        server_logger = logging.getLogger(logger_name)
        server_logger.setLevel(level_name)
        server_logger.handlers = [stream_handler]
        server_logger.propagate = False

    return root_logger
