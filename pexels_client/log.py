import logging
from pathlib import Path

LOGGER_NAME = "pexels_client"
LOG_FORMAT = "%(asctime)s %(filename)s:%(lineno)d: %(message)s"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def configure_logging(
    log_file: str | Path = "pexels_client.log", level: int = logging.INFO
) -> logging.Logger:
    """Send the package's log records to ``log_file``, appending.

    Calling this again swaps the file handler instead of stacking a second one.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_pexels_file_sink", False):
            logger.removeHandler(handler)
            handler.close()

    handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler._pexels_file_sink = True  # type: ignore[attr-defined]
    logger.addHandler(handler)

    logger.info("Logging initialized. Writing logs to %s", log_file)
    return logger
