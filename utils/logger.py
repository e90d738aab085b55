# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from config import Config

APP_LOGGER_NAME = "tileservice"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str | None) -> int:
    # "debug" / "INFO" -> numeric level; anything unknown falls back to INFO
    name = (level or "INFO").upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.INFO


def setup_logger(log_dir: Path | None = None, level: str | None = None) -> logging.Logger:
    """
    Configure the "tileservice" logger once per process.

    Writes to the console and to tileservice.log in log_dir (rotated at
    midnight, seven days kept). Calling it again only updates the level.
    """
    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(resolve_level(level or Config.LOG_LEVEL))

    if logger.handlers:
        return logger

    log_dir = log_dir or Config.LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [
        TimedRotatingFileHandler(
            filename=log_dir / "tileservice.log",
            when="midnight",
            backupCount=7,
            encoding="utf-8",
        ),
        logging.StreamHandler(),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging to {log_dir} at level {logging.getLevelName(logger.level)}")
    return logger


def get_logger(name: str) -> logging.Logger:
    # Child logger under the app namespace, e.g.
    # "services.order_service" -> "tileservice.services.order_service"
    if not name.startswith(APP_LOGGER_NAME):
        name = f"{APP_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
