# beam_analysis/logging_setup.py
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from .config import CONFIG

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(
    level: Optional[str] = None,
    log_dir: Optional[str] = None,
    log_name: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the "beam_analysis" logger for a host process (API, demos).

    Library modules only create loggers; handlers are installed here. Calling
    this more than once returns the already configured logger.
    """
    level = level or CONFIG.log_level
    log_dir = log_dir if log_dir is not None else CONFIG.log_dir
    log_name = log_name or CONFIG.log_name

    logger = logging.getLogger("beam_analysis")
    logger.setLevel(level)

    if logger.handlers:
        return logger

    fmt = logging.Formatter(LOG_FORMAT)

    sh = logging.StreamHandler()
    sh.setLevel(level)
    sh.setFormatter(fmt)
    logger.addHandler(sh)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        log_path = os.path.join(log_dir, log_name)
        fh = RotatingFileHandler(log_path, maxBytes=2_000_000, backupCount=3, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(fmt)
        logger.addHandler(fh)
        logger.info("Logging initialised. File: %s", log_path)

    return logger
