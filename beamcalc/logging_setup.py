# beamcalc/logging_setup.py
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional


def setup_logging(
    log_dir: Optional[str] = "logs",
    log_name: str = "beamcalc.log",
    level: int = logging.INFO,
) -> logging.Logger:
    """
    Configure the "beamcalc" logger with a console handler and, when
    log_dir is given, a rotating file handler. Safe to call more than once.
    """
    logger = logging.getLogger("beamcalc")
    logger.setLevel(level)

    # Don't stack handlers on repeated calls
    if logger.handlers:
        return logger

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )

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
