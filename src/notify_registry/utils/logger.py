from __future__ import annotations

import logging
import sys


def setup_logger(name: str = "notify_registry", level: str = "INFO", host: str | None = None) -> logging.Logger:
    # Borrow the host application's handlers (if it has any) so registry output lands with theirs
    logger = logging.getLogger(name)
    if host:
        base_logger = logging.getLogger(host)
        if base_logger.handlers and not logger.handlers:
            for h in base_logger.handlers:
                logger.addHandler(h)
    logger.propagate = False
    logger.setLevel(level)
    if logger.handlers:
        return logger  # avoid duplicate handlers

    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s: %(message)s")
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    return logger
