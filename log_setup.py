from __future__ import annotations

import logging

from env_reader import read_env_or_warn

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def configure_logging(default_level: str = "INFO") -> int:
    log_level_name = read_env_or_warn("LOG_LEVEL", default_level).upper()
    log_level = getattr(logging, log_level_name, None)
    if not isinstance(log_level, int):
        log_level = logging.INFO
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    return log_level
