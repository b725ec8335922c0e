# services/logs.py
import logging

LOGGER_NAME = "payportal"


def setup_logging(level="INFO") -> logging.Logger:
    log = logging.getLogger(LOGGER_NAME)
    if not log.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        log.addHandler(h)
    log.setLevel(level if isinstance(level, int) else str(level).upper())
    return log
