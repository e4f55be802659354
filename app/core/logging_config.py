# app/core/logging_config.py
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def configure_logging(level: str = "INFO") -> None:
    # leaves an already configured root logger (e.g. pytest capture) untouched
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())
