"""Logging configuration for scripts that run the calculation."""

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def init_logging(level: int = logging.INFO, log_file: str | Path | None = None) -> Path | None:
    """Configure root logging to stderr and, optionally, to ``log_file``.

    Calling it again does not add duplicate handlers.
    """
    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        stream = logging.StreamHandler()
        stream.setFormatter(formatter)
        root.addHandler(stream)

    if log_file is None:
        return None
    log_path = Path(log_file).resolve()
    # Don't add multiple handlers if init called twice
    if not any(
        isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", "") == str(log_path)
        for h in root.handlers
    ):
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return log_path
