"""Append-only activity log, opened and closed as a scoped resource."""

import logging
from pathlib import Path
from typing import Optional, Union

from .errors import LogSinkError

DEFAULT_LOG_FILE = "rental_log.txt"
LOG_FORMAT = "[%(asctime)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ActivityLog:
    """
    Timestamped text lines appended to a file.

    Usage:
        with ActivityLog("rental_log.txt") as log:
            log.log("Rented vehicle id=1 ...")

    The file is opened on enter (LogSinkError if that fails) and the
    handler is closed on exit, whether or not the block raised.
    """

    def __init__(self, filename: Union[str, Path] = DEFAULT_LOG_FILE):
        self.filename = Path(filename)
        # Private logger, not registered with logging.getLogger
        self._logger = logging.Logger(f"{__name__}:{self.filename}")
        self._logger.setLevel(logging.INFO)
        self._logger.propagate = False
        self._handler: Optional[logging.FileHandler] = None

    def open(self) -> "ActivityLog":
        try:
            handler = logging.FileHandler(self.filename, mode="a", encoding="utf-8")
        except OSError as e:
            raise LogSinkError(f"Cannot open log file {self.filename}: {e}") from e
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        self._logger.addHandler(handler)
        self._handler = handler
        return self

    def close(self) -> None:
        if self._handler is None:
            return
        self._logger.removeHandler(self._handler)
        self._handler.close()
        self._handler = None

    @property
    def is_open(self) -> bool:
        return self._handler is not None

    def log(self, line: str) -> None:
        if self._handler is None:
            raise LogSinkError(f"Log file {self.filename} is not open")
        self._logger.info(line)

    def __enter__(self) -> "ActivityLog":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
