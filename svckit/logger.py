"""Request-scoped logging with a per-run log file."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

_LOG = logging.getLogger("svckit")
_LOG.setLevel(logging.DEBUG)
_LOG.addHandler(logging.NullHandler())

_LEVELS = {"INFO": logging.INFO, "ERROR": logging.ERROR, "DEBUG": logging.DEBUG}

_file_handler: logging.FileHandler | None = None


def init_logger(log_dir: str | Path = "./log") -> Path:
    """Direct log output to a new timestamped file in ``log_dir`` and return its path."""
    global _file_handler
    now = datetime.now()
    stamp = now.strftime("%d%m%Y.%H.%M.%S.") + f"{now.microsecond:06d}000"
    path = Path(log_dir) / f"logfile{stamp}.txt"
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(message)s", datefmt="%Y/%m/%d %H:%M:%S")
    )
    if _file_handler is not None:
        _LOG.removeHandler(_file_handler)
        _file_handler.close()
    _LOG.addHandler(handler)
    _file_handler = handler
    return path


def generate_req_id() -> str:
    """Return a new random request identifier."""
    return str(uuid.uuid4())


def _format_value(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_format_value(item) for item in value) + "]"
    return str(value)


@dataclass
class Logger:
    """Logger that tags every line with a request identifier."""

    req_id: str = ""

    def set_req_id(self) -> None:
        """Assign a fresh request identifier."""
        self.req_id = generate_req_id()

    def log(self, level: str, step: str, *args: Any) -> str:
        """Emit a formatted line and return it."""
        stamp = datetime.now().strftime("%Y/%m/%d %H:%M:%S")
        message = _format_value(list(args))
        line = f"{stamp} [{level}] [ReqID: {self.req_id}] {level} [Step {step}] {message}"
        _LOG.log(_LEVELS.get(level, logging.INFO), line)
        return line