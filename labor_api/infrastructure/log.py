# labor_api/infrastructure/log.py
#
# Shared application logger with elapsed time.
#
# Design decisions:
#   - One configure_logging() call at startup replaces per-module handler setup.
#   - Elapsed time since process start is shown, like the batch tooling output,
#     so request bursts are easy to line up in the console.
#   - Plain stdout stream handler; no external log shipping.
from __future__ import annotations

import logging
import sys

_ROOT = "labor_api"


class _ElapsedFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        minutes, seconds = divmod(int(record.relativeCreated / 1000), 60)
        return f"[{_ROOT} {minutes:02d}:{seconds:02d}] {record.levelname} {record.name}: {record.getMessage()}"


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stdout handler to the application logger. Idempotent."""
    root = logging.getLogger(_ROOT)
    root.setLevel(level)
    if not any(getattr(h, "_labor_api", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(_ElapsedFormatter())
        handler._labor_api = True  # type: ignore[attr-defined]
        root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Child logger under the application namespace."""
    return logging.getLogger(f"{_ROOT}.{name}")
