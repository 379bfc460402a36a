"""
core/logger.py — JSONL structured logger for the Tibetan syllable composer.

JSONLLogger writes one JSON object per line to {log_dir}/tibetan_{date}.jsonl,
rotating automatically each day. WARN/ERROR are also mirrored to Python
stdlib logging (stderr). Thread-safe via threading.Lock.

Usage::

    from core.logger import get_logger
    log = get_logger()
    log.info("web_app", "compose", {"root": "ག", "valid": True})
"""

from __future__ import annotations

import json
import logging
import platform
import sys
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

# ── stdlib mirror logger (stderr for WARN+) ──────────────────
_stdlib = logging.getLogger("tibetan")
if not _stdlib.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s — %(message)s"))
    _stdlib.addHandler(_handler)
_stdlib.setLevel(logging.DEBUG)
_stdlib.propagate = False

# ── JSONL level threshold ordering ───────────────────────────
_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "WARNING": 30, "ERROR": 40}

# ── Settings applied when the singleton is created ───────────
_log_dir = Path("logs")
_enabled = True
_level = "DEBUG"

# ── Singleton storage ─────────────────────────────────────────
_instance: Optional["JSONLLogger"] = None
_instance_lock = threading.Lock()


class JSONLLogger:
    """
    Singleton JSONL structured logger.

    Each call to a log method appends a single JSON line to
    ``{log_dir}/tibetan_{YYYY-MM-DD}.jsonl``. A new file is opened
    automatically when the calendar date changes. When constructed with
    ``enabled=False`` nothing is written to disk; WARN/ERROR still reach
    stderr. Entries below *level* are not written.

    Fields written per entry:

    .. code-block:: json

        {
          "timestamp_iso": "2026-10-19T01:20:49.123456+00:00",
          "level": "INFO",
          "phase": "web_app",
          "event": "compose",
          "data": {"root": "ག"}
        }

    Do not instantiate directly — use :func:`get_logger`.
    """

    def __init__(self, log_dir: Path, enabled: bool = True, level: str = "DEBUG") -> None:
        """Open the log file for today and write the startup entry."""
        self._lock = threading.Lock()
        self._log_dir = log_dir
        self._enabled = enabled
        self._threshold = _LEVELS.get(level.upper(), _LEVELS["DEBUG"])
        self._file: Optional[Any] = None
        self._current_date: str = ""
        if self._enabled:
            self._open_file()
        self._write_startup()

    @property
    def log_dir(self) -> Path:
        return self._log_dir

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def threshold(self) -> int:
        return self._threshold

    # ──────────────────────────────────────────
    # Public logging methods
    # ──────────────────────────────────────────

    def debug(self, phase: str, event: str, data: Optional[dict] = None) -> None:
        """Write a DEBUG-level structured log entry."""
        self._write("DEBUG", phase, event, data)

    def info(self, phase: str, event: str, data: Optional[dict] = None) -> None:
        """
        Write an INFO-level structured log entry.

        Args:
            phase: Subsystem (e.g. ``'web_app'``, ``'cli'``).
            event: Short event identifier (e.g. ``'compose'``).
            data: Optional dict of additional key-value context.
        """
        self._write("INFO", phase, event, data)

    def warn(self, phase: str, event: str, data: Optional[dict] = None) -> None:
        """Write a WARN-level entry and mirror to stderr via stdlib logging."""
        self._write("WARN", phase, event, data)
        _stdlib.warning("[%s] %s | %s", phase, event, data or {})

    def error(self, phase: str, event: str, data: Optional[dict] = None) -> None:
        """Write an ERROR-level entry and mirror to stderr via stdlib logging."""
        self._write("ERROR", phase, event, data)
        _stdlib.error("[%s] %s | %s", phase, event, data or {})

    def flush(self) -> None:
        """Flush the underlying file buffer immediately."""
        with self._lock:
            if self._file and not self._file.closed:
                self._file.flush()

    def close(self) -> None:
        """Close the current log file; later writes reopen it."""
        with self._lock:
            if self._file and not self._file.closed:
                self._file.close()
            self._file = None
            self._current_date = ""

    # ──────────────────────────────────────────
    # Internal helpers
    # ──────────────────────────────────────────

    def _write(
        self,
        level: str,
        phase: str,
        event: str,
        data: Optional[dict],
    ) -> None:
        """
        Serialise and append one JSON line to the log file.

        Performs the daily rotation check on every write.
        """
        if not self._enabled or _LEVELS[level] < self._threshold:
            return
        now =datetime.now(tz=timezone.utc)
        record: dict[str, Any] = {
            "timestamp_iso": now.isoformat(),
            "level": level,
            "phase": phase,
            "event": event,
            "data": data or {},
        }
        line = json.dumps(record, ensure_ascii=False, separators=(",", ":"))

        with self._lock:
            self._rotate_if_needed(now)
            if self._file and not self._file.closed:
                self._file.write(line + "\n")
                self._file.flush()

    def _rotate_if_needed(self, now: datetime) -> None:
        """
        Open a new log file if the calendar date has changed.

        Called inside ``self._lock`` — do not call from outside.
        """
        today = now.strftime("%Y-%m-%d")
        if today != self._current_date or self._file is None:
            if self._file and not self._file.closed:
                self._file.close()
            self._current_date = today
            self._log_dir.mkdir(parents=True, exist_ok=True)
            log_path = self._log_dir / f"tibetan_{today}.jsonl"
            self._file = open(log_path, "a", encoding="utf-8", buffering=1)

    def _open_file(self) -> None:
        """Open the log file for today's date (called once on init)."""
        now = datetime.now(tz=timezone.utc)
        with self._lock:
            self._rotate_if_needed(now)

    def _write_startup(self) -> None:
        """Write a startup entry with Python version and platform."""
        self.info(
            phase="system",
            event="startup",
            data={
                "python_version": sys.version,
                "platform": platform.platform(),
            },
        )


# ──────────────────────────────────────────────────────────────
# Configuration and singleton accessor
# ──────────────────────────────────────────────────────────────

def configure(
    log_dir: Path | str | None = None,
    enabled: bool | None = None,
    level: str | None = None,
) -> None:
    """
    Set where (and whether) the logger writes, replacing any live instance.

    Callers must resolve the logger through :func:`get_logger` at the point
    of use; a reference held from before this call keeps the old settings.

    Args:
        log_dir: Directory for the daily JSONL files.
        enabled: ``False`` keeps entries off disk.
        level:   Lowest level written to JSONL (``'DEBUG'`` .. ``'ERROR'``).
    """
    global _instance, _log_dir, _enabled, _level
    with _instance_lock:
        if log_dir is not None:
            _log_dir = Path(log_dir)
        if enabled is not None:
            _enabled = enabled
        if level is not None:
            _level = level
        if _instance is not None:
            _instance.close()
            _instance = None


def set_stderr_level(level: str) -> None:
    """Set the minimum level mirrored to stderr (``'WARN'`` maps to WARNING)."""
    name = "WARNING" if level.upper() == "WARN" else level.upper()
    _stdlib.setLevel(getattr(logging, name, logging.INFO))


def get_logger() -> JSONLLogger:
    """
    Return the singleton :class:`JSONLLogger` instance.

    Thread-safe: the first call creates the instance; subsequent calls
    return the same object without acquiring the creation lock.
    """
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                _instance = JSONLLogger(_log_dir, enabled=_enabled, level=_level)
    return _instance
