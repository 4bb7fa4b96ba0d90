"""JSONL run log for check executions."""

import json
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any


CHECK_NAME = "check_mrtgtraf"


def get_log_path(base_path: Path, check_name: str = CHECK_NAME) -> Path:
    """
    Get the log file path for a check.

    Args:
        base_path: Base directory for logs
        check_name: Name of the check

    Returns:
        Path to the log file: {base}/{date}/{check}.jsonl
    """
    today = date.today().isoformat()
    return Path(base_path) / today / f"{check_name}.jsonl"


class CheckLogger:
    """
    JSONL logger for check execution.

    Writes structured log entries to a JSONL file. A logger without a
    path is a no-op, and a log that cannot be written disables itself
    so that logging never changes the outcome of a check.
    """

    def __init__(self, check_name: str = CHECK_NAME, log_path: Path | None = None):
        self.check_name = check_name
        self.log_path = log_path
        self._file = None
        self._disabled = log_path is None

    @classmethod
    def for_directory(cls, log_dir: Path | None) -> "CheckLogger":
        """Logger writing under log_dir, or a no-op logger if it is None."""
        if log_dir is None:
            return cls()
        return cls(log_path=get_log_path(log_dir))

    def _ensure_file(self) -> None:
        """Ensure log file is open."""
        if self._file is None:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(self.log_path, "a")

    def _log(self, level: str, message: str, **extra: Any) -> None:
        """Write a log entry."""
        if self._disabled:
            return
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "check": self.check_name,
            "message": message,
            **extra,
        }
        try:
            self._ensure_file()
            self._file.write(json.dumps(entry, default=str) + "\n")
            self._file.flush()
        except OSError:
            self._disabled = True
            self.close()

    def debug(self, message: str, **extra: Any) -> None:
        """Log debug message."""
        self._log("debug", message, **extra)

    def info(self, message: str, **extra: Any) -> None:
        """Log info message."""
        self._log("info", message, **extra)

    def warning(self, message: str, **extra: Any) -> None:
        """Log warning message."""
        self._log("warning", message, **extra)

    def error(self, message: str, **extra: Any) -> None:
        """Log error message."""
        self._log("error", message, **extra)

    def close(self) -> None:
        """Close the log file."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "CheckLogger":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()
