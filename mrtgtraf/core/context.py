"""Execution context for testability."""

import time
from typing import TextIO


class Context:
    """
    Wraps the clock and file access for testability.

    In production: reads real files and the system clock
    In tests: can be replaced with MockContext
    """

    def now(self) -> int:
        """Current time as whole unix epoch seconds."""
        return int(time.time())

    def open_file(self, path: str) -> TextIO:
        """
        Open a text file for reading.

        Args:
            path: Path to the file

        Returns:
            Open file object; the caller is responsible for closing it

        Raises:
            OSError: If the file cannot be opened
        """
        return open(path, "r", encoding="ascii", errors="replace")
