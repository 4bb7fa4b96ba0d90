"""Status line output for the monitoring supervisor."""

import json
from typing import Any


class Output:
    """Collects the check result and prints it as exactly one line."""

    def __init__(self):
        self.data: dict[str, Any] = {}
        self.errors: list[str] = []
        self._summary: str | None = None
        self._printed: bool = False

    def emit(self, data: dict[str, Any]) -> None:
        """Store structured output data."""
        self.data.update(data)

    def error(self, message: str) -> None:
        """Record an error message."""
        self.errors.append(message)

    def set_summary(self, summary: str) -> None:
        """Set the one-line status text."""
        self._summary = summary

    @property
    def summary(self) -> str:
        """Get summary or generate from data."""
        if self._summary:
            return self._summary
        if self.errors:
            return self.errors[0]
        return self.data.get("message", "")

    def to_json(self) -> str:
        """Return data as a single-line JSON string."""
        data = dict(self.data)
        if self.errors:
            data["errors"] = list(self.errors)
        data.setdefault("message", self.summary)
        return json.dumps(data, default=str)

    def render(self, format: str = "plain") -> None:
        """Print output in the specified format.

        Args:
            format: Output format - "json" or "plain"
        """
        if self._printed:
            return
        self._printed = True

        if format == "json":
            print(self.to_json())
        else:
            print(self.summary)
