"""Output sinks for analysis results.

Result lines go through a Reporter so that the analyzer can be exercised
without capturing process output. Diagnostics still go to ``logging``.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO
import sys


class Reporter(ABC):
    """Every output sink must implement ``line``."""

    @abstractmethod
    def line(self, text: str = "") -> None:
        """Emit one line of result text."""

    def section(self, title: str) -> None:
        self.line(f"\n=== {title} ===")


class ConsoleReporter(Reporter):
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def line(self, text: str = "") -> None:
        print(text, file=self.stream or sys.stdout)


class RecordingReporter(Reporter):
    """Keeps every reported line in memory."""

    def __init__(self):
        self.lines: List[str] = []

    def line(self, text: str = "") -> None:
        self.lines.extend(text.split("\n"))

    def section(self, title: str) -> None:
        self.line(f"=== {title} ===")

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
