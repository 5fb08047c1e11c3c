"""Line-oriented output targets used by notification channels."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO


class OutputSink(Protocol):
    """
    Protocol for anything a channel can write formatted lines to.
    """

    def write(self, line: str) -> None:
        """Write a single line of text."""


class ConsoleSink:
    """
    Writes lines to a text stream, standard output by default.

    The stream is looked up on every write when not given explicitly, so
    redirections of ``sys.stdout`` (e.g. pytest's capsys) are honoured.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, line: str) -> None:
        print(line, file=self._stream or sys.stdout)


class MemorySink:
    """Collects written lines in memory; handy in tests."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write(self, line: str) -> None:
        self.lines.append(line)

    def clear(self) -> None:
        self.lines.clear()

    def __len__(self) -> int:
        return len(self.lines)
