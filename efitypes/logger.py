"""A logging handler that prefixes every output line with its level."""

from __future__ import annotations

import logging
from typing import Protocol


class _TextSink(Protocol):
    def write(self, text: str, /) -> object: ...


def _level_name(levelno: int) -> str:
    if levelno >= logging.ERROR:
        return "ERROR"
    if levelno >= logging.WARNING:
        return "WARN"
    if levelno >= logging.INFO:
        return "INFO"
    if levelno >= logging.DEBUG:
        return "DEBUG"
    return "TRACE"


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    terminated = text.endswith("\n")
    if terminated:
        parts.pop()
    last = len(parts) - 1
    return [
        part.removesuffix("\r") if terminated or pos < last else part
        for pos, part in enumerate(parts)
    ]


class _DecoratedWriter:
    """Writes text, putting a level header at the start of each output line."""

    def __init__(self, output: _TextSink, level: str, file: str, line: int) -> None:
        self._output = output
        self._level = level
        self._file = file
        self._line = line
        self._at_line_start = True

    def write(self, text: str) -> None:
        first, *rest = _lines(text) or [""]
        if self._at_line_start:
            self._output.write(f"[{self._level:>5}]: {self._file:>12}@{self._line:03}: ")
            self._at_line_start = False
        self._output.write(first)
        for line in rest:
            self._output.write(f"\n{self._level}: {line}")
        if text.endswith("\n"):
            self._output.write("\n")
            self._at_line_start = True


class Logger(logging.Handler):
    """Handler writing decorated records to a text output.

    Call ``disable`` once the output is no longer usable; after that, records
    are dropped. Write errors propagate unless ``ignore_errors`` is set.
    """

    def __init__(self, output: _TextSink, ignore_errors: bool = False) -> None:
        super().__init__()
        self._output: _TextSink | None = output
        self.ignore_errors = ignore_errors

    def disable(self) -> None:
        """Stop writing to the output."""
        self._output = None

    def enabled(self) -> bool:
        """Whether records are still written."""
        return self._output is not None

    def emit(self, record: logging.LogRecord) -> None:
        output = self._output
        if output is None:
            return
        writer = _DecoratedWriter(
            output,
            _level_name(record.levelno),
            record.pathname or "<unknown file>",
            record.lineno or 0,
        )
        try:
            writer.write(self.format(record))
            writer.write("\n")
        except Exception:
            if not self.ignore_errors:
                raise

    def flush(self) -> None:
        """Flush the output, if it is still enabled and supports flushing."""
        output = self._output
        flush = getattr(output, "flush", None)
        if not callable(flush):
            return
        try:
            flush()
        except Exception:
            if not self.ignore_errors:
                raise