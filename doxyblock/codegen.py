from __future__ import annotations

import logging
import textwrap
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

DEFAULT_MAX_LINE_LENGTH: int = 80


class UnbalancedIndentError(RuntimeError):
    """Raised when indentation would drop below zero.

    This is a bug in whatever composed the output (an ``indent(-1)`` without
    its matching ``indent(1)``), never a data problem, so callers should let
    it propagate.
    """


@runtime_checkable
class Emitter(Protocol):
    """What a directive needs from the sink it renders into."""

    def indent(self, delta: int) -> None: ...

    def write(self, fmt: str, *args: Any) -> None: ...

    def writeln(self, fmt: str = "", *args: Any) -> None: ...

    def newline(self) -> None: ...


@dataclass
class CodeBuilder:
    """
    Indentation-aware text accumulator.
    Callers never manage leading whitespace: the builder indents each line
    once, lazily, right before the first text written on it.
    """
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH
    indent_unit: str = "\t"
    comment_marker: str = "//"
    _parts: list[str] = field(default_factory=list, repr=False)
    _level: int = 0
    _start: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.max_line_length, int) or self.max_line_length <= 0:
            raise ValueError(
                f"max_line_length must be a positive integer, got {self.max_line_length!r}"
            )

    @property
    def level(self) -> int:
        return self._level

    def indent(self, delta: int) -> None:
        target = self._level + delta
        if target < 0:
            logger.error("Indentation would drop to %d (level %d, delta %d)", target, self._level, delta)
            raise UnbalancedIndentError(
                f"unbalanced indentation: level {self._level} cannot change by {delta}"
            )
        self._level = target

    @contextmanager
    def block(self) -> Iterator[None]:
        self.indent(1)
        try:
            yield
        finally:
            self.indent(-1)

    def write(self, fmt: str, *args: Any) -> None:
        text = fmt % args if args else fmt
        for i, chunk in enumerate(text.split("\n")):
            if i:
                self.newline()
            if chunk:
                self._check_indent()
                self._parts.append(chunk)

    def writeln(self, fmt: str = "", *args: Any) -> None:
        self.write(fmt, *args)
        self.newline()

    def writelines(self, raw: str) -> None:
        for ln in raw.splitlines():
            self.writeln(ln)

    def newline(self) -> None:
        self._parts.append("\n")
        self._start = True

    def comment(self, text: str) -> None:
        if not text:
            return
        limit = max(1, self.max_line_length - self._level)
        for paragraph in text.split("\n"):
            lines = textwrap.wrap(
                paragraph,
                width=limit,
                break_long_words=False,
                break_on_hyphens=False,
            )
            if not lines:
                self.writeln(self.comment_marker)
                continue
            for ln in lines:
                self.writeln("%s %s", self.comment_marker, ln)

    def _check_indent(self) -> None:
        if self._start:
            if self._level:
                self._parts.append(self.indent_unit * self._level)
            self._start = False

    def getvalue(self) -> str:
        return "".join(self._parts)

    def to_bytes(self) -> bytes:
        return self.getvalue().encode("utf-8")

    def __str__(self) -> str:
        return self.getvalue()
