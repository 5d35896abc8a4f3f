"""Escaped characters and formula delimiters, all written inline."""

from __future__ import annotations

from dataclasses import dataclass

from .codegen import Emitter
from .directive import InlineMarker
from .kinds import Kind


@dataclass(frozen=True)
class Dollar(InlineMarker):
    kind = Kind.DOLLAR


@dataclass(frozen=True)
class At(InlineMarker):
    kind = Kind.AT


@dataclass(frozen=True)
class Backslash(InlineMarker):
    kind = Kind.BACKSLASH


@dataclass(frozen=True)
class Ampersand(InlineMarker):
    kind = Kind.AMPERSAND


@dataclass(frozen=True)
class Tilde(InlineMarker):
    """``~`` alone, or ``~<LanguageId>`` to switch output language."""

    kind = Kind.TILDE
    language_id: str = ""

    def render(self, tag: str, out: Emitter) -> None:
        out.write("%s~%s", tag, self.language_id)


@dataclass(frozen=True)
class LessThan(InlineMarker):
    kind = Kind.LESS_THAN


@dataclass(frozen=True)
class Equals(InlineMarker):
    kind = Kind.EQUALS


@dataclass(frozen=True)
class GreaterThan(InlineMarker):
    kind = Kind.GREATER_THAN


@dataclass(frozen=True)
class Hash(InlineMarker):
    kind = Kind.HASH


@dataclass(frozen=True)
class Percent(InlineMarker):
    kind = Kind.PERCENT


@dataclass(frozen=True)
class Quote(InlineMarker):
    kind = Kind.QUOTE


@dataclass(frozen=True)
class Period(InlineMarker):
    kind = Kind.PERIOD


@dataclass(frozen=True)
class DoubleColon(InlineMarker):
    kind = Kind.DOUBLE_COLON


@dataclass(frozen=True)
class Pipe(InlineMarker):
    kind = Kind.PIPE


@dataclass(frozen=True)
class NDash(InlineMarker):
    kind = Kind.NDASH


@dataclass(frozen=True)
class MDash(InlineMarker):
    kind = Kind.MDASH


Lt = LessThan
Gt = GreaterThan


# formulas
@dataclass(frozen=True)
class FDollar(InlineMarker):
    kind = Kind.F_DOLLAR


@dataclass(frozen=True)
class FParenOpen(InlineMarker):
    kind = Kind.F_PAREN_OPEN


@dataclass(frozen=True)
class FParenClose(InlineMarker):
    kind = Kind.F_PAREN_CLOSE


@dataclass(frozen=True)
class FBracketOpen(InlineMarker):
    kind = Kind.F_BRACKET_OPEN


@dataclass(frozen=True)
class FBracketClose(InlineMarker):
    kind = Kind.F_BRACKET_CLOSE


@dataclass(frozen=True)
class FBraceOpen(InlineMarker):
    """``f{environment}{``; the environment name is mandatory."""

    kind = Kind.F_BRACE_OPEN
    environment: str

    def render(self, tag: str, out: Emitter) -> None:
        out.write("%sf{%s}{", tag, self.environment)


@dataclass(frozen=True)
class FBraceClose(InlineMarker):
    kind = Kind.F_BRACE_CLOSE
