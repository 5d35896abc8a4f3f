"""Paragraph-level commands: the body of a typical function comment.

Most of these take one free-text argument and render as a single line,
``@warning <text>``. The few with structure (``param``, ``retval``,
``xrefitem``, the author lists and the paragraph blocks) spell out their own
argument layout.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from .codegen import Emitter
from .directive import LineDirective, freeze
from .formatting import optional, word
from .kinds import Kind
from .markers import Endparblock

logger = logging.getLogger(__name__)

# Directions Doxygen accepts inside ``param[...]``.
PARAM_DIRECTIONS: tuple[str, ...] = ("in", "out", "in,out")


@dataclass(frozen=True)
class _Paragraph(LineDirective):
    text: str

    def arguments(self) -> str:
        return self.text


@dataclass(frozen=True)
class Addindex(_Paragraph):
    kind = Kind.ADDINDEX


@dataclass(frozen=True)
class Arg(_Paragraph):
    kind = Kind.ARG


@dataclass(frozen=True)
class Attention(_Paragraph):
    kind = Kind.ATTENTION


@dataclass(frozen=True)
class Brief(_Paragraph):
    kind = Kind.BRIEF


@dataclass(frozen=True)
class Bug(_Paragraph):
    kind = Kind.BUG


@dataclass(frozen=True)
class Copyright(_Paragraph):
    kind = Kind.COPYRIGHT


@dataclass(frozen=True)
class Date(_Paragraph):
    kind = Kind.DATE


@dataclass(frozen=True)
class Deprecated(_Paragraph):
    kind = Kind.DEPRECATED


@dataclass(frozen=True)
class Details(_Paragraph):
    kind = Kind.DETAILS


@dataclass(frozen=True)
class Invariant(_Paragraph):
    kind = Kind.INVARIANT


@dataclass(frozen=True)
class Li(_Paragraph):
    kind = Kind.LI


@dataclass(frozen=True)
class Note(_Paragraph):
    kind = Kind.NOTE


@dataclass(frozen=True)
class Noop(_Paragraph):
    kind = Kind.NOOP


@dataclass(frozen=True)
class Post(_Paragraph):
    kind = Kind.POST


@dataclass(frozen=True)
class Pre(_Paragraph):
    kind = Kind.PRE


@dataclass(frozen=True)
class Raisewarning(_Paragraph):
    kind = Kind.RAISEWARNING


@dataclass(frozen=True)
class Remark(_Paragraph):
    kind = Kind.REMARK


@dataclass(frozen=True)
class Remarks(_Paragraph):
    kind = Kind.REMARKS


@dataclass(frozen=True)
class Result(_Paragraph):
    kind = Kind.RESULT


@dataclass(frozen=True)
class Return(_Paragraph):
    kind = Kind.RETURN


@dataclass(frozen=True)
class Returns(_Paragraph):
    kind = Kind.RETURNS


@dataclass(frozen=True)
class Sa(_Paragraph):
    kind = Kind.SA


@dataclass(frozen=True)
class See(_Paragraph):
    kind = Kind.SEE


@dataclass(frozen=True)
class Short(_Paragraph):
    kind = Kind.SHORT


@dataclass(frozen=True)
class Since(_Paragraph):
    kind = Kind.SINCE


@dataclass(frozen=True)
class Test(_Paragraph):
    kind = Kind.TEST

    __test__ = False  # keep pytest from collecting it


@dataclass(frozen=True)
class Todo(_Paragraph):
    kind = Kind.TODO


@dataclass(frozen=True)
class Version(_Paragraph):
    kind = Kind.VERSION


@dataclass(frozen=True)
class Warning_(_Paragraph):
    kind = Kind.WARNING


# -----------------------------
# Structured arguments
# -----------------------------

@dataclass(frozen=True)
class Param(LineDirective):
    """``param[dir] name description``; unknown directions drop the brackets."""

    kind = Kind.PARAM
    name: str
    description: str = ""
    direction: str = ""

    def render(self, tag: str, out: Emitter) -> None:
        out.write("%sparam", tag)
        if self.direction in PARAM_DIRECTIONS:
            out.write("[%s]", self.direction)
        out.writeln("%s%s", optional(self.name), optional(self.description))


@dataclass(frozen=True)
class Tparam(LineDirective):
    kind = Kind.TPARAM
    name: str
    description: str = ""

    def arguments(self) -> str:
        return self.name + optional(self.description)


@dataclass(frozen=True)
class Retval(LineDirective):
    kind = Kind.RETVAL
    value: str
    description: str = ""

    def arguments(self) -> str:
        return word(self.value) + optional(self.description)


@dataclass(frozen=True)
class _Raises(LineDirective):
    exception_object: str
    description: str = ""

    def arguments(self) -> str:
        return word(self.exception_object) + optional(self.description)


@dataclass(frozen=True)
class Exception_(_Raises):
    kind = Kind.EXCEPTION


@dataclass(frozen=True)
class Throw(_Raises):
    kind = Kind.THROW


@dataclass(frozen=True)
class Throws(_Raises):
    kind = Kind.THROWS


@dataclass(frozen=True)
class Showdate(LineDirective):
    kind = Kind.SHOWDATE
    date_format: str
    date_time: str = ""

    def arguments(self) -> str:
        return f'"{self.date_format}"{optional(self.date_time)}'


@dataclass(frozen=True)
class Xrefitem(LineDirective):
    kind = Kind.XREFITEM
    key: str
    heading: str
    list_title: str
    text: str = ""

    def arguments(self) -> str:
        return f'{word(self.key)} "{self.heading}" "{self.list_title}"{optional(self.text)}'


# -----------------------------
# Multi-line
# -----------------------------

@dataclass(frozen=True)
class _AuthorList(LineDirective):
    """One tagged line per author, in the given order."""

    names: Sequence[str] = ()

    def __post_init__(self) -> None:
        freeze(self, "names")

    def render(self, tag: str, out: Emitter) -> None:
        for name in self.names:
            out.writeln("%s%s %s", tag, self.kind.value, name)


@dataclass(frozen=True)
class Author(_AuthorList):
    kind = Kind.AUTHOR


@dataclass(frozen=True)
class Authors(_AuthorList):
    kind = Kind.AUTHORS


@dataclass(frozen=True)
class Par(LineDirective):
    """Titled paragraph: ``par Title`` followed by the paragraph text."""

    kind = Kind.PAR
    paragraph: str
    title: str = ""

    def render(self, tag: str, out: Emitter) -> None:
        out.writeln("%spar%s", tag, optional(self.title))
        out.writeln("%s", self.paragraph)


@dataclass(frozen=True)
class Parblock(LineDirective):
    """Several paragraphs kept together as one argument.

    The paragraphs are indented one level deeper than the surrounding block
    and separated by blank lines. Net indentation change is zero, also when
    writing a paragraph raises.
    """

    kind = Kind.PARBLOCK
    paragraphs: Sequence[str] = ()

    def __post_init__(self) -> None:
        freeze(self, "paragraphs")

    def render(self, tag: str, out: Emitter) -> None:
        out.writeln("%sparblock", tag)
        out.indent(1)
        try:
            for i, paragraph in enumerate(self.paragraphs):
                if i:
                    out.newline()
                out.writeln("%s", paragraph)
        finally:
            out.indent(-1)
        Endparblock().render(tag, out)
