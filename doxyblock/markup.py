"""Inline markup, verbatim sub-blocks, diagrams and include commands.

Inline commands (font changes, ``ref``, ``link``) use ``write`` and leave the
line open for surrounding text. Verbatim blocks copy their body line by line
between an opening command and its matching ``end`` marker, so the sink
indents every body line like the rest of the comment.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .codegen import Emitter
from .directive import InlineDirective, InlineMarker, LineDirective, Marker
from .formatting import optional, optionalf, quoted, sized, word
from .kinds import Kind
from .markers import (
    Endcode, Enddocbookonly, Enddot, Endhtmlonly, Endlatexonly, Endmanonly,
    Endmsc, Endrtfonly, Enduml, Endverbatim, Endxmlonly,
)


# -----------------------------
# Inline
# -----------------------------

@dataclass(frozen=True)
class _InlineWord(InlineDirective):
    text: str

    def arguments(self) -> str:
        return word(self.text)


@dataclass(frozen=True)
class A(_InlineWord):
    kind = Kind.A


@dataclass(frozen=True)
class B(_InlineWord):
    kind = Kind.B


@dataclass(frozen=True)
class C(_InlineWord):
    kind = Kind.C


@dataclass(frozen=True)
class E(_InlineWord):
    kind = Kind.E


@dataclass(frozen=True)
class Em(_InlineWord):
    kind = Kind.EM


@dataclass(frozen=True)
class P(_InlineWord):
    kind = Kind.P


@dataclass(frozen=True)
class Emoji(_InlineWord):
    kind = Kind.EMOJI


@dataclass(frozen=True)
class MultiB(InlineDirective):
    """Bold span over several words; HTML form, so the tag is unused."""

    kind = Kind.MULTI_B
    text: str

    def render(self, tag: str, out: Emitter) -> None:
        out.write("<b>%s</b>", self.text)


@dataclass(frozen=True)
class MultiEm(InlineDirective):
    kind = Kind.MULTI_EM
    text: str

    def render(self, tag: str, out: Emitter) -> None:
        out.write("<em>%s</em>", self.text)


@dataclass(frozen=True)
class N(InlineMarker):
    kind = Kind.N


@dataclass(frozen=True)
class Fileinfo(InlineMarker):
    kind = Kind.FILEINFO


@dataclass(frozen=True)
class Lineinfo(InlineMarker):
    kind = Kind.LINEINFO


@dataclass(frozen=True)
class Ref(InlineDirective):
    kind = Kind.REF
    name: str
    text: str = ""

    def arguments(self) -> str:
        return word(self.name) + quoted(self.text)


@dataclass(frozen=True)
class Link(InlineDirective):
    """``link <object> <text> endlink`` in one inline run."""

    kind = Kind.LINK
    link_object: str
    text: str = ""

    def render(self, tag: str, out: Emitter) -> None:
        out.write(
            "%slink %s%s %s%s",
            tag, word(self.link_object), optional(self.text), tag, Kind.ENDLINK.value,
        )


# -----------------------------
# Verbatim sub-blocks
# -----------------------------

@dataclass(frozen=True)
class _VerbatimBlock(LineDirective):
    """Opening command, the body copied line by line, closing marker."""

    end: ClassVar[type[Marker]]
    body: str

    def header(self) -> str:
        return ""

    def render(self, tag: str, out: Emitter) -> None:
        out.writeln("%s%s%s", tag, self.kind.value, self.header())
        for ln in self.body.splitlines():
            out.writeln("%s", ln)
        self.end().render(tag, out)


@dataclass(frozen=True)
class Code(_VerbatimBlock):
    """``code{.lang}`` ... ``endcode``; ``language`` is a file extension such as ``.py``."""

    kind = Kind.CODE
    end = Endcode
    language: str = ""

    def header(self) -> str:
        return optionalf("{%s}", word(self.language))


@dataclass(frozen=True)
class Verbatim(_VerbatimBlock):
    kind = Kind.VERBATIM
    end = Endverbatim


@dataclass(frozen=True)
class _Diagram(_VerbatimBlock):
    caption: str = ""
    size_indication: str = ""
    size: str = ""

    def header(self) -> str:
        return quoted(self.caption) + sized(self.size_indication, self.size)


@dataclass(frozen=True)
class Dot(_Diagram):
    kind = Kind.DOT
    end = Enddot


@dataclass(frozen=True)
class Msc(_Diagram):
    kind = Kind.MSC
    end = Endmsc


@dataclass(frozen=True)
class Startuml(_Diagram):
    kind = Kind.STARTUML
    end = Enduml
    file: str = ""

    def header(self) -> str:
        return optionalf("{%s}", word(self.file)) + super().header()


@dataclass(frozen=True)
class Docbookonly(_VerbatimBlock):
    kind = Kind.DOCBOOKONLY
    end = Enddocbookonly


@dataclass(frozen=True)
class Htmlonly(_VerbatimBlock):
    kind = Kind.HTMLONLY
    end = Endhtmlonly


@dataclass(frozen=True)
class Latexonly(_VerbatimBlock):
    kind = Kind.LATEXONLY
    end = Endlatexonly


@dataclass(frozen=True)
class Manonly(_VerbatimBlock):
    kind = Kind.MANONLY
    end = Endmanonly


@dataclass(frozen=True)
class Rtfonly(_VerbatimBlock):
    kind = Kind.RTFONLY
    end = Endrtfonly


@dataclass(frozen=True)
class Xmlonly(_VerbatimBlock):
    kind = Kind.XMLONLY
    end = Endxmlonly


# -----------------------------
# Images and diagram files
# -----------------------------

@dataclass(frozen=True)
class Image(LineDirective):
    """``image <format> <file> ["caption"] [<sizeindication>=<size>]``."""

    kind = Kind.IMAGE
    output_format: str
    file: str
    caption: str = ""
    size_indication: str = ""
    size: str = ""

    def arguments(self) -> str:
        return (
            f"{word(self.output_format)} {word(self.file)}"
            f"{quoted(self.caption)}{sized(self.size_indication, self.size)}"
        )


@dataclass(frozen=True)
class _DiagramFile(LineDirective):
    file: str
    caption: str = ""
    size_indication: str = ""
    size: str = ""

    def arguments(self) -> str:
        return word(self.file) + quoted(self.caption) + sized(self.size_indication, self.size)


@dataclass(frozen=True)
class Dotfile(_DiagramFile):
    kind = Kind.DOTFILE


@dataclass(frozen=True)
class Mscfile(_DiagramFile):
    kind = Kind.MSCFILE


@dataclass(frozen=True)
class Diafile(_DiagramFile):
    kind = Kind.DIAFILE


# -----------------------------
# Includes and example walking
# -----------------------------

@dataclass(frozen=True)
class _Include(LineDirective):
    file: str

    def arguments(self) -> str:
        return word(self.file)


@dataclass(frozen=True)
class Include(_Include):
    kind = Kind.INCLUDE


@dataclass(frozen=True)
class Includelineno(_Include):
    kind = Kind.INCLUDELINENO


@dataclass(frozen=True)
class Includedoc(_Include):
    kind = Kind.INCLUDEDOC


@dataclass(frozen=True)
class Dontinclude(_Include):
    kind = Kind.DONTINCLUDE


@dataclass(frozen=True)
class Verbinclude(_Include):
    kind = Kind.VERBINCLUDE


@dataclass(frozen=True)
class Htmlinclude(_Include):
    kind = Kind.HTMLINCLUDE


@dataclass(frozen=True)
class Latexinclude(_Include):
    kind = Kind.LATEXINCLUDE


@dataclass(frozen=True)
class Maninclude(_Include):
    kind = Kind.MANINCLUDE


@dataclass(frozen=True)
class Rtfinclude(_Include):
    kind = Kind.RTFINCLUDE


@dataclass(frozen=True)
class Xmlinclude(_Include):
    kind = Kind.XMLINCLUDE


@dataclass(frozen=True)
class Docbookinclude(_Include):
    kind = Kind.DOCBOOKINCLUDE


@dataclass(frozen=True)
class _Snippet(LineDirective):
    file: str
    block_id: str

    def arguments(self) -> str:
        return f"{word(self.file)} {self.block_id}"


@dataclass(frozen=True)
class Snippet(_Snippet):
    kind = Kind.SNIPPET


@dataclass(frozen=True)
class Snippetlineno(_Snippet):
    kind = Kind.SNIPPETLINENO


@dataclass(frozen=True)
class Snippetdoc(_Snippet):
    kind = Kind.SNIPPETDOC


@dataclass(frozen=True)
class _Pattern(LineDirective):
    pattern: str

    def arguments(self) -> str:
        return self.pattern


@dataclass(frozen=True)
class Line(_Pattern):
    kind = Kind.LINE


@dataclass(frozen=True)
class Skip(_Pattern):
    kind = Kind.SKIP


@dataclass(frozen=True)
class Skipline(_Pattern):
    kind = Kind.SKIPLINE


@dataclass(frozen=True)
class Until(_Pattern):
    kind = Kind.UNTIL
