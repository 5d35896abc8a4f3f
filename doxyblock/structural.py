"""Entity, grouping, page and conditional commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .codegen import Emitter
from .directive import LineDirective, freeze
from .formatting import optional, quoted, word
from .kinds import Kind


@dataclass(frozen=True)
class _Named(LineDirective):
    """Single ``<name>`` argument, cut to one word."""

    name: str

    def arguments(self) -> str:
        return word(self.name)


@dataclass(frozen=True)
class _Titled(LineDirective):
    """``<name> [title]``: pages, sections, groups."""

    name: str
    title: str = ""

    def arguments(self) -> str:
        return word(self.name) + optional(self.title)


@dataclass(frozen=True)
class _Compound(LineDirective):
    """``<name> [<header-file>] [<header-name>]`` for class-like entities."""

    name: str
    header_file: str = ""
    header_name: str = ""

    def arguments(self) -> str:
        return word(self.name) + optional(word(self.header_file)) + optional(word(self.header_name))


@dataclass(frozen=True)
class _Declaration(LineDirective):
    declaration: str

    def arguments(self) -> str:
        return self.declaration


@dataclass(frozen=True)
class _Conditional(LineDirective):
    section_label: str = ""

    def arguments(self) -> str:
        return self.section_label


# -----------------------------
# Compounds and members
# -----------------------------

@dataclass(frozen=True)
class Class(_Compound):
    kind = Kind.CLASS


@dataclass(frozen=True)
class Struct(_Compound):
    kind = Kind.STRUCT


@dataclass(frozen=True)
class Union(_Compound):
    kind = Kind.UNION


@dataclass(frozen=True)
class Interface(_Compound):
    kind = Kind.INTERFACE


@dataclass(frozen=True)
class Protocol(_Compound):
    kind = Kind.PROTOCOL


@dataclass(frozen=True)
class Category(_Compound):
    kind = Kind.CATEGORY


@dataclass(frozen=True)
class Enum(_Named):
    kind = Kind.ENUM


@dataclass(frozen=True)
class Namespace(_Named):
    kind = Kind.NAMESPACE


@dataclass(frozen=True)
class Package(_Named):
    kind = Kind.PACKAGE


@dataclass(frozen=True)
class Concept(_Named):
    kind = Kind.CONCEPT


@dataclass(frozen=True)
class Def(_Named):
    kind = Kind.DEF


@dataclass(frozen=True)
class Idlexcept(_Named):
    kind = Kind.IDLEXCEPT


@dataclass(frozen=True)
class Typedef(_Declaration):
    kind = Kind.TYPEDEF


@dataclass(frozen=True)
class Fn(_Declaration):
    kind = Kind.FN


@dataclass(frozen=True)
class Property(_Declaration):
    kind = Kind.PROPERTY


@dataclass(frozen=True)
class Overload(LineDirective):
    kind = Kind.OVERLOAD
    declaration: str = ""

    def arguments(self) -> str:
        return self.declaration


@dataclass(frozen=True)
class Var(LineDirective):
    """``var <declaration>``, with an optional description on the next line."""

    kind = Kind.VAR
    declaration: str
    description: str = ""

    def render(self, tag: str, out: Emitter) -> None:
        out.writeln("%svar %s", tag, self.declaration)
        if self.description:
            out.writeln("%s", self.description)


@dataclass(frozen=True)
class HeaderFile(LineDirective):
    kind = Kind.HEADERFILE
    file: str
    name: str = ""

    def arguments(self) -> str:
        return word(self.file) + optional(word(self.name))


# -----------------------------
# Relations and copies
# -----------------------------

@dataclass(frozen=True)
class Memberof(_Named):
    kind = Kind.MEMBEROF


@dataclass(frozen=True)
class Extends(_Named):
    kind = Kind.EXTENDS


@dataclass(frozen=True)
class Implements(_Named):
    kind = Kind.IMPLEMENTS


@dataclass(frozen=True)
class Related(_Named):
    kind = Kind.RELATED


@dataclass(frozen=True)
class Relates(_Named):
    kind = Kind.RELATES


@dataclass(frozen=True)
class Relatedalso(_Named):
    kind = Kind.RELATEDALSO


@dataclass(frozen=True)
class Relatesalso(_Named):
    kind = Kind.RELATESALSO


@dataclass(frozen=True)
class Copybrief(_Named):
    kind = Kind.COPYBRIEF


@dataclass(frozen=True)
class Copydetails(_Named):
    kind = Kind.COPYDETAILS


@dataclass(frozen=True)
class Copydoc(_Named):
    kind = Kind.COPYDOC


@dataclass(frozen=True)
class Refitem(_Named):
    kind = Kind.REFITEM


@dataclass(frozen=True)
class Anchor(_Named):
    kind = Kind.ANCHOR


@dataclass(frozen=True)
class Cite(LineDirective):
    kind = Kind.CITE
    label: str

    def arguments(self) -> str:
        return word(self.label)


# -----------------------------
# Files, pages and groups
# -----------------------------

@dataclass(frozen=True)
class File(LineDirective):
    kind = Kind.FILE
    name: str = ""

    def arguments(self) -> str:
        return word(self.name)


@dataclass(frozen=True)
class Dir(LineDirective):
    kind = Kind.DIR
    path_fragment: str = ""

    def arguments(self) -> str:
        return word(self.path_fragment)


@dataclass(frozen=True)
class Example(LineDirective):
    kind = Kind.EXAMPLE
    file: str

    def arguments(self) -> str:
        return word(self.file)


@dataclass(frozen=True)
class Mainpage(LineDirective):
    kind = Kind.MAINPAGE
    title: str = ""

    def arguments(self) -> str:
        return self.title


@dataclass(frozen=True)
class Name(LineDirective):
    kind = Kind.NAME
    header: str = ""

    def arguments(self) -> str:
        return self.header


@dataclass(frozen=True)
class Page(_Titled):
    kind = Kind.PAGE


@dataclass(frozen=True)
class Subpage(LineDirective):
    kind = Kind.SUBPAGE
    name: str
    text: str = ""

    def arguments(self) -> str:
        return word(self.name) + quoted(self.text)


@dataclass(frozen=True)
class Section(_Titled):
    kind = Kind.SECTION


@dataclass(frozen=True)
class Subsection(_Titled):
    kind = Kind.SUBSECTION


@dataclass(frozen=True)
class Subsubsection(_Titled):
    kind = Kind.SUBSUBSECTION


@dataclass(frozen=True)
class Paragraph(_Titled):
    kind = Kind.PARAGRAPH


@dataclass(frozen=True)
class Defgroup(_Titled):
    kind = Kind.DEFGROUP


@dataclass(frozen=True)
class Addtogroup(_Titled):
    kind = Kind.ADDTOGROUP


@dataclass(frozen=True)
class Weakgroup(_Titled):
    kind = Kind.WEAKGROUP


@dataclass(frozen=True)
class Ingroup(LineDirective):
    kind = Kind.INGROUP
    groups: Sequence[str] = ()

    def __post_init__(self) -> None:
        freeze(self, "groups")

    def arguments(self) -> str:
        return " ".join(word(g) for g in self.groups)


# -----------------------------
# Conditional sections
# -----------------------------

@dataclass(frozen=True)
class Cond(_Conditional):
    kind = Kind.COND


@dataclass(frozen=True)
class If(_Conditional):
    kind = Kind.IF


@dataclass(frozen=True)
class Ifnot(_Conditional):
    kind = Kind.IFNOT


@dataclass(frozen=True)
class Elseif(_Conditional):
    kind = Kind.ELSEIF
