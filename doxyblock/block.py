"""Comment block aggregation.

A :class:`DocBlock` is an ordered run of directives sharing one tag. It is
assembled once from options, applied left to right, and then rendered; the
directives decide their own line layout while the block owns the delimiters
and the single level of body indentation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable

from .codegen import CodeBuilder, Emitter
from .directive import Directive, freeze
from .kinds import Kind

logger = logging.getLogger(__name__)

DEFAULT_TAG: str = "@"
DEFAULT_OPENER: str = "/**"
DEFAULT_CLOSER: str = "*/"


@dataclass(frozen=True)
class DocBlock:
    tag: str = DEFAULT_TAG
    directives: tuple[Directive, ...] = ()
    opener: str = DEFAULT_OPENER
    closer: str = DEFAULT_CLOSER

    def __post_init__(self) -> None:
        freeze(self, "directives")

    @classmethod
    def new(cls, *options: Option) -> DocBlock:
        block = cls()
        for opt in options:
            block = opt(block)
        return block

    def has_kind(self, kind: Kind) -> bool:
        return any(d.kind is kind for d in self.directives)

    # ----------- rendering ------------

    def render(self, out: Emitter) -> None:
        logger.debug("Rendering block of %d directive(s) with tag %r", len(self.directives), self.tag)
        out.writeln("%s", self.opener)
        out.indent(1)
        for directive in self.directives:
            directive.render(self.tag, out)
        out.indent(-1)
        out.writeln("%s", self.closer)

    def to_text(self, **sink_options: Any) -> str:
        cb = CodeBuilder(**sink_options)
        self.render(cb)
        return cb.getvalue()


Option = Callable[[DocBlock], DocBlock]


def with_tag(tag: str) -> Option:
    def apply(block: DocBlock) -> DocBlock:
        return replace(block, tag=tag)
    return apply


def with_delimiters(opener: str, closer: str) -> Option:
    def apply(block: DocBlock) -> DocBlock:
        return replace(block, opener=opener, closer=closer)
    return apply


def with_directive(directive: Directive) -> Option:
    def apply(block: DocBlock) -> DocBlock:
        return replace(block, directives=block.directives + (directive,))
    return apply


def with_directives(*directives: Directive) -> Option:
    def apply(block: DocBlock) -> DocBlock:
        return replace(block, directives=block.directives + directives)
    return apply


def with_directive_once(directive: Directive) -> Option:
    """Append ``directive`` unless the block already holds one of its kind (first wins)."""

    def apply(block: DocBlock) -> DocBlock:
        if block.has_kind(directive.kind):
            logger.debug("Skipping duplicate %s directive", directive.kind.name)
            return block
        return replace(block, directives=block.directives + (directive,))
    return apply
