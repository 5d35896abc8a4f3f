from __future__ import annotations

from typing import Any, NotRequired, TypedDict

from .block import DocBlock, with_directive_once, with_directives, with_tag
from .directive import Directive, directive_class


class DirectiveSpec(TypedDict, total=False):
    """``kind`` is the command keyword; every other key is a field of that directive."""

    kind: str


class BlockSpec(TypedDict):
    tag: NotRequired[str]
    directives: NotRequired[list[DirectiveSpec]]
    once: NotRequired[list[DirectiveSpec]]


def mk_directive(spec: DirectiveSpec | dict[str, Any]) -> Directive:
    fields = dict(spec)
    keyword = fields.pop("kind", None)
    if not keyword:
        raise ValueError(f"Directive spec has no kind: {spec!r}")
    try:
        cls = directive_class(keyword)
    except KeyError:
        raise ValueError(f"Unknown directive kind '{keyword}'") from None
    return cls(**fields)


def mk_block(spec: BlockSpec) -> DocBlock:
    options = []
    if "tag" in spec:
        options.append(with_tag(spec["tag"]))
    options.append(with_directives(*(mk_directive(d) for d in spec.get("directives", []))))
    for d in spec.get("once", []):
        options.append(with_directive_once(mk_directive(d)))
    return DocBlock.new(*options)
