from .codegen import CodeBuilder, Emitter, UnbalancedIndentError, DEFAULT_MAX_LINE_LENGTH
from .kinds import Kind
from .directive import (
    Directive, Marker, InlineMarker, LineDirective, InlineDirective,
    directive_class, registered_kinds,
)
from .block import (
    DocBlock, Option, DEFAULT_TAG, DEFAULT_OPENER, DEFAULT_CLOSER,
    with_tag, with_delimiters, with_directive, with_directives, with_directive_once,
)
from .sections import (
    PARAM_DIRECTIONS, Brief, Short, Details, Param, Tparam, Retval, Return, Returns,
    Exception_, Throw, Throws, Warning_, Attention, Note, Remark, Remarks, Bug, Todo,
    Deprecated, Since, Version, Date, Copyright, Author, Authors, See, Sa, Pre, Post,
    Invariant, Par, Parblock,
)
from . import markers, markup, structural, symbols
from .types import DirectiveSpec, BlockSpec, mk_directive, mk_block

__all__ = [
    # sink
    "CodeBuilder", "Emitter", "UnbalancedIndentError", "DEFAULT_MAX_LINE_LENGTH",
    # directives
    "Kind", "Directive", "Marker", "InlineMarker", "LineDirective", "InlineDirective",
    "directive_class", "registered_kinds",
    "PARAM_DIRECTIONS", "Brief", "Short", "Details", "Param", "Tparam", "Retval", "Return",
    "Returns", "Exception_", "Throw", "Throws", "Warning_", "Attention", "Note", "Remark",
    "Remarks", "Bug", "Todo", "Deprecated", "Since", "Version", "Date", "Copyright",
    "Author", "Authors", "See", "Sa", "Pre", "Post", "Invariant", "Par", "Parblock",
    "markers", "markup", "structural", "symbols",
    # block
    "DocBlock", "Option", "DEFAULT_TAG", "DEFAULT_OPENER", "DEFAULT_CLOSER",
    "with_tag", "with_delimiters", "with_directive", "with_directives", "with_directive_once",
    # builders
    "DirectiveSpec", "BlockSpec", "mk_directive", "mk_block",
]
