"""Discriminants for every directive the package can render.

A member's value is the command keyword exactly as it follows the tag in
output (``brief`` for ``@brief``, ``f$`` for ``\\f$``). Deduplication inside
a block compares these members, never field values.
"""

from __future__ import annotations

from enum import Enum


class Kind(Enum):
    # -- paragraph-level sections --
    ADDINDEX = "addindex"
    ARG = "arg"
    ATTENTION = "attention"
    AUTHOR = "author"
    AUTHORS = "authors"
    BRIEF = "brief"
    BUG = "bug"
    COPYRIGHT = "copyright"
    DATE = "date"
    DEPRECATED = "deprecated"
    DETAILS = "details"
    EXCEPTION = "exception"
    INVARIANT = "invariant"
    LI = "li"
    NOTE = "note"
    NOOP = "noop"
    PAR = "par"
    PARBLOCK = "parblock"
    PARAM = "param"
    POST = "post"
    PRE = "pre"
    RAISEWARNING = "raisewarning"
    REMARK = "remark"
    REMARKS = "remarks"
    RESULT = "result"
    RETURN = "return"
    RETURNS = "returns"
    RETVAL = "retval"
    SA = "sa"
    SEE = "see"
    SHORT = "short"
    SHOWDATE = "showdate"
    SINCE = "since"
    TEST = "test"
    THROW = "throw"
    THROWS = "throws"
    TODO = "todo"
    TPARAM = "tparam"
    VERSION = "version"
    WARNING = "warning"
    XREFITEM = "xrefitem"

    # -- entities, grouping, pages, conditionals --
    ADDTOGROUP = "addtogroup"
    ANCHOR = "anchor"
    CATEGORY = "category"
    CITE = "cite"
    CLASS = "class"
    CONCEPT = "concept"
    COND = "cond"
    COPYBRIEF = "copybrief"
    COPYDETAILS = "copydetails"
    COPYDOC = "copydoc"
    DEF = "def"
    DEFGROUP = "defgroup"
    DIR = "dir"
    ELSEIF = "elseif"
    ENUM = "enum"
    EXAMPLE = "example"
    EXTENDS = "extends"
    FILE = "file"
    FN = "fn"
    HEADERFILE = "headerfile"
    IDLEXCEPT = "idlexcept"
    IF = "if"
    IFNOT = "ifnot"
    IMPLEMENTS = "implements"
    INGROUP = "ingroup"
    INTERFACE = "interface"
    MAINPAGE = "mainpage"
    MEMBEROF = "memberof"
    NAME = "name"
    NAMESPACE = "namespace"
    OVERLOAD = "overload"
    PACKAGE = "package"
    PAGE = "page"
    PARAGRAPH = "paragraph"
    PROPERTY = "property"
    PROTOCOL = "protocol"
    REFITEM = "refitem"
    RELATED = "related"
    RELATEDALSO = "relatedalso"
    RELATES = "relates"
    RELATESALSO = "relatesalso"
    SECTION = "section"
    STRUCT = "struct"
    SUBPAGE = "subpage"
    SUBSECTION = "subsection"
    SUBSUBSECTION = "subsubsection"
    TYPEDEF = "typedef"
    UNION = "union"
    VAR = "var"
    WEAKGROUP = "weakgroup"

    # -- field-less markers --
    CALLERGRAPH = "callergraph"
    CALLGRAPH = "callgraph"
    ELSE = "else"
    ENDCODE = "endcode"
    ENDCOND = "endcond"
    ENDDOCBOOKONLY = "enddocbookonly"
    ENDDOT = "enddot"
    ENDHTMLONLY = "endhtmlonly"
    ENDIF = "endif"
    ENDINTERNAL = "endinternal"
    ENDLATEXONLY = "endlatexonly"
    ENDLINK = "endlink"
    ENDMANONLY = "endmanonly"
    ENDMSC = "endmsc"
    ENDPARBLOCK = "endparblock"
    ENDRTFONLY = "endrtfonly"
    ENDSECREFLIST = "endsecreflist"
    ENDUML = "enduml"
    ENDVERBATIM = "endverbatim"
    ENDXMLONLY = "endxmlonly"
    HIDECALLERGRAPH = "hidecallergraph"
    HIDECALLGRAPH = "hidecallgraph"
    HIDEINITIALIZER = "hideinitializer"
    HIDEREFBY = "hiderefby"
    HIDEREFS = "hiderefs"
    INTERNAL = "internal"
    NOSUBGROUPING = "nosubgrouping"
    PRIVATE = "private"
    PRIVATESECTION = "privatesection"
    PROTECTED = "protected"
    PROTECTEDSECTION = "protectedsection"
    PUBLIC = "public"
    PUBLICSECTION = "publicsection"
    PURE = "pure"
    SECREFLIST = "secreflist"
    SHOWINITIALIZER = "showinitializer"
    SHOWREFBY = "showrefby"
    SHOWREFS = "showrefs"
    STATIC = "static"
    TABLEOFCONTENTS = "tableofcontents"
    VHDLFLOW = "vhdlflow"

    # -- inline markup, verbatim blocks, includes --
    A = "a"
    B = "b"
    C = "c"
    E = "e"
    EM = "em"
    P = "p"
    EMOJI = "emoji"
    N = "n"
    FILEINFO = "fileinfo"
    LINEINFO = "lineinfo"
    REF = "ref"
    LINK = "link"
    MULTI_B = "<b>"
    MULTI_EM = "<em>"
    CODE = "code"
    VERBATIM = "verbatim"
    DOT = "dot"
    MSC = "msc"
    STARTUML = "startuml"
    DOCBOOKONLY = "docbookonly"
    HTMLONLY = "htmlonly"
    LATEXONLY = "latexonly"
    MANONLY = "manonly"
    RTFONLY = "rtfonly"
    XMLONLY = "xmlonly"
    IMAGE = "image"
    DOTFILE = "dotfile"
    MSCFILE = "mscfile"
    DIAFILE = "diafile"
    INCLUDE = "include"
    INCLUDELINENO = "includelineno"
    INCLUDEDOC = "includedoc"
    DONTINCLUDE = "dontinclude"
    VERBINCLUDE = "verbinclude"
    HTMLINCLUDE = "htmlinclude"
    LATEXINCLUDE = "latexinclude"
    MANINCLUDE = "maninclude"
    RTFINCLUDE = "rtfinclude"
    XMLINCLUDE = "xmlinclude"
    DOCBOOKINCLUDE = "docbookinclude"
    SNIPPET = "snippet"
    SNIPPETLINENO = "snippetlineno"
    SNIPPETDOC = "snippetdoc"
    LINE = "line"
    SKIP = "skip"
    SKIPLINE = "skipline"
    UNTIL = "until"

    # -- escapes and formula delimiters --
    DOLLAR = "$"
    AT = "@"
    BACKSLASH = "\\"
    AMPERSAND = "&"
    TILDE = "~"
    LESS_THAN = "<"
    EQUALS = "="
    GREATER_THAN = ">"
    HASH = "#"
    PERCENT = "%"
    QUOTE = '"'
    PERIOD = "."
    DOUBLE_COLON = "::"
    PIPE = "|"
    NDASH = "--"
    MDASH = "---"
    F_DOLLAR = "f$"
    F_PAREN_OPEN = "f("
    F_PAREN_CLOSE = "f)"
    F_BRACKET_OPEN = "f["
    F_BRACKET_CLOSE = "f]"
    F_BRACE_OPEN = "f{"
    F_BRACE_CLOSE = "f}"

    @property
    def keyword(self) -> str:
        return self.value
