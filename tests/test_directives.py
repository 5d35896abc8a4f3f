from dataclasses import FrozenInstanceError, dataclass

import pytest

from doxyblock import Kind, directive_class, registered_kinds
from doxyblock.codegen import CodeBuilder
from doxyblock.directive import Directive, InlineMarker, Marker
from doxyblock.markers import Callgraph, Endcode, Vhdlflow
from doxyblock.markup import (
    B, Code, Dotfile, Em, Emoji, Image, Link, MultiB, MultiEm, Ref, Snippet, Startuml,
)
from doxyblock.sections import (
    Author, Authors, Brief, Par, Param, Parblock, Retval, Showdate, Throws, Todo, Tparam, Xrefitem,
)
from doxyblock.structural import (
    Class, Cond, File, HeaderFile, If, Ingroup, Overload, Section, Subpage, Var,
)
from doxyblock.symbols import (
    Backslash, DoubleColon, FBraceOpen, FDollar, GreaterThan, Gt, LessThan, Lt, Percent, Tilde,
)


def render(directive: Directive, tag: str = "@") -> str:
    cb = CodeBuilder()
    directive.render(tag, cb)
    return cb.getvalue()


@pytest.mark.parametrize(
    "directive, expected",
    [
        (Brief("Does X."), "@brief Does X.\n"),
        (Param("x", "the input", direction="in,out"), "@param[in,out] x the input\n"),
        (Param("x", "the input", direction="out"), "@param[out] x the input\n"),
        (Param("x", "the input"), "@param x the input\n"),
        (Param("x"), "@param x\n"),
        (Param(""), "@param\n"),
        (Vhdlflow(), "@vhdlflow\n"),
        (Tparam("T", "element type"), "@tparam T element type\n"),
        (Retval("0", "on success"), "@retval 0 on success\n"),
        (Throws("std::bad_alloc", "when out of memory"), "@throws std::bad_alloc when out of memory\n"),
        (Todo("later"), "@todo later\n"),
        (Xrefitem("todo", "Todo", "Todo List", "fix"), '@xrefitem todo "Todo" "Todo List" fix\n'),
        (Showdate("%A %d-%m-%Y", "2015-3-14"), '@showdate "%A %d-%m-%Y" 2015-3-14\n'),
        (Par("body", title="Title"), "@par Title\nbody\n"),
        (Par("body"), "@par\nbody\n"),
        (Class("Foo"), "@class Foo\n"),
        (Class("Foo", "foo.h", "inc/foo.h"), "@class Foo foo.h inc/foo.h\n"),
        (HeaderFile("foo.h", "<foo.h>"), "@headerfile foo.h <foo.h>\n"),
        (Var("int count", "number of items"), "@var int count\nnumber of items\n"),
        (Var("int count"), "@var int count\n"),
        (Ingroup(["core", "io"]), "@ingroup core io\n"),
        (Cond(), "@cond\n"),
        (If("DEBUG"), "@if DEBUG\n"),
        (File(), "@file\n"),
        (File("main.c"), "@file main.c\n"),
        (Overload(), "@overload\n"),
        (Section("sec1", "First section"), "@section sec1 First section\n"),
        (Subpage("intro", "Introduction"), '@subpage intro "Introduction"\n'),
        (Image("html", "logo.png", "The logo", "width", "10cm"), '@image html logo.png "The logo" width=10cm\n'),
        (Image("latex", "logo.eps", size_indication="width"), "@image latex logo.eps\n"),
        (Dotfile("graph.dot"), "@dotfile graph.dot\n"),
        (Snippet("example.cpp", "Adding a resource"), "@snippet example.cpp Adding a resource\n"),
        (Code("x = 1", language=".py"), "@code{.py}\nx = 1\n@endcode\n"),
        (Code("x = 1"), "@code\nx = 1\n@endcode\n"),
        (Startuml("A -> B", caption="Flow", file="seq"), '@startuml{seq} "Flow"\nA -> B\n@enduml\n'),
        (Callgraph(), "@callgraph\n"),
        (Endcode(), "@endcode\n"),
    ],
)
def test_line_directives(directive: Directive, expected: str) -> None:
    assert render(directive) == expected


@pytest.mark.parametrize(
    "directive, expected",
    [
        (B("bold text"), "@b bold"),
        (Em("x"), "@em x"),
        (Emoji("smile"), "@emoji smile"),
        (MultiB("a b"), "<b>a b</b>"),
        (MultiEm("a b"), "<em>a b</em>"),
        (Ref("MyClass", "the class"), '@ref MyClass "the class"'),
        (Link("MyClass", "the class"), "@link MyClass the class @endlink"),
        (Percent(), "@%"),
        (DoubleColon(), "@::"),
        (Tilde(), "@~"),
        (Tilde("english"), "@~english"),
        (FDollar(), "@f$"),
        (FBraceOpen("eqnarray*"), "@f{eqnarray*}{"),
    ],
)
def test_inline_directives(directive: Directive, expected: str) -> None:
    assert render(directive) == expected


def test_escape_with_backslash_tag() -> None:
    assert render(Backslash(), tag="\\") == "\\\\"


def test_author_lists_tag_every_name() -> None:
    assert render(Author(["Ann", "Bob"]), tag="\\") == "\\author Ann\n\\author Bob\n"
    assert render(Authors(["Ann"])) == "@authors Ann\n"
    assert render(Author()) == ""


def test_aliases_share_kind() -> None:
    assert Lt is LessThan
    assert Gt is GreaterThan
    assert Lt() == LessThan()


def test_directives_are_immutable_and_hashable() -> None:
    author = Author(["Ann"])
    assert author.names == ("Ann",)
    assert hash(author) == hash(Author(("Ann",)))
    with pytest.raises(FrozenInstanceError):
        author.names = ()  # type: ignore[misc]


def test_every_kind_has_a_class() -> None:
    assert set(registered_kinds()) == set(Kind)
    for kind in Kind:
        assert directive_class(kind).kind is kind


def test_lookup_by_keyword() -> None:
    assert directive_class("brief") is Brief
    assert directive_class(Kind.PARAM) is Param
    with pytest.raises(KeyError):
        directive_class("nope")


def test_markers_render_their_keyword() -> None:
    for kind in Kind:
        cls = directive_class(kind)
        if issubclass(cls, Marker):
            assert render(cls()) == f"@{kind.value}\n"
        elif issubclass(cls, InlineMarker) and cls not in (Tilde, FBraceOpen):
            assert render(cls(), tag="\\") == f"\\{kind.value}"


def test_duplicate_kind_registration_is_rejected() -> None:
    with pytest.raises(TypeError):
        @dataclass(frozen=True)
        class OtherCallgraph(Marker):
            kind = Kind.CALLGRAPH
    assert directive_class(Kind.CALLGRAPH) is Callgraph


def test_bare_string_is_one_element() -> None:
    assert Author("Ann").names == ("Ann",)
    assert render(Author("Ann")) == "@author Ann\n"
    assert render(Ingroup("core")) == "@ingroup core\n"
    assert render(Parblock("ab")) == "@parblock\n\tab\n@endparblock\n"
