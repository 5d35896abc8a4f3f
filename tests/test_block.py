import logging
import string
from dataclasses import dataclass
from typing import Any

import pytest
from hypothesis import given, strategies as st

from doxyblock.block import (
    DocBlock,
    with_delimiters,
    with_directive,
    with_directive_once,
    with_directives,
    with_tag,
)
from doxyblock.codegen import CodeBuilder, Emitter, UnbalancedIndentError
from doxyblock.directive import Directive
from doxyblock.markup import B, Code
from doxyblock.sections import Brief, Note, Param, Parblock, Short
from doxyblock.symbols import LessThan, Lt


def test_brief_and_param_block() -> None:
    block = DocBlock.new(
        with_tag("@"),
        with_directives(Brief("Does X."), Param("x", "the input", direction="in")),
    )
    assert block.to_text() == "/**\n\t@brief Does X.\n\t@param[in] x the input\n*/\n"


def test_unknown_direction_drops_brackets() -> None:
    block = DocBlock.new(with_directive(Param("x", "the input", direction="maybe")))
    assert block.to_text() == "/**\n\t@param x the input\n*/\n"


def test_empty_block() -> None:
    assert DocBlock.new().to_text() == "/**\n*/\n"


def test_default_tag_and_backslash_tag() -> None:
    assert DocBlock.new().tag == "@"
    block = DocBlock.new(with_tag("\\"), with_directive(Brief("Hi.")))
    assert block.to_text() == "/**\n\t\\brief Hi.\n*/\n"


def test_later_tag_option_wins() -> None:
    block = DocBlock.new(with_tag("\\"), with_directive(Brief("Hi.")), with_tag("@"))
    assert block.to_text() == "/**\n\t@brief Hi.\n*/\n"


def test_custom_delimiters_and_sink_options() -> None:
    block = DocBlock.new(with_delimiters("/*!", "*/"), with_directive(Brief("Hi.")))
    assert block.to_text(indent_unit=" * ") == "/*!\n * @brief Hi.\n*/\n"


def test_once_keeps_first_of_kind() -> None:
    a, b = Brief("first"), Brief("second")
    block = DocBlock.new(with_directive(a), with_directive_once(b))
    assert block.directives == (a,)


def test_unconditional_keeps_both_in_order() -> None:
    a, b = Brief("first"), Brief("second")
    block = DocBlock.new(with_directive(a), with_directive(b))
    assert block.directives == (a, b)


def test_once_compares_kind_not_text() -> None:
    block = DocBlock.new(
        with_directive_once(Brief("same")),
        with_directive_once(Short("same")),
        with_directive_once(LessThan()),
        with_directive_once(Lt()),
    )
    assert [d.kind.value for d in block.directives] == ["brief", "short", "<"]


def test_once_skip_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="doxyblock.block")
    DocBlock.new(with_directive(Brief("a")), with_directive_once(Brief("b")))
    assert "Skipping duplicate BRIEF directive" in caplog.text


def test_options_do_not_mutate_existing_block() -> None:
    base = DocBlock.new(with_directive(Brief("a")))
    grown = with_directive(Note("b"))(base)
    assert len(base.directives) == 1
    assert len(grown.directives) == 2


def test_directives_are_stored_as_tuple() -> None:
    block = DocBlock(directives=[Brief("a")])  # type: ignore[arg-type]
    assert block.directives == (Brief("a"),)


@given(
    st.lists(
        st.text(alphabet=string.ascii_letters + " .", min_size=1, max_size=20).filter(str.strip),
        max_size=15,
    )
)
def test_order_is_preserved(texts: list[str]) -> None:
    block = DocBlock.new(with_directives(*(Note(t) for t in texts)))
    body = block.to_text().splitlines()[1:-1]
    assert body == [f"\t@note {t}" for t in texts]


def test_inline_directives_are_not_separated() -> None:
    block = DocBlock.new(with_directives(Brief("x"), B("bold"), Note("y")))
    assert block.to_text() == "/**\n\t@brief x\n\t@b bold@note y\n*/\n"


def test_nested_sub_block_is_balanced() -> None:
    block = DocBlock.new(with_tag("\\"), with_directive(Parblock(["one", "two"])), with_directive(Brief("b")))
    assert block.to_text() == (
        "/**\n"
        "\t\\parblock\n"
        "\t\tone\n"
        "\n"
        "\t\ttwo\n"
        "\t\\endparblock\n"
        "\t\\brief b\n"
        "*/\n"
    )


def test_code_body_follows_block_indent() -> None:
    block = DocBlock.new(with_directive(Code("int x;\nreturn x;", language=".c")))
    assert block.to_text() == "/**\n\t@code{.c}\n\tint x;\n\treturn x;\n\t@endcode\n*/\n"


@dataclass(frozen=True)
class _Dedent(Directive):
    def render(self, tag: str, out: Emitter) -> None:
        out.indent(-2)


def test_unbalanced_directive_aborts_render() -> None:
    cb = CodeBuilder()
    with pytest.raises(UnbalancedIndentError):
        DocBlock.new(with_directive(_Dedent())).render(cb)
    assert cb.getvalue() == "/**\n"


class _Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def indent(self, delta: int) -> None:
        self.calls.append(("indent", delta))

    def write(self, fmt: str, *args: Any) -> None:
        self.calls.append(("write", fmt % args if args else fmt))

    def writeln(self, fmt: str = "", *args: Any) -> None:
        self.calls.append(("writeln", fmt % args if args else fmt))

    def newline(self) -> None:
        self.calls.append(("newline",))


def test_render_call_sequence() -> None:
    rec = _Recorder()
    assert isinstance(rec, Emitter)
    DocBlock.new(with_directive(Brief("b"))).render(rec)
    assert rec.calls == [
        ("writeln", "/**"),
        ("indent", 1),
        ("writeln", "@brief b"),
        ("indent", -1),
        ("writeln", "*/"),
    ]


def test_verbatim_body_uses_emitter_lines() -> None:
    rec = _Recorder()
    DocBlock.new(with_directive(Code("int x;\nreturn x;", language=".c"))).render(rec)
    assert rec.calls == [
        ("writeln", "/**"),
        ("indent", 1),
        ("writeln", "@code{.c}"),
        ("writeln", "int x;"),
        ("writeln", "return x;"),
        ("writeln", "@endcode"),
        ("indent", -1),
        ("writeln", "*/"),
    ]
