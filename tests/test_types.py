import pytest

from doxyblock.sections import Author, Param
from doxyblock.types import mk_block, mk_directive


def test_mk_directive_passes_fields() -> None:
    d = mk_directive({"kind": "param", "name": "x", "description": "the input", "direction": "in"})
    assert d == Param("x", "the input", direction="in")


def test_mk_directive_freezes_lists() -> None:
    d = mk_directive({"kind": "author", "names": ["Ann", "Bob"]})
    assert d == Author(("Ann", "Bob"))


@pytest.mark.parametrize("spec", [{"kind": "nope"}, {"text": "no kind"}])
def test_mk_directive_rejects_bad_kind(spec: dict[str, str]) -> None:
    with pytest.raises(ValueError):
        mk_directive(spec)


def test_mk_block_applies_once_after_directives() -> None:
    block = mk_block({
        "tag": "\\",
        "directives": [{"kind": "brief", "text": "Does X."}],
        "once": [{"kind": "brief", "text": "ignored"}, {"kind": "return", "text": "nothing"}],
    })
    assert block.to_text() == "/**\n\t\\brief Does X.\n\t\\return nothing\n*/\n"


def test_mk_block_defaults() -> None:
    assert mk_block({}).to_text() == "/**\n*/\n"


def test_mk_directive_keeps_bare_string_whole() -> None:
    assert mk_directive({"kind": "author", "names": "Ann"}) == Author(("Ann",))
