from doxyblock.formatting import optional, optionalf, quoted, sized, word


def test_word_takes_first_token() -> None:
    assert word("  foo bar ") == "foo"
    assert word("") == ""
    assert word("   ") == ""


def test_optional_helpers_skip_empty() -> None:
    assert optional("x") == " x"
    assert optional("") == ""
    assert optionalf("{%s}", ".py") == "{.py}"
    assert optionalf("{%s}", "") == ""
    assert quoted("A caption") == ' "A caption"'
    assert quoted("") == ""


def test_sized_needs_both_halves() -> None:
    assert sized("width", "10cm") == " width=10cm"
    assert sized("width", "") == ""
    assert sized("", "10cm") == ""
