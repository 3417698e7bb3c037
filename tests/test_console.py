import io

import pytest

from warungcli.console import CLEAR_SCREEN, Console, InputError


def make(text=""):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_clear_writes_escape_sequence():
    console, out = make()
    console.clear()
    assert out.getvalue() == "\033[2J\033[H"
    assert CLEAR_SCREEN == out.getvalue()


def test_write_is_verbatim():
    console, out = make()
    console.write("hello\n")
    console.write("world")
    assert out.getvalue() == "hello\nworld"


def test_ask_returns_word_and_shows_prompt():
    console, out = make("1\n")
    assert console.ask("Input choice: ") == "1"
    assert out.getvalue() == "Input choice: "


def test_ask_strips_surrounding_space():
    console, _ = make("   b  \n")
    assert console.ask("> ") == "b"


def test_ask_reads_successive_lines():
    console, _ = make("y\nn\n")
    assert [console.ask(""), console.ask("")] == ["y", "n"]


def test_ask_last_line_without_newline():
    console, _ = make("e")
    assert console.ask("") == "e"


def test_empty_line_raises():
    console, _ = make("\n")
    with pytest.raises(InputError) as info:
        console.ask("")
    assert info.value.value == ""


def test_blank_line_raises():
    console, _ = make("   \n")
    with pytest.raises(InputError):
        console.ask("")


def test_several_words_raise_with_first_word():
    console, _ = make("nasi goreng\n")
    with pytest.raises(InputError) as info:
        console.ask("")
    assert info.value.value == "nasi"


def test_several_words_consume_the_line():
    console, _ = make("a b\nc\n")
    with pytest.raises(InputError):
        console.ask("")
    assert console.ask("") == "c"


def test_end_of_input_raises_eof():
    console, _ = make("")
    with pytest.raises(EOFError):
        console.ask("")


def test_input_error_is_value_error():
    console, _ = make("x y\n")
    with pytest.raises(ValueError) as info:
        console.ask("")
    assert isinstance(info.value, InputError)
    assert info.value.value == "x"