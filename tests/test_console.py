import pytest


def test_ask_strips_whitespace(scripted_console):
    c = scripted_console(["  hello  "])
    assert c.ask("? ") == "hello"
    assert c.prompts == ["? "]


def test_ask_text_reprompts_until_non_blank(scripted_console):
    c = scripted_console(["", "   ", "Sword"])
    assert c.ask_text("Name: ") == "Sword"
    assert c.output.count("Please enter a value.") == 2


def test_ask_int_reprompts_on_bad_input(scripted_console):
    c = scripted_console(["ten", "-1", "11", "7"])
    assert c.ask_int("N: ", minimum=0, maximum=10) == 7
    assert c.output == [
        "Please enter a whole number.",
        "Please enter a number >= 0.",
        "Please enter a number <= 10.",
    ]


def test_ask_int_unbounded_accepts_negative(scripted_console):
    c = scripted_console(["-5"])
    assert c.ask_int("N: ") == -5


def test_end_of_input_raises_eof(scripted_console):
    c = scripted_console([])
    with pytest.raises(EOFError):
        c.ask_text("Name: ")
