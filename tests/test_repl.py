import io

import pytest

from pokedex.commands import Config
from pokedex.repl import clean_input, run

PROMPT = "Pokedex > "


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("\thello \tworld ", ["hello", "world"]),
        ("\tNay \tKg Lah? ", ["Nay", "Kg", "Lah?"]),
    ],
)
def test_clean_input(text, expected):
    assert clean_input(text) == expected


def test_clean_input_blank():
    assert clean_input(" \t \n") == []


def _session(text):
    out = io.StringIO()
    config = Config(out=out)
    status = run(config, io.StringIO(text), out)
    return status, out.getvalue()


def test_end_of_input_returns_zero():
    status, text = _session("")
    assert status == 0
    assert text == PROMPT


def test_empty_line_asks_for_command():
    _, text = _session("   \n")
    assert text == f"{PROMPT}Please enter a command !\n{PROMPT}"


def test_unknown_command():
    _, text = _session("fly\n")
    assert "Unknown command.\n" in text


def test_help_runs():
    _, text = _session("help now\n")
    assert "Welcome to the Pokedex!" in text
    assert text.endswith(PROMPT)


def test_command_error_stops_session():
    status, text = _session("explore\nhelp\n")
    assert status == 0
    assert "usage: explore <location-area>" in text
    assert "Welcome to the Pokedex!" not in text


def test_exit_command_exits():
    out = io.StringIO()
    with pytest.raises(SystemExit) as info:
        run(Config(out=out), io.StringIO("exit\nhelp\n"), out)
    assert info.value.code == 0
    assert "Goodbye!" in out.getvalue()
    assert "Welcome" not in out.getvalue()