"""The interactive Pokedex prompt."""

from __future__ import annotations

import sys
from typing import TextIO

from .client import PokeClient
from .commands import CommandError, Config, get_commands


def clean_input(text: str) -> list[str]:
    return text.split()


def run(config: Config, input_stream: TextIO | None = None, output: TextIO | None = None) -> int:
    """Read commands until input ends or a command fails; return the exit status."""
    input_stream = input_stream or sys.stdin
    output = output or config.out
    commands = get_commands()
    while True:
        output.write("Pokedex > ")
        output.flush()
        line = input_stream.readline()
        if not line:
            return 0
        words = clean_input(line)
        if not words:
            print("Please enter a command !", file=output)
            continue
        command = commands.get(words[0])
        if command is None:
            print("Unknown command.", file=output)
            continue
        try:
            command.callback(config, words[1:])
        except CommandError as exc:
            print(exc, file=output)
            return 0


def main(argv=None) -> int:
    with PokeClient() as client:
        return run(Config(client=client, out=sys.stdout), sys.stdin, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())