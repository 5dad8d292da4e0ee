"""The interactive Pokedex prompt and its entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .client import Client
from .commands import CommandError, Config, get_commands

PROMPT = "Pokedex > "
HTTP_TIMEOUT = 5.0
CACHE_INTERVAL = 5 * 60.0


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into whitespace-separated words."""
    return text.lower().split()


def start_repl(config: Config) -> None:
    """Read commands from standard input and run them until end of input."""
    commands = get_commands()
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            return

        words = clean_input(line)
        if not words:
            continue

        name, *args = words
        command = commands.get(name)
        if command is None:
            print("Unknown command")
            continue
        try:
            command.callback(config, *args)
        except CommandError as err:
            print(err)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Pokedex prompt."""
    parser = argparse.ArgumentParser(
        prog="pokedex", description="An interactive Pokedex at the terminal."
    )
    parser.parse_args(argv)
    with Client(HTTP_TIMEOUT, CACHE_INTERVAL) as client:
        start_repl(Config(client=client))
    return 0