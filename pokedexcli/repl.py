"""The interactive Pokedex prompt and its entry point."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from pokedexcli.cache import Cache
from pokedexcli.client import ApiError, Client
from pokedexcli.commands import CommandError, Session, get_commands

PROMPT = "Pokedex > "


def clean_input(text: str) -> list[str]:
    """Lower-case the text and split it into words."""
    return text.strip().lower().split()


def run_line(session: Session, line: str) -> None:
    """Run the command named by the first word of ``line``."""
    words = clean_input(line)
    if not words:
        return
    command = get_commands().get(words[0])
    if command is None:
        print("Unknown command", file=session.out)
        return
    try:
        command.callback(session, words[1:])
    except (ApiError, CommandError) as exc:
        print(exc, file=session.out)


def start_repl(session: Session, stdin: TextIO) -> None:
    """Read and run commands from ``stdin`` until it is exhausted."""
    out = session.out
    print("Welcome to the Pokedex!", file=out)
    while True:
        out.write(PROMPT)
        out.flush()
        line = stdin.readline()
        if not line:
            out.write("\n")
            return
        run_line(session, line)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the Pokedex prompt on standard input."""
    with Cache(60) as cache:
        client = Client(5, cache)
        session = Session(client=client)
        start_repl(session, sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())