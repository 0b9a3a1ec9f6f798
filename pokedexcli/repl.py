"""The interactive Pokedex prompt."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from .client import Client
from .commands import Config, get_commands

PROMPT = "Pokedex > "


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into words."""
    return text.lower().split()


def start_repl(cfg: Config, stream: TextIO | None = None) -> None:
    """Read commands from ``stream`` (stdin by default) and run them until it ends."""
    stream = sys.stdin if stream is None else stream
    commands = get_commands()
    while True:
        print(PROMPT, end="", flush=True)
        line = stream.readline()
        if not line:
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
            command.callback(cfg, *args)
        except Exception as exc:  # report and keep the session going
            print(exc)


def main(argv: Sequence[str] | None = None) -> int:
    """Start an interactive Pokedex session."""
    with Client(timeout=5.0, cache_interval=300.0) as client:
        start_repl(Config(client=client))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())