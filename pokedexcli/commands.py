"""The commands available at the Pokedex prompt."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

from .models import Location, LocationPage, Pokemon


class CommandError(Exception):
    """A command was used wrongly or cannot run in the current state."""


class _PokeApi(Protocol):
    def list_locations(self, page_url: str | None = None) -> LocationPage: ...

    def get_location(self, location_name: str) -> Location: ...

    def get_pokemon(self, pokemon_name: str) -> Pokemon: ...


@dataclass
class Config:
    """State shared by the commands of one session."""

    client: _PokeApi
    next_locations_url: str | None = None
    prev_locations_url: str | None = None
    caught_pokemon: dict[str, Pokemon] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)


@dataclass(frozen=True)
class Command:
    """A named command, its help text and the function that runs it."""

    name: str
    description: str
    callback: Callable[..., None]


def command_help(cfg: Config, *args: str) -> None:
    """Print the usage text listing every command."""
    print()
    print("Welcome to the Pokedex!")
    print("Usage:")
    print()
    for command in get_commands().values():
        print(f"{command.name}: {command.description}")
    print()


def command_catch(cfg: Config, *args: str) -> None:
    """Throw a pokeball at the named pokemon and keep it if it is caught."""
    if len(args) != 1:
        raise CommandError("you must provide a pokemon name")

    pokemon = cfg.client.get_pokemon(args[0])
    roll = cfg.rng.randrange(pokemon.base_experience)

    print(f"Throwing a Pokeball at {pokemon.name}...")
    if roll > 40:
        print(f"{pokemon.name} escaped!")
        return

    print(f"{pokemon.name} was caught!")
    cfg.caught_pokemon[pokemon.name] = pokemon


def command_explore(cfg: Config, *args: str) -> None:
    """List the pokemon that can be found in the named location area."""
    if len(args) != 1:
        raise CommandError("you must provide a location name")

    location = cfg.client.get_location(args[0])
    print(f"Exploring {location.name}...")
    print("Found Pokemon: ")
    for encounter in location.pokemon_encounters:
        print(f" - {encounter.pokemon.name}")


def _show_page(cfg: Config, page_url: str | None) -> None:
    page = cfg.client.list_locations(page_url)
    cfg.next_locations_url = page.next
    cfg.prev_locations_url = page.previous
    for result in page.results:
        print(result.name)


def command_map(cfg: Config, *args: str) -> None:
    """Show the next page of location areas."""
    _show_page(cfg, cfg.next_locations_url)


def command_mapb(cfg: Config, *args: str) -> None:
    """Show the previous page of location areas."""
    if cfg.prev_locations_url is None:
        raise CommandError("you're on the first page")
    _show_page(cfg, cfg.prev_locations_url)


def command_exit(cfg: Config, *args: str) -> None:
    """Say goodbye, release the session's client and leave the program."""
    print("Closing the Pokedex... Goodbye!")
    close = getattr(cfg.client, "close", None)
    if callable(close):
        close()
    sys.exit(0)


def get_commands() -> dict[str, Command]:
    """Return every command, keyed by the word that invokes it."""
    return {
        "help": Command("help", "Displays a help message", command_help),
        "catch": Command("catch <pokemon_name>", "Attempt to catch a pokemon", command_catch),
        "explore": Command("explore <location_name>", "Explore a location", command_explore),
        "map": Command("map", "Get the next page of locations", command_map),
        "mapb": Command("mapb", "Get the previous page of locations", command_mapb),
        "exit": Command("exit", "Exit the Pokedex", command_exit),
    }