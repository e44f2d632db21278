"""The commands understood by the Pokedex prompt."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass, field
from typing import Callable, Sequence, TextIO

from pokedexcli.client import Client
from pokedexcli.models import PokemonResponse


class CommandError(Exception):
    """Raised when a command is used wrongly."""


@dataclass
class Session:
    """State shared by the commands during one run of the prompt."""

    client: Client
    pokedex: dict[str, PokemonResponse] = field(default_factory=dict)
    next_location_url: str | None = None
    previous_location_url: str | None = None
    out: TextIO = field(default_factory=lambda: sys.stdout)
    rng: random.Random = field(default_factory=random.Random)

    def _say(self, text: str = "") -> None:
        print(text, file=self.out)


@dataclass(frozen=True)
class Command:
    """A named command with its help text and the function that runs it."""

    name: str
    description: str
    callback: Callable[[Session, Sequence[str]], None]


def get_commands() -> dict[str, Command]:
    """Return all commands keyed by name."""
    commands = [
        Command("exit", "Exit the Pokedex", command_exit),
        Command("help", "Displays a help message", command_help),
        Command("map", "Gets next page of locations", command_map),
        Command("mapb", "Gets previous page of locations", command_mapb),
        Command("explore", "Get exploration info for the location", command_explore),
        Command("catch", "Attempt to catch pokemon", command_catch),
        Command("pokedex", "List all pokemon in pokedex", command_pokedex),
        Command("inspect", "List Pokemon Details from pokedex", command_inspect),
    ]
    return {command.name: command for command in commands}


def _first_arg(args: Sequence[str], command: str, what: str) -> str:
    if not args:
        raise CommandError(f"{command} needs {what}")
    return args[0]


def command_exit(session: Session, args: Sequence[str]) -> None:
    """Say goodbye and leave the program."""
    session._say("Closing the Pokedex... Goodbye!")
    raise SystemExit(0)


def command_help(session: Session, args: Sequence[str]) -> None:
    """List every command with its description."""
    session._say()
    session._say("List of all commands: ")
    session._say()
    for command in get_commands().values():
        session._say(f"{command.name}: {command.description}")
    session._say()


def _show_page(session: Session, page_url: str | None) -> None:
    page = session.client.list_locations(page_url)
    session.next_location_url = page.next
    session.previous_location_url = page.previous
    for location in page.results:
        session._say(location.name)


def command_map(session: Session, args: Sequence[str]) -> None:
    """Show the next page of location areas."""
    _show_page(session, session.next_location_url)


def command_mapb(session: Session, args: Sequence[str]) -> None:
    """Show the previous page of location areas."""
    _show_page(session, session.previous_location_url)


def command_explore(session: Session, args: Sequence[str]) -> None:
    """List the Pokémon found in a location area."""
    area = _first_arg(args, "explore", "a location area name")
    session._say(f"Exploring {area}...")
    explored = session.client.explore_location(area)
    session._say("Found Pokemon:")
    for encounter in explored.pokemon_encounters:
        session._say(f"- {encounter.pokemon.name}")


def command_catch(session: Session, args: Sequence[str]) -> None:
    """Throw a Pokeball; harder to catch the more base experience a Pokémon has."""
    name = _first_arg(args, "catch", "a pokemon name")
    session._say(f"Throwing a Pokeball at {name}...")
    pokemon = session.client.get_pokemon(name)
    chance = pokemon.base_experience // 50
    if session.rng.randrange(chance + 1) == chance:
        session._say(f"{name} was caught!")
        session.pokedex[name] = pokemon
        return
    session._say(f"{name} escaped!")


def command_pokedex(session: Session, args: Sequence[str]) -> None:
    """List the caught Pokémon."""
    session._say("Your Pokedex:")
    for pokemon in session.pokedex.values():
        session._say(f"- {pokemon.name}")


def command_inspect(session: Session, args: Sequence[str]) -> None:
    """Show details of a caught Pokémon."""
    name = _first_arg(args, "inspect", "a pokemon name")
    pokemon = session.pokedex.get(name)
    if pokemon is None:
        session._say(f"{name} is not in the pokedex.")
        return
    session._say(f"Name: {pokemon.name}")
    session._say(f"Height: {pokemon.height}")
    session._say(f"Weight: {pokemon.weight}")
    session._say("Stats:")
    for stat in pokemon.stats:
        session._say(f" -{stat.stat.name}: {stat.base_stat}")
    session._say("Types:")
    for pokemon_type in pokemon.types:
        session._say(f" - {pokemon_type.type.name}")