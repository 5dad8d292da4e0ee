"""The commands available at the Pokedex prompt."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

import requests

from .models import LocationsPage, Pokemon

ESCAPE_THRESHOLD = 40


class CommandError(Exception):
    """A command could not be carried out; the message is shown to the user."""


@dataclass
class Config:
    """State shared by the commands across one session."""

    client: Any
    next_locations_url: str | None = None
    prev_locations_url: str | None = None
    caught_pokemon: dict[str, Pokemon] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)


@dataclass(frozen=True)
class Command:
    """A named command with its help text and the function that runs it."""

    name: str
    description: str
    callback: Callable[..., None]


@contextmanager
def _client_errors() -> Iterator[None]:
    try:
        yield
    except (requests.RequestException, ValueError) as exc:
        raise CommandError(str(exc)) from exc


def _single_arg(args: tuple[str, ...], what: str) -> str:
    if len(args) != 1:
        raise CommandError(f"you must provide a {what}")
    return args[0]


def command_help(config: Config, *args: str) -> None:
    """Print a usage message listing every command."""
    print()
    print("Welcome to the Pokedex!")
    print("Usage:")
    print()
    for command in get_commands().values():
        print(f"{command.name}: {command.description}")
    print()


def command_catch(config: Config, *args: str) -> None:
    """Throw a Pokeball at a Pokemon; it may be caught or escape."""
    name = _single_arg(args, "pokemon name")
    with _client_errors():
        pokemon = config.client.get_pokemon(name)
    if pokemon.base_experience <= 0:
        raise CommandError(f"{pokemon.name} cannot be caught")

    roll = config.rng.randrange(pokemon.base_experience)
    print(f"Throwing a Pokeball at {pokemon.name}...")
    if roll > ESCAPE_THRESHOLD:
        print(f"{pokemon.name} escaped!")
        return

    print(f"{pokemon.name} was caught!")
    config.caught_pokemon[pokemon.name] = pokemon
    print("You may now inspect it with the inspect command.")


def command_inspect(config: Config, *args: str) -> None:
    """Show the details of a Pokemon that has been caught."""
    name = _single_arg(args, "pokemon name")
    pokemon = config.caught_pokemon.get(name)
    if pokemon is None:
        raise CommandError("you have not caught that pokemon")

    print("Name:", pokemon.name)
    print("Height:", pokemon.height)
    print("Weight:", pokemon.weight)
    print("Stats:")
    for stat in pokemon.stats:
        print(f"  -{stat.stat.name}: {stat.base_stat}")
    print("Type:")
    for type_info in pokemon.types:
        print("  -", type_info.type.name)


def command_explore(config: Config, *args: str) -> None:
    """List the Pokemon that can be found in a location area."""
    name = _single_arg(args, "location name")
    with _client_errors():
        location = config.client.get_location(name)
    print(f"Exploring {location.name}...")
    print("Found Pokemon: ")
    for encounter in location.pokemon_encounters:
        print(f" - {encounter.pokemon.name}")


def _show_page(config: Config, page: LocationsPage) -> None:
    config.next_locations_url = page.next
    config.prev_locations_url = page.previous
    for location in page.results:
        print(location.name)


def command_mapf(config: Config, *args: str) -> None:
    """Show the next page of location areas."""
    with _client_errors():
        page = config.client.list_locations(config.next_locations_url)
    _show_page(config, page)


def command_mapb(config: Config, *args: str) -> None:
    """Show the previous page of location areas."""
    if config.prev_locations_url is None:
        raise CommandError("you're on the first page")
    with _client_errors():
        page = config.client.list_locations(config.prev_locations_url)
    _show_page(config, page)


def command_pokedex(config: Config, *args: str) -> None:
    """List every Pokemon caught so far."""
    print("Your Pokedex:")
    for pokemon in config.caught_pokemon.values():
        print(f" - {pokemon.name}")


def command_exit(config: Config, *args: str) -> None:
    """Say goodbye and end the program."""
    print("Closing the Pokedex... Goodbye!")
    sys.exit(0)


def get_commands() -> dict[str, Command]:
    """Return the commands keyed by the word that invokes them."""
    return {
        "help": Command("help", "Displays a help message", command_help),
        "catch": Command(
            "catch <pokemon_name>", "Attempt to catch a pokemon", command_catch
        ),
        "inspect": Command(
            "inspect <pokemon_name>",
            "View details about a caught Pokemon",
            command_inspect,
        ),
        "explore": Command(
            "explore <location_name>", "Explore a location", command_explore
        ),
        "map": Command("map", "Get the next page of locations", command_mapf),
        "mapb": Command("mapb", "Get the previous page of locations", command_mapb),
        "pokedex": Command(
            "pokedex", "See all the pokemon you've caught", command_pokedex
        ),
        "exit": Command("exit", "Exit the Pokedex", command_exit),
    }