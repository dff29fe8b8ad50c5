"""The Pokedex commands and the state they share between calls."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TextIO, TypeVar

import requests

from .client import API_BASE, PokeClient
from .models import Pokemon

LOCATION_AREA_URL = f"{API_BASE}/location-area"
POKEMON_URL = f"{API_BASE}/pokemon"

MIN_CATCH_CHANCE = 5.0
MAX_CATCH_CHANCE = 95.0

_T = TypeVar("_T")


class CommandError(Exception):
    """A command could not be carried out; the session should end."""


@dataclass
class Config:
    """State kept across commands: paging URLs, caught Pokemon and I/O."""

    next: str = ""
    prev: str = ""
    caught: dict[str, Pokemon] = field(default_factory=dict)
    client: PokeClient | None = None
    rng: random.Random = field(default_factory=random.Random)
    out: TextIO = field(default_factory=lambda: sys.stdout)

    def say(self, text: str = "") -> None:
        print(text, file=self.out)

    def api(self) -> PokeClient:
        if self.client is None:
            self.client = PokeClient()
        return self.client


@dataclass(frozen=True)
class CliCommand:
    """A named command with its help text and the function that runs it."""

    name: str
    description: str
    callback: Callable[[Config, list[str]], None]


def _fetch(fetch: Callable[[str], _T], url: str) -> _T:
    try:
        return fetch(url)
    except (requests.RequestException, ValueError) as exc:
        raise CommandError(str(exc)) from exc


def _command_exit(config: Config, args: list[str]) -> None:
    config.say("Closing the Pokedex... Goodbye!")
    raise SystemExit(0)


def _command_help(config: Config, args: list[str]) -> None:
    config.say("Welcome to the Pokedex!")
    config.say("Usage:")
    for name, command in get_commands().items():
        config.say(f"{name}: {command.description}")


def _show_locations(config: Config, url: str) -> None:
    locations = _fetch(config.api().fetch_locations, url)
    if not locations.results:
        config.say("No locations found.")
        return
    config.next = locations.next
    config.prev = locations.previous
    for location in locations.results:
        config.say(location.name)


def _command_map(config: Config, args: list[str]) -> None:
    _show_locations(config, config.next or LOCATION_AREA_URL)


def _command_map_prev(config: Config, args: list[str]) -> None:
    if not config.prev:
        config.say("You're on the first page. No previous locations to show.")
        return
    _show_locations(config, config.prev)


def _command_explore(config: Config, args: list[str]) -> None:
    if not args:
        raise CommandError("usage: explore <location-area>")
    area_name = args[0]
    config.say(f"Exploring {area_name}...")
    area = _fetch(config.api().fetch_location_area, f"{LOCATION_AREA_URL}/{area_name}")
    if not area.pokemon_encounters:
        config.say("No locations found.")
        return
    config.say("Found Pokemon: ")
    for pokemon in area.pokemon_encounters:
        config.say(f"-  {pokemon.name}")


def calculate_catch_chance(base_exp: int) -> float:
    """Return the catch threshold for a Pokemon, clamped to 5..95."""
    chance = 100.0 - float(base_exp) * 0.3
    return min(max(chance, MIN_CATCH_CHANCE), MAX_CATCH_CHANCE)


def _command_catch(config: Config, args: list[str]) -> None:
    if not args:
        raise CommandError("usage: catch <pokemon-name>")
    pokemon_name = args[0].lower()
    if pokemon_name in config.caught:
        config.say(f"{pokemon_name} is already caught!")
        return
    config.say(f"Throwing a Pokeball at {pokemon_name}...")
    pokemon = _fetch(config.api().fetch_pokemon, f"{POKEMON_URL}/{pokemon_name}")
    roll = 100.0 * config.rng.random()
    if roll >= calculate_catch_chance(pokemon.base_experience):
        config.caught[pokemon_name] = pokemon
        config.say(f"{pokemon.name} was caught! ")
    else:
        config.say(f"{pokemon.name} was escaped! ")


def _command_inspect(config: Config, args: list[str]) -> None:
    if not args:
        raise CommandError("usage: inspect <pokemon-name>")
    pokemon_name = args[0].lower()
    pokemon = config.caught.get(pokemon_name)
    if pokemon is None:
        config.say(f"{pokemon_name} is not caught!")
        return
    config.say(f"Name:  {pokemon.name}")
    config.say(f"Height: {pokemon.height}")
    config.say(f"Weight: {pokemon.weight}")
    config.say("Stats:")
    for stat in pokemon.stats:
        config.say(f"  -{stat.stat.name}: {stat.base_stat}")
    config.say("Types:")
    for entry in pokemon.types:
        config.say(f"  -{entry.type.name}")


def _command_pokedex(config: Config, args: list[str]) -> None:
    if args:
        raise CommandError("usage: pokedex")
    config.say("Caught Pokemon:")
    for pokemon in config.caught.values():
        config.say(f"  -{pokemon.name}")


def get_commands() -> dict[str, CliCommand]:
    """Return every command by name."""
    commands = [
        CliCommand("exit", "Exit the Pokedex", _command_exit),
        CliCommand("help", "Display help information", _command_help),
        CliCommand("map", "Display the locations of the Pokemon World", _command_map),
        CliCommand("mapb", "Display the previous locations of the Pokemon World", _command_map_prev),
        CliCommand("explore", "Explore a location area", _command_explore),
        CliCommand("catch", "Catch a Pokemon", _command_catch),
        CliCommand("inspect", "Inspect a Pokemon", _command_inspect),
        CliCommand("pokedex", "Display the caught Pokemon", _command_pokedex),
    ]
    return {command.name: command for command in commands}