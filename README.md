# pokedex

An interactive command-line Pokedex. Browse the location areas of the Pokemon
world, explore an area to see which Pokemon appear there, try to catch them,
and inspect the ones you have caught. Data comes from the public PokeAPI, and
responses are held in an in-memory cache whose entries expire after five
minutes.

## Installation

```
pip install .
```

## Usage

Start the prompt:

```
pokedex
```

Each line you type is split on whitespace; the first word is the command and
the rest are its arguments. The commands are:

| Command             | What it does                                             |
|---------------------|----------------------------------------------------------|
| `help`              | List the commands with a short description of each      |
| `map`               | Show the next page of location areas                     |
| `mapb`              | Show the previous page of location areas                 |
| `explore <area>`    | List the Pokemon that can be encountered in an area      |
| `catch <pokemon>`   | Throw a Pokeball at a Pokemon                            |
| `inspect <pokemon>` | Show name, height, weight, stats and types of a caught one |
| `pokedex`           | List every Pokemon you have caught                       |
| `exit`              | Print a goodbye and close the Pokedex                    |

An empty line prints `Please enter a command !`; an unknown word prints
`Unknown command.`. The first `map` shows the first page; each further `map`
moves forward, and `mapb` moves back (on the first page it says there is
nothing before it). Pokemon names given to `catch` and `inspect` are
lower-cased.

An example session:

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore canalave-city-area
Exploring canalave-city-area...
Found Pokemon:
-  tentacool
-  tentacruel
...
Pokedex > catch pikachu
Throwing a Pokeball at pikachu...
pikachu was caught!
Pokedex > inspect pikachu
Name:  pikachu
Height: 4
Weight: 60
Stats:
  -hp: 35
...
```

### Catching

`catch` rolls a number between 0 and 100 and the Pokemon is caught when the
roll reaches its threshold, `100 - 0.3 * base_experience`, kept between 5 and
95. A higher base experience lowers the threshold, so Pokemon with more base
experience are caught more often. A Pokemon already caught is not thrown at
again.

### Errors

`explore`, `catch` or `inspect` without a name, `pokedex` with an argument, or
a request to the API that fails or does not return a JSON object prints an
error message and ends the session. The session also ends when input runs out.

## What it does not do

Caught Pokemon are kept in memory only and are lost when the session ends;
there is no saving or loading of a Pokedex. The `pokedex` command takes no
options and has no configuration.

## Using it as a library

The modules can be used on their own:

```python
from pokedex.client import API_BASE, PokeClient
from pokedex.commands import calculate_catch_chance

with PokeClient() as client:
    pikachu = client.fetch_pokemon(f"{API_BASE}/pokemon/pikachu")
    print(pikachu.name, pikachu.base_experience)
    print(calculate_catch_chance(pikachu.base_experience))
```

- `pokedex.models` holds frozen dataclasses for the API records
  (`Location`, `LocationArea`, `Pokemon`, `Stat`, `PokemonType`,
  `NamedResource`), each built with `from_dict`; `Pokemon.to_dict` turns one
  back into a dict.
- `pokedex.cache.Cache(interval)` is a thread-safe store of byte values. A
  background thread drops entries older than `interval` seconds; `reap()` does
  the same at once and returns how many went. `get` returns `None` for a
  missing key. Call `close()` to stop the background thread.
- `pokedex.client.PokeClient` fetches `fetch_locations`, `fetch_location_area`
  and `fetch_pokemon` by URL, serving repeated URLs from its cache. It takes an
  optional `Cache`, `requests.Session` and timeout, and closes what it owns
  when used as a context manager.
- `pokedex.commands` has `get_commands()`, `Config` (paging state, caught
  Pokemon, client, random generator and output stream), `CommandError` and
  `calculate_catch_chance`.
- `pokedex.repl.run(config, input_stream, output)` runs the prompt over any
  text streams, which makes scripted sessions possible:

```python
import io
import random

from pokedex.commands import Config
from pokedex.repl import run

out = io.StringIO()
run(Config(rng=random.Random(1), out=out), io.StringIO("help\n"), out)
print(out.getvalue())
```

## Running the tests

```
pip install ".[test]"
pytest
```