# pokedex

An interactive command-line Pokedex. You browse location areas, explore them to
see which Pokemon live there, try to catch Pokemon and inspect the ones you have
caught. All data comes from the public PokeAPI (`https://pokeapi.co/api/v2`).
Raw response bodies are kept in an in-memory cache, so a page or a Pokemon you
have already loaded is served again without a new request until its entry
expires (the prompt uses a five-minute cache interval).

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Usage

Start the interactive prompt:

```
pokedex
```

You get a `Pokedex > ` prompt. Input is lower-cased and split on whitespace, so
case and extra spaces do not matter. An unknown command prints
`Unknown command`. The prompt ends with the `exit` command or at end of input
(Ctrl-D).

| Command                   | What it does                              |
|---------------------------|-------------------------------------------|
| `help`                    | Displays a help message                   |
| `map`                     | Get the next page of locations            |
| `mapb`                    | Get the previous page of locations        |
| `explore <location_name>` | Explore a location                        |
| `catch <pokemon_name>`    | Attempt to catch a pokemon                |
| `inspect <pokemon_name>`  | View details about a caught Pokemon       |
| `pokedex`                 | See all the pokemon you've caught         |
| `exit`                    | Exit the Pokedex                          |

The first `map` shows the first page of location areas; each further `map`
moves one page on, and `mapb` one page back. `mapb` before any page has been
shown, or on the first page, prints `you're on the first page`.

A catch attempt draws a random number below the Pokemon's base experience; the
Pokemon escapes if the number is above 40, so Pokemon with a higher base
experience are harder to catch. Only caught Pokemon can be inspected.

A sample session (output shortened):

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore canalave-city-area
Exploring canalave-city-area...
Found Pokemon: 
 - tentacool
 - staryu
...
Pokedex > catch staryu
Throwing a Pokeball at staryu...
staryu was caught!
You may now inspect it with the inspect command.
Pokedex > inspect staryu
Name: staryu
Height: ...
Weight: ...
Stats:
  -hp: ...
...
Type:
  - water
Pokedex > exit
Closing the Pokedex... Goodbye!
```

When a command fails, for example because a network request failed or the
server answered with something that is not JSON (as it does for an unknown
name), the error message is printed and the prompt carries on.

## Using it as a library

`pokedex.client.Client` fetches data and returns typed, frozen dataclasses from
`pokedex.models` (`LocationsPage`, `Location`, `Pokemon` and their parts).
`timeout` and `cache_interval` are in seconds.

```python
from pokedex.client import Client

with Client(timeout=5.0, cache_interval=300.0) as client:
    page = client.list_locations(None)
    for result in page.results:
        print(result.name)
    if page.next is not None:
        page = client.list_locations(page.next)

    area = client.get_location("canalave-city-area")
    print([enc.pokemon.name for enc in area.pokemon_encounters])

    pikachu = client.get_pokemon("pikachu")
    print(pikachu.base_experience, [t.type.name for t in pikachu.types])
```

Network failures surface as `requests` exceptions; a body that is not valid
JSON, or has fields of the wrong type, raises `ValueError`.

`pokedex.cache.Cache` is a small thread-safe store of byte values keyed by
string. `get` returns `None` for a missing key. A background thread removes,
once per interval, every entry older than the interval; `close()` (or leaving a
`with` block) stops that thread.

```python
from pokedex.cache import Cache

with Cache(5.0) as cache:
    cache.add("key", b"value")
    assert cache.get("key") == b"value"
```

The commands themselves live in `pokedex.commands`: `get_commands()` returns
them keyed by name, and each callback takes a `Config` holding the client, the
paging state and the caught Pokemon.

## What it does not do

Caught Pokemon live only in memory for the length of one session; nothing is
saved to disk, and the Pokedex starts empty each time the prompt is started.

## Running the tests

```
pytest
```