# pokedexcli

An interactive command-line Pokedex. It lets you browse location areas, explore
them for Pokemon, try to catch what you find and inspect your collection. The
data comes from the public PokeAPI. Raw responses are cached in memory, and an
entry is dropped once it is older than a minute, so paging back and forth stays
fast.

## Installation

```
pip install .
```

The package uses only the Python standard library and needs Python 3.10 or
later.

## Usage

Start the prompt:

```
pokedexcli
```

You will see:

```
Welcome to the Pokedex!
Pokedex >
```

Input is trimmed, lower-cased and split on whitespace. The first word picks the
command and the rest are its arguments. Blank lines are ignored. An unknown word
prints `Unknown command`. The prompt ends on `exit` or at the end of input.

| Command             | What it does                                  |
|---------------------|-----------------------------------------------|
| `help`              | Displays a help message                       |
| `map`               | Gets next page of locations                   |
| `mapb`              | Gets previous page of locations               |
| `explore <area>`    | Get exploration info for the location         |
| `catch <pokemon>`   | Attempt to catch pokemon                      |
| `pokedex`           | List all pokemon in pokedex                   |
| `inspect <pokemon>` | List Pokemon Details from pokedex             |
| `exit`              | Exit the Pokedex                              |

`map` starts at the first page and moves forward, and `mapb` moves back.
`explore`, `catch` and `inspect` need a name. If you leave it out, or if the API
cannot be reached or sends an unusable answer, the prompt prints a message and
carries on.

Here is an example session:

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore canalave-city-area
Exploring canalave-city-area...
Found Pokemon:
- tentacool
...
Pokedex > catch tentacool
Throwing a Pokeball at tentacool...
tentacool was caught!
Pokedex > inspect tentacool
Name: tentacool
Height: 9
Weight: 455
Stats:
 -hp: 40
...
```

Catching succeeds with probability `1 / (base_experience // 50 + 1)`, so Pokemon
with a higher base experience are harder to catch.

## What it does not do

The Pokedex lives only as long as the prompt runs. Caught Pokemon are not saved
anywhere and are gone when you exit. The response cache is also in memory only.

## Using it as a library

You can use the parts of the tool on their own:

```python
from pokedexcli.cache import Cache
from pokedexcli.client import Client

with Cache(60.0) as cache:
    client = Client(5.0, cache)
    page = client.list_locations(None)
    for area in page.results:
        print(area.name)
    pikachu = client.get_pokemon("pikachu")
    print(pikachu.base_experience)
```

- `pokedexcli.cache.Cache(interval)` maps string keys to bytes.
  - `add` stores a value. `get` returns it, or `None` if the key is absent. `remove` pops it.
  - A background thread drops entries older than `interval` seconds (a number or a `timedelta`).
  - `close()` stops that thread. You can also use the cache as a context manager.
- `pokedexcli.client.Client(timeout, cache)` has three methods:
  - `list_locations(page_url)` returns a `LocationAreasResponse`.
  - `explore_location(area_name)` returns an `ExploreAreaResponse`.
  - `get_pokemon(name)` returns a `PokemonResponse`.
  - Failures raise `ApiError`.
- `pokedexcli.models` holds these frozen dataclasses, each built with `from_dict`:
  - `NamedResource`
  - `LocationAreasResponse`
  - `PokemonEncounter`
  - `ExploreAreaResponse`
  - `PokemonStat`
  - `PokemonType`
  - `PokemonResponse`
- `pokedexcli.commands` has three parts:
  - `Session` holds the client, the Pokedex, paging state, an output stream and a random generator.
  - `get_commands()` returns the `Command` table.
  - A command that is used wrongly raises `CommandError`.
- `pokedexcli.repl` provides these functions:
  - `clean_input(text)`.
  - `run_line(session, line)`.
  - `start_repl(session, stdin)`.
  - `main()`, which the `pokedexcli` command calls.

## Running the tests

```
pip install ".[test]"
pytest
```