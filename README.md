# pokedexcli

An interactive Pokedex for the terminal. You can page through location areas,
explore an area to see which Pokemon can be found there, and try to catch
Pokemon. Data comes from the public PokeAPI. Raw responses are cached in memory
by URL for five minutes, so revisiting a page you have already seen does not
query the API again.

No third-party packages are needed; the package uses only the standard library.

## Installation

```
pip install .
```

## Usage

Start the prompt:

```
pokedexcli
```

or, without installing the script:

```
python -m pokedexcli.repl
```

At the `Pokedex > ` prompt, enter one of these commands. Input is lower-cased
before it is read, so commands and names are not case sensitive.

| Command                   | What it does                                 |
|---------------------------|----------------------------------------------|
| `help`                    | Show the list of commands                    |
| `map`                     | Show the next page of location areas         |
| `mapb`                    | Show the previous page of location areas     |
| `explore <location_name>` | List the Pokemon that can be met in an area  |
| `catch <pokemon_name>`    | Throw a Pokeball at a Pokemon                |
| `exit`                    | Say goodbye and quit                         |

An unrecognised command prints `Unknown command`. When a command fails, for
example `mapb` on the first page (`you're on the first page`) or `catch` with no
name (`you must provide a pokemon name`), the error message is printed and the
prompt carries on. The session also ends when the input runs out (end of file).

Example session:

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore pastoria-city-area
Exploring pastoria-city-area...
Found Pokemon:
 - tentacool
 - magikarp
...
Pokedex > catch magikarp
Throwing a Pokeball at magikarp...
magikarp was caught!
```

Catching draws a random number below the Pokemon's base experience; the Pokemon
escapes if it is above 40, so Pokemon with a higher base experience are harder
to catch.

## What it does not do

Caught Pokemon are held in memory for the current session only
(`Config.caught_pokemon`). There is no command to list or inspect them, and
nothing is saved when the session ends.

## Using it as a library

The API client can be used on its own. `timeout` and `cache_interval` are in
seconds, and the client works as a context manager:

```python
from pokedexcli.client import Client

with Client(timeout=5.0, cache_interval=300.0) as client:
    page = client.list_locations(None)
    for area in page.results:
        print(area.name)
    area = client.get_location("pastoria-city-area")
    print([enc.pokemon.name for enc in area.pokemon_encounters])
    pokemon = client.get_pokemon("pikachu")
    print(pokemon.name, pokemon.base_experience)
```

`list_locations` returns a `LocationPage` whose `next` and `previous` URLs can
be passed back to it; `get_location` and `get_pokemon` return `Location` and
`Pokemon` objects from `pokedexcli.models`.

`pokedexcli.cache.Cache` is a thread-safe store of byte values by key. `get`
returns `None` for a missing key. A background thread removes entries older
than the interval, checking once per interval, until `close()` is called (or
the `with` block ends).

The commands live in `pokedexcli.commands`: `get_commands()` returns them keyed
by name, and each callback takes a `Config` followed by its arguments.
`pokedexcli.repl.start_repl(cfg, stream)` runs the prompt over any text stream.

## Running the tests

```
pip install ".[test]"
pytest
```