import io

import pytest

from pokedexcli.commands import Config
from pokedexcli.models import LocationPage, NamedResource, Pokemon
from pokedexcli.repl import clean_input, main, start_repl


class FakeClient:
    def __init__(self, pokemon=None, error=None):
        self.pokemon = pokemon or {}
        self.error = error
        self.pokemon_requests = []

    def list_locations(self, page_url=None):
        if self.error is not None:
            raise self.error
        return LocationPage(results=[NamedResource("canalave-city-area")])

    def get_location(self, location_name):
        raise self.error

    def get_pokemon(self, pokemon_name):
        self.pokemon_requests.append(pokemon_name)
        return self.pokemon[pokemon_name]


class FixedRng:
    def randrange(self, bound):
        return 0


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  ", []),
        ("  hello  ", ["hello"]),
        ("  hello  world  ", ["hello", "world"]),
        ("  HellO  World  ", ["hello", "world"]),
    ],
)
def test_clean_input(text, expected):
    assert clean_input(text) == expected


def test_unknown_command(capsys):
    start_repl(Config(client=FakeClient()), io.StringIO("fly\n"))
    out = capsys.readouterr().out
    assert "Unknown command" in out
    assert out.count("Pokedex > ") == 2


def test_blank_lines_only_prompt(capsys):
    start_repl(Config(client=FakeClient()), io.StringIO("\n   \n"))
    out = capsys.readouterr().out
    assert out.count("Pokedex > ") == 3
    assert "Unknown command" not in out


def test_help_runs(capsys):
    start_repl(Config(client=FakeClient()), io.StringIO("HELP\n"))
    out = capsys.readouterr().out
    assert "Welcome to the Pokedex!" in out
    assert "mapb: Get the previous page of locations" in out


def test_arguments_are_lowercased():
    client = FakeClient(pokemon={"pikachu": Pokemon(name="pikachu", base_experience=112)})
    cfg = Config(client=client, rng=FixedRng())
    start_repl(cfg, io.StringIO("Catch PIKACHU\n"))
    assert client.pokemon_requests == ["pikachu"]
    assert list(cfg.caught_pokemon) == ["pikachu"]


def test_command_error_is_printed_and_loop_continues(capsys):
    start_repl(Config(client=FakeClient()), io.StringIO("mapb\nmap\n"))
    lines = capsys.readouterr().out.split("Pokedex > ")
    assert "you're on the first page" in lines[1]
    assert "canalave-city-area" in lines[2]


def test_client_error_is_printed(capsys):
    start_repl(Config(client=FakeClient(error=OSError("boom"))), io.StringIO("explore x\n"))
    assert "boom" in capsys.readouterr().out


def test_exit_stops_repl(capsys):
    with pytest.raises(SystemExit) as info:
        start_repl(Config(client=FakeClient()), io.StringIO("exit\nhelp\n"))
    assert info.value.code == 0
    out = capsys.readouterr().out
    assert "Closing the Pokedex... Goodbye!" in out
    assert "Welcome to the Pokedex!" not in out


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("help\n"))
    assert main() == 0
    assert "Welcome to the Pokedex!" in capsys.readouterr().out