import json

import pytest

from pokedexcli.models import (
    ExploreAreaResponse,
    LocationAreasResponse,
    NamedResource,
    PokemonEncounter,
    PokemonResponse,
    PokemonStat,
    PokemonType,
)

LOCATIONS_JSON = """
{
  "count": 1089,
  "next": "https://pokeapi.co/api/v2/location-area?offset=20&limit=20",
  "previous": null,
  "results": [
    {"name": "canalave-city-area", "url": "https://pokeapi.co/api/v2/location-area/1/"},
    {"name": "eterna-city-area", "url": "https://pokeapi.co/api/v2/location-area/2/"}
  ]
}
"""

POKEMON = {
    "id": 25,
    "name": "pikachu",
    "base_experience": 112,
    "height": 4,
    "weight": 60,
    "order": 35,
    "is_default": True,
    "species": {"name": "pikachu", "url": "https://pokeapi.co/api/v2/pokemon-species/25/"},
    "abilities": [
        {"ability": {"name": "static", "url": "u1"}, "is_hidden": False, "slot": 1},
    ],
    "stats": [
        {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": "u2"}},
        {"base_stat": 55, "effort": 0, "stat": {"name": "attack", "url": "u3"}},
    ],
    "types": [{"slot": 1, "type": {"name": "electric", "url": "u4"}}],
    "sprites": {"front_default": "ignored"},
}


def test_location_areas_from_json():
    resp = LocationAreasResponse.from_dict(json.loads(LOCATIONS_JSON))
    assert resp.count == 1089
    assert resp.next == "https://pokeapi.co/api/v2/location-area?offset=20&limit=20"
    assert resp.previous is None
    assert [r.name for r in resp.results] == ["canalave-city-area", "eterna-city-area"]


def test_location_areas_empty_document_defaults():
    resp = LocationAreasResponse.from_dict({})
    assert resp == LocationAreasResponse()
    assert resp.results == []
    assert resp.next is None


def test_named_resource_from_dict():
    res = NamedResource.from_dict({"name": "hp", "url": "u"})
    assert (res.name, res.url) == ("hp", "u")


def test_explore_area_from_dict():
    data = {
        "id": 1,
        "name": "canalave-city-area",
        "game_index": 1,
        "location": {"name": "canalave-city", "url": "loc"},
        "pokemon_encounters": [
            {"pokemon": {"name": "tentacool", "url": "p1"}, "version_details": []},
            {"pokemon": {"name": "tentacruel", "url": "p2"}},
        ],
    }
    resp = ExploreAreaResponse.from_dict(data)
    assert resp.name == "canalave-city-area"
    assert resp.location.name == "canalave-city"
    assert [e.pokemon.name for e in resp.pokemon_encounters] == ["tentacool", "tentacruel"]


def test_pokemon_encounter_from_dict():
    enc = PokemonEncounter.from_dict({"pokemon": {"name": "zubat", "url": "z"}})
    assert enc.pokemon == NamedResource("zubat", "z")
    assert enc.version_details == []


def test_pokemon_from_dict():
    poke = PokemonResponse.from_dict(POKEMON)
    assert poke.name == "pikachu"
    assert poke.base_experience == POKEMON["base_experience"]
    assert poke.height == POKEMON["height"]
    assert poke.weight == POKEMON["weight"]
    assert poke.is_default is True
    assert [(s.stat.name, s.base_stat) for s in poke.stats] == [("hp", 35), ("attack", 55)]
    assert [t.type.name for t in poke.types] == ["electric"]
    assert [a.name for a in poke.abilities] == ["static"]
    assert poke.species.name == "pikachu"


def test_pokemon_stat_and_type_from_dict():
    stat = PokemonStat.from_dict({"base_stat": 45, "effort": 1, "stat": {"name": "speed"}})
    assert (stat.base_stat, stat.effort, stat.stat.name) == (45, 1, "speed")
    ptype = PokemonType.from_dict({"slot": 2, "type": {"name": "poison"}})
    assert (ptype.slot, ptype.type.name) == (2, "poison")


def test_null_fields_take_zero_values():
    poke = PokemonResponse.from_dict({"name": None, "height": None, "stats": None})
    assert poke == PokemonResponse()


@pytest.mark.parametrize(
    "cls, data",
    [
        (PokemonResponse, {"height": "tall"}),
        (PokemonResponse, {"base_experience": True}),
        (PokemonResponse, {"is_default": 1}),
        (PokemonResponse, {"stats": {"hp": 1}}),
        (LocationAreasResponse, {"next": 5}),
        (LocationAreasResponse, [1, 2]),
        (NamedResource, "pikachu"),
        (ExploreAreaResponse, {"pokemon_encounters": ["not-an-object"]}),
    ],
)
def test_type_mismatch_raises(cls, data):
    with pytest.raises(ValueError):
        cls.from_dict(data)