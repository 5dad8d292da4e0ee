import pytest

from pokedex.models import (
    Location,
    LocationsPage,
    NamedResource,
    Pokemon,
    PokemonEncounter,
    PokemonStat,
    PokemonType,
)

PIKACHU = {
    "id": 25,
    "name": "pikachu",
    "base_experience": 112,
    "height": 4,
    "weight": 60,
    "order": 35,
    "is_default": True,
    "species": {"name": "pikachu", "url": "https://example.com/species/25"},
    "stats": [
        {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": "u1"}},
        {"base_stat": 90, "effort": 2, "stat": {"name": "speed", "url": "u2"}},
    ],
    "types": [{"slot": 1, "type": {"name": "electric", "url": "u3"}}],
    "held_items": [],
}


def test_pokemon_from_dict_reads_fields():
    pokemon = Pokemon.from_dict(PIKACHU)
    assert pokemon.id == PIKACHU["id"]
    assert pokemon.name == PIKACHU["name"]
    assert pokemon.base_experience == PIKACHU["base_experience"]
    assert pokemon.height == PIKACHU["height"]
    assert pokemon.weight == PIKACHU["weight"]
    assert pokemon.is_default is True
    assert pokemon.species == NamedResource(
        name="pikachu", url="https://example.com/species/25"
    )


def test_pokemon_stats_and_types_keep_order():
    pokemon = Pokemon.from_dict(PIKACHU)
    assert [(s.stat.name, s.base_stat, s.effort) for s in pokemon.stats] == [
        (s["stat"]["name"], s["base_stat"], s["effort"]) for s in PIKACHU["stats"]
    ]
    assert pokemon.types == (
        PokemonType(slot=1, type=NamedResource(name="electric", url="u3")),
    )


def test_missing_fields_take_zero_values():
    pokemon = Pokemon.from_dict({"name": "ditto"})
    assert pokemon == Pokemon(name="ditto")
    assert pokemon.base_experience == 0
    assert pokemon.stats == ()


def test_null_fields_take_zero_values():
    pokemon = Pokemon.from_dict({"name": None, "height": None, "stats": None})
    assert pokemon == Pokemon()


def test_none_document_is_empty():
    assert Location.from_dict(None) == Location()


@pytest.mark.parametrize(
    "data",
    [
        {"height": "4"},
        {"height": 4.5},
        {"height": True},
        {"name": 7},
        {"stats": {"hp": 3}},
        {"is_default": 1},
        {"species": "pikachu"},
    ],
)
def test_wrong_types_raise_value_error(data):
    with pytest.raises(ValueError):
        Pokemon.from_dict(data)


def test_non_mapping_document_raises():
    with pytest.raises(ValueError):
        Pokemon.from_dict(["pikachu"])


def test_locations_page_from_dict():
    data = {
        "count": 1089,
        "next": "https://pokeapi.co/api/v2/location-area?offset=20&limit=20",
        "previous": None,
        "results": [
            {"name": "canalave-city-area", "url": "a"},
            {"name": "eterna-city-area", "url": "b"},
        ],
    }
    page = LocationsPage.from_dict(data)
    assert page.count == data["count"]
    assert page.next == data["next"]
    assert page.previous is None
    assert [r.name for r in page.results] == ["canalave-city-area", "eterna-city-area"]


def test_locations_page_without_links():
    page = LocationsPage.from_dict({"results": []})
    assert (page.next, page.previous, page.results) == (None, None, ())


def test_location_from_dict_reads_encounters():
    data = {
        "id": 1,
        "name": "canalave-city-area",
        "game_index": 1,
        "location": {"name": "canalave-city", "url": "loc"},
        "encounter_method_rates": [],
        "pokemon_encounters": [
            {"pokemon": {"name": "tentacool", "url": "p1"}, "version_details": []},
            {"pokemon": {"name": "tentacruel", "url": "p2"}},
        ],
    }
    location = Location.from_dict(data)
    assert location.name == data["name"]
    assert location.location.name == "canalave-city"
    assert [e.pokemon.name for e in location.pokemon_encounters] == [
        "tentacool",
        "tentacruel",
    ]


def test_encounter_and_stat_from_dict():
    encounter = PokemonEncounter.from_dict({"pokemon": {"name": "zubat", "url": "z"}})
    assert encounter.pokemon == NamedResource(name="zubat", url="z")
    stat = PokemonStat.from_dict({"base_stat": 40, "stat": {"name": "attack"}})
    assert (stat.base_stat, stat.effort, stat.stat.name) == (40, 0, "attack")