import ast
import copy
import json

import pytest

from deckgym.card_codegen import (
    build_card_maps,
    card_id,
    card_name,
    enum_name,
    main,
    render_database,
    render_enums,
)

BULBASAUR = {
    "Pokemon": {
        "id": "A1 001",
        "name": "Bulbasaur",
        "stage": 0,
        "evolves_from": None,
        "hp": 70,
        "energy_type": "Grass",
        "ability": None,
        "attacks": [
            {
                "energy_required": ["Grass", "Colorless"],
                "title": "Vine Whip",
                "fixed_damage": 40,
                "effect": None,
            }
        ],
        "weakness": "Fire",
        "retreat_cost": ["Colorless"],
        "rarity": "◇",
        "booster_pack": "Genetic Apex (A1) Mewtwo",
    }
}

CENTER_LADY = {
    "Trainer": {
        "id": "A2b 070",
        "name": "Pokémon Center Lady",
        "effect": "Heal 30 damage from 1 of your Pokémon, and it recovers from all Special Conditions.",
        "rarity": "◊◊",
        "booster_pack": "Shining Revelry (A2b)",
        "trainer_card_type": "Supporter",
    }
}


def _pokemon(cid, name):
    card = copy.deepcopy(BULBASAUR)
    card["Pokemon"]["id"] = cid
    card["Pokemon"]["name"] = name
    return card


def _assigned_value(source, target):
    tree = ast.parse(source)
    for node in tree.body:
        if isinstance(node, ast.Assign) and any(
            isinstance(t, ast.Name) and t.id == target for t in node.targets
        ):
            return node.value
    raise AssertionError(f"{target} not assigned")


def _enum_members(source):
    tree = ast.parse(source)
    cls = next(n for n in tree.body if isinstance(n, ast.ClassDef) and n.name == "CardId")
    return [
        n.targets[0].id
        for n in cls.body
        if isinstance(n, ast.Assign) and isinstance(n.targets[0], ast.Name)
    ]


def test_card_id_and_name_of_pokemon_and_trainer():
    assert card_id(BULBASAUR) == "A1 001"
    assert card_name(BULBASAUR) == "Bulbasaur"
    assert card_id(CENTER_LADY) == "A2b 070"
    assert card_name(CENTER_LADY) == "Pokémon Center Lady"


@pytest.mark.parametrize(
    "card",
    [
        {"Energy": {"id": "X", "name": "Y"}},
        {},
        {"Pokemon": {"id": "A1 001"}, "Trainer": {"id": "A1 002"}},
        ["Pokemon"],
        {"Pokemon": "Bulbasaur"},
    ],
)
def test_malformed_cards_raise(card):
    with pytest.raises(ValueError):
        enum_name(card)


def test_missing_name_raises():
    with pytest.raises(ValueError):
        card_name({"Pokemon": {"id": "A1 001"}})


@pytest.mark.parametrize(
    "cid, name, expected",
    [
        ("A1 001", "Bulbasaur", "A1001Bulbasaur"),
        ("A2 110", "Darkrai ex", "A2110DarkraiEx"),
        ("A2 119", "Dialga ex", "A2119DialgaEx"),
        ("A1a 006", "Serperior", "A1a006Serperior"),
        ("A2b 001", "Weedle", "A2b001Weedle"),
    ],
)
def test_enum_name_matches_known_card_ids(cid, name, expected):
    assert enum_name(_pokemon(cid, name)) == expected


def test_enum_name_replaces_special_characters():
    assert enum_name(CENTER_LADY) == "A2b070PokemonCenterLady"
    assert enum_name(_pokemon("P-A 001", "Nidoran♂")) == "PA001NidoranM"
    assert enum_name(_pokemon("A1 999", "Mr. Mime's: Nidoran♀")) == "A1999MrMimesNidoranF"


def test_build_card_maps_keeps_database_order():
    weezing = _pokemon("A1 177", "Weezing")
    card_map, id_to_enum = build_card_maps([BULBASAUR, CENTER_LADY, weezing])
    assert list(card_map) == ["A1001Bulbasaur", "A2b070PokemonCenterLady", "A1177Weezing"]
    assert card_map["A1177Weezing"] == weezing
    assert id_to_enum == {
        "A1 001": "A1001Bulbasaur",
        "A2b 070": "A2b070PokemonCenterLady",
        "A1 177": "A1177Weezing",
    }


def test_build_card_maps_later_duplicate_replaces_value_in_place():
    first = _pokemon("A1 001", "Bulbasaur")
    other = _pokemon("A1 053", "Squirtle")
    second = copy.deepcopy(first)
    second["Pokemon"]["hp"] = 80
    card_map, id_to_enum = build_card_maps([first, other, second])
    assert list(card_map) == ["A1001Bulbasaur", "A1053Squirtle"]
    assert card_map["A1001Bulbasaur"]["Pokemon"]["hp"] == 80
    assert len(id_to_enum) == 2


def test_render_enums_lists_members_and_id_map():
    squirtle = _pokemon("A1 053", "Squirtle")
    card_map, id_to_enum = build_card_maps([BULBASAUR, squirtle, CENTER_LADY])
    source = render_enums(card_map, id_to_enum)

    assert _enum_members(source) == list(card_map)

    id_map = _assigned_value(source, "_CARD_ID_MAP")
    keys = [k.value for k in id_map.keys]
    values = [v.attr for v in id_map.values]
    assert dict(zip(keys, values)) == id_to_enum
    assert all(v.value.id == "CardId" for v in id_map.values)


def test_render_enums_of_empty_database_is_valid():
    source = render_enums({}, {})
    assert _enum_members(source) == []
    assert _assigned_value(source, "_CARD_ID_MAP").keys == []


def test_render_rejects_invalid_identifier():
    bad = _pokemon("A1 001", "Farfetch(d)")
    card_map, id_to_enum = build_card_maps([bad])
    with pytest.raises(ValueError):
        render_enums(card_map, id_to_enum)
    with pytest.raises(ValueError):
        render_database(card_map)


def test_render_database_round_trips_card_data():
    card_map, _ = build_card_maps([BULBASAUR, CENTER_LADY])
    source = render_database(card_map)
    cards = ast.literal_eval(_assigned_value(source, "_CARDS"))
    assert cards == {
        "A1001Bulbasaur": BULBASAUR,
        "A2b070PokemonCenterLady": CENTER_LADY,
    }
    tree = ast.parse(source)
    functions = [n.name for n in tree.body if isinstance(n, ast.FunctionDef)]
    assert functions == ["get_card_by_enum"]


def test_render_database_fills_missing_optional_fields():
    card = copy.deepcopy(BULBASAUR)
    for key in ("evolves_from", "ability", "weakness"):
        del card["Pokemon"][key]
    del card["Pokemon"]["attacks"][0]["effect"]
    card["Pokemon"]["ability"] = {"title": "Powder Heal", "effect": "Heal 20 damage."}

    source = render_database({"A1001Bulbasaur": card})
    body = ast.literal_eval(_assigned_value(source, "_CARDS"))["A1001Bulbasaur"]["Pokemon"]
    assert body["evolves_from"] is None
    assert body["weakness"] is None
    assert body["attacks"][0]["effect"] is None
    assert body["ability"] == {"title": "Powder Heal", "effect": "Heal 20 damage."}
    assert list(body) == list(BULBASAUR["Pokemon"])


def test_render_database_missing_required_field_raises():
    card = copy.deepcopy(CENTER_LADY)
    del card["Trainer"]["trainer_card_type"]
    with pytest.raises(ValueError):
        render_database({"A2b070PokemonCenterLady": card})


def test_main_prints_enum_module(tmp_path, capsys):
    path = tmp_path / "database.json"
    path.write_text(json.dumps([BULBASAUR, CENTER_LADY]), encoding="utf-8")
    assert main(["--input", str(path)]) == 0
    out = capsys.readouterr().out
    assert _enum_members(out) == ["A1001Bulbasaur", "A2b070PokemonCenterLady"]


def test_main_prints_database_module(tmp_path, capsys):
    path = tmp_path / "database.json"
    path.write_text(json.dumps([BULBASAUR]), encoding="utf-8")
    assert main(["--database", "--input", str(path)]) == 0
    out = capsys.readouterr().out
    assert ast.literal_eval(_assigned_value(out, "_CARDS")) == {"A1001Bulbasaur": BULBASAUR}


def test_main_missing_file_fails(tmp_path, capsys):
    assert main(["--input", str(tmp_path / "absent.json")]) == 1
    assert "Error" in capsys.readouterr().err


def test_main_non_list_database_fails(tmp_path, capsys):
    path = tmp_path / "database.json"
    path.write_text(json.dumps({"Pokemon": {}}), encoding="utf-8")
    assert main(["--input", str(path)]) == 1
    assert capsys.readouterr().out == ""