import json

import pytest

from deckgym.search import load_database, main, search_cards

BULBASAUR = {
    "Pokemon": {
        "id": "A1 001",
        "name": "Bulbasaur",
        "attacks": [{"title": "Vine Whip", "fixed_damage": 40}],
    }
}
IVYSAUR = {
    "Pokemon": {
        "id": "A1 002",
        "name": "Ivysaur",
        "attacks": [{"title": "Razor Leaf", "fixed_damage": 60}],
    }
}
POKEBALL = {"Trainer": {"id": "P-A 005", "name": "Poké Ball", "effect": "Draw"}}
CARDS = [BULBASAUR, IVYSAUR, POKEBALL]


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "database.json"
    path.write_text(json.dumps(CARDS), encoding="utf-8")
    return path


def test_name_match_is_case_insensitive():
    assert search_cards(CARDS, "BULBA") == [BULBASAUR]


def test_query_matches_substring_across_kinds():
    assert search_cards(CARDS, "saur") == [BULBASAUR, IVYSAUR]
    assert search_cards(CARDS, "ball") == [POKEBALL]


def test_attack_filter():
    assert search_cards(CARDS, "saur", attack="razor") == [IVYSAUR]
    assert search_cards(CARDS, "saur", attack="nothing") == []


def test_attack_filter_excludes_trainers():
    assert search_cards(CARDS, "ball", attack="") == []
    assert search_cards(CARDS, "ball") == [POKEBALL]


def test_simple_form():
    result = search_cards(CARDS, "", simple=True)
    assert result == [
        {"Pokemon": {"id": "A1 001", "name": "Bulbasaur"}},
        {"Pokemon": {"id": "A1 002", "name": "Ivysaur"}},
        {"Trainer": {"id": "P-A 005", "name": "Poké Ball"}},
    ]


def test_simple_form_missing_id_is_null():
    card = {"Pokemon": {"name": "Mew"}}
    assert search_cards([card], "mew", simple=True) == [
        {"Pokemon": {"id": None, "name": "Mew"}}
    ]


def test_cards_without_name_are_skipped():
    assert search_cards([{"Pokemon": {"id": "X"}}, {"Other": {}}], "") == []


def test_load_database_round_trip(db_path):
    assert load_database(db_path) == CARDS


def test_load_database_rejects_non_list(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('{"a": 1}', encoding="utf-8")
    with pytest.raises(ValueError):
        load_database(path)


def test_main_prints_matches(db_path, capsys):
    code = main(["ivy", "--database", str(db_path)])
    out = capsys.readouterr().out
    assert code == 0
    assert json.loads(out) == [IVYSAUR]


def test_main_simple_output(db_path, capsys):
    code = main(["ball", "-s", "-d", str(db_path)])
    out = capsys.readouterr().out
    assert code == 0
    assert json.loads(out) == [{"Trainer": {"id": "P-A 005", "name": "Poké Ball"}}]
    assert "Poké Ball" in out


def test_main_no_matches_prints_empty_list(db_path, capsys):
    assert main(["zzz", "-d", str(db_path)]) == 0
    assert capsys.readouterr().out.strip() == "[]"


def test_main_missing_file(tmp_path, capsys):
    code = main(["x", "-d", str(tmp_path / "missing.json")])
    assert code == 1
    assert "Error" in capsys.readouterr().err