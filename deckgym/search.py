"""Search a card database file by card name and, optionally, attack name."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional, Sequence


def load_database(path) -> list:
    """Read a JSON list of cards from ``path``."""
    with Path(path).open(encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, list):
        raise ValueError("database must be a JSON list of cards")
    return data


def _has_matching_attack(pokemon: dict, attack_query: str) -> bool:
    attacks = pokemon.get("attacks")
    if not isinstance(attacks, list):
        return False
    return any(
        isinstance(attack, dict)
        and isinstance(attack.get("title"), str)
        and attack_query in attack["title"].lower()
        for attack in attacks
    )


def _simplified(kind: str, body: dict, name: str) -> dict:
    return {kind: {"id": body.get("id"), "name": name}}


def search_cards(
    cards: Sequence[Any],
    query: str,
    attack: Optional[str] = None,
    simple: bool = False,
) -> list:
    """Return the cards whose names contain ``query``, ignoring case.

    With ``attack`` given, only Pokemon cards having an attack whose title
    contains it are returned; trainer cards are then left out. With
    ``simple``, each match is reduced to its id and name.
    """
    query_lower = query.lower()
    attack_lower = attack.lower() if attack is not None else None
    matches = []

    for card in cards:
        if not isinstance(card, dict):
            continue
        if "Pokemon" in card:
            pokemon = card["Pokemon"]
            if not isinstance(pokemon, dict):
                continue
            name = pokemon.get("name")
            if not isinstance(name, str) or query_lower not in name.lower():
                continue
            if attack_lower is not None and not _has_matching_attack(pokemon, attack_lower):
                continue
            matches.append(_simplified("Pokemon", pokemon, name) if simple else card)
        elif "Trainer" in card:
            if attack_lower is not None:
                continue
            trainer = card["Trainer"]
            if not isinstance(trainer, dict):
                continue
            name = trainer.get("name")
            if not isinstance(name, str) or query_lower not in name.lower():
                continue
            matches.append(_simplified("Trainer", trainer, name) if simple else card)

    return matches


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Search the database and print the matches as pretty JSON."""
    parser = argparse.ArgumentParser(
        prog="search",
        description="Search for Pokémon cards by name and optionally by attack",
    )
    parser.add_argument("query", help="text to match against card names (case-insensitive)")
    parser.add_argument(
        "-a", "--attack", help="attack name to filter Pokemon cards (case-insensitive)"
    )
    parser.add_argument(
        "-s", "--simple", action="store_true", help="show only name and id"
    )
    parser.add_argument(
        "-d", "--database", default="database.json", help="path to the database file"
    )
    args = parser.parse_args(argv)

    try:
        cards = load_database(args.database)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    matches = search_cards(cards, args.query, args.attack, args.simple)
    print(json.dumps(matches, indent=2, ensure_ascii=False, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())