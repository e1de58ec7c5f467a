"""Generate the card id enum module and the card data module from database.json."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

_HEADER = "# Generated from database.json by the card code generator. Do not edit manually."

_NAME_REPLACEMENTS = (
    (" ", ""),
    ("-", ""),
    (".", ""),
    ("'", ""),
    ("♀", "F"),
    ("♂", "M"),
    (":", ""),
    ("é", "e"),
)

_KINDS = ("Pokemon", "Trainer")


def _unwrap(card: Any) -> tuple[str, dict]:
    """Split a tagged card into its kind and body, checking its shape."""
    if not isinstance(card, dict) or len(card) != 1:
        raise ValueError("a card must be an object with a single 'Pokemon' or 'Trainer' key")
    ((kind, body),) = card.items()
    if kind not in _KINDS:
        raise ValueError(f"unknown card kind {kind!r}")
    if not isinstance(body, dict):
        raise ValueError(f"{kind} card body must be an object")
    return kind, body


def _require(body: Mapping[str, Any], key: str, what: str) -> Any:
    try:
        return body[key]
    except KeyError:
        raise ValueError(f"{what} is missing field {key!r}") from None


def card_id(card: Any) -> str:
    """Return the id of a tagged card, such as ``"A1 001"``."""
    kind, body = _unwrap(card)
    return str(_require(body, "id", f"{kind} card"))


def card_name(card: Any) -> str:
    """Return the name of a tagged card."""
    kind, body = _unwrap(card)
    return str(_require(body, "name", f"{kind} card"))


def enum_name(card: Any) -> str:
    """Return the enum member name for a card: its id and name with punctuation removed."""
    name = card_id(card) + card_name(card)
    for old, new in _NAME_REPLACEMENTS:
        name = name.replace(old, new)
    if name.endswith("ex"):
        name = name[:-2] + "Ex"
    return name


def build_card_maps(cards: Sequence[Any]) -> tuple[dict, dict]:
    """Map enum names to cards and card ids to enum names, in database order.

    A later card with the same enum name or id replaces the earlier value
    while keeping the earlier position.
    """
    card_map: dict[str, Any] = {}
    id_to_enum: dict[str, str] = {}
    for card in cards:
        name = enum_name(card)
        card_map[name] = card
        id_to_enum[card_id(card)] = name
    return card_map, id_to_enum


def _check_identifier(name: str) -> None:
    if not name.isidentifier():
        raise ValueError(f"enum name {name!r} is not a valid identifier")


def render_enums(card_map: Mapping[str, Any], id_to_enum: Mapping[str, str]) -> str:
    """Return the source of a module defining the ``CardId`` enum and its id lookup."""
    for name in card_map:
        _check_identifier(name)
    for name in id_to_enum.values():
        _check_identifier(name)

    lines = [
        _HEADER,
        "",
        "from enum import Enum",
        "",
        "",
        "class CardId(Enum):",
        '    """Every card in the database."""',
        "",
    ]
    lines.extend(f"    {name} = {name!r}" for name in card_map)
    if card_map:
        lines.append("")
    lines.extend(
        [
            "    @classmethod",
            "    def from_card_id(cls, card_id):",
            '        """Return the member for a card id such as "A1 001", or None."""',
            "        return _CARD_ID_MAP.get(card_id)",
            "",
            "",
            "_CARD_ID_MAP = {",
        ]
    )
    lines.extend(f"    {cid!r}: CardId.{name}," for cid, name in id_to_enum.items())
    lines.append("}")
    return "\n".join(lines) + "\n"


def _normalise_ability(ability: Any) -> Optional[dict]:
    if ability is None:
        return None
    if not isinstance(ability, dict):
        raise ValueError("ability must be an object")
    return {
        "title": _require(ability, "title", "ability"),
        "effect": _require(ability, "effect", "ability"),
    }


def _normalise_attack(attack: Any) -> dict:
    if not isinstance(attack, dict):
        raise ValueError("attack must be an object")
    return {
        "energy_required": list(_require(attack, "energy_required", "attack")),
        "title": _require(attack, "title", "attack"),
        "fixed_damage": _require(attack, "fixed_damage", "attack"),
        "effect": attack.get("effect"),
    }


def _normalise(card: Any) -> dict:
    """Return the card with every field present, in a fixed order."""
    kind, body = _unwrap(card)
    what = f"{kind} card"
    if kind == "Pokemon":
        fields = {
            "id": _require(body, "id", what),
            "name": _require(body, "name", what),
            "stage": _require(body, "stage", what),
            "evolves_from": body.get("evolves_from"),
            "hp": _require(body, "hp", what),
            "energy_type": _require(body, "energy_type", what),
            "ability": _normalise_ability(body.get("ability")),
            "attacks": [_normalise_attack(a) for a in _require(body, "attacks", what)],
            "weakness": body.get("weakness"),
            "retreat_cost": list(_require(body, "retreat_cost", what)),
            "rarity": _require(body, "rarity", what),
            "booster_pack": _require(body, "booster_pack", what),
        }
    else:
        fields = {
            "id": _require(body, "id", what),
            "name": _require(body, "name", what),
            "effect": _require(body, "effect", what),
            "rarity": _require(body, "rarity", what),
            "booster_pack": _require(body, "booster_pack", what),
            "trainer_card_type": _require(body, "trainer_card_type", what),
        }
    return {kind: fields}


def render_database(card_map: Mapping[str, Any]) -> str:
    """Return the source of a module holding every card's data, keyed by enum name."""
    for name in card_map:
        _check_identifier(name)

    lines = [
        _HEADER,
        "",
        "import copy",
        "",
        "from .card_ids import CardId",
        "",
        "_CARDS = {",
    ]
    lines.extend(f"    {name!r}: {_normalise(card)!r}," for name, card in card_map.items())
    lines.extend(
        [
            "}",
            "",
            "",
            "def get_card_by_enum(card_id: CardId) -> dict:",
            '    """Return a fresh copy of the data of the given card."""',
            "    return copy.deepcopy(_CARDS[card_id.name])",
        ]
    )
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the generated card id module, or the card data module with --database."""
    parser = argparse.ArgumentParser(
        prog="card_codegen",
        description="Generate the card id and card data modules from database.json.",
    )
    parser.add_argument(
        "--database",
        action="store_true",
        help="generate the card data module instead of the card id module",
    )
    parser.add_argument(
        "--input", default="database.json", help="path to the database file"
    )
    args = parser.parse_args(argv)

    try:
        with Path(args.input).open(encoding="utf-8") as handle:
            cards = json.load(handle)
        if not isinstance(cards, list):
            raise ValueError("database must be a JSON list of cards")
        card_map, id_to_enum = build_card_maps(cards)
        output = render_database(card_map) if args.database else render_enums(card_map, id_to_enum)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(output, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())