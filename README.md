# deckgym

Card data tools for Pokémon TCG Pocket. The package has three parts:

- **Attack lookup**: `deckgym.attack_ids.AttackId` is an enumeration of the attacks that have
  special effects. Each member's value is its own name. `deckgym.attack_table.attack_id_for(pokemon_id, index)`
  returns the `AttackId` for a card id such as `"A1 003"` and an attack index. Full-art and
  reprinted cards map to the same attack as the regular card. When no special attack is
  recorded it returns `None`.
- **Card search** (`deckgym.search`): finds cards by name in a `database.json` card list.
- **Code generation** (`deckgym.card_codegen`): turns a `database.json` card list into Python
  source for a card-id enumeration and a card data module.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The card list

Both tools read a JSON list. Each entry is an object with one key, `"Pokemon"` or `"Trainer"`,
and that key holds the card's fields (`id`, `name`, and so on).

## Searching cards

```
deckgym-search pikachu
deckgym-search pikachu --attack thunder
deckgym-search professor --simple --database path/to/database.json
```

- The query is matched case-insensitively as a substring of card names.
- `-a/--attack TEXT` keeps only Pokémon that have an attack whose title contains `TEXT`.
  Matching ignores case. Trainer cards are left out when this option is used.
- `-s/--simple` reduces each match to its `id` and `name`.
- `-d/--database PATH` sets the file to read. It defaults to `database.json`.

The matches are printed as indented JSON with sorted keys. If the file cannot be read, or does
not hold a JSON list, an error goes to stderr and the exit status is 1.

In code:

```python
from deckgym.search import load_database, search_cards

cards = load_database("database.json")
matches = search_cards(cards, "bulba", attack="vine", simple=True)
```

`load_database` raises `ValueError` when the file does not hold a JSON list. `search_cards`
skips entries that are not of the expected shape.

## Generating card code

```
deckgym-codegen                 # prints the card-id module
deckgym-codegen --database      # prints the card data module
deckgym-codegen --input cards.json
```

The input defaults to `database.json`.

- The card-id module defines a `CardId` enumeration with one member per card. It also has a
  `CardId.from_card_id(card_id)` lookup, which returns `None` for an unknown id.
- The card data module imports `CardId` from a sibling `card_ids` module. It defines
  `get_card_by_enum(card_id)`, which returns a fresh copy of that card's data as a dict. Every
  field is filled in, and absent optional fields are `None`.

The same steps are available in code:

- `card_id(card)` and `card_name(card)` return a card's id and name.
- `enum_name(card)` joins the id and name into the identifier. It removes spaces, `-`, `.`,
  `'` and `:`, writes `♀`/`♂` as `F`/`M` and `é` as `e`, and turns a trailing `ex` into `Ex`.
  For example, `"A1 001"` with `"Bulbasaur"` gives `A1001Bulbasaur`.
- `build_card_maps(cards)` returns two dicts in input order: enum name to card, and card id to
  enum name. When two cards share an enum name or id, the later card's value replaces the
  earlier one, and the entry keeps the earlier position.
- `render_enums(card_map, id_to_enum)` and `render_database(card_map)` return the generated
  source as text.

A malformed card, or an enum name that is not a valid Python identifier, raises `ValueError`.
The command reports these errors on stderr and exits with status 1.

## What this package does not do

The package has no game engine. It does not simulate matches, and it has no players, deck
loading or interactive screen. It cannot report which cards are fully implemented. It works
only with card data: it looks up attack effects, searches card lists and generates card modules.