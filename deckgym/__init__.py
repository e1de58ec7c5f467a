"""Card data tools for Pokémon TCG Pocket: attack lookup, card search and code generation."""

__version__ = "0.1.0"
__all__ = ["attack_ids", "attack_table", "search", "card_codegen"]