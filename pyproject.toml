[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deckgym"
version = "0.1.0"
description = "Card data tools for a Pokémon TCG Pocket simulator: attack lookup, card search and code generation."
requires-python = ">=3.10"
dependencies = []
keywords = ["pokemon", "tcg", "card-game", "cards", "codegen"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
deckgym-search = "deckgym.search:main"
deckgym-codegen = "deckgym.card_codegen:main"

[tool.hatch.build.targets.wheel]
packages = ["deckgym"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
