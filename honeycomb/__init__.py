"""Word search over hexagonal honeycomb grids.

This package exposes the public API surface via:

- ``honeycomb.engine.grid.build_grid``: builds and links a honeycomb from ring text.
- ``honeycomb.engine.search.WordSearcher``: answers path queries for dictionary words.
- ``honeycomb.data.dictionary.WordList``: loads and filters candidate words.
"""

from .engine.grid import GridConfig, HoneycombGrid, build_grid
from .engine.search import WordSearcher, find_words, search
from .data.dictionary import DictionaryConfig, WordList

__all__ = [
    "GridConfig",
    "HoneycombGrid",
    "build_grid",
    "WordSearcher",
    "find_words",
    "search",
    "DictionaryConfig",
    "WordList",
]

__version__ = "0.1.0"
