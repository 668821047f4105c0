"""Dictionary loading and filtering."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Tuple

from ..io.readers import read_dictionary
from ..utils.logger import get_logger
from .normalization import clean_word


LOGGER = get_logger(__name__)


@dataclass
class DictionaryConfig:
    """Configuration for dictionary loading and filtering."""

    path: Path | str
    normalize: bool = False
    min_length: int = 1
    skip_comments: bool = False


class WordList:
    """Ordered, read-only sequence of candidate words."""

    def __init__(self, words: Iterable[str]) -> None:
        self._words: Tuple[str, ...] = tuple(words)

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        *,
        normalize: bool = False,
        min_length: int = 1,
        skip_comments: bool = False,
    ) -> "WordList":
        """Filter raw lines into candidate words, preserving order.

        Empty entries never reach the search engine.
        """

        words = []
        skipped = 0
        for line in lines:
            word = line.strip()
            if skip_comments and word.startswith("#"):
                continue
            if normalize:
                word = clean_word(word)
            if not word or len(word) < min_length:
                skipped += 1
                continue
            words.append(word)
        if skipped:
            LOGGER.debug("Skipped %s empty or short dictionary entries", skipped)
        return cls(words)

    @classmethod
    def from_config(cls, config: DictionaryConfig) -> "WordList":
        words = cls.from_lines(
            read_dictionary(config.path),
            normalize=config.normalize,
            min_length=max(1, config.min_length),
            skip_comments=config.skip_comments,
        )
        LOGGER.info("Loaded %s dictionary words from %s", len(words), config.path)
        return words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words
