"""
String providers: the interchangeable sources of tree keys and values.

All providers share one operation, ``next_string()``, and draw every random
choice from the RandomSource they were built with.
"""

import logging
import string
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Sequence, Union

from bencomp.core.config import ShapeConfig, StringSourceKind
from bencomp.core.errors import GenerationError
from bencomp.core.random_source import RandomSource
from bencomp.core.ranges import IntRange

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_lowercase


class StringProvider(ABC):
    """Produces key/value strings on demand."""

    @abstractmethod
    def next_string(self) -> str:
        raise NotImplementedError


class RandomStrings(StringProvider):
    """Fresh random strings with a length drawn from ``length`` on every call."""

    def __init__(self, length: IntRange, rng: RandomSource, alphabet: str = ALPHABET):
        if not alphabet:
            raise GenerationError("alphabet cannot be empty")
        self.length = length
        self.rng = rng
        self.alphabet = alphabet

    def next_string(self) -> str:
        n = self.length.draw(self.rng)
        indices = self.rng.randrange_many(0, len(self.alphabet), n)
        return "".join(self.alphabet[i] for i in indices)


class DictionaryStrings(StringProvider):
    """Draws uniformly, with replacement, from a fixed pool of entries."""

    def __init__(self, entries: Sequence[str], rng: RandomSource):
        if not entries:
            raise GenerationError("dictionary has no entries")
        self.entries: List[str] = list(entries)
        self.rng = rng

    def next_string(self) -> str:
        return self.entries[self.rng.randrange(0, len(self.entries))]

    def __len__(self) -> int:
        return len(self.entries)


class GeneratedDictionary(DictionaryStrings):
    """Pool of ``size`` random strings built once at construction."""

    def __init__(self, size: int, length: IntRange, rng: RandomSource):
        if size < 1:
            raise GenerationError(f"dictionary size must be 1 or greater, got {size}")
        words = RandomStrings(length, rng)
        super().__init__([words.next_string() for _ in range(size)], rng)


class FileDictionary(DictionaryStrings):
    """Pool read from a text file, one entry per non-empty line.

    Entries keep their literal length; the configured string length does not
    apply.
    """

    def __init__(self, path: Union[str, Path], rng: RandomSource):
        self.path = Path(path)
        super().__init__(self._read_entries(self.path), rng)

    @staticmethod
    def _read_entries(path: Path) -> List[str]:
        try:
            with path.open("r", encoding="utf-8", errors="replace") as handle:
                entries = [line.rstrip("\r\n") for line in handle]
        except OSError as e:
            raise GenerationError(f"error reading dictionary file {path}: {e}") from e

        entries = [entry for entry in entries if entry]
        if not entries:
            raise GenerationError(f"dictionary file {path} has no entries")
        return entries


def build_string_provider(config: ShapeConfig, rng: RandomSource) -> StringProvider:
    """Create the provider selected by ``config.string_source``.

    Raises:
        GenerationError: If the provider cannot be set up (e.g. the
            dictionary file disappeared after validation)
    """
    source = config.string_source

    if source.kind == StringSourceKind.FILE_DICTIONARY:
        provider: StringProvider = FileDictionary(source.dict_file, rng)
        logger.info(f"Loaded {len(provider)} dictionary entries from {source.dict_file}")
    elif source.kind == StringSourceKind.GENERATED_DICTIONARY:
        provider = GeneratedDictionary(source.dict_size, config.string_length, rng)
        logger.info(f"Generated dictionary of {source.dict_size} strings (length {config.string_length})")
    else:
        provider = RandomStrings(config.string_length, rng)
        logger.info(f"Using random strings (length {config.string_length})")

    return provider
