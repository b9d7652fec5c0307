"""Word supply: the bank of secret words and the session's memory of used ones."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable
import random

from mashumaro.mixins.json import DataClassJSONMixin

from ..errors import ConfigurationError

# Default word list shipped with the package
DEFAULT_WORDS_FILE = Path(__file__).parent / "words.txt"


def parse_word_lines(lines: Iterable[str]) -> list[str]:
    """Turn raw word-list lines into a clean bank.

    Entries are stripped, blank lines and ``#`` comments are skipped and
    duplicates are dropped (first occurrence wins).
    """
    bank: list[str] = []
    seen: set[str] = set()
    for line in lines:
        word = line.strip()
        if not word or word.startswith("#"):
            continue
        if word in seen:
            continue
        seen.add(word)
        bank.append(word)
    return bank


@dataclass
class WordSupply(DataClassJSONMixin):
    """
    Supplies one secret word per round without repeats.

    Every word shown is appended to ``used_words``, which only shrinks on
    an explicit ``reset()``. Once every word in the bank has been shown a
    new cycle begins at ``cycle_start`` and the whole bank is eligible
    again, so a round can always be started.
    """

    word_bank: list[str] = field(default_factory=list)
    used_words: list[str] = field(default_factory=list)  # In the order shown
    cycle_start: int = 0  # Index into used_words where this cycle begins
    cycles: int = 0  # Times the whole bank has been used up and recycled

    def __post_init__(self):
        """Validate the bank and initialize non-serialized state."""
        if not self.word_bank:
            raise ConfigurationError("the word bank is empty")
        self._rng: random.Random = random.Random()

    @classmethod
    def from_lines(
        cls, lines: Iterable[str], rng: random.Random | None = None
    ) -> "WordSupply":
        supply = cls(word_bank=parse_word_lines(lines))
        if rng is not None:
            supply.set_rng(rng)
        return supply

    @classmethod
    def from_file(
        cls, path: Path | str, rng: random.Random | None = None
    ) -> "WordSupply":
        """Load a plain text word list, one entry per line."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"cannot read word list {path}: {e}") from e
        return cls.from_lines(text.splitlines(), rng=rng)

    @classmethod
    def load_default(cls, rng: random.Random | None = None) -> "WordSupply":
        return cls.from_file(DEFAULT_WORDS_FILE, rng=rng)

    def set_rng(self, rng: random.Random) -> None:
        self._rng = rng

    def remaining(self) -> list[str]:
        """Words not yet shown in the current cycle, in bank order."""
        used = set(self.used_words[self.cycle_start :])
        return [w for w in self.word_bank if w not in used]

    def select_word(self) -> str:
        """Pick a fresh word and remember it.

        Raises:
            ConfigurationError: If the bank is empty.
        """
        if not self.word_bank:
            raise ConfigurationError("the word bank is empty")
        candidates = self.remaining()
        if not candidates:
            last_word = self.used_words[-1]
            self.cycle_start = len(self.used_words)
            self.cycles += 1
            candidates = list(self.word_bank)
            # Don't show the same word twice in a row across the cycle boundary
            if len(candidates) > 1 and last_word in candidates:
                candidates.remove(last_word)
        word = candidates[self._rng.randrange(len(candidates))]
        self.used_words.append(word)
        return word

    def reset(self) -> None:
        """Forget every word shown this session."""
        self.used_words.clear()
        self.cycle_start = 0
        self.cycles = 0
