"""Word bank and per-session word selection."""

from .supply import DEFAULT_WORDS_FILE, WordSupply, parse_word_lines

__all__ = [
    "DEFAULT_WORDS_FILE",
    "WordSupply",
    "parse_word_lines",
]
