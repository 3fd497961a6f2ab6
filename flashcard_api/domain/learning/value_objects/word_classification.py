"""
Classification enumerations for vocabulary flashcards.

Values are the integer codes used on the wire, in the database and in
CSV files, so they must never be renumbered.
"""

from enum import IntEnum


class _LabelledIntEnum(IntEnum):
    """IntEnum with a CamelCase wire label and a human description."""

    @property
    def label(self) -> str:
        """CamelCase name, e.g. ``SINO_JAPANESE`` -> ``SinoJapanese``."""
        return self.name.title().replace("_", "")

    @property
    def description(self) -> str:
        return ""


class WordType(_LabelledIntEnum):
    """Linguistic origin of a word."""

    NATIVE = 0
    SINO_JAPANESE = 1
    FOREIGN = 2
    MIXED = 3

    @property
    def description(self) -> str:
        return _WORD_TYPE_DESCRIPTIONS[self]


class DifficultyLevel(_LabelledIntEnum):
    """Learner level a word is aimed at."""

    BEGINNER = 1
    INTERMEDIATE = 2
    ADVANCED = 3
    EXPERT = 4

    @property
    def description(self) -> str:
        return _DIFFICULTY_DESCRIPTIONS[self]


class Category(_LabelledIntEnum):
    """Topic a word belongs to."""

    GENERAL = 0
    ANIMALS = 1
    COLORS = 2
    FOOD = 3
    NATURE = 4
    FAMILY = 5
    BODY = 6
    TRANSPORTATION = 7
    TIME = 8
    NUMBERS = 9
    VERBS = 10
    ADJECTIVES = 11


_WORD_TYPE_DESCRIPTIONS = {
    WordType.NATIVE: "Native Japanese word (mostly hiragana)",
    WordType.SINO_JAPANESE: "Sino-Japanese word (kanji with on'yomi reading)",
    WordType.FOREIGN: "Foreign loanword (mostly katakana)",
    WordType.MIXED: "Mixed word (hiragana and katakana)",
}

_DIFFICULTY_DESCRIPTIONS = {
    DifficultyLevel.BEGINNER: "Beginner level",
    DifficultyLevel.INTERMEDIATE: "Intermediate level",
    DifficultyLevel.ADVANCED: "Advanced level",
    DifficultyLevel.EXPERT: "Expert level",
}
