"""
core/constants.py — Orthographic constants for the Tibetan syllable composer.

Enums for letter columns and tones, the combining marks used in phonetic
output, and the letter sets that may occupy each slot of a syllable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


# ──────────────────────────────────────────────────────────────
# Enums
# ──────────────────────────────────────────────────────────────

class Column(Enum):
    """Traditional column of a consonant in the Tibetan alphabet table."""

    FIRST = "first"
    SECOND = "second"
    THIRD = "third"
    FOURTH = "fourth"


class Tone(Enum):
    """Tone derived while transducing a syllable. Never stored on data."""

    NONE = "none"
    HIGH = "high"
    LOW = "low"


class Slot(Enum):
    """The six positions a consonant may occupy in a syllable."""

    PREFIX = "prefix"
    SUPERSCRIPT = "superscript"
    ROOT = "root"
    SUBSCRIPT = "subscript"
    SUFFIX = "suffix"
    SECOND_SUFFIX = "second_suffix"


# ──────────────────────────────────────────────────────────────
# Frozen constants dataclass
# ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class TibetanConstants:
    """
    Frozen holder for the composer's fixed letter sets and marks.

    Use the class attributes directly — do not instantiate.

    Example::

        from core.constants import C

        "ལ" in C.VOWEL_ALTERING_SUFFIXES   # True
        C.HIGH_TONE_MARK                   # '\\u0301'
    """

    # ── Combining marks (phonetic output) ─────────────────────
    DIAERESIS_MARK: ClassVar[str] = "\u0308"
    """Combining diaeresis, written after the root vowel."""

    HIGH_TONE_MARK: ClassVar[str] = "\u0301"
    """Combining acute accent marking a high tone."""

    LOW_TONE_MARK: ClassVar[str] = "\u0300"
    """Combining grave accent marking a low tone."""

    # ── Slot letter sets (menu order) ─────────────────────────
    PREFIXES: ClassVar[tuple[str, ...]] = ("ག", "ད", "བ", "མ", "འ")
    SUPERSCRIPTS: ClassVar[tuple[str, ...]] = ("ར", "ལ", "ས")
    SUBSCRIPT_LETTERS: ClassVar[tuple[str, ...]] = ("ར", "ལ", "ཡ")
    SUFFIXES: ClassVar[tuple[str, ...]] = (
        "ག", "ང", "ད", "ན", "བ", "མ", "འ", "ར", "ལ", "ས",
    )
    SECOND_SUFFIXES: ClassVar[tuple[str, ...]] = ("ས", "ད")

    VOWEL_ALTERING_SUFFIXES: ClassVar[frozenset[str]] = frozenset({"ད", "ན", "ལ", "ས"})
    """Suffixes that put a diaeresis on the root vowel."""

    # ── Display ───────────────────────────────────────────────
    PLACEHOLDER: ClassVar[str] = "ཨ"
    """Shown in the Tibetan display before a root is chosen."""

    SUBJOINED_OFFSET: ClassVar[int] = 0x50
    """Distance from a consonant (U+0F40 block) to its subjoined form (U+0F90 block)."""


#: Convenience alias — ``from core.constants import C``
C = TibetanConstants
