"""
registry/characters.py — The thirty Tibetan consonants and their metadata.

Each consonant carries its standalone and subjoined Unicode forms, its
phonetic value as a root (and the alternate value a third-column root takes
under a prefix or superscript), its sound as a suffix, its column, and the
subscripts it accepts. The table is built once at import and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from core.constants import C, Column, Slot


# ──────────────────────────────────────────────────────────────
# Character dataclass
# ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Character:
    """
    One Tibetan consonant usable in any slot of a syllable.

    Attributes:
        tibetan: Standalone form (e.g. ``'ག'``).
        subjoined: Stacked form used beneath a superscript or as a subscript
            (e.g. ``'ྒ'``).
        phonetic: Latin romanisation when acting as root.
        phonetic_third_column: Alternate romanisation for a third-column root
            preceded by a prefix or superscript; empty means no override.
        phonetic_as_suffix: Latin string appended when acting as suffix.
        column: Alphabet column, drives prefix/superscript mutation.
        subscripts: Subscript letters this consonant accepts as root.
    """

    tibetan: str
    subjoined: str
    phonetic: str
    phonetic_third_column: str
    phonetic_as_suffix: str
    column: Column
    subscripts: tuple[str, ...] = ()

    def available_subscripts(self) -> tuple[str, ...]:
        """Return the subscript letters this consonant accepts, in menu order."""
        return self.subscripts


# ──────────────────────────────────────────────────────────────
# Alphabet table — 30 consonants in traditional order
# ──────────────────────────────────────────────────────────────
# Columns: tibetan, phonetic, third-column override, as suffix, column, subscripts

_RA, _LA, _YA = C.SUBSCRIPT_LETTERS

_F, _S, _T, _V = Column.FIRST, Column.SECOND, Column.THIRD, Column.FOURTH

_RAW: list[tuple[str, str, str, str, Column, tuple[str, ...]]] = [
    ("ཀ", "ka",   "",    "",   _F, (_RA, _LA, _YA)),
    ("ཁ", "kha",  "",    "",   _S, (_RA, _YA)),
    ("ག", "kha",  "ga",  "k",  _T, (_RA, _LA, _YA)),
    ("ང", "nga",  "",    "ng", _V, ()),

    ("ཅ", "ca",   "",    "",   _F, ()),
    ("ཆ", "cha",  "",    "",   _S, ()),
    ("ཇ", "cha",  "ja",  "",   _T, ()),
    ("ཉ", "nya",  "",    "",   _V, ()),

    ("ཏ", "ta",   "",    "",   _F, (_RA,)),
    ("ཐ", "tha",  "",    "",   _S, (_RA,)),
    ("ད", "tha",  "da",  "",   _T, (_RA,)),
    ("ན", "na",   "",    "n",  _V, ()),

    ("པ", "pa",   "",    "",   _F, (_RA, _YA)),
    ("ཕ", "pha",  "",    "",   _S, (_RA, _YA)),
    ("བ", "pha",  "ba",  "p",  _T, (_RA, _LA, _YA)),
    ("མ", "ma",   "",    "m",  _V, (_RA, _YA)),

    ("ཙ", "tsa",  "",    "",   _F, ()),
    ("ཚ", "tsha", "",    "",   _S, ()),
    ("ཛ", "tsha", "dza", "",   _T, ()),
    ("ཝ", "wa",   "",    "",   _V, ()),

    ("ཞ", "sha",  "",    "",   _T, ()),
    ("ཟ", "sa",   "",    "",   _T, (_LA,)),
    ("འ", "a",    "",    "",   _T, ()),
    ("ཡ", "ya",   "",    "",   _V, ()),

    ("ར", "ra",   "",    "r",  _V, (_LA,)),
    ("ལ", "la",   "",    "l",  _V, ()),
    ("ཤ", "sha",  "",    "",   _F, ()),
    ("ས", "sa",   "",    "",   _F, (_RA, _LA)),

    ("ཧ", "ha",   "",    "",   _F, (_RA,)),
    ("ཨ", "a",    "",    "",   _F, ()),
]

assert len(_RAW) == 30, f"Alphabet size is {len(_RAW)}, expected 30"


def _subjoined(tibetan: str) -> str:
    return chr(ord(tibetan) + C.SUBJOINED_OFFSET)


# ──────────────────────────────────────────────────────────────
# Build the table and lookup index
# ──────────────────────────────────────────────────────────────

_TABLE: tuple[Character, ...] = tuple(
    Character(
        tibetan=row[0],
        subjoined=_subjoined(row[0]),
        phonetic=row[1],
        phonetic_third_column=row[2],
        phonetic_as_suffix=row[3],
        column=row[4],
        subscripts=row[5],
    )
    for row in _RAW
)

_BY_TIBETAN: dict[str, Character] = {c.tibetan: c for c in _TABLE}

assert len(_BY_TIBETAN) == len(_TABLE), "Duplicate consonant in alphabet table"

_SLOT_LETTERS: dict[Slot, tuple[str, ...]] = {
    Slot.PREFIX: C.PREFIXES,
    Slot.SUPERSCRIPT: C.SUPERSCRIPTS,
    Slot.ROOT: tuple(c.tibetan for c in _TABLE),
    Slot.SUFFIX: C.SUFFIXES,
    Slot.SECOND_SUFFIX: C.SECOND_SUFFIXES,
}


# ──────────────────────────────────────────────────────────────
# Public functions
# ──────────────────────────────────────────────────────────────

def lookup_character(code_point: Union[str, int, None]) -> Optional[Character]:
    """
    Return the consonant whose standalone form matches *code_point*.

    Args:
        code_point: A one-character string or an integer scalar value.
            Strings longer than one character are matched on their first
            character, the way a form select delivers its value.

    Returns:
        The matching :class:`Character`, or ``None`` if unmatched or empty.
    """
    if code_point is None:
        return None
    if isinstance(code_point, int):
        if not 0 <= code_point <= 0x10FFFF:
            return None
        return _BY_TIBETAN.get(chr(code_point))
    if not code_point:
        return None
    return _BY_TIBETAN.get(code_point[0])


def all_characters() -> list[Character]:
    """Return every consonant in traditional alphabet order."""
    return list(_TABLE)


def character_map() -> dict[str, Character]:
    """Return a fresh dict of standalone form → :class:`Character`."""
    return dict(_BY_TIBETAN)


def available_subscripts_for(root: Character) -> frozenset[str]:
    """
    Return which of ra, la and ya may be subscribed to *root*.

    Args:
        root: The root consonant.

    Returns:
        A frozenset of subscript letters; empty if the root takes none.
    """
    return frozenset(root.available_subscripts())


def characters_for_slot(slot: Union[Slot, str]) -> list[Character]:
    """
    Return the consonants offered for *slot*, in menu order.

    The subscript menu depends on the root; use
    :func:`available_subscripts_for` for it.

    Args:
        slot: A :class:`Slot` or its string value (e.g. ``'prefix'``).

    Raises:
        ValueError: If *slot* is unknown or is the subscript slot.
    """
    slot = Slot(slot)
    if slot not in _SLOT_LETTERS:
        raise ValueError(f"Slot {slot.value!r} has no fixed menu; it depends on the root")
    return [_BY_TIBETAN[t] for t in _SLOT_LETTERS[slot]]
