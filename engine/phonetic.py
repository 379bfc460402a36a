"""
engine/phonetic.py — Latin phonetic transliteration of a syllable.

The transducer works on a (root_sound, tone) pair seeded from the root's
phonetic value and runs four stages in order:

1. prefix/superscript mutation (third-column override, fourth-column high tone)
2. subscript cluster (overrides stage 1 when it fires)
3. suffix (vowel diaeresis and trailing sound)
4. assembly with combining marks

The second suffix is orthographic only and never affects the output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from core.constants import C, Column, Tone
from engine.syllable import Syllable

logger = logging.getLogger(__name__)

_RA, _LA, _YA = C.SUBSCRIPT_LETTERS

_TONE_MARKS: dict[Tone, str] = {
    Tone.NONE: "",
    Tone.HIGH: C.HIGH_TONE_MARK,
    Tone.LOW: C.LOW_TONE_MARK,
}


@dataclass(frozen=True)
class PhoneticResult:
    """
    Intermediate outcome of the rule cascade, before assembly.

    Attributes:
        root_sound: Root romanisation after prefix and subscript rules.
        tone: Derived tone.
        diaeresis: Whether a vowel-altering suffix is present.
        suffix_sound: Trailing sound contributed by the suffix.
    """

    root_sound: str
    tone: Tone
    diaeresis: bool
    suffix_sound: str

    def render(self) -> str:
        """Assemble the final Latin string with combining marks."""
        marks = (C.DIAERESIS_MARK if self.diaeresis else "") + _TONE_MARKS[self.tone]
        return self.root_sound + marks + self.suffix_sound


# ──────────────────────────────────────────────────────────────
# Stage 2 — subscript clusters
# ──────────────────────────────────────────────────────────────
# Each handler receives (syllable, root_sound, tone) and returns the new pair.

_Cluster = Callable[[Syllable, str, Tone], tuple[str, Tone]]

_RA_UNASPIRATED = frozenset({"ཀ", "ཏ", "པ"})
_RA_ASPIRATED = frozenset({"ཁ", "ཐ", "ཕ"})
_RA_VOICED = frozenset({"ག", "ད", "བ"})

_YA_IRREGULAR: dict[str, tuple[str, Tone]] = {
    "མ": ("nya", Tone.LOW),
    "པ": ("ca", Tone.HIGH),
    "ཕ": ("cha", Tone.HIGH),
    "བ": ("cha", Tone.LOW),
}


def _ra_cluster(syllable: Syllable, root_sound: str, tone: Tone) -> tuple[str, Tone]:
    root = syllable.root.tibetan
    if root in _RA_UNASPIRATED:
        return "tra", Tone.HIGH
    if root in _RA_ASPIRATED:
        return "thra", Tone.HIGH
    if root in _RA_VOICED:
        superscript = syllable.superscript
        if superscript is not None and superscript.tibetan == "ས":
            return "dra", Tone.LOW
        return "thra", Tone.LOW
    if root == "ཧ":
        return "hra", tone
    return root_sound, tone


def _la_cluster(syllable: Syllable, root_sound: str, tone: Tone) -> tuple[str, Tone]:
    if syllable.root.tibetan == "ཟ":
        return "da", Tone.LOW
    return "la", Tone.HIGH


def _ya_cluster(syllable: Syllable, root_sound: str, tone: Tone) -> tuple[str, Tone]:
    irregular = _YA_IRREGULAR.get(syllable.root.tibetan)
    if irregular is not None:
        return irregular
    return insert_ya_glide(root_sound), tone


_CLUSTERS: dict[str, _Cluster] = {
    _RA: _ra_cluster,
    _LA: _la_cluster,
    _YA: _ya_cluster,
}

assert set(_CLUSTERS) == set(C.SUBSCRIPT_LETTERS), "Every subscript letter needs a cluster rule"


def insert_ya_glide(root_sound: str) -> str:
    """
    Put a ``y`` glide before the final vowel of *root_sound*.

    The final character is dropped and ``"ya"`` appended, so ``"kha"``
    becomes ``"khya"`` and ``"ka"`` becomes ``"kya"``.
    """
    return root_sound[:-1] + "ya"


# ──────────────────────────────────────────────────────────────
# Public API
# ──────────────────────────────────────────────────────────────

def transduce(syllable: Syllable) -> PhoneticResult:
    """
    Run the rule cascade over *syllable* without assembling the string.

    Args:
        syllable: A syllable with a root.

    Returns:
        The :class:`PhoneticResult` holding each stage's outcome.
    """
    root = syllable.root
    root_sound = root.phonetic
    tone = Tone.NONE

    # Stage 1: only presence matters, not which prefix or superscript
    if syllable.prefix is not None or syllable.superscript is not None:
        if root.column is Column.THIRD and root.phonetic_third_column:
            root_sound = root.phonetic_third_column
        if root.column is Column.FOURTH:
            tone = Tone.HIGH

    # Stage 2 overrides stage 1 when it fires
    if syllable.subscript is not None:
        cluster = _CLUSTERS.get(syllable.subscript.tibetan)
        if cluster is not None:
            root_sound, tone = cluster(syllable, root_sound, tone)

    # Stage 3
    diaeresis = False
    suffix_sound = ""
    if syllable.suffix is not None:
        diaeresis = syllable.suffix.tibetan in C.VOWEL_ALTERING_SUFFIXES
        suffix_sound = syllable.suffix.phonetic_as_suffix

    result = PhoneticResult(
        root_sound=root_sound,
        tone=tone,
        diaeresis=diaeresis,
        suffix_sound=suffix_sound,
    )
    logger.debug("Transduced %s → %s", root.tibetan, result)
    return result


def compose_phonetic(syllable: Syllable) -> str:
    """
    Render *syllable* as a Latin phonetic string.

    Example::

        compose_phonetic(build_syllable("ཏ", subscript="ར"))
        # → 'tra\\u0301'  (displayed as 'trá')
    """
    return transduce(syllable).render()
