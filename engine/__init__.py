"""
engine — Syllable composition and phonetic transliteration.

Both renderings are pure functions of an immutable :class:`Syllable`;
callers resolve characters through the registry, check that a root is
present, then call :func:`compose_unicode` and :func:`compose_phonetic`.
"""

from __future__ import annotations

from dataclasses import dataclass

from engine.composer import compose_unicode
from engine.phonetic import PhoneticResult, compose_phonetic, transduce
from engine.syllable import NoRootError, Syllable, build_syllable
from registry.characters import available_subscripts_for, lookup_character


@dataclass(frozen=True)
class Rendering:
    """Both renderings of one syllable."""

    tibetan: str
    phonetic: str


def render(syllable: Syllable) -> Rendering:
    """Compose the Tibetan and phonetic renderings of *syllable*."""
    return Rendering(
        tibetan=compose_unicode(syllable),
        phonetic=compose_phonetic(syllable),
    )


__all__ = [
    "NoRootError",
    "PhoneticResult",
    "Rendering",
    "Syllable",
    "available_subscripts_for",
    "build_syllable",
    "compose_phonetic",
    "compose_unicode",
    "lookup_character",
    "render",
    "transduce",
]
