"""
engine/syllable.py — The Syllable value consumed by the composer and transducer.

A syllable borrows its characters from the registry; it owns no character
data and lives only for a single composition call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from registry.characters import Character, lookup_character


class NoRootError(ValueError):
    """Raised when a :class:`Syllable` is constructed without a root."""

    def __init__(self) -> None:
        super().__init__("A syllable requires a root character")


@dataclass(frozen=True)
class Syllable:
    """
    One Tibetan syllable, described slot by slot.

    Attributes:
        root: The mandatory root consonant.
        prefix: Optional prefix written before the stack.
        superscript: Optional letter stacked above the root.
        subscript: Optional ra, la or ya stacked below the root.
        suffix: Optional first suffix.
        second_suffix: Optional second suffix (orthographic only).
    """

    root: Character
    prefix: Optional[Character] = None
    superscript: Optional[Character] = None
    subscript: Optional[Character] = None
    suffix: Optional[Character] = None
    second_suffix: Optional[Character] = None

    def __post_init__(self) -> None:
        if self.root is None:
            raise NoRootError()


_Scalar = Union[str, int, None]


def build_syllable(
    root: _Scalar,
    prefix: _Scalar = None,
    superscript: _Scalar = None,
    subscript: _Scalar = None,
    suffix: _Scalar = None,
    second_suffix: _Scalar = None,
) -> Optional[Syllable]:
    """
    Resolve scalar selections against the registry and build a syllable.

    Unknown or empty optional slots resolve to absent. Whether the
    combination is attested is not checked.

    Args:
        root: Standalone form (or scalar value) of the root consonant.
        prefix, superscript, subscript, suffix, second_suffix: Optional
            selections for the remaining slots.

    Returns:
        A :class:`Syllable`, or ``None`` when no known root was given.
    """
    root_char = lookup_character(root)
    if root_char is None:
        return None
    return Syllable(
        root=root_char,
        prefix=lookup_character(prefix),
        superscript=lookup_character(superscript),
        subscript=lookup_character(subscript),
        suffix=lookup_character(suffix),
        second_suffix=lookup_character(second_suffix),
    )
