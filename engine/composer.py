"""
engine/composer.py — Unicode rendering of a syllable.

Superscript, root and subscript form one vertical stack; prefix and
suffixes are full-size letters before and after it.
"""

from __future__ import annotations

from engine.syllable import Syllable


def compose_unicode(syllable: Syllable) -> str:
    """
    Render *syllable* as stacked Tibetan script.

    Emission order is fixed by slot: prefix, superscript over subjoined root
    (or the standalone root), subjoined subscript, suffix, second suffix.

    Example::

        compose_unicode(build_syllable("ག", superscript="ས", subscript="ར", suffix="ལ"))
        # → 'སྒྲལ'
    """
    parts: list[str] = []
    if syllable.prefix is not None:
        parts.append(syllable.prefix.tibetan)
    if syllable.superscript is not None:
        parts.append(syllable.superscript.tibetan)
        parts.append(syllable.root.subjoined)
    else:
        parts.append(syllable.root.tibetan)
    if syllable.subscript is not None:
        parts.append(syllable.subscript.subjoined)
    if syllable.suffix is not None:
        parts.append(syllable.suffix.tibetan)
    if syllable.second_suffix is not None:
        parts.append(syllable.second_suffix.tibetan)
    return "".join(parts)
