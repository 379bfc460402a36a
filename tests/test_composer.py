"""
tests/test_composer.py — pytest unit tests for Unicode syllable composition.
"""

from __future__ import annotations

import pytest

from engine import NoRootError, Syllable, build_syllable, compose_unicode
from registry.characters import all_characters, lookup_character


def _char(form: str):
    c = lookup_character(form)
    assert c is not None, form
    return c


# ──────────────────────────────────────────────────────────────
# Root only
# ──────────────────────────────────────────────────────────────

@pytest.mark.parametrize("root", all_characters(), ids=lambda c: c.tibetan)
def test_root_only_is_identity(root) -> None:
    assert compose_unicode(Syllable(root=root)) == root.tibetan


# ──────────────────────────────────────────────────────────────
# Worked examples
# ──────────────────────────────────────────────────────────────

def test_ta_with_ra_subscript() -> None:
    syllable = build_syllable("ཏ", subscript="ར")
    assert syllable is not None
    assert compose_unicode(syllable) == "ཏྲ"
    assert compose_unicode(syllable) == "\u0f4f\u0fb2"


def test_ga_with_ya_subscript() -> None:
    syllable = build_syllable("ག", subscript="ཡ")
    assert syllable is not None
    assert compose_unicode(syllable) == "གྱ"


def test_superscript_subjoins_root() -> None:
    syllable = build_syllable("ག", superscript="ས", subscript="ར", suffix="ལ")
    assert syllable is not None
    assert compose_unicode(syllable) == "སྒྲལ"


def test_prefix_is_full_size() -> None:
    syllable = build_syllable("ག", prefix="ད")
    assert syllable is not None
    assert compose_unicode(syllable) == "དག"


# ──────────────────────────────────────────────────────────────
# Stacking order
# ──────────────────────────────────────────────────────────────

def test_full_stack_order() -> None:
    """P ++ S ++ stacked(R) ++ stacked(U) ++ F1 ++ F2."""
    p, s, r, u, f1, f2 = (_char(x) for x in ("བ", "ས", "ག", "ར", "ག", "ས"))
    syllable = Syllable(
        root=r, prefix=p, superscript=s, subscript=u, suffix=f1, second_suffix=f2
    )
    expected = p.tibetan + s.tibetan + r.subjoined + u.subjoined + f1.tibetan + f2.tibetan
    assert compose_unicode(syllable) == expected
    assert compose_unicode(syllable) == "བསྒྲགས"


def test_order_independent_of_keyword_order() -> None:
    a = Syllable(second_suffix=_char("ས"), suffix=_char("ག"), root=_char("ཀ"), prefix=_char("བ"))
    b = Syllable(root=_char("ཀ"), prefix=_char("བ"), suffix=_char("ག"), second_suffix=_char("ས"))
    assert compose_unicode(a) == compose_unicode(b) == "བཀགས"


def test_suffixes_without_stack_members() -> None:
    syllable = build_syllable("ཀ", suffix="ག", second_suffix="ས")
    assert syllable is not None
    assert compose_unicode(syllable) == "ཀགས"


# ──────────────────────────────────────────────────────────────
# Purity and missing root
# ──────────────────────────────────────────────────────────────

def test_idempotent() -> None:
    syllable = build_syllable("ག", prefix="བ", superscript="ས", subscript="ར", suffix="ག")
    assert syllable is not None
    assert compose_unicode(syllable) == compose_unicode(syllable)


def test_build_without_root_is_none() -> None:
    assert build_syllable(None, subscript="ར") is None
    assert build_syllable("", suffix="ག") is None


def test_build_with_unknown_root_is_none() -> None:
    assert build_syllable("x") is None


def test_unknown_optional_slot_is_absent() -> None:
    syllable = build_syllable("ཀ", prefix="x", suffix="")
    assert syllable is not None
    assert syllable.prefix is None
    assert syllable.suffix is None
    assert compose_unicode(syllable) == "ཀ"


def test_syllable_without_root_raises() -> None:
    with pytest.raises(NoRootError):
        Syllable(root=None)  # type: ignore[arg-type]


def test_no_root_error_is_value_error() -> None:
    assert issubclass(NoRootError, ValueError)
