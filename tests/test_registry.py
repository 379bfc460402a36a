"""
tests/test_registry.py — Unit tests for the consonant table and lookups.

Pure data tests — no engine or web surface involved.
"""

from __future__ import annotations

import unittest

from core.constants import C, Column, Slot
from registry.characters import (
    Character,
    all_characters,
    available_subscripts_for,
    character_map,
    characters_for_slot,
    lookup_character,
)


class TestAlphabetTable(unittest.TestCase):
    """Shape and invariants of the fixed consonant table."""

    def test_thirty_consonants(self) -> None:
        self.assertEqual(len(all_characters()), 30)

    def test_traditional_order(self) -> None:
        """Table runs ཀ … ཨ in alphabet order."""
        chars = all_characters()
        self.assertEqual(chars[0].tibetan, "ཀ")
        self.assertEqual(chars[-1].tibetan, "ཨ")

    def test_identities_are_unique(self) -> None:
        forms = [c.tibetan for c in all_characters()]
        self.assertEqual(len(forms), len(set(forms)))

    def test_subjoined_form_is_block_counterpart(self) -> None:
        """Each subjoined form sits 0x50 above its standalone form."""
        for c in all_characters():
            self.assertEqual(ord(c.subjoined) - ord(c.tibetan), 0x50, c.tibetan)
            self.assertTrue(0x0F90 <= ord(c.subjoined) <= 0x0FBC, c.tibetan)

    def test_overrides_only_on_third_column(self) -> None:
        for c in all_characters():
            if c.phonetic_third_column:
                self.assertIs(c.column, Column.THIRD, c.tibetan)

    def test_subscripts_only_ra_la_ya(self) -> None:
        for c in all_characters():
            self.assertTrue(set(c.available_subscripts()) <= set(C.SUBSCRIPT_LETTERS))

    def test_character_is_frozen(self) -> None:
        ka = lookup_character("ཀ")
        assert ka is not None
        with self.assertRaises(Exception):
            ka.phonetic = "xa"  # type: ignore[misc]

    def test_all_characters_returns_copy(self) -> None:
        chars = all_characters()
        chars.clear()
        self.assertEqual(len(all_characters()), 30)

    def test_character_map_keyed_by_identity(self) -> None:
        mapping = character_map()
        self.assertEqual(len(mapping), 30)
        for key, c in mapping.items():
            self.assertEqual(key, c.tibetan)


class TestLookup(unittest.TestCase):
    """lookup_character() never raises on misses."""

    def test_lookup_by_string(self) -> None:
        ga = lookup_character("ག")
        self.assertIsInstance(ga, Character)
        assert ga is not None
        self.assertEqual(ga.phonetic, "kha")
        self.assertEqual(ga.phonetic_third_column, "ga")
        self.assertEqual(ga.phonetic_as_suffix, "k")
        self.assertIs(ga.column, Column.THIRD)

    def test_lookup_by_scalar(self) -> None:
        self.assertIs(lookup_character(0x0F42), lookup_character("ག"))

    def test_lookup_returns_registry_instance(self) -> None:
        """Lookups share the single table entry, never a copy."""
        self.assertIs(lookup_character("ཀ"), lookup_character("ཀ"))

    def test_unknown_character_is_none(self) -> None:
        self.assertIsNone(lookup_character("a"))
        self.assertIsNone(lookup_character("ཊ"))

    def test_empty_and_none_are_none(self) -> None:
        self.assertIsNone(lookup_character(""))
        self.assertIsNone(lookup_character(None))

    def test_out_of_range_scalar_is_none(self) -> None:
        self.assertIsNone(lookup_character(-1))
        self.assertIsNone(lookup_character(0x110000))

    def test_subjoined_form_is_not_an_identity(self) -> None:
        self.assertIsNone(lookup_character("ྒ"))


class TestSubscriptAvailability(unittest.TestCase):
    """available_subscripts_for() reflects the attested clusters."""

    def _subs(self, root: str) -> frozenset[str]:
        c = lookup_character(root)
        assert c is not None
        return available_subscripts_for(c)

    def test_ka_takes_all_three(self) -> None:
        self.assertEqual(self._subs("ཀ"), frozenset({"ར", "ལ", "ཡ"}))

    def test_ta_takes_only_ra(self) -> None:
        self.assertEqual(self._subs("ཏ"), frozenset({"ར"}))

    def test_za_takes_only_la(self) -> None:
        self.assertEqual(self._subs("ཟ"), frozenset({"ལ"}))

    def test_nga_takes_none(self) -> None:
        self.assertEqual(self._subs("ང"), frozenset())

    def test_ya_cluster_roots(self) -> None:
        roots = {c.tibetan for c in all_characters() if "ཡ" in c.available_subscripts()}
        self.assertEqual(roots, {"ཀ", "ཁ", "ག", "པ", "ཕ", "བ", "མ"})

    def test_la_cluster_roots(self) -> None:
        roots = {c.tibetan for c in all_characters() if "ལ" in c.available_subscripts()}
        self.assertEqual(roots, {"ཀ", "ག", "བ", "ཟ", "ར", "ས"})

    def test_ra_cluster_roots(self) -> None:
        roots = {c.tibetan for c in all_characters() if "ར" in c.available_subscripts()}
        self.assertEqual(
            roots, {"ཀ", "ཁ", "ག", "ཏ", "ཐ", "ད", "པ", "ཕ", "བ", "མ", "ས", "ཧ"}
        )


class TestSlotMenus(unittest.TestCase):
    """characters_for_slot() returns menus in fixed order."""

    def test_prefix_menu(self) -> None:
        forms = [c.tibetan for c in characters_for_slot(Slot.PREFIX)]
        self.assertEqual(forms, ["ག", "ད", "བ", "མ", "འ"])

    def test_slot_by_name(self) -> None:
        forms = [c.tibetan for c in characters_for_slot("superscript")]
        self.assertEqual(forms, ["ར", "ལ", "ས"])

    def test_root_menu_is_whole_table(self) -> None:
        self.assertEqual(characters_for_slot("root"), all_characters())

    def test_suffix_menus(self) -> None:
        self.assertEqual(len(characters_for_slot("suffix")), 10)
        self.assertEqual(
            [c.tibetan for c in characters_for_slot("second_suffix")], ["ས", "ད"]
        )

    def test_subscript_slot_raises(self) -> None:
        with self.assertRaises(ValueError):
            characters_for_slot("subscript")

    def test_unknown_slot_raises(self) -> None:
        with self.assertRaises(ValueError):
            characters_for_slot("vowel")


if __name__ == "__main__":
    unittest.main()
