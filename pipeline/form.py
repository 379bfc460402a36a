"""
pipeline/form.py — SyllableForm: selection state behind the composer UI.

Holds the six slot selections and the two display strings. Every selection
recomputes the displays, but only when a root is present; choosing a new
root clears every other slot first::

    select(slot, value) ─► resolve via registry ─► build Syllable ─► render
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from core.constants import C, Slot
from core.logger import get_logger
from engine import Syllable, render
from registry.characters import Character, characters_for_slot, lookup_character


@dataclass(frozen=True)
class SlotMenu:
    """
    Options offered for one slot.

    Attributes:
        slot: Which slot this menu fills.
        options: Standalone forms offered, in menu order.
        selected: Currently selected form, or ``""``.
        disabled: Whether the menu accepts input right now.
    """

    slot: Slot
    options: tuple[str, ...]
    selected: str
    disabled: bool


class SyllableForm:
    """
    Mutable selection state for one composer session.

    Not thread-safe; each UI session owns its own form.

    Args:
        placeholder: Tibetan display shown while no root is selected.
    """

    def __init__(self, placeholder: str = C.PLACEHOLDER) -> None:
        self._placeholder = placeholder
        self._slots: dict[Slot, Optional[Character]] = {}
        self.tibetan_display = ""
        self.phonetic_display = ""
        self.reset()

    # ── State ─────────────────────────────────────────────────

    def reset(self) -> None:
        """Clear every slot and restore the placeholder displays."""
        self._slots = {slot: None for slot in Slot}
        self.tibetan_display = self._placeholder
        self.phonetic_display = ""

    def get(self, slot: Union[Slot, str]) -> Optional[Character]:
        """Return the character selected for *slot*, if any."""
        return self._slots[Slot(slot)]

    @property
    def has_root(self) -> bool:
        return self._slots[Slot.ROOT] is not None

    def syllable(self) -> Optional[Syllable]:
        """Return the current selections as a Syllable, or ``None`` without a root."""
        root = self._slots[Slot.ROOT]
        if root is None:
            return None
        return Syllable(
            root=root,
            prefix=self._slots[Slot.PREFIX],
            superscript=self._slots[Slot.SUPERSCRIPT],
            subscript=self._slots[Slot.SUBSCRIPT],
            suffix=self._slots[Slot.SUFFIX],
            second_suffix=self._slots[Slot.SECOND_SUFFIX],
        )

    # ── Updates ───────────────────────────────────────────────

    def select(self, slot: Union[Slot, str], value: Optional[str]) -> None:
        """
        Apply one selection and refresh the displays.

        Args:
            slot: Slot being changed (a :class:`Slot` or its string value).
            value: Chosen standalone form; ``""`` or ``None`` clears the slot.

        Raises:
            ValueError: If *slot* is not a known slot name.
        """
        slot = Slot(slot)
        character = lookup_character(value)
        if slot is Slot.ROOT:
            self.reset()
        self._slots[slot] = character
        get_logger().debug("form", "select", {"slot": slot.value, "value": value or ""})
        self._update_displays()

    def _update_displays(self) -> None:
        syllable = self.syllable()
        if syllable is None:
            return
        rendering = render(syllable)
        self.tibetan_display = rendering.tibetan
        self.phonetic_display = rendering.phonetic

    # ── Menus ─────────────────────────────────────────────────

    def menus(self) -> list[SlotMenu]:
        """Return the menu for every slot, in form order."""
        root = self._slots[Slot.ROOT]
        no_root = root is None
        subscripts = root.available_subscripts() if root is not None else ()
        return [
            self._menu(Slot.PREFIX, _forms(Slot.PREFIX), no_root),
            self._menu(Slot.SUPERSCRIPT, _forms(Slot.SUPERSCRIPT), no_root),
            self._menu(Slot.ROOT, _forms(Slot.ROOT), False),
            self._menu(Slot.SUBSCRIPT, subscripts, len(subscripts) == 0),
            self._menu(Slot.SUFFIX, _forms(Slot.SUFFIX), no_root),
            self._menu(
                Slot.SECOND_SUFFIX,
                _forms(Slot.SECOND_SUFFIX),
                self._slots[Slot.SUFFIX] is None,
            ),
        ]

    def _menu(self, slot: Slot, options: tuple[str, ...], disabled: bool) -> SlotMenu:
        selected = self._slots[slot]
        return SlotMenu(
            slot=slot,
            options=tuple(options),
            selected=selected.tibetan if selected is not None else "",
            disabled=disabled,
        )


def _forms(slot: Slot) -> tuple[str, ...]:
    return tuple(c.tibetan for c in characters_for_slot(slot))
