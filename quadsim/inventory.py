"""Inventory and equipment slots with drag-and-drop fitting commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

SLOT_LABELS = (
    "Left Mouse Button",
    "Right Mouse Button",
    "Middle Mouse Button",
    "Space",
    '"1"',
    '"2"',
    '"3"',
)


@dataclass
class Slot:
    id: int
    item: str | None = None


@dataclass(frozen=True)
class Unfit:
    """Remove the item from a slot."""

    target_slot: int


@dataclass(frozen=True)
class Fit:
    """Put an inventory item into a slot."""

    target_slot: int
    item: str


@dataclass(frozen=True)
class Refit:
    """Move an item from one slot to another."""

    target_slot: int
    origin_slot: int


FittingCommand = Union[Unfit, Fit, Refit]


class Fitting:
    """Bought items, labelled slots and the pending fitting command."""

    def __init__(self) -> None:
        self.inventory: list[str] = []
        self.item_dragging = False
        self.slots: list[tuple[str, Slot]] = [
            (label, Slot(slot_id)) for slot_id, label in enumerate(SLOT_LABELS, start=1)
        ]
        self.fit_command: FittingCommand | None = None

    def _slot(self, slot_id: int) -> Slot | None:
        return next((slot for _, slot in self.slots if slot.id == slot_id), None)

    def buy(self, index: int) -> str:
        """Add shop item ``index`` to the inventory and return its name."""
        item = f"Item {index}"
        self.inventory.append(item)
        return item

    def set_item(self, slot_id: int, item: str | None) -> None:
        """Set a slot's item; unknown slot ids are ignored."""
        slot = self._slot(slot_id)
        if slot is not None:
            slot.item = item

    def drop_from_slot(self, slot_id: int, target: int | None) -> None:
        """An item dragged out of a slot was dropped on ``target`` (or nowhere)."""
        slot = self._slot(slot_id)
        if slot is None:
            raise KeyError(f"no slot with id {slot_id}")
        if slot.item is None:
            raise ValueError("an empty slot cannot be dragged")
        if target is not None:
            self.fit_command = Refit(target_slot=target, origin_slot=slot_id)
        else:
            self.fit_command = Unfit(target_slot=slot_id)

    def drop_from_inventory(self, index: int, target: int | None) -> None:
        """Inventory item ``index`` was dropped on ``target`` (or nowhere)."""
        item = self.inventory[index]
        if target is not None:
            self.fit_command = Fit(target_slot=target, item=item)
        self.item_dragging = False

    def apply(self) -> FittingCommand | None:
        """Carry out and clear the pending command; return what was applied."""
        command, self.fit_command = self.fit_command, None
        if isinstance(command, Unfit):
            self.set_item(command.target_slot, None)
        elif isinstance(command, Fit):
            self.set_item(command.target_slot, command.item)
        elif isinstance(command, Refit):
            origin = self._slot(command.origin_slot)
            origin_item = origin.item if origin is not None else None
            self.set_item(command.target_slot, origin_item)
            self.set_item(command.origin_slot, None)
        return command