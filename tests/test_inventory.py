import pytest

from quadsim.inventory import SLOT_LABELS, Fit, Fitting, Refit, Unfit


def _items(fitting):
    return [slot.item for _, slot in fitting.slots]


def _slot_id(fitting, n):
    return fitting.slots[n][1].id


def test_initial_state():
    fitting = Fitting()
    assert [label for label, _ in fitting.slots] == list(SLOT_LABELS)
    assert _items(fitting) == [None] * 7
    assert fitting.inventory == []
    assert fitting.apply() is None


def test_slot_ids_are_unique():
    fitting = Fitting()
    ids = [slot.id for _, slot in fitting.slots]
    assert len(set(ids)) == len(ids)


def test_buy_names_item():
    fitting = Fitting()
    assert fitting.buy(3) == "Item 3"
    fitting.buy(0)
    assert fitting.inventory == ["Item 3", "Item 0"]


def test_fit_from_inventory():
    fitting = Fitting()
    fitting.buy(5)
    fitting.item_dragging = True
    target = _slot_id(fitting, 2)
    fitting.drop_from_inventory(0, target)
    assert fitting.item_dragging is False
    assert fitting.apply() == Fit(target, "Item 5")
    assert fitting.slots[2][1].item == "Item 5"
    assert fitting.inventory == ["Item 5"]
    assert fitting.fit_command is None


def test_inventory_drop_nowhere_does_nothing():
    fitting = Fitting()
    fitting.buy(1)
    fitting.item_dragging = True
    fitting.drop_from_inventory(0, None)
    assert fitting.item_dragging is False
    assert fitting.apply() is None
    assert _items(fitting) == [None] * 7


def test_unfit_when_dropped_nowhere():
    fitting = Fitting()
    slot = _slot_id(fitting, 0)
    fitting.set_item(slot, "Item 1")
    fitting.drop_from_slot(slot, None)
    assert fitting.fit_command == Unfit(slot)
    fitting.apply()
    assert _items(fitting) == [None] * 7


def test_refit_moves_item():
    fitting = Fitting()
    origin = _slot_id(fitting, 0)
    target = _slot_id(fitting, 4)
    fitting.set_item(origin, "Item 2")
    fitting.drop_from_slot(origin, target)
    assert fitting.apply() == Refit(target, origin)
    assert fitting.slots[0][1].item is None
    assert fitting.slots[4][1].item == "Item 2"


def test_empty_slot_cannot_be_dropped():
    fitting = Fitting()
    with pytest.raises(ValueError):
        fitting.drop_from_slot(_slot_id(fitting, 1), None)


def test_unknown_slot_raises():
    fitting = Fitting()
    with pytest.raises(KeyError):
        fitting.drop_from_slot(10_000, None)


def test_set_item_ignores_unknown_slot():
    fitting = Fitting()
    fitting.set_item(10_000, "Item 9")
    assert _items(fitting) == [None] * 7