import pytest
from rpg_engine.errors import InvalidAction, InvalidInput
from gauntlet.components import Inventory

def test_capacity():
    inventory = Inventory()
    for i in range(5):
        assert inventory.add_item(f"item {i}")
    assert inventory.is_full
    assert not inventory.add_item("one too many")
    assert len(inventory) == 5

def test_empty_inventory_rejects_use():
    with pytest.raises(InvalidAction, match="Your inventory is empty!"):
        Inventory().get_item(0)

@pytest.mark.parametrize("index", [-1, 2, 10])
def test_out_of_range_index(index):
    inventory = Inventory(items=["Health Potion", "Attack Boost"])
    with pytest.raises(InvalidInput, match="Invalid item selection!"):
        inventory.get_item(index)

def test_remove_at_keeps_order():
    inventory = Inventory(items=["A", "B", "C"])
    assert inventory.remove_at(1) == "B"
    assert list(inventory) == ["A", "C"]

def test_reset_restores_starting_kit():
    inventory = Inventory(items=["Poison Dart"])
    inventory.reset()
    assert list(inventory) == ["Health Potion", "Attack Boost"]

    inventory.clear()
    assert inventory.is_empty
