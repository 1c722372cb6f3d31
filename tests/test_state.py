import pytest

from patternbook.state import (
    HasItemState,
    HasMoneyState,
    ItemRequestState,
    NoItemState,
    VendingMachine,
    VendingMachineError,
    demo,
)


def test_starts_with_item_state():
    machine = VendingMachine(1, 10)
    with pytest.raises(VendingMachineError, match="Please select item first"):
        machine.insert_money(10)
    assert machine.request_item() == "Item request"


def test_full_purchase_empties_machine():
    machine = VendingMachine(1, 10)
    assert machine.request_item() == "Item request"
    assert isinstance(machine.state, ItemRequestState)
    assert machine.insert_money(10) == "Insert money is ok"
    assert isinstance(machine.state, HasMoneyState)
    machine.dispense_item()
    assert machine.item_count == 0
    assert isinstance(machine.state, NoItemState)


def test_dispense_with_stock_left_returns_to_has_item():
    machine = VendingMachine(3, 10)
    machine.request_item()
    machine.insert_money(20)
    machine.dispense_item()
    assert machine.item_count == 2
    assert isinstance(machine.state, HasItemState)


def test_request_with_no_items_switches_to_no_item():
    machine = VendingMachine(0, 10)
    with pytest.raises(VendingMachineError, match="No item present"):
        machine.request_item()
    assert isinstance(machine.state, NoItemState)


def test_no_item_state_rejects_actions():
    machine = VendingMachine(0, 10)
    with pytest.raises(VendingMachineError):
        machine.request_item()
    for action in (machine.request_item, machine.dispense_item, lambda: machine.insert_money(10)):
        with pytest.raises(VendingMachineError, match="Item out of stock"):
            action()


def test_restock_from_no_item():
    machine = VendingMachine(0, 10)
    with pytest.raises(VendingMachineError):
        machine.request_item()
    machine.add_item(5)
    assert machine.item_count == 5
    assert isinstance(machine.state, HasItemState)


def test_add_item_in_has_item_state_reports_count():
    machine = VendingMachine(1, 10)
    assert machine.add_item(2) == "2 items added"
    assert machine.item_count == 3


def test_money_before_request_is_rejected():
    machine = VendingMachine(1, 10)
    with pytest.raises(VendingMachineError, match="Please select item first"):
        machine.insert_money(10)
    with pytest.raises(VendingMachineError, match="Please select item first"):
        machine.dispense_item()


def test_too_little_money_is_rejected():
    machine = VendingMachine(1, 10)
    machine.request_item()
    with pytest.raises(VendingMachineError, match="Insert money is less. Please insert 10"):
        machine.insert_money(5)
    assert isinstance(machine.state, ItemRequestState)


def test_item_request_state_errors():
    machine = VendingMachine(1, 10)
    machine.request_item()
    with pytest.raises(VendingMachineError, match="Item already request"):
        machine.request_item()
    with pytest.raises(VendingMachineError, match="Item dispense in progress"):
        machine.add_item(1)
    with pytest.raises(VendingMachineError, match="Please insert money first"):
        machine.dispense_item()


def test_has_money_state_errors():
    machine = VendingMachine(1, 10)
    machine.request_item()
    machine.insert_money(10)
    with pytest.raises(VendingMachineError, match="Item dispense in progress"):
        machine.request_item()
    with pytest.raises(VendingMachineError, match="Item dispense in progress"):
        machine.add_item(1)
    with pytest.raises(VendingMachineError, match="Item out of stock"):
        machine.insert_money(10)


def test_demo_messages():
    lines = demo()
    assert lines.count("Insert money is ok") == 2
    assert lines.count("Item request") == 2
    assert "2 items added" not in lines