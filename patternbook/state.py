"""State: a vending machine whose behaviour depends on its current state."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

log = logging.getLogger(__name__)


class VendingMachineError(Exception):
    """Raised when the machine cannot do what was asked in its current state."""


def _emit(line: str) -> str:
    log.info(line)
    return line


class State(ABC):
    """One state of a vending machine; each action returns a message or None."""

    def __init__(self, machine: VendingMachine) -> None:
        self.machine = machine

    @abstractmethod
    def add_item(self, count: int) -> str | None: ...

    @abstractmethod
    def request_item(self) -> str | None: ...

    @abstractmethod
    def insert_money(self, money: int) -> str | None: ...

    @abstractmethod
    def dispense_item(self) -> str | None: ...


class HasItemState(State):
    def request_item(self) -> str | None:
        if self.machine.item_count == 0:
            self.machine._set_state(self.machine.no_item)
            raise VendingMachineError("No item present")
        line = _emit("Item request")
        self.machine._set_state(self.machine.item_request)
        return line

    def add_item(self, count: int) -> str | None:
        line = _emit(f"{count} items added")
        self.machine.item_count += count
        return line

    def insert_money(self, money: int) -> str | None:
        raise VendingMachineError("Please select item first")

    def dispense_item(self) -> str | None:
        raise VendingMachineError("Please select item first")


class ItemRequestState(State):
    def request_item(self) -> str | None:
        raise VendingMachineError("Item already request")

    def add_item(self, count: int) -> str | None:
        raise VendingMachineError("Item dispense in progress")

    def insert_money(self, money: int) -> str | None:
        if self.machine.item_price > money:
            raise VendingMachineError(
                f"Insert money is less. Please insert {self.machine.item_price}"
            )
        line = _emit("Insert money is ok")
        self.machine._set_state(self.machine.has_money)
        return line

    def dispense_item(self) -> str | None:
        raise VendingMachineError("Please insert money first")


class HasMoneyState(State):
    def request_item(self) -> str | None:
        raise VendingMachineError("Item dispense in progress")

    def add_item(self, count: int) -> str | None:
        raise VendingMachineError("Item dispense in progress")

    def insert_money(self, money: int) -> str | None:
        raise VendingMachineError("Item out of stock")

    def dispense_item(self) -> str | None:
        self.machine.item_count -= 1
        if self.machine.item_count == 0:
            self.machine._set_state(self.machine.no_item)
        else:
            self.machine._set_state(self.machine.has_item)
        return None


class NoItemState(State):
    def add_item(self, count: int) -> str | None:
        self.machine.item_count += count
        self.machine._set_state(self.machine.has_item)
        return None

    def insert_money(self, money: int) -> str | None:
        raise VendingMachineError("Item out of stock")

    def dispense_item(self) -> str | None:
        raise VendingMachineError("Item out of stock")

    def request_item(self) -> str | None:
        raise VendingMachineError("Item out of stock")


class VendingMachine:
    """Sells items of one price; starts in the has-item state."""

    def __init__(self, count: int, price: int) -> None:
        self.item_count = count
        self.item_price = price
        self.has_item = HasItemState(self)
        self.item_request = ItemRequestState(self)
        self.has_money = HasMoneyState(self)
        self.no_item = NoItemState(self)
        self._state: State = self.has_item

    @property
    def state(self) -> State:
        """The state the machine is in."""
        return self._state

    def _set_state(self, state: State) -> None:
        self._state = state

    def add_item(self, count: int) -> str | None:
        return self._state.add_item(count)

    def request_item(self) -> str | None:
        return self._state.request_item()

    def insert_money(self, money: int) -> str | None:
        return self._state.insert_money(money)

    def dispense_item(self) -> str | None:
        return self._state.dispense_item()


def demo() -> list[str]:
    """Buy the only item, restock, and buy again; any error propagates."""
    machine = VendingMachine(1, 10)
    steps = (
        machine.request_item,
        lambda: machine.insert_money(10),
        machine.dispense_item,
        lambda: machine.add_item(2),
        machine.request_item,
        lambda: machine.insert_money(10),
        machine.dispense_item,
    )
    lines: list[str] = []
    for step in steps:
        message = step()
        if message is not None:
            lines.append(message)
    return lines