"""Facade: a shop sells goods after checking the buyer's card with the bank."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

log = logging.getLogger(__name__)

BANK_DELAY = 0.3
CARD_DELAY = 0.8
SHOP_DELAY = 0.5


class InsufficientFundsError(Exception):
    """Raised when a card or a buyer cannot cover a payment."""


def _emit(line: str) -> str:
    log.info(line)
    return line


@dataclass
class Bank:
    name: str
    cards: list[Card] = field(default_factory=list)

    def check_balance(self, card_number: str) -> str:
        """Confirm that the card has a positive balance; return the bank's reply."""
        _emit(f"[Банк] Получение остатка по карте {card_number}")
        time.sleep(BANK_DELAY)
        for card in self.cards:
            if card.name == card_number and card.balance <= 0:
                raise InsufficientFundsError("[Банк] Недостаточно средств")
        return _emit("[Банк] Остаток положительный")


@dataclass
class Card:
    name: str
    balance: float
    bank: Bank = field(repr=False, compare=False)

    def check_balance(self) -> str:
        """Ask the issuing bank to confirm the balance."""
        _emit("[Карта] Запрос в банк для проверки остатка")
        time.sleep(CARD_DELAY)
        return self.bank.check_balance(self.name)


@dataclass(frozen=True)
class Product:
    name: str
    price: float


@dataclass
class User:
    name: str
    card: Card

    def balance(self) -> float:
        """Return the balance of the user's card."""
        return self.card.balance


@dataclass
class Shop:
    name: str
    products: list[Product] = field(default_factory=list)

    def sell(self, user: User, product: str) -> list[str]:
        """Sell every product named ``product`` to ``user``; return the names sold."""
        _emit("[Магазин] Запрос к пользователью, для получения остатка по карте")
        time.sleep(SHOP_DELAY)
        user.card.check_balance()
        _emit(f"[Магазин] Проверка - может ли {user.name} пользователь купить товар")

        sold: list[str] = []
        for item in self.products:
            if item.name != product:
                continue
            if item.price > user.balance():
                raise InsufficientFundsError(
                    "[Магазин] Недостаточно средст для покупки товара"
                )
            _emit(f"[Магазин] Товар {item.name} куплен")
            sold.append(item.name)
        return sold


def demo() -> list[str]:
    """Two buyers try to buy cheese; the second cannot afford it."""
    bank = Bank("БАНК")
    card1 = Card("CRD-1", 200, bank)
    card2 = Card("CRD-2", 5, bank)
    buyers = (User("Покупатель-1", card1), User("Покупатель-2", card2))
    cheese = Product("Сыр", 150)
    shop = Shop("SHOP", [cheese])

    lines = [_emit("[Банк] Выпуск карт")]
    bank.cards.extend([card1, card2])

    for buyer in buyers:
        lines.append(_emit(f"[{buyer.name}]"))
        try:
            sold = shop.sell(buyer, cheese.name)
        except InsufficientFundsError as exc:
            lines.append(_emit(str(exc)))
            break
        lines.extend(f"[Магазин] Товар {name} куплен" for name in sold)
    return lines