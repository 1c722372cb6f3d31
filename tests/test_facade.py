import pytest

from patternbook.facade import (
    Bank,
    Card,
    InsufficientFundsError,
    Product,
    Shop,
    User,
    demo,
)


@pytest.fixture
def sleeps(monkeypatch):
    calls = []
    monkeypatch.setattr("time.sleep", calls.append)
    return calls


def _setup(balance):
    bank = Bank("БАНК")
    card = Card("CRD-1", balance, bank)
    bank.cards.append(card)
    user = User("Покупатель-1", card)
    shop = Shop("SHOP", [Product("Сыр", 150)])
    return bank, card, user, shop


def test_sell_succeeds_with_enough_money(sleeps):
    _, _, user, shop = _setup(200)
    assert shop.sell(user, "Сыр") == ["Сыр"]


def test_sell_waits_on_shop_card_and_bank(sleeps):
    _, _, user, shop = _setup(200)
    sold = shop.sell(user, "Сыр")
    assert sold == ["Сыр"]
    assert sleeps == [0.5, 0.8, 0.3]


def test_sell_fails_when_price_exceeds_balance(sleeps):
    _, _, user, shop = _setup(5)
    with pytest.raises(InsufficientFundsError, match="Недостаточно средст для покупки"):
        shop.sell(user, "Сыр")


def test_bank_rejects_non_positive_balance(sleeps):
    _, _, user, shop = _setup(0)
    with pytest.raises(InsufficientFundsError, match=r"\[Банк\] Недостаточно средств"):
        shop.sell(user, "Сыр")


def test_bank_accepts_unknown_card(sleeps):
    bank, _, _, _ = _setup(0)
    assert bank.check_balance("CRD-9") == "[Банк] Остаток положительный"


def test_unknown_product_sells_nothing(sleeps):
    _, _, user, shop = _setup(200)
    assert shop.sell(user, "Хлеб") == []


def test_user_balance_follows_card(sleeps):
    _, card, user, _ = _setup(42)
    card.balance = 17
    assert user.balance() == 17


def test_demo_stops_at_second_buyer(sleeps):
    lines = demo()
    assert lines[0] == "[Банк] Выпуск карт"
    assert "[Магазин] Товар Сыр куплен" in lines
    assert lines[-1] == "[Магазин] Недостаточно средст для покупки товара"