import pytest

from heltespil.database import Database
from heltespil.merchant import WeaponMerchant
from heltespil.models import Hero


@pytest.fixture
def db():
    database = Database(":memory:")
    database.create_schema()
    yield database
    database.close()


@pytest.fixture
def merchant(db):
    return WeaponMerchant("Jeff", db)


def test_stock_contents(merchant):
    assert len(merchant) == 6
    assert [w.name for w in merchant.stock] == [
        "Jernsvaerd",
        "Hammer",
        "Staaloekse",
        "Morgenstjerne",
        "Magisk Stav",
        "Lynsvaerd",
    ]


def test_price_of_iron_sword(merchant):
    assert merchant.price(merchant.stock[0], 2) == 100


def test_stock_lines(merchant):
    buyer = Hero("Tester")
    lines = merchant.stock_lines(buyer)
    assert lines[0] == "=== Jeff's Vaabenudvalg ==="
    assert lines[-1] == "0. Afbryd"
    assert len(lines) == len(merchant) + 2
    assert lines[1].startswith("1. Jernsvaerd (")


def test_sell_moves_weapon_and_gold(merchant, db):
    buyer = Hero("Tester", gold=1000)
    cost = merchant.price(merchant.stock[1], buyer.strength)
    bought = merchant.sell(1, buyer)
    assert buyer.gold == 1000 - cost
    assert buyer.inventory == [bought]
    assert bought.name == "Hammer"
    assert bought.weapon_id > 0
    rows = db.query("SELECT id FROM VaabenTyper WHERE navn = ?", ("Hammer",))
    assert rows == [(bought.type_id,)]
    assert db.query("SELECT vaaben_type_id FROM Vaaben WHERE id = ?", (bought.weapon_id,)) == [
        (bought.type_id,)
    ]


def test_selling_same_type_twice_reuses_type(merchant, db):
    buyer = Hero("Tester", gold=1000)
    first = merchant.sell(0, buyer)
    second = merchant.sell(0, buyer)
    assert first.type_id == second.type_id
    assert first.weapon_id != second.weapon_id
    assert db.query("SELECT COUNT(*) FROM VaabenTyper") == [(1,)]


def test_not_enough_gold(merchant):
    buyer = Hero("Tester", gold=10)
    with pytest.raises(ValueError, match="Ikke nok guld"):
        merchant.sell(0, buyer)
    assert buyer.gold == 10
    assert buyer.inventory == []


@pytest.mark.parametrize("index", [-1, 6])
def test_invalid_index(merchant, index):
    buyer = Hero("Tester", gold=1000)
    with pytest.raises(IndexError):
        merchant.sell(index, buyer)
    assert buyer.gold == 1000


def test_bought_weapon_is_independent_of_stock(merchant):
    buyer = Hero("Tester", gold=1000)
    bought = merchant.sell(2, buyer)
    bought.use()
    assert merchant.stock[2].durability == merchant.stock[2].max_durability
    merchant.restock(3)
    assert len(merchant) == 6
    assert merchant.stock[2].weapon_id == 0