"""A merchant who sells weapons to heroes."""

from __future__ import annotations

from dataclasses import replace

from heltespil.database import Database
from heltespil.models import Hero, Weapon
from heltespil.repository import HeroRepository

_STOCK = (
    ("Jernsvaerd", 5, 1, 20),
    ("Hammer", 3, 2, 30),
    ("Staaloekse", 8, 3, 15),
    ("Morgenstjerne", 10, 1, 10),
    ("Magisk Stav", 10, 4, 25),
    ("Lynsvaerd", 12, 5, 40),
)


class WeaponMerchant:
    """Keeps a stock of weapons and sells copies of them for gold."""

    def __init__(self, name: str, db: Database) -> None:
        self.name = name
        self._db = db
        self._repository = HeroRepository(db)
        self.stock: list[Weapon] = []
        self.restock(1)

    def __len__(self) -> int:
        return len(self.stock)

    def restock(self, level: int) -> None:
        """Replace the stock with the standard assortment."""
        self.stock = [Weapon(*spec) for spec in _STOCK]

    def stock_lines(self, buyer: Hero) -> list[str]:
        """Describe the stock with damage and prices for this buyer."""
        lines = [f"=== {self.name}'s Vaabenudvalg ==="]
        for number, weapon in enumerate(self.stock, start=1):
            lines.append(
                f"{number}. {weapon.name} ({weapon.total_damage(buyer.strength)} skade) - "
                f"{self.price(weapon, buyer.strength)} guld"
            )
        lines.append("0. Afbryd")
        return lines

    def price(self, weapon: Weapon, hero_strength: int) -> int:
        return 30 + weapon.total_damage(hero_strength) * 10

    def sell(self, index: int, buyer: Hero) -> Weapon:
        """Sell the weapon at index to the buyer and return the bought copy.

        Raises IndexError for an unknown index and ValueError when the buyer
        cannot afford it.
        """
        if not 0 <= index < len(self.stock):
            raise IndexError("Ugyldigt vaabenvalg!")
        offered = self.stock[index]
        cost = self.price(offered, buyer.strength)
        if buyer.gold < cost:
            raise ValueError(
                f"Ikke nok guld! Du har {buyer.gold}, men skal bruge {cost}"
            )
        type_id = self._repository.weapon_type_id(offered)
        weapon_id = self._db.execute(
            "INSERT INTO Vaaben (vaaben_type_id, nuvaerendeHoldbarhed) VALUES (?, ?)",
            (type_id, offered.durability),
        )
        bought = replace(offered, weapon_id=weapon_id, type_id=type_id)
        buyer.add_weapon(bought)
        buyer.gain_gold(-cost)
        return bought