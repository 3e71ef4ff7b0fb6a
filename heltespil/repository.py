"""Persistence of heroes and their weapons."""

from __future__ import annotations

from heltespil.database import Database
from heltespil.models import Hero, Weapon

_INSERT_HERO = (
    "INSERT INTO Hero (navn, maxHP, hp, styrke, xp, level, guld) "
    "VALUES (?, ?, ?, ?, ?, ?, ?)"
)
_UPDATE_HERO = (
    "UPDATE Hero SET navn = ?, maxHP = ?, hp = ?, styrke = ?, xp = ?, level = ?, guld = ? "
    "WHERE id = ?"
)
_SELECT_HEROES = "SELECT id, navn, maxHP, hp, styrke, xp, level, guld FROM Hero"
_SELECT_WEAPONS = (
    "SELECT v.id, vt.navn, vt.baseStyrke, vt.skaleringsFaktor, "
    "vt.maxHoldbarhed, v.nuvaerendeHoldbarhed "
    "FROM HeroVaaben hv "
    "JOIN Vaaben v ON hv.vaaben_id = v.id "
    "JOIN VaabenTyper vt ON v.vaaben_type_id = vt.id "
    "WHERE hv.hero_id = ?"
)


class HeroRepository:
    """Stores heroes together with the weapons they carry."""

    def __init__(self, db: Database) -> None:
        self._db = db

    def save(self, hero: Hero) -> None:
        """Insert or update the hero and relink its weapons, all in one transaction.

        A new hero receives its database id.  On failure everything is rolled
        back and the error is raised.
        """
        original_hero_id = hero.db_id
        original_weapon_ids = [weapon.weapon_id for weapon in hero.inventory]
        self._db.execute("BEGIN TRANSACTION")
        try:
            values = (
                hero.name,
                hero.max_hp,
                hero.hp,
                hero.strength,
                hero.xp,
                hero.level,
                hero.gold,
            )
            if hero.db_id == 0:
                hero.db_id = self._db.execute(_INSERT_HERO, values)
            else:
                self._db.execute(_UPDATE_HERO, (*values, hero.db_id))
            # Links are rebuilt from scratch so re-saving never duplicates weapons.
            self._db.execute("DELETE FROM HeroVaaben WHERE hero_id = ?", (hero.db_id,))
            for weapon in hero.inventory:
                self.save_weapon(hero.db_id, weapon)
        except BaseException:
            self._db.execute("ROLLBACK")
            hero.db_id = original_hero_id
            for weapon, weapon_id in zip(hero.inventory, original_weapon_ids):
                weapon.weapon_id = weapon_id
            raise
        self._db.execute("COMMIT")

    def load_all(self) -> list[Hero]:
        """Load every stored hero with its weapons."""
        heroes = []
        for hero_id, name, max_hp, hp, strength, xp, level, gold in self._db.query(
            _SELECT_HEROES
        ):
            heroes.append(
                Hero(
                    name=name,
                    max_hp=max_hp,
                    hp=hp,
                    strength=strength,
                    xp=xp,
                    level=level,
                    gold=gold,
                    db_id=hero_id,
                    inventory=self.load_weapons(hero_id),
                )
            )
        return heroes

    def weapon_type_id(self, weapon: Weapon) -> int:
        """Return the id of the weapon's type, creating the type if it is new."""
        rows = self._db.query("SELECT id FROM VaabenTyper WHERE navn = ?", (weapon.name,))
        if rows:
            return rows[0][0]
        return self._db.execute(
            "INSERT INTO VaabenTyper (navn, baseStyrke, skaleringsFaktor, maxHoldbarhed) "
            "VALUES (?, ?, ?, ?)",
            (
                weapon.name,
                weapon.base_strength,
                float(weapon.scaling_factor),
                weapon.max_durability,
            ),
        )

    def save_weapon(self, hero_id: int, weapon: Weapon) -> None:
        """Store the weapon and link it to the hero."""
        type_id = self.weapon_type_id(weapon)
        if weapon.weapon_id == 0:
            weapon.weapon_id = self._db.execute(
                "INSERT INTO Vaaben (vaaben_type_id, nuvaerendeHoldbarhed) VALUES (?, ?)",
                (type_id, weapon.durability),
            )
        else:
            self._db.execute(
                "UPDATE Vaaben SET nuvaerendeHoldbarhed = ? WHERE id = ?",
                (weapon.durability, weapon.weapon_id),
            )
        self._db.execute(
            "INSERT INTO HeroVaaben (hero_id, vaaben_id, nuvaerendeHoldbarhed) VALUES (?, ?, ?)",
            (hero_id, weapon.weapon_id, weapon.durability),
        )

    def load_weapons(self, hero_id: int) -> list[Weapon]:
        """Load the weapons linked to the hero."""
        weapons = []
        for weapon_id, name, base, scaling, max_durability, durability in self._db.query(
            _SELECT_WEAPONS, (hero_id,)
        ):
            weapon = Weapon(name, base, int(scaling), max_durability, weapon_id=weapon_id)
            weapon.set_durability(durability)
            weapons.append(weapon)
        return weapons