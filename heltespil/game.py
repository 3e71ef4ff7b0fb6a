"""The interactive game: menus, adventures, caves, shopping and statistics."""

from __future__ import annotations

import argparse
import copy
import random
import sys
from dataclasses import replace
from os import PathLike
from typing import Callable

from heltespil.analysis import Analysis
from heltespil.combat import fight
from heltespil.database import Database, DatabaseError
from heltespil.factory import CaveGenerator, StandardEnemyFactory
from heltespil.merchant import WeaponMerchant
from heltespil.models import Enemy, Hero
from heltespil.prompts import read_int
from heltespil.repository import HeroRepository

DEFAULT_DB = "heros.db"
MERCHANT_NAME = "Jeff"

INTRO = (
    "Velkommen til eventyret!\n"
    "Dit maal er at besejre de onde engelske fjender.\n"
    "Dette vil goere dig staerkere med erfaring og guld.\n"
    "I sidste ende kan du besejre den onde engelske drage og redde landet!\n"
    "Hvis du gaar ud af spillet, vil din helt blive gemt,\n"
    "MEN HUSK AT GENUDSTYRE DIN HELT MED ET VAABEN!\n"
)


def _standard_enemies() -> list[Enemy]:
    return [
        Enemy("Wolf Cub", 4, 4, 1, 100),
        Enemy("Young Forest Wolf", 4, 4, 2, 200),
        Enemy("Feronius the Ferocious", 8, 8, 3, 400),
        Enemy("Beach Crawler", 10, 10, 4, 500),
        Enemy("Young Crocolisk", 15, 15, 5, 800),
        Enemy("Mother Crocolisk", 30, 30, 5, 1000),
        Enemy("Kobold Miner", 15, 15, 10, 1500),
        Enemy("Fagnus the Mage", 13, 13, 20, 2000),
        Enemy("Dragon", 100, 100, 10, 3000),
    ]


def _predefined_heroes() -> list[Hero]:
    return [
        Hero("Murloc", 4, 4, 1, xp=0, level=1, gold=0),
        Hero("Thor", 14, 14, 4, xp=0, level=4, gold=0),
        Hero("Loke", 8, 8, 6, xp=0, level=3, gold=0),
        Hero("Odin", 18, 18, 3, xp=0, level=5, gold=0),
    ]


class Game:
    """A game session bound to one database file and one input/output pair."""

    def __init__(
        self,
        db_path: str | PathLike[str] = DEFAULT_DB,
        read: Callable[[], str] | None = None,
        write: Callable[[str], object] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._read = read if read is not None else input
        self._write = write if write is not None else sys.stdout.write
        self._rng = rng if rng is not None else random.Random()
        self._db = Database(db_path)
        self._db.create_schema()
        self._repository = HeroRepository(self._db)
        self._analysis = Analysis(self._db)
        self._write(INTRO)

        self.enemies = _standard_enemies()
        self.predefined_heroes = _predefined_heroes()
        self.saved_heroes: list[Hero] = []
        self.active_hero: Hero | None = None
        self.caves = []
        self._cave_generator: CaveGenerator | None = None
        self._merchant: WeaponMerchant | None = None
        self._closed = False

    # -- lifecycle -----------------------------------------------------

    def start(self) -> None:
        """Run the main menu until the player quits."""
        while True:
            self._refresh_saved_heroes()
            self._write("\n--- HOVEDMENU ---\n")
            if self.saved_heroes:
                self._write("0. Indlaes en tidligere gemt helt\n")
            self._write(
                "1. Opret ny helt\n"
                "2. Vaelg en predefineret helt\n"
                "3. Vis statistik\n"
                "4. Afslut\n"
                "Valg: "
            )
            choice = self._ask(0 if self.saved_heroes else 1, 4)
            if choice == 0:
                self._choose_saved_hero()
                self._adventure()
            elif choice == 1:
                self._new_hero()
                self._adventure()
            elif choice == 2:
                self._choose_predefined_hero()
                self._adventure()
            elif choice == 3:
                self._show_statistics()
            else:
                self._write("Spillet afsluttes...\n")
                return

    def close(self) -> None:
        """Save the active hero and close the database."""
        if self._closed:
            return
        self._save_active_hero()
        self._db.close()
        self._closed = True

    def __enter__(self) -> "Game":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    # -- helpers -------------------------------------------------------

    def _ask(self, low: int, high: int) -> int:
        return read_int(low, high, self._read, self._write)

    def _refresh_saved_heroes(self) -> None:
        try:
            self.saved_heroes = self._repository.load_all()
        except DatabaseError:
            self._write("Ingen gemte helte fundet.\n")

    def _save_active_hero(self) -> None:
        hero = self.active_hero
        if hero is None:
            return
        hero.unequip()
        try:
            self._repository.save(hero)
        except DatabaseError:
            self._write("Fejl ved gemning af helt\n")
            return
        self._write("Helt gemt succesfuldt!\n")
        self._refresh_saved_heroes()

    # -- choosing a hero -----------------------------------------------

    def _choose_saved_hero(self) -> None:
        self._write("--- Vaelg en gemt helt ---\n")
        for number, hero in enumerate(self.saved_heroes, start=1):
            self._write(
                f"{number}. {hero.name} HP: {hero.max_hp}, Styrke: {hero.strength}, "
                f"XP: {hero.xp}, Level: {hero.level}, Guld: {hero.gold}\n"
            )
        self._write("Valg: ")
        choice = self._ask(1, len(self.saved_heroes))
        self.active_hero = copy.deepcopy(self.saved_heroes[choice - 1])
        self._write(f"Helt valgt: {self.active_hero.name}\n")

    def _new_hero(self) -> None:
        taken = {hero.name for hero in self.predefined_heroes}
        taken.update(hero.name for hero in self.saved_heroes)
        while True:
            self._write("Indtast navn paa ny helt: ")
            name = self._read()
            if name not in taken:
                break
            self._write("Navnet findes allerede. Proev et andet.\n")
        self.active_hero = Hero(name)
        try:
            self._repository.save(self.active_hero)
        except DatabaseError:
            self._write("Fejl ved gemning af helt\n")
        self._write(f"Ny helt oprettet: {self.active_hero.name}\n")

    def _choose_predefined_hero(self) -> None:
        self._write("--- Vaelg en eksisterende helt ---\n")
        for number, hero in enumerate(self.predefined_heroes, start=1):
            self._write(
                f"{number}. {hero.name} HP: {hero.max_hp}, Styrke: {hero.strength}, "
                f"Level: {hero.level}, Guld: {hero.gold}\n"
            )
        self._write("Valg: ")
        choice = self._ask(1, len(self.predefined_heroes))
        chosen = copy.deepcopy(self.predefined_heroes[choice - 1])

        existing = next(
            (hero for hero in self._repository.load_all() if hero.name == chosen.name), None
        )
        if existing is not None:
            chosen = existing
            self._write(
                "Helt med samme navn findes allerede i databasen. Bruger den eksisterende.\n"
            )
        else:
            self._repository.save(chosen)
            stored = next(
                (hero for hero in self._repository.load_all() if hero.name == chosen.name),
                None,
            )
            if stored is not None:
                chosen = stored
        self.active_hero = chosen
        self._write(f"Helt valgt: {chosen.name}\n")

    # -- adventuring ---------------------------------------------------

    def _adventure(self) -> None:
        hero = self.active_hero
        if hero is None:
            return
        while True:
            self._write(
                "\n--- EVENTYR MENU ---\n"
                "1. Kaemp mod en fjende\n"
                "2. Udforsk en grotte\n"
                "3. Vis inventar\n"
                "4. Vaabensaelger\n"
                "5. Tilbage til hovedmenu\n"
                "Valg: "
            )
            choice = self._ask(1, 5)
            if choice == 1:
                self._fight_chosen_enemy()
            elif choice == 2:
                self._create_caves()
                if self._explore_cave():
                    return
            elif choice == 3:
                self._inventory_menu()
            elif choice == 4:
                self._merchant_menu()
            else:
                self._save_active_hero()
                self._write("Tilbage til hovedmenu...\n")
                return
            if not hero.is_alive():
                return

    def _fight_chosen_enemy(self) -> None:
        self._write("--- Vaelg en fjende ---\n")
        for number, enemy in enumerate(self.enemies, start=1):
            self._write(
                f"{number}. {enemy.name} (HP: {enemy.max_hp}, Styrke: {enemy.strength})\n"
            )
        choice = self._ask(1, len(self.enemies))
        enemy = replace(self.enemies[choice - 1])
        fight(self.active_hero, enemy, self._db, self._read, self._write)

    def _create_caves(self) -> None:
        hero = self.active_hero
        if hero is None:
            self._write("Kan ikke oprette grotter uden en aktiv helt.\n")
            return
        if self._cave_generator is None:
            self._cave_generator = CaveGenerator(
                StandardEnemyFactory(self.enemies, self._rng), self._rng
            )
        try:
            self.caves = self._cave_generator.generate(hero.level, hero.level)
        except ValueError as exc:
            self._write(f"{exc}\n")
            self.caves = []

    def _explore_cave(self) -> bool:
        """Let the player pick a cave and fight through it; True if the hero died."""
        hero = self.active_hero
        if hero is None or not self.caves:
            return False
        self._write("--- Vaelg en grotte ---\n")
        for number, cave in enumerate(self.caves, start=1):
            self._write(f"{number}: {cave.name} (Guld: {cave.gold})\n")
            names = ",\n            ".join(enemy.name for enemy in cave.enemies)
            self._write(f"   Fjender: {names}\n\n")
        choice = self._ask(1, len(self.caves))
        cave = self.caves[choice - 1]

        for enemy in cave.enemies:
            self._write(f"{hero.name} moeder: {enemy.name}\n")
            fight(hero, replace(enemy), self._db, self._read, self._write)
            if not hero.is_alive():
                self._write(f"{hero.name} er doed og kan ikke fortsaette eventyret.\n")
                return True

        hero.gain_gold(cave.gold)
        self._write(f"{hero.name} har gennemfoert {cave.name} og faar {cave.gold} guld!\n")
        self._write(f"{hero.name} har nu {hero.gold} guld.\n")
        self.caves = []
        return False

    def _inventory_menu(self) -> None:
        hero = self.active_hero
        if hero is None:
            self._write("Ingen aktiv helt!\n")
            return
        if hero.weapon_count() == 0:
            self._write("Ingen vaaben i inventar!\n")
            return
        while True:
            self._write("\n".join(hero.inventory_lines()) + "\n")
            self._write("\n1. Udstyr vaaben\n2. Tilbage til eventyrmenu\nValg: ")
            if self._ask(1, 2) == 2:
                return
            self._write(f"Vaelg vaaben (1-{hero.weapon_count()}): ")
            index = self._ask(1, hero.weapon_count()) - 1
            try:
                weapon = hero.equip(index)
            except (IndexError, ValueError) as exc:
                self._write(f"{exc.args[0]}\n")
                continue
            self._write(f"{hero.name} har nu udstyret {weapon.name}!\n")

    def _merchant_menu(self) -> None:
        hero = self.active_hero
        if hero is None:
            self._write("Ingen aktiv helt!\n")
            return
        if self._merchant is None:
            self._merchant = WeaponMerchant(MERCHANT_NAME, self._db)
        merchant = self._merchant
        merchant.restock(hero.level)
        while True:
            self._write("\n--- VAABENHANDLER MENU ---\n")
            self._write(f"{hero.name} har {hero.gold} guld.\n\n")
            self._write("\n" + "\n".join(merchant.stock_lines(hero)) + "\n")
            self._write("\n1. Koeb vaaben\n2. Tilbage til eventyrmenu\nValg: ")
            if self._ask(1, 2) == 2:
                return
            self._write(f"Vaelg vaaben (1-{len(merchant)}, 0 for at afbryde): ")
            choice = self._ask(0, len(merchant))
            if choice == 0:
                self._write("Koeb af vaaben afbrudt.\n")
                continue
            offered = merchant.stock[choice - 1]
            cost = merchant.price(offered, hero.strength)
            try:
                bought = merchant.sell(choice - 1, hero)
            except (IndexError, ValueError) as exc:
                self._write(f"{exc.args[0]}\n")
                continue
            self._write(f"Koebet gennemfoert: {bought.name} for {cost} guld\n")

    # -- statistics ----------------------------------------------------

    def _show_statistics(self) -> None:
        self._write("--- Statistik ---\n")
        names = self._analysis.sorted_hero_names()
        self._write("Alle helte (alfabetisk):\n")
        for number, name in enumerate(names, start=1):
            self._write(f"  {number}. {name}\n")
        self._write(
            "\nVaelg en helt for detaljeret statistik "
            f"(0 for at gaa tilbage, eller 1-{len(names)}): "
        )
        choice = self._ask(0, len(names))
        if choice == 0:
            self._write("Tilbage til hovedmenu...\n")
            return

        wanted = names[choice - 1]
        hero = next((h for h in self._repository.load_all() if h.name == wanted), None)
        if hero is not None:
            kills = self._analysis.kills_by_hero(hero.db_id)
            self._write(f"\n{hero.name} har besejret {kills} fjender.\n")
            self._write("Fjender besejret per vaaben:\n")
            for weapon, count in self._analysis.kills_per_weapon(hero.db_id).items():
                self._write(f"  {weapon}: {count}\n")
        else:
            self._write("\nIngen statistik for valgt helt.\n")

        self._write("\nMest drabelige helt per vaaben:\n")
        for weapon, name in self._analysis.deadliest_hero_per_weapon().items():
            self._write(f"  {weapon}: {name}\n")


def main(argv: list[str] | None = None) -> int:
    """Start the game from the command line."""
    parser = argparse.ArgumentParser(prog="heltespil", description="Et tekstbaseret eventyr.")
    parser.add_argument("--db", default=DEFAULT_DB, help="stien til databasefilen")
    args = parser.parse_args(argv)
    with Game(args.db) as game:
        try:
            game.start()
        except (EOFError, KeyboardInterrupt):
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())