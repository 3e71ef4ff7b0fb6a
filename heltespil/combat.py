"""Turn-based fights between a hero and an enemy."""

from __future__ import annotations

import sys
from typing import Callable

from heltespil.database import Database
from heltespil.models import Enemy, Hero

DOUBLE_XP_HERO = "Murloc"


def fight(
    hero: Hero,
    enemy: Enemy,
    db: Database,
    read: Callable[[], str] | None = None,
    write: Callable[[str], object] | None = None,
) -> bool:
    """Fight until one side falls; return True if the hero survives.

    An empty line from ``read`` is an attack, anything else is a miss.
    A victory heals the hero, grants experience, applies level-ups and
    records the kill in the statistics table.
    """
    read = read if read is not None else input
    write = write if write is not None else sys.stdout.write

    write("--- KAMP ---\n")
    write(f"{hero.name} kaemper mod {enemy.name}!\n\n")
    write(f"{hero.name} har\nHP: {hero.hp}\n")
    weapon = hero.active_weapon
    if weapon is not None:
        write(f"Vaaben: {weapon.name} ({weapon.durability}/{weapon.max_durability})\n")
        if hero.use_active_weapon():
            write(f"{weapon.name} er oedelagt!\n")
    else:
        write(f"styrke: {hero.strength}\n\n")
    write(f"{enemy.name} har\nHP: {enemy.hp}\nstyrke: {enemy.strength}\n\n")

    while hero.is_alive() and enemy.is_alive():
        write("Tryk paa ENTER for at angribe!\n")
        if read() == "":
            damage = hero.damage()
            write(f"{hero.name} rammer {enemy.name} for {damage} skade!\n")
            enemy.take_damage(damage)
        else:
            write(f"{hero.name} fumler og rammer ikke!\n")
        if not enemy.is_alive():
            break
        write(f"{enemy.name} har {enemy.hp} HP tilbage.\n\n")
        write(f"{enemy.name} rammer {hero.name} for {enemy.strength} skade!\n")
        hero.take_damage(enemy.strength)
        if not hero.is_alive():
            break
        write(f"{hero.name} har {hero.hp} HP tilbage.\n\n")

    if not hero.is_alive():
        write(f"{hero.name} doede i kampen...\n")
        write("Din helt gaar tilbage til sidste gemte tilstand.\n")
        return False

    hero.restore_hp()
    if hero.name == DOUBLE_XP_HERO:
        reward = enemy.xp_reward * 2
        write(
            f"{hero.name} vandt og faar double XP! "
            f"{hero.name} faar derfor {reward} XP!\n"
        )
    else:
        reward = enemy.xp_reward
        write(f"{hero.name} vandt og faar {reward} XP!\n")
    hero.gain_xp(reward)

    while hero.level_up():
        hero.restore_hp()
        write(f"{hero.name} er steget i level!\n")
        write(f"Nyt level: {hero.level}\n")
        write(f"Nyt max HP: {hero.max_hp}\n")
        write(f"Nyt styrke: {hero.strength}\n")
    write(f"{hero.name} har nu {hero.xp} XP.\n")

    active = hero.active_weapon
    weapon_id = active.weapon_id if active is not None else 0
    db.execute(
        "INSERT INTO Analyse (hero_id, vaaben_id) VALUES (?, ?)",
        (hero.db_id, weapon_id if weapon_id > 0 else None),
    )
    return True