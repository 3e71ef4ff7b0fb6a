"""Creation of scaled enemies and randomly populated caves."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Iterable

from heltespil.models import Cave, Enemy

CAVE_NAME = "Mysterious Cave"


class EnemyFactory(ABC):
    """Produces enemies suited to a hero's level."""

    @abstractmethod
    def create_enemy(self, hero_level: int) -> Enemy:
        """Create one enemy for a hero of the given level."""

    @abstractmethod
    def create_enemies(self, hero_level: int, count: int) -> list[Enemy]:
        """Create several enemies for a hero of the given level."""


def _modifier_for(hero_level: int) -> str:
    if hero_level <= 2:
        return "Weak"
    if hero_level <= 5:
        return "Average"
    if hero_level <= 10:
        return "Strong"
    return "Elite"


# (hp factor, strength factor, xp factor) for each modifier
_MODIFIERS = {
    "Weak": (0.75, 0.75, 1),
    "Average": (1, 1, 1.2),
    "Strong": (1.5, 1.5, 1.8),
    "Elite": (2, 2, 2.5),
}


class StandardEnemyFactory(EnemyFactory):
    """Picks base enemies by experience reward and scales them by a level modifier."""

    def __init__(self, enemies: Iterable[Enemy], rng: random.Random | None = None) -> None:
        self._enemies = list(enemies)
        self._rng = rng if rng is not None else random.Random()

    def create_enemy(self, hero_level: int) -> Enemy:
        modifier = _modifier_for(hero_level)
        low, high = hero_level * 100, hero_level * 300
        candidates = [e for e in self._enemies if low <= e.xp_reward <= high]
        if not candidates:
            raise ValueError(f"Ingen passende fjender for level {hero_level}")
        return self._with_modifier(self._rng.choice(candidates), modifier)

    def create_enemies(self, hero_level: int, count: int) -> list[Enemy]:
        return [self.create_enemy(hero_level) for _ in range(count)]

    @staticmethod
    def _with_modifier(base: Enemy, modifier: str) -> Enemy:
        hp_factor, strength_factor, xp_factor = _MODIFIERS[modifier]
        max_hp = int(base.max_hp * hp_factor)
        strength = max(1, int(base.strength * strength_factor))
        xp = int(base.xp_reward * xp_factor)
        return Enemy(f"{modifier} {base.name}", max_hp, max_hp, strength, xp)


def cave_gold(hero_level: int, enemy_count: int) -> int:
    """Gold awarded for clearing a cave."""
    return hero_level * 10 + enemy_count * 20


class CaveGenerator:
    """Builds caves filled with enemies from a factory."""

    def __init__(self, factory: EnemyFactory, rng: random.Random | None = None) -> None:
        self._factory = factory
        self._rng = rng if rng is not None else random.Random()

    def generate(self, hero_level: int, count: int) -> list[Cave]:
        caves = []
        for _ in range(count):
            enemy_count = self.enemy_count(hero_level)
            enemies = self._factory.create_enemies(hero_level, enemy_count)
            caves.append(Cave(CAVE_NAME, cave_gold(hero_level, enemy_count), enemies))
        return caves

    def enemy_count(self, hero_level: int) -> int:
        if hero_level <= 2:
            return self._rng.randint(1, 2)
        if hero_level <= 5:
            return self._rng.randint(2, 4)
        return self._rng.randint(3, 5)