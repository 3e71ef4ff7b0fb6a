"""Characters, enemies, weapons, heroes and caves."""

from __future__ import annotations

from dataclasses import dataclass, field

LEVEL_XP_STEP = 1000


@dataclass
class Character:
    """Anything that has a name, hit points and strength."""

    name: str
    max_hp: int
    hp: int
    strength: int

    def take_damage(self, amount: int) -> None:
        self.hp -= amount

    def is_alive(self) -> bool:
        return self.hp > 0


@dataclass
class Enemy(Character):
    """A foe that grants experience when defeated."""

    xp_reward: int


@dataclass
class Weapon:
    """A weapon whose damage scales with the wielder's strength."""

    name: str
    base_strength: int
    scaling_factor: int
    max_durability: int
    durability: int | None = None
    weapon_id: int = 0
    type_id: int = 0

    def __post_init__(self) -> None:
        if self.durability is None:
            self.durability = self.max_durability

    def total_damage(self, hero_strength: int) -> int:
        return self.base_strength + self.scaling_factor * hero_strength

    def set_durability(self, value: int) -> int:
        """Set the durability, clamped to 0..max_durability, and return it."""
        self.durability = max(0, min(value, self.max_durability))
        return self.durability

    def use(self) -> None:
        if self.durability > 0:
            self.durability -= 1

    def is_broken(self) -> bool:
        return self.durability <= 0


@dataclass
class Hero(Character):
    """The player's character, with experience, gold and a weapon inventory."""

    max_hp: int = 10
    hp: int = 10
    strength: int = 2
    xp: int = 0
    level: int = 1
    gold: int = 0
    db_id: int = 0
    inventory: list[Weapon] = field(default_factory=list)
    kills: int = 0
    _active: int | None = field(default=None, init=False, repr=False, compare=False)

    @property
    def active_weapon(self) -> Weapon | None:
        if self._active is None:
            return None
        return self.inventory[self._active]

    def damage(self) -> int:
        weapon = self.active_weapon
        if weapon is not None and not weapon.is_broken():
            return weapon.total_damage(self.strength)
        return self.strength

    def weapon_count(self) -> int:
        return len(self.inventory)

    def restore_hp(self) -> None:
        self.hp = self.max_hp

    def gain_xp(self, amount: int) -> None:
        self.xp += amount

    def gain_gold(self, amount: int) -> None:
        self.gold += amount

    def add_weapon(self, weapon: Weapon) -> None:
        self.inventory.append(weapon)

    def unequip(self) -> None:
        self._active = None

    def inventory_lines(self) -> list[str]:
        """Describe the inventory, one line per weapon."""
        if not self.inventory:
            return ["Ingen vaaben i inventar!"]
        lines = ["=== Vaaben inventar ==="]
        for number, weapon in enumerate(self.inventory, start=1):
            line = (
                f"{number}. {weapon.name} (Skade: +{weapon.total_damage(self.strength)}, "
                f"Holdbarhed: {weapon.durability}/{weapon.max_durability})"
            )
            if self._active == number - 1:
                line += " [UDSTYRET]"
            lines.append(line)
        return lines

    def use_active_weapon(self) -> bool:
        """Wear down the equipped weapon; return True if it broke and was unequipped."""
        weapon = self.active_weapon
        if weapon is None:
            raise ValueError("Ingen vaaben udstyret")
        weapon.use()
        if weapon.is_broken():
            self._active = None
            return True
        return False

    def level_up(self) -> bool:
        threshold = self.level * LEVEL_XP_STEP
        if self.xp < threshold:
            return False
        self.xp -= threshold
        self.level += 1
        self.max_hp += 2
        self.strength += 1
        return True

    def equip(self, index: int) -> Weapon:
        if not 0 <= index < len(self.inventory):
            raise IndexError("Ikke et validt vaabenindeks!")
        weapon = self.inventory[index]
        if weapon.is_broken():
            raise ValueError("Vaabenet er oedelagt og kan ikke udstyres!")
        self._active = index
        return weapon

    def record_kill(self) -> None:
        self.kills += 1


@dataclass
class Cave:
    """A cave full of enemies with a gold reward for clearing it."""

    name: str
    gold: int
    enemies: list[Enemy] = field(default_factory=list)