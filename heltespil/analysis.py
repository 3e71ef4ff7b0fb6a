"""Statistics over heroes and the enemies they have defeated."""

from __future__ import annotations

from collections import defaultdict

from heltespil.database import Database

_WEAPON_KILLS_FOR_HERO = """
    select kind.navn, count(*)
      from Analyse as kill
      join Vaaben as item on item.id = kill.vaaben_id
      join VaabenTyper as kind on kind.id = item.vaaben_type_id
     where kill.hero_id = ?
     group by kind.navn
"""

_KILLS_BY_WEAPON_AND_HERO = """
    select kind.navn, kill.hero_id, owner.navn, count(*)
      from Analyse as kill
      join Vaaben as item on item.id = kill.vaaben_id
      join VaabenTyper as kind on kind.id = item.vaaben_type_id
      left join Hero as owner on owner.id = kill.hero_id
     group by kind.navn, kill.hero_id
"""


class Analysis:
    """Queries over the recorded victories."""

    def __init__(self, db: Database) -> None:
        self._db = db

    def sorted_hero_names(self) -> list[str]:
        """Names of all stored heroes in alphabetical order."""
        return [name for (name,) in self._db.query("select navn from Hero order by navn")]

    def kills_by_hero(self, hero_id: int) -> int:
        """Number of enemies the hero has defeated."""
        rows = self._db.query("select count(*) from Analyse where hero_id = ?", (hero_id,))
        return rows[0][0] if rows else 0

    def kills_per_weapon(self, hero_id: int) -> dict[str, int]:
        """Defeated enemies per weapon type for the hero, keyed by weapon name in order."""
        rows = self._db.query(_WEAPON_KILLS_FOR_HERO, (hero_id,))
        return dict(sorted((name, count) for name, count in rows))

    def deadliest_hero_per_weapon(self) -> dict[str, str]:
        """For each weapon type, the hero with the most kills using it.

        The best score is taken per hero id; a hero name qualifies when its
        combined kills with the weapon equal that score. On a tie the name
        last in alphabetical order is kept.
        """
        best: dict[str, int] = defaultdict(int)
        by_name: dict[str, dict[str, int]] = defaultdict(lambda: defaultdict(int))
        for weapon, _hero_id, hero_name, kills in self._db.query(_KILLS_BY_WEAPON_AND_HERO):
            best[weapon] = max(best[weapon], kills)
            if hero_name is not None:
                by_name[weapon][hero_name] += kills

        result: dict[str, str] = {}
        for weapon in sorted(by_name):
            winners = [name for name, kills in by_name[weapon].items() if kills == best[weapon]]
            if winners:
                result[weapon] = max(winners)
        return result