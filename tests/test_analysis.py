import pytest

from heltespil.analysis import Analysis
from heltespil.database import Database
from heltespil.models import Hero, Weapon
from heltespil.repository import HeroRepository


@pytest.fixture
def db():
    database = Database(":memory:")
    database.create_schema()
    yield database
    database.close()


@pytest.fixture
def repo(db):
    return HeroRepository(db)


@pytest.fixture
def analysis(db):
    return Analysis(db)


def _kill(db, hero, weapon=None):
    db.execute(
        "INSERT INTO Analyse (hero_id, vaaben_id) VALUES (?, ?)",
        (hero.db_id, weapon.weapon_id if weapon is not None else None),
    )


def _hero_with(repo, name, *weapons):
    hero = Hero(name)
    for weapon in weapons:
        hero.add_weapon(weapon)
    repo.save(hero)
    return hero


def test_sorted_hero_names(repo, analysis):
    for name in ["Thor", "Loke", "Odin"]:
        _hero_with(repo, name)
    names = analysis.sorted_hero_names()
    assert names == sorted(["Thor", "Loke", "Odin"])


def test_empty_database(analysis):
    assert analysis.sorted_hero_names() == []
    assert analysis.kills_by_hero(1) == 0
    assert analysis.kills_per_weapon(1) == {}
    assert analysis.deadliest_hero_per_weapon() == {}


def test_kills_by_hero_counts_all_kills(db, repo, analysis):
    hammer = Weapon("Hammer", 3, 2, 30)
    thor = _hero_with(repo, "Thor", hammer)
    loke = _hero_with(repo, "Loke")
    _kill(db, thor, hammer)
    _kill(db, thor)
    _kill(db, thor)
    _kill(db, loke)
    assert analysis.kills_by_hero(thor.db_id) == 3
    assert analysis.kills_by_hero(loke.db_id) == 1


def test_kills_per_weapon_groups_by_type(db, repo, analysis):
    hammer = Weapon("Hammer", 3, 2, 30)
    sword = Weapon("Jernsvaerd", 5, 1, 20)
    thor = _hero_with(repo, "Thor", hammer, sword)
    _kill(db, thor, hammer)
    _kill(db, thor, hammer)
    _kill(db, thor, sword)
    _kill(db, thor)
    stats = analysis.kills_per_weapon(thor.db_id)
    assert stats == {"Hammer": 2, "Jernsvaerd": 1}
    assert list(stats) == sorted(stats)
    assert sum(stats.values()) < analysis.kills_by_hero(thor.db_id)


def test_kills_per_weapon_only_for_given_hero(db, repo, analysis):
    hammer = Weapon("Hammer", 3, 2, 30)
    thor = _hero_with(repo, "Thor", hammer)
    loke = _hero_with(repo, "Loke")
    _kill(db, thor, hammer)
    assert analysis.kills_per_weapon(loke.db_id) == {}


def test_deadliest_hero_per_weapon(db, repo, analysis):
    thor_hammer = Weapon("Hammer", 3, 2, 30)
    loke_hammer = Weapon("Hammer", 3, 2, 30)
    loke_sword = Weapon("Jernsvaerd", 5, 1, 20)
    thor = _hero_with(repo, "Thor", thor_hammer)
    loke = _hero_with(repo, "Loke", loke_hammer, loke_sword)
    _kill(db, thor, thor_hammer)
    _kill(db, thor, thor_hammer)
    _kill(db, loke, loke_hammer)
    _kill(db, loke, loke_sword)
    assert analysis.deadliest_hero_per_weapon() == {"Hammer": "Thor", "Jernsvaerd": "Loke"}


def test_deadliest_ignores_kills_without_weapon(db, repo, analysis):
    thor = _hero_with(repo, "Thor")
    _kill(db, thor)
    _kill(db, thor)
    assert analysis.deadliest_hero_per_weapon() == {}
    assert analysis.kills_by_hero(thor.db_id) == 2