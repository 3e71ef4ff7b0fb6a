import pytest

from heltespil.database import Database, DatabaseError
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


def test_save_new_hero_assigns_id(repo):
    hero = Hero("Thor", 14, 14, 4, 0, 4, 0)
    repo.save(hero)
    assert hero.db_id > 0


def test_save_and_load_round_trip(repo):
    hero = Hero("Loke", 8, 7, 6, 150, 3, 42)
    repo.save(hero)
    loaded = repo.load_all()
    assert len(loaded) == 1
    got = loaded[0]
    assert (got.name, got.max_hp, got.hp, got.strength, got.xp, got.level, got.gold) == (
        "Loke", 8, 7, 6, 150, 3, 42,
    )
    assert got.db_id == hero.db_id
    assert got.inventory == []


def test_save_existing_hero_updates_row(repo):
    hero = Hero("Odin", 18, 18, 3, 0, 5, 0)
    repo.save(hero)
    first_id = hero.db_id
    hero.gain_gold(75)
    repo.save(hero)
    loaded = repo.load_all()
    assert len(loaded) == 1
    assert loaded[0].db_id == first_id
    assert loaded[0].gold == 75


def test_weapons_round_trip(repo):
    hero = Hero("Murloc", 4, 4, 1, 0, 1, 0)
    weapon = Weapon("Hammer", 3, 2, 30)
    weapon.set_durability(10)
    hero.add_weapon(weapon)
    repo.save(hero)
    assert weapon.weapon_id > 0
    loaded = repo.load_all()[0].inventory
    assert len(loaded) == 1
    got = loaded[0]
    assert (got.name, got.base_strength, got.scaling_factor, got.max_durability) == (
        "Hammer", 3, 2, 30,
    )
    assert got.durability == 10
    assert got.weapon_id == weapon.weapon_id


def test_saving_twice_does_not_duplicate_weapons(repo):
    hero = Hero("Thor")
    hero.add_weapon(Weapon("Jernsvaerd", 5, 1, 20))
    hero.add_weapon(Weapon("Hammer", 3, 2, 30))
    repo.save(hero)
    repo.save(hero)
    weapons = repo.load_weapons(hero.db_id)
    assert sorted(w.name for w in weapons) == ["Hammer", "Jernsvaerd"]


def test_resave_updates_durability(repo):
    hero = Hero("Thor")
    weapon = Weapon("Lynsvaerd", 12, 5, 40)
    hero.add_weapon(weapon)
    repo.save(hero)
    weapon.use()
    weapon.use()
    repo.save(hero)
    loaded = repo.load_weapons(hero.db_id)
    assert loaded[0].durability == weapon.durability
    assert loaded[0].durability < weapon.max_durability


def test_weapon_type_id_is_shared_by_name(repo):
    first = repo.weapon_type_id(Weapon("Hammer", 3, 2, 30))
    again = repo.weapon_type_id(Weapon("Hammer", 3, 2, 30))
    other = repo.weapon_type_id(Weapon("Staaloekse", 8, 3, 15))
    assert first == again
    assert other != first


def test_save_weapon_links_to_hero(repo):
    hero = Hero("Loke")
    repo.save(hero)
    weapon = Weapon("Morgenstjerne", 10, 1, 10)
    repo.save_weapon(hero.db_id, weapon)
    loaded = repo.load_weapons(hero.db_id)
    assert [w.name for w in loaded] == ["Morgenstjerne"]
    assert loaded[0].weapon_id == weapon.weapon_id


def test_load_weapons_of_unknown_hero_is_empty(repo):
    assert repo.load_weapons(999) == []


def test_load_all_empty(repo):
    assert repo.load_all() == []


def test_save_without_schema_raises_and_keeps_id():
    with Database(":memory:") as database:
        repo = HeroRepository(database)
        hero = Hero("Thor")
        with pytest.raises(DatabaseError):
            repo.save(hero)
        assert hero.db_id == 0