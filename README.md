# heltespil

A small text-based role-playing game played in the terminal. You pick or
create a hero, fight enemies, explore randomly filled caves, buy weapons
from a merchant and level up. Heroes, their weapons and every victory are
stored in an SQLite database, so you can return to a saved hero later and
look at statistics across all heroes.

The game texts are in Danish.

## Installation

```
pip install .
```

## Playing

```
heltespil
```

By default the game keeps its data in `heros.db` in the current directory.
Another file can be given with `--db`:

```
heltespil --db mine_helte.db
```

The game ends when you choose *Afslut* in the main menu, or at end of input
or Ctrl-C. On the way out the active hero is saved.

### Main menu

- **Load a saved hero** (shown once at least one hero has been saved)
- **Create a new hero**: starts at level 1 with 10 HP and strength 2; the
  name must not already be used by a predefined or saved hero
- **Choose a predefined hero**: Murloc, Thor, Loke or Odin; if a hero of
  that name is already in the database, the stored one is used
- **Show statistics**: heroes in alphabetical order, kills for a chosen
  hero, its kills per weapon type, and the deadliest hero for each weapon
  type
- **Quit**

### Adventure menu

- **Fight an enemy**: choose one from the enemy list and press ENTER to
  attack; any other input is a miss
- **Explore a cave**: as many caves are offered as the hero's level; fight
  every enemy in the chosen cave in turn and collect its gold
- **Inventory**: equip a weapon that is not broken
- **Weapon merchant**: buy weapons with gold; the price is
  30 + 10 × the damage the weapon does for your hero
- **Back to main menu**: saves the hero

Winning a fight restores the hero's HP and gives XP (Murloc gets double).
A hero levels up once its XP reaches 1000 times its current level, gaining
2 max HP and 1 strength. An equipped weapon loses one point of durability
at the start of each fight and is unequipped when it reaches zero. Saving a
hero unequips its weapon, so remember to equip it again after loading.

## Using it as a library

The pieces of the game can be used on their own:

- `heltespil.models`: `Character`, `Enemy`, `Weapon`, `Hero`, `Cave`
- `heltespil.database`: `Database` (SQLite connection, `create_schema`,
  `execute`, `query`) and `DatabaseError`
- `heltespil.repository`: `HeroRepository` to save and load heroes with
  their weapons
- `heltespil.analysis`: `Analysis` for kill statistics
- `heltespil.factory`: `StandardEnemyFactory`, `CaveGenerator`, `cave_gold`
- `heltespil.combat`: `fight(hero, enemy, db, read, write)`
- `heltespil.merchant`: `WeaponMerchant`
- `heltespil.prompts`: `read_int(low, high, read, write)`
- `heltespil.game`: `Game` and `main`

```python
from heltespil.database import Database
from heltespil.models import Hero, Weapon
from heltespil.repository import HeroRepository

hero = Hero("Freja")
hero.add_weapon(Weapon("Hammer", 3, 2, 30))
hero.equip(0)
print(hero.damage())  # 3 + 2 * 2 = 7

with Database(":memory:") as db:
    db.create_schema()
    HeroRepository(db).save(hero)
    print(hero.db_id)  # 1
```

`Game(db_path, read, write, rng)` takes its input and output as callables
and an optional `random.Random`, which makes it possible to drive a whole
session from a script. Use it as a context manager, or call `close()`, to
save the active hero and close the database.

## Running the tests

```
pip install .[test]
pytest
```