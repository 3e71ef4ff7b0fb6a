"""SQLite storage for heroes, weapons and battle statistics."""

from __future__ import annotations

import sqlite3
from os import PathLike
from typing import Any, Iterable

# Table name -> column and constraint clauses, in creation order.
_TABLES: dict[str, tuple[str, ...]] = {
    "Hero": (
        "id integer primary key autoincrement",
        "navn text not null",
        "maxHP integer not null",
        "hp integer not null",
        "styrke integer not null",
        "xp integer not null",
        "level integer not null",
        "guld integer not null",
    ),
    "Vaaben": (
        "id integer primary key autoincrement",
        "vaaben_type_id integer not null",
        "nuvaerendeHoldbarhed integer not null",
        "foreign key (vaaben_type_id) references VaabenTyper (id)",
    ),
    "VaabenTyper": (
        "id integer primary key autoincrement",
        "navn text not null unique",
        "baseStyrke integer not null",
        "skaleringsFaktor real not null",
        "maxHoldbarhed integer not null",
    ),
    "HeroVaaben": (
        "hero_id integer not null",
        "vaaben_id integer not null",
        "nuvaerendeHoldbarhed integer not null",
        "foreign key (hero_id) references Hero (id)",
        "foreign key (vaaben_id) references Vaaben (id)",
        "primary key (hero_id, vaaben_id)",
    ),
    "Analyse": (
        "id integer primary key autoincrement",
        "hero_id integer not null",
        "vaaben_id integer",
        "foreign key (hero_id) references Hero (id)",
        "foreign key (vaaben_id) references Vaaben (id)",
    ),
}


def _create_statement(table: str, clauses: tuple[str, ...]) -> str:
    body = ",\n    ".join(clauses)
    return f"create table if not exists {table} (\n    {body}\n)"


class DatabaseError(Exception):
    """Raised when the database cannot be opened or a statement fails."""


class Database:
    """A thin wrapper around an SQLite connection in autocommit mode."""

    def __init__(self, path: str | PathLike[str]) -> None:
        try:
            self._conn = sqlite3.connect(str(path), isolation_level=None)
        except sqlite3.Error as exc:
            raise DatabaseError(f"Kan ikke aabne database: {exc}") from exc

    def create_schema(self) -> None:
        """Create every table the game uses, if missing."""
        for table, clauses in _TABLES.items():
            self.execute(_create_statement(table, clauses))

    def execute(self, sql: str, params: Iterable[Any] = ()) -> int:
        """Run a statement that returns no rows; return the last inserted row id."""
        try:
            cursor = self._conn.execute(sql, tuple(params))
        except sqlite3.Error as exc:
            raise DatabaseError(f"SQL-fejl: {exc}") from exc
        return cursor.lastrowid or 0

    def query(self, sql: str, params: Iterable[Any] = ()) -> list[tuple[Any, ...]]:
        """Run a SELECT and return all rows."""
        try:
            return self._conn.execute(sql, tuple(params)).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(f"Fejl under forespoergsel: {exc}") from exc

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()