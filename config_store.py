# config_store.py
from typing import Optional, Protocol

from psycopg import AsyncConnection

import db
from db import dict_cursor

SETTINGS_COLLECTION = "dhl_location_finder.settings"


class ConfigStore(Protocol):
    async def get(self, name: str) -> Optional[str]: ...

    async def set(self, name: str, value: str) -> None: ...


class MemoryConfigStore:
    """Key/value store kept in process memory. Used when DATABASE_URL is not set."""

    def __init__(self, collection: str = SETTINGS_COLLECTION, values: dict[str, str] | None = None):
        self.collection = collection
        self._values: dict[str, str] = dict(values or {})

    async def get(self, name: str) -> Optional[str]:
        return self._values.get(name)

    async def set(self, name: str, value: str) -> None:
        self._values[name] = value


class PgConfigStore:
    def __init__(self, conn: AsyncConnection, collection: str = SETTINGS_COLLECTION):
        self.conn = conn
        self.collection = collection

    async def get(self, name: str) -> Optional[str]:
        async with dict_cursor(self.conn) as cur:
            await cur.execute(
                "select value from config where collection=%s and name=%s",
                (self.collection, name),
            )
            row = await cur.fetchone()
        return row["value"] if row else None

    async def set(self, name: str, value: str) -> None:
        async with dict_cursor(self.conn) as cur:
            await cur.execute("""
              insert into config (collection, name, value)
              values (%s, %s, %s)
              on conflict (collection, name) do update set value = excluded.value
            """, (self.collection, name, value))


memory_store = MemoryConfigStore()


async def get_config_store():
    if db.pool is None:
        yield memory_store
        return
    async with db.pool.connection() as conn:
        yield PgConfigStore(conn)
