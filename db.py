# db.py
import os
from dotenv import load_dotenv
from psycopg_pool import AsyncConnectionPool
from psycopg.rows import dict_row

load_dotenv()

# без DATABASE_URL ключ хранится в памяти процесса (dev / тесты)
DATABASE_URL = (os.getenv("DATABASE_URL") or "").strip()

pool = AsyncConnectionPool(
    DATABASE_URL,
    min_size=1,
    max_size=10,
    open=False,
) if DATABASE_URL else None

SCHEMA_SQL = """
create table if not exists config (
    collection text not null,
    name       text not null,
    value      text,
    primary key (collection, name)
)
"""

async def ensure_schema():
    if pool is None:
        return
    async with pool.connection() as conn:
        await conn.execute(SCHEMA_SQL)

def dict_cursor(conn):
    return conn.cursor(row_factory=dict_row)
