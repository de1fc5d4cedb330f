"""SQLite database for demonstration purposes."""

from datetime import datetime
from pathlib import Path
from typing import Any

import aiosqlite

DB_PATH = Path(__file__).parent.parent / "data" / "app.db"


async def get_db() -> aiosqlite.Connection:
    """Get database connection."""
    DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    db = await aiosqlite.connect(DB_PATH)
    db.row_factory = aiosqlite.Row
    return db


async def init_db() -> None:
    """Initialize the database with tables and sample data."""
    db = await get_db()
    try:
        await db.execute("""
            CREATE TABLE IF NOT EXISTS users (
                id INTEGER PRIMARY KEY,
                name TEXT NOT NULL,
                created_at TEXT NOT NULL
            )
        """)
        await db.execute("""
            CREATE TABLE IF NOT EXISTS posts (
                id INTEGER PRIMARY KEY,
                text TEXT NOT NULL,
                author_id INTEGER NOT NULL REFERENCES users (id)
            )
        """)

        cursor = await db.execute("SELECT COUNT(*) FROM users")
        (count,) = await cursor.fetchone()
        if count == 0:
            now = datetime.now().isoformat()
            await db.executemany(
                "INSERT INTO users (id, name, created_at) VALUES (?, ?, ?)",
                [(1, "John Doe", now), (2, "Jane Smith", now)],
            )
            await db.executemany(
                "INSERT INTO posts (id, text, author_id) VALUES (?, ?, ?)",
                [(1, "lorem", 1), (2, "ipsum", 2)],
            )
        await db.commit()
    finally:
        await db.close()


async def _fetch_one(sql: str, *params: Any) -> dict[str, Any] | None:
    db = await get_db()
    try:
        cursor = await db.execute(sql, params)
        row = await cursor.fetchone()
        return dict(row) if row else None
    finally:
        await db.close()


async def _fetch_all(sql: str, *params: Any) -> list[dict[str, Any]]:
    db = await get_db()
    try:
        cursor = await db.execute(sql, params)
        return [dict(row) for row in await cursor.fetchall()]
    finally:
        await db.close()


async def get_user(user_id: str) -> dict[str, Any] | None:
    return await _fetch_one("SELECT * FROM users WHERE id = ?", user_id)


async def get_post(post_id: str) -> dict[str, Any] | None:
    return await _fetch_one("SELECT * FROM posts WHERE id = ?", post_id)


async def get_users() -> list[dict[str, Any]]:
    return await _fetch_all("SELECT * FROM users ORDER BY id")


async def get_posts() -> list[dict[str, Any]]:
    return await _fetch_all("SELECT * FROM posts ORDER BY id")
