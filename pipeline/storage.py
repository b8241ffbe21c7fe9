"""SQLite content repository.

Saved drafts and published pieces, one row per ContentItem. List-valued
fields (tags, media_urls) and metadata are stored as JSON text.

Uses Python's built-in sqlite3.
"""

from __future__ import annotations

import json
import logging
import sqlite3
import threading
from datetime import datetime, timezone
from typing import Any

from pydantic.alias_generators import to_camel

import config
from schemas.content import ContentItem

logger = logging.getLogger(__name__)

DB_PATH = config.CONTENT_DB_PATH

# Thread-local connections (sqlite3 objects can't be shared across threads)
_local = threading.local()

_JSON_FIELDS = ("tags", "media_urls", "metadata")
_COLUMNS = tuple(ContentItem.model_fields)
# camelCase and snake_case keys both map onto column names
_KEY_TO_COLUMN = {**{name: name for name in _COLUMNS}, **{to_camel(name): name for name in _COLUMNS}}
_READONLY = ("id", "user_id", "created_at")

_DEFAULTS = {
    "content_type": "general",
    "platform": "other",
    "status": "draft",
    "language": "en",
}


def _get_conn() -> sqlite3.Connection:
    """Get a thread-local SQLite connection."""
    if not hasattr(_local, "conn") or _local.conn is None:
        _local.conn = sqlite3.connect(str(DB_PATH), check_same_thread=False)
        _local.conn.row_factory = sqlite3.Row
        _local.conn.execute("PRAGMA journal_mode=WAL")
        _local.conn.execute("PRAGMA foreign_keys=ON")
    return _local.conn


def reset_storage_connection_for_tests():
    """Close this thread's connection so the next call reopens DB_PATH."""
    conn = getattr(_local, "conn", None)
    if conn is not None:
        conn.close()
    _local.conn = None


def init_db():
    """Create tables if they don't exist. Call once at startup."""
    conn = _get_conn()
    conn.executescript("""
        CREATE TABLE IF NOT EXISTS content (
            id              TEXT    PRIMARY KEY,
            user_id         TEXT    NOT NULL,
            title           TEXT    NOT NULL,
            content         TEXT    NOT NULL,
            content_type    TEXT    NOT NULL DEFAULT 'general',
            platform        TEXT    NOT NULL DEFAULT 'other',
            sub_platform    TEXT    NOT NULL DEFAULT '',
            persona         TEXT    NOT NULL DEFAULT '',
            status          TEXT    NOT NULL DEFAULT 'draft',
            tags            TEXT    NOT NULL DEFAULT '[]',
            research_data   TEXT    NOT NULL DEFAULT '',
            media_urls      TEXT    NOT NULL DEFAULT '[]',
            style           TEXT    NOT NULL DEFAULT '',
            length          TEXT    NOT NULL DEFAULT '',
            language        TEXT    NOT NULL DEFAULT 'en',
            metadata        TEXT,
            created_at      TEXT    NOT NULL,
            updated_at      TEXT    NOT NULL
        );

        CREATE INDEX IF NOT EXISTS idx_content_user
            ON content(user_id, updated_at);
    """)
    conn.commit()
    logger.info("SQLite database initialized: %s", DB_PATH)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _to_columns(data: dict[str, Any]) -> dict[str, Any]:
    """Map camelCase/snake_case keys to column names, dropping unknown keys."""
    columns = {}
    for key, value in data.items():
        column = _KEY_TO_COLUMN.get(key)
        if column is None:
            logger.debug("Ignoring unknown content field: %s", key)
            continue
        columns[column] = value
    return columns


def _encode(column: str, value: Any) -> Any:
    if column in _JSON_FIELDS:
        return json.dumps(value, default=str) if value is not None else None
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def _row_to_item(row: sqlite3.Row) -> ContentItem:
    data = dict(row)
    for column in _JSON_FIELDS:
        raw = data.get(column)
        data[column] = json.loads(raw) if raw else ([] if column != "metadata" else None)
    return ContentItem.model_validate(data)


# ---------------------------------------------------------------------------
# Create / update
# ---------------------------------------------------------------------------

def save_content(data: dict[str, Any]) -> str:
    """Insert a new content item. Returns its id.

    title, content and userId are required; contentType, platform,
    status and language fall back to general/other/draft/en.
    """
    columns = _to_columns(data)
    missing = [
        label for label, column in (("title", "title"), ("content", "content"), ("userId", "user_id"))
        if not columns.get(column)
    ]
    if missing:
        raise ValueError(f"Missing required content data: {', '.join(missing)}")

    for column, default in _DEFAULTS.items():
        if not columns.get(column):
            columns[column] = default
    # ids and timestamps are always assigned here
    for column in ("id", "created_at", "updated_at"):
        columns.pop(column, None)

    item = ContentItem.model_validate(columns)
    row = item.model_dump()
    now = _now()
    row["created_at"] = now
    row["updated_at"] = now

    conn = _get_conn()
    names = list(row)
    conn.execute(
        f"INSERT INTO content ({', '.join(names)}) VALUES ({', '.join('?' for _ in names)})",
        [_encode(name, row[name]) for name in names],
    )
    conn.commit()
    logger.info(
        "Saved content %s for user %s: %r (%s/%s, %d chars)",
        item.id, item.user_id, item.title[:50], item.content_type, item.platform, len(item.content),
    )
    return item.id


def update_content(content_id: str, data: dict[str, Any]) -> bool:
    """Update fields of an existing item and touch updated_at. Returns True if found."""
    existing = get_content_by_id(content_id)
    if existing is None:
        return False

    changes = {k: v for k, v in _to_columns(data).items() if k not in _READONLY and k != "updated_at"}
    # Validate the merged record before writing
    merged = ContentItem.model_validate({**existing.model_dump(), **changes})
    changes = {k: getattr(merged, k) for k in changes}
    changes["updated_at"] = _now()

    conn = _get_conn()
    assignments = ", ".join(f"{name}=?" for name in changes)
    conn.execute(
        f"UPDATE content SET {assignments} WHERE id=?",
        [_encode(name, value) for name, value in changes.items()] + [content_id],
    )
    conn.commit()
    logger.info("Updated content %s: %s", content_id, ", ".join(sorted(changes)))
    return True


def archive_content(content_id: str) -> bool:
    """Soft-delete: status becomes archived."""
    return update_content(content_id, {"status": "archived"})


def restore_content(content_id: str) -> bool:
    """Bring archived content back as a draft."""
    return update_content(content_id, {"status": "draft"})


def delete_content(content_id: str) -> bool:
    """Delete permanently. Returns True if found."""
    conn = _get_conn()
    cur = conn.execute("DELETE FROM content WHERE id=?", (content_id,))
    conn.commit()
    return cur.rowcount > 0


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

def get_content_by_id(content_id: str) -> ContentItem | None:
    conn = _get_conn()
    row = conn.execute("SELECT * FROM content WHERE id=?", (content_id,)).fetchone()
    return _row_to_item(row) if row else None


def get_user_content(
    user_id: str,
    status: str | None = None,
    content_type: str | None = None,
    limit: int | None = None,
) -> list[ContentItem]:
    """A user's content, most recently updated first."""
    sql = "SELECT * FROM content WHERE user_id=?"
    params: list[Any] = [user_id]
    if status:
        sql += " AND status=?"
        params.append(status)
    if content_type:
        sql += " AND content_type=?"
        params.append(content_type)
    sql += " ORDER BY updated_at DESC, rowid DESC"
    if limit and limit > 0:
        sql += " LIMIT ?"
        params.append(limit)

    rows = _get_conn().execute(sql, params).fetchall()
    return [_row_to_item(r) for r in rows]


def search_user_content(user_id: str, keyword: str) -> list[ContentItem]:
    """Case-insensitive substring search over title and body."""
    needle = (keyword or "").lower()
    return [
        item for item in get_user_content(user_id)
        if needle in f"{item.title} {item.content}".lower()
    ]


def get_user_content_stats(user_id: str) -> dict[str, Any]:
    """Counts by status and by content type for a dashboard."""
    stats: dict[str, Any] = {"total": 0, "published": 0, "draft": 0, "archived": 0, "byType": {}}
    for item in get_user_content(user_id):
        stats["total"] += 1
        stats[item.status] += 1
        stats["byType"][item.content_type] = stats["byType"].get(item.content_type, 0) + 1
    return stats
