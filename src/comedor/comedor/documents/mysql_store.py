from __future__ import annotations

import json
import uuid
from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Callable, Iterator, Mapping, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.exceptions import DocumentNotFound
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .store import Document, Filter, QueuedBatch, resolve_timestamps


def _encode(value: Any) -> Any:
    if isinstance(value, datetime):
        return {"$datetime": value.isoformat()}
    if isinstance(value, date):
        return {"$date": value.isoformat()}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _decode(obj: dict) -> Any:
    if len(obj) == 1:
        if "$datetime" in obj:
            return datetime.fromisoformat(obj["$datetime"])
        if "$date" in obj:
            return date.fromisoformat(obj["$date"])
    return obj


def dumps(data: Mapping[str, Any]) -> str:
    return json.dumps(data, default=_encode, ensure_ascii=False)


def loads(raw: Any) -> dict:
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    return json.loads(raw, object_hook=_decode)


class MySQLDocumentStore:
    """Documents kept as JSON rows in a single ``documents`` table.

    Note: ``where`` loads the collection and filters in Python; collections
    here are small (one menu per week, one confirmation per department/day).
    """

    def __init__(self, conn_factory: DatabaseConnection, *, clock: Callable[[], datetime] = now_local):
        self._conn_factory = conn_factory
        self._clock = clock

    def get(self, collection: str, doc_id: str) -> Optional[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT data FROM documents WHERE collection=%s AND doc_id=%s", (collection, doc_id))
            r = fetchone(cur)
            return loads(r["data"]) if r else None

    def set(self, collection: str, doc_id: str, data: Mapping[str, Any], *, merge: bool = False) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            self._apply_set(cur, collection, doc_id, dict(data), merge, self._clock())

    def add(self, collection: str, data: Mapping[str, Any]) -> str:
        doc_id = uuid.uuid4().hex
        self.set(collection, doc_id, data)
        return doc_id

    def update(self, collection: str, doc_id: str, fields: Mapping[str, Any]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            self._apply_update(cur, collection, doc_id, dict(fields), self._clock())

    def delete(self, collection: str, doc_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM documents WHERE collection=%s AND doc_id=%s", (collection, doc_id))
            return cur.rowcount > 0

    def where(self, collection: str, *filters: Filter, limit: Optional[int] = None) -> Sequence[Document]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT doc_id, data FROM documents WHERE collection=%s ORDER BY created_at, doc_id",
                (collection,),
            )
            rows = fetchall(cur)

        out: list[Document] = []
        for r in rows:
            data = loads(r["data"])
            if all(f.matches(data) for f in filters):
                out.append(Document(id=r["doc_id"], data=data))
                if limit is not None and len(out) >= limit:
                    break
        return out

    @contextmanager
    def batch(self) -> Iterator[QueuedBatch]:
        queued = QueuedBatch()
        yield queued
        now = self._clock()
        # One connection, one transaction: db_cursor rolls back on failure.
        with db_cursor(self._conn_factory) as (_, cur):
            for kind, collection, doc_id, data, merge in queued.ops:
                if kind == "set":
                    self._apply_set(cur, collection, doc_id, data, merge, now)
                elif kind == "update":
                    self._apply_update(cur, collection, doc_id, data, now)
                else:
                    cur.execute("DELETE FROM documents WHERE collection=%s AND doc_id=%s", (collection, doc_id))

    def _load_for_update(self, cur, collection: str, doc_id: str) -> Optional[dict]:
        cur.execute(
            "SELECT data FROM documents WHERE collection=%s AND doc_id=%s FOR UPDATE",
            (collection, doc_id),
        )
        r = fetchone(cur)
        return loads(r["data"]) if r else None

    def _apply_set(self, cur, collection: str, doc_id: str, data: dict, merge: bool, now: datetime) -> None:
        data = resolve_timestamps(data, now)
        if merge:
            existing = self._load_for_update(cur, collection, doc_id)
            if existing is not None:
                existing.update(data)
                data = existing
        cur.execute(
            """
            INSERT INTO documents(collection, doc_id, data)
            VALUES(%s,%s,%s)
            ON DUPLICATE KEY UPDATE data=VALUES(data)
            """,
            (collection, doc_id, dumps(data)),
        )

    def _apply_update(self, cur, collection: str, doc_id: str, fields: dict, now: datetime) -> None:
        existing = self._load_for_update(cur, collection, doc_id)
        if existing is None:
            raise DocumentNotFound(collection, doc_id)
        existing.update(resolve_timestamps(fields, now))
        cur.execute(
            "UPDATE documents SET data=%s WHERE collection=%s AND doc_id=%s",
            (dumps(existing), collection, doc_id),
        )
