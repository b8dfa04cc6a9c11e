from __future__ import annotations

import copy
import threading
import uuid
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Callable, Iterator, Mapping, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.exceptions import DocumentNotFound
from .store import Document, Filter, QueuedBatch, resolve_timestamps


class InMemoryDocumentStore:
    """Process-local document store used for development and tests.

    Documents are deep-copied on the way in and out so callers never share
    state with the store.
    """

    def __init__(self, *, clock: Callable[[], datetime] = now_local):
        self._collections: dict[str, dict[str, dict]] = {}
        self._lock = threading.RLock()
        self._clock = clock

    def get(self, collection: str, doc_id: str) -> Optional[dict]:
        with self._lock:
            doc = self._collections.get(collection, {}).get(doc_id)
            return copy.deepcopy(doc) if doc is not None else None

    def set(self, collection: str, doc_id: str, data: Mapping[str, Any], *, merge: bool = False) -> None:
        with self._lock:
            self._apply_set(collection, doc_id, copy.deepcopy(dict(data)), merge, self._clock())

    def add(self, collection: str, data: Mapping[str, Any]) -> str:
        doc_id = uuid.uuid4().hex
        self.set(collection, doc_id, data)
        return doc_id

    def update(self, collection: str, doc_id: str, fields: Mapping[str, Any]) -> None:
        with self._lock:
            self._apply_update(collection, doc_id, copy.deepcopy(dict(fields)), self._clock())

    def delete(self, collection: str, doc_id: str) -> bool:
        with self._lock:
            return self._collections.get(collection, {}).pop(doc_id, None) is not None

    def where(self, collection: str, *filters: Filter, limit: Optional[int] = None) -> Sequence[Document]:
        with self._lock:
            out: list[Document] = []
            for doc_id, data in self._collections.get(collection, {}).items():
                if all(f.matches(data) for f in filters):
                    out.append(Document(id=doc_id, data=copy.deepcopy(data)))
                    if limit is not None and len(out) >= limit:
                        break
            return out

    @contextmanager
    def batch(self) -> Iterator[QueuedBatch]:
        queued = QueuedBatch()
        yield queued
        with self._lock:
            # All-or-nothing: restore the snapshot if any queued write fails.
            snapshot = copy.deepcopy(self._collections)
            now = self._clock()
            try:
                for kind, collection, doc_id, data, merge in queued.ops:
                    if kind == "set":
                        self._apply_set(collection, doc_id, data, merge, now)
                    elif kind == "update":
                        self._apply_update(collection, doc_id, data, now)
                    else:
                        self._collections.get(collection, {}).pop(doc_id, None)
            except Exception:
                self._collections = snapshot
                raise

    def _apply_set(self, collection: str, doc_id: str, data: dict, merge: bool, now: datetime) -> None:
        docs = self._collections.setdefault(collection, {})
        data = resolve_timestamps(data, now)
        if merge and doc_id in docs:
            docs[doc_id].update(data)
        else:
            docs[doc_id] = data

    def _apply_update(self, collection: str, doc_id: str, fields: dict, now: datetime) -> None:
        docs = self._collections.get(collection, {})
        if doc_id not in docs:
            raise DocumentNotFound(collection, doc_id)
        docs[doc_id].update(resolve_timestamps(fields, now))
