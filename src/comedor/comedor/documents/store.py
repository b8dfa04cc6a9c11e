from __future__ import annotations

import copy
import operator
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Protocol, Sequence


class _ServerTimestamp:
    """Placeholder replaced by the store's clock when a document is written."""

    _instance: Optional["_ServerTimestamp"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SERVER_TIMESTAMP"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


SERVER_TIMESTAMP = _ServerTimestamp()


_OPERATORS: Mapping[str, Callable[[Any, Any], bool]] = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "in": lambda actual, expected: actual in expected,
}


@dataclass(frozen=True)
class Filter:
    """Simple ``where`` clause: ``field op value``."""

    field: str
    op: str
    value: Any

    def __post_init__(self):
        if self.op not in _OPERATORS:
            raise ValueError(f"Unsupported filter operator: {self.op!r}")

    def matches(self, data: Mapping[str, Any]) -> bool:
        if self.field not in data:
            return False
        try:
            return bool(_OPERATORS[self.op](data[self.field], self.value))
        except TypeError:
            # e.g. comparing a string field with a number
            return False


@dataclass(frozen=True)
class Document:
    id: str
    data: dict = field(default_factory=dict)


def resolve_timestamps(data: Mapping[str, Any], now: datetime) -> dict:
    out: dict = {}
    for key, value in data.items():
        if value is SERVER_TIMESTAMP:
            out[key] = now
        elif isinstance(value, Mapping):
            out[key] = resolve_timestamps(value, now)
        else:
            out[key] = value
    return out


class QueuedBatch:
    """Writes collected inside ``store.batch()``; applied when the block exits."""

    def __init__(self):
        self.ops: list[tuple] = []

    def set(self, collection: str, doc_id: str, data: Mapping[str, Any], *, merge: bool = False) -> None:
        self.ops.append(("set", collection, doc_id, copy.deepcopy(dict(data)), merge))

    def update(self, collection: str, doc_id: str, fields: Mapping[str, Any]) -> None:
        self.ops.append(("update", collection, doc_id, copy.deepcopy(dict(fields)), False))

    def delete(self, collection: str, doc_id: str) -> None:
        self.ops.append(("delete", collection, doc_id, None, False))


class DocumentStore(Protocol):
    """Collection/document addressed store (hosted document database boundary).

    Note (DIP): repositories depend on this interface, not on a concrete backend.
    """

    def get(self, collection: str, doc_id: str) -> Optional[dict]:
        raise NotImplementedError

    def set(self, collection: str, doc_id: str, data: Mapping[str, Any], *, merge: bool = False) -> None:
        raise NotImplementedError

    def add(self, collection: str, data: Mapping[str, Any]) -> str:
        """Create a document with a generated id. Returns the id."""

        raise NotImplementedError

    def update(self, collection: str, doc_id: str, fields: Mapping[str, Any]) -> None:
        """Merge top-level fields into an existing document.

        Raises DocumentNotFound when the document does not exist.
        """

        raise NotImplementedError

    def delete(self, collection: str, doc_id: str) -> bool:
        raise NotImplementedError

    def where(self, collection: str, *filters: Filter, limit: Optional[int] = None) -> Sequence[Document]:
        raise NotImplementedError

    def batch(self) -> AbstractContextManager[QueuedBatch]:
        """Queue writes and apply them together when the block exits cleanly."""

        raise NotImplementedError
