from __future__ import annotations

from datetime import date, datetime

import pytest

from comedor.documents.mysql_store import dumps, loads


def test_dates_survive_json_encoding():
    data = {"createdAt": datetime(2025, 1, 6, 8, 15), "date": date(2025, 1, 6), "name": "Miércoles"}

    raw = dumps(data)

    assert "Miércoles" in raw
    assert loads(raw) == data
    assert loads(raw.encode("utf-8")) == data


def test_unknown_types_are_rejected():
    with pytest.raises(TypeError):
        dumps({"x": object()})
