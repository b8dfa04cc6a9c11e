from __future__ import annotations

import pytest

from comedor.common.text import normalize, strip_accents


def test_normalize_lowercases_strips_accents_and_trims():
    assert normalize("MIÉRCOLES") == "miercoles"
    assert normalize("  Sábado ") == "sabado"


def test_normalize_is_total_over_none_and_non_strings():
    assert normalize(None) == ""
    assert normalize("") == ""
    assert normalize(42) == "42"


@pytest.mark.parametrize("text", ["Miércoles", " ÁÉÍÓÚ ñ ", "Ça va", "", "   ", "lunes", "SÁBADO\t"])
def test_normalize_is_idempotent(text):
    once = normalize(text)
    assert normalize(once) == once


def test_strip_accents_keeps_base_letters():
    assert strip_accents("Peña") == "Pena"
    assert strip_accents("Miércoles") == "Miercoles"


def test_normalize_handles_decomposed_input():
    # "e" followed by a combining acute accent
    assert normalize("Mie\u0301rcoles") == "miercoles"
