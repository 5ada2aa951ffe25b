import pytest

from sefer.gematria import letter_values
from sefer.numbers import BaseForms, base_numbers
from sefer.tables import verify_tables


def test_tables_are_consistent(capsys):
    verify_tables()
    assert "[tables] OK: 27 letters, 28 base numbers, 22 spellings" in capsys.readouterr().out


def test_missing_letter_fails(monkeypatch):
    broken = letter_values()
    del broken["ץ"]
    monkeypatch.setattr("sefer.tables.letter_values", lambda: broken)
    with pytest.raises(RuntimeError, match="missing"):
        verify_tables()


def test_wrong_final_value_fails(monkeypatch):
    broken = dict(letter_values(), ם=600)
    monkeypatch.setattr("sefer.tables.letter_values", lambda: broken)
    with pytest.raises(RuntimeError, match="ם"):
        verify_tables()


def test_gap_in_base_numbers_fails(monkeypatch):
    broken = base_numbers()
    del broken[14]
    monkeypatch.setattr("sefer.tables.base_numbers", lambda: broken)
    with pytest.raises(RuntimeError, match="gaps"):
        verify_tables()


def test_gendered_decade_fails(monkeypatch):
    broken = dict(base_numbers())
    broken[30] = BaseForms("שלשים", "שלושים")
    monkeypatch.setattr("sefer.tables.base_numbers", lambda: broken)
    with pytest.raises(RuntimeError, match="30"):
        verify_tables()
