import pytest

from sefer.gematria import compute_value
from sefer.numbers import (
    BaseForms,
    Gender,
    base_forms,
    base_numbers,
    name_number,
    number_name,
    parse_gender,
)

M = Gender.MASCULINE
F = Gender.FEMININE


@pytest.mark.parametrize("n,gender,expected", [
    (1, M, "אחד"),
    (1, F, "אחת"),
    (2, M, "שנים"),
    (2, F, "שתים"),
    (8, F, "שמונה"),
    (10, M, "עשרה"),
    (10, F, "עשר"),
    (13, M, "שלשה עשר"),
    (13, F, "שלש עשרה"),
    (20, F, "עשרים"),
    (21, M, "עשרים ואחד"),
    (21, F, "עשרים ואחת"),
    (99, M, "תשעים ותשעה"),
    (100, F, "מאה"),
    (101, M, "מאה ואחד"),
    (110, M, "מאה ועשרה"),
    (200, M, "מאתיים"),
    (300, M, "שלש מאות"),
    (345, M, "שלש מאות וארבעים וחמשה"),
    (345, F, "שלש מאות וארבעים וחמש"),
    (1000, M, "אלף"),
    (1205, M, "אלף ומאתיים וחמשה"),
    (1910, F, "אלף ותשע מאות ועשר"),
    (2000, F, "אלפיים"),
    (2001, F, "אלפיים ואחת"),
    (3000, M, "שלשה אלפים"),
    (3000, F, "שלש אלפים"),
    (11000, M, "אחד עשר אלפים"),
    (1000000, M, "אלף אלפים"),
])
def test_name_number(n, gender, expected):
    assert name_number(n, gender) == expected


def test_default_gender_is_masculine():
    assert name_number(5) == "חמשה"


def test_hundreds_count_is_always_feminine():
    for h in range(3, 10):
        masc = name_number(h * 100, M)
        fem = name_number(h * 100, F)
        assert masc == fem
        assert masc == name_number(h, F) + " מאות"


def test_decades_are_the_same_for_both_genders():
    for n in range(20, 101, 10):
        assert name_number(n, M) == name_number(n, F)


def test_seventeen_gematria():
    masc = name_number(17, M)
    fem = name_number(17, F)
    assert masc == "שבעה עשר"
    assert fem == "שבע עשרה"
    # ש300 ב2 ע70 ה5 + ע70 ש300 ר200
    assert compute_value(masc) == 947
    # ש300 ב2 ע70 + ע70 ש300 ר200 ה5
    assert compute_value(fem) == 947


def test_thirteen_is_not_a_fixed_point():
    assert name_number(13, M) == base_forms(13).masculine
    assert compute_value(name_number(13, M)) == 1205


@pytest.mark.parametrize("n", [0, -5, 2.5])
def test_fallback_is_digit_string(n):
    assert name_number(n, M) == str(n)


def test_booleans_are_not_numbers():
    assert name_number(True, M) == "True"


def test_naming_is_deterministic():
    for n in range(1, 2500, 7):
        for g in Gender:
            assert name_number(n, g) == name_number(n, g)


def test_every_name_is_hebrew():
    for n in range(1, 1200):
        text = name_number(n, F)
        assert text
        assert not any(ch.isdigit() for ch in text)


def test_number_name_value_type():
    nn = number_name(17, F)
    assert nn.number == 17
    assert nn.text == "שבע עשרה"
    assert nn.gender is F
    assert nn.gematria == 947
    with pytest.raises(Exception):
        nn.text = "x"


def test_base_table():
    table = base_numbers()
    assert len(table) == 28
    assert set(range(1, 21)) <= set(table)
    assert table[100] == BaseForms("מאה", "מאה")
    assert base_forms(21) is None


@pytest.mark.parametrize("value,expected", [
    ("masculine", M),
    ("m", M),
    ("M", M),
    ("זכר", M),
    ("feminine", F),
    ("f", F),
    (" נקבה ", F),
    (F, F),
])
def test_parse_gender(value, expected):
    assert parse_gender(value) is expected


def test_parse_gender_rejects_unknown():
    with pytest.raises(ValueError):
        parse_gender("neuter")
