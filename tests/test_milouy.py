import pytest

from sefer.gematria import ALPHABET, alphabet_index, compute_value
from sefer.milouy import distinct_letters, expand_spelling, full_spelling, spelling_table


def test_full_spelling_covers_every_letter():
    for ch in ALPHABET:
        spelled = full_spelling(ch)
        assert spelled.startswith(ch)
        assert len(spelled) >= 2


@pytest.mark.parametrize("letter,expected", [
    ("א", "אלף"),
    ("ה", "הא"),
    ("ו", "ויו"),
    ("פ", "פא"),
    ("ת", "תיו"),
    ("ך", "כף"),
    ("ף", "פא"),
    ("ץ", "צדי"),
])
def test_full_spelling(letter, expected):
    assert full_spelling(letter) == expected


def test_non_letters_pass_through():
    assert full_spelling("a") == "a"
    assert full_spelling("7") == "7"


def test_spelling_table():
    table = spelling_table()
    assert [e.letter for e in table] == list(ALPHABET)
    by_letter = {e.letter: e for e in table}
    assert by_letter["א"].gematria == 111
    assert by_letter["ב"].gematria == 412
    assert by_letter["ת"].gematria == 416


def test_expand_one_level():
    (step,) = expand_spelling("א", 1)
    assert step.depth == 1
    assert step.text == "אלף"
    assert step.gematria == 111
    assert step.distinct_letters == ("א", "ל", "פ")


def test_expand_two_levels():
    steps = expand_spelling("א", 2)
    assert [s.depth for s in steps] == [1, 2]
    second = steps[1]
    assert second.text == "אלף למד פא"
    assert second.gematria == 111 + 74 + 81
    assert second.distinct_letters == ("א", "ד", "ל", "מ", "פ")


def test_whitespace_is_stripped_from_seed():
    (step,) = expand_spelling(" א  ב ", 1)
    assert step.text == "אלף בית"
    assert step.gematria == 111 + 412


def test_literals_pass_through_expansion():
    (step,) = expand_spelling("אb", 1)
    assert step.text == "אלף b"
    assert step.gematria == 111
    assert step.distinct_letters == ("א", "ל", "פ")


def test_depth_is_clamped():
    assert len(expand_spelling("ב", 0)) == 1
    assert len(expand_spelling("ב", -4)) == 1
    assert len(expand_spelling("", 25)) == 10


def test_empty_seed():
    steps = expand_spelling("", 3)
    assert len(steps) == 3
    assert all(s.text == "" and s.gematria == 0 and s.distinct_letters == () for s in steps)


def test_distinct_letters_are_unique_and_in_alphabet_order():
    for s in expand_spelling("שלום", 3):
        letters = s.distinct_letters
        assert len(letters) == len(set(letters))
        assert list(letters) == sorted(letters, key=alphabet_index)
        assert all(ch in ALPHABET for ch in letters)


def test_distinct_letters_normalizes_finals():
    assert distinct_letters("ךכ מם") == ("כ", "מ")


def test_expansion_is_deterministic():
    assert expand_spelling("גמל", 4) == expand_spelling("גמל", 4)


def test_each_level_expands_the_previous_one():
    steps = expand_spelling("ש", 3)
    for prev, cur in zip(steps, steps[1:]):
        assert cur.gematria == sum(compute_value(full_spelling(ch)) for ch in prev.text if not ch.isspace())
