from __future__ import annotations

from .gematria import ALPHABET, FINAL_LETTERS, letter_values, normalize_finals
from .milouy import spelling_table
from .numbers import Gender, base_numbers

_EXPECTED_DECADES = (20, 30, 40, 50, 60, 70, 80, 90, 100)

def verify_tables() -> None:
    """
    Checks the static tables the whole package relies on.
    Raises RuntimeError if any of them is incomplete or inconsistent.
    """
    values = letter_values()
    missing = [ch for ch in ALPHABET + FINAL_LETTERS if ch not in values]
    if missing:
        raise RuntimeError(f"Letter table is missing: {' '.join(missing)}")
    for ch in FINAL_LETTERS:
        if values[ch] != values[normalize_finals(ch)]:
            raise RuntimeError(f"Final letter {ch} does not carry the value of its base letter")

    numbers = base_numbers()
    expected = list(range(1, 20)) + list(_EXPECTED_DECADES)
    gaps = [n for n in expected if n not in numbers]
    if gaps:
        raise RuntimeError(f"Base number table has gaps: {gaps}")
    for n in _EXPECTED_DECADES:
        forms = numbers[n]
        if forms.get(Gender.MASCULINE) != forms.get(Gender.FEMININE):
            raise RuntimeError(f"Decade {n} must have the same form for both genders")

    table = spelling_table()
    if len(table) != len(ALPHABET):
        raise RuntimeError(f"Spelling table has {len(table)} entries, expected {len(ALPHABET)}")
    for entry in table:
        if not entry.full_spelling.startswith(entry.letter):
            raise RuntimeError(f"Spelling of {entry.letter} does not start with the letter: {entry.full_spelling}")

    print(
        f"[tables] OK: {len(values)} letters, {len(numbers)} base numbers, {len(table)} spellings",
        flush=True,
    )
