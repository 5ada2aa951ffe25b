from __future__ import annotations
from typing import Dict

ALPHABET = "אבגדהוזחטיכלמנסעפצקרשת"
FINAL_LETTERS = "ךםןףץ"

_FINALS_MAP = str.maketrans({
    "ך": "כ",
    "ם": "מ",
    "ן": "נ",
    "ף": "פ",
    "ץ": "צ",
})

_TO_FINAL: Dict[str, str] = {"כ": "ך", "מ": "ם", "נ": "ן", "פ": "ף", "צ": "ץ"}

_GEMATRIA: Dict[str, int] = {
    "א": 1, "ב": 2, "ג": 3, "ד": 4, "ה": 5, "ו": 6, "ז": 7, "ח": 8, "ט": 9,
    "י": 10, "כ": 20, "ל": 30, "מ": 40, "נ": 50, "ס": 60, "ע": 70, "פ": 80, "צ": 90,
    "ק": 100, "ר": 200, "ש": 300, "ת": 400,
    # final forms keep the value of their base letter
    "ך": 20, "ם": 40, "ן": 50, "ף": 80, "ץ": 90,
}

def letter_value(ch: str) -> int:
    return _GEMATRIA.get(ch, 0)

def letter_values() -> Dict[str, int]:
    """Copy of the glyph -> value table (27 glyphs)."""
    return dict(_GEMATRIA)

def compute_value(text: str) -> int:
    """
    Sum of the per-letter values of `text`.
    Anything that is not a Hebrew letter (spaces, nikud, latin, digits) counts 0.
    """
    if not text:
        return 0
    total = 0
    for ch in text:
        total += _GEMATRIA.get(ch, 0)
    return total

def normalize_finals(text: str) -> str:
    """Replace final letters (sofit) with their regular forms."""
    return text.translate(_FINALS_MAP)

def apply_final_forms(text: str) -> str:
    """Write the last letter of every word in its final form (sofit) where one exists."""
    words = []
    for w in text.split(" "):
        if len(w) > 1 and w[-1] in _TO_FINAL:
            w = w[:-1] + _TO_FINAL[w[-1]]
        words.append(w)
    return " ".join(words)

def alphabet_index(ch: str) -> int:
    if len(ch) != 1:
        return -1
    return ALPHABET.find(normalize_finals(ch))

def base_letters(text: str) -> str:
    return "".join(ch for ch in normalize_finals(text) if ch in ALPHABET)
