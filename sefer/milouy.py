from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .config import MAX_SPELLING_DEPTH, MIN_SPELLING_DEPTH, clamp
from .gematria import ALPHABET, alphabet_index, apply_final_forms, base_letters, compute_value, normalize_finals

# מילוי: every letter spelled out by its name
_FULL_SPELLINGS: Dict[str, str] = {
    "א": "אלף", "ב": "בית", "ג": "גימל", "ד": "דלת", "ה": "הא", "ו": "ויו",
    "ז": "זין", "ח": "חית", "ט": "טית", "י": "יוד", "כ": "כף", "ל": "למד",
    "מ": "מם", "נ": "נון", "ס": "סמך", "ע": "עין", "פ": "פא", "צ": "צדי",
    "ק": "קוף", "ר": "ריש", "ש": "שין", "ת": "תיו",
}

@dataclass(frozen=True)
class LetterSpellingEntry:
    letter: str
    full_spelling: str
    gematria: int

@dataclass(frozen=True)
class SpellingExpansionStep:
    depth: int
    text: str
    gematria: int
    distinct_letters: Tuple[str, ...]

def full_spelling(letter: str) -> str:
    """Name of a letter; final forms are looked up by their base letter (ף -> פא). Non-letters come back unchanged."""
    base = normalize_finals(letter)
    return _FULL_SPELLINGS.get(base, letter)

def spelling_table() -> List[LetterSpellingEntry]:
    return [
        LetterSpellingEntry(letter=ch, full_spelling=_FULL_SPELLINGS[ch], gematria=compute_value(_FULL_SPELLINGS[ch]))
        for ch in ALPHABET
    ]

def distinct_letters(text: str) -> Tuple[str, ...]:
    return tuple(sorted(set(base_letters(text)), key=alphabet_index))

def _expand_once(text: str) -> str:
    chars = "".join(text.split())
    return " ".join(full_spelling(ch) for ch in chars)

def expand_spelling(seed: str, depth: int) -> List[SpellingExpansionStep]:
    """
    Spell out every letter of `seed` by its name, then spell out the result
    again, `depth` times. Characters without a name (digits, latin) are kept
    as they are. depth is clamped to [MIN_SPELLING_DEPTH, MAX_SPELLING_DEPTH].
    """
    depth = clamp(depth, MIN_SPELLING_DEPTH, MAX_SPELLING_DEPTH)
    steps: List[SpellingExpansionStep] = []
    current = seed or ""
    for d in range(1, depth + 1):
        current = _expand_once(current)
        steps.append(SpellingExpansionStep(
            depth=d,
            text=apply_final_forms(current),
            gematria=compute_value("".join(current.split())),
            distinct_letters=distinct_letters(current),
        ))
    return steps
