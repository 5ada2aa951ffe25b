from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, NamedTuple, Optional, Union

from .gematria import compute_value

class Gender(str, Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"

class BaseForms(NamedTuple):
    masculine: str
    feminine: str

    def get(self, gender: Gender) -> str:
        return self.feminine if gender == Gender.FEMININE else self.masculine

# 1..19 have separate masculine/feminine forms; the decades are the same for both
_BASE_NUMBERS: Dict[int, BaseForms] = {
    1: BaseForms("אחד", "אחת"),
    2: BaseForms("שנים", "שתים"),
    3: BaseForms("שלשה", "שלש"),
    4: BaseForms("ארבעה", "ארבע"),
    5: BaseForms("חמשה", "חמש"),
    6: BaseForms("ששה", "שש"),
    7: BaseForms("שבעה", "שבע"),
    8: BaseForms("שמונה", "שמונה"),
    9: BaseForms("תשעה", "תשע"),
    10: BaseForms("עשרה", "עשר"),
    11: BaseForms("אחד עשר", "אחת עשרה"),
    12: BaseForms("שנים עשר", "שתים עשרה"),
    13: BaseForms("שלשה עשר", "שלש עשרה"),
    14: BaseForms("ארבעה עשר", "ארבע עשרה"),
    15: BaseForms("חמשה עשר", "חמש עשרה"),
    16: BaseForms("ששה עשר", "שש עשרה"),
    17: BaseForms("שבעה עשר", "שבע עשרה"),
    18: BaseForms("שמונה עשר", "שמונה עשרה"),
    19: BaseForms("תשעה עשר", "תשע עשרה"),
    20: BaseForms("עשרים", "עשרים"),
    30: BaseForms("שלשים", "שלשים"),
    40: BaseForms("ארבעים", "ארבעים"),
    50: BaseForms("חמשים", "חמשים"),
    60: BaseForms("ששים", "ששים"),
    70: BaseForms("שבעים", "שבעים"),
    80: BaseForms("שמונים", "שמונים"),
    90: BaseForms("תשעים", "תשעים"),
    100: BaseForms("מאה", "מאה"),
}

AND = "ו"
THOUSAND = "אלף"
TWO_THOUSAND = "אלפיים"
THOUSANDS = "אלפים"
HUNDRED = "מאה"
TWO_HUNDRED = "מאתיים"
HUNDREDS = "מאות"

_GENDER_ALIASES: Dict[str, Gender] = {
    "masculine": Gender.MASCULINE,
    "m": Gender.MASCULINE,
    "זכר": Gender.MASCULINE,
    "feminine": Gender.FEMININE,
    "f": Gender.FEMININE,
    "נקבה": Gender.FEMININE,
}

@dataclass(frozen=True)
class NumberName:
    number: int
    text: str
    gender: Gender

    @property
    def gematria(self) -> int:
        return compute_value(self.text)

def base_forms(n: int) -> Optional[BaseForms]:
    return _BASE_NUMBERS.get(n)

def base_numbers() -> Dict[int, BaseForms]:
    return dict(_BASE_NUMBERS)

def parse_gender(value: Union[str, Gender]) -> Gender:
    if isinstance(value, Gender):
        return value
    g = _GENDER_ALIASES.get(str(value).strip().lower())
    if g is None:
        raise ValueError(f"unknown gender: {value!r} (expected masculine/feminine)")
    return g

def name_number(n: int, gender: Gender = Gender.MASCULINE) -> str:
    """
    Hebrew name of `n` in the requested gender.

    Thousands and hundreds are split off recursively; the remainder is joined
    with " ו". The count in front of "מאות" is always feminine (שלש מאות),
    whatever gender was asked for. Anything the rules don't cover (n < 1)
    comes back as its digits.
    """
    if not isinstance(n, int) or isinstance(n, bool) or n < 1:
        return str(n)

    forms = _BASE_NUMBERS.get(n)
    if forms is not None:
        return forms.get(gender)

    if n >= 1000:
        thousands, remainder = divmod(n, 1000)
        if thousands == 1:
            result = THOUSAND
        elif thousands == 2:
            result = TWO_THOUSAND
        else:
            result = f"{name_number(thousands, gender)} {THOUSANDS}"
        if remainder > 0:
            result += f" {AND}{name_number(remainder, gender)}"
        return result

    if n > 100:
        hundreds, remainder = divmod(n, 100)
        if hundreds == 1:
            result = HUNDRED
        elif hundreds == 2:
            result = TWO_HUNDRED
        else:
            result = f"{name_number(hundreds, Gender.FEMININE)} {HUNDREDS}"
        if remainder > 0:
            result += f" {AND}{name_number(remainder, gender)}"
        return result

    if n > 20:
        tens, ones = (n // 10) * 10, n % 10
        decade = _BASE_NUMBERS[tens].get(gender)
        if ones == 0:
            return decade
        return f"{decade} {AND}{_BASE_NUMBERS[ones].get(gender)}"

    return str(n)

def number_name(n: int, gender: Gender = Gender.MASCULINE) -> NumberName:
    return NumberName(number=n, text=name_number(n, gender), gender=gender)
