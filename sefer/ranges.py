from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

from .gematria import compute_value
from .numbers import Gender, name_number

@dataclass(frozen=True)
class RangeEntry:
    number: int
    masculine: str
    feminine: str
    masculine_gematria: int
    feminine_gematria: int

    @property
    def is_fixed_point(self) -> bool:
        return self.number in (self.masculine_gematria, self.feminine_gematria)

def range_entry(n: int) -> RangeEntry:
    masculine = name_number(n, Gender.MASCULINE)
    feminine = name_number(n, Gender.FEMININE)
    return RangeEntry(
        number=n,
        masculine=masculine,
        feminine=feminine,
        masculine_gematria=compute_value(masculine),
        feminine_gematria=compute_value(feminine),
    )

def generate_range(min_number: int, max_number: int, fixed_points_only: bool = False) -> List[RangeEntry]:
    """
    Names (both genders) and their gematria for every number in [min_number, max_number].
    The range is taken as given; use normalize_range() first for user input.
    """
    entries: List[RangeEntry] = []
    for n in range(min_number, max_number + 1):
        e = range_entry(n)
        if fixed_points_only and not e.is_fixed_point:
            continue
        entries.append(e)
    return entries

def normalize_range(min_number: int, max_number: int) -> Tuple[int, int]:
    """
    Make sure min < max: an inverted or empty range is widened around the
    given values (min becomes max - 1, max becomes min + 1).
    """
    final_min = min_number if min_number < max_number else max_number - 1
    final_max = max_number if max_number > min_number else min_number + 1
    return final_min, final_max

def fixed_points(min_number: int, max_number: int) -> List[int]:
    return [e.number for e in generate_range(min_number, max_number, fixed_points_only=True)]
