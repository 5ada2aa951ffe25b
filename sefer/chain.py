from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .config import DEFAULT_CHAIN_STEPS, MAX_CHAIN_STEPS, MIN_CHAIN_STEPS, clamp
from .gematria import compute_value
from .numbers import Gender, name_number

@dataclass(frozen=True)
class ChainStep:
    step_index: int
    number: int
    name: str
    gematria: int
    first_occurrence: Optional[int] = None  # 1-based step where `number` was first seen

@dataclass(frozen=True)
class ChainCycle:
    start_index: int
    length: int
    numbers: Tuple[int, ...]

def parse_seed(seed: Any) -> Optional[int]:
    """Positive integer from an int or a numeric string, else None."""
    if seed is None or isinstance(seed, bool):
        return None
    if isinstance(seed, int):
        value = seed
    else:
        try:
            value = int(str(seed).strip())
        except ValueError:
            return None
    return value if value >= 1 else None

def build_chain(seed: Any, gender: Gender = Gender.MASCULINE, max_steps: int = DEFAULT_CHAIN_STEPS) -> List[ChainStep]:
    """
    number -> name -> gematria -> next number, `max_steps` times.

    A number that already appeared is annotated with the step it first
    appeared at; the chain keeps going through cycles and fixed points.
    An unusable seed gives an empty chain.
    """
    current = parse_seed(seed)
    if current is None:
        return []
    max_steps = clamp(max_steps, MIN_CHAIN_STEPS, MAX_CHAIN_STEPS)

    seen: Dict[int, int] = {}
    steps: List[ChainStep] = []
    for i in range(1, max_steps + 1):
        name = name_number(current, gender)
        gem = compute_value(name)
        steps.append(ChainStep(
            step_index=i,
            number=current,
            name=name,
            gematria=gem,
            first_occurrence=seen.get(current),
        ))
        seen.setdefault(current, i)
        current = gem
    return steps

def find_cycle(steps: List[ChainStep]) -> Optional[ChainCycle]:
    """The first cycle the chain runs into, or None if no number repeats."""
    for s in steps:
        if s.first_occurrence is None:
            continue
        start = s.first_occurrence
        numbers = tuple(x.number for x in steps[start - 1:s.step_index - 1])
        return ChainCycle(start_index=start, length=s.step_index - start, numbers=numbers)
    return None
