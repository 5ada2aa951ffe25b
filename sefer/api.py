from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from contextlib import asynccontextmanager
from fastapi import FastAPI, Query, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from .chain import build_chain, find_cycle
from .config import (
    DEFAULT_CHAIN_STEPS,
    DEFAULT_SPELLING_DEPTH,
    MAX_CHAIN_STEPS,
    MAX_RANGE_WIDTH,
    MAX_SEED_LENGTH,
    MAX_SPELLING_DEPTH,
    MIN_SPELLING_DEPTH,
)
from .gematria import compute_value
from .milouy import expand_spelling, spelling_table
from .numbers import Gender, number_name
from .ranges import generate_range, normalize_range
from .tables import verify_tables

@asynccontextmanager
async def lifespan(app: FastAPI):
    # runs on startup
    verify_tables()
    yield

app = FastAPI(title="ס.פ.ר", lifespan=lifespan)

class GematriaOut(BaseModel):
    text: str
    gematria: int

class NumberNameOut(BaseModel):
    number: int
    gender: Gender
    name: str
    gematria: int

class RangeEntryOut(BaseModel):
    number: int
    masculine: str
    feminine: str
    masculine_gematria: int
    feminine_gematria: int
    is_fixed_point: bool

class RangeOut(BaseModel):
    min: int
    max: int
    fixed_only: bool
    count: int
    entries: List[RangeEntryOut]

class LetterSpellingOut(BaseModel):
    letter: str
    full_spelling: str
    gematria: int

class ExpansionStepOut(BaseModel):
    depth: int
    text: str
    gematria: int
    distinct_letters: List[str]
    distinct_count: int

class ExpansionOut(BaseModel):
    seed: str
    depth: int
    steps: List[ExpansionStepOut]

class ChainStepOut(BaseModel):
    step_index: int
    number: int
    name: str
    gematria: int
    first_occurrence: Optional[int] = None

class ChainCycleOut(BaseModel):
    start_index: int
    length: int
    numbers: List[int]

class ChainOut(BaseModel):
    seed: str
    gender: Gender
    steps: List[ChainStepOut]
    cycle: Optional[ChainCycleOut] = None

_UI_PATH = Path(__file__).with_name("ui.html")

@app.get("/", response_class=HTMLResponse)
def home():
    return HTMLResponse(_UI_PATH.read_text(encoding="utf-8"))

@app.get("/gematria", response_model=GematriaOut)
def api_gematria(
    text: str = Query(..., min_length=1, description="טקסט בעברית לחישוב גימטריה"),
):
    return GematriaOut(text=text, gematria=compute_value(text))

@app.get("/number", response_model=NumberNameOut)
def api_number(
    n: int = Query(..., ge=1, description="מספר"),
    gender: Gender = Query(Gender.MASCULINE, description="זכר/נקבה"),
):
    nn = number_name(n, gender)
    return NumberNameOut(number=nn.number, gender=nn.gender, name=nn.text, gematria=nn.gematria)

@app.get("/numbers", response_model=RangeOut)
def api_numbers(
    min_number: int = Query(1, alias="min", description="מ"),
    max_number: int = Query(10, alias="max", description="עד"),
    fixed_only: bool = Query(False, description="נקודת שבת: רק מספרים שהגימטריה של שמם שווה להם"),
):
    if min_number < 1:
        raise HTTPException(status_code=400, detail="הטווח חייב להתחיל ב-1 לפחות")
    lo, hi = normalize_range(min_number, max_number)
    # widening 1..1 gives 0..2; numbers start at 1
    lo = max(lo, 1)
    if hi - lo + 1 > MAX_RANGE_WIDTH:
        raise HTTPException(status_code=400, detail=f"טווח גדול מדי (עד {MAX_RANGE_WIDTH} מספרים)")

    entries = generate_range(lo, hi, fixed_points_only=fixed_only)
    return RangeOut(
        min=lo,
        max=hi,
        fixed_only=fixed_only,
        count=len(entries),
        entries=[RangeEntryOut(is_fixed_point=e.is_fixed_point, **e.__dict__) for e in entries],
    )

@app.get("/milouy", response_model=List[LetterSpellingOut])
def api_milouy():
    return [LetterSpellingOut(**e.__dict__) for e in spelling_table()]

@app.get("/milouy/expand", response_model=ExpansionOut)
def api_milouy_expand(
    seed: str = Query(..., min_length=1, max_length=MAX_SEED_LENGTH, description="אות או מילה לפריסה"),
    depth: int = Query(DEFAULT_SPELLING_DEPTH, ge=MIN_SPELLING_DEPTH, le=MAX_SPELLING_DEPTH, description="עומק"),
):
    steps = expand_spelling(seed, depth)
    return ExpansionOut(
        seed=seed,
        depth=len(steps),
        steps=[
            ExpansionStepOut(
                depth=s.depth,
                text=s.text,
                gematria=s.gematria,
                distinct_letters=list(s.distinct_letters),
                distinct_count=len(s.distinct_letters),
            )
            for s in steps
        ],
    )

@app.get("/chain", response_model=ChainOut)
def api_chain(
    seed: str = Query(..., description="מספר התחלתי"),
    gender: Gender = Query(Gender.MASCULINE),
    max_steps: int = Query(DEFAULT_CHAIN_STEPS, ge=1, le=MAX_CHAIN_STEPS, description="מספר צעדים"),
):
    steps = build_chain(seed, gender, max_steps)
    cycle = find_cycle(steps)
    return ChainOut(
        seed=seed,
        gender=gender,
        steps=[ChainStepOut(**s.__dict__) for s in steps],
        cycle=ChainCycleOut(start_index=cycle.start_index, length=cycle.length, numbers=list(cycle.numbers)) if cycle else None,
    )
