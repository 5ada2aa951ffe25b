from __future__ import annotations
from os import environ

# Bounds for the milouy expansion depth (values outside are clamped)
MIN_SPELLING_DEPTH = 1
MAX_SPELLING_DEPTH = int(environ.get("SEFER_MAX_SPELLING_DEPTH", "10"))
DEFAULT_SPELLING_DEPTH = int(environ.get("SEFER_DEFAULT_SPELLING_DEPTH", "3"))

# Bounds for name -> gematria chains
MIN_CHAIN_STEPS = 1
MAX_CHAIN_STEPS = int(environ.get("SEFER_MAX_CHAIN_STEPS", "100"))
DEFAULT_CHAIN_STEPS = int(environ.get("SEFER_DEFAULT_CHAIN_STEPS", "20"))

# Widest range /numbers will generate in one request
MAX_RANGE_WIDTH = int(environ.get("SEFER_MAX_RANGE_WIDTH", "10000"))

# Longest seed /milouy/expand accepts
MAX_SEED_LENGTH = int(environ.get("SEFER_MAX_SEED_LENGTH", "20"))

DEFAULT_RANGE = (1, 10)

HOST = environ.get("SEFER_HOST", "127.0.0.1")
PORT = int(environ.get("SEFER_PORT", "8000"))

def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))
