"""
generator.py — Array sources
=============================
The two ways an array enters the store: a random draw, or the comma
separated text the user typed.
"""

import math
import random
from typing import List, Optional

from sequence.store import Number

VALUE_LOW  = 20
VALUE_HIGH = 500     # exclusive


def random_array(n: int, rng: Optional[random.Random] = None) -> List[int]:
    """`n` integers drawn uniformly from [VALUE_LOW, VALUE_HIGH)."""
    rng = rng or random
    return [rng.randrange(VALUE_LOW, VALUE_HIGH) for _ in range(n)]


def parse_array_text(text: str) -> List[Number]:
    """
    Parse "5, 3, 8.5, 1" into [5, 3, 8.5, 1].

    Tokens that are blank, malformed or non-finite (inf / nan) are dropped.
    Whole numbers come back as int so the bar labels read "5", not "5.0".
    An empty result means the caller should fall back to random_array().
    """
    values: List[Number] = []
    for token in text.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            v = float(token)
        except ValueError:
            continue
        if not math.isfinite(v):
            continue
        values.append(int(v) if v.is_integer() else v)
    return values
