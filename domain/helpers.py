"""
SmartBite utility functions
"""

from __future__ import annotations
import re
from decimal import Decimal
from typing import Any, Optional, Union

Number = Union[int, float, Decimal]


def to_float(value: Optional[Number], default: float = 0.0) -> float:
    """Numeric columns come back as Decimal; formulas work on floats."""
    if value is None:
        return default
    return float(value)


def round_to(value: Optional[Number], digits: int = 2) -> float:
    return round(to_float(value), digits)


def normalize_text(s: str) -> str:
    """Basic normalization: lowercase, collapse spaces, strip edges."""
    s = s.lower().strip()
    s = re.sub(r"\s+", " ", s)
    return s


def normalize_tags(values: Optional[list[Any]]) -> list[str]:
    """Lowercase, trim and de-duplicate a list of free-text tags (order kept)."""
    seen: list[str] = []
    for value in values or []:
        tag = normalize_text(str(value))
        if tag and tag not in seen:
            seen.append(tag)
    return seen
