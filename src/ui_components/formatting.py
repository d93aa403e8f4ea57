"""Number formatting helpers for UI consistency.

All output uses the pinned invariant locale from ``src.config`` so that the
monitor renders the same strings regardless of the host's locale settings.
Absent values render as the placeholder instead of raising.

Numeric coercion follows script-style ``Number()`` rules rather than
``float()``: prefixed integer literals are accepted, digit separators and
the ``inf``/``nan`` spellings are not, and exact halves round away from zero.
"""
from __future__ import annotations

import math
import numbers
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

import numpy as np
import pandas as pd

from src.config import (
    INTEGER_DECIMALS,
    INVARIANT_LOCALE,
    LOCALE_CONVENTIONS,
    PERCENT_DECIMALS,
    PERCENT_SCALE,
    PERCENT_SUFFIX,
    PLACEHOLDER,
)
from src.logging_utils import get_logger

logger = get_logger(__name__)

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_PREFIXED_LITERAL = re.compile(r"0(?:[xX][0-9a-fA-F]+|[bB][01]+|[oO][0-7]+)")
_INFINITY = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}
# Enough digits for any finite double quantized to a handful of decimals.
_ROUNDING_PRECISION = 400


def is_absent(value: Any) -> bool:
    """True for ``None`` and the pandas missing markers."""
    return value is None or value is pd.NA or value is pd.NaT


def _parse_text(text: str) -> float:
    text = text.strip()
    if not text:
        return 0.0
    if text in _INFINITY:
        return _INFINITY[text]
    if _PREFIXED_LITERAL.fullmatch(text):
        return float(int(text, 0))
    if _DECIMAL_LITERAL.fullmatch(text):
        return float(text)
    return math.nan


def to_number(value: Any) -> float:
    """Coerce ``value`` to a float, yielding ``nan`` when that is impossible."""
    if isinstance(value, (bool, np.bool_)):
        return float(bool(value))
    if isinstance(value, str):
        number = _parse_text(value)
    elif isinstance(value, (list, tuple)):
        # Sequences coerce through their single element, empty ones to zero.
        if not value:
            return 0.0
        if len(value) > 1:
            number = math.nan
        elif value[0] is None:
            return 0.0
        elif isinstance(value[0], (str, list, tuple)):
            number = to_number(value[0])
        else:
            number = _parse_text(str(value[0]))
    else:
        try:
            return float(value)
        except (TypeError, ValueError, OverflowError):
            number = math.nan
    if math.isnan(number):
        logger.debug("Could not coerce %r to a number", value)
    return number


def is_falsy(value: Any) -> bool:
    """True for absent values, ``False``, zero, ``nan`` and the empty string."""
    if is_absent(value):
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (bool, np.bool_, numbers.Number)):
        number = to_number(value)
        return number == 0 or math.isnan(number)
    return False


def _round_half_up(number: float, decimals: int) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = _ROUNDING_PRECISION
        return Decimal(number).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def format_fixed(number: float, decimals: int, locale: str = INVARIANT_LOCALE) -> str:
    conventions = LOCALE_CONVENTIONS[locale]
    if math.isfinite(number):
        text = f"{_round_half_up(number, decimals):,.{decimals}f}"
    else:
        text = f"{number:,.{decimals}f}"
    return text.translate(
        str.maketrans({",": conventions["thousands_sep"], ".": conventions["decimal_point"]})
    )


def integer_str(value: Any) -> str:
    if is_absent(value):
        return PLACEHOLDER
    return format_fixed(to_number(value), INTEGER_DECIMALS)


def percent_str(value: Any) -> str:
    # Zero is falsy here, unlike integer_str.
    if is_falsy(value):
        return PLACEHOLDER
    return format_fixed(to_number(value) * PERCENT_SCALE, PERCENT_DECIMALS) + PERCENT_SUFFIX


# Names used by the view bindings.
integerStr = integer_str
percentStr = percent_str
