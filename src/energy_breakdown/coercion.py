from __future__ import annotations

import math
from numbers import Real

THOUSANDS_SEPARATOR = ","


def coerce(value: object) -> float:
    """Convert a cell value to a float; anything unusable becomes ``0.0``."""

    if value is None:
        return 0.0
    if isinstance(value, Real) and not isinstance(value, bool):
        number = float(value)
        return number if math.isfinite(number) else 0.0
    text = str(value).strip().replace(THOUSANDS_SEPARATOR, "")
    # float() accepts "1_000" and non-ASCII digits; plain ASCII decimals only here.
    if not text or "_" in text or not text.isascii():
        return 0.0
    try:
        number = float(text)
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


__all__ = ["THOUSANDS_SEPARATOR", "coerce"]
