from __future__ import annotations

import math


def round_to(value: float, decimals: int) -> float:
    """Round half away from zero to ``decimals`` places (unlike the built-in ``round``)."""
    factor = 10 ** decimals
    scaled = math.floor(abs(value) * factor + 0.5)
    if scaled == 0:
        return 0.0
    return math.copysign(scaled, value) / factor
