from __future__ import annotations

from typing import Sequence, Tuple

from pixelfill.constants import PALE_MIX_COLOR, PALE_MIX_WEIGHT

RGB = Tuple[int, int, int]


def mix(a: float, b: float, t: float) -> float:
    return a * (1.0 - t) + b * t


def mix_color(a: Sequence[float], b: Sequence[float], t: float) -> RGB:
    """Linear blend of two colours; ``t`` = 0 gives ``a``, 1 gives ``b``."""
    return tuple(int(round(mix(ca, cb, t))) for ca, cb in zip(a[:3], b[:3]))  # type: ignore[return-value]


def pale_color(color: Sequence[float]) -> RGB:
    """Preview tint shown on cells that have not been filled yet."""
    return mix_color(color, PALE_MIX_COLOR, PALE_MIX_WEIGHT)
