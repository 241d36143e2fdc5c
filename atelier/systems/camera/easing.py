"""
easing.py
---------
Response curves mapping normalized progress (0 → 1) to eased progress.
"""

from typing import Callable, Union

from atelier.core.debug.debug_logger import DebugLogger


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t ** 2


def ease_out(t: float) -> float:
    return 1 - (1 - t) ** 2


def ease_in_out(t: float) -> float:
    # Smoothstep
    return t * t * (3 - 2 * t)


EASING_CURVES = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
}


def resolve_easing(curve: Union[str, Callable[[float], float], None]) -> Callable[[float], float]:
    """
    Resolve a curve name or callable to an easing function.

    Unknown names fall back to ease_in_out with a warning.
    """
    if callable(curve):
        return curve
    if curve is None:
        return ease_in_out
    fn = EASING_CURVES.get(str(curve))
    if fn is None:
        DebugLogger.warn(f"Unknown easing curve '{curve}' - using ease_in_out", category="camera")
        return ease_in_out
    return fn
