"""Floating-point helpers shared by the matrix, geometry and color types."""
import math

__all__ = ('fdiv', 'round_half_away')


def fdiv(a: float, b: float) -> float:
    """Divide with IEEE-754 semantics instead of raising ZeroDivisionError.

    ``x / 0`` is ``±inf`` (sign from both operands, including signed zero) and
    ``0 / 0`` or ``nan / 0`` is ``nan``.
    """
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def round_half_away(x: float) -> float:
    """Round to nearest integer with halves going away from zero, like C ``round``.

    Python's ``round`` rounds halves to even, which would map e.g. 76.5 to 76.
    """
    if math.isnan(x) or math.isinf(x):
        return x
    ax = abs(x)
    whole = math.floor(ax)
    if ax - whole >= 0.5:
        whole += 1
    return math.copysign(whole, x)
