"""Fixed-step numeric integration over exact decimals.

Both rules walk the interval in equal steps of width

    dx = (upper - lower) / subdivisions

rounded half-up to `step-scale` fractional digits.  The sample point starts
at `lower` and is advanced by repeated addition of dx for as long as it is
strictly below `upper`; because dx is rounded, the number of steps taken can
differ from `subdivisions` by one in either direction.
"""

from decimal import Decimal

from polyquad.common import InvalidArgument
from polyquad.decimals import exact, divide, to_decimal
from polyquad.logging import task
from polyquad.opts import Option

subdivisions = Option("subdivisions", int, 1000, description="Number of equal steps each quadrature rule takes")
step_scale = Option("step-scale", int, 6, description="Fractional digits kept when rounding step widths and trapezoid areas")

def step_width(lower : Decimal, upper : Decimal) -> Decimal:
    if not lower < upper:
        raise InvalidArgument("Lower bound {} must be less than upper bound {}".format(lower, upper))
    n = subdivisions.value
    if n < 1:
        raise InvalidArgument("Subdivision count must be positive, got {}".format(n))
    with exact():
        width = upper - lower
    dx = divide(width, n, step_scale.value)
    if not dx:
        raise InvalidArgument("Interval [{}, {}] is too narrow for {} steps at scale {}".format(
            lower, upper, n, step_scale.value))
    return dx

def _bounds(lower, upper):
    return to_decimal(lower, "lower bound"), to_decimal(upper, "upper bound")

def rectangles(f, lower, upper) -> Decimal:
    """Left-endpoint rectangle rule: sum of f(x) * dx."""
    lower, upper = _bounds(lower, upper)
    dx = step_width(lower, upper)
    total = Decimal(0)
    with task("rectangles", lower=lower, upper=upper, dx=dx):
        with exact():
            x = lower
            while x < upper:
                total += f(x) * dx
                x += dx
    return total

def trapezoids(f, lower, upper) -> Decimal:
    """Trapezoid rule: sum of (f(x) + f(x + dx)) * dx / 2.

    Each trapezoid's area is rounded half-up to `step-scale` digits before it
    is added to the total.
    """
    lower, upper = _bounds(lower, upper)
    dx = step_width(lower, upper)
    scale = step_scale.value
    total = Decimal(0)
    with task("trapezoids", lower=lower, upper=upper, dx=dx):
        with exact():
            x = lower
            while x < upper:
                total += divide((f(x) + f(x + dx)) * dx, 2, scale)
                x += dx
    return total
