"""Exact decimal arithmetic.

Python's default decimal context rounds every result to 28 significant
digits.  Polynomial coefficients, evaluations and quadrature sums must not be
rounded at all, so this module provides:
 - exact(): a context manager that evaluates its body with unbounded precision
   and raises if any operation would have to round
 - divide(): a quotient rounded half-up to a fixed number of fractional digits
 - to_decimal(): checked conversion of user values to Decimal
 - plain(): render a Decimal without scientific notation
"""

from decimal import Decimal, Context, Inexact, InvalidOperation, localcontext, MAX_PREC, MAX_EMAX, MIN_EMIN, ROUND_DOWN, ROUND_HALF_UP

from polyquad.common import InvalidArgument

EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, traps=[Inexact, InvalidOperation])
_ROUNDING_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, traps=[InvalidOperation])

def exact():
    """Usage:

        with exact():
            total = a * b + c

    Additions, subtractions and multiplications inside the block are exact.
    Never divide inside the block; use `divide` instead.
    """
    return localcontext(EXACT_CONTEXT)

def to_decimal(value, what="value") -> Decimal:
    """Convert an int, str or Decimal to Decimal.

    Floats are refused: they are binary approximations and would smuggle
    rounding error into otherwise exact results.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or isinstance(value, float):
        raise InvalidArgument("{} must be an exact decimal, not {!r}".format(what, value))
    if isinstance(value, (int, str)):
        try:
            result = Decimal(value)
        except InvalidOperation:
            raise InvalidArgument("{} {!r} is not a decimal number".format(what, value)) from None
        if not result.is_finite():
            raise InvalidArgument("{} must be finite, not {!r}".format(what, value))
        return result
    raise InvalidArgument("{} must be a decimal number, not {}".format(what, type(value).__name__))

def divide(dividend : Decimal, divisor, scale : int) -> Decimal:
    """Return dividend / divisor rounded half-up to `scale` fractional digits.

    The quotient is first truncated to at least two digits past `scale`, then
    quantized with ROUND_HALF_UP.  Truncating (rather than rounding) first
    means the second rounding cannot be pushed across a tie.  The result
    always carries exactly `scale` fractional digits, e.g.
    divide(Decimal(10), 1000, 6) is Decimal("0.010000").
    """
    dividend = to_decimal(dividend, "dividend")
    divisor = to_decimal(divisor, "divisor")
    if not divisor:
        raise InvalidArgument("Cannot divide {} by zero".format(dividend))
    digits = max(dividend.adjusted() - divisor.adjusted(), 0) + scale + 3
    truncating = Context(prec=digits, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_DOWN, traps=[InvalidOperation])
    quotient = truncating.divide(dividend, divisor)
    result = quotient.quantize(Decimal(1).scaleb(-scale), rounding=ROUND_HALF_UP, context=_ROUNDING_CONTEXT)
    if not result:
        result = result.copy_abs()
    return result

def plain(value : Decimal) -> str:
    """Render a Decimal in positional notation, e.g. 1E+2 as "100".

    Zero is rendered without a sign: -0.0 becomes "0.0".
    """
    if not value:
        value = value.copy_abs()
    return "{:f}".format(value)
