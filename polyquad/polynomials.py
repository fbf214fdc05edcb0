"""Class for representing polynomials of one variable with exact decimal coefficients."""

from decimal import Decimal

from polyquad import quadrature
from polyquad.common import InvalidArgument
from polyquad.decimals import exact, to_decimal, plain

_ZERO_TERMS = (Decimal(0),)

class Polynomial(object):
    """An immutable polynomial c0 + c1*x + c2*x^2 + ...

    `coefficients[i]` is the coefficient of x^i.  There is always at least
    one coefficient.  Trailing zero coefficients are kept exactly as given;
    use `trimmed` to drop them.  Two polynomials are equal when their
    coefficients agree in value and in scale, so [1, 0] != [1] and
    [2.0] != [2], while -0 and 0 are the same coefficient.
    """
    __slots__ = ("coefficients",)

    def __init__(self, coefficients=_ZERO_TERMS):
        if coefficients is None:
            raise InvalidArgument("Coefficients cannot be None")
        terms = tuple(to_decimal(c, "coefficient") for c in coefficients)
        if not terms:
            raise InvalidArgument("A polynomial needs at least one coefficient")
        object.__setattr__(self, "coefficients", terms)

    @staticmethod
    def zero():
        return Polynomial.ZERO

    @staticmethod
    def monomial(coefficient, exponent : int):
        """The polynomial coefficient*x^exponent."""
        if exponent < 0:
            raise InvalidArgument("Exponent must be non-negative, got {}".format(exponent))
        return Polynomial([Decimal(0)] * exponent + [to_decimal(coefficient, "coefficient")])

    @staticmethod
    def from_csv_line(text):
        """Parse comma-separated coefficients, lowest exponent first: "1,0,3" is 3x^2+1."""
        from polyquad.parse import parse_csv_line
        return parse_csv_line(text)

    @staticmethod
    def from_expression(text):
        """Parse an algebraic expression such as "5x^3-8+3x^2-x"."""
        from polyquad.parse import parse_expression
        return parse_expression(text)

    def __setattr__(self, name, value):
        raise AttributeError("Polynomial is immutable")

    def __delattr__(self, name):
        raise AttributeError("Polynomial is immutable")

    def __reduce__(self):
        return (Polynomial, (self.coefficients,))

    def _key(self):
        return tuple((c, c.as_tuple().exponent) for c in self.coefficients)

    def __hash__(self):
        return hash(self._key())

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._key() != other._key()

    def degree(self) -> int:
        return len(self.coefficients) - 1

    def get_coefficient(self, n : int) -> Decimal:
        if n < 0 or n > self.degree():
            raise InvalidArgument("Cannot access coefficient of degree {} in a polynomial of degree {}".format(n, self.degree()))
        return self.coefficients[n]

    def trimmed(self):
        """Return an equivalent polynomial without trailing zero coefficients."""
        terms = list(self.coefficients)
        while len(terms) > 1 and not terms[-1]:
            terms.pop()
        return Polynomial(terms)

    def add(self, other):
        """Coefficient-wise sum.

        The result has as many coefficients as the longer operand, even when
        the highest coefficients cancel out.
        """
        n = max(len(self.coefficients), len(other.coefficients))
        terms = []
        with exact():
            for i in range(n):
                total = Decimal(0)
                if i < len(self.coefficients):
                    total += self.coefficients[i]
                if i < len(other.coefficients):
                    total += other.coefficients[i]
                terms.append(total)
        return Polynomial(terms)

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add(other)

    def evaluate_for(self, value) -> Decimal:
        value = to_decimal(value)
        with exact():
            result = self.coefficients[-1]
            for c in reversed(self.coefficients[:-1]):
                result = result * value + c
        return result

    def integrate_using_rectangles(self, lower, upper) -> Decimal:
        return quadrature.rectangles(self.evaluate_for, lower, upper)

    def integrate_using_trapezoids(self, lower, upper) -> Decimal:
        return quadrature.trapezoids(self.evaluate_for, lower, upper)

    def to_canonical_string(self) -> str:
        """Render with the highest power first, e.g. "3x^2-x+1".

        Zero terms are left out, a coefficient of 1 (or -1) is not written
        before x, and the zero polynomial renders as "0".
        """
        s = ""
        for i in reversed(range(len(self.coefficients))):
            c = self.coefficients[i]
            if not c:
                continue
            if s and c > 0:
                s += "+"
            if i == 0:
                s += plain(c)
                continue
            if c == -1:
                s += "-"
            elif c != 1:
                s += plain(c)
            s += "x^{}".format(i) if i > 1 else "x"
        return s or "0"

    def __str__(self):
        return self.to_canonical_string()

    def __repr__(self):
        return "Polynomial({!r})".format(self.coefficients)

Polynomial.ZERO = Polynomial()
