import pickle
import unittest
from decimal import Decimal

from polyquad.common import InvalidArgument
from polyquad.polynomials import Polynomial

def coefficients(*values):
    return tuple(Decimal(v) for v in values)

class TestConstruction(unittest.TestCase):

    def test_coefficients_are_kept_in_order(self):
        c = [Decimal("1.5"), Decimal(0), Decimal(-3)]
        p = Polynomial(c)
        for i in range(len(c)):
            self.assertEqual(p.get_coefficient(i), c[i])
        self.assertEqual(p.degree(), 2)

    def test_input_is_copied(self):
        c = [Decimal(1), Decimal(2)]
        p = Polynomial(c)
        c[0] = Decimal(100)
        c.append(Decimal(7))
        self.assertEqual(p.coefficients, coefficients(1, 2))

    def test_ints_and_strings_become_decimals(self):
        p = Polynomial([1, "2.25"])
        self.assertEqual(p.coefficients, coefficients("1", "2.25"))
        assert all(isinstance(c, Decimal) for c in p.coefficients)

    def test_rejects_none_and_empty(self):
        with self.assertRaises(InvalidArgument):
            Polynomial(None)
        with self.assertRaises(InvalidArgument):
            Polynomial([])

    def test_rejects_floats(self):
        with self.assertRaises(InvalidArgument):
            Polynomial([0.1])

    def test_rejects_non_numbers(self):
        with self.assertRaises(InvalidArgument):
            Polynomial(["abc"])
        with self.assertRaises(InvalidArgument):
            Polynomial(["NaN"])

    def test_zero(self):
        self.assertEqual(Polynomial().coefficients, coefficients(0))
        self.assertEqual(Polynomial.zero(), Polynomial())
        self.assertEqual(Polynomial.ZERO.degree(), 0)

    def test_monomial(self):
        self.assertEqual(Polynomial.monomial(3, 2).coefficients, coefficients(0, 0, 3))
        self.assertEqual(Polynomial.monomial(5, 0).coefficients, coefficients(5))
        with self.assertRaises(InvalidArgument):
            Polynomial.monomial(1, -1)

    def test_coefficient_index_out_of_range(self):
        p = Polynomial([1, 2, 3])
        with self.assertRaises(InvalidArgument):
            p.get_coefficient(-1)
        with self.assertRaises(InvalidArgument):
            p.get_coefficient(3)

    def test_immutable(self):
        p = Polynomial([1, 2])
        with self.assertRaises(AttributeError):
            p.coefficients = coefficients(3)
        with self.assertRaises(AttributeError):
            del p.coefficients
        self.assertEqual(p.coefficients, coefficients(1, 2))

    def test_pickle(self):
        p = Polynomial(["0.5", 0, -2])
        self.assertEqual(pickle.loads(pickle.dumps(p)), p)

class TestEquality(unittest.TestCase):

    def test_equal_values(self):
        self.assertEqual(Polynomial([1, 2]), Polynomial(["1", "2"]))
        self.assertEqual(hash(Polynomial([1, 2])), hash(Polynomial(["1", "2"])))

    def test_scale_matters(self):
        self.assertNotEqual(Polynomial(["2.0"]), Polynomial([2]))
        self.assertNotEqual(Polynomial([1, "0.50"]), Polynomial([1, "0.5"]))
        self.assertNotEqual(Polynomial.from_csv_line("2.0"), Polynomial.from_csv_line("2"))

    def test_negative_zero_is_zero(self):
        self.assertEqual(Polynomial(["-0"]), Polynomial([0]))
        self.assertEqual(hash(Polynomial(["-0"])), hash(Polynomial([0])))

    def test_trailing_zero_matters(self):
        self.assertNotEqual(Polynomial([1, 0]), Polynomial([1]))

    def test_not_equal_to_other_types(self):
        self.assertNotEqual(Polynomial([1]), (Decimal(1),))
        self.assertNotEqual(Polynomial([1]), 1)

    def test_usable_in_sets(self):
        s = {Polynomial([1, 2]), Polynomial(["1", "2"]), Polynomial(["1.0", "2.00"]), Polynomial([1, 2, 0])}
        self.assertEqual(len(s), 3)

    def test_trimmed(self):
        self.assertEqual(Polynomial([1, 0, 0]).trimmed(), Polynomial([1]))
        self.assertEqual(Polynomial([0, 0]).trimmed(), Polynomial([0]))
        self.assertEqual(Polynomial([0, 1]).trimmed(), Polynomial([0, 1]))

class TestArithmetic(unittest.TestCase):

    def test_add_different_lengths(self):
        p = Polynomial([1, 2, 3])
        q = Polynomial(["0.5"])
        self.assertEqual((p + q).coefficients, coefficients("1.5", 2, 3))
        self.assertEqual(q.add(p).coefficients, coefficients("1.5", 2, 3))

    def test_add_does_not_mutate(self):
        p = Polynomial([1, 2])
        q = Polynomial([3])
        p + q
        self.assertEqual(p.coefficients, coefficients(1, 2))
        self.assertEqual(q.coefficients, coefficients(3))

    def test_add_keeps_cancelled_top_coefficient(self):
        s = Polynomial([1, 2]) + Polynomial([0, -2])
        self.assertEqual(s.coefficients, coefficients(1, 0))
        self.assertEqual(s.degree(), 1)

    def test_add_commutative_and_associative(self):
        p = Polynomial(["1.1", -2])
        q = Polynomial([0, 0, "3.25"])
        r = Polynomial(["-0.1"])
        self.assertEqual(p + q, q + p)
        self.assertEqual((p + q) + r, p + (q + r))
        s = p + q
        for i in range(s.degree() + 1):
            expected = Decimal(0)
            if i <= p.degree():
                expected += p.get_coefficient(i)
            if i <= q.degree():
                expected += q.get_coefficient(i)
            self.assertEqual(s.get_coefficient(i), expected)

    def test_add_is_exact(self):
        tiny = "0.000000000000000000000000000000001"
        s = Polynomial(["1000000000000"]) + Polynomial([tiny])
        self.assertEqual(s.coefficients, coefficients("1000000000000.000000000000000000000000000000001"))

    def test_add_rejects_other_types(self):
        with self.assertRaises(TypeError):
            Polynomial([1]) + 1

    def test_evaluate_at_zero_is_constant(self):
        self.assertEqual(Polynomial(["-7.5", 3, 9]).evaluate_for(0), Decimal("-7.5"))

    def test_evaluate(self):
        p = Polynomial([2, -1, 5])
        self.assertEqual(p.evaluate_for(Decimal(2)), Decimal(20))
        self.assertEqual(p.evaluate_for("-0.5"), Decimal("3.75"))

    def test_evaluate_is_exact(self):
        x = Decimal("1.00000000000000000000000000001")
        p = Polynomial([0, 0, 1])
        expected = Decimal("1." + "0" * 28 + "2" + "0" * 28 + "1")
        self.assertEqual(p.evaluate_for(x), expected)

class TestCanonicalString(unittest.TestCase):

    def test_examples(self):
        self.assertEqual(str(Polynomial([1, 0, 3])), "3x^2+1")
        self.assertEqual(str(Polynomial([2, -1, 5])), "5x^2-x+2")
        self.assertEqual(str(Polynomial([0, 0, 0, 1])), "x^3")
        self.assertEqual(str(Polynomial([0, 1])), "x")
        self.assertEqual(str(Polynomial(["0.5", "-2.25"])), "-2.25x+0.5")

    def test_constants(self):
        self.assertEqual(str(Polynomial([0])), "0")
        self.assertEqual(str(Polynomial([0, 0])), "0")
        self.assertEqual(str(Polynomial([1])), "1")
        self.assertEqual(str(Polynomial([-1])), "-1")
        self.assertEqual(Polynomial([Decimal("1E+2")]).to_canonical_string(), "100")

    def test_repr(self):
        self.assertEqual(repr(Polynomial([1, "2.5"])), "Polynomial((Decimal('1'), Decimal('2.5')))")

    def test_round_trip(self):
        polys = [
            Polynomial([1, 0, 3]),
            Polynomial([2, -1, 5]),
            Polynomial([0, 0, 0, 1]),
            Polynomial([1, 1, 1]),
            Polynomial(["-0.125", 0, "1E+3", -1]),
            Polynomial([0]),
            Polynomial([4, 0, 0]),
        ]
        for p in polys:
            self.assertEqual(Polynomial.from_expression(str(p)).coefficients, p.trimmed().coefficients, str(p))

class TestIntegration(unittest.TestCase):

    def test_constant(self):
        p = Polynomial([2])
        self.assertEqual(p.integrate_using_rectangles(Decimal(0), Decimal(10)), Decimal(20))
        self.assertEqual(p.integrate_using_trapezoids(Decimal(0), Decimal(10)), Decimal(20))

    def test_linear(self):
        p = Polynomial([0, 1])
        self.assertEqual(p.integrate_using_rectangles(0, 1), Decimal("0.4995"))
        self.assertEqual(p.integrate_using_trapezoids(0, 1), Decimal("0.5005"))

    def test_quadratic_rectangles(self):
        p = Polynomial([0, 0, 1])
        self.assertEqual(p.integrate_using_rectangles(0, 1), Decimal("0.3328335"))

    def test_bad_bounds(self):
        p = Polynomial([1])
        with self.assertRaises(InvalidArgument):
            p.integrate_using_rectangles(1, 1)
        with self.assertRaises(InvalidArgument):
            p.integrate_using_trapezoids(2, 1)

if __name__ == '__main__':
    unittest.main()
