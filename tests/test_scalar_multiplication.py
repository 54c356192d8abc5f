import sys
import unittest

from wecc.ecc import MultiplicationTrace
from wecc.coordinate import PointAtInfinity
from wecc.curves import TOY_CURVE, TOY_G, SECP256K1, SECP256K1_G, SECP256K1_N
from wecc.utils import bits_lsb_first
from ecdsa_helper import EcdsaOracle, to_tuple

import hypothesis.strategies as st
from hypothesis import given, settings, example

SLOW_SETTINGS = {}
if "--fast" in sys.argv:  # pragma: no cover
    SLOW_SETTINGS["max_examples"] = 2
else:
    SLOW_SETTINGS["max_examples"] = 20

ORACLE = EcdsaOracle(29, [2, 20])


class TestScalarMultiplication(unittest.TestCase):

    def setUp(self):
        self.curve = TOY_CURVE
        self.G = TOY_G

    def test_bits(self):
        self.assertEqual(bits_lsb_first(250), [0, 1, 0, 1, 1, 1, 1, 1])
        self.assertEqual(bits_lsb_first(1), [1])
        self.assertEqual(bits_lsb_first(0), [])

        with self.assertRaises(ValueError):
            bits_lsb_first(-1)

    def test_consistency_with_repeated_addition(self):
        acc = self.curve.identity()
        for n in range(0, 21):
            self.assertEqual(self.curve.k_point(n, self.G), acc, f'k_point fails at n={n}')
            self.assertEqual(self.curve.k_point_naive(n, self.G), acc, f'k_point_naive fails at n={n}')
            self.assertEqual(to_tuple(self.curve.k_point(n, self.G)), ORACLE.mul(n, to_tuple(self.G)))
            acc = self.curve.add_points(acc, self.G)

    def test_zero_scalar(self):
        self.assertIs(self.curve.k_point(0, self.G), PointAtInfinity())
        self.assertIs(self.curve.k_point_naive(0, self.G), PointAtInfinity())

        trace = MultiplicationTrace()
        self.curve.k_point(0, self.G, trace)
        self.assertEqual(trace.operations, 0)

    def test_identity_scalar(self):
        for k in (-3, 0, 1, 7):
            self.assertIs(self.curve.k_point(k, PointAtInfinity()), PointAtInfinity())

    def test_negative_scalar(self):
        for n in range(1, 21):
            exp = self.curve.negate(self.curve.k_point(n, self.G))
            self.assertEqual(self.curve.k_point(-n, self.G), exp)
            self.assertEqual(self.curve.k_point_naive(-n, self.G), exp)
            self.assertEqual(-n * self.G, exp)

    def test_250_operation_count(self):
        # 250 = 0b11111010: 8 bits, 6 of them set
        trace = MultiplicationTrace()
        act = SECP256K1.k_point(250, SECP256K1_G, trace)
        self.assertEqual(trace.doublings, 7)
        self.assertEqual(trace.additions, 6)

        naive_trace = MultiplicationTrace()
        exp = SECP256K1.k_point_naive(250, SECP256K1_G, naive_trace)
        self.assertEqual(naive_trace.additions, 249)
        self.assertEqual(naive_trace.doublings, 0)

        self.assertEqual(act, exp)

    def test_operation_count_is_logarithmic(self):
        for bits in range(1, 257, 17):
            for k in ((1 << bits) - 1, 1 << (bits - 1), (1 << bits) - 1 >> 1 | 1):
                trace = MultiplicationTrace()
                SECP256K1.k_point(k, SECP256K1_G, trace)

                self.assertEqual(trace.doublings, k.bit_length() - 1, f'k={k}')
                self.assertEqual(trace.additions, bin(k).count('1'), f'k={k}')
                self.assertLessEqual(trace.operations, 2 * k.bit_length())

        # squaring the scalar at most doubles the cost
        small, large = MultiplicationTrace(), MultiplicationTrace()
        self.curve.k_point(1000, self.G, small)
        self.curve.k_point(1000 * 1000, self.G, large)
        self.assertLessEqual(large.operations, 2 * small.operations + 2)

    def test_trace_accumulates(self):
        trace = MultiplicationTrace()
        self.curve.k_point(3, self.G, trace)
        self.curve.k_point(3, self.G, trace)
        self.assertEqual((trace.doublings, trace.additions), (2, 4))

    def test_group_order(self):
        self.assertIs(SECP256K1.k_point(SECP256K1_N, SECP256K1_G), PointAtInfinity())
        self.assertEqual(SECP256K1.k_point(SECP256K1_N + 1, SECP256K1_G), SECP256K1_G)
        self.assertEqual(SECP256K1.k_point(SECP256K1_N - 1, SECP256K1_G), -SECP256K1_G)

    @settings(**SLOW_SETTINGS)
    @given(st.integers(min_value=-200, max_value=200), st.integers(min_value=-200, max_value=200))
    @example(0, 0)
    def test_distributivity(self, j, k):
        # (j + k)P = jP + kP
        act = self.curve.k_point(j + k, self.G)
        exp = self.curve.add_points(self.curve.k_point(j, self.G), self.curve.k_point(k, self.G))
        self.assertEqual(act, exp)

    @settings(**SLOW_SETTINGS)
    @given(st.integers(min_value=0, max_value=100), st.integers(min_value=0, max_value=100))
    def test_composition(self, j, k):
        # j(kP) = (jk)P
        self.assertEqual(self.curve.k_point(j, self.curve.k_point(k, self.G)), self.curve.k_point(j * k, self.G))


if __name__ == "__main__":
    unittest.main()
