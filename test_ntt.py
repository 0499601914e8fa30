import random
import unittest

import numpy as np

from rlwe import PARAMETER_SETS, Cyclotomic, fold, ring
from rlwe.ntt import intt, negacyclic_multiply, ntt, ntt_friendly


class TestNTT(unittest.TestCase):
    def setUp(self):
        random.seed(42)
        np.random.seed(42)

    def test_ntt_friendly(self):
        self.assertTrue(ntt_friendly(16, 97))
        self.assertTrue(ntt_friendly(1024, 12289))
        self.assertTrue(ntt_friendly(256, 8380417))
        self.assertFalse(ntt_friendly(256, 3329))
        self.assertFalse(ntt_friendly(4, 7))
        self.assertFalse(ntt_friendly(4, 0))
        self.assertFalse(ntt_friendly(1, 2))
        self.assertFalse(ntt_friendly(4, 17 * 41))

    def test_inverse(self):
        values = [random.randrange(97) for _ in range(16)]
        self.assertEqual(intt(ntt(values, 97), 97), values)

    def test_evaluates_at_roots_of_x_n_plus_one(self):
        """Forward transform gives the values of the polynomial at the roots of X^N + 1."""
        for degree, p in [(1, 7), (4, 17), (8, 97)]:
            values = [random.randrange(-p, p) for _ in range(degree)]
            roots = [r for r in range(p) if pow(r, degree, p) == p - 1]
            self.assertEqual(len(roots), degree)
            want = sorted(sum(c * pow(r, i, p) for i, c in enumerate(values)) % p for r in roots)
            self.assertEqual(sorted(ntt(values, p)), want, f"N={degree}, p={p}")

    def test_pointwise_product_is_ring_product(self):
        """Hadamard product in the evaluation domain is ring multiplication."""
        p = 12289
        a = [random.randrange(p) for _ in range(32)]
        b = [random.randrange(p) for _ in range(32)]
        fa, fb = ntt(a, p), ntt(b, p)
        got = intt([x * y % p for x, y in zip(fa, fb)], p)
        want = [int(c) % p for c in fold(np.convolve(np.array(a, dtype=object), np.array(b, dtype=object)), 32)]
        self.assertEqual(got, want)

    def test_matches_schoolbook(self):
        for degree, p in [(1, 7), (2, 5), (16, 97), (64, 12289), (256, 8380417)]:
            fast = Cyclotomic(degree, p, multiplication="ntt")
            slow = Cyclotomic(degree, p, multiplication="schoolbook")
            a = [random.randrange(-p, p) for _ in range(degree)]
            b = [random.randrange(-p, p) for _ in range(degree)]
            got = fast.element(a) * fast.element(b)
            want = slow.element(a) * slow.element(b)
            np.testing.assert_array_equal(got.to_list(), want.to_list(), err_msg=f"N={degree}, p={p}")

    def test_negative_inputs(self):
        self.assertEqual(negacyclic_multiply([-1], [-1], 7), [1])
        self.assertEqual(negacyclic_multiply([0, 1], [0, 1], 5), [4, 0])

    def test_length_mismatch(self):
        with self.assertRaises(ValueError):
            negacyclic_multiply([1, 2], [1, 2, 3, 4], 97)

    def test_not_friendly(self):
        with self.assertRaises(ValueError):
            ntt([1, 2, 3, 4], 7)


class TestAlgorithmSelection(unittest.TestCase):
    def test_auto(self):
        self.assertEqual(Cyclotomic(16, 97).multiplication, "ntt")
        self.assertEqual(Cyclotomic(4, 7).multiplication, "schoolbook")
        self.assertEqual(Cyclotomic(16).multiplication, "schoolbook")
        self.assertTrue(Cyclotomic(16, 97).ntt_friendly)
        self.assertFalse(Cyclotomic(16).ntt_friendly)

    def test_forced_ntt_needs_friendly_prime(self):
        with self.assertRaises(ValueError):
            Cyclotomic(4, 7, multiplication="ntt")
        with self.assertRaises(ValueError):
            Cyclotomic(4, multiplication="ntt")

    def test_unknown_algorithm(self):
        with self.assertRaises(ValueError):
            Cyclotomic(4, 7, multiplication="karatsuba")


class TestParameterSets(unittest.TestCase):
    def test_all_sets(self):
        for name, (degree, prime) in PARAMETER_SETS.items():
            r = ring(name)
            self.assertEqual(r.degree, degree)
            self.assertEqual(r.modulus, prime)

    def test_algorithms(self):
        self.assertEqual(ring("kyber").multiplication, "schoolbook")
        self.assertEqual(ring("dilithium").multiplication, "ntt")
        self.assertEqual(ring("newhope1024").multiplication, "ntt")
        self.assertEqual(ring("toy", multiplication="schoolbook").multiplication, "schoolbook")

    def test_toy_ring_arithmetic(self):
        r = ring("toy")
        a = r.element(range(32))
        self.assertEqual(a.to_list(), [-16] * 16)
        self.assertEqual(a * r.one(), a)

    def test_unknown(self):
        with self.assertRaises(KeyError):
            ring("not-a-scheme")


if __name__ == '__main__':
    unittest.main(verbosity=2)
