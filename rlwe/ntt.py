"""
Negacykliczna transformata teorioliczbowa (NTT) nad Z_p.

Mnożenie w Z_p[X]/(X^N + 1) w czasie O(N log N). Wymaga liczby pierwszej p
takiej, że 2N dzieli p - 1, czyli istnienia pierwiastka pierwotnego psi
stopnia 2N z jedynki. Wejścia są "skręcane" przez psi^i, dzięki czemu
zwykła cykliczna NTT rozmiaru N (sympy.ntt) daje splot negacykliczny.
"""

import functools
import logging

import sympy
from sympy.discrete.transforms import intt as sympy_intt, ntt as sympy_ntt

_logger = logging.getLogger(__name__)


def ntt_friendly(degree, modulus):
    """True, jeśli Z_p zawiera pierwiastek pierwotny stopnia 2N z jedynki."""
    return modulus > 2 and (modulus - 1) % (2 * degree) == 0 and bool(sympy.isprime(modulus))


@functools.lru_cache(maxsize=None)
def _tables(degree, modulus):
    if not ntt_friendly(degree, modulus):
        raise ValueError(f"Modulus {modulus} has no primitive {2 * degree}-th root of unity")
    g = int(sympy.primitive_root(modulus))
    psi = pow(g, (modulus - 1) // (2 * degree), modulus)
    psi_inv = pow(psi, -1, modulus)
    twist = tuple(pow(psi, i, modulus) for i in range(degree))
    untwist = tuple(pow(psi_inv, i, modulus) for i in range(degree))
    _logger.debug("NTT tables: N=%d, p=%d, psi=%d", degree, modulus, psi)
    return twist, untwist


def ntt(values, modulus):
    """Współczynniki -> wartości w pierwiastkach X^N + 1."""
    twist, _ = _tables(len(values), modulus)
    transformed = sympy_ntt([int(x) * t % modulus for x, t in zip(values, twist)], modulus)
    return [int(x) for x in transformed]


def intt(values, modulus):
    """Odwrotność ntt(); wynik w [0, p)."""
    _, untwist = _tables(len(values), modulus)
    # sympy_intt mnoży już przez N^-1
    return [int(x) * u % modulus for x, u in zip(sympy_intt(list(values), modulus), untwist)]


def negacyclic_multiply(a, b, modulus):
    """
    Iloczyn a * b w Z_p[X]/(X^N + 1).

    a, b: listy N liczb całkowitych (dowolnego znaku).
    Zwraca N współczynników w [0, p).
    """
    if len(a) != len(b):
        raise ValueError("Operands must have the same length for multiplication")
    fa = ntt(a, modulus)
    fb = ntt(b, modulus)
    return intt([x * y % modulus for x, y in zip(fa, fb)], modulus)
