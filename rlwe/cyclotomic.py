"""
Pierścień cyklotomiczny K[X]/(X^N + 1), N - potęga dwójki.

K to liczby całkowite (charakterystyka zero) albo Z_p. Element pierścienia
trzyma dokładnie N współczynników ModularInt w tablicy numpy (dtype=object,
żeby nie tracić precyzji dużych liczb).
"""

import logging
import operator

import numpy as np

from .characteristic import CHAR_ZERO, Characteristic, characteristic as _characteristic
from .field import ModularInt
from .ntt import negacyclic_multiply, ntt_friendly
from .vector import Vector

_logger = logging.getLogger(__name__)

MULTIPLICATION_ALGORITHMS = ("auto", "schoolbook", "ntt")


def fold(coordinates, degree):
    """
    Redukuje wielomian modulo X^N + 1.
    Wykorzystuje fakt, że X^N = -1 w tym pierścieniu: współczynnik X^i trafia
    na pozycję i % N ze znakiem + dla parzystego bloku i // N, a - dla
    nieparzystego. Krótsze wektory są dopełniane zerami.

    Zwraca N surowych (niezredukowanych modulo p) liczb całkowitych.
    """
    raw = np.array([operator.index(x) for x in coordinates], dtype=object)
    blocks = max(1, -(-len(raw) // degree))

    padded = np.zeros(blocks * degree, dtype=object)
    padded[:len(raw)] = raw

    # bloki są niezależne, sumujemy wszystkie naraz
    signs = np.array([1 if b % 2 == 0 else -1 for b in range(blocks)], dtype=object)
    return (padded.reshape(blocks, degree) * signs[:, np.newaxis]).sum(axis=0)


def convolve(a, b):
    """Pełny iloczyn wielomianów (splot), bez redukcji modulo X^N + 1."""
    return np.convolve(np.array(list(a), dtype=object), np.array(list(b), dtype=object))


class Cyclotomic:
    """
    Opis pierścienia K[X]/(X^N + 1).

    multiplication: "schoolbook" (splot O(N^2) + redukcja), "ntt" (wymaga
    p = 1 mod 2N) albo "auto" - NTT, jeśli to możliwe.
    """

    def __init__(self, degree, characteristic=CHAR_ZERO, multiplication="auto"):
        degree = operator.index(degree)
        if degree < 1 or degree & (degree - 1) != 0:
            raise ValueError(f"N must be a power of 2, got {degree}")
        if not isinstance(characteristic, Characteristic):
            characteristic = _characteristic(operator.index(characteristic))
        if multiplication not in MULTIPLICATION_ALGORITHMS:
            raise ValueError(f"Unknown multiplication algorithm {multiplication!r}, "
                             f"expected one of {MULTIPLICATION_ALGORITHMS}")

        friendly = ntt_friendly(degree, characteristic.modulus)
        if multiplication == "ntt" and not friendly:
            raise ValueError(f"NTT multiplication needs a prime p = 1 mod {2 * degree}, "
                             f"got characteristic {characteristic.modulus}")
        if multiplication == "auto":
            multiplication = "ntt" if friendly else "schoolbook"

        self._degree = degree
        self._char = characteristic
        self._multiplication = multiplication
        _logger.debug("ring %s, multiplication=%s", self, multiplication)

    @property
    def degree(self):
        return self._degree

    @property
    def characteristic(self):
        return self._char

    @property
    def modulus(self):
        return self._char.modulus

    @property
    def multiplication(self):
        return self._multiplication

    @property
    def ntt_friendly(self):
        return ntt_friendly(self._degree, self._char.modulus)

    def element(self, data=()):
        """Rzutuje wektor (Vector lub dowolny ciąg liczb całkowitych) do pierścienia."""
        return self._from_raw(fold(data, self._degree))

    __call__ = element

    def zero(self):
        return self._from_raw([0] * self._degree)

    def one(self):
        return self.element([1])

    def monomial(self, k, coefficient=1):
        """coefficient * X^k, już zredukowane (X^N = -1)."""
        k = operator.index(k)
        if k < 0:
            raise ValueError(f"Exponent must be non-negative, got {k}")
        return self.element([0] * k + [coefficient])

    def mul(self, a, b):
        """Mnożenie w pierścieniu: splot i redukcja modulo X^N + 1."""
        self._check(a, "multiplication")
        self._check(b, "multiplication")
        if self._multiplication == "ntt":
            raw = negacyclic_multiply(a.to_list(), b.to_list(), self.modulus)
        else:
            # redukcja modulo p dopiero na końcu
            raw = fold(convolve(a.to_list(), b.to_list()), self._degree)
        return self._from_raw(raw)

    def _from_raw(self, raw):
        return Element._from_coefficients(self, [ModularInt(int(x), self._char) for x in raw])

    def _check(self, element, op):
        if not isinstance(element, Element):
            raise TypeError(f"Expected an Element for {op}, got {type(element).__name__}")
        if element.ring != self:
            raise ValueError(f"Rings must match for {op}: {element.ring} != {self}")

    def __eq__(self, other):
        if isinstance(other, Cyclotomic):
            return self._degree == other._degree and self._char == other._char
        return NotImplemented

    def __hash__(self):
        return hash(("Cyclotomic", self._degree, self._char))

    def __repr__(self):
        return f"Cyclotomic({self._degree}, {self._char!r})"

    def __str__(self):
        base = "Z" if self._char.is_zero else f"Z_{self._char.modulus}"
        return f"{base}[X]/(X^{self._degree}+1)"


class Element:
    """
    Element pierścienia Cyclotomic: N kanonicznych współczynników ModularInt,
    współczynnik i przy X^i. Wartość niemutowalna.
    """

    __slots__ = ("_ring", "_vec")

    # numpy ma oddać sterowanie do __rmul__/__radd__
    __array_ufunc__ = None

    def __init__(self, ring, data=()):
        if not isinstance(ring, Cyclotomic):
            raise TypeError(f"Expected a Cyclotomic ring, got {type(ring).__name__}")
        other = ring.element(data)
        self._ring = ring
        self._vec = other._vec

    @classmethod
    def _from_coefficients(cls, ring, coefficients):
        vec = np.empty(ring.degree, dtype=object)
        vec[:] = list(coefficients)
        vec.flags.writeable = False
        obj = cls.__new__(cls)
        obj._ring = ring
        obj._vec = vec
        return obj

    @property
    def ring(self):
        return self._ring

    @property
    def degree(self):
        return self._ring.degree

    @property
    def vec(self):
        """Kopia tablicy współczynników."""
        return self._vec.copy()

    @property
    def coefficients(self):
        return tuple(self._vec)

    def at(self, i):
        return self._vec[i]

    def to_list(self):
        """Kanoniczne współczynniki jako liczby całkowite."""
        return [c.value for c in self._vec]

    def lift(self):
        """Współczynniki w [0, p)."""
        return [c.lift() for c in self._vec]

    def to_vector(self):
        return Vector(self.to_list())

    def __len__(self):
        return len(self._vec)

    def __iter__(self):
        return iter(self._vec)

    def __add__(self, other):
        """Dodawanie wielomianów."""
        if not isinstance(other, Element):
            return NotImplemented
        self._ring._check(other, "addition")
        return Element._from_coefficients(self._ring, self._vec + other._vec)

    def __sub__(self, other):
        """Odejmowanie wielomianów."""
        if not isinstance(other, Element):
            return NotImplemented
        self._ring._check(other, "subtraction")
        return Element._from_coefficients(self._ring, self._vec - other._vec)

    def __neg__(self):
        return Element._from_coefficients(self._ring, -self._vec)

    def hadamard(self, other):
        """Iloczyn po współczynnikach (to NIE jest mnożenie w pierścieniu)."""
        self._ring._check(other, "hadamard product")
        return Element._from_coefficients(self._ring, self._vec * other._vec)

    def __mul__(self, other):
        """Mnożenie wielomianów lub mnożenie przez skalar."""
        if isinstance(other, Element):
            return self._ring.mul(self, other)
        if isinstance(other, ModularInt):
            if other.characteristic != self._ring.characteristic:
                raise ValueError("Characteristics must match for scalar multiplication")
            scalar = other.value
        else:
            try:
                scalar = operator.index(other)
            except TypeError:
                return NotImplemented
        return Element._from_coefficients(self._ring, [c * scalar for c in self._vec])

    def __rmul__(self, other):
        return self * other

    def add(self, other):
        self._ring._check(other, "addition")
        return self + other

    def subtract(self, other):
        self._ring._check(other, "subtraction")
        return self - other

    def multiply(self, other):
        self._ring._check(other, "multiplication")
        return self._ring.mul(self, other)

    def __eq__(self, other):
        if isinstance(other, Element):
            return self._ring == other._ring and self.to_list() == other.to_list()
        return NotImplemented

    def __hash__(self):
        return hash((self._ring, tuple(self.to_list())))

    def __repr__(self):
        return f"Element({self.to_list()}, {self._ring!r})"
