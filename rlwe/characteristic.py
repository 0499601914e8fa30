"""
Characteristic of a coefficient domain.

Charakterystyka zero oznacza dokładne liczby całkowite (Z), w przeciwnym
razie jest to liczba pierwsza p wyznaczająca ciało Z/pZ.
"""

import functools
import logging
import operator

import sympy

_logger = logging.getLogger(__name__)


def balanced_residue(x, m):
    """
    Zwraca reprezentanta x modulo m najbliższego zeru.

    Wynik r spełnia r = x (mod m) oraz r należy do (m//2 - m, m//2],
    więc remis (parzyste m) rozstrzygany jest na korzyść strony dodatniej.
    """
    t = x % m
    right = m // 2
    left = right - m
    if t <= left:
        return t + m
    if t > right:
        return t - m
    return t


@functools.lru_cache(maxsize=None)
def _is_prime(value):
    return bool(sympy.isprime(value))


class Characteristic:
    """
    Moduł dziedziny współczynników: zero albo liczba pierwsza.

    verify=False pomija test pierwszości; arytmetyka działa dla dowolnego
    modułu >= 1, ale dziedzina jest wtedy tylko pierścieniem, nie ciałem.
    """

    __slots__ = ("_modulus",)

    def __init__(self, value, verify=True):
        if isinstance(value, Characteristic):
            value = value.modulus
        try:
            value = operator.index(value)
        except TypeError:
            raise TypeError(f"Characteristic must be an integer, got {type(value).__name__}") from None
        if value < 0:
            raise ValueError(f"Characteristic must be zero or a prime, got {value}")
        if verify and value != 0 and not _is_prime(value):
            raise ValueError(f"Characteristic must be zero or a prime, got {value}")
        self._modulus = value

    @property
    def modulus(self):
        return self._modulus

    @property
    def is_zero(self):
        return self._modulus == 0

    def reduce(self, x):
        """Kanoniczny reprezentant x: samo x dla charakterystyki zero, inaczej reszta zrównoważona."""
        if self._modulus == 0:
            return x
        return balanced_residue(x, self._modulus)

    def __call__(self, x):
        from .field import ModularInt
        return ModularInt(x, self)

    def zero(self):
        return self(0)

    def one(self):
        return self(1)

    def __int__(self):
        return self._modulus

    def __eq__(self, other):
        if isinstance(other, Characteristic):
            return self._modulus == other._modulus
        return NotImplemented

    def __hash__(self):
        return hash(("Characteristic", self._modulus))

    def __repr__(self):
        if self._modulus == 0:
            return "CHAR_ZERO"
        return f"Characteristic({self._modulus})"


CHAR_ZERO = Characteristic(0)


@functools.lru_cache(maxsize=None)
def characteristic(value):
    """Charakterystyka dla podanej liczby pierwszej (lub zera), z pamięcią podręczną."""
    if value == 0:
        return CHAR_ZERO
    char = Characteristic(value)
    _logger.debug("characteristic %d verified prime", char.modulus)
    return char
