"""
Elementy dziedziny współczynników.

FieldElement opisuje kontrakt, na którym opierają się algorytmy pierścienia
(redukcja modulo X^N + 1, dodawanie, mnożenie). ModularInt jest liczbą
całkowitą dowolnej precyzji z reprezentantem zrównoważonym.
"""

import abc
import operator

from .characteristic import CHAR_ZERO, Characteristic, characteristic as _characteristic


class FieldElement(abc.ABC):
    """Kontrakt elementu dziedziny współczynników pierścienia."""

    __slots__ = ()

    @property
    @abc.abstractmethod
    def characteristic(self) -> Characteristic:
        ...

    @property
    @abc.abstractmethod
    def value(self) -> int:
        ...

    @abc.abstractmethod
    def __add__(self, other):
        ...

    @abc.abstractmethod
    def __sub__(self, other):
        ...

    @abc.abstractmethod
    def __mul__(self, other):
        ...

    @abc.abstractmethod
    def __neg__(self):
        ...

    def is_zero(self) -> bool:
        return self.value == 0

    def __int__(self):
        return self.value

    @classmethod
    def zero(cls, characteristic=CHAR_ZERO):
        return cls(0, characteristic)

    @classmethod
    def one(cls, characteristic=CHAR_ZERO):
        return cls(1, characteristic)


class ModularInt(FieldElement):
    """
    Liczba całkowita oznaczona charakterystyką.

    Dla charakterystyki zero przechowywana jest dokładna wartość; dla
    liczby pierwszej p każdy wynik jest redukowany do przedziału
    (p//2 - p, p//2].
    """

    __slots__ = ("_value", "_char")

    def __init__(self, value, characteristic=CHAR_ZERO):
        if not isinstance(characteristic, Characteristic):
            characteristic = _characteristic(operator.index(characteristic))
        if isinstance(value, ModularInt):
            if value.characteristic != characteristic:
                raise ValueError(f"Characteristics must match for conversion: "
                                 f"{value.characteristic!r} != {characteristic!r}")
            value = value.value
        self._char = characteristic
        self._value = characteristic.reduce(operator.index(value))

    @classmethod
    def _canonical(cls, value, characteristic):
        # value musi już być kanoniczny
        obj = cls.__new__(cls)
        obj._char = characteristic
        obj._value = value
        return obj

    @property
    def characteristic(self):
        return self._char

    @property
    def value(self):
        return self._value

    def lift(self):
        """Reprezentant w [0, p) (dla charakterystyki zero: sama wartość)."""
        m = self._char.modulus
        return self._value % m if m else self._value

    def _operand(self, other, op):
        if isinstance(other, ModularInt):
            if other._char != self._char:
                raise ValueError(f"Characteristics must match for {op}: {self._char!r} != {other._char!r}")
            return other._value
        try:
            return operator.index(other)
        except TypeError:
            return None

    def _wrap(self, raw):
        return ModularInt._canonical(self._char.reduce(raw), self._char)

    def __add__(self, other):
        y = self._operand(other, "addition")
        if y is None:
            return NotImplemented
        return self._wrap(self._value + y)

    __radd__ = __add__

    def __sub__(self, other):
        y = self._operand(other, "subtraction")
        if y is None:
            return NotImplemented
        return self._wrap(self._value - y)

    def __rsub__(self, other):
        y = self._operand(other, "subtraction")
        if y is None:
            return NotImplemented
        return self._wrap(y - self._value)

    def __mul__(self, other):
        y = self._operand(other, "multiplication")
        if y is None:
            return NotImplemented
        return self._wrap(self._value * y)

    __rmul__ = __mul__

    def __neg__(self):
        return self._wrap(-self._value)

    def add(self, other):
        return self + other

    def subtract(self, other):
        return self - other

    def multiply(self, other):
        return self * other

    def __eq__(self, other):
        if isinstance(other, ModularInt):
            return self._value == other._value and self._char == other._char
        try:
            return self._value == operator.index(other)
        except TypeError:
            return NotImplemented

    def __hash__(self):
        return hash(self._value)

    def __repr__(self):
        return repr(self._value)

    def __str__(self):
        return str(self._value)
