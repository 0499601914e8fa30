"""Arytmetyka w pierścieniach cyklotomicznych Z[X]/(X^N+1) i Z_p[X]/(X^N+1)."""

import logging

from .characteristic import CHAR_ZERO, Characteristic, balanced_residue, characteristic
from .cyclotomic import Cyclotomic, Element, convolve, fold
from .field import FieldElement, ModularInt
from .params import PARAMETER_SETS, ring
from .vector import Vector

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CHAR_ZERO",
    "Characteristic",
    "Cyclotomic",
    "Element",
    "FieldElement",
    "ModularInt",
    "PARAMETER_SETS",
    "Vector",
    "balanced_residue",
    "characteristic",
    "convolve",
    "fold",
    "ring",
]
