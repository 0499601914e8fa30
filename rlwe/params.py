"""
Przykładowe zestawy parametrów (N, p) dla pierścieni RLWE.

Tylko ilustracja: stopień i moduł z opublikowanych schematów, bez
parametrów szumu czy kodowania. Nie jest to warstwa konfiguracji.
"""

from .cyclotomic import Cyclotomic

PARAMETER_SETS = {
    "toy": (16, 97),
    "kyber": (256, 3329),
    "dilithium": (256, 8380417),
    "newhope512": (512, 12289),
    "newhope1024": (1024, 12289),
    "falcon512": (512, 12289),
    "falcon1024": (1024, 12289),
}


def ring(name, multiplication="auto"):
    """Zwraca pierścień Cyclotomic dla nazwanego zestawu parametrów."""
    try:
        degree, prime = PARAMETER_SETS[name]
    except KeyError:
        raise KeyError(f"Unknown parameter set {name!r}, known: {sorted(PARAMETER_SETS)}") from None
    return Cyclotomic(degree, prime, multiplication=multiplication)
