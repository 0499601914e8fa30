import operator


class Vector:
    """
    Surowy wektor współczynników dowolnej długości.

    i-ty element to współczynnik przy X^i, przed redukcją modulo X^N + 1.
    Nic nie zakładamy o długości ani o wielkości liczb.
    """

    __slots__ = ("_coordinates",)

    def __init__(self, coordinates=()):
        self._coordinates = tuple(operator.index(x) for x in coordinates)

    @property
    def coordinates(self):
        return self._coordinates

    def __len__(self):
        return len(self._coordinates)

    def __iter__(self):
        return iter(self._coordinates)

    def __getitem__(self, i):
        return self._coordinates[i]

    def __eq__(self, other):
        if isinstance(other, Vector):
            return self._coordinates == other._coordinates
        return NotImplemented

    def __hash__(self):
        return hash(self._coordinates)

    def __repr__(self):
        return f"Vector({list(self._coordinates)})"
