from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class MinResult:
    """Minimum value of a grid together with its coordinates.

    A snapshot: it keeps no reference to the grid it was computed from.

    Attributes
    ----------
    value : float
        Smallest value found.
    coordinates : tuple[int, ...]
        Index of the first cell holding ``value`` in row-major order. Its
        length equals the rank of the searched grid.
    """

    value: float
    coordinates: Tuple[int, ...]

    @property
    def ndim(self) -> int:
        return len(self.coordinates)

    def describe(self, precision: int = 2) -> str:
        """Return ``"<value> (coordinates: [i, j, ...])"``."""
        coords = ", ".join(str(c) for c in self.coordinates)
        return f"{self.value:.{precision}f} (coordinates: [{coords}])"
