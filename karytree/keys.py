"""Sample key types for karytree.

Any value with ``==`` can be a key, and any value with ``<`` as well can be
used with in-order and heap traversal. Complex is a small ready-made
example with a non-trivial ordering.
"""

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True, eq=True)
class Complex:
    """Complex number ordered by real part, then imaginary part."""

    real: float = 0.0
    imag: float = 0.0

    def get_real(self) -> float:
        return self.real

    def get_imag(self) -> float:
        return self.imag

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return (self.real, self.imag) < (other.real, other.imag)

    def __str__(self) -> str:
        return f"{self.real}+{self.imag}i"
