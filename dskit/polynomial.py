"""Polynomials in one variable kept as terms ordered by descending power."""

from __future__ import annotations

from typing import Iterable


class Polynomial:
    """A polynomial whose like powers are combined as terms are added.

    A term whose coefficient sums to zero is kept, as is a zero term added
    directly; products with a zero coefficient are left out.
    """

    def __init__(self, terms: Iterable[tuple[int, int]] = ()) -> None:
        self._coeffs: dict[int, int] = {}
        for coeff, power in terms:
            self.add_term(coeff, power)

    def add_term(self, coeff: int, power: int) -> None:
        """Add ``coeff * x**power``, combining it with any term of the same power."""
        self._coeffs[power] = self._coeffs.get(power, 0) + coeff

    def terms(self) -> list[tuple[int, int]]:
        """Return the ``(coeff, power)`` pairs, highest power first."""
        return [(self._coeffs[p], p) for p in sorted(self._coeffs, reverse=True)]

    def __add__(self, other: object) -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = Polynomial(self.terms())
        for coeff, power in other.terms():
            result.add_term(coeff, power)
        return result

    def __mul__(self, other: object) -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = Polynomial()
        for c1, p1 in self.terms():
            for c2, p2 in other.terms():
                product = c1 * c2
                if product:
                    result.add_term(product, p1 + p2)
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.terms() == other.terms()

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return " + ".join(f"{coeff}x^{power}" for coeff, power in self.terms())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.terms()!r})"