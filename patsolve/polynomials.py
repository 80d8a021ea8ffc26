"""Sparse polynomials kept as ``{exponent: coefficient}`` mappings."""

from __future__ import annotations

from collections.abc import Mapping


def _descending(terms: dict[int, float]) -> dict[int, float]:
    return dict(sorted(terms.items(), reverse=True))


def add_polynomials(a: Mapping[int, float], b: Mapping[int, float]) -> dict[int, float]:
    """Return ``a + b`` without terms whose coefficient is exactly zero."""
    result = dict(a)
    for exponent, coefficient in b.items():
        result[exponent] = result.get(exponent, 0.0) + coefficient
    return _descending({e: c for e, c in result.items() if c != 0})


def multiply_polynomials(a: Mapping[int, float], b: Mapping[int, float]) -> dict[int, float]:
    """Return ``a * b`` without terms that round to zero at one decimal."""
    result: dict[int, float] = {}
    for exp_a, coef_a in a.items():
        for exp_b, coef_b in b.items():
            exponent = exp_a + exp_b
            result[exponent] = result.get(exponent, 0.0) + coef_a * coef_b
    return _descending({e: c for e, c in result.items() if int(c * 10) != 0})


def format_polynomial(poly: Mapping[int, float]) -> str:
    """Write the term count then ``exponent coefficient`` pairs, highest first."""
    terms = sorted(poly.items(), reverse=True)
    return " ".join([str(len(terms))] + [f"{e} {c:.1f}" for e, c in terms])