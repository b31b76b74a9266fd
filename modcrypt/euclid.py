"""Extended Euclidean algorithm, modular inverse and a linear Diophantine solver."""

from __future__ import annotations


def _tdiv(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _trem(a: int, b: int) -> int:
    return a - b * _tdiv(a, b)


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, u, v)`` with ``u * a + v * b == g``."""
    if a == 0:
        return b, 0, 1
    g, u1, v1 = extended_gcd(_trem(b, a), a)
    return g, v1 - _tdiv(b, a) * u1, u1


def find_d(c: int, m: int) -> int:
    """Return ``d`` in ``[0, m)`` with ``c * d == 1 (mod m)``."""
    g, u, _ = extended_gcd(c, m)
    if g != 1:
        raise ValueError("no solution: c and m must be coprime")
    return _trem(_trem(u, m) + m, m)


def extended_gcd_bezout(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(d, x, y)`` with ``a * x + b * y == d``."""
    if b == 0:
        return a, 1, 0
    d, x1, y1 = extended_gcd_bezout(b, _trem(a, b))
    return d, y1, x1 - _tdiv(a, b) * y1


def solve_linear_diophantine(a: int, b: int, c: int) -> tuple[int, int]:
    """Return ``(x, y)`` with ``a * x + b * y == c`` when ``a`` and ``b`` are coprime."""
    d, x, y = extended_gcd_bezout(a, b)
    if d != 1:
        raise ValueError("the equation has no solution")
    return x * c, y * c