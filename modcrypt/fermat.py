"""Modular exponentiation via Fermat's little theorem and binary expansion."""

from __future__ import annotations

import random
from typing import Iterable, Protocol


class _IntSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


_RNG = random.Random()


def canonical_decomposition(n: int) -> set[int]:
    """Return the distinct prime divisors of ``n``."""
    divisors: set[int] = set()
    if n == 1:
        return divisors
    i = 2
    while i * i <= n:
        if n % i == 0:
            divisors.add(i)
            while n % i == 0:
                n //= i
        i += 1
    if n > 1:
        divisors.add(n)
    return divisors


def is_prime(n: int, t: int = 6, rng: _IntSource | None = None) -> bool:
    """Probabilistic Fermat test followed by a Lucas check on ``t`` distinct bases."""
    if n == 2:
        return True
    if n < 2 or n % 2 == 0:
        return False
    rng = rng or _RNG
    count = min(t, n - 2)
    chosen: list[int] = []
    seen: set[int] = set()
    while len(chosen) < count:
        a = rng.randint(2, n - 1)
        if a in seen:
            continue
        seen.add(a)
        chosen.append(a)
        if pow(a, n - 1, n) != 1:
            return False
    return all(
        any(pow(a, (n - 1) // q, n) != 1 for a in chosen)
        for q in canonical_decomposition(n - 1)
    )


def fermat_condition(a: int, p: int) -> bool:
    """Tell whether ``p`` is prime and does not divide ``a``."""
    return is_prime(p) and a % p != 0


def fermat_pow(x: int, a: int, p: int) -> int:
    """Compute ``a ** x mod p`` reducing the exponent modulo ``p - 1``."""
    if not fermat_condition(a, p):
        raise ValueError(
            "Fermat's theorem conditions violated: p must be prime and not divide a"
        )
    return pow(a, x % (p - 1), p)


def to_binary(x: int) -> list[int]:
    """Return the bits of ``x``, least significant first."""
    bits: list[int] = []
    while x > 0:
        bits.append(x & 1)
        x //= 2
    return bits


def binary_pow(bits: Iterable[int], a: int, p: int) -> int:
    """Compute ``a`` raised to the exponent given by ``bits`` modulo ``p``."""
    result = 1
    base = a % p
    for bit in bits:
        if bit == 1:
            result = (result * base) % p
        base = (base * base) % p
    return result


def check_input(a: int, x: int, p: int) -> None:
    """Validate the parameters for Fermat exponentiation."""
    if p <= 1 or not is_prime(p):
        raise ValueError("p must be a prime number greater than 1")
    if a % p == 0:
        raise ValueError("a must not be divisible by p")
    if x < 0:
        raise ValueError("the exponent x must not be negative")