"""ElGamal key generation, byte-wise encryption and decryption."""

from __future__ import annotations

import random
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Protocol, Sequence, Union

PathType = Union[str, "PathLike[str]"]

_MR_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


class RandomSource(Protocol):
    def getrandbits(self, k: int) -> int: ...

    def randrange(self, stop: int) -> int: ...


@dataclass(frozen=True)
class KeyMaterial:
    """Public modulus, generator, secret exponent and public key of one session."""

    p: int
    x: int
    g: int
    y: int


def mod_pow(base: int, exp: int, mod: int) -> int:
    """Return ``base ** exp`` modulo ``mod``."""
    return pow(base, exp, mod)


def _is_probable_prime(n: int) -> bool:
    if n < 2:
        return False
    for small in _MR_BASES:
        if n % small == 0:
            return n == small
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _MR_BASES:
        witness = pow(a, d, n)
        if witness in (1, n - 1):
            continue
        for _ in range(s - 1):
            witness = pow(witness, 2, n)
            if witness == n - 1:
                break
        else:
            return False
    return True


def _next_prime(n: int) -> int:
    candidate = max(n + 1, 2)
    while not _is_probable_prime(candidate):
        candidate += 1
    return candidate


def large_prime(bits: int, rng: RandomSource | None = None) -> int:
    """Return the first prime above a random number of ``bits`` bits."""
    rng = rng or random.Random()
    return _next_prime(rng.getrandbits(bits))


def prime_factors(n: int) -> set[int]:
    """Return the distinct prime factors of ``n`` by trial division."""
    factors: set[int] = set()
    i = 2
    while i * i <= n:
        while n % i == 0:
            factors.add(i)
            n //= i
        i += 1
    if n > 1:
        factors.add(n)
    return factors


def is_primitive_root(g: int, p: int, factors: Iterable[int]) -> bool:
    """Tell whether ``g`` generates the multiplicative group modulo ``p``."""
    phi = p - 1
    return all(pow(g, phi // q, p) != 1 for q in factors)


def primitive_root(p: int) -> int:
    """Return the smallest primitive root modulo the prime ``p``."""
    factors = prime_factors(p - 1)
    for g in range(2, p):
        if is_primitive_root(g, p, factors):
            return g
    raise ValueError(f"no primitive root found modulo {p}")


def generate_secret(p: int, rng: RandomSource | None = None) -> int:
    """Return a random exponent in ``[1, p - 2]``."""
    rng = rng or random.Random()
    return rng.randrange(p - 2) + 1


def encrypt(
    letters: Iterable[int], bits: int = 15, rng: RandomSource | None = None
) -> tuple[list[tuple[int, int]], KeyMaterial]:
    """Generate fresh keys and encrypt each value with one session exponent."""
    rng = rng or random.Random()
    p = large_prime(bits, rng)
    g = primitive_root(p)
    x = generate_secret(p, rng)
    y = mod_pow(g, x, p)
    k = generate_secret(p, rng)
    u = mod_pow(g, k, p)
    shared = mod_pow(y, k, p)
    ciphertexts = [(u, (m * shared) % p) for m in letters]
    return ciphertexts, KeyMaterial(p=p, x=x, g=g, y=y)


def decrypt(ciphertexts: Iterable[Sequence[int]], p: int, x: int) -> bytes:
    """Recover bytes from ``(u, v)`` pairs with the secret exponent ``x``."""
    out = bytearray()
    for u, v in ciphertexts:
        m = (v * mod_pow(u, p - 1 - x, p)) % p
        out.append(m & 0xFF)
    return bytes(out)


def read_bytes(path: PathType) -> list[int]:
    """Read a file and return its bytes as integers."""
    with open(path, "rb") as handle:
        return list(handle.read())


def write_ciphertext(path: PathType, ciphertexts: Iterable[Sequence[int]]) -> None:
    """Write pairs as ``(u v) `` entries."""
    with open(path, "w", encoding="ascii") as handle:
        handle.write("".join(f"({u} {v}) " for u, v in ciphertexts))


def write_plaintext(path: PathType, data: bytes) -> None:
    """Write raw bytes to a file."""
    with open(path, "wb") as handle:
        handle.write(bytes(data))