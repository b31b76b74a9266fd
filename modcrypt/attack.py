"""Known-plaintext attack on ElGamal ciphertexts that reuse one session exponent."""

from __future__ import annotations

import logging
from typing import Sequence

logger = logging.getLogger(__name__)

DEFAULT_MAX_TRIES = 1_000_000


def discrete_log(g: int, h: int, p: int, max_tries: int = DEFAULT_MAX_TRIES) -> int:
    """Return the smallest ``e`` below ``max_tries`` with ``g ** e % p == h``."""
    current = 1
    for exponent in range(max_tries):
        if current == h:
            return exponent
        current = (current * g) % p
    raise RuntimeError("discrete logarithm not found")


def elgamal_attack(
    ciphertexts: Sequence[Sequence[int]],
    known_plaintexts: Sequence[int],
    p: int,
    g: int,
) -> int:
    """Recover the secret exponent from ciphertexts with known plaintexts.

    All ciphertexts must share one session exponent ``k``. The first non-zero
    plaintext is used. Returns 0 when the final logarithm cannot be found.
    """
    if not ciphertexts or len(ciphertexts) != len(known_plaintexts):
        raise ValueError("invalid data for the attack")

    index = next(
        (i for i, value in enumerate(known_plaintexts) if value != 0), None
    )
    if index is None:
        raise RuntimeError("the text holds no data")

    u, v = ciphertexts[index]
    m = known_plaintexts[index]

    try:
        m_inv = pow(m, -1, p)
    except ValueError:
        raise RuntimeError("no inverse of m modulo p") from None
    yk = (v * m_inv) % p

    try:
        k = discrete_log(g, u, p)
    except RuntimeError as exc:
        logger.error("failed to find k: %s", exc)
        raise
    logger.info("found k: %d", k)

    try:
        k_inv = pow(k, -1, p - 1)
    except ValueError:
        raise RuntimeError("k and p - 1 are not coprime") from None

    y = pow(yk, k_inv, p)

    try:
        x = discrete_log(g, y, p)
    except RuntimeError as exc:
        logger.error("failed to find x: %s", exc)
        return 0
    logger.info("found x: %d", x)
    return x