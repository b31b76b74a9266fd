"""Modular arithmetic, ElGamal encryption and a known-plaintext attack on it."""

__version__ = "0.1.0"
__all__ = ["attack", "cli", "elgamal", "euclid", "fermat"]