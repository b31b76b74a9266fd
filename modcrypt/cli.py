"""Interactive command line for the number-theory and ElGamal tasks."""

from __future__ import annotations

import argparse
import random
import sys
from enum import IntEnum
from itertools import islice
from typing import Iterable, Iterator, Sequence

from modcrypt.attack import elgamal_attack
from modcrypt.elgamal import (
    decrypt,
    encrypt,
    read_bytes,
    write_ciphertext,
    write_plaintext,
)
from modcrypt.euclid import find_d, solve_linear_diophantine
from modcrypt.fermat import binary_pow, check_input, fermat_pow, to_binary

ENCRYPTED_FILE = "output.txt"
DECRYPTED_FILE = "res.txt"

_EQUATION = (1256, 847, 119)


class Task(IntEnum):
    """Tasks selectable by number."""

    FERMAT_EXPONENTIATION = 1
    EXTENDED_EUCLIDEAN = 2
    MODULAR_INVERSE = 3
    ELGAMAL = 4
    EQUATION_SOLVER = 5


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _take(tokens: Iterator[str], count: int) -> list[str] | None:
    words = list(islice(tokens, count))
    return words if len(words) == count else None


def _parse_ints(words: Sequence[str]) -> list[int]:
    try:
        return [int(word) for word in words]
    except ValueError:
        raise ValueError("invalid input: integers expected") from None


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _error(message: object) -> None:
    print(message, file=sys.stderr)


def _run_fermat(tokens: Iterator[str]) -> None:
    while True:
        _prompt("Enter a, x, p separated by spaces: ")
        words = _take(tokens, 3)
        if words is None:
            return
        try:
            a, x, p = _parse_ints(words)
            check_input(a, x, p)
            print(f"Result using Fermat's theorem: {fermat_pow(x, a, p)}")
            print(f"Result using binary expansion: {binary_pow(to_binary(x), a, p)}")
        except ValueError as exc:
            _error(exc)


def _run_find_d(tokens: Iterator[str]) -> None:
    while True:
        _prompt("Enter c, m separated by spaces: ")
        words = _take(tokens, 2)
        if words is None:
            return
        try:
            c, m = _parse_ints(words)
        except ValueError as exc:
            _error(f"Input error: invalid number. {exc}")
            continue
        try:
            print(f"d = {find_d(c, m)}")
        except (ValueError, ZeroDivisionError) as exc:
            _error(exc)


def _run_elgamal(tokens: Iterator[str], rng: random.Random | None) -> None:
    _prompt("Enter the path of the file to encrypt: ")
    words = _take(tokens, 1)
    if words is None:
        return
    path = words[0]
    try:
        letters = read_bytes(path)
    except OSError:
        _error(f"Cannot open file {path}")
        letters = []

    ciphertexts, keys = encrypt(letters, rng=rng)

    print(f"Encrypted text is stored in {ENCRYPTED_FILE}")
    write_ciphertext(ENCRYPTED_FILE, ciphertexts)

    plaintext = decrypt(ciphertexts, keys.p, keys.x)
    print(f"Decrypted text is stored in {DECRYPTED_FILE}")
    write_plaintext(DECRYPTED_FILE, plaintext)

    try:
        found = elgamal_attack(ciphertexts, letters, keys.p, keys.g)
    except (ValueError, RuntimeError) as exc:
        _error(exc)
        return
    print(f"Found secret key x: {found}")
    print(f"True secret key x: {keys.x}")
    print("Attack succeeded" if found == keys.x else "Attack failed")


def _run_equation() -> None:
    a, b, c = _EQUATION
    try:
        x, y = solve_linear_diophantine(a, b, c)
    except ValueError:
        print("No solution")
        return
    print(f"Solution of the equation: {a}*{x} + {b}*{y} = {c}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run one task, reading its input from standard input."""
    parser = argparse.ArgumentParser(prog="modcrypt")
    parser.add_argument("task", nargs="?", help="task number (1-5)")
    parser.add_argument(
        "--seed", type=int, default=None, help="random seed for key generation"
    )
    args = parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    raw_task = args.task
    if raw_task is None:
        _prompt("Enter the task number: ")
        words = _take(tokens, 1)
        if words is None:
            return 0
        raw_task = words[0]

    try:
        task = Task(int(raw_task))
    except ValueError:
        return 0

    if task is Task.FERMAT_EXPONENTIATION:
        _run_fermat(tokens)
    elif task is Task.EXTENDED_EUCLIDEAN:
        _run_find_d(tokens)
    elif task is Task.MODULAR_INVERSE:
        _error("the modular inverse task is not available")
        return 1
    elif task is Task.ELGAMAL:
        rng = random.Random(args.seed) if args.seed is not None else None
        _run_elgamal(tokens, rng)
    else:
        _run_equation()
    return 0


if __name__ == "__main__":
    sys.exit(main())