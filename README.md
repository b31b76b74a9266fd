# modcrypt

A small toolkit for modular arithmetic and textbook ElGamal, meant for study
and experiments with small numbers. It has no dependencies outside the
standard library.

It covers:

- `modcrypt.fermat`: modular exponentiation via Fermat's little theorem
  (`fermat_pow`) and via the binary expansion of the exponent (`to_binary`,
  `binary_pow`), a probabilistic primality test (`is_prime`), prime divisors
  (`canonical_decomposition`) and parameter checks (`fermat_condition`,
  `check_input`);
- `modcrypt.euclid`: the extended Euclidean algorithm (`extended_gcd`,
  `extended_gcd_bezout`), the modular inverse `find_d` and a solver for
  `a*x + b*y = c` with coprime `a`, `b` (`solve_linear_diophantine`);
- `modcrypt.elgamal`: key generation (`large_prime`, `primitive_root`,
  `generate_secret`), byte-wise encryption (`encrypt`) and decryption
  (`decrypt`), and file helpers (`read_bytes`, `write_ciphertext`,
  `write_plaintext`);
- `modcrypt.attack`: a brute-force `discrete_log` and `elgamal_attack`, a
  known-plaintext attack that recovers the secret exponent.

The primes are deliberately tiny (15 bits by default), and `encrypt` uses a
single session exponent for every byte, which is exactly what makes the attack
work. None of this is suitable for protecting real data.

## Installation

```
pip install .
```

The `test` extra pulls in pytest.

## Command line

```
modcrypt [TASK] [--seed N]
```

Without `TASK` the program asks for a task number on standard input. Input is
read as whitespace-separated words until it runs out.

1. Fermat exponentiation: repeatedly reads `a x p` and prints `a^x mod p`
   computed both ways. Invalid input is reported on standard error.
2. Modular inverse: repeatedly reads `c m` and prints `d` with
   `c*d ≡ 1 (mod m)`, or an error when `c` and `m` are not coprime.
3. Not available: the program reports this and exits with status 1.
4. ElGamal: reads a file path, encrypts the file's bytes with fresh keys,
   writes the ciphertext as `(u v) ` pairs to `output.txt` and the decrypted
   bytes to `res.txt` in the current directory, then runs the known-plaintext
   attack and prints the recovered and the true secret key. `--seed` makes the
   key generation reproducible.
5. Prints a solution of `1256a + 847b = 119`.

Any other task number ends the program quietly.

## Library use

```python
from modcrypt.fermat import fermat_pow, binary_pow, to_binary
from modcrypt.euclid import find_d, solve_linear_diophantine
from modcrypt.elgamal import encrypt, decrypt
from modcrypt.attack import elgamal_attack

fermat_pow(10, 3, 7)                 # 3**10 mod 7
binary_pow(to_binary(10), 3, 7)      # same result
find_d(3, 11)                        # 4, since 3*4 = 12 ≡ 1 (mod 11)

data = list(b"hello")
ciphertexts, keys = encrypt(data)    # keys is a KeyMaterial(p, x, g, y)
decrypt(ciphertexts, keys.p, keys.x) # b"hello"
elgamal_attack(ciphertexts, data, keys.p, keys.g)  # equals keys.x
```

`encrypt` accepts a `bits` size and an `rng` (for example `random.Random(1)`)
for reproducible keys.

Errors are raised as exceptions: `ValueError` for a non-prime modulus,
numbers that are not coprime or mismatched attack input, `RuntimeError` when a
discrete logarithm or an inverse needed by the attack cannot be found.
`discrete_log` gives up after 1,000,000 steps by default. `elgamal_attack`
logs the recovered `k` and `x` through the standard `logging` module and
returns 0 if the final logarithm cannot be found.

## What it does not do

There is no general modular-inverse command: task 3 of the command line is
not available, though `find_d` computes the same inverse from Python. The
output file names of task 4 are fixed.