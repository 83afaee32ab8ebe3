"""Modular exponentiation and multiplicative inverses modulo a prime."""

from __future__ import annotations


def mod_pow(base, exponent, modulus):
    """base ** exponent modulo modulus."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if modulus < 1:
        raise ValueError("modulus must be positive")
    if exponent == 0:
        return 1
    return pow(base, exponent, modulus)


def mod_inverse(value, prime):
    """Inverse of value modulo a prime, by Fermat's little theorem."""
    if prime < 2:
        raise ValueError("modulus must be a prime")
    if value % prime == 0:
        raise ValueError("value has no inverse modulo prime")
    return mod_pow(value, prime - 2, prime)


def inverses(n, prime):
    """Inverses of 1..n modulo a prime greater than n."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n >= prime:
        raise ValueError("n must be smaller than the prime")
    table = [0] * (n + 1)
    if n >= 1:
        table[1] = 1
    for i in range(2, n + 1):
        table[i] = (prime - prime // i) * table[prime % i] % prime
    return table[1:]