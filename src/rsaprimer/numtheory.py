"""Number-theoretic primitives backing key generation, encryption and decryption.

Covers the extended Euclidean algorithm (as quotient recording followed by back-substitution), the modular
multiplicative inverse built on it, and square-and-multiply modular exponentiation. All functions are pure and
allocate only local state, so they are safe to share between threads.

Typical usage example:

    bezout(120, 17)  # Bezout(s=1, t=-7)
    mod_inverse(17, 120)  # 113
    mod_exp(85, 17, 143)  # 24
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing

from rsaprimer.errors import InverseNotFound


class Bezout(typing.NamedTuple):
    """Coefficients satisfying x*s + y*t = gcd(x, y)."""
    s: int
    t: int


def euclid_quotients(x: int, y: int) -> tuple[list[int], int]:
    """Runs the Euclidean algorithm, recording its quotients.

    The quotient of the final, exact division is not recorded as it plays no part in back-substitution.

    Args:
        x: The dividend. Must be >= 0.
        y: The divisor. Must be > 0.

    Returns:
        The quotients in the order they were produced, and gcd(x, y).

    Raises:
        ValueError: If `x` is negative or `y` is not positive.
    """
    if x < 0 or y <= 0:
        raise ValueError("Requires x >= 0 and y > 0")
    quotients: list[int] = []
    while x % y != 0:
        quotients.append(x // y)
        x, y = y, x % y
    return quotients, y


def bezout(x: int, y: int) -> Bezout:
    """Finds the Bezout coefficients of `x` and `y` by back-substitution.

    Starting from the last recorded division, gcd = r(k-2) - q(k)*r(k-1), each earlier remainder is substituted in
    turn until the identity is expressed in terms of `x` and `y` alone.

    Args:
        x: First natural number. Must be >= 0.
        y: Second natural number. Must be > 0.

    Returns:
        Coefficients (s, t) such that x*s + y*t == gcd(x, y).
    """
    quotients, _ = euclid_quotients(x, y)
    if not quotients:
        # y divides x, so gcd(x, y) = y.
        return Bezout(0, 1)
    prev, curr = 1, -quotients[-1]
    for q in reversed(quotients[:-1]):
        prev, curr = curr, -q * curr + prev
    return Bezout(prev, curr)


def normalize(value: int, modulus: int) -> int:
    """Reduces `value` into the canonical residue range [0, modulus).

    Raises:
        ValueError: If `modulus` is not positive.
    """
    if modulus < 1:
        raise ValueError("Modulus must be positive")
    return value % modulus


def mod_inverse(value: int, modulus: int) -> int:
    """Computes the modular multiplicative inverse of `value`.

    Back-substitutes on (modulus, value) and keeps the coefficient paired with `value`, normalized into range.

    Args:
        value: The number to invert.
        modulus: The modulus. Must be positive.

    Returns:
        `d` in [0, modulus) with value*d ≡ 1 (mod modulus).

    Raises:
        InverseNotFound: If `value` and `modulus` are not coprime.
        ValueError: If `modulus` is not positive.
    """
    reduced = normalize(value, modulus)
    if modulus == 1:
        return 0
    if reduced == 0:
        raise InverseNotFound(value, modulus, modulus)
    coeffs = bezout(modulus, reduced)
    gcd = modulus * coeffs.s + reduced * coeffs.t
    if gcd != 1:
        raise InverseNotFound(value, modulus, gcd)
    return normalize(coeffs.t, modulus)


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """Computes base**exponent mod modulus by square-and-multiply.

    Builds the repeated squares base^(2^i) mod n up to the highest set bit of the exponent, then folds them from the
    most significant power down, multiplying in each power of two that still fits in the remaining exponent.

    Args:
        base: The base. Negative values are normalized first.
        exponent: The exponent. Must be >= 0.
        modulus: The modulus. Must be > 1.

    Returns:
        The result in [0, modulus).

    Raises:
        ValueError: If `exponent` is negative or `modulus` is below 2.
    """
    if exponent < 0:
        raise ValueError("Exponent must be non-negative")
    if modulus < 2:
        raise ValueError("Modulus must be at least 2")
    if exponent == 0:
        return 1
    top = exponent.bit_length() - 1
    squares = [normalize(base, modulus)]
    for _ in range(top):
        squares.append(squares[-1] * squares[-1] % modulus)
    result = 1
    remaining = exponent
    for i in range(top, -1, -1):
        power = 1 << i
        if remaining >= power:
            result = result * squares[i] % modulus
            remaining -= power
    return result
