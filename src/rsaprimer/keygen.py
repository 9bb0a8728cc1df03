"""Key Generation Utility, covering prime sieving, prime pair selection and RSA key pair assembly.

Primes are drawn from a deterministic Sieve of Eratosthenes restricted to a given number of decimal digits, so only
the *selection* of primes and of the public exponent consumes randomness. The random source is always injectable, to
keep key generation reproducible under a fixed seed.

Typical usage example:

    find_primes(2)
    pair = select_prime_pair(find_primes(3), random.Random(7))
    public, (p, q), d = generate(3, random.Random(7))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import functools
import logging
import math
import random
import typing

from rsaprimer.errors import GenerationError
from rsaprimer.numtheory import mod_inverse

logger = logging.getLogger(__name__)

MAX_DIGITS: int = 7
_MAX_ATTEMPTS: int = 100


class PrimePair(typing.NamedTuple):
    """The two distinct secret primes of a key."""
    p: int
    q: int


class PublicKey(typing.NamedTuple):
    """The distributable half of a key pair.

    Attributes:
        n: The modulus, product of the two secret primes.
        e: The public exponent, coprime to the totient of `n`.
    """
    n: int
    e: int


class KeyPair(typing.NamedTuple):
    """Everything produced by a single `generate` call.

    Unpacks as (public, primes, private_exponent). The primes and private exponent belong to the key holder alone.
    """
    public: PublicKey
    primes: PrimePair
    private_exponent: int


def sieve(limit: int) -> list[int]:
    """Implements the Sieve of Eratosthenes.

    Only odd candidates are stored, and marking stops once the current candidate exceeds the square root of `limit`.

    Args:
        limit: The number up to which (inclusive) to generate primes.

    Returns:
        A list of primes up to `limit` in ascending order.
    """
    if limit < 2:
        return []
    i_size = (limit - 1) // 2
    candidate: list[bool] = [True] * i_size
    for i in range(math.isqrt(limit) // 2):
        if candidate[i]:
            r = 2 * i + 3
            for j in range((r * r - 3) // 2, i_size, r):
                candidate[j] = False
    return [2] + [(no * 2 + 3) for no, ele in enumerate(candidate) if ele]


@functools.lru_cache(maxsize=None)
def find_primes(digits: int) -> tuple[int, ...]:
    """Finds every prime with exactly `digits` decimal digits.

    Sieves [2, 10**digits) and drops everything below 10**(digits - 1). Results are cached per digit count.

    Args:
        digits: Number of decimal digits. Must be in [1, MAX_DIGITS].

    Returns:
        The primes in ascending order.

    Raises:
        GenerationError: If there are no primes of the requested length.
        ValueError: If `digits` exceeds `MAX_DIGITS`.
    """
    if digits < 1:
        raise GenerationError(f"There are no {digits}-digit primes")
    if digits > MAX_DIGITS:
        raise ValueError(f"Digit count must be at most {MAX_DIGITS}")
    lower = 10**(digits - 1)
    found = tuple(p for p in sieve(10**digits - 1) if p >= lower)
    logger.debug("Sieved %d primes with %d digits", len(found), digits)
    return found


def select_prime_pair(primes: typing.Sequence[int], rng: random.Random) -> PrimePair:
    """Selects two distinct primes uniformly at random.

    Args:
        primes: The candidate pool, without duplicates.
        rng: Source of randomness.

    Returns:
        A pair (p, q) with p != q.

    Raises:
        GenerationError: If the pool is too small, or no distinct `q` was drawn in a reasonable amount of attempts.
    """
    if len(primes) < 2:
        raise GenerationError("At least two candidate primes are needed")
    p = rng.choice(primes)
    for _ in range(_MAX_ATTEMPTS):
        q = rng.choice(primes)
        if q != p:
            return PrimePair(p, q)
    raise GenerationError(f"Drew {_MAX_ATTEMPTS} candidates equal to p. Check the random number generator.")


def generate(digits: int, rng: random.Random | None = None) -> KeyPair:
    """Generates an RSA key pair from two `digits`-digit primes.

    The public exponent is drawn from the same prime pool as p and q, restricted to candidates below the totient and
    coprime to it. Should a pair leave no such candidate, a fresh pair is drawn.

    Args:
        digits: Number of decimal digits of each prime.
        rng: Source of randomness. Defaults to a fresh, unseeded `random.Random`.

    Returns:
        The key pair (public key, prime pair, private exponent).

    Raises:
        GenerationError: If no prime pair with an eligible exponent could be found.
    """
    if rng is None:
        rng = random.Random()
    pool = find_primes(digits)
    for _ in range(_MAX_ATTEMPTS):
        pair = select_prime_pair(pool, rng)
        totient = (pair.p - 1) * (pair.q - 1)
        exponents = [c for c in pool if c < totient and math.gcd(c, totient) == 1]
        if exponents:
            break
        logger.debug("No eligible exponent for p=%d, q=%d. Redrawing.", pair.p, pair.q)
    else:
        raise GenerationError(f"No eligible public exponent found for {digits}-digit primes")
    e = rng.choice(exponents)
    d = mod_inverse(e, totient)
    logger.debug("Generated key with p=%d, q=%d, e=%d", pair.p, pair.q, e)
    return KeyPair(PublicKey(pair.p * pair.q, e), pair, d)
