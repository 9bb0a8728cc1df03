# pylint: disable=protected-access,missing-module-docstring,redefined-outer-name
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math
import random

import pytest
import sympy

from rsaprimer import keygen
from rsaprimer.errors import GenerationError

test_digits = [
    1,
    2,
    3,
    4,
    pytest.param(5, marks=pytest.mark.slow),
    pytest.param(6, marks=pytest.mark.slow),
    pytest.param(7, marks=pytest.mark.extreme),
]


def assert_valid_key(key: keygen.KeyPair, digits: int) -> None:
    """Multi-use key validity assertion suite."""
    (n, e), (p, q), d = key
    totient = (p - 1) * (q - 1)
    assert p != q
    assert sympy.isprime(p)
    assert sympy.isprime(q)
    assert len(str(p)) == digits
    assert len(str(q)) == digits
    assert n == p * q
    assert 1 < e < totient
    assert math.gcd(e, totient) == 1
    assert 0 <= d < totient
    assert (e * d) % totient == 1


@pytest.mark.parametrize("n", [0, 1, 2, 3, 20, 50, 1000, 5000, 10000])
def test_sieve_sane(n):
    assert keygen.sieve(n) == list(sympy.primerange(0, n + 1))


@pytest.mark.parametrize("n", [-10, -1])
def test_sieve_negative(n):
    assert keygen.sieve(n) == []


@pytest.mark.parametrize("n,expected", [(10**5, 9592), pytest.param(10**6, 78498, marks=pytest.mark.slow)])
def test_sieve_large_approx(n, expected):
    assert len(keygen.sieve(n)) == expected


def test_find_primes_single_digit():
    assert keygen.find_primes(1) == (2, 3, 5, 7)


@pytest.mark.parametrize("digits", test_digits)
def test_find_primes_exact_digits(digits):
    found = keygen.find_primes(digits)
    assert found == tuple(sympy.primerange(10**(digits - 1), 10**digits))
    assert all(len(str(p)) == digits for p in found)


@pytest.mark.parametrize("digits", [0, -1, -27])
def test_find_primes_none_exist(digits):
    with pytest.raises(GenerationError):
        keygen.find_primes(digits)


def test_find_primes_validates():
    with pytest.raises(ValueError):
        keygen.find_primes(keygen.MAX_DIGITS + 1)


def test_find_primes_caches(mocker, fresh_prime_cache):
    mocker.patch("rsaprimer.keygen.sieve", return_value=[2, 3, 5, 7])
    assert keygen.find_primes(1) == (2, 3, 5, 7)
    assert keygen.find_primes(1) == (2, 3, 5, 7)
    keygen.sieve.assert_called_once_with(9)


def test_find_primes_filters_short(mocker, fresh_prime_cache):
    mocker.patch("rsaprimer.keygen.sieve", return_value=[2, 3, 5, 7, 11, 13, 97])
    assert keygen.find_primes(2) == (11, 13, 97)
    keygen.sieve.assert_called_once_with(99)


def test_select_prime_pair_distinct(rng):
    pool = keygen.find_primes(2)
    for _ in range(200):
        p, q = keygen.select_prime_pair(pool, rng)
        assert p != q
        assert p in pool
        assert q in pool


def test_select_prime_pair_retries(mocker):
    fake_rng = mocker.Mock()
    fake_rng.choice.side_effect = [11, 11, 11, 13]
    assert keygen.select_prime_pair((11, 13), fake_rng) == keygen.PrimePair(11, 13)
    assert fake_rng.choice.call_count == 4


def test_select_prime_pair_faulty(mocker):
    fake_rng = mocker.Mock()
    fake_rng.choice.return_value = 11
    with pytest.raises(GenerationError):
        keygen.select_prime_pair((11, 13), fake_rng)
    assert fake_rng.choice.call_count == keygen._MAX_ATTEMPTS + 1


@pytest.mark.parametrize("pool", [(), (11,)])
def test_select_prime_pair_pool_too_small(pool, rng):
    with pytest.raises(GenerationError):
        keygen.select_prime_pair(pool, rng)


@pytest.mark.parametrize("digits", test_digits)
@pytest.mark.parametrize("seed", [0, 1, 42, 17092025])
def test_generate_valid(digits, seed):
    assert_valid_key(keygen.generate(digits, random.Random(seed)), digits)


def test_generate_unseeded():
    assert_valid_key(keygen.generate(3), 3)


def test_generate_reproducible():
    assert keygen.generate(4, random.Random(2025)) == keygen.generate(4, random.Random(2025))


def test_generate_named_fields(rng):
    key = keygen.generate(3, rng)
    assert key.public.n == key.primes.p * key.primes.q
    assert key.private_exponent == key[2]


def test_generate_worked_example(mocker):
    mocker.patch("rsaprimer.keygen.select_prime_pair", return_value=keygen.PrimePair(11, 13))
    fake_rng = mocker.Mock()
    fake_rng.choice.return_value = 17
    public, primes, d = keygen.generate(2, fake_rng)
    assert public == keygen.PublicKey(143, 17)
    assert primes == (11, 13)
    assert d == 113
    eligible = fake_rng.choice.call_args.args[0]
    assert 17 in eligible
    assert all(math.gcd(e, 120) == 1 and e < 120 for e in eligible)


def test_generate_redraws_without_exponent(mocker, rng):
    mocker.patch("rsaprimer.keygen.select_prime_pair",
                 side_effect=[keygen.PrimePair(2, 3), keygen.PrimePair(5, 7)])
    _, primes, _ = keygen.generate(1, rng)
    assert primes == (5, 7)
    assert keygen.select_prime_pair.call_count == 2


def test_generate_exhausted(mocker, rng):
    mocker.patch("rsaprimer.keygen.select_prime_pair", return_value=keygen.PrimePair(2, 3))
    with pytest.raises(GenerationError):
        keygen.generate(1, rng)
    assert keygen.select_prime_pair.call_count == keygen._MAX_ATTEMPTS


@pytest.mark.parametrize("digits", [0, -3])
def test_generate_no_primes(digits, rng):
    with pytest.raises(GenerationError):
        keygen.generate(digits, rng)
