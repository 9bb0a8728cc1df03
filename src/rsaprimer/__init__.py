"""Textbook RSA in an Academic Sense.

Generates small RSA key pairs from sieved primes, and encrypts/decrypts short uppercase messages with them. Exposes the
underlying number theory (extended Euclidean algorithm, modular inverse, square-and-multiply) as well.

Typical usage example:

    public, primes, d = generate(3)
    c = encrypt(public, "HELLO")
    r = decrypt(c, d, public.n)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging

from rsaprimer.errors import GenerationError
from rsaprimer.errors import InvalidCharacter
from rsaprimer.errors import InverseNotFound
from rsaprimer.errors import MessageTooLarge
from rsaprimer.errors import RSAPrimerError
from rsaprimer.keygen import find_primes
from rsaprimer.keygen import generate
from rsaprimer.keygen import KeyPair
from rsaprimer.keygen import PrimePair
from rsaprimer.keygen import PublicKey
from rsaprimer.keygen import select_prime_pair
from rsaprimer.numtheory import bezout
from rsaprimer.numtheory import mod_exp
from rsaprimer.numtheory import mod_inverse
from rsaprimer.rsa import decode
from rsaprimer.rsa import decrypt
from rsaprimer.rsa import encode
from rsaprimer.rsa import encrypt
from rsaprimer.rsa import max_message_length

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "generate",
    "encrypt",
    "decrypt",
    "encode",
    "decode",
    "max_message_length",
    "find_primes",
    "select_prime_pair",
    "bezout",
    "mod_inverse",
    "mod_exp",
    "KeyPair",
    "PrimePair",
    "PublicKey",
    "RSAPrimerError",
    "GenerationError",
    "InverseNotFound",
    "InvalidCharacter",
    "MessageTooLarge",
]
