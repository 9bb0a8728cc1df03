"""Provides textbook RSA encryption and decryption of short uppercase messages.

Messages are marshalled to integers by packing the two-digit ASCII code of every letter in base 100, which is then
fed through the RSA primitive. No padding whatsoever is applied, so this is strictly academic.

Typical usage example:

    public, _, d = generate(3)
    c = encrypt(public, "HI")
    r = decrypt(c, d, public.n)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging

from rsaprimer.errors import InvalidCharacter
from rsaprimer.errors import MessageTooLarge
from rsaprimer.keygen import PublicKey
from rsaprimer.numtheory import mod_exp

logger = logging.getLogger(__name__)

_BASE = 100
_FIRST_CODE = ord("A")
_LAST_CODE = ord("Z")


def encode(text: str) -> int:
    """Converts an uppercase message to its representative integer.

    Args:
        text: Non-empty message over A-Z.

    Returns:
        The representative integer, two decimal digits per letter.

    Raises:
        InvalidCharacter: If a character lies outside A-Z.
        ValueError: If `text` is empty.
    """
    if not text:
        raise ValueError("Message must not be empty")
    result = 0
    for pos, char in enumerate(text):
        if not "A" <= char <= "Z":
            raise InvalidCharacter(char, pos)
        result = result * _BASE + ord(char)
    return result


def decode(value: int) -> str:
    """Converts a representative integer back to its message.

    Letters are peeled off from the least significant end, then put back in order.

    Args:
        value: The representative integer.

    Returns:
        The message.

    Raises:
        InvalidCharacter: If a recovered code is not the code of a letter in A-Z.
        ValueError: If `value` is negative.
    """
    if value < 0:
        raise ValueError("Message representative must be non-negative")
    codes = []
    while value >= _BASE:
        codes.append(value % _BASE)
        value //= _BASE
    codes.append(value)
    codes.reverse()
    for pos, code in enumerate(codes):
        if not _FIRST_CODE <= code <= _LAST_CODE:
            raise InvalidCharacter(chr(code), pos)
    return "".join(chr(code) for code in codes)


def max_message_length(modulus: int) -> int:
    """Returns the longest message length that is guaranteed to encrypt under `modulus`.

    Any message of this length or shorter encodes to at most "ZZ...Z", which is below the modulus.
    """
    length, value = 0, 0
    while value * _BASE + _LAST_CODE < modulus:
        value = value * _BASE + _LAST_CODE
        length += 1
    return length


def encrypt(public_key: PublicKey, plaintext: str) -> int:
    """Encrypts an uppercase message with the public key.

    Args:
        public_key: The recipient's public key (n, e).
        plaintext: Non-empty message over A-Z.

    Returns:
        The ciphertext, in [0, n).

    Raises:
        InvalidCharacter: If a character lies outside A-Z.
        MessageTooLarge: If the encoded message is not below the modulus.
    """
    n, e = public_key
    message = encode(plaintext)
    if message >= n:
        raise MessageTooLarge(message, n)
    logger.debug("Encrypting %d-letter message under n=%d", len(plaintext), n)
    return mod_exp(message, e, n)


def decrypt(ciphertext: int, private_exponent: int, modulus: int) -> str:
    """Decrypts a ciphertext with the private exponent.

    Args:
        ciphertext: The encrypted message.
        private_exponent: The key holder's private exponent `d`.
        modulus: The modulus `n` of the key pair.

    Returns:
        The message.

    Raises:
        InvalidCharacter: If the decrypted integer is not a valid message, e.g. when the key does not match.
        ValueError: If the ciphertext is out of range for the modulus.
    """
    if not 0 <= ciphertext < modulus:
        raise ValueError("Ciphertext must be in range [0, mod-1]")
    return decode(mod_exp(ciphertext, private_exponent, modulus))
