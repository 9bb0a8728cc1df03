"""Exceptions raised by rsaprimer.

Every error raised on purpose by the package derives from `RSAPrimerError`, while also deriving from the builtin
exception a caller would otherwise expect (`RuntimeError` for generation, `ValueError` for bad input).
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class RSAPrimerError(Exception):
    """Base class for all rsaprimer errors."""


class GenerationError(RSAPrimerError, RuntimeError):
    """No eligible prime pair or public exponent could be found for the requested digit count."""


class InverseNotFound(RSAPrimerError, ValueError):
    """The value has no multiplicative inverse for the modulus, as they are not coprime."""

    def __init__(self, value: int, modulus: int, gcd: int) -> None:
        super().__init__(f"{value} has no inverse modulo {modulus} (gcd is {gcd})")
        self.value = value
        self.modulus = modulus
        self.gcd = gcd


class InvalidCharacter(RSAPrimerError, ValueError):
    """A message contains a character outside of the uppercase Latin alphabet.

    Attributes:
        char: The offending character.
        position: Index of the character in the message, counted from the most significant letter.
    """

    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"Character {char!r} at position {position} is not in A-Z")
        self.char = char
        self.position = position


class MessageTooLarge(RSAPrimerError, ValueError):
    """The encoded message is not smaller than the modulus."""

    def __init__(self, value: int, modulus: int) -> None:
        super().__init__(f"Encoded message {value} must be smaller than the modulus {modulus}")
        self.value = value
        self.modulus = modulus
