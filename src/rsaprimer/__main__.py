"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that generates the INTERACTIVE part
on-the-fly based on the arguments missing from the command line, including the option that none are included.
Keys are printed, never stored: carrying them between parties is up to the user.

Typical usage example:

    rsaprimer
    OR
    python -m rsaprimer -n keygen --digits 3 --seed 7
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import random
import sys
import typing

import rsaprimer


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None
    default: typing.Any = None
    advanced: bool = False
    optional: bool = False


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in RSA Primer.",
            choices=["keygen", "encrypt", "decrypt"],
        ),
    "keygen":
        HelpData("Key generation utility."),
    "encrypt":
        HelpData("Encryption utility."),
    "decrypt":
        HelpData("Decryption utility."),
    "digits":
        HelpData(
            description="Number of decimal digits of each secret prime.",
            format=int,
            default=3,
        ),
    "seed":
        HelpData(
            description="Seed for the random number generator, for reproducible keys. Warning! Predictable.",
            format=int,
            advanced=True,
            optional=True,
        ),
    "modulus":
        HelpData(
            description="The modulus n of the key pair.",
            format=int,
        ),
    "exponent":
        HelpData(
            description="The public exponent e.",
            format=int,
        ),
    "private_exponent":
        HelpData(
            description="The private exponent d.",
            format=int,
        ),
    "message":
        HelpData(
            description="Message to encrypt, uppercase letters A-Z only.",
            format=str,
        ),
    "ciphertext":
        HelpData(
            description="The ciphertext integer to decrypt.",
            format=int,
        ),
}

needs = {
    "keygen": ("digits", "seed"),
    "encrypt": ("modulus", "exponent", "message"),
    "decrypt": ("modulus", "private_exponent", "ciphertext"),
}

modp = argparse.ArgumentParser(add_help=False)
modp.add_argument("--modulus", "-m", type=help_dict["modulus"].format, help=help_dict["modulus"].description)
corep = argparse.ArgumentParser(prog="rsaprimer")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {rsaprimer.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced", "-a", action="store_true", help="Enable advanced mode, for interactive mode")
corep.add_argument("--verbose", "-V", action="store_true", help="Log debug information to stderr")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

keygen = commands.add_parser("keygen", help=help_dict["keygen"].description)
keygen.add_argument("--digits", "-d", type=help_dict["digits"].format, help=help_dict["digits"].description)
keygen.add_argument("--seed", "-s", type=help_dict["seed"].format, help=help_dict["seed"].description)

encrypt = commands.add_parser("encrypt", parents=[modp], help=help_dict["encrypt"].description)
encrypt.add_argument("--exponent", "-e", type=help_dict["exponent"].format, help=help_dict["exponent"].description)
encrypt.add_argument("--message", type=help_dict["message"].format, help=help_dict["message"].description)

decrypt = commands.add_parser("decrypt", parents=[modp], help=help_dict["decrypt"].description)
decrypt.add_argument("--private-exponent",
                     "-d",
                     type=help_dict["private_exponent"].format,
                     help=help_dict["private_exponent"].description)
decrypt.add_argument("--ciphertext",
                     "-c",
                     type=help_dict["ciphertext"].format,
                     help=help_dict["ciphertext"].description)


def checkmodes(arg: str, mode: tuple[bool, bool]):
    helper_data = help_dict[arg]
    if mode[0] or (helper_data.advanced and not mode[1]):
        if helper_data.default is not None or helper_data.optional:
            return helper_data.default
        if mode[0]:
            raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    for choice in helper_data.choices:
        defstring = " (Default)" if choice == helper_data.default else ""
        if help_dict.get(choice, None):
            prntr(f"{choice} - {help_dict[choice].description}" + defstring)
        else:
            prntr(f"{choice}" + defstring)
    if helper_data.default is not None:
        prntr("To accept default just click enter. Otherwise specify value.")
    vald = set(helper_data.choices)
    while True:
        ch = input(f"{arg}: ")
        if ch in vald:
            return ch
        if not ch and helper_data.default is not None:
            return helper_data.default
        prntr("Please select an option from the list.")


def input_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    skippable = helper_data.default is not None or helper_data.optional
    if skippable:
        prntr(f"Default value: {helper_data.default}")
        prntr("To accept default just click enter. Otherwise specify value.")
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if not ch and skippable:
            return helper_data.default
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def main(argv: list[str] | None = None):
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)
    pstatus = (args.non_interactive, args.advanced)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s:%(name)s:%(message)s")

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not pstatus[0]:
            print(text)

    pspr("Welcome to RSA Primer!\n")
    try:
        if not args.subcommand:
            args.subcommand = choice_handler("subcommand", pstatus, pspr)
        for reqs in needs[args.subcommand]:
            if getattr(args, reqs, None) is None:
                if help_dict[reqs].choices is not None:
                    res = choice_handler(reqs, pstatus, pspr)
                else:
                    res = input_handler(reqs, pstatus, pspr)
                setattr(args, reqs, res)
            else:
                pspr(f"{reqs}: {getattr(args, reqs)}")
    except IOError as err:
        print(err, file=sys.stderr)
        sys.exit(2)
    pspr("\nInput Complete! Executing...")
    try:
        match args.subcommand:
            case "keygen":
                rng = random.Random(args.seed) if args.seed is not None else None
                public, primes, d = rsaprimer.generate(args.digits, rng)
                pspr("Key pair generated! Share n and e, keep the rest to yourself.")
                print(f"n: {public.n}")
                print(f"e: {public.e}")
                print(f"d: {d}")
                print(f"p: {primes.p}")
                print(f"q: {primes.q}")
            case "encrypt":
                public = rsaprimer.PublicKey(args.modulus, args.exponent)
                try:
                    ciph = rsaprimer.encrypt(public, args.message)
                except rsaprimer.MessageTooLarge:
                    pspr(f"Messages of up to {rsaprimer.max_message_length(args.modulus)} letters always fit.")
                    raise
                pspr("Ciphertext:")
                print(ciph)
            case "decrypt":
                clear = rsaprimer.decrypt(args.ciphertext, args.private_exponent, args.modulus)
                pspr("Cleartext:")
                print(clear)
    except (rsaprimer.RSAPrimerError, ValueError) as err:
        print(f"Error: {err}", file=sys.stderr)
        sys.exit(1)
    pspr("Thank you for using RSA Primer!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
