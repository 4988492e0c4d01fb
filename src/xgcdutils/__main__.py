"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface): whatever the command line leaves
out is asked for interactively, unless running in non-interactive mode, in which case defaults are used where they
exist and anything else is an error.

Typical usage example:

    xgcdutils partial --r2 240 --r1 46 --bound 1
    OR
    python -m xgcdutils
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import sys
import typing

import xgcdutils


def parse_int(text: str) -> int:
    """Parse an integer literal, honouring 0x/0o/0b prefixes."""
    return int(text, 0)


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Callable = str
    choices: list[str] | None = None
    default: typing.Any = None
    advanced: bool = False


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in XGCD Utils.",
            choices=["partial", "reference", "verify"],
        ),
    "partial":
        HelpData("Lehmer-accelerated partial extended GCD."),
    "reference":
        HelpData("Plain partial extended GCD, one division per step."),
    "verify":
        HelpData("Cross-check the accelerated result against the plain one."),
    "r2":
        HelpData(
            description="Larger remainder r2. Must be >= r1.",
            format=parse_int,
        ),
    "r1":
        HelpData(
            description="Smaller remainder r1. Must be >= 0.",
            format=parse_int,
        ),
    "bound":
        HelpData(
            description="Stop once r1 is at or below this bound.",
            format=parse_int,
            default=0,
        ),
    "word_bits":
        HelpData(
            description="Width of the emulated machine word (in bits).",
            choices=["16", "32", "64", "128"],
            advanced=True,
            default="64",
        ),
}

needs = {
    "partial": ("r2", "r1", "bound", "word_bits"),
    "reference": ("r2", "r1", "bound"),
    "verify": ("r2", "r1", "bound", "word_bits"),
}

operands = argparse.ArgumentParser(add_help=False)
operands.add_argument("--r2", type=help_dict["r2"].format, help=help_dict["r2"].description)
operands.add_argument("--r1", type=help_dict["r1"].format, help=help_dict["r1"].description)
operands.add_argument("--bound", "-b", type=help_dict["bound"].format, help=help_dict["bound"].description)
words = argparse.ArgumentParser(add_help=False)
words.add_argument("--word-bits",
                   "-w",
                   choices=help_dict["word_bits"].choices,
                   help=help_dict["word_bits"].description)
corep = argparse.ArgumentParser(prog="xgcdutils")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {xgcdutils.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced", "-a", action="store_true", help="Enable advanced mode, for interactive mode")
corep.add_argument("--verbose", "-V", action="store_true", help="Log debug details to stderr")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

commands.add_parser("partial", parents=[operands, words], help=help_dict["partial"].description)
commands.add_parser("reference", parents=[operands], help=help_dict["reference"].description)
commands.add_parser("verify", parents=[operands, words], help=help_dict["verify"].description)


def checkmodes(arg: str, mode: tuple[bool, bool]):
    helper_data = help_dict[arg]
    if (mode[0] or (helper_data.advanced and not mode[1])) and helper_data.default is not None:
        return helper_data.default
    if mode[0]:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr(f"Description: {helper_data.description}")
    choices = helper_data.choices
    vald = set(choices)
    for choice in choices:
        defstring = " (Default)" if choice == helper_data.default else ""
        if help_dict.get(choice, None):
            prntr(f"{choice} - {help_dict[choice].description}" + defstring)
        else:
            prntr(f"{choice}" + defstring)
    if helper_data.default is not None:
        prntr("To accept default just click enter. Otherwise specify value.")
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
    if helper_data.default is not None:
        prntr(f"Default value: {helper_data.default}")
        prntr("To accept default just click enter. Otherwise specify value.")
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if not ch and helper_data.default is not None:
            return helper_data.default
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr("We could not convert your value to an integer.")


def print_result(result: tuple[int, int, int, int]) -> None:
    for name, val in zip(("co2", "co1", "r2", "r1"), result):
        print(f"{name} = {val}")


def main(argv: list[str] | None = None):
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)
    pstatus = (args.non_interactive, args.advanced)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not pstatus[0]:
            print(text)

    pspr("Welcome to XGCD Utils!\n")
    if not args.subcommand:
        args.subcommand = choice_handler("subcommand", pstatus)
    for reqs in needs[args.subcommand]:
        if getattr(args, reqs, None) is None:
            if help_dict[reqs].choices is not None:
                res = choice_handler(reqs, pstatus)
            else:
                res = input_handler(reqs, pstatus)
            setattr(args, reqs, res)
        else:
            pspr(f"{reqs}: {getattr(args, reqs)}")
    pspr("\nInput Complete! Executing...")
    try:
        match args.subcommand:
            case "partial":
                res = xgcdutils.partial_extended_gcd(args.r2, args.r1, args.bound, int(args.word_bits))
                pspr("Result:")
                print_result(res)
            case "reference":
                res = xgcdutils.partial_eea(args.r2, args.r1, args.bound)
                pspr("Result:")
                print_result(res)
            case "verify":
                res = xgcdutils.partial_extended_gcd(args.r2, args.r1, args.bound, int(args.word_bits))
                ref = xgcdutils.partial_eea(args.r2, args.r1, args.bound)
                if xgcdutils.check_identity(args.r2, *res) and res[2:] == ref[2:]:
                    pspr("Result verified!")
                else:
                    print("Verification Failed!")
                    sys.exit(1)
    except (TypeError, ValueError) as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        sys.exit(2)
    pspr("Thank you for using XGCD Utils!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
