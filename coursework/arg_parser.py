#!/usr/bin/env python3
"""
Shared argument parsing logic for the multiply and dynamic array scripts.
"""
import argparse
import re
from typing import List


def parse_digits(value: str) -> List[int]:
    """
    Parse a digit list from the command line.

    Examples:
        "1,2,3" -> [1, 2, 3]
        "1 2 3" -> [1, 2, 3]
        "10, 15" -> [10, 15]   (digits of a base 16 number)
        "123" -> [1, 2, 3]
        "" -> []

    Digit range is not checked here; that depends on the base and is left
    to multiply().

    Raises:
        argparse.ArgumentTypeError: If value contains anything other than
            non-negative integers
    """
    text = value.strip()
    if not text:
        return []

    if re.fullmatch(r'[0-9]+', text):
        return [int(ch) for ch in text]

    parts = [part for part in re.split(r'[,\s]+', text) if part]
    if not all(re.fullmatch(r'[0-9]+', part) for part in parts):
        raise argparse.ArgumentTypeError(f"Invalid digit list: {value!r}")
    return [int(part) for part in parts]


def parse_base(value: str) -> int:
    """
    Parse a number base (integer >= 2).

    Raises:
        argparse.ArgumentTypeError: If value is not an integer >= 2
    """
    try:
        base = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid base: {value}") from e
    if base < 2:
        raise argparse.ArgumentTypeError(f"Base must be >= 2: {value}")
    return base


def create_multiply_parser() -> argparse.ArgumentParser:
    """Create argument parser for the digit multiplier."""
    parser = argparse.ArgumentParser(
        description='Grade-school multiplication of digit arrays'
    )

    parser.add_argument('--config', default='coursework.yaml', help='Config file path')
    parser.add_argument('--x', '-x', type=parse_digits,
                        help='Digits of the first number, e.g. "1,2,3" or "123" (default: 1,2,3)')
    parser.add_argument('--y', '-y', type=parse_digits,
                        help='Digits of the second number (default: 4,5,6)')
    parser.add_argument('--base', '-b', type=parse_base,
                        help='Number base (default: multiply.default_base from config)')
    parser.add_argument('--check', action='store_true', help='Run the multiplier self-checks')
    parser.add_argument('--quiet', '-q', action='store_true', help='Only print errors')

    return parser


def create_array_parser() -> argparse.ArgumentParser:
    """Create argument parser for the dynamic array demo."""
    parser = argparse.ArgumentParser(
        description='Dynamic string array demo'
    )

    parser.add_argument('--config', default='coursework.yaml', help='Config file path')
    parser.add_argument('--data', nargs='*',
                        help='Seed strings (default: dynamic_array.sample_data from config)')
    parser.add_argument('--capacity', type=int,
                        help='Start from an empty array with this capacity instead of seed data')
    parser.add_argument('--empty', action='store_true',
                        help='Start from an empty array of dynamic_array.default_capacity slots')
    parser.add_argument('--insert', nargs='+', default=[], metavar='STRING',
                        help='Strings to insert after seeding')
    parser.add_argument('--find', help='String to locate with index() (default: dynamic_array.find)')
    parser.add_argument('--strict-index', action='store_true',
                        help='Fail when index() reaches an empty slot instead of skipping it')
    parser.add_argument('--check', action='store_true', help='Run the dynamic array self-checks')
    parser.add_argument('--quiet', '-q', action='store_true', help='Only print errors')

    return parser
