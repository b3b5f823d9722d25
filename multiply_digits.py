#!/usr/bin/env python3
"""
Digit Multiplier - grade-school multiplication of digit arrays

Multiplies two numbers given as digit lists in any base and prints the
product digits. Without operands it runs the classic 123 x 456 demo.

Usage:
    python3 multiply_digits.py --x 1,2,3 --y 4,5,6
    python3 multiply_digits.py --x 15,15 --y 15,15 --base 16
    python3 multiply_digits.py --check
"""

import sys
from typing import List, Optional

import yaml

from coursework.arg_parser import create_multiply_parser
from coursework.base_runner import BaseRunner
from coursework.digit_math import multiply
from coursework.errors import InvalidDigitError
from coursework.self_checks import run_multiply_checks
from coursework.user_output import UserOutput

DEMO_X = [1, 2, 3]
DEMO_Y = [4, 5, 6]


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the digit multiplier."""
    parser = create_multiply_parser()
    args = parser.parse_args(argv)

    output = UserOutput(quiet=args.quiet)

    try:
        runner = BaseRunner(args.config, output=output)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        output.error(str(e), log=False)
        return 1

    if args.check:
        return runner.report_checks("Multiplier self-checks", run_multiply_checks())

    x = args.x if args.x is not None else DEMO_X
    y = args.y if args.y is not None else DEMO_Y
    base = args.base or runner.typed_config.multiply.default_base

    try:
        product = multiply(x, y, base)
    except InvalidDigitError as e:
        output.error(str(e))
        return 1

    runner.logger.info("multiply(%s, %s, base=%d) = %s", x, y, base, product)
    output.info(str(product))
    return 0


if __name__ == '__main__':
    sys.exit(main())
