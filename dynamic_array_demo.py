#!/usr/bin/env python3
"""
Dynamic Array Demo

Seeds a DynamicArray (sample data from coursework.yaml unless --data or
--capacity is given), applies any --insert values and reports the array,
the position of --find and the usage percentage.

Usage:
    python3 dynamic_array_demo.py
    python3 dynamic_array_demo.py --capacity 2 --insert Ada Rust --find Rust
    python3 dynamic_array_demo.py --check
"""

import sys
from typing import List, Optional

import yaml

from coursework.arg_parser import create_array_parser
from coursework.base_runner import BaseRunner
from coursework.dynamic_array import DynamicArray
from coursework.errors import NullComparisonError
from coursework.self_checks import run_array_checks
from coursework.user_output import UserOutput


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the dynamic array demo."""
    parser = create_array_parser()
    args = parser.parse_args(argv)

    output = UserOutput(quiet=args.quiet)

    try:
        runner = BaseRunner(args.config, output=output)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        output.error(str(e), log=False)
        return 1

    if args.check:
        return runner.report_checks("Dynamic array self-checks", run_array_checks())

    settings = runner.typed_config.dynamic_array
    strict = args.strict_index or settings.strict_index

    if args.data is not None and (args.capacity is not None or args.empty):
        output.warning("--data is ignored when --capacity or --empty is given")

    if args.capacity is not None:
        array = DynamicArray(args.capacity, strict_index=strict)
    elif args.empty:
        array = DynamicArray(settings.default_capacity, strict_index=strict)
    elif args.data is not None:
        array = DynamicArray.from_data(args.data, strict_index=strict)
    else:
        array = DynamicArray.from_data(settings.sample_data, strict_index=strict)

    for value in args.insert:
        array.insert(value)

    find = args.find if args.find is not None else settings.find
    runner.logger.debug("Array before lookup: %r", array)

    output.info(str(array))
    try:
        output.item(f"index({find})", array.index(find), indent=0)
    except NullComparisonError as e:
        output.error(str(e))
        return 1
    output.item("usage", array.usage(), indent=0)
    return 0


if __name__ == '__main__':
    sys.exit(main())
