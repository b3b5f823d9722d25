"""
User Output Abstraction

Keeps user-facing messages (results, check reports, errors) apart from
debug logging so the entry scripts print consistently and tests can
capture or silence the output.
"""

import logging
import sys
from typing import Any, Iterable, Optional, TextIO, Tuple


PASS = "Pass"
FAIL = "Fail"


class UserOutput:
    """
    Unified handler for user-facing output.

    Usage:
        output = UserOutput()
        output.info("[5, 6, 0, 8, 8]")
        output.error("Invalid digit 12 at x[0] for base 10")

        output.section("Dynamic array")
        output.item("Usage", 100.0)
        output.check("contains(null)", True)
    """

    def __init__(
        self,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        quiet: bool = False,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize output handler.

        Args:
            stdout: Output stream for normal messages (default: sys.stdout)
            stderr: Output stream for errors (default: sys.stderr)
            quiet: If True, suppress all non-error output
            logger: Optional logger for mirrored messages
        """
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.quiet = quiet
        self.logger = logger or logging.getLogger(__name__)

    def info(self, message: str, log: bool = False) -> None:
        """Print informational message to user."""
        if not self.quiet:
            print(message, file=self.stdout)
        if log:
            self.logger.info(message)

    def warning(self, message: str, log: bool = True) -> None:
        """Print warning message to user."""
        if not self.quiet:
            print(f"Warning: {message}", file=self.stdout)
        if log:
            self.logger.warning(message)

    def error(self, message: str, log: bool = True) -> None:
        """Print error message to user (always shown, even in quiet mode)."""
        print(f"Error: {message}", file=self.stderr)
        if log:
            self.logger.error(message)

    def section(self, title: str) -> None:
        """Print a section header."""
        if not self.quiet:
            print(f"\n{title}", file=self.stdout)

    def item(self, label: str, value: Any, indent: int = 2) -> None:
        """Print a labeled item (key-value pair)."""
        if not self.quiet:
            prefix = " " * indent
            print(f"{prefix}{label}: {value}", file=self.stdout)

    def check(self, label: str, passed: bool, width: int = 40) -> None:
        """
        Print one self-check line with a dotted leader.

        Example:
            Test for contains(null): ............... Pass
        """
        if self.quiet:
            return
        text = f"Test for {label}: "
        leader = "." * max(width - len(text), 3)
        print(f"{text}{leader} {PASS if passed else FAIL}", file=self.stdout)

    def check_summary(self, results: Iterable[Tuple[str, bool]]) -> bool:
        """
        Print every check and a closing count line.

        Returns:
            True if every check passed
        """
        results = list(results)
        for label, passed in results:
            self.check(label, passed)

        failed = [label for label, passed in results if not passed]
        if failed:
            self.error(f"{len(failed)} of {len(results)} checks failed: {', '.join(failed)}")
        else:
            self.info(f"\nAll {len(results)} checks passed", log=True)
        return not failed
