"""
Banknote Verifier Backend — Verification Engine
================================================

What:  Pure structural checks of a serial number against a denomination rule.
Why:   The one piece of real logic in the service; kept free of I/O so it can
       be reasoned about and tested in isolation.
How:   A denomination's `serial_format` text is compiled once into a
       `SerialRule` (cached per distinct pattern/length). `verify_serial`
       applies the rule as a whole-string match plus an exact length check.

Matching semantics:
    - The stored patterns carry their own ^...$ anchors. We still use
      `fullmatch`, because Python's `$` also matches before a trailing
      newline and "B12345678C\\n" must not pass.
    - re.ASCII keeps \\d, \\w and \\s to the ASCII ranges the rule table was
      written for (no Arabic-Indic digits, no non-breaking spaces).
    - No case folding. Lowercase letters fail uppercase classes.
    - Length is counted in characters, an embedded space counts as one.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Pattern


@dataclass(frozen=True)
class SerialRule:
    """Compiled serial-number rule for one denomination."""

    pattern: Pattern[str]
    length: int

    @property
    def serial_format(self) -> str:
        return self.pattern.pattern


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of a structural check. `is_authentic` is always the conjunction."""

    format_valid: bool
    length_valid: bool

    @property
    def is_authentic(self) -> bool:
        return self.format_valid and self.length_valid


@lru_cache(maxsize=256, typed=True)
def compile_rule(serial_format: str, serial_length: int) -> SerialRule:
    """
    Compile a stored rule into a `SerialRule`.

    Cached, so each distinct (pattern, length) pair is compiled once per
    process no matter how many denominations or requests share it.

    Raises:
        ValueError: the pattern is not a valid regular expression, or the
                    expected length is not a positive integer.
    """
    if isinstance(serial_length, bool) or not isinstance(serial_length, int) or serial_length < 1:
        raise ValueError(f"Serial length must be a positive integer, got {serial_length!r}")
    try:
        pattern = re.compile(serial_format, re.ASCII)
    except re.error as e:
        raise ValueError(f"Invalid serial format {serial_format!r}: {e}") from e
    return SerialRule(pattern=pattern, length=serial_length)


def verify_serial(rule: SerialRule, serial_number: str) -> VerificationResult:
    """Check `serial_number` against a compiled rule."""
    return VerificationResult(
        format_valid=rule.pattern.fullmatch(serial_number) is not None,
        length_valid=len(serial_number) == rule.length,
    )


def verify(serial_format: str, serial_length: int, serial_number: str) -> VerificationResult:
    """Convenience wrapper taking the rule as stored text."""
    return verify_serial(compile_rule(serial_format, serial_length), serial_number)
