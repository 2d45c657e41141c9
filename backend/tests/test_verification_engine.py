"""
Banknote Verifier Backend — Verification Engine Unit Tests
===========================================================

What:  Tests for rule compilation and the structural serial checks.
How:   Pure function calls; no database, no HTTP.

What we test:
    ✅ Seeded US and UK rules accept and reject the documented serials
    ✅ Length is an exact match (one short and one long both fail)
    ✅ is_authentic is always format_valid AND length_valid
    ✅ No normalization: lowercase, trailing newline, non-ASCII digits fail
    ✅ Malformed rules are rejected at compile time
"""

import itertools

import pytest

from app.services.verification_engine import (
    SerialRule,
    VerificationResult,
    compile_rule,
    verify,
    verify_serial,
)

US_FORMAT = r"^[A-L]\d{8}[A-Z]$"
UK_FORMAT = r"^[A-Z]{2}\d{2}\s\d{6}$"


class TestUsDollarRule:

    def test_valid_serial(self):
        result = verify(US_FORMAT, 10, "B12345678C")
        assert result.format_valid is True
        assert result.length_valid is True
        assert result.is_authentic is True

    def test_embedded_space_breaks_both_checks(self):
        result = verify(US_FORMAT, 10, "B1234567 8C")
        assert result.length_valid is False
        assert result.format_valid is False
        assert result.is_authentic is False

    def test_first_letter_outside_federal_reserve_range(self):
        """US prefix letters run A-L only."""
        result = verify(US_FORMAT, 10, "M12345678C")
        assert result.format_valid is False
        assert result.length_valid is True
        assert result.is_authentic is False

    def test_lowercase_is_not_normalized(self):
        result = verify(US_FORMAT, 10, "b12345678c")
        assert result.format_valid is False
        assert result.length_valid is True


class TestUkPoundRule:

    def test_missing_space_fails_both(self):
        result = verify(UK_FORMAT, 11, "AB12345678")
        assert result.format_valid is False
        assert result.length_valid is False
        assert result.is_authentic is False

    def test_space_counts_as_one_character(self):
        result = verify(UK_FORMAT, 11, "AB12 345678")
        assert result.format_valid is True
        assert result.length_valid is True
        assert result.is_authentic is True

    def test_non_ascii_space_rejected(self):
        """A non-breaking space is not the literal space the rule expects."""
        result = verify(UK_FORMAT, 11, "AB12\u00a0345678")
        assert result.format_valid is False
        assert result.length_valid is True


class TestLengthCheck:
    PERMISSIVE = r"^[A-Z0-9]+$"

    def test_exact_length_passes(self):
        assert verify(self.PERMISSIVE, 10, "A" * 10).length_valid is True

    def test_one_short_fails(self):
        result = verify(self.PERMISSIVE, 10, "A" * 9)
        assert result.format_valid is True
        assert result.length_valid is False
        assert result.is_authentic is False

    def test_one_long_fails(self):
        result = verify(self.PERMISSIVE, 10, "A" * 11)
        assert result.format_valid is True
        assert result.length_valid is False
        assert result.is_authentic is False

    def test_length_counts_characters_not_bytes(self):
        result = verify(r"^.+$", 3, "€€€")
        assert result.length_valid is True


class TestMatchingEdgeCases:

    def test_empty_serial_fails_both(self):
        result = verify(US_FORMAT, 10, "")
        assert result.format_valid is False
        assert result.length_valid is False

    def test_trailing_newline_does_not_satisfy_anchor(self):
        result = verify(US_FORMAT, 10, "B12345678C\n")
        assert result.format_valid is False
        assert result.length_valid is False

    def test_non_ascii_digits_rejected(self):
        # Arabic-Indic digits are \d in Unicode mode but not in the rule table
        result = verify(US_FORMAT, 10, "B\u0661\u0662\u0663\u0664\u0665\u0666\u0667\u0668C")
        assert result.format_valid is False
        assert result.length_valid is True

    def test_unanchored_pattern_still_matches_whole_string(self):
        result = verify(r"[A-Z]\d{3}", 4, "XA123")
        assert result.format_valid is False


class TestVerificationResult:

    @pytest.mark.parametrize(
        "format_valid,length_valid",
        list(itertools.product([True, False], repeat=2)),
    )
    def test_is_authentic_is_conjunction(self, format_valid, length_valid):
        result = VerificationResult(format_valid=format_valid, length_valid=length_valid)
        assert result.is_authentic is (format_valid and length_valid)

    def test_deterministic(self):
        rule = compile_rule(US_FORMAT, 10)
        for serial in ["B12345678C", "B1234567 8C", "", "zzz"]:
            assert verify_serial(rule, serial) == verify_serial(rule, serial)


class TestCompileRule:

    def test_returns_serial_rule(self):
        rule = compile_rule(US_FORMAT, 10)
        assert isinstance(rule, SerialRule)
        assert rule.length == 10
        assert rule.serial_format == US_FORMAT

    def test_compiled_once_per_pattern(self):
        assert compile_rule(UK_FORMAT, 11) is compile_rule(UK_FORMAT, 11)

    def test_malformed_pattern_rejected(self):
        with pytest.raises(ValueError, match="Invalid serial format"):
            compile_rule(r"^[A-Z", 10)

    @pytest.mark.parametrize("length", [0, -1, True])
    def test_non_positive_length_rejected(self, length):
        with pytest.raises(ValueError, match="positive integer"):
            compile_rule(US_FORMAT, length)
