#
# Repnum - Numeric Parser Tests
#

# Third party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from repnum.numeric import UINT64_MAX, ParseResult, ParseStatus, detect_base, str_to_uint


# Tests ----------------------------------------------------------------------------------------------------------------

class TestStrToUintStatus:
    """Map inputs to the five parse outcomes."""

    @pytest.mark.parametrize(
        "text, base, status, value",
        [
            pytest.param("123", 10, ParseStatus.SUCCESS, 123, id="decimal"),
            pytest.param("123abc", 10, ParseStatus.INCOMPLETE, 123, id="trailing-garbage"),
            pytest.param("abc", 10, ParseStatus.FAILURE, None, id="no-digits"),
            pytest.param("", 10, ParseStatus.INVALID_ARGS, None, id="empty"),
            pytest.param(None, 10, ParseStatus.INVALID_ARGS, None, id="none"),
            pytest.param("99999999999999999999", 10, ParseStatus.OVERFLOW, None, id="overflow"),
            pytest.param("0x1A", 0, ParseStatus.SUCCESS, 26, id="auto-hex"),
        ],
    )
    def test_outcomes(self, text, base, status, value):
        res = str_to_uint(text, base)
        assert res.status is status
        assert res.value == value

    def test_success_is_truthy_only(self):
        assert str_to_uint("1", 10)
        assert not str_to_uint("1z", 10)
        assert not str_to_uint("", 10)
        assert str_to_uint("7", 8).is_success

    def test_default_base_is_auto(self):
        assert str_to_uint("0x10") == str_to_uint("0x10", 0)


class TestStrToUintRange:
    """Check the unsigned 64-bit boundaries."""

    def test_max_value(self):
        res = str_to_uint(str(UINT64_MAX), 10)
        assert res.status is ParseStatus.SUCCESS
        assert res.value == UINT64_MAX

    def test_one_past_max(self):
        assert str_to_uint(str(UINT64_MAX + 1), 10).status is ParseStatus.OVERFLOW

    def test_max_hex(self):
        assert str_to_uint("0xffffffffffffffff").value == UINT64_MAX
        assert str_to_uint("0x10000000000000000").status is ParseStatus.OVERFLOW

    def test_overflow_wins_over_trailing_text(self):
        res = str_to_uint("99999999999999999999xyz", 10)
        assert res.status is ParseStatus.OVERFLOW
        assert res.value is None
        assert res.consumed == 20

    def test_zero(self):
        assert str_to_uint("0", 10) == ParseResult(ParseStatus.SUCCESS, value=0, consumed=1, base=10)


class TestStrToUintBases:
    """Explicit bases and prefix auto-detection."""

    @pytest.mark.parametrize(
        "text, base, value",
        [
            pytest.param("101010", 2, 42, id="bin"),
            pytest.param("52", 8, 42, id="oct"),
            pytest.param("2a", 16, 42, id="hex-lower"),
            pytest.param("2A", 16, 42, id="hex-upper"),
            pytest.param("0x2a", 16, 42, id="hex-prefix-forced"),
            pytest.param("zz", 36, 1295, id="base36"),
            pytest.param("ZZ", 36, 1295, id="base36-upper"),
            pytest.param("010", 0, 8, id="auto-oct"),
            pytest.param("0", 0, 0, id="auto-zero"),
            pytest.param("42", 0, 42, id="auto-dec"),
            pytest.param("0X2A", 0, 42, id="auto-hex-upper-prefix"),
        ],
    )
    def test_success(self, text, base, value):
        res = str_to_uint(text, base)
        assert res.status is ParseStatus.SUCCESS
        assert res.value == value

    @pytest.mark.parametrize(
        "text, base, value, consumed",
        [
            pytest.param("08", 0, 0, 1, id="auto-oct-stops-at-8"),
            pytest.param("0x", 0, 0, 1, id="bare-hex-prefix"),
            pytest.param("0xg", 0, 0, 1, id="hex-prefix-no-digit"),
            pytest.param("0b101", 0, 0, 1, id="no-binary-prefix"),
            pytest.param("102", 2, 2, 2, id="digit-above-base"),
            pytest.param("12 ", 10, 12, 2, id="trailing-space"),
        ],
    )
    def test_incomplete(self, text, base, value, consumed):
        res = str_to_uint(text, base)
        assert res.status is ParseStatus.INCOMPLETE
        assert res.value == value
        assert res.consumed == consumed

    def test_auto_reports_detected_base(self):
        assert str_to_uint("0x1f").base == 16
        assert str_to_uint("017").base == 8
        assert str_to_uint("17").base == 10

    def test_leading_whitespace_skipped(self):
        res = str_to_uint("  \t42", 10)
        assert res.status is ParseStatus.SUCCESS
        assert res.value == 42

    @pytest.mark.parametrize("text", ["-1", "+1", " ", "x1", "٣", "\u00a042", "\u300042"])
    def test_no_sign_or_foreign_digits(self, text):
        assert str_to_uint(text, 10).status is ParseStatus.FAILURE

    @pytest.mark.parametrize(
        "text",
        [
            pytest.param("\u212a", id="kelvin-sign"),
            pytest.param("\u0130", id="dotted-capital-i"),
            pytest.param("\uff11", id="fullwidth-one"),
        ],
    )
    def test_non_ascii_letters_are_not_digits(self, text):
        assert str_to_uint(text, 36).status is ParseStatus.FAILURE

    def test_non_ascii_letter_ends_digit_run(self):
        res = str_to_uint("1\u212a", 36)
        assert res.status is ParseStatus.INCOMPLETE
        assert res.value == 1
        assert res.consumed == 1

    @pytest.mark.parametrize("space", [" ", "\t", "\n", "\v", "\f", "\r"])
    def test_ascii_whitespace_skipped(self, space):
        assert str_to_uint(f"{space}42", 10).value == 42


class TestStrToUintArguments:

    @pytest.mark.parametrize("base", [1, 37, -2])
    def test_bad_base(self, base):
        with pytest.raises(ValueError, match="base must be 0 or in"):
            str_to_uint("1", base)

    def test_bad_text_type(self):
        with pytest.raises(TypeError, match="text must be a str"):
            str_to_uint(b"1", 10)

    def test_bool_base_rejected(self):
        with pytest.raises(TypeError):
            str_to_uint("1", True)


class TestDetectBase:

    @pytest.mark.parametrize(
        "text, base, expected",
        [
            pytest.param("0x1A", 0, (16, 2), id="hex"),
            pytest.param("  017", 0, (8, 2), id="oct-after-space"),
            pytest.param("42", 0, (10, 0), id="dec"),
            pytest.param("42", 10, (10, 0), id="forced"),
            pytest.param("0x1A", 10, (10, 0), id="forced-ignores-prefix"),
            pytest.param("0xff", 16, (16, 2), id="forced-hex-prefix"),
            pytest.param("0x", 16, (16, 0), id="forced-hex-bare-prefix"),
        ],
    )
    def test_detect(self, text, base, expected):
        assert detect_base(text, base) == expected
