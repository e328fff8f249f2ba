"""
Parse text into unsigned 64-bit integers.

The parser consumes the longest valid numeric prefix of a string under a given
base and reports a typed outcome instead of raising, so callers can decide how
strict to be about trailing characters or overflow.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from enum import IntEnum, unique

# Constants ------------------------------------------------------------------------------------------------------------

UINT64_MAX = 2 ** 64 - 1

AUTO_BASE = 0
MIN_BASE = 2
MAX_BASE = 36

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_DIGIT_VALUES = {c: i for i, c in enumerate(_DIGITS)}
_DIGIT_VALUES.update({c.upper(): i for i, c in enumerate(_DIGITS) if c.isalpha()})

# C locale isspace() set
_WHITESPACE = " \t\n\v\f\r"


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class ParseStatus(IntEnum):
    """Outcome of str_to_uint()."""
    SUCCESS = 0
    FAILURE = 1
    INVALID_ARGS = 2
    INCOMPLETE = 3
    OVERFLOW = 4


@dataclass(frozen=True, slots=True)
class ParseResult:
    """
    Tagged result of a parse.

    Attributes:
        status: The parse outcome.
        value: Parsed magnitude, only set for SUCCESS and INCOMPLETE.
        consumed: Number of characters of the input consumed as a number.
        base: Radix actually used after auto-detection, None if nothing was parsed.
    """
    status: ParseStatus
    value: int | None = None
    consumed: int = 0
    base: int | None = None

    def __bool__(self) -> bool:
        return self.status is ParseStatus.SUCCESS

    @property
    def is_success(self) -> bool:
        return self.status is ParseStatus.SUCCESS


# Methods --------------------------------------------------------------------------------------------------------------

def detect_base(text: str, base: int = AUTO_BASE) -> tuple[int, int]:
    """
    Resolve the radix for text and the index where its digits start.

    Leading ASCII whitespace is skipped. With base 0 the radix follows C-style literal
    prefixes: '0x'/'0X' followed by a hex digit selects 16, a leading '0' selects 8,
    anything else 10. With base 16 an optional '0x'/'0X' prefix is skipped as well.
    Binary '0b' prefixes are not recognised.

    Examples:
        >>> detect_base("0x1A")
        (16, 2)
        >>> detect_base("  017")
        (8, 2)
        >>> detect_base("42", 10)
        (10, 0)
    """
    _check_base(base)

    start = 0
    while start < len(text) and text[start] in _WHITESPACE:
        start += 1

    has_hex_prefix = (
            text[start:start + 2] in ("0x", "0X")
            and _digit_value(text[start + 2:start + 3]) < 16
    )

    if base == AUTO_BASE:
        if has_hex_prefix:
            return 16, start + 2
        if text[start:start + 1] == "0":
            return 8, start
        return 10, start

    if base == 16 and has_hex_prefix:
        return 16, start + 2
    return base, start


def str_to_uint(text: str | None, base: int = AUTO_BASE) -> ParseResult:
    """
    Convert text to an unsigned 64-bit integer.

    Consumes the maximal valid numeric prefix of text under base (see detect_base()
    for base 0). Signs are not accepted. The outcome is returned, never raised.

    Args:
        text: The string to parse. None and "" are reported as INVALID_ARGS.
        base: Radix in [2, 36], or 0 to auto-detect from the prefix.

    Returns:
        ParseResult with status:
            SUCCESS - the whole text is a valid number, value is set.
            FAILURE - no numeric prefix at all.
            INVALID_ARGS - text is None or empty.
            INCOMPLETE - only a prefix is valid, value holds the parsed prefix.
            OVERFLOW - magnitude exceeds UINT64_MAX, value is None.

    Raises:
        TypeError: If text is not a str or None.
        ValueError: If base is not 0 and not in [2, 36].

    Examples:
        >>> str_to_uint("123", 10)
        ParseResult(status=<ParseStatus.SUCCESS: 0>, value=123, consumed=3, base=10)
        >>> str_to_uint("123abc", 10).status
        <ParseStatus.INCOMPLETE: 3>
        >>> str_to_uint("0x1A").value
        26
    """
    if text is not None and not isinstance(text, str):
        raise TypeError(f"text must be a str or None, but found {type(text).__name__}")
    _check_base(base)

    if not text:
        return ParseResult(ParseStatus.INVALID_ARGS)

    radix, start = detect_base(text, base)

    value = 0
    end = start
    while end < len(text):
        digit = _digit_value(text[end])
        if digit >= radix:
            break
        # Past the limit the digit run is still consumed, the magnitude is not
        if value <= UINT64_MAX:
            value = value * radix + digit
        end += 1

    if end == start:
        return ParseResult(ParseStatus.FAILURE)

    if value > UINT64_MAX:
        return ParseResult(ParseStatus.OVERFLOW, consumed=end, base=radix)

    status = ParseStatus.SUCCESS if end == len(text) else ParseStatus.INCOMPLETE
    return ParseResult(status, value=value, consumed=end, base=radix)


# Private methods ------------------------------------------------------------------------------------------------------

def _check_base(base: int) -> None:
    if isinstance(base, bool) or not isinstance(base, int):
        raise TypeError(f"base must be an int, but found {type(base).__name__}")
    if base != AUTO_BASE and not MIN_BASE <= base <= MAX_BASE:
        raise ValueError(f"base must be 0 or in [{MIN_BASE}, {MAX_BASE}], but found {base}")


def _digit_value(c: str) -> int:
    # Non-digits map past the largest radix
    return _DIGIT_VALUES.get(c, MAX_BASE)
