"""
Repnum Validators

Caller-facing policy over the numeric parser: turn parse outcomes into a value or
an exception carrying a user-facing message, and check radix bounds.

These validators check the **content** of values. The parser itself never raises
for bad input, see repnum.numeric.str_to_uint().
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Final

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import AUTO_BASE, MAX_BASE, MIN_BASE, ParseStatus, str_to_uint

# Constants ------------------------------------------------------------------------------------------------------------

_NOT_A_NUMBER: Final[frozenset[ParseStatus]] = frozenset({
    ParseStatus.FAILURE,
    ParseStatus.INCOMPLETE,
    ParseStatus.INVALID_ARGS,
})


# Methods --------------------------------------------------------------------------------------------------------------

def ensure_number(text: str | None, base: int = AUTO_BASE) -> int:
    """
    Parse text as an unsigned 64-bit integer, requiring the whole text to be numeric.

    Args:
        text: The string to parse.
        base: Radix in [2, 36], or 0 to auto-detect from the prefix.

    Returns:
        int: The parsed value.

    Raises:
        ValueError: If text has no numeric prefix, has trailing characters, or is empty.
            When base is forced (non-zero) the message names the required base.
        OverflowError: If the magnitude exceeds the unsigned 64-bit range.

    Examples:
        >>> ensure_number("0x2a")
        42
        >>> ensure_number("12z", 10)
        Traceback (most recent call last):
            ...
        ValueError: 12z is not a valid number. Base 10 is required.
    """
    result = str_to_uint(text, base)

    if result.status in _NOT_A_NUMBER:
        msg = f"{text} is not a valid number."
        if base != AUTO_BASE:
            msg += f" Base {base} is required."
        raise ValueError(msg)
    if result.status is ParseStatus.OVERFLOW:
        raise OverflowError(f"{text} is a too large number.")

    return result.value


def validate_base(base: int) -> int:
    """
    Validate that base is a supported radix.

    Returns:
        int: The original base if it is in [2, 36].

    Raises:
        TypeError: If base is not an int (bool is rejected).
        ValueError: If base is outside [2, 36].
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise TypeError(f"base must be an int, but found {type(base).__name__}")
    if not MIN_BASE <= base <= MAX_BASE:
        raise ValueError(f"Unsupported base: {base}")
    return base
