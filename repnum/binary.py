#
# Repnum Binary Rendering
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Final

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import UINT64_MAX

# Constants ------------------------------------------------------------------------------------------------------------

BUFFER_SIZE: Final[int] = 1024

_TERMINATOR: Final[int] = 0
_ZERO: Final[int] = ord("0")
_ONE: Final[int] = ord("1")


# Methods --------------------------------------------------------------------------------------------------------------

def write_binary(value: int, buf: bytearray | memoryview) -> int | None:
    """
    Write the binary digits of value into the tail of buf, right to left.

    The last slot of buf always receives the terminator byte (0) first. Digits are
    produced least-significant bit first: the parity of the remaining magnitude gives
    '0' or '1', then the magnitude is halved, until it reaches zero. At least one digit
    is written, so 0 renders as "0".

    Args:
        value: Unsigned 64-bit integer to render.
        buf: Writable byte buffer. Its whole length is the available capacity.

    Returns:
        Start index of the digits, which occupy buf[start:-1]; None if buf cannot hold
        all digits plus the terminator. Whatever was written on overflow is not a result.

    Raises:
        TypeError: If value is not an int.
        ValueError: If value is outside [0, UINT64_MAX].

    Examples:
        >>> buf = bytearray(8)
        >>> start = write_binary(5, buf)
        >>> bytes(buf[start:-1])
        b'101'
        >>> write_binary(255, bytearray(8)) is None
        True
    """
    _check_value(value)

    n = len(buf)
    if n == 0:
        return None
    buf[n - 1] = _TERMINATOR

    pos = n - 1
    while pos > 0:
        pos -= 1
        buf[pos] = _ZERO if value % 2 == 0 else _ONE
        value //= 2
        if value == 0:
            return pos

    return None


def to_binary(value: int, size: int = BUFFER_SIZE) -> str | None:
    """
    Return the binary representation of value rendered through a buffer of the given size.

    Returns None when size bytes are not enough for the digits and the terminator.
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, but found {size}")
    buf = bytearray(size)
    start = write_binary(value, buf)
    if start is None:
        return None
    return buf[start:-1].decode("ascii")


def required_size(value: int) -> int:
    """Smallest buffer size write_binary() accepts for value, terminator included."""
    _check_value(value)
    return max(value.bit_length(), 1) + 1


# Private methods ------------------------------------------------------------------------------------------------------

def _check_value(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be an int, but found {type(value).__name__}")
    if not 0 <= value <= UINT64_MAX:
        raise ValueError(f"value must be in [0, {UINT64_MAX}], but found {value}")
