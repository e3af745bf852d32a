"""Human-readable byte sizes: `'1.50KB'` <-> `1500`."""

import re
from functools import cache
from string import ascii_letters
from typing import ClassVar, Self

UINT64_MAX = 2**64 - 1

_PREFIXES = ('K', 'M', 'G', 'T', 'P', 'E', 'Z', 'Y')
_NUMBER = re.compile(r'(?P<integer>[0-9]+)(?:\.(?P<fraction>[0-9]+))?')

UNITS: dict[str, int] = {
    'B': 1,
    **{f'{p}B': 1000 ** (i + 1) for i, p in enumerate(_PREFIXES)},
    **{f'{p}IB': 1024 ** (i + 1) for i, p in enumerate(_PREFIXES)},
}


@cache
def _fraction_digits(scale: int) -> int:
    k = 0
    while 10**k % scale:
        k += 1

    return k


class MalformedSizeError(ValueError):
    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f'{reason}: {text!r}')


def _split(text: str):
    number = text.rstrip(ascii_letters)
    unit = text[len(number) :]

    if not unit:
        raise MalformedSizeError(text, 'No unit')
    if not number:
        raise MalformedSizeError(text, 'No number')

    return number, unit


def to_bytes(text: str) -> int:
    """
    Parse a size string such as `'82GiB'` or `'1.50KB'` into bytes.

    `KB`, `MB`, ... scale by powers of 1000 and `KiB`, `MiB`, ... by powers of
    1024. Units are case-insensitive. Fractional digits below one byte are
    truncated, never rounded.

    Raises
    ------
    MalformedSizeError
        Empty text, missing or unknown unit, malformed number, or a result
        outside the unsigned 64-bit range.
    """
    if not text:
        raise MalformedSizeError(text, 'Empty size string')

    number, unit = _split(text)

    if (m := _NUMBER.fullmatch(number)) is None:
        raise MalformedSizeError(text, 'Malformed number')

    try:
        scale = UNITS[unit.upper()]
    except KeyError as e:
        msg = f'Unknown unit {unit!r}'
        raise MalformedSizeError(text, msg) from e

    integer = m['integer'].lstrip('0') or '0'
    if len(integer) > len(str(UINT64_MAX)):
        raise MalformedSizeError(text, 'Size exceeds 64 bits')

    size = int(integer) * scale
    # scale divides 10**k, so later digits add less than one byte
    if fraction := (m['fraction'] or '')[: _fraction_digits(scale)]:
        size += int(fraction) * scale // 10 ** len(fraction)

    if size > UINT64_MAX:
        raise MalformedSizeError(text, 'Size exceeds 64 bits')

    return size


def _decimal_unit(value: int) -> tuple[str, int]:
    unit, scale = 'B', 1
    for p in _PREFIXES[:5]:  # up to PB
        if value < scale * 1000:
            break

        unit, scale = f'{p}B', scale * 1000

    return unit, scale


def from_bytes(value: int) -> str:
    """
    Format a byte count with the largest decimal unit up to `PB`.

    Exact multiples of the unit print without decimals (`'82GB'`), anything
    else is rounded half-up to two decimals (`'555.56KB'`).
    """
    if not 0 <= value <= UINT64_MAX:
        msg = f'{value} is not an unsigned 64-bit byte count'
        raise ValueError(msg)

    unit, scale = _decimal_unit(value)

    if value % scale == 0:
        return f'{value // scale}{unit}'

    cents = (value * 100 + scale // 2) // scale
    return f'{cents // 100}.{cents % 100:02d}{unit}'


class ByteSize(int):
    UNITS: ClassVar[dict[str, int]] = UNITS

    def __new__(cls, value: int = 0) -> Self:
        if not 0 <= value <= UINT64_MAX:
            msg = f'{value} is not an unsigned 64-bit byte count'
            raise ValueError(msg)

        return super().__new__(cls, value)

    def __str__(self) -> str:
        return from_bytes(self)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({int(self)})'

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    @classmethod
    def parse(cls, text: str) -> Self:
        return cls(to_bytes(text))
