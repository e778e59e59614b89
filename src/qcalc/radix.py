'''
Radix conversion between decimal operand strings and binary, octal and
hexadecimal, fractional parts included.
'''

from enum import Enum

import regex

from . import engine
from .util import InvalidNumber


class Radix(Enum):
    BINARY = 'bin'
    OCTAL = 'oct'
    DECIMAL = 'dec'
    HEXADECIMAL = 'hex'

    @property
    def base(self):
        return _BASES[self]


_BASES = {
    Radix.BINARY: 2,
    Radix.OCTAL: 8,
    Radix.DECIMAL: 10,
    Radix.HEXADECIMAL: 16,
}

# Bits carried by one digit; bounds the decimal digits of an exact fraction.
_BITS = {
    Radix.BINARY: 1,
    Radix.OCTAL: 3,
    Radix.HEXADECIMAL: 4,
}


class RadixConverter:
    '''
    Converts operands to and from binary, octal and hexadecimal.

    Fractional parts are expanded digit by digit and cut off after
    MAX_FRACTION_DIGITS digits. The cut is a truncation, not a rounding, so
    non-terminating expansions (0.1 in binary, say) lose their tail.
    '''

    HEX_DIGITS = '0123456789ABCDEF'
    MAX_FRACTION_DIGITS = 32

    DIGITS = {
        Radix.BINARY: '01',
        Radix.OCTAL: '0-7',
        Radix.DECIMAL: '0-9',
        Radix.HEXADECIMAL: '0-9A-Fa-f',
    }
    PATTERNS = {
        radix: regex.compile(r'-?[{0}]+(?:\.[{0}]*)?'.format(digits))
        for radix, digits in DIGITS.items()
    }
    DISCARD = {
        radix: regex.compile(r'[^{0}.\-]'.format(digits))
        for radix, digits in DIGITS.items()
    }

    def __init__(self, max_fraction_digits=None):
        if max_fraction_digits is None:
            max_fraction_digits = type(self).MAX_FRACTION_DIGITS
        self.max_fraction_digits = max_fraction_digits

    def is_valid(self, value, radix):
        '''
        Return True if ``value`` is a well-formed number in ``radix``.
        '''
        return type(self).PATTERNS[Radix(radix)].fullmatch(value) is not None

    def is_valid_digit(self, digit, radix):
        return (len(digit) == 1 and
                digit != '-' and
                self.is_valid(digit, radix))

    def filter_digits(self, text, radix):
        '''
        Keep only what a number in ``radix`` can contain.

        One leading minus and the first dot survive; everything else that
        is not a digit of the radix is dropped. Hex digits are upper-cased.
        '''
        radix = Radix(radix)
        kept = type(self).DISCARD[radix].sub('', text)
        if radix is Radix.HEXADECIMAL:
            kept = kept.upper()
        negative = kept.startswith('-')
        kept = kept.replace('-', '')
        integer, dot, fraction = kept.partition('.')
        result = integer or '0'
        if dot:
            result += '.' + fraction.replace('.', '')
        return ('-' if negative else '') + result

    def from_decimal(self, decimal, radix):
        '''
        Render a decimal operand in ``radix``.
        '''
        radix = Radix(radix)
        if not self.is_valid(decimal, Radix.DECIMAL):
            raise InvalidNumber('Invalid decimal number {!r}'.format(decimal))
        if radix is Radix.DECIMAL:
            return decimal
        number = engine.parse(decimal)
        negative = number < 0
        number = abs(number)
        integer = int(number)
        ctx = engine.exact_context(engine.digit_count(number))
        fraction = ctx.subtract(number, integer)
        digits = self._format_integer(integer, radix)
        if fraction:
            digits += '.' + self._format_fraction(fraction, radix)
        if negative and digits.strip('0.'):
            return '-' + digits
        return digits

    def to_decimal(self, value, radix):
        '''
        Parse a number written in ``radix`` into a decimal operand.
        '''
        radix = Radix(radix)
        if not self.is_valid(value, radix):
            raise InvalidNumber('Invalid {} number {!r}'.format(radix.value,
                                                               value))
        if radix is Radix.DECIMAL:
            return engine.canonical(value)
        negative = value.startswith('-')
        integer, _, fraction = value.lstrip('-').partition('.')
        number = engine.parse(int(integer or '0', radix.base))
        if fraction:
            digits = (len(str(integer)) * _BITS[radix] +
                      len(fraction) * _BITS[radix])
            ctx = engine.exact_context(digits)
            number = ctx.add(number,
                             self._parse_fraction(fraction, radix, ctx))
        if negative:
            number = -number
        return engine.render(number)

    def convert(self, value, from_radix, to_radix):
        '''
        Convert between any two radixes, through decimal.
        '''
        if Radix(from_radix) is Radix(to_radix):
            return value
        return self.from_decimal(self.to_decimal(value, from_radix),
                                 to_radix)

    def to_binary(self, decimal):
        return self.from_decimal(decimal, Radix.BINARY)

    def to_octal(self, decimal):
        return self.from_decimal(decimal, Radix.OCTAL)

    def to_hexadecimal(self, decimal):
        return self.from_decimal(decimal, Radix.HEXADECIMAL)

    def from_binary(self, value):
        return self.to_decimal(value, Radix.BINARY)

    def from_octal(self, value):
        return self.to_decimal(value, Radix.OCTAL)

    def from_hexadecimal(self, value):
        return self.to_decimal(value, Radix.HEXADECIMAL)

    def _format_integer(self, integer, radix):
        code = {
            Radix.BINARY: 'b',
            Radix.OCTAL: 'o',
            Radix.HEXADECIMAL: 'X',
        }[radix]
        return format(integer, code)

    def _format_fraction(self, fraction, radix):
        '''
        Multiply by the base, take the integer digit, keep the rest; repeat.
        '''
        digits = []
        remainder = fraction
        ctx = engine.exact_context(engine.digit_count(fraction) + 2)
        while remainder and len(digits) < self.max_fraction_digits:
            remainder = ctx.multiply(remainder, radix.base)
            digit = int(remainder)
            digits.append(type(self).HEX_DIGITS[digit])
            remainder = ctx.subtract(remainder, digit)
        return ''.join(digits)

    def _parse_fraction(self, fraction, radix, ctx):
        total = engine.parse(0)
        for position, char in enumerate(fraction.upper(), start=1):
            weight = ctx.power(radix.base, position)
            total = ctx.add(total, ctx.divide(int(char, radix.base), weight))
        return total
