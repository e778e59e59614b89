'''
Display-side number formatting.

Everything here works on digit strings in any radix up to 16, so it applies
equally to decimal operands and to their binary, octal or hexadecimal
renderings.
'''

import regex

from .radix import Radix, RadixConverter


GROUP_PATTERN = r'\B(?=(?:[0-9a-fA-F]{{{size}}})+(?![0-9a-fA-F]))'
DIGITS = '0123456789ABCDEF'


def _split(value):
    '''
    Split a number into sign, integer digits and fractional digits.
    '''
    sign = '-' if value.startswith('-') else ''
    integer, _, fraction = value.lstrip('-').partition('.')
    return sign, integer, fraction


def _join(sign, integer, fraction=''):
    integer = integer or '0'
    text = integer + ('.' + fraction if fraction else '')
    if not text.strip('0.'):
        sign = ''
    return sign + text


def _trim(value):
    if '.' not in value:
        return value
    return value.rstrip('0').rstrip('.')


def number_grouping(value, group_size, separator=','):
    '''
    Insert ``separator`` every ``group_size`` digits of the integer part.

    Hex digits count as digits, so the grouping is the same in every radix.
    A non-positive ``group_size`` leaves ``value`` untouched.

    >>> number_grouping('1234567.891', 3)
    '1,234,567.891'
    >>> number_grouping('FFFFFFFF', 4, ' ')
    'FFFF FFFF'
    '''
    if group_size <= 0:
        return value
    integer, dot, fraction = value.partition('.')
    pattern = regex.compile(GROUP_PATTERN.format(size=group_size))
    return pattern.sub(separator, integer) + dot + fraction


def increment_integer(integer, radix=10):
    '''
    Add one to a string of digits in ``radix``, carrying right to left.
    '''
    digits = list(integer.upper() or '0')
    carry = 1
    for i in reversed(range(len(digits))):
        value = int(digits[i], radix) + carry
        carry, value = divmod(value, radix)
        digits[i] = DIGITS[value]
        if not carry:
            break
    if carry:
        digits.insert(0, DIGITS[carry])
    return ''.join(digits)


def _increment_fraction(fraction, radix):
    '''
    Add one unit in the last place of ``fraction``; return (digits, carry).
    '''
    if not fraction:
        return fraction, 1
    width = len(fraction)
    incremented = increment_integer(fraction, radix)
    if len(incremented) > width:
        return incremented[1:], 1
    return incremented, 0


def format_decimal_places(value, places, radix=10):
    '''
    Round ``value`` to exactly ``places`` fractional digits.

    Rounds half up: a cut-off digit of at least ``radix // 2`` carries one
    into the kept digits, and through them into the integer part. The
    result is padded with zeros to ``places`` digits. A negative ``places``
    returns ``value`` as is; zero rounds to an integer.

    >>> format_decimal_places('1.995', 2, 10)
    '2.00'
    >>> format_decimal_places('F.F8', 1, 16)
    '10.0'
    '''
    if not value or places < 0:
        return value
    sign, integer, fraction = _split(value)
    kept = fraction[:places]
    cut = fraction[places:places + 1]
    if cut and int(cut, radix) >= radix // 2:
        if places:
            kept, carry = _increment_fraction(kept, radix)
        else:
            carry = 1
        if carry:
            integer = increment_integer(integer, radix)
    return _join(sign, integer, kept.ljust(places, '0'))


def round_up(value, places, radix=10):
    '''
    Round away from zero at ``places`` fractional digits, like ROUNDUP.
    '''
    if not value or places < 0:
        return value
    sign, integer, fraction = _split(value)
    kept = fraction[:places]
    if fraction[places:].strip('0'):
        if places:
            kept, carry = _increment_fraction(kept.ljust(places, '0'), radix)
        else:
            carry = 1
        if carry:
            integer = increment_integer(integer, radix)
    return _trim(_join(sign, integer, kept))


def round_down(value, places, radix=10):
    '''
    Truncate toward zero at ``places`` fractional digits, like ROUNDDOWN.
    '''
    if not value or places < 0:
        return value
    sign, integer, fraction = _split(value)
    return _trim(_join(sign, integer, fraction[:places]))


class Display:
    '''
    Renders decimal operands the way a calculator screen shows them.
    '''

    def __init__(self,
                 radix=Radix.DECIMAL,
                 decimal_places=-1,
                 grouping_size=0,
                 converter=None,
                 separator=','):
        self.radix = Radix(radix)
        self.decimal_places = decimal_places
        self.grouping_size = grouping_size
        self.separator = separator
        self.converter = RadixConverter() if converter is None else converter

    def __call__(self, operand):
        text = self.converter.from_decimal(operand, self.radix)
        text = format_decimal_places(text, self.decimal_places,
                                     self.radix.base)
        return number_grouping(text, self.grouping_size, self.separator)

    def buffer(self, text):
        '''
        Render an input buffer, already in the display radix, as typed.
        '''
        return number_grouping(text, self.grouping_size, self.separator)
