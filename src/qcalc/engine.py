'''
Decimal engine adapter.

Arithmetic runs on the standard library's ``decimal`` with a configurable
number of significant digits. What ``decimal`` lacks (trigonometry, gamma,
n-th roots, π) comes from ``mpmath`` and is rounded back into a ``Decimal``
at the same precision.
'''

from decimal import (Decimal, Context, InvalidOperation, ROUND_HALF_EVEN,
                     DivisionByZero, Overflow)

import mpmath

from .util import InvalidNumber, UnsupportedSetting


DEFAULT_PRECISION = 64
# Extra digits mpmath works with before rounding back down.
GUARD_DIGITS = 16


def make_context(precision=DEFAULT_PRECISION):
    '''
    Create a decimal context with ``precision`` significant digits.
    '''
    try:
        precision = int(precision)
    except (TypeError, ValueError):
        raise UnsupportedSetting('Bad precision {!r}'.format(precision))
    if precision < 1:
        raise UnsupportedSetting('Bad precision {!r}'.format(precision))
    return Context(prec=precision,
                   rounding=ROUND_HALF_EVEN,
                   traps=[InvalidOperation, DivisionByZero, Overflow])


def exact_context(digits):
    '''
    Context wide enough that operations on ``digits``-digit values are exact.
    '''
    return make_context(max(digits, 1) + 2)


def parse(value):
    '''
    Parse an operand string into a finite Decimal.
    '''
    if isinstance(value, Decimal):
        number = value
    else:
        try:
            number = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidNumber('Not a number: {!r}'.format(value)) from None
    if not number.is_finite():
        raise InvalidNumber('Not a finite number: {!r}'.format(value))
    return number


def render(number):
    '''
    Plain fixed-point string for a Decimal: no exponent, no trailing zeros.
    '''
    if number.is_zero():
        return '0'
    text = format(number, 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def canonical(value):
    '''
    Canonical form of an operand string.
    '''
    return render(parse(value))


def digit_count(number):
    '''
    Number of digits needed to write ``number`` exactly.
    '''
    sign, digits, exponent = number.as_tuple()
    return len(digits) + abs(exponent)


def to_mpf(value):
    return mpmath.mpf(render(parse(value)))


def from_mpf(value, precision=DEFAULT_PRECISION):
    '''
    Round an mpmath number to ``precision`` significant digits.

    Anything smaller in magnitude than 10**-precision is taken to be zero,
    so sin(180) comes out as 0 rather than as rounding noise.
    '''
    tolerance = mpmath.mpf(10) ** -precision
    value = mpmath.chop(value, tolerance)
    return Decimal(mpmath.nstr(value, precision, strip_zeros=True))


def workdps(precision=DEFAULT_PRECISION):
    '''
    mpmath working precision for a calculation meant for ``precision`` digits.
    '''
    return mpmath.workdps(precision + GUARD_DIGITS)
