'''
Stateless calculator math over operand strings.

Every operation takes decimal operand strings and returns one, computed in
the instance's decimal context. Nothing here remembers anything between
calls.
'''

from decimal import Decimal, ROUND_FLOOR
import math

import mpmath

from . import engine
from .radix import RadixConverter
from .util import (wrap_user_errors, DivisionByZero, InvalidRoot,
                   NegativeSqrt, NegativeFactorial, NegativeBitOperand,
                   UnknownConstant, UndefinedResult, UnsupportedSetting)


ZERO = Decimal(0)
ONE = Decimal(1)


class CalculatorMath:
    '''
    Arithmetic, transcendental and bitwise operations on decimal strings.

    :param precision: Significant digits kept by every result.
    :param converter: RadixConverter used by the bitwise operations.
    '''

    DEFAULT_PRECISION = engine.DEFAULT_PRECISION
    DEFAULT_WORD_SIZE = 8
    WORD_SIZES = (0, 4, 8, 16, 32, 64)
    # Integer factorials up to here are computed exactly, then rounded.
    EXACT_FACTORIAL_LIMIT = 10000

    CONSTANTS = {
        'pi': lambda: +mpmath.pi,
        'pi2': lambda: mpmath.pi / 2,
        'e': lambda: +mpmath.e,
        'ln2': lambda: +mpmath.ln2,
        'ln10': lambda: +mpmath.ln10,
        'phi': lambda: +mpmath.phi,
    }

    def __init__(self, precision=None, converter=None):
        if precision is None:
            precision = type(self).DEFAULT_PRECISION
        self.context = engine.make_context(precision)
        self.precision = self.context.prec
        self.converter = RadixConverter() if converter is None else converter

    def _out(self, number):
        if not number.is_finite():
            raise UndefinedResult()
        return engine.render(self.context.plus(number))

    def _from_mpf(self, value):
        return self._out(engine.from_mpf(value, self.precision))

    # Arithmetic

    @wrap_user_errors('Cannot add {1} and {2}')
    def add(self, a, b):
        return self._out(self.context.add(engine.parse(a), engine.parse(b)))

    @wrap_user_errors('Cannot subtract {2} from {1}')
    def sub(self, a, b):
        return self._out(self.context.subtract(engine.parse(a),
                                               engine.parse(b)))

    @wrap_user_errors('Cannot multiply {1} by {2}')
    def mul(self, a, b):
        return self._out(self.context.multiply(engine.parse(a),
                                               engine.parse(b)))

    @wrap_user_errors('Cannot divide {1} by {2}')
    def div(self, a, b):
        divisor = engine.parse(b)
        if divisor.is_zero():
            raise DivisionByZero()
        return self._out(self.context.divide(engine.parse(a), divisor))

    @wrap_user_errors('Cannot compute {1} mod {2}')
    def mod(self, a, b):
        '''
        Floored modulo: the result takes the sign of the divisor.
        '''
        divisor = engine.parse(b)
        if divisor.is_zero():
            raise DivisionByZero()
        remainder = self.context.remainder(engine.parse(a), divisor)
        if not remainder.is_zero() and (remainder < 0) != (divisor < 0):
            remainder = self.context.add(remainder, divisor)
        return self._out(remainder)

    @wrap_user_errors('Cannot raise {1} to the power {2}')
    def pow(self, a, b):
        base = engine.parse(a)
        exponent = engine.parse(b)
        if base.is_zero() and exponent < 0:
            raise DivisionByZero()
        return self._out(self.context.power(base, exponent))

    @wrap_user_errors('Cannot take root {2} of {1}')
    def root(self, a, n):
        '''
        The ``n``-th root of ``a``.

        Odd integer roots of negative numbers are negative. Even or
        fractional roots of negative numbers, and negative indices, are
        InvalidRoot; a zero index is a division by zero.
        '''
        radicand = engine.parse(a)
        index = engine.parse(n)
        if index.is_zero():
            raise DivisionByZero()
        if index < 0:
            raise InvalidRoot()
        integral = index == index.to_integral_value()
        if radicand < 0 and (not integral or int(index) % 2 == 0):
            raise InvalidRoot()
        if radicand.is_zero():
            return '0'
        if not integral:
            return self._out(self.context.power(
                radicand, self.context.divide(ONE, index)))
        with engine.workdps(self.precision):
            result = engine.from_mpf(
                mpmath.root(engine.to_mpf(abs(radicand)), int(index)),
                self.precision)
        if radicand < 0:
            result = -result
        return self._out(result)

    @wrap_user_errors('Cannot take the square root of {1}')
    def sqrt(self, a):
        number = engine.parse(a)
        if number < 0:
            raise NegativeSqrt()
        return self._out(self.context.sqrt(number))

    def square(self, a):
        return self.mul(a, a)

    def reciprocal(self, a):
        return self.div('1', a)

    def negate(self, a):
        return self._out(self.context.minus(engine.parse(a)))

    def abs(self, a):
        return self._out(self.context.abs(engine.parse(a)))

    def integer_part(self, a):
        '''
        Floor of ``a``.
        '''
        number = engine.parse(a)
        return self._out(number.to_integral_value(rounding=ROUND_FLOOR))

    def fractional_part(self, a):
        '''
        ``a`` mod 1, so never negative.
        '''
        return self.mod(a, '1')

    @wrap_user_errors('Cannot compute {1}!')
    def factorial(self, a):
        '''
        ``a``! for non-negative integers, Γ(a + 1) for everything else.
        '''
        number = engine.parse(a)
        if number < 0:
            raise NegativeFactorial()
        if (number == number.to_integral_value() and
                number <= type(self).EXACT_FACTORIAL_LIMIT):
            return self._out(Decimal(math.factorial(int(number))))
        with engine.workdps(self.precision):
            return self._from_mpf(mpmath.gamma(engine.to_mpf(number) + 1))

    @wrap_user_errors('Cannot compute 10 to the power {1}')
    def exp10(self, a):
        return self._out(self.context.power(Decimal(10), engine.parse(a)))

    # Trigonometry, in degrees

    def _radians(self, a):
        return engine.to_mpf(a) * mpmath.pi / 180

    @wrap_user_errors('Cannot compute sin {1}')
    def sin(self, a):
        with engine.workdps(self.precision):
            return self._from_mpf(mpmath.sin(self._radians(a)))

    @wrap_user_errors('Cannot compute cos {1}')
    def cos(self, a):
        with engine.workdps(self.precision):
            return self._from_mpf(mpmath.cos(self._radians(a)))

    @wrap_user_errors('Cannot compute tan {1}')
    def tan(self, a):
        with engine.workdps(self.precision):
            angle = self._radians(a)
            cosine = engine.from_mpf(mpmath.cos(angle), self.precision)
            if cosine.is_zero():
                raise UndefinedResult('tan {} is undefined'.format(a))
            return self._from_mpf(mpmath.tan(angle))

    # Constants

    def get_constant(self, name):
        if name not in type(self).CONSTANTS:
            raise UnknownConstant('No such constant {!r}'.format(name))
        with engine.workdps(self.precision):
            return self._from_mpf(type(self).CONSTANTS[name]())

    # Bitwise

    def _check_word_size(self, word_size):
        if word_size not in type(self).WORD_SIZES:
            raise UnsupportedSetting('Bad word size {!r}'.format(word_size))

    def _bits(self, *values):
        '''
        Floor each operand to an integer; negatives are rejected.
        '''
        numbers = []
        for value in values:
            number = engine.parse(value)
            if number < 0:
                raise NegativeBitOperand()
            numbers.append(int(number.to_integral_value(rounding=ROUND_FLOOR)))
        return numbers

    def truncate_to_word(self, value, word_size=DEFAULT_WORD_SIZE):
        '''
        Floor ``value`` and keep its low ``word_size`` bits.

        A word size of 0 only floors.
        '''
        self._check_word_size(word_size)
        number = engine.parse(value).to_integral_value(rounding=ROUND_FLOOR)
        if word_size:
            number = Decimal(int(number) % (1 << word_size))
        return engine.render(number)

    def _bitwise(self, a, b, logic, word_size):
        '''
        Combine two operands bit by bit on their binary strings.
        '''
        self._check_word_size(word_size)
        left, right = self._bits(a, b)
        left = self.converter.to_binary(str(left))
        right = self.converter.to_binary(str(right))
        width = max(len(left), len(right))
        digits = ''.join(
            '1' if logic(x == '1', y == '1') else '0'
            for x, y in zip(left.zfill(width), right.zfill(width)))
        return self.truncate_to_word(self.converter.from_binary(digits),
                                     word_size)

    def bitwise_and(self, a, b, word_size=DEFAULT_WORD_SIZE):
        return self._bitwise(a, b, lambda x, y: x and y, word_size)

    def bitwise_or(self, a, b, word_size=DEFAULT_WORD_SIZE):
        return self._bitwise(a, b, lambda x, y: x or y, word_size)

    def bitwise_xor(self, a, b, word_size=DEFAULT_WORD_SIZE):
        return self._bitwise(a, b, lambda x, y: x != y, word_size)

    def bitwise_not(self, a, word_size=DEFAULT_WORD_SIZE):
        '''
        Complement of ``a`` padded to at least ``word_size`` bits.
        '''
        self._check_word_size(word_size)
        number, = self._bits(a)
        digits = self.converter.to_binary(str(number))
        digits = digits.zfill(max(len(digits), word_size))
        inverted = digits.translate(str.maketrans('01', '10'))
        return self.truncate_to_word(self.converter.from_binary(inverted),
                                     word_size)

    def bitwise_nand(self, a, b, word_size=DEFAULT_WORD_SIZE):
        return self.bitwise_not(self.bitwise_and(a, b, word_size), word_size)

    def bitwise_nor(self, a, b, word_size=DEFAULT_WORD_SIZE):
        return self.bitwise_not(self.bitwise_or(a, b, word_size), word_size)

    def bitwise_xnor(self, a, b, word_size=DEFAULT_WORD_SIZE):
        return self.bitwise_not(self.bitwise_xor(a, b, word_size), word_size)

    def bitwise_shift_left(self, a, amount, word_size=DEFAULT_WORD_SIZE):
        self._check_word_size(word_size)
        number, shift = self._bits(a, amount)
        return self.truncate_to_word(str(number << shift), word_size)

    def bitwise_shift_right(self, a, amount, word_size=DEFAULT_WORD_SIZE):
        self._check_word_size(word_size)
        number, shift = self._bits(a, amount)
        return self.truncate_to_word(str(number >> shift), word_size)
