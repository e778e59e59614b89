'''
Calculator math tests
'''

from qcalc.mathops import CalculatorMath
from qcalc.util import (DivisionByZero, InvalidNumber, InvalidRoot,
                        NegativeBitOperand, NegativeFactorial, NegativeSqrt,
                        UndefinedResult, UnknownConstant, UnsupportedSetting)

from pytest import raises, mark


@mark.parametrize('a, b', [('0.1', '0.2'),
                           ('123456789.987654321', '-0.000000001'),
                           ('-5', '5'),
                           ('1' + '0' * 40, '0.5')])
def test_add_then_sub(math, a, b):
    assert math.sub(math.add(a, b), b) == math.add(a, '0')


def test_exact_decimal(math):
    assert math.add('0.1', '0.2') == '0.3'
    assert math.mul('1.1', '1.1') == '1.21'


def test_division_precision(math):
    assert math.div('1', '3') == '0.' + '3' * 64
    assert CalculatorMath(precision=10).div('2', '3') == '0.6666666667'


def test_bad_precision():
    with raises(UnsupportedSetting):
        CalculatorMath(precision=0)


def test_bad_operand(math):
    with raises(InvalidNumber):
        math.add('1', 'one')
    with raises(InvalidNumber):
        math.add('1', 'Infinity')


def test_divide_by_zero(math):
    with raises(DivisionByZero):
        math.div('1', '0')
    with raises(DivisionByZero):
        math.mod('1', '0')
    with raises(DivisionByZero):
        math.reciprocal('0')


def test_mod_follows_divisor(math):
    assert math.mod('7', '3') == '1'
    assert math.mod('-7', '3') == '2'
    assert math.mod('7', '-3') == '-2'
    assert math.mod('5.5', '2') == '1.5'
    assert math.mod('6', '3') == '0'


def test_pow(math):
    assert math.pow('2', '10') == '1024'
    assert math.pow('2', '-1') == '0.5'
    assert math.pow('9', '0.5') == '3'


def test_pow_failures(math):
    with raises(UndefinedResult):
        math.pow('-8', '0.5')
    with raises(UndefinedResult):
        math.pow('10', '1000000')
    with raises(DivisionByZero):
        math.pow('0', '-1')


def test_root(math):
    assert math.root('27', '3') == '3'
    assert math.root('-8', '3') == '-2'
    assert math.root('16', '4') == '2'
    assert math.root('16', '0.5') == '256'
    assert math.root('0', '5') == '0'


def test_root_failures(math):
    with raises(InvalidRoot):
        math.root('-16', '2')
    with raises(InvalidRoot):
        math.root('-16', '2.5')
    with raises(InvalidRoot):
        math.root('16', '-2')
    with raises(DivisionByZero):
        math.root('16', '0')


def test_sqrt(math):
    assert math.sqrt('2').startswith('1.41421356237309504880168872')
    assert math.sqrt('0.25') == '0.5'
    with raises(NegativeSqrt):
        math.sqrt('-1')


def test_square(math):
    assert math.square('-1.5') == '2.25'


def test_factorial(math):
    assert math.factorial('0') == '1'
    assert math.factorial('5') == '120'
    assert math.factorial('25') == '15511210043330985984000000'
    # Γ(1.5) = √π / 2
    assert math.factorial('0.5').startswith('0.88622692545275801364908')
    with raises(NegativeFactorial):
        math.factorial('-1')


def test_exp10(math):
    assert math.exp10('2') == '100'
    assert math.exp10('-2') == '0.01'


def test_negate_and_abs(math):
    assert math.negate('0') == '0'
    assert math.negate('-2.5') == '2.5'
    assert math.abs('-2.5') == '2.5'


def test_parts(math):
    assert math.integer_part('2.7') == '2'
    assert math.integer_part('-2.5') == '-3'
    assert math.fractional_part('2.75') == '0.75'
    assert math.fractional_part('-2.25') == '0.75'


def test_trig_degrees(math):
    assert math.sin('30') == '0.5'
    assert math.cos('60') == '0.5'
    assert math.tan('45') == '1'
    assert math.sin('180') == '0'
    assert math.cos('90') == '0'
    assert math.sin('-90') == '-1'


def test_tan_undefined(math):
    with raises(UndefinedResult):
        math.tan('90')
    with raises(UndefinedResult):
        math.tan('-270')


def test_constants(math):
    assert math.get_constant('pi').startswith('3.14159265358979323846264')
    assert math.get_constant('pi2').startswith('1.57079632679489661923132')
    assert math.get_constant('e').startswith('2.71828182845904523536028')
    assert math.get_constant('ln2').startswith('0.69314718055994530941723')
    assert math.get_constant('ln10').startswith('2.30258509299404568401799')
    assert math.get_constant('phi').startswith('1.61803398874989484820458')
    with raises(UnknownConstant):
        math.get_constant('PI')


def test_constant_precision():
    assert CalculatorMath(precision=5).get_constant('pi') == '3.1416'


def test_bitwise(math):
    assert math.bitwise_and('12', '10', 8) == '8'
    assert math.bitwise_or('12', '10', 8) == '14'
    assert math.bitwise_xor('12', '10', 8) == '6'
    assert math.bitwise_nand('12', '10', 8) == '247'
    assert math.bitwise_nor('12', '10', 8) == '241'
    assert math.bitwise_xnor('12', '10', 8) == '249'


def test_bitwise_not(math):
    assert math.bitwise_not('5', 8) == '250'
    assert math.bitwise_not('0', 4) == '15'
    # Wider than the word: complemented, then wrapped
    assert math.bitwise_not('256', 8) == '255'


def test_bitwise_word_size_zero(math):
    assert math.bitwise_not('5', 0) == '2'
    assert math.bitwise_or('256', '1', 0) == '257'


def test_bitwise_floors_fractions(math):
    assert math.bitwise_and('12.9', '10.2', 8) == '8'


def test_bitwise_rejects_negatives(math):
    for operation in (math.bitwise_and,
                      math.bitwise_or,
                      math.bitwise_xor,
                      math.bitwise_shift_left,
                      math.bitwise_shift_right):
        with raises(NegativeBitOperand):
            operation('-1', '1', 8)
    with raises(NegativeBitOperand):
        math.bitwise_not('-1', 8)


def test_shifts(math):
    assert math.bitwise_shift_left('1', '3', 8) == '8'
    assert math.bitwise_shift_left('255', '1', 8) == '254'
    assert math.bitwise_shift_left('255', '1', 0) == '510'
    assert math.bitwise_shift_right('16', '2', 8) == '4'
    assert math.bitwise_shift_right('1', '1', 8) == '0'


def test_truncate_to_word(math):
    assert math.truncate_to_word('300', 8) == '44'
    assert math.truncate_to_word('300.7', 0) == '300'
    assert math.truncate_to_word('65535', 16) == '65535'
    with raises(UnsupportedSetting):
        math.truncate_to_word('1', 7)
