'''
Radix conversion tests
'''

from qcalc.radix import Radix, RadixConverter
from qcalc.util import InvalidNumber

from pytest import raises, mark


def test_binary_fraction(converter):
    assert converter.to_binary('10.75') == '1010.11'
    assert converter.from_binary('1010.11') == '10.75'


def test_hexadecimal_fraction(converter):
    assert converter.to_hexadecimal('10.5') == 'A.8'
    assert converter.from_hexadecimal('A.8') == '10.5'


def test_octal(converter):
    assert converter.to_octal('8') == '10'
    assert converter.to_octal('0.125') == '0.1'
    assert converter.from_octal('777') == '511'


def test_lowercase_hex(converter):
    assert converter.from_hexadecimal('ff') == '255'


def test_negative(converter):
    assert converter.to_binary('-5') == '-101'
    assert converter.from_binary('-101') == '-5'
    assert converter.to_hexadecimal('-0') == '0'


def test_non_terminating_fraction_truncated(converter):
    integer, fraction = converter.to_binary('0.1').split('.')
    assert integer == '0'
    assert len(fraction) == RadixConverter.MAX_FRACTION_DIGITS
    assert fraction == '000' + '1100' * 7 + '1'


def test_fraction_digit_limit():
    converter = RadixConverter(max_fraction_digits=4)
    assert converter.to_binary('0.1') == '0.0001'


def test_exact_fraction_parse(converter):
    assert converter.from_binary('0.0001') == '0.0625'
    assert converter.from_hexadecimal('0.01') == '0.00390625'


def test_decimal_passthrough(converter):
    assert converter.to_decimal('12.50', Radix.DECIMAL) == '12.5'
    assert converter.from_decimal('12.5', Radix.DECIMAL) == '12.5'


def test_convert(converter):
    assert converter.convert('FF', 'hex', 'bin') == '11111111'
    assert converter.convert('11111111', Radix.BINARY, 'oct') == '377'
    assert converter.convert('17', 'oct', 'oct') == '17'


@mark.parametrize('value, radix, valid', [('12.5', 'dec', True),
                                          ('-12.', 'dec', True),
                                          ('1.2.3', 'dec', False),
                                          ('1e5', 'dec', False),
                                          ('102', 'bin', False),
                                          ('101', 'bin', True),
                                          ('78', 'oct', False),
                                          ('fF.8', 'hex', True),
                                          ('G', 'hex', False),
                                          ('', 'dec', False)])
def test_is_valid(converter, value, radix, valid):
    assert converter.is_valid(value, radix) is valid


def test_is_valid_digit(converter):
    assert converter.is_valid_digit('7', 'oct')
    assert not converter.is_valid_digit('8', 'oct')
    assert not converter.is_valid_digit('12', 'dec')
    assert not converter.is_valid_digit('-', 'dec')


def test_filter_digits(converter):
    assert converter.filter_digits('-1a2.b.3', 'hex') == '-1A2.B3'
    assert converter.filter_digits('1,234.5', 'dec') == '1234.5'
    assert converter.filter_digits('10201', 'bin') == '1001'
    assert converter.filter_digits('', 'dec') == '0'


def test_invalid_input(converter):
    with raises(InvalidNumber):
        converter.from_binary('102')
    with raises(InvalidNumber):
        converter.to_binary('1e3')


def test_radix_bases():
    assert [radix.base for radix in Radix] == [2, 8, 10, 16]
