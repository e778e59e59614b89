'''
Keypad tests: lines of keys run through the lexer into a calculator
'''

from qcalc.keypad import Keypad
from qcalc.lexer import Lexer
from qcalc.radix import Radix
from qcalc.util import MemoryEmpty

from pytest import raises, mark


def run(calculator, line):
    keypad = Keypad(calculator)
    lexer = Lexer()
    for match in lexer.lex(line):
        if lexer.isfeedable(match):
            keypad.feed(lexer.matchedgroups(match))
    return calculator.current_operand


@mark.parametrize('line, expected', [
    ('5 + 3 =', '8'),
    ('5 + 3 = = =', '14'),
    ('2 + 3 × 4 =', '20'),
    ('200 ÷ 4 %', '5000'),
    ('200 * 10 %', '20'),
    ('9 sqrt', '3'),
    ('5 fact', '120'),
    ('2 ^ 10 =', '1024'),
    ('12 and 10 =', '8'),
    ('1 << 4 =', '16'),
    ('12 34', '34'),
    ('1_000 + 1 =', '1001'),
    ('5 neg', '-5'),
    ('123 del', '12'),
    ('5 + 3 clear', '0'),
])
def test_lines(calculator, line, expected):
    assert run(calculator, line) == expected


def test_hex_mode(calculator):
    assert run(calculator, 'hex FF') == '255'
    assert calculator.radix is Radix.HEXADECIMAL
    assert calculator.input_buffer == 'FF'


def test_memory(calculator):
    assert run(calculator, '12 MS clear MR') == '12'
    assert run(calculator, '3 M+ MR') == '15'
    with raises(MemoryEmpty):
        run(calculator, 'MC MR')


def test_constant(calculator):
    assert run(calculator, 'pi').startswith('3.14159')


def test_press(calculator):
    keypad = Keypad(calculator)
    calculator.paste('4')
    keypad.press('sq')
    assert calculator.current_operand == '16'
