from pytest import Item, fixture

from qcalc.calculator import Calculator
from qcalc.mathops import CalculatorMath
from qcalc.radix import RadixConverter


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases.

    Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!)
    print('actual', item.name + ':' + str(lineno),
          # Get rid of full-diff, -vv for full diff, etc.
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def calculator():
    return Calculator()


@fixture
def math():
    return CalculatorMath()


@fixture
def converter():
    return RadixConverter()


@fixture
def keys(calculator):
    '''
    Press keys in order: digit strings are typed, anything else is called.
    '''
    def press(*presses):
        for key in presses:
            if isinstance(key, str):
                for char in key:
                    if char == '.':
                        calculator.add_dot()
                    else:
                        calculator.add_digit(char)
            else:
                key(calculator)
        return calculator
    return press
