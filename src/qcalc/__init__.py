'''
Arbitrary-precision keypad calculator.

Works like a pocket calculator: operators chain, pressing = again repeats
the last operation, % completes a pending division or multiplication as a
percentage, and a memory register sits beside the main operand. Operands
are exact decimal strings, never floats.

Also does fixed-width bitwise operations, binary, octal and hexadecimal
input and display (fractions included), and unit conversion.
'''

from .calculator import Calculator
from .cli import CLI
from .formatting import Display
from .keypad import Keypad
from .lexer import Lexer
from .mathops import CalculatorMath
from .memory import Memory
from .radix import Radix, RadixConverter
from .record import Operator, Record, RecordStore
from .units import UnitConverter
from .util import CalcError


__all__ = ('Calculator', 'CalculatorMath', 'CalcError', 'CLI', 'Display',
           'Keypad', 'Lexer', 'Memory', 'Operator', 'Radix', 'RadixConverter',
           'Record', 'RecordStore', 'UnitConverter')
