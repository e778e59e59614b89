'''
Keypad: what each key on a line of input does to a Calculator.
'''

from operator import methodcaller

from .radix import Radix
from .record import Operator


def _radix(radix):
    def switch(calculator):
        calculator.radix = radix
    return switch


class Keypad:
    '''
    Feeds lexemes to a Calculator, one key press each.

    Numbers are entered whole: a number lexeme replaces the operand being
    typed, as if it were pasted.
    '''

    OPERATORS = {
        '+': methodcaller('press', Operator.ADD),
        '-': methodcaller('press', Operator.SUB),
        '*': methodcaller('press', Operator.MUL),
        '×': methodcaller('press', Operator.MUL),
        '/': methodcaller('press', Operator.DIV),
        '÷': methodcaller('press', Operator.DIV),
        '^': methodcaller('press', Operator.POW),
        '<<': methodcaller('press', Operator.BIT_SHIFT_LEFT),
        '>>': methodcaller('press', Operator.BIT_SHIFT_RIGHT),
        '%': methodcaller('percent'),
        '=': methodcaller('equals'),
        '±': methodcaller('change_sign'),
    }

    WORDS = {
        # Binary
        'mod': methodcaller('press', Operator.MOD),
        'root': methodcaller('press', Operator.ROOT),
        'and': methodcaller('press', Operator.BIT_AND),
        'or': methodcaller('press', Operator.BIT_OR),
        'xor': methodcaller('press', Operator.BIT_XOR),
        'nand': methodcaller('press', Operator.BIT_NAND),
        'nor': methodcaller('press', Operator.BIT_NOR),
        'xnor': methodcaller('press', Operator.BIT_XNOR),
        # Unary
        'not': methodcaller('apply', Operator.BIT_NOT),
        'rec': methodcaller('apply', Operator.RECIPROCAL),
        'sq': methodcaller('apply', Operator.SQUARE),
        'sqrt': methodcaller('apply', Operator.SQRT),
        'sin': methodcaller('apply', Operator.SIN),
        'cos': methodcaller('apply', Operator.COS),
        'tan': methodcaller('apply', Operator.TAN),
        'fact': methodcaller('apply', Operator.FACTORIAL),
        'exp10': methodcaller('apply', Operator.EXP10),
        'int': methodcaller('apply', Operator.INTEGER_PART),
        'frac': methodcaller('apply', Operator.FRACTIONAL_PART),
        # Editing
        'neg': methodcaller('change_sign'),
        'del': methodcaller('delete_last_character'),
        'clear': methodcaller('clear'),
        # Constants
        'pi': methodcaller('set_constant', 'pi'),
        'pi2': methodcaller('set_constant', 'pi2'),
        'e': methodcaller('set_constant', 'e'),
        'phi': methodcaller('set_constant', 'phi'),
        'ln2': methodcaller('set_constant', 'ln2'),
        'ln10': methodcaller('set_constant', 'ln10'),
        # Modes
        'bin': _radix(Radix.BINARY),
        'oct': _radix(Radix.OCTAL),
        'dec': _radix(Radix.DECIMAL),
        'hex': _radix(Radix.HEXADECIMAL),
    }

    MEMORY = {
        'MS': methodcaller('memory_save'),
        'MR': methodcaller('memory_recall'),
        'MC': methodcaller('memory_clear'),
        'M+': methodcaller('memory_add'),
        'M-': methodcaller('memory_sub'),
        'M*': methodcaller('memory_mul'),
        'M/': methodcaller('memory_div'),
    }

    KEYS = {**OPERATORS, **WORDS, **MEMORY}

    def __init__(self, calculator):
        self.calculator = calculator

    def feed(self, groups):
        '''
        Run one lexeme on the calculator.

        :param groups: Matched groups of the lexeme, as from
                       Lexer.matchedgroups.
        '''
        if 'number' in groups:
            self.calculator.paste(groups['number'].replace('_', ''))
        else:
            for kind in ('operator', 'word', 'memory'):
                if kind in groups:
                    self.press(groups[kind])

    def press(self, key):
        type(self).KEYS[key](self.calculator)
