'''
The calculator state machine.

States are implicit in the pending operator and the reset flag:

idle
    No operator pending. Digits edit the current operand; a binary operator
    captures it as the previous operand.
pending
    An operator is pending and the reset flag is set. The next digit starts
    a fresh operand; another operator or ``=`` calculates right away.
accumulating
    An operator is pending and digits are being typed. An operator or ``=``
    calculates ``previous <op> current``.

Every operation that can fail computes everything first and changes state
last, so a CalcError leaves the calculator, its records and its memory as
they were.
'''

from functools import partialmethod
import logging

import regex

from . import engine
from .mathops import CalculatorMath
from .memory import Memory
from .radix import Radix, RadixConverter
from .record import Operator, RecordStore, BINARY, UNARY
from .util import UnsupportedSetting


log = logging.getLogger(__name__)


class Calculator:
    '''
    Stateful calculator driven one key press at a time.

    Collaborators are injected; any left out is created fresh.
    '''

    DEFAULT_WORD_SIZE = CalculatorMath.DEFAULT_WORD_SIZE

    BINARY_OPERATIONS = {
        Operator.ADD: 'add',
        Operator.SUB: 'sub',
        Operator.MUL: 'mul',
        Operator.DIV: 'div',
        Operator.MOD: 'mod',
        Operator.POW: 'pow',
        Operator.ROOT: 'root',
        Operator.BIT_AND: 'bitwise_and',
        Operator.BIT_OR: 'bitwise_or',
        Operator.BIT_XOR: 'bitwise_xor',
        Operator.BIT_NAND: 'bitwise_nand',
        Operator.BIT_NOR: 'bitwise_nor',
        Operator.BIT_XNOR: 'bitwise_xnor',
        Operator.BIT_SHIFT_LEFT: 'bitwise_shift_left',
        Operator.BIT_SHIFT_RIGHT: 'bitwise_shift_right',
    }
    assert BINARY_OPERATIONS.keys() == BINARY

    UNARY_OPERATIONS = {
        Operator.RECIPROCAL: 'reciprocal',
        Operator.SQRT: 'sqrt',
        Operator.SQUARE: 'square',
        Operator.SIN: 'sin',
        Operator.COS: 'cos',
        Operator.TAN: 'tan',
        Operator.FACTORIAL: 'factorial',
        Operator.EXP10: 'exp10',
        Operator.INTEGER_PART: 'integer_part',
        Operator.FRACTIONAL_PART: 'fractional_part',
        Operator.BIT_NOT: 'bitwise_not',
    }
    assert UNARY_OPERATIONS.keys() == UNARY

    MEMORY_OPERATIONS = {
        Operator.ADD: 'add',
        Operator.SUB: 'sub',
        Operator.MUL: 'mul',
        Operator.DIV: 'div',
    }

    # A lone character, optionally negated, collapses to zero on delete.
    SINGLE_CHARACTER = regex.compile(r'-?.', regex.DOTALL)

    def __init__(self,
                 math=None,
                 records=None,
                 memory=None,
                 converter=None,
                 word_size=None,
                 radix=Radix.DECIMAL):
        self.converter = RadixConverter() if converter is None else converter
        self.math = (CalculatorMath(converter=self.converter)
                     if math is None else math)
        self.records = RecordStore() if records is None else records
        self.memory = Memory() if memory is None else memory
        self._radix = Radix.DECIMAL
        self._word_size = type(self).DEFAULT_WORD_SIZE
        self.clear()
        self.radix = radix
        if word_size is not None:
            self.word_size = word_size

    # Configuration

    @property
    def radix(self):
        return self._radix

    @radix.setter
    def radix(self, value):
        try:
            radix = Radix(value)
        except ValueError:
            raise UnsupportedSetting('Bad radix {!r}'.format(value)) from None
        self._radix = radix
        self._buffer = self.converter.from_decimal(self._current, radix)

    @property
    def word_size(self):
        return self._word_size

    @word_size.setter
    def word_size(self, value):
        if value not in CalculatorMath.WORD_SIZES:
            raise UnsupportedSetting('Bad word size {!r}'.format(value))
        self._word_size = value

    # Read-only views

    @property
    def current_operand(self):
        '''
        The current operand as an exact decimal string.
        '''
        return self._current

    @property
    def input_buffer(self):
        '''
        The current operand as typed, in the current radix.
        '''
        return self._buffer

    @property
    def state(self):
        if self.pending_operator is Operator.NONE:
            return 'idle'
        return 'pending' if self.should_reset else 'accumulating'

    def clear(self):
        '''
        Back to the initial idle state. Memory and records are kept.
        '''
        self.previous_operand = '0'
        self.repeat_operand = None
        self.last_operator = Operator.NONE
        self.pending_operator = Operator.NONE
        self.should_reset = False
        self._current = '0'
        self._buffer = '0'

    # Operand bookkeeping

    def _set_current(self, value):
        buffer = self.converter.from_decimal(value, self._radix)
        self._current = value
        self._buffer = buffer

    def _set_buffer(self, text):
        current = self.converter.to_decimal(text, self._radix)
        self._buffer = text
        self._current = current

    def _load_operand(self, value):
        '''
        Show a computed or recalled value as the operand of what is pending.
        '''
        self._set_current(value)
        self.should_reset = True
        if self.pending_operator is not Operator.NONE:
            self.repeat_operand = value

    # Input editing

    def add_digit(self, digit):
        '''
        Type one digit. Digits the current radix has no use for are ignored.
        '''
        if isinstance(digit, int):
            char = format(digit, 'X') if 0 <= digit < 16 else ''
        else:
            char = str(digit)[:1].upper()
        if not self.converter.is_valid_digit(char, self._radix):
            log.debug('Ignoring digit %r in %s mode', digit,
                      self._radix.value)
            return
        if self.should_reset or self._buffer == '0':
            buffer = char
        elif self._buffer == '-0':
            buffer = '-' + char
        else:
            buffer = self._buffer + char
        self._set_buffer(buffer)
        self.should_reset = False

    def add_dot(self):
        if self.should_reset:
            self._set_buffer('0.')
            self.should_reset = False
        elif '.' not in self._buffer:
            self._set_buffer(self._buffer + '.')

    def delete_last_character(self):
        if (type(self).SINGLE_CHARACTER.fullmatch(self._buffer) or
                self._buffer == '-0'):
            self._set_buffer('0')
        else:
            self._set_buffer(self._buffer[:-1])

    def change_sign(self):
        value = self.math.negate(self._current)
        if self.should_reset:
            self._load_operand(value)
        else:
            self._set_current(value)

    def paste(self, text):
        '''
        Replace the operand with whatever number can be salvaged from text.
        '''
        self._set_buffer(self.converter.filter_digits(text, self._radix))
        self.should_reset = False

    # Computation

    def _coerce(self, value):
        '''
        Bitwise operands are non-negative integers: take abs, then floor.
        '''
        coerced = self.math.integer_part(self.math.abs(value))
        if coerced != value:
            log.warning('Bitwise operand %s truncated to %s', value, coerced)
        return coerced

    def _compute(self, operator, left, right):
        name = type(self).BINARY_OPERATIONS[operator]
        if operator.is_bitwise:
            return getattr(self.math, name)(self._coerce(left),
                                            self._coerce(right),
                                            self._word_size)
        return getattr(self.math, name)(left, right)

    def _argument(self):
        '''
        Right-hand operand of a pre-calculation, None if there is none.
        '''
        if self.should_reset:
            return self.repeat_operand
        return self._current

    def _pre_calculate(self):
        '''
        Complete the pending operation, as if ``=`` had been pressed.

        Operands are coerced for the pending operator only, in _compute.
        '''
        operator = self.pending_operator
        argument = self._argument()
        if argument is None:
            log.debug('Nothing to calculate for %s; replacing it',
                      operator.name)
            return
        result = self._compute(operator, self.previous_operand, argument)
        self.records.add(self.previous_operand, operator, argument, result)
        self.repeat_operand = argument
        self.previous_operand = result
        self._set_current(result)

    def press(self, operator):
        '''
        Press a binary operator key.
        '''
        if operator not in type(self).BINARY_OPERATIONS:
            raise ValueError('Not a binary operator: {}'.format(operator))
        if self.pending_operator is Operator.NONE:
            current = self._current
            if operator.is_bitwise:
                current = self._coerce(current)
            self._set_current(current)
            self.previous_operand = current
            self.repeat_operand = None
            self.last_operator = Operator.NONE
        else:
            self._pre_calculate()
        self.pending_operator = operator
        self.should_reset = True

    add = partialmethod(press, Operator.ADD)
    sub = partialmethod(press, Operator.SUB)
    mul = partialmethod(press, Operator.MUL)
    div = partialmethod(press, Operator.DIV)
    mod = partialmethod(press, Operator.MOD)
    pow = partialmethod(press, Operator.POW)
    root = partialmethod(press, Operator.ROOT)
    bit_and = partialmethod(press, Operator.BIT_AND)
    bit_or = partialmethod(press, Operator.BIT_OR)
    bit_xor = partialmethod(press, Operator.BIT_XOR)
    bit_nand = partialmethod(press, Operator.BIT_NAND)
    bit_nor = partialmethod(press, Operator.BIT_NOR)
    bit_xnor = partialmethod(press, Operator.BIT_XNOR)
    shift_left = partialmethod(press, Operator.BIT_SHIFT_LEFT)
    shift_right = partialmethod(press, Operator.BIT_SHIFT_RIGHT)

    def equals(self):
        '''
        Press ``=``.

        With an operator pending, completes it and remembers it, so that
        pressing ``=`` again repeats it with the same right-hand operand.
        '''
        if self.pending_operator is not Operator.NONE:
            operator = self.pending_operator
            self._pre_calculate()
            self.last_operator = operator
            self.pending_operator = Operator.NONE
            self.should_reset = True
        elif (self.should_reset and
              self.last_operator is not Operator.NONE and
              self.repeat_operand is not None):
            result = self._compute(self.last_operator,
                                   self._current,
                                   self.repeat_operand)
            self.records.add(self._current, self.last_operator,
                             self.repeat_operand, result)
            self.previous_operand = result
            self._set_current(result)
        else:
            self.previous_operand = self._current

    def percent(self):
        '''
        ``a ÷ b %`` is what percent a is of b; ``a × b %`` is b percent of a.

        Does nothing unless a division or multiplication is pending.
        '''
        operator = self.pending_operator
        if operator not in (Operator.DIV, Operator.MUL):
            log.debug('Percent ignored with %s pending', operator.name)
            return
        argument = self._argument()
        if argument is None:
            return
        value = self._compute(operator, self.previous_operand, argument)
        if operator is Operator.DIV:
            result = self.math.mul(value, '100')
        else:
            result = self.math.div(value, '100')
        self.records.add(self.previous_operand, (Operator.PERCENT, operator),
                         argument, result)
        self.previous_operand = result
        self._set_current(result)
        self.pending_operator = Operator.NONE
        self.repeat_operand = None
        self.last_operator = Operator.NONE
        self.should_reset = True

    def apply(self, operator):
        '''
        Apply a unary function to the current operand.
        '''
        if operator not in type(self).UNARY_OPERATIONS:
            raise ValueError('Not a unary operator: {}'.format(operator))
        function = getattr(self.math, type(self).UNARY_OPERATIONS[operator])
        value = self._current
        if operator.is_bitwise:
            value = self._coerce(value)
            result = function(value, self._word_size)
        else:
            result = function(value)
        self.records.add(value, operator, None, result)
        self._load_operand(result)

    reciprocal = partialmethod(apply, Operator.RECIPROCAL)
    sqrt = partialmethod(apply, Operator.SQRT)
    square = partialmethod(apply, Operator.SQUARE)
    sin = partialmethod(apply, Operator.SIN)
    cos = partialmethod(apply, Operator.COS)
    tan = partialmethod(apply, Operator.TAN)
    factorial = partialmethod(apply, Operator.FACTORIAL)
    exp10 = partialmethod(apply, Operator.EXP10)
    integer_part = partialmethod(apply, Operator.INTEGER_PART)
    fractional_part = partialmethod(apply, Operator.FRACTIONAL_PART)
    bit_not = partialmethod(apply, Operator.BIT_NOT)

    def apply_with(self, operator, operand):
        '''
        Press ``operator`` and complete it with ``operand`` in one step.

        Any pending operation is completed first, so ``5 + 3`` followed by
        ``apply_with(MUL, 10)`` gives 80.
        '''
        if operator not in type(self).BINARY_OPERATIONS:
            raise ValueError('Not a binary operator: {}'.format(operator))
        operand = engine.canonical(operand)
        pending = None
        if self.pending_operator is Operator.NONE:
            left = self._current
        else:
            argument = self._argument()
            if argument is None:
                left = self.previous_operand
            else:
                left = self._compute(self.pending_operator,
                                     self.previous_operand,
                                     argument)
                pending = (self.previous_operand, self.pending_operator,
                           argument, left)
        result = self._compute(operator, left, operand)
        if pending is not None:
            self.records.add(*pending)
        self.records.add(left, operator, operand, result)
        self.previous_operand = result
        self._set_current(result)
        self.repeat_operand = operand
        self.last_operator = operator
        self.pending_operator = Operator.NONE
        self.should_reset = True

    def set_constant(self, name):
        self._load_operand(self.math.get_constant(name))

    # Memory

    def memory_save(self):
        self.memory.save(self._current)

    def memory_recall(self):
        self._load_operand(self.memory.recall())

    def memory_clear(self):
        '''
        Empty the memory. Clearing an empty memory is not an error.
        '''
        self.memory.clear()

    def _memory_apply(self, operator):
        operand = self._current
        function = getattr(self.math, type(self).MEMORY_OPERATIONS[operator])
        previous = self.memory.recall()
        result = self.memory.apply(function, operand)
        self.records.add(previous, operator, operand, result)
        self.memory.save(result)
        self.should_reset = True

    memory_add = partialmethod(_memory_apply, Operator.ADD)
    memory_sub = partialmethod(_memory_apply, Operator.SUB)
    memory_mul = partialmethod(_memory_apply, Operator.MUL)
    memory_div = partialmethod(_memory_apply, Operator.DIV)
