'''
Operators and the bounded history of completed calculations.
'''

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
import time

from .util import RecordNotFound


class Operator(Enum):
    '''
    Calculator operators, valued by their display symbols.
    '''
    NONE = ''
    ADD = '+'
    SUB = '-'
    MUL = '×'
    DIV = '÷'
    MOD = 'mod'
    POW = '^'
    ROOT = 'root'
    PERCENT = '%'
    BIT_AND = 'AND'
    BIT_OR = 'OR'
    BIT_XOR = 'XOR'
    BIT_NOT = 'NOT'
    BIT_NAND = 'NAND'
    BIT_NOR = 'NOR'
    BIT_XNOR = 'XNOR'
    BIT_SHIFT_LEFT = '<<'
    BIT_SHIFT_RIGHT = '>>'
    RECIPROCAL = '1/x'
    SQRT = '√'
    SQUARE = 'x²'
    SIN = 'sin'
    COS = 'cos'
    TAN = 'tan'
    FACTORIAL = '!'
    EXP10 = '10^x'
    INTEGER_PART = 'int'
    FRACTIONAL_PART = 'frac'

    @property
    def is_binary(self):
        return self in BINARY

    @property
    def is_bitwise(self):
        return self in BITWISE

    @property
    def is_unary(self):
        return self in UNARY


BITWISE = frozenset({
    Operator.BIT_AND,
    Operator.BIT_OR,
    Operator.BIT_XOR,
    Operator.BIT_NOT,
    Operator.BIT_NAND,
    Operator.BIT_NOR,
    Operator.BIT_XNOR,
    Operator.BIT_SHIFT_LEFT,
    Operator.BIT_SHIFT_RIGHT,
})

BINARY = frozenset({
    Operator.ADD,
    Operator.SUB,
    Operator.MUL,
    Operator.DIV,
    Operator.MOD,
    Operator.POW,
    Operator.ROOT,
}) | (BITWISE - {Operator.BIT_NOT})

UNARY = frozenset({
    Operator.RECIPROCAL,
    Operator.SQRT,
    Operator.SQUARE,
    Operator.SIN,
    Operator.COS,
    Operator.TAN,
    Operator.FACTORIAL,
    Operator.EXP10,
    Operator.INTEGER_PART,
    Operator.FRACTIONAL_PART,
    Operator.BIT_NOT,
})


def symbol(operator):
    '''
    Display symbol of an operator or of a (PERCENT, operator) pair.
    '''
    if isinstance(operator, tuple):
        return ''.join(reversed([op.value for op in operator]))
    return operator.value


@dataclass(frozen=True)
class Record:
    '''
    One completed calculation. ``argument_operand`` is None for unary ones.
    '''
    id: int
    previous_operand: str
    operator: object
    argument_operand: str
    result_operand: str
    timestamp: float = field(default_factory=time.time, compare=False)

    def __str__(self):
        if self.argument_operand is None:
            return '{}({}) = {}'.format(symbol(self.operator),
                                        self.previous_operand,
                                        self.result_operand)
        return '{} {} {} = {}'.format(self.previous_operand,
                                      symbol(self.operator),
                                      self.argument_operand,
                                      self.result_operand)


class RecordStore:
    '''
    Newest-first history of at most MAX_RECORDS records.

    Inserting past the limit evicts the oldest record. Each record may carry
    a memo; memos go away with their records.
    '''

    MAX_RECORDS = 100

    def __init__(self, max_records=None):
        if max_records is None:
            max_records = type(self).MAX_RECORDS
        self.max_records = max_records
        self._records = deque()
        self._memos = dict()

    def __len__(self):
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def _next_id(self):
        return max((record.id for record in self._records), default=0) + 1

    def add(self, previous_operand, operator, argument_operand,
            result_operand):
        '''
        Insert a new record at the front and return it.
        '''
        record = Record(self._next_id(),
                        previous_operand,
                        operator,
                        argument_operand,
                        result_operand)
        self._records.appendleft(record)
        while len(self._records) > self.max_records:
            evicted = self._records.pop()
            self._memos.pop(evicted.id, None)
        return record

    def find_index(self, id):
        for index, record in enumerate(self._records):
            if record.id == id:
                return index
        raise RecordNotFound('No record with id {!r}'.format(id))

    def get(self, id):
        return self._records[self.find_index(id)]

    def at(self, index):
        '''
        Record at ``index``, 0 being the newest.
        '''
        if not 0 <= index < len(self._records):
            raise RecordNotFound('No record at index {!r}'.format(index))
        return self._records[index]

    def delete(self, id):
        del self._records[self.find_index(id)]
        self._memos.pop(id, None)

    def clear(self):
        self._records.clear()
        self._memos.clear()

    def set_memo(self, id, memo):
        self.find_index(id)
        self._memos[id] = memo

    def get_memo(self, id):
        '''
        Memo of record ``id``, or None if it has none.
        '''
        self.find_index(id)
        return self._memos.get(id)

    def delete_memo(self, id):
        self.find_index(id)
        self._memos.pop(id, None)
