from functools import wraps
from decimal import DecimalException


class CalcError(Exception):
    '''
    A value failure: invalid input or an undefined mathematical result.

    Never fatal. The calculator that raised it is left as it was before the
    failing operation.
    '''
    key = 'error.calc'
    message = 'Calculation error'

    def __init__(self, message=None):
        super().__init__(message or type(self).message)


class DivisionByZero(CalcError):
    key = 'error.math.divide_by_zero'
    message = 'Cannot divide by zero'


class InvalidRoot(CalcError):
    key = 'error.math.negative_root'
    message = 'Root is undefined for this radicand and index'


class NegativeSqrt(CalcError):
    key = 'error.math.negative_sqrt'
    message = 'Cannot take the square root of a negative number'


class NegativeFactorial(CalcError):
    key = 'error.math.negative_factorial'
    message = 'Factorial of a negative number is undefined'


class NegativeBitOperand(CalcError):
    key = 'error.math.negative_bit_operation'
    message = 'Bitwise operations need non-negative operands'


class MemoryEmpty(CalcError):
    key = 'error.memory.empty'
    message = 'Memory is empty'


class UnknownConstant(CalcError):
    key = 'error.calc.constant_not_found'
    message = 'No such constant'


class UnknownCategory(CalcError):
    key = 'unit.invalid_category'
    message = 'No such unit category'


class UnknownUnit(CalcError):
    key = 'unit.invalid_unit'
    message = 'No such unit'


class RecordNotFound(CalcError):
    key = 'error.calc.record_not_found'
    message = 'No such record'


class InvalidNumber(CalcError):
    key = 'error.invalid_number'
    message = 'Not a number'


class UndefinedResult(CalcError):
    key = 'error.math.undefined'
    message = 'Result is undefined'


class UnsupportedSetting(CalcError):
    key = 'error.invalid_setting'
    message = 'Unsupported setting'


def wrap_user_errors(fmt):
    '''
    Decorator that converts decimal library exceptions to CalcErrors.

    Passes through CalcErrors. Zero divisions become DivisionByZero, every
    other decimal signal becomes UndefinedResult with ``fmt`` formatted
    against the call's arguments.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except ZeroDivisionError as e:
                raise DivisionByZero() from e
            except (DecimalException, ArithmeticError) as e:
                raise UndefinedResult(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator
