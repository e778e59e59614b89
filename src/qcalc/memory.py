from .util import MemoryEmpty


class Memory:
    '''
    The calculator's single memory register.

    Holds one operand string, or nothing at all.
    '''

    def __init__(self, value=None):
        self.value = value

    @property
    def is_empty(self):
        return self.value is None

    def save(self, value):
        self.value = value

    def recall(self):
        if self.is_empty:
            raise MemoryEmpty()
        return self.value

    def clear(self):
        self.value = None

    def apply(self, operation, operand):
        '''
        Return ``operation(value, operand)`` without storing it.

        Raises MemoryEmpty when there is nothing to operate on.
        '''
        return operation(self.recall(), operand)
