from collections import deque

from .util import StackEmpty, StackFull


class Stack:
    '''
    Fixed-capacity stack of floats.

    Knows nothing about tokens or operators, and never recovers from its own
    errors; a failed push, pop or peek leaves it as it was.
    '''

    CAPACITY = 1024
    DISPLAY_DEPTH = 8

    def __init__(self, capacity=None):
        self.capacity = type(self).CAPACITY if capacity is None else capacity
        self.items = deque()

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        '''
        Iterate bottom to top.
        '''
        return iter(self.items)

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, list(self.items))

    def push(self, value):
        if len(self.items) >= self.capacity:
            raise StackFull('stack full')
        self.items.append(value)

    def pop(self):
        if not self.items:
            raise StackEmpty('stack empty')
        return self.items.pop()

    def peek(self):
        if not self.items:
            raise StackEmpty('stack empty')
        return self.items[-1]

    def clear(self):
        self.items.clear()

    def render(self, display_depth=DISPLAY_DEPTH):
        '''
        Numbered view of the top display_depth slots, highest number first.

        Slot 1 is the top of the stack. Slots deeper than the stack show 0.
        '''
        lines = ['Stack:']
        for position in range(display_depth, 0, -1):
            value = 0.0
            if position <= len(self.items):
                value = self.items[-position]
            lines.append('{}. {:.6f}'.format(position, value))
        return '\n'.join(lines)
