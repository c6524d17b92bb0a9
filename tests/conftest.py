from pytest import fixture

from stackcalc.machine import Machine
from stackcalc.stack import Stack
from stackcalc.util import StackFull


class RefusingStack(Stack):
    '''
    Stack that is "full" for one particular value only.

    Lets a test fail a result push without filling every slot first.
    '''

    def __init__(self, refuse):
        super().__init__()
        self.refuse = refuse

    def push(self, value):
        if value == self.refuse:
            raise StackFull('stack full')
        super().push(value)


@fixture
def stack():
    return Stack()


@fixture
def machine():
    return Machine()


@fixture
def feed(machine):
    '''
    Feed every token of a line to the machine, minus the CLI's reporting.
    '''
    def feed(line):
        for token in machine.lexer.lex(line):
            machine.feed(token)
    return feed


@fixture
def refuse(machine):
    '''
    Swap in a stack that won't take the given value.
    '''
    def refuse(value):
        machine.stack = RefusingStack(value)
        return machine.stack
    return refuse
