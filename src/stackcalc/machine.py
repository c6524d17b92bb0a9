from contextlib import contextmanager
from functools import wraps
import operator
import math

from .lexer import Lexer
from .stack import Stack
from .util import (RPNError, StackEmpty, StackFull, InsufficientOperands,
                   DivisionByZero, DomainError, InvalidOperator, Quit,
                   format_number)


HELP = '''\
RPN calculator (Reverse Polish Notation)
Usage: tokens separated by spaces. E.g.: 3 4 +
Operators: +  -  *  /
Functions: sqrt  sin  cos  tan  pow
  - sin/cos/tan take DEGREES
Commands:
  p  -> show top
  s  -> show stack
  c  -> clear stack
  q  -> quit
  h  -> help'''


def _degrees(f):
    '''
    Make a trigonometric function take degrees.

    Infinite angles give NaN rather than raising.
    '''
    @wraps(f)
    def wrapped(angle):
        try:
            return f(angle * math.pi / 180.0)
        except ValueError:
            return math.nan
    return wrapped


def _pow(base, exponent):
    '''
    math.pow, with IEEE results where it would raise.
    '''
    try:
        return math.pow(base, exponent)
    except OverflowError:
        # Negative base to an odd integer power keeps its sign
        if base < 0 and exponent % 2 == 1:
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            # Pole: zero to a negative power
            if exponent % 2 == 1:
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


class Machine:
    '''
    Arithmetic stack machine (RPN calculator).

    Takes tokens one at a time and runs them against its stack. Errors are
    raised as RPNErrors after the stack has been put back the way it was;
    reporting them is up to the caller.
    '''

    DEFAULT_PRECISION = None

    # Stack and session commands, by token.
    COMMANDS = {
        'q': 'quit',
        'h': 'printhelp',
        'c': 'clrstack',
        'p': 'printtop',
        's': 'printstack',
    }

    # Functions of the top of the stack. Trigonometry in degrees.
    UNARY = {
        'sqrt': math.sqrt,
        'sin': _degrees(math.sin),
        'cos': _degrees(math.cos),
        'tan': _degrees(math.tan),
    }

    POWER = 'pow'

    # Arithmetic operators, single characters only.
    OPERATORS = {
        '+': operator.__add__,
        '-': operator.__sub__,
        '*': operator.__mul__,
        '/': operator.__truediv__,
    }

    ARITY = {
        'command': 0,
        'unary': 1,
        'power': 2,
        'operator': 2,
        'number': 0,
        'invalid': None,
    }

    def __init__(self, verbose=None, precision=None, capacity=None):
        '''
        Create empty stack machine.

        :param verbose: Show stack traces on bad user commands.
        :param precision: Decimals to round printed results to, if any.
        :param capacity: Stack size, if not the default.
        '''
        self.stack = Stack(capacity)
        self.lexer = Lexer()
        self.verbose = verbose
        if precision is None:
            precision = type(self).DEFAULT_PRECISION
        self.precision = precision

    def classify(self, token):
        '''
        Name the kind of token, in dispatch order. Runs nothing.
        '''
        cls = type(self)
        if token in cls.COMMANDS:
            return 'command'
        elif token in cls.UNARY:
            return 'unary'
        elif token == cls.POWER:
            return 'power'
        elif len(token) == 1 and token in cls.OPERATORS:
            return 'operator'
        elif self.lexer.isnumber(token):
            return 'number'
        return 'invalid'

    def feed(self, token):
        '''
        Run one token: a command, function, operator, or number to stack.
        '''
        kind = self.classify(token)
        if kind == 'command':
            getattr(self, type(self).COMMANDS[token])()
        elif kind == 'unary':
            self.unary(token)
        elif kind == 'power':
            self.power()
        elif kind == 'operator':
            self.operator(token)
        else:
            self.pshnumber(token)

    def print(self, *args, **kwargs):
        '''
        Print numbers, rounded to the machine's precision.
        '''
        return print(*[format_number(arg, self.precision)
                       if isinstance(arg, float) else arg
                       for arg
                       in args],
                     **kwargs)

    @contextmanager
    def _operands(self, name, n):
        '''
        Pop n operands, bottom-most first, for the duration of the block.

        If the block fails, push them back as they were.
        '''
        operands = self._popstack(name, n)
        try:
            yield operands
        except RPNError:
            self._pshstack(*operands)
            raise

    def _popstack(self, name, n=1):
        '''
        Pop n values, returned in the order they were pushed.
        '''
        if len(self.stack) < n:
            raise InsufficientOperands(
                "Error: not enough operands for '{}'".format(name))
        return list(reversed([self.stack.pop() for _ in range(n)]))

    def _pshstack(self, *values):
        '''
        Push all values onto stack, leftmost at the bottom.
        '''
        for value in values:
            self.stack.push(value)

    def _pshresult(self, name, result):
        try:
            self.stack.push(result)
        except StackFull as e:
            raise StackFull("Error: stack full (could not store the result "
                            "of '{}')".format(name)) from e
        self.print('=', result)

    def pshnumber(self, token):
        '''
        Parse token as a number and push it.
        '''
        value = self.lexer.number(token)
        try:
            self.stack.push(value)
        except StackFull as e:
            raise StackFull("Error: stack full (could not push {})"
                            .format(format_number(value))) from e

    def operator(self, symbol):
        '''
        Apply binary arithmetic operator to the two values on top of stack.
        '''
        with self._operands(symbol, 2) as (a, b):
            f = type(self).OPERATORS.get(symbol)
            if f is None:
                raise InvalidOperator(
                    "Error: invalid operator '{}'".format(symbol))
            if symbol == '/' and b == 0.0:
                raise DivisionByZero(
                    "Error: division by zero in '{}'".format(symbol))
            self._pshresult(symbol, f(a, b))

    def unary(self, name):
        '''
        Apply named function to the value on top of stack.
        '''
        with self._operands(name, 1) as (a,):
            f = type(self).UNARY.get(name)
            if f is None:
                raise InvalidOperator(
                    "Error: unknown function '{}'".format(name))
            if name == 'sqrt' and a < 0:
                raise DomainError(
                    "Error: square root of negative number in '{}'"
                    .format(name))
            self._pshresult(name, f(a))

    def power(self):
        '''
        Raise base (second from top) to exponent (top).
        '''
        name = type(self).POWER
        with self._operands(name, 2) as (base, exponent):
            self._pshresult(name, _pow(base, exponent))

    def quit(self):
        raise Quit()

    def printhelp(self):
        '''
        Print all possible commands.
        '''
        print(HELP)

    def clrstack(self):
        '''
        Clear everything from the stack.
        '''
        self.stack.clear()
        print('[stack cleared]')

    def printtop(self):
        '''
        Print the element on the top of the stack.
        '''
        try:
            top = self.stack.peek()
        except StackEmpty:
            print('[stack empty]')
        else:
            self.print('top:', top)

    def printstack(self):
        '''
        Print the numbered view of the top of the stack.
        '''
        print(self.stack.render())
