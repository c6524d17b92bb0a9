'''
RPN calculator.

Plain old arithmetic, square root, and trigonometry in degrees over a bounded
stack of floats. Not intended to be Turing-complete!

Type numbers to stack them, operators and functions to apply them:

    rpn> 3 4 +
    = 7
    rpn> 90 sin
    = 1

Everything happens a token at a time: a bad token is reported, the stack is
left as it was, and the rest of the line carries on.
'''

from .cli import CLI
from .lexer import Lexer
from .machine import Machine
from .stack import Stack


__all__ = 'Machine', 'Lexer', 'Stack', 'CLI'
