'''
RPN lexer tests
'''

import math

from stackcalc.util import InvalidToken
from stackcalc.lexer import Lexer

from pytest import mark, raises


def test_split_spaces_and_tabs():
    l = Lexer()
    assert list(l.lex('3 4\t+')) == ['3', '4', '+']
    assert list(l.lex('  1  \t\t 2  ')) == ['1', '2']


def test_line_terminator():
    l = Lexer()
    assert list(l.lex('1 2 +\n')) == ['1', '2', '+']
    assert list(l.lex('1 2\r\n')) == ['1', '2']


def test_blank_lines():
    l = Lexer()
    assert list(l.lex('')) == []
    assert list(l.lex(' \t ')) == []
    assert list(l.lex('\n')) == []


@mark.parametrize('token, value', [
    ('3', 3.0),
    ('-3', -3.0),
    ('+2.5', 2.5),
    ('1.', 1.0),
    ('.5', 0.5),
    ('1e3', 1000.0),
    ('1.5E-3', 0.0015),
    ('0x1p3', 8.0),
    ('0xff', 255.0),
    ('-0x.8', -0.5),
    ('inf', math.inf),
    ('-Infinity', -math.inf),
])
def test_numbers(token, value):
    l = Lexer()
    assert l.isnumber(token)
    assert l.number(token) == value


def test_nan():
    l = Lexer()
    assert math.isnan(l.number('NaN'))


def test_negative_zero():
    l = Lexer()
    assert math.copysign(1.0, l.number('-0')) == -1.0


@mark.parametrize('token', [
    'abc', '3abc', '1_000', '1e', '.', '+', '0x', '1..2', 'infinit',
    '٣', '1,5',
])
def test_not_numbers(token):
    l = Lexer()
    assert not l.isnumber(token)
    with raises(InvalidToken, match="Invalid token: '"):
        l.number(token)


def test_hex_out_of_range():
    l = Lexer()
    with raises(InvalidToken, match='out of range'):
        l.number('0x1p99999')
