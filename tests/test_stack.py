'''
Stack engine tests
'''

from stackcalc.stack import Stack
from stackcalc.util import StackEmpty, StackFull

from pytest import raises


def test_lifo(stack):
    values = [1.0, -2.5, 3e10, 0.0]
    for value in values:
        stack.push(value)
    assert [stack.pop() for _ in values] == list(reversed(values))
    assert len(stack) == 0


def test_push_full():
    s = Stack(capacity=3)
    for value in 1.0, 2.0, 3.0:
        s.push(value)
    with raises(StackFull):
        s.push(4.0)
    assert list(s) == [1.0, 2.0, 3.0]


def test_default_capacity(stack):
    for value in range(Stack.CAPACITY):
        stack.push(float(value))
    with raises(StackFull):
        stack.push(-1.0)
    assert len(stack) == 1024
    assert stack.peek() == 1023.0


def test_pop_empty(stack):
    with raises(StackEmpty):
        stack.pop()
    assert len(stack) == 0


def test_peek(stack):
    with raises(StackEmpty):
        stack.peek()
    stack.push(5.0)
    assert stack.peek() == 5.0
    assert list(stack) == [5.0]


def test_clear(stack):
    stack.clear()
    assert len(stack) == 0
    stack.push(1.0)
    stack.push(2.0)
    stack.clear()
    assert len(stack) == 0
    with raises(StackEmpty):
        stack.peek()


def test_render_empty(stack):
    lines = stack.render().splitlines()
    assert lines[0] == 'Stack:'
    assert lines[1:] == ['{}. 0.000000'.format(n) for n in range(8, 0, -1)]


def test_render_top_is_one(stack):
    stack.push(3.0)
    stack.push(4.0)
    lines = stack.render().splitlines()
    assert len(lines) == 9
    assert lines[-2:] == ['2. 3.000000', '1. 4.000000']
    assert lines[1] == '8. 0.000000'
    assert list(stack) == [3.0, 4.0]


def test_render_deep_stack(stack):
    for value in range(20):
        stack.push(float(value))
    lines = stack.render().splitlines()
    assert len(lines) == 9
    assert lines[1] == '8. 12.000000'
    assert lines[-1] == '1. 19.000000'
    assert len(stack) == 20


def test_render_depth(stack):
    stack.push(1.5)
    assert stack.render(2) == 'Stack:\n2. 0.000000\n1. 1.500000'
