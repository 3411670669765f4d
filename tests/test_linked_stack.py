import pytest

from burbir.linked_stack import LinkedStack
from burbir.stack import StackEmptyError


def test_new_stack_is_empty():
    stack = LinkedStack()
    assert stack.is_empty() is True
    assert len(stack) == 0


def test_render_top_first():
    stack = LinkedStack()
    for value in (30, 20, 1):
        stack.push(value)
    assert stack.render() == "1,20,30"


def test_render_empty():
    assert LinkedStack().render() == ""


def test_push_pop_round_trip():
    stack = LinkedStack()
    values = [5, 7, 9, 11]
    for value in values:
        stack.push(value)
    popped = [stack.pop() for _ in values]
    assert popped == list(reversed(values))
    assert stack.is_empty()


def test_peek_does_not_remove():
    stack = LinkedStack([4, 8])
    assert stack.peek() == 8
    assert len(stack) == 2


def test_iteration_top_to_bottom():
    stack = LinkedStack([1, 2, 3])
    assert list(stack) == [3, 2, 1]


def test_pop_empty_raises():
    with pytest.raises(StackEmptyError):
        LinkedStack().pop()


def test_peek_empty_raises():
    with pytest.raises(StackEmptyError):
        LinkedStack().peek()