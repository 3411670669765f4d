import pytest

from burbir.stack import MAX_ELEMENTS, Stack, StackEmptyError, StackFullError


def filled():
    stack = Stack()
    for i in range(1, 6):
        stack.push(i * 10)
    return stack


def test_new_stack_is_empty():
    assert Stack().is_empty() is True


def test_push_display():
    assert filled().render() == "[10, 20, 30, 40, 50]"


def test_pop_returns_top_and_display():
    stack = filled()
    assert stack.pop() == 50
    assert stack.render() == "[10, 20, 30, 40]"


def test_empty_stack_is_not_full():
    assert Stack().is_full() is False


def test_empty_render():
    assert Stack().render() == "[]"


def test_pop_empty_raises():
    with pytest.raises(StackEmptyError):
        Stack().pop()


def test_full_at_capacity():
    stack = Stack(range(MAX_ELEMENTS))
    assert stack.is_full() is True
    with pytest.raises(StackFullError):
        stack.push(1)


def test_small_capacity():
    stack = Stack(capacity=2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(StackFullError):
        stack.push(3)
    assert len(stack) == 2


def test_invalid_capacity():
    with pytest.raises(ValueError):
        Stack(capacity=0)


def test_lifo_order():
    stack = Stack([1, 2, 3])
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert stack.is_empty()