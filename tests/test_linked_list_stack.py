import pytest

from algods.linked_list_stack import LinkedListStack


@pytest.fixture
def stack():
    s = LinkedListStack()
    for word in ("abc", "def", "efg", "hij"):
        s.push(word)
    return s


def test_size_and_top(stack):
    assert len(stack) == 4
    assert stack.top() == "hij"


def test_pops_in_reverse_order_with_tops(stack):
    seen = []
    while not stack.is_empty():
        popped = stack.pop()
        top = None if stack.is_empty() else stack.top()
        seen.append((popped, top))
    assert seen == [("hij", "efg"), ("efg", "def"), ("def", "abc"), ("abc", None)]
    assert len(stack) == 0


def test_iterates_bottom_to_top(stack):
    assert list(stack) == ["abc", "def", "efg", "hij"]


def test_new_stack_is_empty():
    s = LinkedListStack()
    assert s.is_empty() is True
    assert len(s) == 0


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        LinkedListStack().pop()


def test_top_empty_raises():
    with pytest.raises(IndexError):
        LinkedListStack().top()


def test_top_does_not_remove(stack):
    assert stack.top() == "hij"
    assert stack.top() == "hij"
    assert len(stack) == 4