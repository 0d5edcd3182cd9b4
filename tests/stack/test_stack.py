import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from stackvm.common.hwconf import STACK_CAPACITY, WORD_MIN, WORD_MAX
from stackvm.common.word import Word
from stackvm.runtime.machine import Machine
from stackvm.runtime.traps import StackOverflow, StackUnderflow, IllegalAccess, Trap

from unit_utils import with_stack, values
from fixtures import machine, tiny_machine  # noqa: F401


words = st.integers(min_value=WORD_MIN, max_value=WORD_MAX)


@settings(max_examples=100, deadline=None)
@given(pushed=st.lists(words, max_size=64))
def test_pop_is_lifo(pushed):
    m = with_stack(pushed)
    popped = [m.pop().value for _ in pushed]

    assert popped == list(reversed(pushed))
    assert m.size == 0


def test_push_to_capacity(machine):  # noqa: F811
    for v in range(STACK_CAPACITY):
        machine.push(Word(v))

    assert machine.size == STACK_CAPACITY
    assert values(machine) == list(range(STACK_CAPACITY))


def test_overflow_leaves_stack(tiny_machine):  # noqa: F811
    tiny_machine.push(Word(1))
    tiny_machine.push(Word(2))

    with pytest.raises(StackOverflow) as e:
        tiny_machine.push(Word(3))

    assert e.value.trap == Trap.STACK_OVERFLOW
    assert tiny_machine.size == 2
    assert values(tiny_machine) == [1, 2]


def test_underflow_on_empty(machine):  # noqa: F811
    with pytest.raises(StackUnderflow) as e:
        machine.pop()

    assert e.value.trap == Trap.STACK_UNDERFLOW
    assert machine.size == 0
    assert machine.ip == Word(0)


def test_pop_keeps_stale_slot(machine):  # noqa: F811
    machine.push(Word(7))

    assert machine.pop() == Word(7)
    assert machine.size == 0
    assert machine.live() == []
    assert machine.stack[0] == Word(7)


def test_stale_slot_is_overwritten(machine):  # noqa: F811
    machine.push(Word(7))
    machine.pop()
    machine.push(Word(8))

    assert values(machine) == [8]


def test_peek():
    m = with_stack([10, 20, 30])

    assert m.peek(0) == Word(30)
    assert m.peek(2) == Word(10)

    for depth in (3, -1):
        with pytest.raises(IllegalAccess):
            m.peek(depth)

    assert values(m) == [10, 20, 30]


def test_default_capacity():
    m = Machine()

    assert m.capacity == STACK_CAPACITY
    assert len(m.stack) == STACK_CAPACITY
    assert m.size == 0
    assert m.program == ()
    assert not m.halted
    assert m.fault is None


def test_dump_empty(machine):  # noqa: F811
    assert machine.dump() == 'Stack dump\nEmpty'


def test_dump_live_only():
    m = with_stack([3, -4, 5])
    m.pop()

    assert m.dump() == 'Stack dump\n0: 3\n1: -4'
