from __future__ import annotations

import pytest

from bflite.errors import PointerOutOfBounds
from bflite.state import (
    DEFAULT_TAPE_SIZE,
    assign_current,
    current_value,
    move_pointer,
    new_state,
    update_current,
)


def test_new_state_defaults():
    state = new_state()
    assert state.tape_size == DEFAULT_TAPE_SIZE == 30000
    assert state.pointer == 0
    assert not any(state.memory)


def test_new_state_rejects_empty_tape():
    with pytest.raises(ValueError):
        new_state(0)


def test_current_value_helpers():
    state = new_state(3)
    move_pointer(state, 1)
    update_current(state, lambda v: v + 5)
    assert current_value(state) == 5
    assign_current(state, -7)
    assert state.memory == [0, -7, 0]


def test_pointer_moves_by_one_within_bounds():
    state = new_state(3)
    assert move_pointer(state, 1).pointer == 1
    assert move_pointer(state, 1).pointer == 2
    assert move_pointer(state, -1).pointer == 1


def test_move_left_at_zero_fails():
    state = new_state(3)
    with pytest.raises(PointerOutOfBounds) as exc:
        move_pointer(state, -1)
    assert exc.value.pointer == 0
    assert exc.value.direction == "left"
    assert state.pointer == 0


def test_move_right_at_last_cell_fails():
    state = new_state(3)
    move_pointer(state, 1)
    move_pointer(state, 1)
    with pytest.raises(PointerOutOfBounds) as exc:
        move_pointer(state, 1)
    assert exc.value.pointer == 2
    assert exc.value.tape_size == 3
    assert state.pointer == 2
