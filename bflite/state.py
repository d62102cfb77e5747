from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from bflite.errors import PointerOutOfBounds

DEFAULT_TAPE_SIZE = 30000


@dataclass(slots=True)
class ProgramState:
    """Tape and pointer for a single run.

    Owned by exactly one interpreter at a time and updated in place; the
    interpreter still threads it through every call so each step reads as
    `state -> state`.
    """

    memory: list[int]
    pointer: int = 0

    @property
    def tape_size(self) -> int:
        return len(self.memory)


def new_state(tape_size: int = DEFAULT_TAPE_SIZE) -> ProgramState:
    if tape_size < 1:
        raise ValueError(f"tape_size must be >= 1, got {tape_size}")
    return ProgramState(memory=[0] * tape_size, pointer=0)


def current_value(state: ProgramState) -> int:
    return state.memory[state.pointer]


def update_current(state: ProgramState, f: Callable[[int], int]) -> ProgramState:
    state.memory[state.pointer] = f(state.memory[state.pointer])
    return state


def assign_current(state: ProgramState, value: int) -> ProgramState:
    state.memory[state.pointer] = value
    return state


def move_pointer(state: ProgramState, delta: int) -> ProgramState:
    target = state.pointer + delta
    if not 0 <= target < len(state.memory):
        raise PointerOutOfBounds(
            pointer=state.pointer,
            tape_size=len(state.memory),
            direction="right" if delta > 0 else "left",
        )
    state.pointer = target
    return state
