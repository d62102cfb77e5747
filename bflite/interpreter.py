from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from bflite.ast import (
    DecPointer,
    DecValue,
    IncPointer,
    IncValue,
    Input,
    Instruction,
    Loop,
    Output,
    Program,
)
from bflite.errors import CellValueError, NestingTooDeep, StepLimitExceeded
from bflite.state import (
    DEFAULT_TAPE_SIZE,
    ProgramState,
    assign_current,
    current_value,
    move_pointer,
    new_state,
    update_current,
)

logger = logging.getLogger(__name__)

_MAX_CODE_POINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


def _inc(v: int) -> int:
    return v + 1


def _dec(v: int) -> int:
    return v - 1


class Interpreter:
    """Tree-walking evaluator.

    `stdout`/`stdin` default to the process streams at call time. When
    `step_limit` is set, every executed instruction (and every loop-guard
    re-test) counts as one step and exceeding the limit raises
    `StepLimitExceeded`.
    """

    def __init__(
        self,
        *,
        stdout: TextIO | None = None,
        stdin: TextIO | None = None,
        step_limit: int | None = None,
    ) -> None:
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stdin = stdin if stdin is not None else sys.stdin
        self.step_limit = step_limit
        self.steps = 0

    def _tick(self) -> None:
        self.steps += 1
        if self.step_limit is not None and self.steps > self.step_limit:
            raise StepLimitExceeded(limit=self.step_limit)

    def run_block(self, instructions: Iterable[Instruction], state: ProgramState) -> ProgramState:
        for ins in instructions:
            state = self.run(ins, state)
        return state

    def run(self, ins: Instruction, state: ProgramState) -> ProgramState:
        self._tick()
        if isinstance(ins, IncValue):
            return update_current(state, _inc)
        if isinstance(ins, DecValue):
            return update_current(state, _dec)
        if isinstance(ins, IncPointer):
            return move_pointer(state, 1)
        if isinstance(ins, DecPointer):
            return move_pointer(state, -1)
        if isinstance(ins, Output):
            self._write(state)
            return state
        if isinstance(ins, Input):
            return assign_current(state, self._read())
        if isinstance(ins, Loop):
            while current_value(state) != 0:
                state = self.run_block(ins.body, state)
                self._tick()
            return state
        raise TypeError(f"unknown instruction: {type(ins).__name__}")

    def _write(self, state: ProgramState) -> None:
        value = current_value(state)
        if not 0 <= value <= _MAX_CODE_POINT or value in _SURROGATES:
            raise CellValueError(value=value, pointer=state.pointer)
        self.stdout.write(chr(value))

    def _read(self) -> int:
        # Programs may prompt before reading.
        self.stdout.flush()
        line = self.stdin.readline().rstrip("\r\n")
        if not line:
            return 0
        return ord(line[0])


def _run_top(
    interp: Interpreter,
    program: Program | Iterable[Instruction],
    state: ProgramState,
) -> ProgramState:
    try:
        return interp.run_block(program, state)
    except RecursionError:
        raise NestingTooDeep(stage="execute") from None


def execute(
    program: Program | Iterable[Instruction],
    state: ProgramState,
    *,
    stdout: TextIO | None = None,
    stdin: TextIO | None = None,
    step_limit: int | None = None,
) -> ProgramState:
    interp = Interpreter(stdout=stdout, stdin=stdin, step_limit=step_limit)
    return _run_top(interp, program, state)


def run_program(
    program: Program | Iterable[Instruction],
    *,
    tape_size: int = DEFAULT_TAPE_SIZE,
    stdout: TextIO | None = None,
    stdin: TextIO | None = None,
    step_limit: int | None = None,
) -> None:
    """Run `program` on a fresh zeroed tape, then emit the trailing newline."""
    interp = Interpreter(stdout=stdout, stdin=stdin, step_limit=step_limit)
    logger.debug("run start: tape_size=%d step_limit=%s", tape_size, step_limit)
    final = _run_top(interp, program, new_state(tape_size))
    interp.stdout.write("\n")
    interp.stdout.flush()
    logger.debug("run done: %d steps, pointer=%d", interp.steps, final.pointer)
