from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Span:
    line: int
    col: int


@dataclass(frozen=True, slots=True)
class IncValue:
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class DecValue:
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class IncPointer:
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class DecPointer:
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Output:
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Input:
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class Loop:
    body: tuple[Instruction, ...] = ()
    span: Span | None = field(default=None, compare=False, repr=False)


Instruction = IncValue | DecValue | IncPointer | DecPointer | Output | Input | Loop


@dataclass(frozen=True, slots=True)
class Program:
    instructions: tuple[Instruction, ...]

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __len__(self) -> int:
        return len(self.instructions)


def count_leaves(instructions: Sequence[Instruction]) -> int:
    """Number of non-loop instructions, descending into loop bodies."""
    total = 0
    for ins in instructions:
        if isinstance(ins, Loop):
            total += count_leaves(ins.body)
        else:
            total += 1
    return total


def max_depth(instructions: Sequence[Instruction]) -> int:
    """Deepest loop nesting; 0 for straight-line code."""
    deepest = 0
    for ins in instructions:
        if isinstance(ins, Loop):
            deepest = max(deepest, 1 + max_depth(ins.body))
    return deepest
