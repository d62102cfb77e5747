from __future__ import annotations

import logging

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
    Span,
)
from bflite.errors import NestingTooDeep, UnbalancedLoop

logger = logging.getLogger(__name__)

_SIMPLE = {
    "+": IncValue,
    "-": DecValue,
    ">": IncPointer,
    "<": DecPointer,
    ".": Output,
    ",": Input,
}


class _Parser:
    """Recursive-descent parser over single-character tokens.

    Every character is its own token, so there is no lexer. Nested loops are
    tracked by the Python call stack: each `[` recurses into `_block` until the
    `]` at the same depth is consumed.
    """

    def __init__(self, src: str) -> None:
        self.src = src
        self.pos = 0
        self.line = 1
        self.col = 1

    def _advance(self) -> tuple[str, Span]:
        ch = self.src[self.pos]
        span = Span(self.line, self.col)
        self.pos += 1
        if ch == "\n":
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return ch, span

    def _block(self, opener: Span | None) -> tuple[Instruction, ...]:
        exprs: list[Instruction] = []
        while self.pos < len(self.src):
            ch, span = self._advance()
            kind = _SIMPLE.get(ch)
            if kind is not None:
                exprs.append(kind(span=span))
            elif ch == "[":
                body = self._block(span)
                exprs.append(Loop(body=body, span=span))
            elif ch == "]":
                if opener is None:
                    raise UnbalancedLoop("unbalanced loop: ']' has no matching '['", line=span.line, col=span.col)
                return tuple(exprs)
            # anything else is a comment
        if opener is not None:
            raise UnbalancedLoop("unbalanced loop: '[' is never closed", line=opener.line, col=opener.col)
        return tuple(exprs)

    def parse(self) -> Program:
        return Program(instructions=self._block(None))


def parse_program(src: str) -> Program:
    try:
        program = _Parser(src).parse()
    except RecursionError:
        raise NestingTooDeep(stage="parse") from None
    logger.debug("parsed %d chars into %d top-level instructions", len(src), len(program))
    return program
