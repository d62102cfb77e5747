from __future__ import annotations


class BFError(Exception):
    pass


class UnbalancedLoop(BFError):
    def __init__(
        self,
        message: str = "unbalanced loop",
        *,
        line: int | None = None,
        col: int | None = None,
    ) -> None:
        self.line = line
        self.col = col
        prefix = ""
        if line is not None and col is not None:
            prefix = f"line {line} col {col}: "
        super().__init__(prefix + str(message))


class PointerOutOfBounds(BFError):
    def __init__(self, *, pointer: int, tape_size: int, direction: str) -> None:
        self.pointer = pointer
        self.tape_size = tape_size
        self.direction = direction
        super().__init__(
            f"pointer out of bounds: cannot move {direction} from cell {pointer} (tape size {tape_size})"
        )


class StepLimitExceeded(BFError):
    def __init__(self, *, limit: int) -> None:
        self.limit = limit
        super().__init__(f"step limit exceeded: {limit}")


class CellValueError(BFError):
    def __init__(self, *, value: int, pointer: int) -> None:
        self.value = value
        self.pointer = pointer
        super().__init__(f"cell {pointer} holds {value}, which is not a valid code point")


class NestingTooDeep(BFError):
    def __init__(self, *, stage: str) -> None:
        self.stage = stage
        super().__init__(f"loop nesting too deep to {stage}")
