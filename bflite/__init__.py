from __future__ import annotations

from bflite.api import eval_source, parse_source, run_source
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
from bflite.config import RunConfig, load_settings
from bflite.errors import (
    BFError,
    CellValueError,
    NestingTooDeep,
    PointerOutOfBounds,
    StepLimitExceeded,
    UnbalancedLoop,
)
from bflite.interpreter import Interpreter, execute, run_program
from bflite.parser import parse_program
from bflite.state import DEFAULT_TAPE_SIZE, ProgramState, new_state

__all__ = [
    "__version__",
    # API
    "parse_source",
    "run_source",
    "eval_source",
    # Tree
    "Instruction",
    "IncValue",
    "DecValue",
    "IncPointer",
    "DecPointer",
    "Output",
    "Input",
    "Loop",
    "Program",
    "parse_program",
    # Execution
    "Interpreter",
    "execute",
    "run_program",
    "ProgramState",
    "new_state",
    "DEFAULT_TAPE_SIZE",
    # Config
    "RunConfig",
    "load_settings",
    # Errors
    "BFError",
    "UnbalancedLoop",
    "PointerOutOfBounds",
    "StepLimitExceeded",
    "CellValueError",
    "NestingTooDeep",
]

__version__ = "0.1.0"
