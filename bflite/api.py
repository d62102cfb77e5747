from __future__ import annotations

import io
from typing import TextIO

from bflite.ast import Program
from bflite.config import RunConfig
from bflite.interpreter import run_program
from bflite.parser import parse_program


def parse_source(*, src: str) -> Program:
    return parse_program(src)


def run_source(
    *,
    src: str,
    config: RunConfig | None = None,
    stdout: TextIO | None = None,
    stdin: TextIO | None = None,
) -> None:
    config = config or RunConfig()
    program = parse_program(src)
    run_program(
        program,
        tape_size=config.tape_size,
        step_limit=config.step_limit,
        stdout=stdout,
        stdin=stdin,
    )


def eval_source(*, src: str, input_text: str = "", config: RunConfig | None = None) -> str:
    """Run `src` against in-memory streams and return everything it printed."""
    out = io.StringIO()
    run_source(src=src, config=config, stdout=out, stdin=io.StringIO(input_text))
    return out.getvalue()
