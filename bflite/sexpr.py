from __future__ import annotations

from collections.abc import Sequence

from bflite import ast

_NAMES = {
    ast.IncValue: ("inc", "+"),
    ast.DecValue: ("dec", "-"),
    ast.IncPointer: ("right", ">"),
    ast.DecPointer: ("left", "<"),
    ast.Output: ("out", "."),
    ast.Input: ("in", ","),
}


def to_sexpr(program: ast.Program) -> str:
    parts = ["(program"]
    for ins in program.instructions:
        parts.append(" " + _ins(ins))
    parts.append(")")
    return "".join(parts)


def _ins(ins: ast.Instruction) -> str:
    if isinstance(ins, ast.Loop):
        inner = " ".join(_ins(i) for i in ins.body)
        return f"(loop {inner})" if inner else "(loop)"
    try:
        return _NAMES[type(ins)][0]
    except KeyError:
        raise TypeError(f"unknown instruction: {type(ins).__name__}") from None


def to_source(program: ast.Program) -> str:
    """Canonical source text: only the eight command characters."""
    return _source(program.instructions)


def _source(instructions: Sequence[ast.Instruction]) -> str:
    out: list[str] = []
    for ins in instructions:
        if isinstance(ins, ast.Loop):
            out.append("[" + _source(ins.body) + "]")
        else:
            out.append(_NAMES[type(ins)][1])
    return "".join(out)
