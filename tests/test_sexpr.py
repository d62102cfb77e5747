from __future__ import annotations

from bflite.parser import parse_program
from bflite.samples import SAMPLES
from bflite.sexpr import to_sexpr, to_source


def test_to_source_drops_comments():
    program = parse_program("move right > then [loop - here]")
    assert to_source(program) == ">[-]"


def test_to_source_reparses_to_same_tree():
    for src in SAMPLES.values():
        program = parse_program(src)
        assert parse_program(to_source(program)) == program


def test_to_sexpr_nested_empty_loop():
    assert to_sexpr(parse_program("[[]]")) == "(program (loop (loop)))"
