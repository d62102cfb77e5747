from __future__ import annotations

import io

import pytest

from bflite import eval_source, parse_source, run_source
from bflite.config import RunConfig
from bflite.errors import PointerOutOfBounds, StepLimitExceeded, UnbalancedLoop


def test_eval_source_plus_plus_dot():
    assert eval_source(src="++.", config=RunConfig(tape_size=1)) == chr(2) + "\n"


def test_clear_loop_outputs_only_newline():
    assert eval_source(src="+[-]") == "\n"


def test_pointer_overflow_on_single_cell_tape():
    with pytest.raises(PointerOutOfBounds):
        eval_source(src=">+<", config=RunConfig(tape_size=1))


def test_stray_bracket():
    with pytest.raises(UnbalancedLoop):
        eval_source(src="]")


def test_step_limit_from_config():
    with pytest.raises(StepLimitExceeded):
        eval_source(src="+[]", config=RunConfig(step_limit=1000))


def test_run_source_writes_to_given_streams():
    out = io.StringIO()
    run_source(src=",+.", stdout=out, stdin=io.StringIO("a\n"))
    assert out.getvalue() == "b\n"


def test_run_source_defaults_to_process_streams(capsys):
    run_source(src="+" * 72 + ".")
    assert capsys.readouterr().out == "H\n"


def test_parse_source():
    assert len(parse_source(src="+[-]>.")) == 4
