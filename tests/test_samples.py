from __future__ import annotations

import pytest

from bflite.api import eval_source
from bflite.samples import HELLO_WORLD, JABH, QUINE, ROT13, SAMPLES, get_sample


def test_hello_world():
    # The program prints its own newline before the trailing one.
    assert eval_source(src=HELLO_WORLD) == "Hello World!\n\n"


def test_jabh():
    assert eval_source(src=JABH) == "Just another brainfuck hacker,\n"


def test_rot13_reads_until_blank_line():
    assert eval_source(src=ROT13, input_text="a\nN\n!\n\n") == "nA!\n"


def test_echo():
    assert eval_source(src=get_sample("echo"), input_text="xyz\n") == "x\n"


def test_quine_prints_its_source():
    assert eval_source(src=QUINE).startswith(QUINE)


def test_unknown_sample():
    with pytest.raises(KeyError, match="hello-world"):
        get_sample("nope")
    assert set(SAMPLES) == {"hello-world", "echo", "jabh", "quine", "rot13"}
