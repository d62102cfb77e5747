from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from bflite.config import RunConfig, load_settings
from bflite.errors import BFError
from bflite.interpreter import run_program
from bflite.parser import parse_program
from bflite.samples import SAMPLES
from bflite.sexpr import to_sexpr

logger = logging.getLogger(__name__)


def _existing_path(value: str) -> Path:
    p = Path(value)
    if not p.exists():
        raise argparse.ArgumentTypeError(f"path not found: {value}")
    return p


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _add_source_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("program", nargs="*", help="program text; multiple arguments are concatenated")
    p.add_argument("--file", type=_existing_path, default=None, help="read the program from a file")
    p.add_argument("--sample", choices=sorted(SAMPLES), default=None, help="run a bundled sample program")
    p.add_argument("--debug", action="store_true", help="log parse/run details to stderr")


def _source_from_args(args: argparse.Namespace) -> str:
    given = [bool(args.program), args.file is not None, args.sample is not None]
    if sum(given) != 1:
        raise SystemExit("error: give exactly one of PROGRAM, --file or --sample")
    if args.file is not None:
        return args.file.read_text(encoding="utf-8")
    if args.sample is not None:
        return SAMPLES[args.sample]
    return "".join(args.program)


def _settings(args: argparse.Namespace) -> RunConfig:
    try:
        return load_settings(tape_size=args.tape_size, step_limit=args.step_limit)
    except ValidationError as e:
        raise SystemExit(f"invalid configuration: {e}") from e


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="bflite")
    sub = parser.add_subparsers(dest="cmd", required=True)

    run_p = sub.add_parser("run", help="parse and execute a program")
    _add_source_args(run_p)
    run_p.add_argument("--tape-size", type=int, default=None)
    run_p.add_argument("--step-limit", type=int, default=None)

    parse_p = sub.add_parser("parse", help="print the instruction tree")
    _add_source_args(parse_p)

    sub.add_parser("samples", help="list bundled sample programs")

    args = parser.parse_args(argv)

    if args.cmd == "samples":
        for name in sorted(SAMPLES):
            print(name)
        return 0

    _configure_logging(args.debug)
    src = _source_from_args(args)

    if args.cmd == "parse":
        try:
            program = parse_program(src)
        except BFError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        print(to_sexpr(program))
        return 0

    if args.cmd == "run":
        config = _settings(args)
        try:
            program = parse_program(src)
            run_program(program, tape_size=config.tape_size, step_limit=config.step_limit)
        except BFError as e:
            sys.stdout.flush()
            logger.debug("run aborted: %s", type(e).__name__)
            print(f"error: {e}", file=sys.stderr)
            return 1
        return 0

    raise AssertionError(f"unhandled cmd: {args.cmd}")
