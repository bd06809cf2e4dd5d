from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .errors import BFVMError, describe
from .jumps import JUMP_MODES
from .lexer import parse_file
from .machine import Machine
from .state import TAPE_SIZE, dump_tape


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bfvm",
        description="Run a Brainfuck program. Runtime input is read from standard input.",
    )
    parser.add_argument("program", nargs="?", metavar="PROGRAM_FILE", help="Brainfuck source file")
    parser.add_argument("--tape-size", type=int, default=TAPE_SIZE, help=f"Number of cells (default {TAPE_SIZE})")
    parser.add_argument("--jump-mode", choices=JUMP_MODES, default="table",
                        help="table: pair brackets before running; scan: match when a jump is taken")
    parser.add_argument("--dump", action="store_true", help="Print the first 100 tape cells to stderr afterwards")
    parser.add_argument("--trace", action="store_true", help="Print every executed instruction to stderr")
    return parser


def main(argv: Optional[List[str]] = None, *, stdin=None, stdout=None, stderr=None) -> int:
    stdin = stdin if stdin is not None else sys.stdin.buffer
    stdout = stdout if stdout is not None else sys.stdout.buffer
    stderr = stderr if stderr is not None else sys.stderr

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.program is None:
        stderr.write(f"Usage: {parser.prog} PROGRAM_FILE <INPUT\n")
        return 1

    machine = None
    try:
        program = parse_file(args.program)
        machine = Machine(
            program,
            stdin=stdin,
            stdout=stdout,
            tape_size=args.tape_size,
            jump_mode=args.jump_mode,
            trace=args.trace,
        )
        machine.run()
    except BFVMError as e:
        stderr.write(f"error: {describe(e)}\n")
        return 1
    except ValueError as e:
        stderr.write(f"error: {e}\n")
        return 1
    finally:
        if machine is not None and args.trace:
            stderr.write("\n".join(machine.state.trace) + "\n")

    if args.dump:
        stderr.write("\n" + dump_tape(machine.state.tape, pointer=machine.state.pointer) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
