from __future__ import annotations

import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

import numpy as np

from .lexer import Source, parse, parse_file
from .machine import InputSource, Machine
from .state import TAPE_SIZE


@dataclass(frozen=True)
class RunOptions:
    tape_size: int = TAPE_SIZE
    jump_mode: str = 'table'
    trace: bool = False


@dataclass(frozen=True)
class RunResult:
    output: bytes
    tape: np.ndarray = field(repr=False, compare=False)
    pointer: int
    steps: int
    trace: List[str] = field(default_factory=list, repr=False)

    @property
    def text(self) -> str:
        return self.output.decode('latin-1')


def run_program(program, *, input: InputSource = b"", options: Optional[RunOptions] = None) -> RunResult:
    opts = options or RunOptions()
    out = io.BytesIO()
    machine = Machine(
        program,
        stdin=input,
        stdout=out,
        tape_size=opts.tape_size,
        jump_mode=opts.jump_mode,
        trace=opts.trace,
    )
    state = machine.run()
    return RunResult(
        output=out.getvalue(),
        tape=state.copy_tape(),
        pointer=state.pointer,
        steps=state.step_count,
        trace=list(state.trace),
    )


def run_string(source: Source, *, input: InputSource = b"", options: Optional[RunOptions] = None) -> RunResult:
    return run_program(parse(source), input=input, options=options)


def run_file(path: Union[str, Path], *, input: InputSource = b"", options: Optional[RunOptions] = None) -> RunResult:
    return run_program(parse_file(path), input=input, options=options)
