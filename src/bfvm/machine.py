from __future__ import annotations

import io
import sys
from typing import BinaryIO, Iterable, Optional, Union

from .errors import IOFailure, make_bounds_error, make_end_of_input
from .jumps import make_resolver
from .lexer import Instruction, Program
from .state import TAPE_SIZE, MachineState

InputSource = Union[bytes, bytearray, BinaryIO]


def _as_reader(stdin: Optional[InputSource]) -> BinaryIO:
    if stdin is None:
        return getattr(sys.stdin, 'buffer', sys.stdin)
    if isinstance(stdin, (bytes, bytearray)):
        return io.BytesIO(bytes(stdin))
    return stdin


class Machine:
    """Executes a parsed program against a byte tape.

    Input is pulled one byte at a time from ``stdin`` (a binary stream or a
    bytes object). Each Output writes one byte to ``stdout`` immediately, so
    whatever was printed before a failing instruction has already been
    delivered when the error propagates.
    """

    def __init__(
        self,
        program: Iterable[Instruction],
        *,
        stdin: Optional[InputSource] = None,
        stdout: Optional[BinaryIO] = None,
        tape_size: int = TAPE_SIZE,
        jump_mode: str = 'table',
        trace: bool = False,
    ):
        self.program: Program = tuple(program)
        self.state = MachineState(tape_size=tape_size, is_tracing=trace)
        self.resolver = make_resolver(self.program, jump_mode)
        self.stdin = _as_reader(stdin)
        self.stdout = stdout if stdout is not None else sys.stdout.buffer

    @property
    def finished(self) -> bool:
        return self.state.pc >= len(self.program)

    def run(self) -> MachineState:
        try:
            while not self.finished:
                self.step()
        finally:
            self._flush()
        return self.state

    def step(self) -> bool:
        """Execute one instruction. Returns False once the program has ended."""
        s = self.state
        if self.finished:
            return False

        pc = s.pc
        ins = self.program[pc]
        s.pc += 1
        s.step_count += 1
        if s.is_tracing:
            s.add_trace(f"step={s.step_count} pc={pc} op={ins.symbol} ptr={s.pointer} cell={s.cell}")

        if ins is Instruction.MOVE_RIGHT:
            self._move(pc, 1)
        elif ins is Instruction.MOVE_LEFT:
            self._move(pc, -1)
        elif ins is Instruction.INCREMENT:
            s.cell = (s.cell + 1) % 256
        elif ins is Instruction.DECREMENT:
            s.cell = (s.cell - 1) % 256
        elif ins is Instruction.OUTPUT:
            self._write_byte(s.cell)
        elif ins is Instruction.INPUT:
            s.cell = self._read_byte(pc)
        elif ins is Instruction.JUMP_IF_ZERO:
            if s.cell == 0:
                s.pc = self.resolver.forward(pc)
        elif ins is Instruction.JUMP_IF_NONZERO:
            if s.cell != 0:
                s.pc = self.resolver.backward(pc)

        return not self.finished

    def _move(self, pc: int, delta: int) -> None:
        s = self.state
        target = s.pointer + delta
        if not 0 <= target < s.tape_size:
            raise make_bounds_error(pc=pc, pointer=target, tape_size=s.tape_size)
        s.pointer = target

    def _write_byte(self, value: int) -> None:
        try:
            self.stdout.write(bytes((value,)))
        except OSError as e:
            raise IOFailure(message=f"failed to write output: {e}") from e

    def _read_byte(self, pc: int) -> int:
        # Prompts written so far must be visible before blocking on input.
        self._flush()
        try:
            data = self.stdin.read(1)
        except OSError as e:
            raise IOFailure(message=f"failed to read input: {e}") from e
        if not data:
            raise make_end_of_input(pc=pc)
        return data[0]

    def _flush(self) -> None:
        flush = getattr(self.stdout, 'flush', None)
        if flush is None:
            return
        try:
            flush()
        except OSError as e:
            raise IOFailure(message=f"failed to flush output: {e}") from e
