"""
Bracket matching.

Two strategies with the same observable behavior:

  scan   - match lazily when a jump is taken, walking the program with a
           nesting counter. O(loop body) per taken jump, nothing up front.
  table  - pair every bracket once before execution (stack walk) so a taken
           jump is a single lookup. Unpaired brackets are recorded as None and
           only fail when that jump is actually taken, exactly like a scan
           running off the end of the program.

Both return the landing index: just past the partner bracket.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from .errors import make_unbalanced_error
from .lexer import Instruction

JUMP_MODES = ('table', 'scan')

JumpTable = List[Optional[int]]


def scan_forward(program: Sequence[Instruction], bracket: int) -> int:
    # bracket is the index of a taken '['
    nesting = 1
    pc = bracket + 1
    while nesting > 0:
        if pc >= len(program):
            raise make_unbalanced_error(pc=bracket, symbol='[')
        ins = program[pc]
        pc += 1
        if ins is Instruction.JUMP_IF_ZERO:
            nesting += 1
        elif ins is Instruction.JUMP_IF_NONZERO:
            nesting -= 1
    return pc


def scan_backward(program: Sequence[Instruction], bracket: int) -> int:
    # bracket is the index of a taken ']'
    nesting = 1
    pc = bracket
    while nesting > 0:
        pc -= 1
        if pc < 0:
            raise make_unbalanced_error(pc=bracket, symbol=']')
        ins = program[pc]
        if ins is Instruction.JUMP_IF_ZERO:
            nesting -= 1
        elif ins is Instruction.JUMP_IF_NONZERO:
            nesting += 1
    return pc + 1


def build_jump_table(program: Sequence[Instruction]) -> JumpTable:
    table: JumpTable = [None] * len(program)
    stack: List[int] = []

    for pos, ins in enumerate(program):
        if ins is Instruction.JUMP_IF_ZERO:
            stack.append(pos)
        elif ins is Instruction.JUMP_IF_NONZERO:
            if not stack:
                continue  # unmatched ']'
            start = stack.pop()
            table[start] = pos + 1
            table[pos] = start + 1

    return table


class ScanResolver:
    def __init__(self, program: Sequence[Instruction]):
        self.program = program

    def forward(self, bracket: int) -> int:
        return scan_forward(self.program, bracket)

    def backward(self, bracket: int) -> int:
        return scan_backward(self.program, bracket)


class TableResolver:
    def __init__(self, program: Sequence[Instruction]):
        self.table = build_jump_table(program)

    def _lookup(self, bracket: int, symbol: str) -> int:
        target = self.table[bracket]
        if target is None:
            raise make_unbalanced_error(pc=bracket, symbol=symbol)
        return target

    def forward(self, bracket: int) -> int:
        return self._lookup(bracket, '[')

    def backward(self, bracket: int) -> int:
        return self._lookup(bracket, ']')


def make_resolver(program: Sequence[Instruction], mode: str = 'table'):
    if mode == 'table':
        return TableResolver(program)
    if mode == 'scan':
        return ScanResolver(program)
    raise ValueError(f"Unknown jump mode: {mode!r} (expected one of {', '.join(JUMP_MODES)})")
