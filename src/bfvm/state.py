from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

TAPE_SIZE = 30000


def _new_tape(size: int) -> np.ndarray:
    return np.zeros(size, dtype=np.uint8)


@dataclass(eq=False)
class MachineState:
    tape_size: int = TAPE_SIZE
    tape: np.ndarray = field(init=False, repr=False)
    pointer: int = 0
    pc: int = 0
    step_count: int = 0
    trace: List[str] = field(default_factory=list)
    is_tracing: bool = False

    def __post_init__(self) -> None:
        if self.tape_size < 1:
            raise ValueError(f"Tape size must be at least 1, got {self.tape_size}")
        self.tape = _new_tape(self.tape_size)

    @property
    def cell(self) -> int:
        return int(self.tape[self.pointer])

    @cell.setter
    def cell(self, value: int) -> None:
        self.tape[self.pointer] = np.uint8(value & 0xFF)

    def add_trace(self, message: str) -> None:
        if self.is_tracing:
            self.trace.append(message)

    def copy_tape(self) -> np.ndarray:
        return self.tape.copy()


def dump_tape(tape: np.ndarray, *, count: int = 100, width: int = 8, pointer: Optional[int] = None) -> str:
    """Render the first ``count`` cells, ``width`` per row.

    Rows start with the address of their first cell. The cell under
    ``pointer`` is bracketed. A trailing line lists how many cells on the
    whole tape are non-zero.
    """
    shown = [int(v) for v in tape[:count]]
    lines: List[str] = []
    for start in range(0, len(shown), width):
        cells = []
        for addr in range(start, min(start + width, len(shown))):
            text = f"{shown[addr]:3d}"
            cells.append(f"[{text}]" if addr == pointer else f" {text} ")
        lines.append(f"{start:5d} |" + "".join(cells))

    used = int(np.count_nonzero(tape))
    footer = f"non-zero cells: {used}"
    if used:
        footer += f" (highest address {int(np.nonzero(tape)[0][-1])})"
    if pointer is not None:
        footer += f", pointer: {pointer}"
    lines.append(footer)
    return "\n".join(lines)
