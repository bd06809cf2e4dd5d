from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import BinaryIO, Dict, Iterable, Iterator, Optional, Tuple, Union

from .errors import IOFailure


class Instruction(Enum):
    MOVE_RIGHT = '>'
    MOVE_LEFT = '<'
    INCREMENT = '+'
    DECREMENT = '-'
    OUTPUT = '.'
    INPUT = ','
    JUMP_IF_ZERO = '['
    JUMP_IF_NONZERO = ']'

    @property
    def symbol(self) -> str:
        return self.value


Program = Tuple[Instruction, ...]
Source = Union[bytes, bytearray, str, Iterable[int], BinaryIO]

_BY_BYTE: Dict[int, Instruction] = {ord(ins.value): ins for ins in Instruction}
_CHUNK_SIZE = 8192


def parse_byte(b: int) -> Optional[Instruction]:
    # Anything that is not one of the eight symbols is a comment.
    return _BY_BYTE.get(b)


def _iter_bytes(source: Source) -> Iterator[int]:
    if isinstance(source, str):
        yield from source.encode('utf-8')
        return
    if isinstance(source, (bytes, bytearray, memoryview)):
        yield from bytes(source)
        return
    if hasattr(source, 'read'):
        while True:
            try:
                chunk = source.read(_CHUNK_SIZE)
            except OSError as e:
                raise IOFailure(message=f"failed to read program: {e}") from e
            if not chunk:
                return
            if isinstance(chunk, str):
                chunk = chunk.encode('utf-8')
            yield from chunk
        return
    yield from source


def tokenize(source: Source) -> Iterator[Instruction]:
    """Lazily yield the instructions found in ``source``.

    ``source`` may be bytes, text, an iterable of byte values or a readable
    stream. Unrecognized bytes are dropped without warning.
    """
    for b in _iter_bytes(source):
        ins = parse_byte(b)
        if ins is not None:
            yield ins


def parse(source: Source) -> Program:
    return tuple(tokenize(source))


def parse_file(path: Union[str, Path]) -> Program:
    p = Path(path)
    try:
        with p.open('rb') as f:
            return parse(f)
    except OSError as e:
        raise IOFailure(message=f"{p}: {e.strerror or e}") from e


def to_source(program: Iterable[Instruction]) -> str:
    return ''.join(ins.symbol for ins in program)
