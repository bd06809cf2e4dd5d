from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


def _hint_for(kind: str) -> Optional[str]:
    if kind == 'unbalanced':
        return 'Every "[" needs a matching "]" later in the program, and every "]" a "[" before it.'
    if kind == 'bounds':
        return 'The data pointer moved off the tape. Check the "<" / ">" balance or raise --tape-size.'
    if kind == 'input':
        return 'The program reads more bytes than were given on standard input.'
    return None


def _with_hint(message: str, kind: str) -> str:
    hint = _hint_for(kind)
    return f"{message}\nHint: {hint}" if hint else message


@dataclass
class BFVMError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class IOFailure(BFVMError):
    pass


@dataclass
class EndOfInput(BFVMError):
    pc: int


@dataclass
class UnbalancedBracketsError(BFVMError):
    pc: int


@dataclass
class TapeBoundsError(BFVMError):
    pc: int
    pointer: int


def make_end_of_input(*, pc: int) -> EndOfInput:
    return EndOfInput(message=f"[{pc}] unexpected end of input", pc=pc)


def make_unbalanced_error(*, pc: int, symbol: str) -> UnbalancedBracketsError:
    partner = ']' if symbol == '[' else '['
    return UnbalancedBracketsError(
        message=f"[{pc}] unmatched '{symbol}': no '{partner}' to jump to",
        pc=pc,
    )


def make_bounds_error(*, pc: int, pointer: int, tape_size: int) -> TapeBoundsError:
    return TapeBoundsError(
        message=f"[{pc}] data pointer moved to {pointer}, outside tape [0, {tape_size})",
        pc=pc,
        pointer=pointer,
    )


def describe(error: BFVMError) -> str:
    """Error text with a usage hint appended, for command-line reporting."""
    if isinstance(error, UnbalancedBracketsError):
        return _with_hint(error.message, 'unbalanced')
    if isinstance(error, TapeBoundsError):
        return _with_hint(error.message, 'bounds')
    if isinstance(error, EndOfInput):
        return _with_hint(error.message, 'input')
    return error.message
