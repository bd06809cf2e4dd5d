#!/usr/bin/env python3
"""
Test that every failure is terminal and reported with the failing position.
"""

import io
import os
import sys

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfvm import (
    BFVMError,
    EndOfInput,
    IOFailure,
    Machine,
    TapeBoundsError,
    UnbalancedBracketsError,
    parse,
)
from bfvm.errors import describe
from bfvm.jumps import JUMP_MODES


def make_machine(src, input_data=b"", **kwargs):
    stdout = io.BytesIO()
    return Machine(parse(src), stdin=io.BytesIO(input_data), stdout=stdout, **kwargs), stdout


def test_end_of_input():
    machine, _ = make_machine(",")
    with pytest.raises(EndOfInput) as exc:
        machine.run()
    assert exc.value.pc == 0
    assert str(exc.value) == "[0] unexpected end of input"


def test_end_of_input_keeps_earlier_output_only():
    machine, stdout = make_machine("+.,.")
    with pytest.raises(EndOfInput) as exc:
        machine.run()
    assert exc.value.pc == 2
    assert stdout.getvalue() == b"\x01"


def test_end_of_input_after_consuming_input():
    machine, stdout = make_machine(",.,.", b"Z")
    with pytest.raises(EndOfInput):
        machine.run()
    assert stdout.getvalue() == b"Z"


@pytest.mark.parametrize("jump_mode", JUMP_MODES)
def test_unbalanced_open_bracket(jump_mode):
    machine, _ = make_machine("[+", jump_mode=jump_mode)
    with pytest.raises(UnbalancedBracketsError) as exc:
        machine.run()
    assert exc.value.pc == 0


@pytest.mark.parametrize("jump_mode", JUMP_MODES)
def test_unbalanced_close_bracket(jump_mode):
    machine, stdout = make_machine("+.]", jump_mode=jump_mode)
    with pytest.raises(UnbalancedBracketsError) as exc:
        machine.run()
    assert exc.value.pc == 2
    assert stdout.getvalue() == b"\x01"


@pytest.mark.parametrize("jump_mode", JUMP_MODES)
def test_unmatched_bracket_not_taken_is_harmless(jump_mode):
    # '[' on a non-zero cell and ']' on a zero cell never look for a partner.
    machine, stdout = make_machine("+.[", jump_mode=jump_mode)
    machine.run()
    assert stdout.getvalue() == b"\x01"

    machine, _ = make_machine("]", jump_mode=jump_mode)
    machine.run()
    assert machine.finished


def test_move_left_of_first_cell():
    machine, _ = make_machine("+<")
    with pytest.raises(TapeBoundsError) as exc:
        machine.run()
    assert exc.value.pc == 1
    assert exc.value.pointer == -1
    assert machine.state.pointer == 0


def test_move_right_of_last_cell():
    machine, _ = make_machine(">>>>", tape_size=4)
    with pytest.raises(TapeBoundsError) as exc:
        machine.run()
    assert exc.value.pc == 3
    assert exc.value.pointer == 4
    assert "outside tape [0, 4)" in str(exc.value)


def test_input_stream_failure():
    class BrokenInput:
        def read(self, n):
            raise OSError("input closed")

    machine = Machine(parse(","), stdin=BrokenInput(), stdout=io.BytesIO())
    with pytest.raises(IOFailure, match="input closed") as exc:
        machine.run()
    assert isinstance(exc.value.__cause__, OSError)


def test_output_stream_failure():
    class BrokenOutput:
        def write(self, data):
            raise OSError("pipe closed")

    machine = Machine(parse("+."), stdin=b"", stdout=BrokenOutput())
    with pytest.raises(IOFailure, match="pipe closed"):
        machine.run()


def test_errors_share_a_base():
    for cls in (IOFailure, EndOfInput, UnbalancedBracketsError, TapeBoundsError):
        assert issubclass(cls, BFVMError)


def test_describe_adds_hint():
    machine, _ = make_machine("[")
    with pytest.raises(UnbalancedBracketsError) as exc:
        machine.run()
    text = describe(exc.value)
    assert text.startswith("[0] unmatched '['")
    assert "\nHint: " in text
    assert describe(IOFailure(message="boom")) == "boom"


if __name__ == "__main__":
    raise SystemExit(pytest.main([__file__]))
