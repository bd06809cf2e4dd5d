#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfvm import BFVMError, RunOptions, dump_tape, run_file

HERE = os.path.dirname(__file__)


def main():
    runs = [
        ("hello.bf", b""),
        ("hundred.bf", b""),
        ("echo.bf", b"echo me\x00"),
        ("move.bf", b""),
    ]
    for name, data in runs:
        path = os.path.join(HERE, name)
        try:
            result = run_file(path, input=data, options=RunOptions(tape_size=64))
        except BFVMError as e:
            print(f"{name}: error: {e}")
            continue
        print(f"{name}: {result.output!r} in {result.steps} steps")
        print(dump_tape(result.tape, count=16, pointer=result.pointer))


if __name__ == "__main__":
    main()
