#!/usr/bin/env python3

import io
import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfvm import Machine, parse_file


def main():
    program = parse_file(os.path.join(os.path.dirname(__file__), "move.bf"))
    machine = Machine(program, stdin=b"", stdout=io.BytesIO(), tape_size=8, trace=True)

    while machine.step():
        pass

    print("\n".join(machine.state.trace))
    print(f"cells: {list(int(v) for v in machine.state.tape[:2])}")


if __name__ == "__main__":
    main()
