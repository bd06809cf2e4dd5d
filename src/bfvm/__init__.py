from .errors import BFVMError, EndOfInput, IOFailure, TapeBoundsError, UnbalancedBracketsError
from .lexer import Instruction, parse, parse_byte, parse_file, to_source, tokenize
from .machine import Machine
from .state import TAPE_SIZE, MachineState, dump_tape
from .api import RunOptions, RunResult, run_file, run_program, run_string

__all__ = [
    'BFVMError',
    'EndOfInput',
    'IOFailure',
    'TapeBoundsError',
    'UnbalancedBracketsError',
    'Instruction',
    'parse',
    'parse_byte',
    'parse_file',
    'to_source',
    'tokenize',
    'Machine',
    'MachineState',
    'TAPE_SIZE',
    'dump_tape',
    'RunOptions',
    'RunResult',
    'run_file',
    'run_program',
    'run_string',
]
