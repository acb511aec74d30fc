import pytest

import smc.common.ops as ops
from smc.common.command import Command
from smc.common.errors import (
    UnrecognizedMnemonic, UnresolvedJumpLabel, InstructionLengthError, ProgramTooLarge, MalformedOperand
)
import smc.sasm.asm as asm

import unit_utils


def test_compile_scenario():
    binary = asm.compile_string('load 200,1\ninput 0,0\nadd 0,1,2\nhalt')

    assert len(binary) == 16
    assert asm.bytes_to_program(binary) == [
        Command(ops.LOAD, 1, 0, 200),
        Command(ops.INP, 0, 0),
        Command(ops.ADD, 2, 0, 1),
        Command(ops.HLT),
    ]


def test_instruction_count():
    source = unit_utils.load_file('testdata/unconditional.smc')
    program = asm.bytes_to_program(asm.compile_string(source))
    assert len(program) == 6


def test_label_before_line_k():
    source = '\n'.join([
        'load 1,0',
        '// comment',
        ':first',
        '',
        'load 2,1',
        ':second',
        'jump unconditional,:first',
        'jump notequal,second',
        ':last',
    ])
    program = asm.bytes_to_program(asm.compile_string(source))

    assert program[2] == Command(ops.JMP, ops.JMP_UNCONDITIONAL, 0, 1)
    assert program[3] == Command(ops.JMP, ops.JMP_NOT_EQUAL, 0, 2)


def test_label_past_the_end():
    program = asm.bytes_to_program(asm.compile_string('jump equal,:end\n:end'))
    assert program == [Command(ops.JMP, ops.JMP_EQUAL, 0, 1)]


def test_empty_source():
    assert asm.compile_string('// nothing\n\n') == b''
    assert asm.bytes_to_program(b'') == []


def test_unknown_mnemonic_carries_line():
    with pytest.raises(UnrecognizedMnemonic) as e:
        asm.compile_string('load 1,0\nmove 1,2\nhalt')

    assert e.value.line == 'move 1,2'


def test_unresolved_label():
    with pytest.raises(UnresolvedJumpLabel) as e:
        asm.compile_string('jump unconditional,:nowhere\nhalt')

    assert e.value.label == ':nowhere'


def test_decode_length():
    binary = asm.compile_string('load 5,0\nhalt')
    assert len(asm.bytes_to_program(binary)) == 2

    with pytest.raises(InstructionLengthError) as e:
        asm.bytes_to_program(bytes(7))

    assert e.value.length == 7


def test_program_too_large():
    with pytest.raises(ProgramTooLarge):
        asm.compile_string('halt\n' * 32768)


def test_load_wide_immediates():
    proc = unit_utils.assemble('load 1000,0\nload -5,1\nload 32767,255\nhalt')
    proc.run_to_halt()
    assert (proc.registers[0], proc.registers[1], proc.registers[255]) == (1000, -5, 32767)


def test_overlong_immediate():
    with pytest.raises(MalformedOperand):
        asm.compile_string('load ' + '9' * 5000 + ',0\nhalt')


def test_trailing_comma():
    program = asm.bytes_to_program(asm.compile_string('add 1,2,3,\nhalt'))
    assert program[0] == Command(ops.ADD, 3, 1, 2)
