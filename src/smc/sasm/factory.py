''' Instruction builders, one per mnemonic

Typed builders (create_*) take integers and pack them into a Command.
Text builders go through build(), which parses operand tokens in source
order and hands them to the typed builder.
'''

import logging as lg
from typing import Callable, Dict, List, Sequence, Tuple

import pyparsing as pp

import smc.common.ops as ops
import smc.common.codec as codec
from smc.common.command import Command
from smc.common.hwconf import BYTE_MAX, INT16_MIN, INT16_MAX
from smc.common.errors import (
    MalformedOperand, UnrecognizedMnemonic, OperandCountMismatch, UnrecognizedJumpCondition
)
import smc.sasm.grammar as grammar

Parser = Callable[[str], int]
Builder = Callable[..., Command]


# - Operand parsers - #

def parse_ranged(element: pp.ParserElement, token: str, low: int, high: int) -> int:
    try:
        value = grammar.parse_token(element, token)
    except (pp.ParseException, ValueError) as e:
        # ValueError: int() refuses overly long digit strings
        raise MalformedOperand(token) from e

    if value < low or value > high:
        raise MalformedOperand(token)

    return value


def parse_register(token: str) -> int:
    return parse_ranged(grammar.register, token, 0, BYTE_MAX)


def parse_channel(token: str) -> int:
    return parse_ranged(grammar.channel, token, 0, BYTE_MAX)


def parse_sconst(token: str) -> int:
    return parse_ranged(grammar.s_const, token, INT16_MIN, INT16_MAX)


def parse_condition(token: str) -> int:
    try:
        return grammar.parse_token(grammar.condition, token)
    except pp.ParseException as e:
        raise UnrecognizedJumpCondition(token) from e


# - Typed builders - #

def create_load(value: int, register: int) -> Command:
    high, low = codec.split(value)
    return Command(ops.LOAD, register, high, low)


def create_input(register: int, channel: int) -> Command:
    return Command(ops.INP, register, channel)


def create_output(register: int, channel: int) -> Command:
    return Command(ops.OUT, register, channel)


def g_binary(op: int) -> Builder:
    def create(source1: int, source2: int, destination: int) -> Command:
        return Command(op, destination, source1, source2)

    return create


create_add = g_binary(ops.ADD)
create_subtract = g_binary(ops.SUB)
create_multiply = g_binary(ops.MUL)
create_divide = g_binary(ops.DIV)
create_modulus = g_binary(ops.MOD)
create_leftshift = g_binary(ops.LSH)
create_rightshift = g_binary(ops.RSH)
create_logicaland = g_binary(ops.AND)
create_logicalor = g_binary(ops.BOR)
create_logicalxor = g_binary(ops.XOR)


def create_compare(source1: int, source2: int) -> Command:
    return Command(ops.CMP, source1, source2)


def create_jump(condition: int, address: int) -> Command:
    high, low = codec.split(address)
    return Command(ops.JMP, condition, high, low)


def create_logicalnot(source: int, destination: int) -> Command:
    return Command(ops.NOT, destination, source)


def create_halt() -> Command:
    return Command(ops.HLT)


# - Text builders - #

binary_operands = (parse_register, parse_register, parse_register)

BUILDERS: Dict[str, Tuple[Builder, Sequence[Parser]]] = {
    'load': (create_load, (parse_sconst, parse_register)),
    'input': (create_input, (parse_register, parse_channel)),
    'output': (create_output, (parse_register, parse_channel)),
    'add': (create_add, binary_operands),
    'subtract': (create_subtract, binary_operands),
    'multiply': (create_multiply, binary_operands),
    'divide': (create_divide, binary_operands),
    'modulus': (create_modulus, binary_operands),
    'leftshift': (create_leftshift, binary_operands),
    'rightshift': (create_rightshift, binary_operands),
    'compare': (create_compare, (parse_register, parse_register)),
    'jump': (create_jump, (parse_condition, parse_sconst)),
    'logicaland': (create_logicaland, binary_operands),
    'logicalor': (create_logicalor, binary_operands),
    'logicalnot': (create_logicalnot, (parse_register, parse_register)),
    'logicalxor': (create_logicalxor, binary_operands),
    'halt': (create_halt, ())
}


def build(line: str, mnemonic: str, operands: List[str]) -> Command:
    ''' Builds a command from source-order operand tokens

    The jump target is expected to be already resolved to a decimal address.
    '''

    if mnemonic not in BUILDERS:
        raise UnrecognizedMnemonic(line)

    builder, parsers = BUILDERS[mnemonic]

    if len(operands) != len(parsers):
        raise OperandCountMismatch(line, len(parsers), len(operands))

    values = [parse(token) for parse, token in zip(parsers, operands)]
    command = builder(*values)
    lg.debug(f'Issuing {command}')
    return command
