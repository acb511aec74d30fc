import logging as lg
from typing import Dict, List, Tuple

import pyparsing as pp

from smc.common.command import Command, Program
from smc.common.hwconf import COMMENT_MARKER, LABEL_MARKER, WORD_SIZE, MAX_PROGRAM_SIZE
from smc.common.errors import (
    MalformedLine, UnresolvedJumpLabel, DuplicateJumpLabel, ProgramTooLarge, InstructionLengthError
)
import smc.sasm.grammar as grammar
import smc.sasm.factory as factory

JumpMap = Dict[str, int]


class FPP:
    ''' First pass processor: strips labels and renumbers the remaining lines '''
    label_dict: JumpMap
    lines: List[str]

    def __init__(self):
        self.label_dict = dict()
        self.lines = list()
        self.labels = 0

    def on_label(self, index: int, line: str):
        try:
            name = grammar.parse_token(grammar.label, line)
        except pp.ParseException as e:
            raise MalformedLine(line) from e

        if name in self.label_dict:
            raise DuplicateJumpLabel(name)

        address = index - self.labels
        self.label_dict[name] = address
        self.labels += 1
        lg.debug(f'Label {name} @ {address}')

    def on_line(self, index: int, line: str):
        # Labels take no slot: index - labels is the position among real lines
        self.lines.append(line)

    def process(self, lines: List[str]):
        for index, line in enumerate(lines):
            if line.strip().startswith(LABEL_MARKER):
                self.on_label(index, line)
            else:
                self.on_line(index, line)

        return self


def preprocess(source: str) -> List[str]:
    ''' Drops comments and blank lines, the result is indexed densely from 0 '''
    lines = []

    for line in source.splitlines():
        marker = line.find(COMMENT_MARKER)

        if marker >= 0:
            line = line[:marker]

        if line.strip():
            lines.append(line)

    return lines


def resolve_labels(lines: List[str]) -> Tuple[JumpMap, List[str]]:
    first_pass = FPP().process(lines)
    return first_pass.label_dict, first_pass.lines


def split_line(line: str) -> Tuple[str, List[str]]:
    ''' "add 1, 2,3" -> ("add", ["1", "2", "3"]) '''
    parts = line.split(None, 1)
    mnemonic = parts[0]

    if len(parts) == 1:
        return mnemonic, []

    # Empty entries ("1,,2" or a trailing comma) are dropped
    operands = [operand.strip() for operand in parts[1].split(',')]
    return mnemonic, [operand for operand in operands if operand]


def resolve_target(jump_map: JumpMap, token: str) -> int:
    try:
        name = grammar.parse_token(grammar.label_ref, token)
    except pp.ParseException as e:
        raise UnresolvedJumpLabel(token) from e

    if name not in jump_map:
        raise UnresolvedJumpLabel(token)

    return jump_map[name]


def translate_line(jump_map: JumpMap, line: str) -> Command:
    mnemonic, operands = split_line(line)

    if mnemonic == 'jump' and len(operands) == 2:
        operands[1] = str(resolve_target(jump_map, operands[1]))

    return factory.build(line, mnemonic, operands)


def compile_string(source: str) -> bytes:
    # First pass
    jump_map, lines = resolve_labels(preprocess(source))

    if len(lines) > MAX_PROGRAM_SIZE:
        raise ProgramTooLarge(len(lines))

    # Second pass
    bytestr = bytearray()

    for line in lines:
        bytestr += bytes(translate_line(jump_map, line))

    lg.info(f'Assembled {len(lines)} instruction(s), {len(jump_map)} label(s)')
    return bytes(bytestr)


def bytes_to_program(binary: bytes) -> Program:
    if len(binary) % WORD_SIZE != 0:
        raise InstructionLengthError(len(binary))

    return [
        Command.from_bytes(binary[offset:offset + WORD_SIZE])
        for offset in range(0, len(binary), WORD_SIZE)
    ]
