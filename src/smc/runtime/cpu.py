import logging as lg
from typing import Callable, Dict

import smc.common.ops as ops
import smc.common.codec as codec
from smc.common.codec import wrap16
from smc.common.command import Command, Program
from smc.common.hwconf import REGISTER_COUNT
from smc.common.errors import (
    EmptyProgramError, InvalidAddressError, InvalidChannelError, InvalidOpcodeError,
    DivideByZeroError
)

InputChannel = Callable[[], int]
OutputChannel = Callable[[int], None]
HaltedHandler = Callable[[], None]


def trunc_div(a: int, b: int) -> int:
    # Rounds toward zero, unlike //
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def trunc_mod(a: int, b: int) -> int:
    # Takes the sign of the dividend, unlike %
    return a - b * trunc_div(a, b)


CONDITIONS: Dict[int, Callable[[int], bool]] = {
    ops.JMP_UNCONDITIONAL: lambda _: True,
    ops.JMP_EQUAL: lambda cr: cr == 0,
    ops.JMP_NOT_EQUAL: lambda cr: cr != 0,
    ops.JMP_ABOVE: lambda cr: cr > 0,
    ops.JMP_ABOVE_OR_EQUAL: lambda cr: cr >= 0,
    ops.JMP_BELOW: lambda cr: cr < 0,
    ops.JMP_BELOW_OR_EQUAL: lambda cr: cr <= 0
}


class CPU():
    program: Program | None
    registers: list[int]                        # 16-bit signed, zero on reset
    compare: int                                # Compare register
    counter: int                                # Instruction counter
    halted: bool
    input_channels: Dict[int, InputChannel]
    output_channels: Dict[int, OutputChannel]
    on_halted: HaltedHandler | None             # Single subscriber

    def __init__(self, program: Program | None = None):
        self.program = program
        self.reset()

    def reset(self):
        ''' Clears the machine state and channels, keeps the program '''
        self.registers = [0] * REGISTER_COUNT
        self.input_channels = dict()
        self.output_channels = dict()
        self.on_halted = None
        self.compare = 0
        self.counter = 0
        self.halted = False

    def load(self, program: Program):
        ''' Replaces the program, the counter is left as is '''
        self.program = program

    # - Helpers - #

    def debug_dump(self):
        state = [f'{k}:{v}' for k, v in {
            'IC': self.counter,
            'CR': self.compare,
            'HLT': int(self.halted)
        }.items()]

        state.extend([f'R{i}:{v}' for i, v in enumerate(self.registers) if v != 0])

        lg.debug(' '.join(state))

    def fetch(self) -> Command:
        if not self.program:
            raise EmptyProgramError()

        if self.counter < 0 or self.counter >= len(self.program):
            raise InvalidAddressError(self.counter)

        return self.program[self.counter]

    def arithm_pair(self, cmd: Command, op: Callable[[int, int], int]):
        a = self.registers[cmd.data2]
        b = self.registers[cmd.data3]
        self.registers[cmd.data1] = wrap16(op(a, b))

    def check_divisor(self, cmd: Command):
        if self.registers[cmd.data3] == 0:
            raise DivideByZeroError(self.counter)

    # - Operations - #
    # Each returns the jump target or None to fall through

    def load_const(self, cmd: Command):
        self.registers[cmd.data1] = codec.join(cmd.data2, cmd.data3)

    def inp(self, cmd: Command):
        channel = self.input_channels.get(cmd.data2)

        if channel is None:
            raise InvalidChannelError(cmd.data2, 'input')

        self.registers[cmd.data1] = wrap16(channel())

    def out(self, cmd: Command):
        channel = self.output_channels.get(cmd.data2)

        if channel is None:
            raise InvalidChannelError(cmd.data2, 'output')

        channel(self.registers[cmd.data1])

    def cmp(self, cmd: Command):
        self.compare = wrap16(self.registers[cmd.data1] - self.registers[cmd.data2])

    def jmp(self, cmd: Command) -> int | None:
        # Unknown condition codes never jump
        condition = CONDITIONS.get(cmd.data1)

        if condition is not None and condition(self.compare):
            return codec.join(cmd.data2, cmd.data3)

        return None

    def hlt(self, cmd: Command):
        self.halted = True
        lg.debug(f'Halted at {self.counter}')

        if self.on_halted is not None:
            self.on_halted()

    # - Arithmetic - #

    def add(self, cmd: Command):
        self.arithm_pair(cmd, lambda a, b: a + b)

    def sub(self, cmd: Command):
        self.arithm_pair(cmd, lambda a, b: a - b)

    def mul(self, cmd: Command):
        self.arithm_pair(cmd, lambda a, b: a * b)

    def div(self, cmd: Command):
        self.check_divisor(cmd)
        self.arithm_pair(cmd, trunc_div)

    def mod(self, cmd: Command):
        self.check_divisor(cmd)
        self.arithm_pair(cmd, trunc_mod)

    # Shift counts use the low 5 bits, as on a 32-bit intermediate
    def lsh(self, cmd: Command):
        self.arithm_pair(cmd, lambda a, b: a << (b & 0x1F))

    def rsh(self, cmd: Command):
        self.arithm_pair(cmd, lambda a, b: a >> (b & 0x1F))

    # - Logical - #

    def band(self, cmd: Command):
        self.arithm_pair(cmd, lambda a, b: a & b)

    def bor(self, cmd: Command):
        self.arithm_pair(cmd, lambda a, b: a | b)

    def xor(self, cmd: Command):
        self.arithm_pair(cmd, lambda a, b: a ^ b)

    def inv(self, cmd: Command):
        self.registers[cmd.data1] = wrap16(~self.registers[cmd.data2])

    HANDLERS = {
        ops.LOAD: load_const,
        ops.INP: inp,
        ops.OUT: out,
        ops.ADD: add,
        ops.SUB: sub,
        ops.MUL: mul,
        ops.DIV: div,
        ops.MOD: mod,
        ops.LSH: lsh,
        ops.RSH: rsh,
        ops.CMP: cmp,
        ops.JMP: jmp,
        ops.AND: band,
        ops.BOR: bor,
        ops.NOT: inv,
        ops.XOR: xor,
        ops.HLT: hlt
    }

    # -- Implementation -- #

    def step(self):
        if self.halted:
            return

        cmd = self.fetch()
        handler = self.HANDLERS.get(cmd.opcode)

        if handler is None:
            raise InvalidOpcodeError(cmd.opcode)

        target = handler(self, cmd)

        if target is None:
            self.counter = wrap16(self.counter + 1)
        else:
            self.counter = target

    def run_to_halt(self):
        while not self.halted:
            self.step()
