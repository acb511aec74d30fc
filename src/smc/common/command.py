from dataclasses import dataclass
from typing import List

from smc.common.hwconf import WORD_SIZE, BYTE_MAX
import smc.common.ops as ops


@dataclass(frozen=True)
class Command:
    ''' Single instruction word: opcode + 3 data bytes '''
    opcode: int
    data1: int = 0
    data2: int = 0
    data3: int = 0

    def __post_init__(self):
        for value in (self.opcode, self.data1, self.data2, self.data3):
            if value < 0 or value > BYTE_MAX:
                raise ValueError(f'Command byte {value} out of range')

    @classmethod
    def from_bytes(cls, buf: bytes) -> 'Command':
        if len(buf) != WORD_SIZE:
            raise ValueError(f'Command takes exactly {WORD_SIZE} bytes, got {len(buf)}')

        opcode, data1, data2, data3 = buf
        return cls(opcode, data1, data2, data3)

    def __bytes__(self) -> bytes:
        return bytes([self.opcode, self.data1, self.data2, self.data3])

    @property
    def mnemonic(self) -> str:
        return ops.MNEMONICS.get(self.opcode, '???')

    def __str__(self) -> str:
        return f'{self.mnemonic} [{self.data1} {self.data2} {self.data3}]'


# Address -> Command, addresses are dense from 0
Program = List[Command]
