''' Signed 16-bit values <-> big-endian byte pairs '''

import struct
from typing import Tuple

from smc.common.hwconf import INT16_MIN, INT16_MAX


def wrap16(value: int) -> int:
    ''' Truncates an arbitrary integer to signed 16 bits (two's complement) '''
    return ((value - INT16_MIN) & 0xFFFF) + INT16_MIN


def split(value: int) -> Tuple[int, int]:
    if value < INT16_MIN or value > INT16_MAX:
        raise ValueError(f'Value {value} does not fit 16 bits')

    high, low = struct.pack('>h', value)
    return high, low


def join(high: int, low: int) -> int:
    (value,) = struct.unpack('>h', bytes([high, low]))
    return value
