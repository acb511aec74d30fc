import pytest

import smc.common.codec as codec


def test_split_positive():
    assert codec.split(200) == (0, 200)
    assert codec.split(0x1234) == (0x12, 0x34)


def test_split_negative():
    assert codec.split(-1) == (0xFF, 0xFF)
    assert codec.split(-32768) == (0x80, 0x00)


def test_join_is_signed():
    assert codec.join(0x7F, 0xFF) == 32767
    assert codec.join(0x80, 0x00) == -32768
    assert codec.join(0xFF, 0xFE) == -2


def test_split_join_inverse():
    for value in range(-32768, 32768, 7):
        assert codec.join(*codec.split(value)) == value

    assert codec.join(*codec.split(32767)) == 32767


def test_split_out_of_range():
    with pytest.raises(ValueError):
        codec.split(32768)

    with pytest.raises(ValueError):
        codec.split(-32769)


def test_wrap16():
    assert codec.wrap16(32768) == -32768
    assert codec.wrap16(-32769) == 32767
    assert codec.wrap16(249 * 60) == 14940
    assert codec.wrap16(300 * 300) == 90000 - 65536
    assert codec.wrap16(-5) == -5
