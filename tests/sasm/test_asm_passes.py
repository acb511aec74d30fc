import pytest

import smc.sasm.asm as asm
from smc.common.errors import MalformedLine, DuplicateJumpLabel


def test_preprocess_strips_comments_and_blanks():
    source = 'load 1,0 // one\n\n   \n// only a comment\r\nhalt\r\n'
    assert asm.preprocess(source) == ['load 1,0 ', 'halt']


def test_preprocess_newline_conventions():
    assert asm.preprocess('a\nb\r\nc\rd') == ['a', 'b', 'c', 'd']


def test_labels_take_no_address():
    jump_map, lines = asm.resolve_labels([':start', 'load 1,0', ':middle', ':again', 'halt', ':end'])

    assert lines == ['load 1,0', 'halt']
    assert jump_map == {'start': 0, 'middle': 1, 'again': 1, 'end': 2}


def test_label_trimmed():
    jump_map, _ = asm.resolve_labels(['  :spaced   ', 'halt'])
    assert jump_map == {'spaced': 0}


def test_duplicate_label():
    with pytest.raises(DuplicateJumpLabel) as e:
        asm.resolve_labels([':x', 'halt', ':x'])

    assert e.value.label == 'x'


def test_empty_label():
    with pytest.raises(MalformedLine):
        asm.resolve_labels([':', 'halt'])


def test_split_line():
    assert asm.split_line('add 1, 2,3') == ('add', ['1', '2', '3'])
    assert asm.split_line('  halt  ') == ('halt', [])
    assert asm.split_line('jump\tequal, :end') == ('jump', ['equal', ':end'])


def test_split_line_drops_empty_operands():
    assert asm.split_line('add 1,2,3,') == ('add', ['1', '2', '3'])
    assert asm.split_line('add 1,, 2,3') == ('add', ['1', '2', '3'])
