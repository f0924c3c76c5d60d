import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import govlib.name
from govlib.name import Name, to_name, NAME_LENGTH


def test_from_text_pads():
    name = Name.from_text('Let them eat cake')
    assert len(name) == NAME_LENGTH
    assert bytes(name) == b'Let them eat cake' + b'\x00' * 15
    assert name.text == 'Let them eat cake'


@pytest.mark.parametrize('value', [
    'Hoodies or suits?',
    b'Hoodies or suits?',
    bytearray(b'Hoodies or suits?'),
    Name.from_text('Hoodies or suits?'),
])
def test_to_name_equivalent(value):
    assert to_name(value) == Name.from_text('Hoodies or suits?')


def test_to_name_identity():
    name = Name.from_text('A')
    assert to_name(name) is name


@pytest.mark.parametrize(('first', 'second'), [
    ('A', 'a'),
    ('A', 'A '),
    ('A', ' A'),
    ('Ü', 'U'),
])
def test_exact_comparison(first, second):
    assert to_name(first) != to_name(second)
    assert len({to_name(first), to_name(second)}) == 2


def test_full_width():
    text = 'x' * NAME_LENGTH
    assert to_name(text).text == text


@pytest.mark.parametrize('value', [
    'x' * (NAME_LENGTH + 1),
    b'x' * (NAME_LENGTH + 1),
    'č' * (NAME_LENGTH // 2 + 1),
])
def test_too_long(value):
    with pytest.raises(govlib.name.NameLengthError):
        to_name(value)


def test_exact_width_required():
    with pytest.raises(govlib.name.NameLengthError):
        Name(b'short')


@pytest.mark.parametrize('value', [None, 42, ['A'], ('A',)])
def test_invalid_type(value):
    with pytest.raises(govlib.name.NameTypeError):
        to_name(value)


def test_encoding():
    name = to_name('čau', encoding='utf-16-le')
    assert bytes(name).startswith('čau'.encode('utf-16-le'))
    assert name != to_name('čau')


def test_repr():
    assert repr(Name.from_text('E1')) == "<Name('E1')>"
    assert str(Name.from_text('E1')) == 'E1'
