'''Fixed-width opaque identifiers for elections and proposals.

Election and proposal names are fixed-length byte strings: callers supply
text that is encoded and right-padded with zero bytes to :data:`NAME_LENGTH`.
Two names are equal only if their bytes are identical, so names differing
in case, whitespace or any other byte are distinct. The core never
interprets names as human text; :attr:`Name.text` exists for display only.
'''

from __future__ import annotations

from typing import Union


NAME_LENGTH: int = 32
'''Width of every name in bytes.'''

PADDING: bytes = b'\x00'


class NameLengthError(ValueError):
    '''A name does not fit into the fixed width.

    :param value: The offending value.
    :param length: Its length in bytes after encoding.
    '''
    def __init__(self, value: Union[str, bytes], length: int):
        self.value = value
        self.length = length
        super().__init__(
            f'name too long: {value!r} has {length} bytes,'
            f' must be at most {NAME_LENGTH}'
        )


class NameTypeError(TypeError):
    '''A value of a type that cannot be made into a name.'''
    def __init__(self, value):
        self.value = value
        super().__init__(
            f'invalid name type: {type(value).__name__}, must be str or bytes'
        )


class Name(bytes):
    '''An election or proposal name; exactly :data:`NAME_LENGTH` bytes.

    Construct from raw bytes of the exact width, or use :meth:`from_text`
    or :func:`to_name` to pad shorter values.
    '''
    def __new__(cls, value: bytes = PADDING * NAME_LENGTH):
        if not isinstance(value, (bytes, bytearray)):
            raise NameTypeError(value)
        if len(value) != NAME_LENGTH:
            raise NameLengthError(value, len(value))
        return super().__new__(cls, value)

    @classmethod
    def from_text(cls, text: str, encoding: str = 'utf8') -> Name:
        '''Encode the text and right-pad it with zero bytes.'''
        if not isinstance(text, str):
            raise NameTypeError(text)
        return cls.from_bytes_padded(text.encode(encoding))

    @classmethod
    def from_bytes_padded(cls, value: bytes) -> Name:
        '''Right-pad raw bytes with zero bytes to the full width.'''
        if len(value) > NAME_LENGTH:
            raise NameLengthError(value, len(value))
        return cls(bytes(value).ljust(NAME_LENGTH, PADDING))

    @property
    def text(self) -> str:
        '''Display text with the trailing padding removed.'''
        return bytes(self).rstrip(PADDING).decode('utf8', errors='replace')

    def __repr__(self) -> str:
        return f'<Name({self.text!r})>'

    def __str__(self) -> str:
        return self.text


NameLike = Union[Name, bytes, bytearray, str]


def to_name(value: NameLike, encoding: str = 'utf8') -> Name:
    '''Coerce a name, raw bytes or text into a :class:`Name`.

    :param value: A name (returned unchanged), bytes (padded) or text
        (encoded and padded).
    :param encoding: Encoding used for text values.
    :raises NameLengthError: If the value is wider than the fixed width.
    :raises NameTypeError: If the value is not text or bytes.
    '''
    if isinstance(value, Name):
        return value
    elif isinstance(value, (bytes, bytearray)):
        return Name.from_bytes_padded(value)
    elif isinstance(value, str):
        return Name.from_text(value, encoding=encoding)
    else:
        raise NameTypeError(value)
