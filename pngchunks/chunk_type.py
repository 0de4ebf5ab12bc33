'''
# Chunk type

Four bytes identifying a chunk; the case of each letter (i.e. bit 5 of each
byte) encodes a property of the chunk:

 1. first byte: ancillary bit, uppercase means critical
 2. second byte: private bit, uppercase means public
 3. third byte: reserved bit, must be uppercase
 4. fourth byte: safe-to-copy bit, lowercase means safe to copy

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structure.html#Chunk-naming-conventions>.
'''
from bitstring import Bits

from .enum import ChunkProperty
from .exceptions import InvalidArgumentException, InvalidFormatException


# the bit that distinguishes lowercase from uppercase in ASCII
PROPERTY_BIT = 5


def get_bit_at(byte: int, n: int) -> bool:
    if not 0 <= n < 8:
        raise InvalidArgumentException(f'bit index must be between 0 and 7, got {n}')

    # bitstring indexes from the most significant bit
    return Bits(uint=byte, length=8)[7 - n]


class ChunkType(object):
    '''The raw bytes are stored as they are, validity is a property you can
    ask for with is_valid(), not a requirement for building an instance.'''

    SIZE = 4

    def __init__(self, raw: bytes):
        if len(raw) != self.SIZE:
            raise InvalidArgumentException(f'a chunk type is {self.SIZE} bytes long, got {len(raw)}')

        self._raw = bytes(raw)

    @classmethod
    def from_string(cls, value: str) -> 'ChunkType':
        raw = value.encode('utf-8')
        if len(raw) != cls.SIZE or not raw.isalpha():
            raise InvalidFormatException(value)

        return cls(raw)

    @property
    def raw(self) -> bytes:
        return self._raw

    def bytes(self) -> bytes:
        return self._raw

    def _flag(self, index: int) -> bool:
        return get_bit_at(self._raw[index], PROPERTY_BIT)

    def is_valid(self) -> bool:
        return self._raw.isalpha() and self.is_reserved_bit_valid()

    def is_critical(self) -> bool:
        return not self._flag(0)

    def is_public(self) -> bool:
        return not self._flag(1)

    def is_reserved_bit_valid(self) -> bool:
        return not self._flag(2)

    def is_safe_to_copy(self) -> bool:
        return self._flag(3)

    @property
    def properties(self) -> ChunkProperty:
        checks = (
            (self.is_critical, ChunkProperty.CRITICAL),
            (self.is_public, ChunkProperty.PUBLIC),
            (self.is_reserved_bit_valid, ChunkProperty.RESERVED_OK),
            (self.is_safe_to_copy, ChunkProperty.SAFE_TO_COPY),
        )

        result = ChunkProperty.NONE
        for check, flag in checks:
            if check():
                result |= flag

        return result

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented

        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    def __repr__(self):
        return '<%s(%r)>' % (self.__class__.__name__, self._raw)

    def __str__(self):
        return self._raw.decode('utf-8', errors='replace')
