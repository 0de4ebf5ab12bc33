'''
# Chunk

This is the main data structure of the format: the 4 fields represent
a chunk into the file. Each integer is intended big-endian.

    +--------+------+----------------+-----+
    | length | type | data           | crc |
    +--------+------+----------------+-----+
        4       4     length bytes      4

The crc field is network-byte-order CRC-32 computed over the chunk type and
chunk data, but not the length.
'''
import logging
import struct

from .chunk_type import ChunkType
from .common.crc import calculate_crc
from .exceptions import (
    ChecksumMismatchException,
    InvalidEncodingException,
    TruncatedException,
    UnrecoverableException,
)


logger = logging.getLogger(__name__)

UINT32_FORMAT = '>I'


class PNGChunk(object):

    # length + type + crc, i.e. a chunk without data
    MIN_LENGTH = 12

    def __init__(self, chunk_type: ChunkType, data: bytes):
        self._chunk_type = chunk_type
        self._data = bytes(data)
        self._length = len(self._data) & 0xffffffff
        self._crc = self.calculate_crc()

    @classmethod
    def parse(cls, raw: bytes) -> 'PNGChunk':
        '''Build a chunk from exactly one chunk's worth of bytes.

        The boundaries of the data are taken from the size of "raw" and the
        length field is only kept for informational purpose: it's up to the
        caller (see PNGFile.parse()) to slice the stream using it.'''
        if len(raw) < cls.MIN_LENGTH:
            raise TruncatedException(needed=cls.MIN_LENGTH, available=len(raw))

        length = struct.unpack(UINT32_FORMAT, raw[:4])[0]
        chunk_type = ChunkType(raw[4:8])
        data = bytes(raw[8:len(raw) - 4])

        logger.debug('parsing chunk \'%s\' with declared length %d and %d bytes of data' % (
            chunk_type, length, len(data)))

        crc_raw = raw[8 + len(data):]
        if len(crc_raw) != 4:
            raise UnrecoverableException(f'expected 4 bytes of CRC, {len(crc_raw)} are left')

        crc = struct.unpack(UINT32_FORMAT, crc_raw)[0]
        expected = calculate_crc(chunk_type.bytes(), data)

        if crc != expected:
            logger.warning(f'CRC for chunk \'{chunk_type}\' doesn\'t correspond')
            raise ChecksumMismatchException(expected=expected, actual=crc)

        chunk = cls.__new__(cls)
        chunk._chunk_type = chunk_type
        chunk._data = data
        chunk._length = length
        chunk._crc = crc

        return chunk

    @property
    def length(self) -> int:
        return self._length

    @property
    def chunk_type(self) -> ChunkType:
        return self._chunk_type

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def crc(self) -> int:
        return self._crc

    @property
    def size(self) -> int:
        return self.MIN_LENGTH + len(self._data)

    def calculate_crc(self) -> int:
        return calculate_crc(self._chunk_type.bytes(), self._data)

    def data_as_text(self) -> str:
        try:
            return self._data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidEncodingException(f'data of chunk \'{self._chunk_type}\' is not valid UTF-8: {e}') from e

    def is_critical(self) -> bool:
        return self._chunk_type.is_critical()

    def pack(self) -> bytes:
        return b''.join([
            struct.pack(UINT32_FORMAT, self._length),
            self._chunk_type.bytes(),
            self._data,
            struct.pack(UINT32_FORMAT, self._crc),
        ])

    @property
    def raw(self) -> bytes:
        return self.pack()

    def __eq__(self, other):
        if not isinstance(other, PNGChunk):
            return NotImplemented

        return (self._length, self._chunk_type, self._data, self._crc) == \
            (other._length, other._chunk_type, other._data, other._crc)

    def __repr__(self):
        return '<%s(type=%r,length=%d,crc=%08x)>' % (
            self.__class__.__name__,
            str(self._chunk_type),
            self._length,
            self._crc,
        )

    def __str__(self):
        return (
            'Chunk {\n'
            f'  Length: {self._length}\n'
            f'  Type: {self._chunk_type}\n'
            f'  Data: {len(self._data)} bytes\n'
            f'  Crc: {self._crc}\n'
            '}'
        )
