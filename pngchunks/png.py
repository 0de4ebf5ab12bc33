'''
# Portable Network Graphics

Format created to replace patent-emcumbered GIF files.

A PNG file is a signature followed by a sequence of chunks: here a chunk
type is an opaque tag, nothing is interpreted (not even IHDR or IEND) and no
ordering is enforced.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html>.
'''
import logging
import struct
from typing import List, Optional, Tuple

from .chunk import PNGChunk, UINT32_FORMAT
from .exceptions import (
    BadSignatureException,
    NotFoundException,
    PNGChunksException,
)
from .streams import Stream, read_all, write_all


logger = logging.getLogger(__name__)

PNG_SIGNATURE = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'


class PNGFile(object):
    '''Container of chunks: the signature is implicit and the order of the
    chunks is the one they were parsed or appended with.'''

    def __init__(self, chunks=None):
        self._chunks: List[PNGChunk] = list(chunks) if chunks is not None else []

    @classmethod
    def from_chunks(cls, chunks) -> 'PNGFile':
        return cls(chunks)

    @classmethod
    def parse(cls, raw: bytes) -> 'PNGFile':
        '''Differently from PNGChunk.parse() here the length field is authoritative:
        each chunk spans exactly 12 + length bytes from its start.'''
        stream = Stream(raw)

        magic = stream.read(len(PNG_SIGNATURE))
        if magic != PNG_SIGNATURE:
            logger.warning('the magic doesn\'t correspond')
            raise BadSignatureException(magic)

        chunks = []
        while not stream.at_end():
            idx = len(chunks)
            offset = stream.tell()
            try:
                stream.save()
                length = struct.unpack(UINT32_FORMAT, stream.read_exactly(4))[0]
                stream.restore()

                chunk = PNGChunk.parse(stream.read_exactly(PNGChunk.MIN_LENGTH + length))
            except PNGChunksException as e:
                e.chain.append(f'chunks[{idx}]')
                raise

            logger.debug('chunk %d \'%s\' at offset 0x%08x' % (idx, chunk.chunk_type, offset))
            chunks.append(chunk)

        return cls(chunks)

    @classmethod
    def load(cls, path) -> 'PNGFile':
        logger.debug(f'unpacking \'{cls.__name__}\' from {path}')
        return cls.parse(read_all(path))

    def save(self, path) -> None:
        write_all(path, self.pack())

    @property
    def header(self) -> bytes:
        return PNG_SIGNATURE

    @property
    def chunks(self) -> Tuple[PNGChunk, ...]:
        return tuple(self._chunks)

    def append_chunk(self, chunk: PNGChunk) -> None:
        self._chunks.append(chunk)

    def _index_by_type(self, chunk_type: str) -> Optional[int]:
        for idx, chunk in enumerate(self._chunks):
            if str(chunk.chunk_type) == chunk_type:
                return idx

        return None

    def remove_chunk(self, chunk_type: str) -> PNGChunk:
        '''Remove the first chunk with the given type'''
        idx = self._index_by_type(chunk_type)
        if idx is None:
            raise NotFoundException(chunk_type)

        return self._chunks.pop(idx)

    def chunk_by_type(self, chunk_type: str) -> Optional[PNGChunk]:
        idx = self._index_by_type(chunk_type)

        return self._chunks[idx] if idx is not None else None

    def chunks_by_type(self, chunk_type: str) -> List[PNGChunk]:
        return [_ for _ in self._chunks if str(_.chunk_type) == chunk_type]

    def pack(self) -> bytes:
        value = [PNG_SIGNATURE]
        for chunk in self._chunks:
            logger.debug('packing %r' % chunk)
            value.append(chunk.pack())

        return b''.join(value)

    @property
    def raw(self) -> bytes:
        return self.pack()

    def __len__(self):
        return len(self._chunks)

    def __iter__(self):
        return iter(self._chunks)

    def __getitem__(self, item):
        return self._chunks[item]

    def __eq__(self, other):
        if not isinstance(other, PNGFile):
            return NotImplemented

        return self._chunks == other._chunks

    def __repr__(self):
        return f'<{self.__class__.__name__}({self._chunks!r})>'

    def __str__(self):
        return '\n'.join(str(_) for _ in self._chunks)
