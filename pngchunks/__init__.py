"""
# pngchunks: PNG files at the chunk level.

A PNG file is the 8 bytes signature followed by a list of chunks, each one
made of

 1. length: 4 bytes big-endian, the size of the data
 2. type: 4 ASCII letters
 3. data: length bytes, anything
 4. crc: CRC-32 of type and data

Two main operations are defined for the file and its chunks:

 1. parse(): read the binary data and build the high-level representation,
    checking the signature and the CRC of each chunk.

 2. pack(): encode the high-level representation back into binary data,
    byte-exact with respect to what was parsed.

In between you can append, look up and remove chunks by their type.
"""
from .chunk_type import ChunkType
from .chunk import PNGChunk
from .png import PNGFile, PNG_SIGNATURE
from .enum import ChunkProperty
from .exceptions import (
    PNGChunksException,
    BadSignatureException,
    TruncatedException,
    ChecksumMismatchException,
    InvalidFormatException,
    InvalidEncodingException,
    NotFoundException,
    InvalidArgumentException,
    UnrecoverableException,
)
