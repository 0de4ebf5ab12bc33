import struct

import pytest
from PIL import Image

from pngchunks.chunk_type import ChunkType


MESSAGE = b'This is where your secret message will be!'
MESSAGE_CRC = 2882656334


def build_raw_chunk(length, chunk_type, data, crc):
    return struct.pack('>I', length) + chunk_type + data + struct.pack('>I', crc)


@pytest.fixture
def rust_type():
    return ChunkType.from_string('RuSt')


@pytest.fixture
def raw_rust_chunk():
    return build_raw_chunk(42, b'RuSt', MESSAGE, MESSAGE_CRC)


@pytest.fixture
def png_path(tmp_path):
    """A real 4x4 red PNG file created by Pillow."""
    path = tmp_path / 'red.png'
    Image.new('RGB', (4, 4), 'red').save(path, format='PNG')

    return path
