import struct

import pytest

from pngchunks.chunk import PNGChunk
from pngchunks.chunk_type import ChunkType
from pngchunks.exceptions import (
    BadSignatureException,
    ChecksumMismatchException,
    NotFoundException,
    TruncatedException,
)
from pngchunks.png import PNGFile, PNG_SIGNATURE


def build_chunk(chunk_type, data):
    return PNGChunk(ChunkType.from_string(chunk_type), data.encode())


@pytest.fixture
def chunks():
    return [
        build_chunk('FrSt', 'I am the first chunk'),
        build_chunk('miDl', 'I am another chunk'),
        build_chunk('LASt', 'I am the last chunk'),
    ]


@pytest.fixture
def png(chunks):
    return PNGFile.from_chunks(chunks)


def test_header(png):
    """Check header is right"""
    assert png.header == b'\x89PNG\x0d\x0a\x1a\x0a'
    assert png.raw[:8] == PNG_SIGNATURE


def test_from_chunks(png, chunks):
    assert len(png) == 3
    assert list(png.chunks) == chunks
    assert list(png) == chunks
    assert png[1] == chunks[1]


def test_parse(png, chunks):
    parsed = PNGFile.parse(png.pack())

    assert parsed == png
    assert parsed.chunks == tuple(chunks)
    assert parsed.pack() == png.pack()


def test_parse_only_signature():
    png = PNGFile.parse(PNG_SIGNATURE)

    assert len(png) == 0
    assert png.pack() == PNG_SIGNATURE


@pytest.mark.parametrize('signature', [
    b'',
    b'\x89PNG',
    b'\x88PNG\x0d\x0a\x1a\x0a',
    b'GIF89a\x00\x00',
])
def test_parse_bad_signature(png, signature):
    with pytest.raises(BadSignatureException):
        PNGFile.parse(signature + png.pack()[8:])


def test_parse_truncated(png):
    raw = png.pack()

    with pytest.raises(TruncatedException) as excinfo:
        PNGFile.parse(raw[:-1])

    assert excinfo.value.chain == ['chunks[2]']


def test_parse_truncated_length_field():
    with pytest.raises(TruncatedException):
        PNGFile.parse(PNG_SIGNATURE + b'\x00\x00')


def test_parse_uses_declared_length():
    """The container relies on the length field to find the chunks' boundaries."""
    first = build_chunk('FrSt', 'abc').pack()
    # declare one byte more than the data actually available: the slice
    # swallows the first byte of the next chunk and the CRC doesn't match
    broken = struct.pack('>I', 4) + first[4:]

    with pytest.raises(ChecksumMismatchException) as excinfo:
        PNGFile.parse(PNG_SIGNATURE + broken + build_chunk('LASt', 'xyz').pack())

    assert excinfo.value.chain == ['chunks[0]']


def test_parse_declared_length_past_the_end():
    first = build_chunk('FrSt', 'abc').pack()
    broken = struct.pack('>I', 1000) + first[4:]

    with pytest.raises(TruncatedException) as excinfo:
        PNGFile.parse(PNG_SIGNATURE + broken)

    assert excinfo.value.chain == ['chunks[0]']
    assert excinfo.value.needed == 1012
    assert excinfo.value.available == len(broken)


def test_parse_declared_length_sets_boundary():
    """A declared length shorter than the remaining bytes ends the chunk there."""
    first = build_chunk('EmPt', '')
    second = build_chunk('TeSt', 'abc')
    raw = first.pack() + second.pack()

    png = PNGFile.parse(PNG_SIGNATURE + raw)

    assert list(png) == [first, second]

    # while a single chunk takes everything up to the last 4 bytes as data
    with pytest.raises(ChecksumMismatchException):
        PNGChunk.parse(raw)


def test_parse_wrong_crc(png):
    raw = bytearray(png.pack())
    # corrupt the data of the second chunk
    offset = 8 + png[0].size + 8
    raw[offset] ^= 0xff

    with pytest.raises(ChecksumMismatchException) as excinfo:
        PNGFile.parse(bytes(raw))

    assert excinfo.value.chain == ['chunks[1]']
    assert 'chunks[1]' in str(excinfo.value)


def test_append_chunk(png):
    chunk = build_chunk('TeSt', 'Message')
    png.append_chunk(chunk)

    assert len(png) == 4
    assert png.chunks[-1] is chunk
    assert png.chunk_by_type('TeSt') is chunk
    assert png.chunk_by_type('TeSt').data_as_text() == 'Message'


def test_append_keeps_duplicates(png):
    png.append_chunk(build_chunk('FrSt', 'again'))

    assert len(png) == 4
    assert png.chunk_by_type('FrSt').data_as_text() == 'I am the first chunk'
    assert [_.data_as_text() for _ in png.chunks_by_type('FrSt')] == [
        'I am the first chunk',
        'again',
    ]


def test_chunk_by_type(png):
    chunk = png.chunk_by_type('FrSt')

    assert str(chunk.chunk_type) == 'FrSt'
    assert chunk.data_as_text() == 'I am the first chunk'

    assert png.chunk_by_type('frst') is None
    assert png.chunk_by_type('NoPe') is None


def test_remove_chunk(png):
    png.append_chunk(build_chunk('TeSt', 'Message'))

    chunk = png.remove_chunk('TeSt')

    assert chunk.data_as_text() == 'Message'
    assert png.chunk_by_type('TeSt') is None
    assert len(png) == 3


def test_remove_first_chunk_only(png):
    png.append_chunk(build_chunk('FrSt', 'again'))

    chunk = png.remove_chunk('FrSt')

    assert chunk.data_as_text() == 'I am the first chunk'
    assert png.chunk_by_type('FrSt').data_as_text() == 'again'
    assert [str(_.chunk_type) for _ in png] == ['miDl', 'LASt', 'FrSt']


def test_remove_missing_chunk(png):
    with pytest.raises(NotFoundException) as excinfo:
        png.remove_chunk('NoPe')

    assert excinfo.value.chunk_type == 'NoPe'
    assert len(png) == 3


def test_chunks_is_read_only(png):
    chunks = png.chunks

    with pytest.raises(TypeError):
        chunks[0] = build_chunk('TeSt', 'nope')


def test_round_trip_after_mutation(png):
    png.append_chunk(build_chunk('TeSt', 'Message'))
    png.remove_chunk('miDl')

    assert PNGFile.parse(png.pack()) == png


def test_real_png_file(png_path):
    """Check parsing a file generated by Pillow is fine"""
    raw = png_path.read_bytes()
    png = PNGFile.load(png_path)

    assert str(png.chunks[0].chunk_type) == 'IHDR'
    assert str(png.chunks[-1].chunk_type) == 'IEND'
    assert png.chunk_by_type('IDAT') is not None
    assert all(_.chunk_type.is_valid() for _ in png)
    assert png.pack() == raw


def test_save(png, tmp_path):
    path = tmp_path / 'out.png'

    png.save(path)

    assert path.read_bytes() == png.pack()
    assert PNGFile.load(path) == png
