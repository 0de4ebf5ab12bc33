'''
Operations exposed by the command line: each one loads a PNG file, works on
its chunks and, when it modifies them, writes the file back.
'''
import logging
from typing import List

from .chunk import PNGChunk
from .chunk_type import ChunkType
from .exceptions import NotFoundException
from .png import PNGFile


logger = logging.getLogger(__name__)


def encode(file_path, chunk_type: ChunkType, message: str, output_file=None) -> PNGChunk:
    '''Append a chunk containing the message; without an output file the
    input file is rewritten.'''
    png = PNGFile.load(file_path)

    chunk = PNGChunk(chunk_type, message.encode('utf-8'))
    png.append_chunk(chunk)

    destination = output_file if output_file is not None else file_path
    logger.info(f'appending {chunk!r} and saving to \'{destination}\'')
    png.save(destination)

    return chunk


def decode(file_path, chunk_type: ChunkType) -> str:
    png = PNGFile.load(file_path)

    chunk = png.chunk_by_type(str(chunk_type))
    if chunk is None:
        raise NotFoundException(str(chunk_type))

    return chunk.data_as_text()


def remove(file_path, chunk_type: ChunkType) -> PNGChunk:
    '''Remove the first chunk of the given type; the file is rewritten in place.'''
    png = PNGFile.load(file_path)

    chunk = png.remove_chunk(str(chunk_type))
    logger.info(f'removed {chunk!r} from \'{file_path}\'')
    png.save(file_path)

    return chunk


def print_chunks(file_path) -> List[str]:
    png = PNGFile.load(file_path)

    return [str(_) for _ in png.chunks]
