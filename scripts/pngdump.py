#!/usr/bin/env python3
'''
Dump the list of chunks of a PNG file together with the properties
encoded into their types.

 $ ./scripts/pngdump.py image.png
'''
import logging
import sys
import os

from pngchunks import PNGFile, ChunkProperty


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)
logger.setLevel(level=logging.INFO if 'DEBUG' not in os.environ else logging.DEBUG)


def usage(progname):
    print(f'usage: {progname} <png file path>')
    sys.exit(1)


def format_properties(properties):
    return ','.join(_.name for _ in ChunkProperty if _ != ChunkProperty.NONE and _ in properties)


if __name__ == '__main__':
    if len(sys.argv) < 2:
        usage(sys.argv[0])

    filepath = sys.argv[1]

    png = PNGFile.load(filepath)

    for idx, chunk in enumerate(png.chunks):
        print(f'[{idx:02d}] {chunk!r} {format_properties(chunk.chunk_type.properties)}')

    invalid = [_ for _ in png if not _.chunk_type.is_valid()]
    if invalid:
        logger.warning(f'{len(invalid)} chunk(s) with invalid type')
