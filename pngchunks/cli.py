"""Command line entry point: hide, read and remove messages in PNG chunks.

    $ pngchunks encode image.png RuSt 'secret message' out.png
    $ pngchunks decode out.png RuSt
    $ pngchunks remove out.png RuSt
    $ pngchunks print out.png

Set the DEBUG environment variable to see what happens under the hood.
"""
import argparse
import logging
import os
import sys

from . import commands
from .chunk_type import ChunkType
from .exceptions import InvalidFormatException, PNGChunksException


logger = logging.getLogger(__name__)


def chunk_type_argument(value: str) -> ChunkType:
    try:
        return ChunkType.from_string(value)
    except InvalidFormatException as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pngchunks',
        description='Hide messages into the chunks of a PNG file',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    encode = subparsers.add_parser('encode', help='append a chunk containing a message')
    encode.add_argument('file_path', help='PNG file to read')
    encode.add_argument('chunk_type', type=chunk_type_argument, help='4 letters chunk type')
    encode.add_argument('message', help='text to store into the chunk')
    encode.add_argument('output_file', nargs='?', default=None,
                        help='where to save the result (default: overwrite the input)')

    decode = subparsers.add_parser('decode', help='print the message stored in a chunk')
    decode.add_argument('file_path')
    decode.add_argument('chunk_type', type=chunk_type_argument)

    remove = subparsers.add_parser('remove', help='remove the first chunk with the given type')
    remove.add_argument('file_path')
    remove.add_argument('chunk_type', type=chunk_type_argument)

    print_ = subparsers.add_parser('print', help='print all the chunks')
    print_.add_argument('file_path')

    return parser


def run(args) -> None:
    if args.command == 'encode':
        commands.encode(args.file_path, args.chunk_type, args.message, args.output_file)
    elif args.command == 'decode':
        print(commands.decode(args.file_path, args.chunk_type))
    elif args.command == 'remove':
        commands.remove(args.file_path, args.chunk_type)
    elif args.command == 'print':
        for block in commands.print_chunks(args.file_path):
            print(block)


def main(argv=None) -> int:
    logging.basicConfig()
    logging.getLogger('pngchunks').setLevel(logging.DEBUG if 'DEBUG' in os.environ else logging.WARNING)

    args = build_parser().parse_args(argv)

    try:
        run(args)
    except (PNGChunksException, OSError) as e:
        logger.debug('command \'%s\' failed' % args.command, exc_info=True)
        print(f'error: {e}', file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
