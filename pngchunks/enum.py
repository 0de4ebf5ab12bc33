from enum import Flag


class ChunkProperty(Flag):
    '''Properties encoded into the case of the letters of a chunk type'''
    NONE         = 0
    CRITICAL     = 1 << 0
    PUBLIC       = 1 << 1
    RESERVED_OK  = 1 << 2
    SAFE_TO_COPY = 1 << 3
