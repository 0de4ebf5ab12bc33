class PNGChunksException(Exception):
    '''Base class to extend in order to throw exception in pngchunks.

    The attribute "chain" lists the layers the exception went through
    while propagating, e.g. ['chunks[3]'] when the fourth chunk of a
    container was the one failing.
    '''

    def __init__(self, message='', chain=None):
        self.chain = chain if chain is not None else []
        super().__init__(message)

    def __str__(self):
        message = super().__str__()
        if not self.chain:
            return message

        return '%s (at %s)' % (message, '.'.join(reversed(self.chain)))


class BadSignatureException(PNGChunksException):

    def __init__(self, actual, chain=None):
        self.actual = actual
        super().__init__(f'invalid PNG signature {actual!r}', chain=chain)


class TruncatedException(PNGChunksException):
    '''There are less bytes available than the ones needed.'''

    def __init__(self, needed, available, chain=None):
        self.needed = needed
        self.available = available
        super().__init__(f'truncated data: needed {needed} bytes, got {available}', chain=chain)


class ChecksumMismatchException(PNGChunksException):
    '''"expected" is the CRC computed over the data, "actual" the one stored.'''

    def __init__(self, expected, actual, chain=None):
        self.expected = expected
        self.actual = actual
        super().__init__(f'CRC mismatch: got {actual}, should be {expected}', chain=chain)


class InvalidFormatException(PNGChunksException):

    def __init__(self, value, chain=None):
        self.value = value
        super().__init__(f'chunk type must be 4 ASCII letters, got {value!r}', chain=chain)


class InvalidEncodingException(PNGChunksException):
    pass


class NotFoundException(PNGChunksException):

    def __init__(self, chunk_type, chain=None):
        self.chunk_type = chunk_type
        super().__init__(f'chunk \'{chunk_type}\' not found', chain=chain)


class InvalidArgumentException(PNGChunksException):
    pass


class UnrecoverableException(PNGChunksException):
    '''This is raised when an internal assumption doesn't hold anymore.'''
    pass
