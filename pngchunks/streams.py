import io
import logging
import os
import shutil
import tempfile

from .exceptions import TruncatedException


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around raw bytes to have a cursor over them
    that complains loudly when there is not enough data left.'''
    def __init__(self, obj):
        self.obj = io.BytesIO(bytes(obj))
        self.size = len(self.obj.getbuffer())
        self.history = []

    def __getattr__(self, name):
        return getattr(self.obj, name)

    @property
    def remaining(self) -> int:
        return self.size - self.obj.tell()

    def at_end(self) -> bool:
        return self.remaining == 0

    def read_exactly(self, n: int) -> bytes:
        available = self.remaining
        if available < n:
            raise TruncatedException(needed=n, available=available)

        return self.obj.read(n)

    def read_all(self) -> bytes:
        return self.obj.read()

    # TODO: create contextmanager
    def save(self):
        self.history.append(self.obj.tell())

    def restore(self):
        old_seek = self.history.pop()
        self.obj.seek(old_seek)


def read_all(path) -> bytes:
    logger.debug('reading \'%s\'' % path)
    with open(path, 'rb') as f:
        return f.read()


def default_mode() -> int:
    '''The mode a new file would get from open(), i.e. 0o666 filtered by the umask'''
    umask = os.umask(0)
    os.umask(umask)

    return 0o666 & ~umask


def write_all(path, data: bytes) -> None:
    '''The data is written into a temporary file living in the same directory
    of the destination and then renamed over it, so that the destination
    contains either the old or the new content.

    Symlinks are followed: the file pointed to is the one replaced.'''
    path = os.path.realpath(os.fspath(path))
    directory = os.path.dirname(path)

    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix='.%s.' % os.path.basename(path))
    os.close(fd)
    logger.debug(f'writing {len(data)} bytes to \'{path}\' via \'{tmp_path}\'')
    try:
        with open(tmp_path, 'wb') as f:
            f.write(data)
        if os.path.exists(path):
            shutil.copymode(path, tmp_path)
        else:
            os.chmod(tmp_path, default_mode())
        os.replace(tmp_path, path)
    except BaseException:
        os.unlink(tmp_path)
        raise
