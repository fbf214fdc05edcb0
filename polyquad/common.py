"""Utility functions and classes shared by the polyquad modules.

Important functions and classes:
 - InvalidArgument: the error raised for every malformed input
 - fresh_name: generate a never-before-seen name (string)
 - open_maybe_stdin / open_maybe_stdout: file handles that understand "-"
 - AtomicWriteableFile: an output file that only appears once fully written
"""

# builtins
from contextlib import contextmanager
import itertools
import threading
import sys
import os
import tempfile
import shutil

class InvalidArgument(ValueError):
    """Raised when a value handed to polyquad cannot be accepted.

    This covers text that does not match a grammar, empty coefficient lists,
    coefficient indices out of range, and integration bounds that are not
    strictly increasing.
    """
    pass

_name_counter = itertools.count()
_name_lock = threading.Lock()

def fresh_name(hint : str = "name", omit : {str} = ()) -> str:
    """Generate a new name.

    The returned name is distinct from all names previously returned by
    `fresh_name` in this process and from all names in `omit`.  The `hint`
    parameter is used in the generated name.
    """
    with _name_lock:
        while True:
            name = "_{}{}".format(hint, next(_name_counter))
            if name not in omit:
                return name

@contextmanager
def AtomicWriteableFile(dst, mode="w"):
    """A writeable file handle that does not overwrite until it is closed.

    Usage:

        with AtomicWriteableFile(path) as f:
            ... f.write(...) ...

    If the block raises, the temporary file is discarded and `dst` keeps its
    previous contents (or continues not to exist).
    """
    tmp_fd, tmp_path = tempfile.mkstemp(text=True)
    try:
        with os.fdopen(tmp_fd, mode) as f:
            yield f
            f.flush()
            os.fsync(f.fileno())
    except BaseException:
        os.remove(tmp_path)
        raise
    shutil.move(src=tmp_path, dst=dst)

def open_maybe_stdin(f : str, mode="r"):
    """Open file f, or open standard input if f is "-".

    In any case, the caller is responsible for closing the returned handle:

        with open_maybe_stdin(path) as f:
            ...
    """
    if f == "-":
        return os.fdopen(os.dup(sys.stdin.fileno()), mode)
    return open(f, mode)

def open_maybe_stdout(f : str, mode="w"):
    """Open file f, or open standard output if f is "-".

    Regular files are opened as an AtomicWriteableFile, so a failed run never
    leaves a half-written results file behind.
    """
    if f == "-":
        return os.fdopen(os.dup(sys.stdout.fileno()), mode)
    return AtomicWriteableFile(f, mode)

def read_lines(f : str) -> [str]:
    """Returns the lines of file f (or stdin for "-") without line endings."""
    with open_maybe_stdin(f) as handle:
        return handle.read().splitlines()
