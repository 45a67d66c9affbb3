# dupecheck/core/models.py
import os
from dataclasses import dataclass
from typing import Union


class DupecheckError(Exception):
    """Base class for errors raised by dupecheck itself."""


class ScanAborted(DupecheckError):
    """Raised when a scan is stopped before it finished (deadline or user request)."""


# Each variant applies itself to the index through the walker driving the
# scan (scanner._Walker): walk() recurses, index_file() hashes.

@dataclass(frozen=True)
class DirEntry:
    path: str

    def apply(self, index, walker) -> None:
        walker.walk(index, self.path)


@dataclass(frozen=True)
class FileEntry:
    path: str
    size: int # in bytes

    def apply(self, index, walker) -> None:
        walker.index_file(index, self.path, self.size)


@dataclass(frozen=True)
class SkipEntry:
    path: str # symlinks, devices, sockets, fifos...

    def apply(self, index, walker) -> None:
        return None


Entry = Union[DirEntry, FileEntry, SkipEntry]


def classify_entry(entry: os.DirEntry, directory: str) -> Entry:
    """
    Turns a directory listing entry into one of the entry variants.
    Symlinks are never followed, so a link to a directory or file is skipped.
    Raises OSError if a file disappears before its size is read.
    """
    full_path = os.path.join(directory, entry.name)
    if entry.is_dir(follow_symlinks=False):
        return DirEntry(full_path)
    if entry.is_file(follow_symlinks=False):
        return FileEntry(full_path, entry.stat(follow_symlinks=False).st_size)
    return SkipEntry(full_path)
