# dupecheck/core/scanner.py
import os
import hashlib
from typing import Callable, Dict, Optional
from tqdm import tqdm
from .duplicate_index import DuplicateIndex
from .models import ScanAborted, classify_entry

DEFAULT_BLOCK_SIZE = 65536


def calculate_sha256(file_path: str, block_size: int = DEFAULT_BLOCK_SIZE) -> str:
    """Hex SHA-256 of the file's content. Read errors are raised as OSError."""
    sha256 = hashlib.sha256()
    with open(file_path, 'rb') as f:
        for block in iter(lambda: f.read(block_size), b''):
            sha256.update(block)
    return sha256.hexdigest()


class _Walker:
    """Carries the per-scan options through the recursion."""

    def __init__(
        self,
        errors: Optional[Dict[str, str]],
        progress: Optional[tqdm],
        stop_requested: Optional[Callable[[], bool]]
    ):
        self.errors = errors
        self.progress = progress
        self.stop_requested = stop_requested

    def index_file(self, index: DuplicateIndex, path: str, size: int) -> None:
        index.add_entry(calculate_sha256(path), path, size)
        if self.progress is not None:
            self.progress.update(1)

    def walk(self, index: DuplicateIndex, directory: str) -> None:
        if self.stop_requested is not None and self.stop_requested():
            raise ScanAborted(f"Scan stopped before listing {directory}")

        with os.scandir(directory) as it:
            listed = list(it)

        if self.progress is not None:
            self.progress.set_postfix_str(directory, refresh=False)

        for dir_entry in listed:
            try:
                classify_entry(dir_entry, directory).apply(index, self)
            except OSError as e:
                if self.errors is None:
                    raise
                self.errors[os.path.join(directory, dir_entry.name)] = str(e)


def traverse_dir_recursively(
    index: DuplicateIndex,
    directory: str,
    errors: Optional[Dict[str, str]] = None,
    progress: Optional[tqdm] = None,
    stop_requested: Optional[Callable[[], bool]] = None
) -> None:
    """
    Walks `directory` depth-first and adds every regular file to `index`.

    Entries are visited in the order the filesystem lists them. By default the
    first OSError (unreadable directory, file vanished before it was hashed...)
    aborts the whole walk; files indexed before it stay in `index`.
    Trees deeper than the interpreter's recursion limit raise RecursionError.

    Args:
        index: the DuplicateIndex to fill.
        directory: directory to walk. Failing to list it always raises.
        errors: if given, failures below `directory` are recorded here
            as {path: message} and the walk carries on.
        progress: optional tqdm bar, advanced once per indexed file.
        stop_requested: checked before each directory is listed;
            ScanAborted is raised when it returns True.
    """
    _Walker(errors, progress, stop_requested).walk(index, directory)
