# dupecheck/core/__init__.py
from .models import DirEntry, FileEntry, SkipEntry, DupecheckError, ScanAborted, classify_entry
from .duplicate_index import DuplicateIndex
from .scanner import calculate_sha256, traverse_dir_recursively
from .size_format import to_readable_size
