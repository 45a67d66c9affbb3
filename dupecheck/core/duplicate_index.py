# dupecheck/core/duplicate_index.py
from typing import Dict
from .size_format import to_readable_size


class DuplicateIndex:
    """
    Accumulates content fingerprints seen during a scan.

    hashes maps a fingerprint to the first path it was seen at (the original).
    duplicates maps an original path to the latest path with the same content;
    when more than two files share a fingerprint only the last one is kept there,
    although every copy still counts towards dupe_size.
    """

    def __init__(self):
        self.hashes: Dict[str, str] = {}
        self.duplicates: Dict[str, str] = {}
        self.dupe_size: int = 0 # in bytes

    def add_entry(self, fingerprint: str, path: str, size: int) -> None:
        original = self.hashes.get(fingerprint)
        if original is None:
            self.hashes[fingerprint] = path
            return
        self.duplicates[original] = path
        self.dupe_size += size

    @property
    def total_files(self) -> int:
        return len(self.hashes)

    @property
    def duplicate_count(self) -> int:
        return len(self.duplicates)

    def result(self) -> str:
        lines = ["DUPLICATES"]
        for key, val in self.duplicates.items():
            lines.append(f"key: {key}, val: {val}")
        lines.append(f"TOTAL FILES: {self.total_files}")
        lines.append(f"DUPLICATES: {self.duplicate_count}")
        lines.append(f"TOTAL DUPLICATE SIZE: {to_readable_size(self.dupe_size)}")
        return "\n".join(lines) + "\n"
