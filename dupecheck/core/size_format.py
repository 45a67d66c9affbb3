# dupecheck/core/size_format.py
from typing import List, Tuple

# (threshold, divisor, suffix), largest unit first. Decimal units.
SIZE_UNITS: List[Tuple[int, int, str]] = [
    (1000 ** 4, 1000 ** 4, "TB"),
    (1000 ** 3, 1000 ** 3, "GB"),
    (1000 ** 2, 1000 ** 2, "MB"),
    (1000, 1000, "KB"),
]


def to_readable_size(nbytes: int) -> str:
    """Formats a byte count, e.g. 1988909 -> '1.99 MB', 125 -> '125 B'."""
    for threshold, divisor, suffix in SIZE_UNITS:
        if nbytes > threshold:
            return f"{nbytes / divisor:.2f} {suffix}"
    return f"{nbytes} B"
