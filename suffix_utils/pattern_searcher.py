from typing import List, Optional, Tuple

from .exceptions import InvalidInputError
from .utils import as_pattern


class PatternSearcher:
    """Binary search of a pattern over the suffix array, O(m log n) for |pattern| = m.

    An empty pattern is a prefix of every suffix and therefore matches all of them.
    """

    def __init__(self, index):
        self.index = index

    def range(self, pattern) -> Optional[Tuple[int, int]]:
        """Inclusive rank range of suffixes starting with `pattern`, None if absent."""
        text = self.index.text
        pattern = as_pattern(pattern, text)
        try:
            return self._bounds(text, pattern)
        except TypeError as e:
            raise InvalidInputError("pattern tokens can't be compared with the text tokens") from e

    def _bounds(self, text, pattern):
        suffix_array = self.index.suffix_array
        n, m = len(suffix_array), len(pattern)

        def prefix(rank):
            start = suffix_array[rank]
            return text[start: start + m]

        lo, hi = 0, n
        while lo < hi:
            mid = (lo + hi) // 2
            if prefix(mid) < pattern:
                lo = mid + 1
            else:
                hi = mid
        if lo == n or prefix(lo) != pattern:
            return None
        lower = lo

        lo, hi = lower, n - 1
        while lo < hi:
            mid = (lo + hi + 1) // 2  # round up, otherwise lo = mid may loop forever
            if prefix(mid) > pattern:
                hi = mid - 1
            else:
                lo = mid
        return lower, hi

    def find(self, pattern, *, in_text_order: bool = False) -> List[int]:
        found = self.range(pattern)
        if found is None:
            return []
        lower, upper = found
        positions = self.index.suffix_array[lower: upper + 1].tolist()
        return sorted(positions) if in_text_order else positions

    def count(self, pattern) -> int:
        found = self.range(pattern)
        return 0 if found is None else found[1] - found[0] + 1

    def contains(self, pattern) -> bool:
        return self.range(pattern) is not None
