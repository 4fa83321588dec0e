from typing import List, Optional, Tuple


class LCPComputer:
    """Longest common prefixes of suffix array neighbours (Kasai et al.).

    `phi[k]` is the start of the suffix ranked just before suffix k, and
    `plcp[k]` the length of their common prefix. Visiting k in text order,
    plcp[k] >= plcp[k - 1] - 1 because suffix k is suffix k - 1 minus its first
    symbol, so the running length only drops by one between positions and the
    whole pass makes O(n) symbol comparisons.
    """

    NO_PREDECESSOR = None

    def __init__(self, index):
        self.index = index
        self._phi = None
        self._plcp = None
        self._longest = None

    @property
    def phi(self) -> List[Optional[int]]:
        if self._phi is None:
            suffix_array = self.index.suffix_array.tolist()
            phi = [self.NO_PREDECESSOR] * len(suffix_array)
            for prev, start in zip(suffix_array, suffix_array[1:]):
                phi[start] = prev
            self._phi = phi
        return self._phi

    @property
    def plcp(self) -> List[int]:
        if self._plcp is None:
            self._compute_plcp()
        return self._plcp

    def _compute_plcp(self):
        text, phi = self.index.text, self.phi
        n = len(text)
        plcp = [0] * n
        longest_start, longest_length = 0, 0
        length = 0
        for start, prev in enumerate(phi):
            if prev is self.NO_PREDECESSOR:
                # smallest suffix
                length = 0
                continue
            while start + length < n and prev + length < n and text[start + length] == text[prev + length]:
                length += 1
            plcp[start] = length
            if length > longest_length:
                longest_start, longest_length = start, length
            length = max(length - 1, 0)

        self._plcp = plcp
        self._longest = (longest_start, longest_length)

    def lcp_array(self) -> List[int]:
        """LCP with the previous suffix, in suffix array order (first entry is 0)."""
        plcp = self.plcp
        return [plcp[start] for start in self.index.suffix_array.tolist()]

    def longest_repeat(self) -> Tuple[int, int]:
        """(start, length) of the longest repeated substring, lowest start on ties."""
        if self._longest is None:
            self._compute_plcp()
        return self._longest

    def longest_repeated_substring(self):
        start, length = self.longest_repeat()
        return self.index.text[start: start + length]
