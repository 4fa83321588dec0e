import numpy as np


class RankTable:
    """Rank class of every suffix after a prefix doubling step.

    Ranks start at 1 and are dense: suffixes sharing a rank are identical over the
    current prefix length. `PAST_END` is the rank of a position beyond the text.
    """

    INT_DTYPE = np.int64
    PAST_END = 0

    def __init__(self, ranks):
        ranks = np.array(ranks, dtype=self.INT_DTYPE)
        ranks.setflags(write=False)
        self._ranks = ranks

    @classmethod
    def from_symbols(cls, codes: np.ndarray) -> 'RankTable':
        codes = np.asarray(codes)
        if len(codes) == 0:
            return cls(np.zeros([0]))
        # densify to 1..alphabet_size, so no symbol can take PAST_END
        _, inverse = np.unique(codes, return_inverse=True)
        return cls(inverse.reshape(-1) + 1)

    def __len__(self):
        return len(self._ranks)

    @property
    def ranks(self) -> np.ndarray:
        return self._ranks

    @property
    def max_rank(self) -> int:
        return int(self._ranks.max()) if len(self) else self.PAST_END

    @property
    def is_complete(self) -> bool:
        return self.max_rank == len(self)

    def composite_keys(self, step: int):
        # key of i: (rank[i], rank[i + step]), second part is PAST_END beyond the text
        n = len(self)
        second = np.full(n, self.PAST_END, dtype=self.INT_DTYPE)
        second[:max(n - step, 0)] = self._ranks[step:]
        return self._ranks, second

    def sort(self, step: int) -> np.ndarray:
        first, second = self.composite_keys(step)
        return np.lexsort((second, first)).astype(self.INT_DTYPE)  # last key is primary

    def refine(self, order: np.ndarray, step: int) -> 'RankTable':
        if len(self) == 0:
            return self
        first, second = self.composite_keys(step)
        first, second = first[order], second[order]

        key_changed = np.logical_or(np.diff(first) != 0, np.diff(second) != 0)
        sorted_ranks = np.concatenate([[1], 1 + np.cumsum(key_changed)])

        ranks = np.empty(len(self), dtype=self.INT_DTYPE)
        ranks[order] = sorted_ranks
        return self.__class__(ranks)

    def __repr__(self):
        return f"{self.__class__.__name__}({self._ranks.tolist()})"
