import numpy as np
from tqdm import tqdm

from .lcp import LCPComputer
from .pattern_searcher import PatternSearcher
from .rank_table import RankTable
from .utils import DirectoryHelper, NumpyCache, as_text, symbol_codes, text_digest


class SuffixArrayBuilder:
    """Prefix doubling construction, O(n log^2 n).

    After the step of size k, two suffixes share a rank iff their first 2k
    symbols are identical, so at most ceil(log2(n)) steps are needed.
    """

    INT_DTYPE = np.int64

    def __init__(
            self,
            *,
            verbose: bool = False,
            cache_dir: DirectoryHelper = None,
        ):
        self.verbose = verbose
        self.cache_dir = DirectoryHelper(cache_dir)
        self.cache_dir.makedirs()

    def build(self, text) -> np.ndarray:
        return self._build(as_text(text))

    @NumpyCache.tofile(
        path=lambda self, text: (
            self.cache_dir.get_path(f'sa-{text_digest(text)}.npz') if self.cache_dir.path
            else None
        ),
    )
    def _build(self, text) -> np.ndarray:
        n = len(text)
        suffix_array = np.arange(n, dtype=self.INT_DTYPE)
        ranks = RankTable.from_symbols(symbol_codes(text))

        steps = doubling_steps(n)
        if self.verbose:
            print(f"Sorting {n} suffixes...")
            steps = tqdm(steps, total=count_doubling_steps(n), unit='step')
        for step in steps:
            suffix_array = ranks.sort(step)
            ranks = ranks.refine(suffix_array, step)
            if ranks.is_complete:
                break
        return suffix_array


def doubling_steps(n: int):
    step = 1
    while step < n:
        yield step
        step *= 2


def count_doubling_steps(n: int) -> int:
    return max(n - 1, 0).bit_length()


class SuffixArrayIndex:
    """Text together with its suffix array, read-only once built.

        >>> index = SuffixArrayIndex('GATAGACA')
        >>> index.suffix_array.tolist()
        [7, 5, 3, 1, 6, 4, 0, 2]
        >>> index.find('GA')
        [4, 0]
        >>> index.longest_repeated_substring()
        'GA'
    """

    def __init__(
            self,
            text,
            *,
            verbose: bool = False,
            cache_dir: DirectoryHelper = None,
        ):
        self._text = as_text(text)
        builder = SuffixArrayBuilder(verbose=verbose, cache_dir=cache_dir)
        suffix_array = np.array(builder.build(self._text), dtype=SuffixArrayBuilder.INT_DTYPE)
        suffix_array.setflags(write=False)
        self._suffix_array = suffix_array

        self._inverse = None
        self._searcher = None
        self._lcp = None

    @property
    def text(self):
        return self._text

    @property
    def suffix_array(self) -> np.ndarray:
        return self._suffix_array

    def __len__(self):
        return len(self._suffix_array)

    def suffix_start(self, rank: int) -> int:
        return int(self._suffix_array[rank])

    def suffix(self, rank: int):
        return self._text[self.suffix_start(rank):]

    def rank_of(self, position: int) -> int:
        if self._inverse is None:
            inverse = np.empty(len(self), dtype=SuffixArrayBuilder.INT_DTYPE)
            inverse[self._suffix_array] = np.arange(len(self))
            inverse.setflags(write=False)
            self._inverse = inverse
        return int(self._inverse[position])

    @property
    def searcher(self) -> PatternSearcher:
        if self._searcher is None:
            self._searcher = PatternSearcher(self)
        return self._searcher

    @property
    def lcp(self) -> LCPComputer:
        if self._lcp is None:
            self._lcp = LCPComputer(self)
        return self._lcp

    def find(self, pattern, *, in_text_order: bool = False):
        return self.searcher.find(pattern, in_text_order=in_text_order)

    def count(self, pattern) -> int:
        return self.searcher.count(pattern)

    def __contains__(self, pattern):
        return self.searcher.contains(pattern)

    def longest_repeated_substring(self):
        return self.lcp.longest_repeated_substring()

    def lcp_array(self):
        return self.lcp.lcp_array()

    def __repr__(self):
        return f"{self.__class__.__name__}(n={len(self)})"
