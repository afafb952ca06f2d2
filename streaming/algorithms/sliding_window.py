from collections import deque
from typing import AbstractSet, Deque, Dict, List, Optional, Tuple

from streaming.errors import ConfigurationError
from streaming.utils.token_handler import is_accepted

Snapshot = List[Tuple[str, int]]  # [(token, count)], most frequent first


class SlidingWindowFrequencyTracker:
    """
    Exact word frequencies over the last `window_size` accepted tokens.

    The window is a FIFO of tokens; counts are kept in a dict that only ever
    holds tokens currently inside the window, with strictly positive counts.
    Space: O(window_size)
    Insert: O(1)
    top_k: O(u log u) for u distinct tokens in the window

    Tokens are compared verbatim; case folding is the tokenizer's job.
    Not thread-safe: the FIFO and the counts must be updated as one unit.
    """

    def __init__(
            self,
            cloud_size: int = 10,
            min_length: int = 0,
            window_size: int = 1000,
            ignore: AbstractSet[str] = frozenset(),
            min_frequency: int = 1,
    ) -> None:
        if cloud_size <= 0:
            raise ConfigurationError("cloud_size must be positive")
        if window_size <= 0:
            raise ConfigurationError("window_size must be positive")
        if min_length < 0:
            raise ConfigurationError("min_length must be non-negative")
        if min_frequency < 1:
            raise ConfigurationError("min_frequency must be at least 1")
        self.cloud_size = int(cloud_size)
        self.min_length = int(min_length)
        self.window_size = int(window_size)
        self.ignore = frozenset(ignore)
        self.min_frequency = int(min_frequency)

        self._window: Deque[str] = deque()
        self._counts: Dict[str, int] = {}

    def insert(self, token: str) -> bool:
        """
        Add a token to the window, evicting the oldest one if the window overflows.
        Tokens rejected by the length/ignore filter are not counted; returns
        whether the token was accepted.
        """
        if not is_accepted(token, self.min_length, self.ignore):
            return False

        self._window.append(token)
        self._counts[token] = self._counts.get(token, 0) + 1

        if len(self._window) > self.window_size:
            oldest = self._window.popleft()
            remaining = self._counts[oldest] - 1
            if remaining:
                self._counts[oldest] = remaining
            else:
                del self._counts[oldest]
        return True

    def is_full(self) -> bool:
        return len(self._window) >= self.window_size

    def top_k(self, k: Optional[int] = None, min_frequency: Optional[int] = None) -> Snapshot:
        """
        Return at most k (token, count) pairs with count >= min_frequency,
        sorted by count descending. Equal counts are ordered by token.
        Defaults to the configured cloud_size and min_frequency.
        """
        if k is None:
            k = self.cloud_size
        if min_frequency is None:
            min_frequency = self.min_frequency
        if k <= 0:
            return []

        candidates = [(token, count) for token, count in self._counts.items() if count >= min_frequency]
        candidates.sort(key=lambda x: (-x[1], x[0]))
        return candidates[:k]

    def count(self, token: str) -> int:
        return self._counts.get(token, 0)

    def window(self) -> Tuple[str, ...]:
        """Current window contents, oldest first."""
        return tuple(self._window)

    def __len__(self) -> int:
        return len(self._window)

    def __repr__(self) -> str:
        return (
            f"SlidingWindowFrequencyTracker(window={len(self._window)}/{self.window_size}, "
            f"distinct={len(self._counts)}, cloud_size={self.cloud_size})"
        )
