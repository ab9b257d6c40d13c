from __future__ import annotations

import heapq
from collections.abc import Iterator
from dataclasses import dataclass, field

from wordcount.schemas import WordCount

DEFAULT_TOP_K = 10


@dataclass
class FrequencyTable:
    counts: dict[str, int] = field(default_factory=dict)
    total: int = 0

    def add(self, word: str) -> None:
        self.total += 1
        self.counts[word] = self.counts.get(word, 0) + 1

    def items(self) -> Iterator[tuple[str, int]]:
        # dicts keep insertion order, which is first-seen order here.
        return iter(self.counts.items())

    def __len__(self) -> int:
        return len(self.counts)

    def top(self, k: int = DEFAULT_TOP_K) -> list[WordCount]:
        selector = TopKSelector(k)
        for word, count in self.items():
            selector.offer(word, count)
        return selector.ranked()


@dataclass
class TopKSelector:
    """Keeps the ``k`` highest-count entries offered so far.

    Entries are held in a min-heap keyed on ``(count, -arrival)`` so the root
    is the weakest entry: the lowest count, and among equal counts the one
    offered last. A new entry only displaces the root when its count is
    strictly greater, which keeps earlier arrivals at the cutoff.
    """

    k: int = DEFAULT_TOP_K
    _heap: list[tuple[int, int, str]] = field(default_factory=list, init=False)
    _arrivals: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.k < 1:
            raise ValueError("k must be at least 1")

    def offer(self, word: str, count: int) -> None:
        entry = (count, -self._arrivals, word)
        self._arrivals += 1
        if len(self._heap) < self.k:
            heapq.heappush(self._heap, entry)
        elif count > self._heap[0][0]:
            heapq.heapreplace(self._heap, entry)

    def __len__(self) -> int:
        return len(self._heap)

    def ranked(self) -> list[WordCount]:
        ordered = sorted(self._heap, reverse=True)
        return [WordCount(word=word, count=count) for count, _, word in ordered]
