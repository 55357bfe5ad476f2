"""A small hash table of strings with separate chaining."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

BUCKET_COUNT = 10


def bucket_index(text: str) -> int:
    """Return the bucket for ``text``: the sum of its UTF-8 bytes modulo 10."""
    return sum(text.encode("utf-8")) % BUCKET_COUNT


class ChainedHashTable:
    """Ten buckets of strings; duplicates are kept.

    A value added to a non-empty bucket goes directly after the bucket's
    first entry.
    """

    def __init__(self, values: Iterable[str] = ()) -> None:
        self._buckets: list[list[str]] = [[] for _ in range(BUCKET_COUNT)]
        for value in values:
            self.insert(value)

    def insert(self, value: str) -> int:
        """Add ``value`` and return its bucket index."""
        index = bucket_index(value)
        chain = self._buckets[index]
        if chain:
            chain.insert(1, value)
        else:
            chain.append(value)
        return index

    def find(self, value: str) -> int:
        """Return the bucket index holding ``value``; raises KeyError if absent."""
        index = bucket_index(value)
        if value not in self._buckets[index]:
            raise KeyError(value)
        return index

    def remove(self, value: str) -> None:
        """Remove one occurrence of ``value``; raises KeyError if absent."""
        chain = self._buckets[bucket_index(value)]
        try:
            chain.remove(value)
        except ValueError:
            raise KeyError(value) from None

    def buckets(self) -> list[list[str]]:
        """Return a copy of every bucket's chain, in chain order."""
        return [list(chain) for chain in self._buckets]

    def __contains__(self, value: object) -> bool:
        return isinstance(value, str) and value in self._buckets[bucket_index(value)]

    def __iter__(self) -> Iterator[str]:
        for chain in self._buckets:
            yield from chain

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._buckets)