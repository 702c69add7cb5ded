"""Pairwise genotype accumulator.

Tallies how often each (genotype at site A, genotype at site B) doublet is
seen across samples and reduces the resulting co-occurrence matrix to an
identity statistic: the probability that two distinct samples carry the same
doublet.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np

__all__ = ["PairAccumulator", "NuclCov"]


class PairAccumulator(ABC):
    """Capability consumed by the lag aggregator: record pairs, query P11."""

    @abstractmethod
    def add(self, a: str, b: str) -> None:
        """Record one genotype pair observed in a single sample."""

    @abstractmethod
    def p11(self, offset: int = 0) -> Tuple[float, int]:
        """Return ``(xy, n)``; ``xy / n`` is the identity statistic."""


class NuclCov(PairAccumulator):
    """Doublet count matrix over a fixed alphabet.

    Parameters
    ----------
    alphabet : str
        Symbols that may be recorded; ``add`` ignores anything else.
    """

    def __init__(self, alphabet: str = "0123"):
        self.alphabet = alphabet
        self._index = {c: i for i, c in enumerate(alphabet)}
        size = len(alphabet)
        self.doublets = np.zeros((size, size), dtype=np.int64)

    def add(self, a: str, b: str) -> None:
        ia = self._index.get(a)
        ib = self._index.get(b)
        if ia is None or ib is None:
            return
        self.doublets[ia, ib] += 1

    def p11(self, offset: int = 0) -> Tuple[float, int]:
        """Sum over doublets seen more than ``offset`` times.

        n is N, the number of samples in the retained doublets, and
        xy = sum of c * (c - 1) / (N - 1), so xy / n is the chance that two
        distinct samples share a doublet.
        """
        counts = self.doublets[self.doublets > offset]
        total = int(counts.sum())
        if total < 2:
            return 0.0, total
        xy = float((counts * (counts - 1)).sum()) / (total - 1)
        return xy, total
