"""Per-lag running sums of the pairwise identity statistic."""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Sequence

import numpy as np

from ..io.vcf_reader import GENOTYPE_ALPHABET, VariantRecord
from .nucl_cov import NuclCov, PairAccumulator

__all__ = ["LagAggregator"]


class LagAggregator:
	"""Fold anchor windows into ``statistic_sum`` / ``pair_count`` by lag.

	Parameters
	----------
	max_lag : int
		Number of lags tracked (0 .. max_lag - 1). At least lag 0 is kept.
	sample_mask : iterable of int | None
		Genotype-code indices to compare; all indices when None.
	accumulator_factory : callable
		Builds a fresh :class:`PairAccumulator` from the alphabet, once per pair.
	alphabet : str
		Valid genotype codes.
	"""

	def __init__(
		self,
		max_lag: int,
		sample_mask: Optional[Iterable[int]] = None,
		accumulator_factory: Callable[[str], PairAccumulator] = NuclCov,
		alphabet: str = GENOTYPE_ALPHABET,
	):
		size = max(max_lag, 1)
		self.statistic_sum = np.zeros(size, dtype=np.float64)
		self.pair_count = np.zeros(size, dtype=np.int64)
		self.sample_mask: Optional[List[int]] = sorted(set(sample_mask)) if sample_mask is not None else None
		self.accumulator_factory = accumulator_factory
		self.alphabet = alphabet

	def _indices(self, a: str, b: str) -> Sequence[int]:
		limit = min(len(a), len(b))
		if self.sample_mask is None:
			return range(limit)
		return [k for k in self.sample_mask if k < limit]

	def pair_statistic(self, anchor: VariantRecord, other: VariantRecord):
		"""Return ``(xy, n)`` for one pair of records."""
		acc = self.accumulator_factory(self.alphabet)
		a_codes = anchor.genotype_codes
		b_codes = other.genotype_codes
		for k in self._indices(a_codes, b_codes):
			a = a_codes[k]
			b = b_codes[k]
			if a in self.alphabet and b in self.alphabet:
				acc.add(a, b)
		return acc.p11(0)

	def add_pair(self, anchor: VariantRecord, other: VariantRecord) -> bool:
		"""Fold one pair in; False when it fails coverage or lies out of range."""
		lag = other.position - anchor.position
		if lag < 0 or lag >= len(self.statistic_sum):
			return False
		xy, n = self.pair_statistic(anchor, other)
		# strictly more than half of the anchor's observations must be usable
		if n > len(anchor.genotype_codes) // 2:
			self.statistic_sum[lag] += xy / n
			self.pair_count[lag] += 1
			return True
		return False

	def add_window(self, window: List[VariantRecord]) -> None:
		"""Pair ``window[0]`` with every record of the window, itself included."""
		if not window:
			return
		anchor = window[0]
		for other in window:
			self.add_pair(anchor, other)
