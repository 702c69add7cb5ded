"""Sliding window pairing of position-sorted records.

A single forward pass that hands every record, once, to a callback as the
anchor of a window: the anchor first, followed by every later record on the
same chromosome whose position is less than ``max_lag`` past it. Only the
current window is buffered.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, List, Optional

from ..io.vcf_reader import VariantRecord

__all__ = ["SlidingWindowPairer", "WindowCallback"]

WindowCallback = Callable[[List[VariantRecord]], None]


class SlidingWindowPairer:
	"""Buffer records and dispatch anchor windows.

	Parameters
	----------
	max_lag : int
		Pairs satisfy ``0 <= other.position - anchor.position < max_lag``.
		With ``max_lag == 0`` every record is dispatched alone.
	on_window : callable
		Receives a list whose first element is the anchor.
	"""

	def __init__(self, max_lag: int, on_window: WindowCallback):
		if max_lag < 0:
			raise ValueError(f"max_lag must be >= 0, got {max_lag}")
		self.max_lag = max_lag
		self.on_window = on_window
		self.buffer: Deque[VariantRecord] = deque()
		self.current_chromosome: Optional[str] = None
		self.windows_dispatched = 0

	def _fits(self, rec: VariantRecord) -> bool:
		if not self.buffer:
			return True
		if rec.chromosome != self.current_chromosome:
			return False
		return rec.position - self.buffer[0].position < self.max_lag

	def _dispatch_front(self) -> None:
		self.on_window(list(self.buffer))
		self.windows_dispatched += 1
		self.buffer.popleft()

	def feed(self, rec: VariantRecord) -> None:
		"""Add ``rec``, first retiring every anchor it falls outside of."""
		while not self._fits(rec):
			self._dispatch_front()
		self.buffer.append(rec)
		self.current_chromosome = rec.chromosome

	def flush(self) -> None:
		"""Dispatch every remaining anchor (end of stream)."""
		while self.buffer:
			self._dispatch_front()
