"""Threaded prefetch of records through a bounded FIFO channel.

The reader runs in a daemon producer thread; the caller consumes from the
returned generator. At most ``maxsize`` items wait in the channel, so the
producer never runs far ahead of the consumer.
"""

from __future__ import annotations

import queue
import threading
from typing import Iterable, Iterator, TypeVar

T = TypeVar("T")

_DONE = object()


class _Failure:
	def __init__(self, exc: BaseException):
		self.exc = exc


def prefetch(iterable: Iterable[T], maxsize: int = 1, poll: float = 0.1) -> Iterator[T]:
	"""Yield the items of ``iterable`` as produced by a background thread.

	An exception raised by the producer is re-raised here once every item
	produced before it has been consumed. Closing the generator early (e.g.
	``break`` in the consumer) stops the producer.
	"""
	channel: "queue.Queue[object]" = queue.Queue(maxsize=max(1, maxsize))
	stop = threading.Event()

	def _put(item: object) -> bool:
		while not stop.is_set():
			try:
				channel.put(item, timeout=poll)
				return True
			except queue.Full:
				continue
		return False

	def _produce() -> None:
		try:
			for item in iterable:
				if not _put(item):
					return
		except BaseException as exc:  # re-raised in the consumer
			_put(_Failure(exc))
			return
		_put(_DONE)

	worker = threading.Thread(target=_produce, name="vcf-reader", daemon=True)
	worker.start()
	try:
		while True:
			item = channel.get()
			if item is _DONE:
				break
			if isinstance(item, _Failure):
				raise item.exc
			yield item  # type: ignore[misc]
	finally:
		stop.set()
		worker.join(timeout=5 * poll)
