"""Correlation computation subpackage."""

from .nucl_cov import NuclCov, PairAccumulator  # noqa: F401
from .window import SlidingWindowPairer  # noqa: F401
from .lag_aggregator import LagAggregator  # noqa: F401
from .correlation import (  # noqa: F401
	CorrelationConfig,
	compute_correlation,
	correlation_table,
	write_correlation_table,
)

__all__ = [
	"NuclCov",
	"PairAccumulator",
	"SlidingWindowPairer",
	"LagAggregator",
	"CorrelationConfig",
	"compute_correlation",
	"correlation_table",
	"write_correlation_table",
]
