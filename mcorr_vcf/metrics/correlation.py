"""Correlation profile pipeline.

Drives records through region / chromosome filters into the sliding window
pairer and lag aggregator, then reduces the per-lag sums to the output
table:

	l  lag in bp
	m  Ks (lag 0: mean identity) or P2 (lag > 0: sum at lag / sum at lag 0)
	n  placeholder, always 0
	v  number of contributing pairs
	t  "Ks" or "P2"
	b  population label

A P2 value over a zero Ks sum is +Inf (or NaN when the lag sum is zero too);
values are written with %g, non-finite ones as NaN / +Inf.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, Optional

import pandas as pd

from ..io.vcf_reader import VariantRecord
from ..utils import log_info, progress_interval
from .lag_aggregator import LagAggregator
from .nucl_cov import NuclCov, PairAccumulator
from .window import SlidingWindowPairer

__all__ = [
	"CorrelationConfig",
	"compute_correlation",
	"correlation_table",
	"write_correlation_table",
	"format_value",
	"TABLE_COLUMNS",
]

TABLE_COLUMNS = ["l", "m", "n", "v", "t", "b"]


@dataclass
class CorrelationConfig:
	max_lag: int = 300
	region_start: int = 1
	region_end: int = 1000000000000
	chrom: Optional[str] = None
	sample_mask: Optional[FrozenSet[int]] = None


def compute_correlation(
	records: Iterable[VariantRecord],
	config: CorrelationConfig,
	accumulator_factory: Callable[[str], PairAccumulator] = NuclCov,
	verbose: bool = False,
) -> LagAggregator:
	"""Run one pass over position-sorted ``records``.

	A record outside ``[region_start, region_end]`` ends the pass. Records on
	a chromosome other than ``config.chrom`` (when set) are skipped without
	touching the window.
	"""
	aggregator = LagAggregator(config.max_lag, config.sample_mask, accumulator_factory)
	pairer = SlidingWindowPairer(config.max_lag, aggregator.add_window)
	processed = 0
	for rec in records:
		if rec.position < config.region_start or rec.position > config.region_end:
			break
		if config.chrom and config.chrom != rec.chromosome:
			continue
		pairer.feed(rec)
		processed += 1
		if verbose and processed % progress_interval(processed) == 0:
			log_info(f"Processed {processed:,} SNPs (at {rec.chromosome}:{rec.position})")
	pairer.flush()
	if verbose:
		log_info(f"Processed {processed:,} SNPs in {pairer.windows_dispatched:,} windows")
	return aggregator


def _ratio(num: float, den: float) -> float:
	if den != 0:
		return num / den
	if num == 0:
		return math.nan
	return math.copysign(math.inf, num)


def format_value(value: float) -> str:
	"""%g formatting, with non-finite values spelled NaN, +Inf and -Inf."""
	if math.isnan(value):
		return "NaN"
	if math.isinf(value):
		return "+Inf" if value > 0 else "-Inf"
	return "%g" % value


def correlation_table(aggregator: LagAggregator, population: str = "all") -> pd.DataFrame:
	"""Reduce per-lag sums to rows; lags without pairs are omitted."""
	sums = aggregator.statistic_sum
	counts = aggregator.pair_count
	ks_sum = float(sums[0])
	rows = []
	for lag in range(len(sums)):
		n = int(counts[lag])
		if n <= 0:
			continue
		if lag == 0:
			m = ks_sum / n
			kind = "Ks"
		else:
			m = _ratio(float(sums[lag]), ks_sum)
			kind = "P2"
		rows.append({"l": lag, "m": m, "n": 0, "v": n, "t": kind, "b": population})
	return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def write_correlation_table(df: pd.DataFrame, output_path: str) -> None:
	out = df.copy()
	out["m"] = [format_value(float(v)) for v in out["m"]]
	out.to_csv(output_path, index=False)
