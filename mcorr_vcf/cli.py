"""Command line interface for mcorr_vcf.

Computes the genotype correlation profile (Ks at lag 0, P2 at lag > 0) of
the biallelic SNPs in a position-sorted VCF and writes it as CSV.

Example:
	mcorr-vcf input.vcf.gz profile.csv --max-corr-length 300 --chrom 1 --plot profile.png
"""

from __future__ import annotations

import argparse

from . import __version__
from .io import SNPRecordReader, VCFFormatError, prefetch
from .metrics import CorrelationConfig, compute_correlation, correlation_table, write_correlation_table
from .utils import load_sample_mask, log_error, log_info, log_warn


def config_from_args(args: argparse.Namespace) -> CorrelationConfig:
	sample_mask = None
	if args.sub_pop:
		sample_mask = load_sample_mask(args.sub_pop)
		log_info(f"Sub-population of {len(sample_mask):,} samples loaded from {args.sub_pop}")
	return CorrelationConfig(
		max_lag=args.max_corr_length,
		region_start=args.region_start,
		region_end=args.region_end,
		chrom=args.chrom or None,
		sample_mask=sample_mask,
	)


def run(args: argparse.Namespace) -> int:
	config = config_from_args(args)
	reader = SNPRecordReader(args.vcf_file)
	records = reader.parse() if args.no_prefetch else prefetch(reader.parse())
	aggregator = compute_correlation(records, config, verbose=True)
	table = correlation_table(aggregator)
	if table.empty:
		log_warn("No site pair passed the coverage filter; writing header only")
	# Output is written only once the whole input has been consumed.
	write_correlation_table(table, args.out_file)
	log_info(f"Correlation profile ({len(table):,} lags) written to {args.out_file}")
	if args.plot:
		from .plot import plot_correlation_profile  # local import
		plot_correlation_profile(table, output_path=args.plot)
		log_info(f"Correlation plot written to {args.plot}")
	return 0


def build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(prog="mcorr-vcf", description="Calculate genotype correlation profiles from VCF files.")
	p.add_argument("vcf_file", help="Input VCF or VCF.GZ file, sorted by position")
	p.add_argument("out_file", help="Output CSV file")
	p.add_argument("--max-corr-length", type=int, default=300, help="Max length of correlations in bp (default: 300)")
	p.add_argument("--region-start", type=int, default=1, help="Region start; the run stops at the first SNP before it")
	p.add_argument("--region-end", type=int, default=1000000000000, help="Region end; the run stops at the first SNP after it")
	p.add_argument("--chrom", type=str, default="", help="Only use SNPs on this chromosome (default: all)")
	p.add_argument("--sub-pop", type=str, default="", help="File of 0-based sample indices, one per line (default: all samples)")
	p.add_argument("--plot", type=str, default=None, help="Optional PNG path for the correlation profile plot")
	p.add_argument("--no-prefetch", action="store_true", help="Parse the VCF on the main thread instead of a reader thread")
	p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
	return p


def main(argv=None):
	parser = build_parser()
	args = parser.parse_args(argv)
	if args.max_corr_length < 0:
		parser.error("--max-corr-length must be >= 0")
	try:
		return run(args)
	except VCFFormatError as e:
		log_error(f"Malformed VCF {args.vcf_file}: {e}")
	except (ValueError, OSError) as e:
		log_error(str(e))


if __name__ == "__main__":  # pragma: no cover
	main()
