"""mcorr_vcf – genotype correlation profiles from VCF files.

Subpackages:
	io        – streaming biallelic-SNP reader, genotype decoding, prefetch
	metrics   – sliding window pairing, per-lag aggregation, output table
	plot      – correlation profile visualisation

Typical use::

	from mcorr_vcf.io import SNPRecordReader
	from mcorr_vcf.metrics import CorrelationConfig, compute_correlation, correlation_table

	agg = compute_correlation(SNPRecordReader("in.vcf.gz").parse(), CorrelationConfig(max_lag=300))
	table = correlation_table(agg)
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
