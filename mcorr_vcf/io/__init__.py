"""I/O subpackage.

Exposes the streaming biallelic-SNP reader, the genotype decoder and the
threaded prefetch channel used to overlap parsing with pair computation.
"""

from .vcf_reader import (  # noqa: F401
	GENOTYPE_ALPHABET,
	SNPRecordReader,
	VariantRecord,
	VCFFormatError,
	decode_genotype,
	is_biallelic_snp,
	parse_variant_line,
)
from .stream import prefetch  # noqa: F401

__all__ = [
	"GENOTYPE_ALPHABET",
	"SNPRecordReader",
	"VariantRecord",
	"VCFFormatError",
	"decode_genotype",
	"is_biallelic_snp",
	"parse_variant_line",
	"prefetch",
]
