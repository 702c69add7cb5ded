"""Streaming biallelic-SNP reader for correlation profiling.

Every qualifying VCF line is reduced to a :class:`VariantRecord` whose
``genotype_codes`` string holds one character per genotype observation, in
sample column order. Records are produced lazily so arbitrarily large files
can be scanned in a single forward pass.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional
import gzip

GENOTYPE_ALPHABET = "0123"


class VCFFormatError(ValueError):
	"""Fatal, unrecoverable problem in the VCF body (e.g. non-numeric POS)."""


@dataclass
class VariantRecord:
	"""One biallelic SNP site.

	Attributes
	----------
	chromosome : str
		CHROM column; pairs are never formed across chromosomes.
	position : int
		POS column; input must be sorted by it within a chromosome.
	reference_allele, alternate_allele : str
		Single-nucleotide REF / ALT.
	genotype_codes : str
		Decoded genotype observations, one character each. Positions line
		up between records of the same file.
	"""

	chromosome: str
	position: int
	reference_allele: str
	alternate_allele: str
	genotype_codes: str


def decode_genotype(token: str) -> List[str]:
	"""Decode one sample's GT value into genotype codes.

	Phased (``|``) or haploid calls keep every allele as its own
	observation: ``"0|1"`` -> ``['0', '1']``. Unphased (``/``) calls
	collapse to a single code when all alleles agree (``"1/1"`` -> ``['1']``)
	and to nothing otherwise (``"0/1"`` -> ``[]``). A missing call keeps its
	column (``"./."`` -> ``['.']``); codes outside the genotype alphabet are
	skipped when records are compared.

	Note the two branches emit a different number of codes for a diploid
	call, which shifts column alignment for files mixing both notations.
	"""
	if "/" not in token:
		return [c for c in token if c != "|"]
	current = None
	for c in token:
		if c == "/":
			continue
		if current is not None and c != current:
			return []
		current = c
	if current is None:
		return []
	return [current]


def is_biallelic_snp(ref: str, alt: str) -> bool:
	return len(ref) == 1 and len(alt) == 1


def parse_variant_line(line: str, line_number: Optional[int] = None) -> Optional[VariantRecord]:
	"""Parse one VCF data line; ``None`` when the site is not a biallelic SNP.

	Raises :class:`VCFFormatError` on a truncated line or a non-numeric POS.
	"""
	where = f"line {line_number}" if line_number is not None else "VCF line"
	parts = line.rstrip("\r\n").split("\t")
	if len(parts) < 5:
		raise VCFFormatError(f"{where}: expected at least 5 tab-separated columns, got {len(parts)}")
	chrom, pos, _id, ref, alt = parts[:5]
	try:
		position = int(pos)
	except ValueError:
		raise VCFFormatError(f"{where}: POS is not an integer: {pos!r}") from None
	if not is_biallelic_snp(ref, alt):
		return None
	codes: List[str] = []
	gt_index = None
	for col in parts[5:]:
		if gt_index is None:
			keys = col.split(":")
			if "GT" in keys:
				gt_index = keys.index("GT")
			continue
		fields = col.split(":")
		if gt_index < len(fields):
			codes.extend(decode_genotype(fields[gt_index]))
	return VariantRecord(chrom, position, ref, alt, "".join(codes))


class SNPRecordReader:
	"""Lazy, restartable reader of biallelic SNP records.

	Parameters
	----------
	path : str
		Path to (optionally gzipped) VCF file.
	"""

	def __init__(self, path: str):
		self.path = path
		self.records_seen = 0
		self.records_emitted = 0

	def _open(self):  # type: ignore[return-type]
		if self.path.endswith('.gz'):
			return gzip.open(self.path, 'rt')
		return open(self.path, 'rt')

	def parse(self) -> Iterator[VariantRecord]:
		self.records_seen = 0
		self.records_emitted = 0
		with self._open() as fh:
			for lineno, line in enumerate(fh, start=1):
				if not line.strip():
					continue
				if line.startswith('#'):
					continue
				self.records_seen += 1
				rec = parse_variant_line(line, lineno)
				if rec is None:
					continue
				self.records_emitted += 1
				yield rec

	def __iter__(self) -> Iterator[VariantRecord]:
		return self.parse()
