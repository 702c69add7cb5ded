import gzip

import pytest

from mcorr_vcf.io import VariantRecord
from mcorr_vcf.metrics.nucl_cov import PairAccumulator

HEADER = (
    "##fileformat=VCFv4.2\n"
    "#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO\tFORMAT\tS1\tS2\tS3\tS4\n"
)


def vcf_line(chrom, pos, ref, alt, genotypes, fmt="GT"):
    return "\t".join([chrom, str(pos), ".", ref, alt, "50", "PASS", ".", fmt] + list(genotypes)) + "\n"


def record(chrom, pos, codes="0000"):
    return VariantRecord(chrom, pos, "A", "G", codes)


@pytest.fixture
def write_vcf(tmp_path):
    """Return a writer: write_vcf(lines, name="in.vcf") -> path (gzipped if name ends with .gz)."""

    def _write(lines, name="in.vcf"):
        path = tmp_path / name
        text = HEADER + "".join(lines)
        if name.endswith(".gz"):
            with gzip.open(path, "wt") as fh:
                fh.write(text)
        else:
            path.write_text(text)
        return str(path)

    return _write


@pytest.fixture
def two_chrom_vcf(write_vcf):
    hom_ref = ["0/0"] * 4
    lines = [
        vcf_line("1", 100, "A", "G", hom_ref),
        vcf_line("1", 150, "C", "T", hom_ref),
        vcf_line("1", 600, "G", "A", hom_ref),
        vcf_line("2", 120, "AT", "A", hom_ref),
        vcf_line("2", 130, "G", "C,T", hom_ref),
    ]
    return write_vcf(lines)


class StubAccumulator(PairAccumulator):
    """Records every pair; p11 returns a preset (xy, n) or the pair count."""

    instances = []
    preset = None

    def __init__(self, alphabet):
        self.alphabet = alphabet
        self.pairs = []
        StubAccumulator.instances.append(self)

    def add(self, a, b):
        self.pairs.append((a, b))

    def p11(self, offset=0):
        if StubAccumulator.preset is not None:
            return StubAccumulator.preset
        return float(len(self.pairs)), len(self.pairs)


@pytest.fixture
def stub_accumulator():
    StubAccumulator.instances = []
    StubAccumulator.preset = None
    yield StubAccumulator
    StubAccumulator.instances = []
    StubAccumulator.preset = None
