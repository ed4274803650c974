from pathlib import Path

from inscripta.codonmap.gene import Feature, genome_to_transcript_seq_mapping, get_codon_range, map_transcripts
from inscripta.codonmap.io.gff3.parser import parse_gff3

DATA_DIR = Path(__file__).parent.parent / "tests/data"


def _transcript(strand: int, num_exons: int, exon_length: int, repeats: int = 1) -> Feature:
    cds = [
        Feature("CDS", strand, "chr1", i * exon_length * 2, i * exon_length * 2 + exon_length, phase=0)
        for i in range(num_exons)
    ]
    return Feature("mRNA", strand, "chr1", 0, num_exons * exon_length * 2, id="tx", subfeatures=cds * repeats)


class MapTranscript:
    repeat = (1, 10, 10.0)

    def setup(self):
        self.plus = _transcript(1, 20, 150)
        self.minus = _transcript(-1, 20, 150)
        self.duplicated = _transcript(-1, 20, 150, repeats=4)
        self.titin_like = _transcript(1, 363, 300)

    def time_plus_strand(self):
        _ = genome_to_transcript_seq_mapping(self.plus)

    def time_minus_strand(self):
        _ = genome_to_transcript_seq_mapping(self.minus)

    def time_duplicated_cds(self):
        _ = genome_to_transcript_seq_mapping(self.duplicated)

    def time_large_transcript(self):
        _ = genome_to_transcript_seq_mapping(self.titin_like)

    def mem_large_transcript(self):
        return genome_to_transcript_seq_mapping(self.titin_like)


class CodonRange:
    def setup(self):
        self.result = genome_to_transcript_seq_mapping(_transcript(-1, 363, 300))

    def time_get_codon_range(self):
        for protein_pos in range(self.result.num_codons):
            _ = get_codon_range(self.result.p2g, protein_pos, self.result.strand)

    def time_codon_positions(self):
        _ = self.result.codon_positions(1000)


class ParseGFF3:
    repeat = (1, 5, 20.0)

    def time_parse_and_map_gff3(self):
        _ = map_transcripts(parse_gff3(DATA_DIR / "transcripts.gff3"))
