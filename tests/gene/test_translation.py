"""
Verify mappings against an independent translation. The CDS is spliced and translated with Biopython, and every
complete codon found through the mapping must translate to the same amino acid.
"""
import pytest
from Bio.Seq import Seq

from inscripta.codonmap.gene.mapping import genome_to_transcript_seq_mapping

GENOME = "".join("ACGT"[(i * i + 3 * i + i // 5) % 4] for i in range(200))


def spliced_cds(genome, cds, strand):
    blocks = sorted(cds, reverse=strand == -1)
    if strand == 1:
        return "".join(genome[start:end] for start, end in blocks)
    return "".join(str(Seq(genome[start:end]).reverse_complement()) for start, end in blocks)


def codon_sequence(positions, strand):
    codon = "".join(GENOME[pos] for pos in positions)
    if strand == -1:
        codon = str(Seq(codon).complement())
    return codon


class TestTranslationAgreement:
    @pytest.mark.parametrize("strand", [1, -1])
    @pytest.mark.parametrize("phase", [0, 1, 2])
    @pytest.mark.parametrize("cds", [[(10, 40)], [(3, 14), (20, 29), (40, 47), (100, 131)], [(150, 151), (160, 170)]])
    def test_codons_translate_like_spliced_cds(self, make_transcript, strand, phase, cds):
        result = genome_to_transcript_seq_mapping(make_transcript(strand, cds, phase=phase))
        spliced = spliced_cds(GENOME, cds, strand)[phase:]
        spliced = spliced[: len(spliced) - len(spliced) % 3]
        protein = str(Seq(spliced).translate())
        # a non-zero phase leaves a partial codon at protein position 0
        first_full_codon = 1 if phase else 0
        for i, amino_acid in enumerate(protein):
            positions = result.codon_positions(i + first_full_codon)
            assert len(positions) == 3
            assert str(Seq(codon_sequence(positions, strand)).translate()) == amino_acid

    @pytest.mark.parametrize("strand", [1, -1])
    def test_codon_range_of_contiguous_cds(self, make_transcript, strand):
        result = genome_to_transcript_seq_mapping(make_transcript(strand, [(30, 90)]))
        protein = str(Seq(spliced_cds(GENOME, [(30, 90)], strand)).translate())
        for protein_pos, amino_acid in enumerate(protein):
            start, end = result.codon_range(protein_pos)
            codon = Seq(GENOME[start:end])
            if strand == -1:
                codon = codon.reverse_complement()
            assert str(codon.translate()) == amino_acid
