from typing import Dict, Optional, Tuple, Union

from inscripta.codonmap.location.strand import Strand


def get_codon_range(
    p2g: Dict[int, int], protein_pos: int, strand: Union[Strand, int]
) -> Optional[Tuple[int, int]]:
    """
    Get the genomic coordinate range for a codon at a given protein position.

    For plus strand the stored genomic position is the lowest coordinate of the codon, so the range is
    ``[pos, pos + 3)``. For minus strand the stored position is the highest coordinate (it is the first base of the
    codon in transcription order), so the range is ``[pos - 2, pos + 1)``.

    The range is always exactly 3 bases long. If the codon spans a splice junction the range does not describe the
    spliced bases; use :meth:`~inscripta.codonmap.gene.mapping.MappingResult.codon_positions` for that.

    Args:
        p2g: Protein position to genomic position table produced by
            :meth:`~inscripta.codonmap.gene.mapping.genome_to_transcript_seq_mapping`.
        protein_pos: 0-based codon index.
        strand: Strand of the transcript the table was built from.

    Returns:
        A 0-based half-open ``(start, end)`` tuple, or ``None`` if ``protein_pos`` is not in the table.
    """
    genome_pos = p2g.get(protein_pos)
    if genome_pos is None:
        return None

    if strand == Strand.PLUS or strand == Strand.PLUS.value:
        return genome_pos, genome_pos + 3
    return genome_pos - 2, genome_pos + 1
