"""
Bidirectional mapping between genomic positions and protein (codon) positions of a single transcript.

The CDS children of a transcript are walked in transcription order, one base at a time. Every base consumes one unit
of a running counter, and integer division of that counter by 3 is the protein position of the base. The counter
starts at an offset determined by the phase of the first CDS, and is never reset between CDS intervals, so codons
that straddle a splice junction are assigned correctly.

Two tables are produced:

1. ``g2p``: every usable CDS base to its protein position.
2. ``p2g``: every protein position to the first base (in transcription order) assigned to it. For plus strand
   transcripts this is the lowest coordinate of the codon, for minus strand transcripts the highest.
"""
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple

from inscripta.codonmap.exc import InvalidPhaseException, NullReferenceNameException
from inscripta.codonmap.gene.cds_frame import CDSPhase
from inscripta.codonmap.gene.codon import get_codon_range
from inscripta.codonmap.gene.feature import Feature
from inscripta.codonmap.gene.normalize import normalize_cds
from inscripta.codonmap.location.strand import Strand


@dataclass(frozen=True)
class MappingResult:
    """
    Result of :meth:`genome_to_transcript_seq_mapping`. The tables must be treated as read-only.
    """

    g2p: Dict[int, int]
    p2g: Dict[int, int]
    ref_name: str
    strand: int

    @property
    def is_empty(self) -> bool:
        return len(self.g2p) == 0

    @property
    def num_codons(self) -> int:
        """Number of protein positions, including partial codons at either end."""
        return len(self.p2g)

    def codon_range(self, protein_pos: int) -> Optional[Tuple[int, int]]:
        """Genomic span of a codon; see :meth:`~inscripta.codonmap.gene.codon.get_codon_range`."""
        return get_codon_range(self.p2g, protein_pos, self.strand)

    def codon_positions(self, protein_pos: int) -> List[int]:
        """
        Returns the genomic positions assigned to a protein position, in transcription order.

        Unlike :meth:`codon_range`, this respects splice junctions: a codon split across two CDS intervals returns
        the bases on both sides of the intron. Partial codons at the ends of the CDS return fewer than 3 positions.
        An unknown protein position returns an empty list.
        """
        positions = sorted(g for g, p in self.g2p.items() if p == protein_pos)
        if self.strand == Strand.MINUS.value:
            positions.reverse()
        return positions

    def to_dict(self) -> Dict[str, Any]:
        return dict(g2p=self.g2p, p2g=self.p2g, ref_name=self.ref_name, strand=self.strand)


def _scan_positions(cds: Feature, strand: Strand) -> Iterator[int]:
    """Iterate over the positions of a half-open interval in transcription order."""
    if strand == Strand.PLUS:
        yield from range(cds.start, cds.end)
    else:
        yield from range(cds.end - 1, cds.start - 1, -1)


def _first_phase(cds: Feature) -> CDSPhase:
    try:
        return CDSPhase.from_gff(cds.phase)
    except ValueError:
        raise InvalidPhaseException(f"Invalid phase value: {cds.phase}. Expected 0, 1 or 2.")


def genome_to_transcript_seq_mapping(feature: Feature) -> MappingResult:
    """
    Map the CDS bases of a transcript to protein positions and back.

    Only direct ``CDS`` children participate. Duplicate and empty CDS intervals are dropped (see
    :meth:`~inscripta.codonmap.gene.normalize.normalize_cds`). A transcript without usable CDS produces empty tables.

    Args:
        feature: Transcript feature. Its strand must be 1 or -1 and its reference name must be set.

    Returns:
        A :class:`MappingResult`.

    Raises:
        InvalidStrandException: if the strand of the transcript is not 1 or -1.
        NullReferenceNameException: if the transcript has no reference name.
        InvalidPhaseException: if the first CDS in transcription order has a phase that is not 0, 1 or 2.
    """
    strand = Strand.directional_from_value(feature.strand)
    ref_name = feature.ref_name
    if not ref_name:
        raise NullReferenceNameException(f"Feature {feature.id} does not have a reference name")

    g2p: Dict[int, int] = {}
    p2g: Dict[int, int] = {}

    cds = normalize_cds(feature, strand)
    if not cds:
        return MappingResult(g2p, p2g, ref_name, strand.value)

    counter = _first_phase(cds[0]).codon_offset()
    for block in cds:
        for genome_pos in _scan_positions(block, strand):
            protein_pos = counter // 3
            counter += 1
            g2p[genome_pos] = protein_pos
            # first base seen in transcription order wins
            p2g.setdefault(protein_pos, genome_pos)

    return MappingResult(g2p, p2g, ref_name, strand.value)
