from enum import Enum
from typing import Optional, Union


class CDSPhase(Enum):
    """
    It is important not to confuse Phase with Frame. From the GFF3 specification:

    The phase is one of the integers 0, 1, or 2, indicating the number of bases forward from the start of the
    current CDS feature the next codon begins. A phase of "0" indicates that a codon begins on the first nucleotide
    of the CDS feature (i.e. 0 bases forward), a phase of "1" indicates that the codon begins at the second nucleotide
    of this CDS feature and a phase of "2" indicates that the codon begins at the third nucleotide of this region.

    """

    NONE = -1
    ZERO = 0
    ONE = 1
    TWO = 2

    @staticmethod
    def from_int(value: int) -> "CDSPhase":
        return CDSPhase(value)  # Raises ValueError for invalid int

    @staticmethod
    def from_gff(value: Optional[Union[int, str, "CDSPhase"]]) -> "CDSPhase":
        """Parses a phase as found on a feature. Missing phases (``None`` or a GFF3 period) become NONE."""
        if isinstance(value, CDSPhase):
            return value
        if value is None or value == ".":
            return CDSPhase.NONE
        return CDSPhase.from_int(int(value))

    def to_gff(self) -> str:
        """In GFF format, Phase is represented with a period for NONE"""
        if self == CDSPhase.NONE:
            return "."
        return str(self.value)

    def codon_offset(self) -> int:
        """
        Initial value of the base counter used when assigning codons to the bases of a transcript.

        The leading ``phase`` bases of the first CDS complete a codon that began upstream, so the counter starts
        ``3 - phase`` bases into that codon. Integer division of the counter by 3 then lines up with the reading frame.

        .. code-block::

            Base:       0 1 2 3 4 5 6
            Phase 0:    0 0 0 1 1 1 2
            Phase 1:    0 1 1 1 2 2 2
            Phase 2:    0 0 1 1 1 2 2

        A NONE phase is treated as zero.
        """
        if self == CDSPhase.NONE:
            return 0
        return (3 - self.value) % 3
