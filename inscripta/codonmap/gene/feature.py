"""
A minimal genomic feature tree. This is the shape annotation parsers produce and the mapper consumes: a transcript
(or gene) record whose children are CDS, exon, or any other sub-interval.

Coordinates are 0-based and half-open. Strand is stored as its integer representation so that parsers can hand over
whatever they read; it is only interpreted (and validated) by the mapper.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Iterator

from inscripta.codonmap.io.gff3.constants import GFF3GeneFeatureTypes


@dataclass
class Feature:
    type: str
    strand: int
    ref_name: str
    start: int
    end: int
    phase: Optional[int] = None
    id: Optional[str] = None
    subfeatures: List["Feature"] = field(default_factory=list)
    attributes: Optional[Dict[str, Any]] = None

    def __str__(self):
        return f"{self.type}({self.ref_name}:{self.start}-{self.end}:{self.strand}, id={self.id})"

    def __len__(self):
        return max(self.end - self.start, 0)

    @property
    def is_valid_interval(self) -> bool:
        """An interval is only usable if it covers at least one position."""
        return self.start < self.end

    def iter_subfeatures(self, feature_type: str) -> Iterator["Feature"]:
        """Iterate over direct children of the given type, in input order."""
        for subfeature in self.subfeatures:
            if subfeature.type == feature_type:
                yield subfeature

    @property
    def cds_subfeatures(self) -> List["Feature"]:
        return list(self.iter_subfeatures(GFF3GeneFeatureTypes.CDS.value))

    def to_dict(self) -> Dict[str, Any]:
        return dict(
            type=self.type,
            strand=self.strand,
            ref_name=self.ref_name,
            start=self.start,
            end=self.end,
            phase=self.phase,
            id=self.id,
            subfeatures=[x.to_dict() for x in self.subfeatures],
            attributes=self.attributes,
        )

    @staticmethod
    def from_dict(vals: Dict[str, Any]) -> "Feature":
        """Build a feature tree from a nested dictionary. Accepts ``refName`` as an alias of ``ref_name``."""
        return Feature(
            type=vals["type"],
            strand=vals["strand"],
            ref_name=vals.get("ref_name", vals.get("refName")),
            start=vals["start"],
            end=vals["end"],
            phase=vals.get("phase"),
            id=vals.get("id"),
            subfeatures=[Feature.from_dict(x) for x in vals.get("subfeatures") or []],
            attributes=vals.get("attributes"),
        )
