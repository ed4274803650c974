from enum import Enum


class GFF3GeneFeatureTypes(Enum):
    """These are feature types seen in GFF3 files that have meaning to the mapper."""

    CDS = "CDS"


# attribute keys that collide with these column names get a "2" suffix appended
GFF3_COLUMN_NAMES = frozenset({"start", "end", "seq_id", "score", "type", "source", "phase", "strand"})
ID_ATTRIBUTE = "ID"
