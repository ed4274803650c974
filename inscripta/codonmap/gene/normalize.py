import logging
from typing import List, Set, Tuple

from inscripta.codonmap.gene.feature import Feature
from inscripta.codonmap.location.strand import Strand

logger = logging.getLogger(__name__)


def normalize_cds(feature: Feature, strand: Strand) -> List[Feature]:
    """
    Extract the usable CDS children of a transcript, ordered in transcription order.

    GFF3 files frequently repeat CDS lines, and sometimes contain zero or negative length intervals. Neither is fatal:
    intervals with ``start >= end`` are dropped, and only the first CDS seen for a given ``(start, end)`` pair is
    retained. Nothing is merged, and the phase of a dropped duplicate is ignored.

    Args:
        feature: A transcript feature. Only direct children with type ``CDS`` are considered.
        strand: Directional strand of the transcript. Plus strand CDS are returned in ascending genomic order,
            minus strand CDS in descending genomic order.

    Returns:
        A new list of CDS features. The input is not modified.
    """
    seen: Set[Tuple[int, int]] = set()
    cds = []
    for subfeature in feature.cds_subfeatures:
        key = (subfeature.start, subfeature.end)
        if not subfeature.is_valid_interval:
            logger.debug(f"Dropping empty CDS interval {key} of {feature.id}")
            continue
        if key in seen:
            logger.debug(f"Dropping duplicate CDS interval {key} of {feature.id}")
            continue
        seen.add(key)
        cds.append(subfeature)
    # sort by start and end in case two blocks start at the same position
    return sorted(cds, key=lambda c: (c.start, c.end), reverse=strand == Strand.MINUS)
