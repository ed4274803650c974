import logging
from typing import Dict, Iterable

from inscripta.codonmap.exc import ValidationException
from inscripta.codonmap.gene.feature import Feature
from inscripta.codonmap.gene.mapping import MappingResult, genome_to_transcript_seq_mapping

logger = logging.getLogger(__name__)


def map_transcripts(features: Iterable[Feature]) -> Dict[str, MappingResult]:
    """
    Map every transcript in an annotation.

    Transcripts are the direct children of the top-level features (typically genes). Each transcript is mapped
    independently and keyed by its identifier. Transcripts without CDS produce empty tables. Transcripts that fail
    validation, for example because they are unstranded, are logged and skipped.

    Args:
        features: Top-level features, such as those yielded by :meth:`~inscripta.codonmap.io.gff3.parser.parse_gff3`.

    Returns:
        Dictionary of transcript identifier to :class:`~inscripta.codonmap.gene.mapping.MappingResult`.
    """
    mappings = {}
    for feature in features:
        for transcript in feature.subfeatures:
            try:
                mappings[transcript.id] = genome_to_transcript_seq_mapping(transcript)
            except ValidationException as e:
                logger.warning(f"Skipping {transcript}: {e}")
    logger.info(f"Mapped {len(mappings)} transcripts")
    return mappings
