from inscripta.codonmap.gene.cds_frame import CDSPhase  # noqa: F401
from inscripta.codonmap.gene.feature import Feature  # noqa: F401
from inscripta.codonmap.gene.normalize import normalize_cds  # noqa: F401
from inscripta.codonmap.gene.codon import get_codon_range  # noqa: F401
from inscripta.codonmap.gene.mapping import MappingResult, genome_to_transcript_seq_mapping  # noqa: F401
from inscripta.codonmap.gene.collections import map_transcripts  # noqa: F401
