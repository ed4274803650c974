__version__ = "0.1.0"

from inscripta.codonmap.exc import (  # noqa: F401, E402
    CodonMapException,
    ValidationException,
    InvalidStrandException,
    NullReferenceNameException,
    InvalidPhaseException,
)
from inscripta.codonmap.location.strand import Strand  # noqa: F401, E402
from inscripta.codonmap.gene import (  # noqa: F401, E402
    CDSPhase,
    Feature,
    MappingResult,
    genome_to_transcript_seq_mapping,
    get_codon_range,
    map_transcripts,
    normalize_cds,
)
