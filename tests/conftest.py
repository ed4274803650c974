import pytest
from pathlib import Path

from inscripta.codonmap.gene.feature import Feature


@pytest.fixture
def test_data_dir() -> Path:
    return Path(__file__).parent / "data"


@pytest.fixture
def transcripts_gff3(test_data_dir) -> Path:
    return test_data_dir / "transcripts.gff3"


def _make_transcript(strand, cds, ref_name="chr1", phase=0, transcript_type="mRNA", extra=None):
    """Build a transcript feature from a list of ``(start, end)`` or ``(start, end, phase)`` CDS tuples."""
    subfeatures = []
    for block in cds:
        start, end = block[:2]
        block_phase = block[2] if len(block) == 3 else phase
        subfeatures.append(Feature("CDS", strand, ref_name, start, end, phase=block_phase, id="cds"))
    subfeatures.extend(extra or [])
    starts = [x[0] for x in cds] or [0]
    ends = [x[1] for x in cds] or [0]
    return Feature(transcript_type, strand, ref_name, min(starts), max(ends), id="tx", subfeatures=subfeatures)


@pytest.fixture
def make_transcript():
    return _make_transcript
