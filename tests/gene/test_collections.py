import logging

from inscripta.codonmap.gene.collections import map_transcripts
from inscripta.codonmap.gene.feature import Feature
from inscripta.codonmap.gene.mapping import genome_to_transcript_seq_mapping


class TestMapTranscripts:
    def test_map_transcripts(self, make_transcript, caplog):
        tx1 = make_transcript(1, [(0, 6)])
        tx1.id = "tx1"
        tx2 = make_transcript(-1, [(10, 16), (20, 23)])
        tx2.id = "tx2"
        unstranded = make_transcript(0, [(0, 6)])
        unstranded.id = "tx3"
        noncoding = make_transcript(1, [], transcript_type="ncRNA", extra=[Feature("exon", 1, "chr1", 0, 30)])
        noncoding.id = "tx4"
        genes = [
            Feature("gene", 1, "chr1", 0, 6, id="gene1", subfeatures=[tx1, unstranded]),
            Feature("gene", -1, "chr1", 10, 23, id="gene2", subfeatures=[tx2, noncoding]),
            Feature("region", 1, "chr1", 0, 100, id="region"),
        ]
        with caplog.at_level(logging.WARNING):
            mappings = map_transcripts(genes)
        assert mappings == {
            "tx1": genome_to_transcript_seq_mapping(tx1),
            "tx2": genome_to_transcript_seq_mapping(tx2),
            "tx4": genome_to_transcript_seq_mapping(noncoding),
        }
        assert mappings["tx4"].is_empty
        assert "tx3" in caplog.text

    def test_empty(self):
        assert map_transcripts([]) == {}
