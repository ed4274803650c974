import json
from io import StringIO

import pytest

from inscripta.codonmap.gene.mapping import MappingResult
from inscripta.codonmap.io.exc import InvalidInputError
from inscripta.codonmap.io.writer import read_mappings_json, write_mappings_json


class TestMappingsJson:
    mappings = {
        "tx1": MappingResult({0: 0, 1: 0, 2: 0, 3: 1, 4: 1, 5: 1}, {0: 0, 1: 3}, "chr1", 1),
        "tx2": MappingResult({}, {}, "chr2", -1),
    }

    def test_write(self):
        handle = StringIO()
        write_mappings_json(self.mappings, handle)
        data = json.loads(handle.getvalue())
        assert data["tx1"] == {
            "g2p": {"0": 0, "1": 0, "2": 0, "3": 1, "4": 1, "5": 1},
            "p2g": {"0": 0, "1": 3},
            "refName": "chr1",
            "strand": 1,
        }
        assert data["tx2"] == {"g2p": {}, "p2g": {}, "refName": "chr2", "strand": -1}

    def test_round_trip(self):
        handle = StringIO()
        write_mappings_json(self.mappings, handle, indent=None)
        handle.seek(0)
        assert read_mappings_json(handle) == self.mappings

    def test_read_invalid(self):
        handle = StringIO(json.dumps({"tx1": {"g2p": {}, "p2g": {}, "refName": "chr1", "strand": 5}}))
        with pytest.raises(InvalidInputError):
            read_mappings_json(handle)
