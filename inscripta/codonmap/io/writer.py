"""
Write and read collections of mapping results as JSON. The output is a single JSON object keyed by transcript
identifier, with one :class:`~inscripta.codonmap.io.models.MappingResultModel` per transcript.
"""
import json
from typing import Dict, TextIO

from marshmallow import ValidationError

from inscripta.codonmap.gene.mapping import MappingResult
from inscripta.codonmap.io.exc import InvalidInputError
from inscripta.codonmap.io.models import MappingResultModel


def write_mappings_json(mappings: Dict[str, MappingResult], handle: TextIO, indent: int = 2):
    """Write mapping results to an open file handle.

    Args:
        mappings: Dictionary of transcript identifier to mapping result.
        handle: Open file handle in text mode.
        indent: JSON indentation.
    """
    schema = MappingResultModel.Schema()
    data = {
        transcript_id: schema.dump(MappingResultModel.from_mapping_result(mapping))
        for transcript_id, mapping in mappings.items()
    }
    json.dump(data, handle, indent=indent)


def read_mappings_json(handle: TextIO) -> Dict[str, MappingResult]:
    """Read mapping results previously written by :meth:`write_mappings_json`.

    Raises:
        InvalidInputError: if a record does not match the schema.
    """
    schema = MappingResultModel.Schema()
    mappings = {}
    for transcript_id, record in json.load(handle).items():
        try:
            mappings[transcript_id] = schema.load(record).to_mapping_result()
        except ValidationError as e:
            raise InvalidInputError(f"Invalid mapping record for {transcript_id}: {e.messages}")
    return mappings
