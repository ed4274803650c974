"""
Data models. These models allow for validation of mapping results, acting as a JSON schema for serializing
and deserializing them.
"""
from dataclasses import field
from typing import ClassVar, Dict, Type

from marshmallow import Schema, validate  # noqa: F401
from marshmallow_dataclass import dataclass

from inscripta.codonmap.gene.mapping import MappingResult


@dataclass
class BaseModel:
    """Base for all of the models."""

    Schema: ClassVar[Type[Schema]] = Schema  # noqa: F811

    class Meta:
        ordered = True


@dataclass
class MappingResultModel(BaseModel):
    """Data model that allows serialization of a :class:`~inscripta.codonmap.gene.mapping.MappingResult`.

    The reference name is serialized under the key ``refName``. JSON object keys are always strings, so the integer
    keys of both tables are written as strings and coerced back to integers on load.
    """

    g2p: Dict[int, int]
    p2g: Dict[int, int]
    ref_name: str = field(metadata=dict(data_key="refName", validate=validate.Length(min=1)))
    strand: int = field(metadata=dict(validate=validate.OneOf([1, -1])))

    def to_mapping_result(self) -> MappingResult:
        return MappingResult(self.g2p, self.p2g, self.ref_name, self.strand)

    @staticmethod
    def from_mapping_result(mapping_result: MappingResult) -> "MappingResultModel":
        """Convert a :class:`~inscripta.codonmap.gene.mapping.MappingResult` to a :class:`MappingResultModel`"""
        return MappingResultModel(**mapping_result.to_dict())
