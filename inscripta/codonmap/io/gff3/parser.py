"""
Parse GFF3 file by wrapping the library :mod:`gffutils`.

Functions that call :mod:`gffutils` directly require that the filepaths be local paths that exist, because gffutils
cannot handle remote streams.

Each top-level feature of the file (a feature without a ``Parent``) is converted into a
:class:`~inscripta.codonmap.gene.feature.Feature` tree. The conversions applied here are what the mapper expects:

1. Starts are converted from 1-based to 0-based; ends are left as-is, producing half-open intervals.
2. Strand symbols are converted to integers: ``+`` is 1, ``-`` is -1 and anything else is 0.
3. A phase of ``.`` becomes ``None``.
4. Attribute keys are lowercased. If a lowercased key collides with a column name, ``2`` is appended to it.
   Single-valued attributes are unwrapped from their list.

The lower-level interface to :mod:`gffutils` can be tweaked by adjusting the :class:`GffutilsParseArgs`
dataclass to adjust the arguments passed to :mod:`gffutils`.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Iterator, Optional

import gffutils
from gffutils.exceptions import EmptyInputError
from gffutils.feature import Feature as GffutilsFeature
from gffutils.interface import FeatureDB

from inscripta.codonmap.gene.cds_frame import CDSPhase
from inscripta.codonmap.gene.feature import Feature
from inscripta.codonmap.io.gff3.constants import GFF3_COLUMN_NAMES, ID_ATTRIBUTE
from inscripta.codonmap.io.gff3.exc import EmptyGFF3Exception, GFF3ParserError
from inscripta.codonmap.location.strand import Strand

logger = logging.getLogger(__name__)


@dataclass
class GffutilsParseArgs:
    """These arguments are passed to gffutils directly."""

    id_spec: Optional[dict] = None
    merge_strategy: Optional[str] = "create_unique"


def process_attributes(attributes: Dict[str, Iterable[str]]) -> Optional[Dict[str, Any]]:
    """Lowercase attribute keys, suffixing those that would shadow a GFF3 column, and unwrap single values."""
    processed = {}
    for key, vals in attributes.items():
        new_key = key.lower()
        if new_key in GFF3_COLUMN_NAMES:
            new_key += "2"
        vals = list(vals)
        processed[new_key] = vals[0] if len(vals) == 1 else vals
    return processed if processed else None


def _parse_strand(feature: GffutilsFeature) -> int:
    try:
        return Strand.from_symbol(feature.strand).value
    except ValueError:
        logger.warning(f"Feature {feature.id} has unknown strand {feature.strand}; treating as unstranded")
        return Strand.UNSTRANDED.value


def _parse_phase(feature: GffutilsFeature) -> Optional[int]:
    try:
        phase = CDSPhase.from_gff(feature.frame)
    except ValueError:
        raise GFF3ParserError(f"Feature {feature.id} has invalid phase {feature.frame}")
    return None if phase == CDSPhase.NONE else phase.value


def _convert_feature(db: FeatureDB, feature: GffutilsFeature) -> Feature:
    """
    Recursively convert a gffutils feature and all of its descendants.

    Args:
        db: Database from :mod:`gffutils`.
        feature: The feature to convert.

    Returns:
        A :class:`~inscripta.codonmap.gene.feature.Feature` tree.
    """
    subfeatures = [_convert_feature(db, child) for child in db.children(feature, level=1, order_by="start")]
    return Feature(
        type=feature.featuretype,
        strand=_parse_strand(feature),
        ref_name=feature.seqid,
        start=feature.start - 1,
        end=feature.end,
        phase=_parse_phase(feature),
        id=feature.attributes.get(ID_ATTRIBUTE, [feature.id])[0],
        subfeatures=subfeatures,
        attributes=process_attributes(feature.attributes),
    )


def _find_all_top_level_features(db: FeatureDB) -> Iterable[GffutilsFeature]:
    """
    Find all top-level features. GFFutils lacks a way to do this directly, so we just iterate over everything.

    Args:
        db: Database from :mod:`gffutils`.

    Yields:
        Iterable of ``Feature`` objects that are top-level.
    """
    for feature in db.all_features(order_by=("seqid", "start")):
        try:
            _ = next(db.parents(feature.id))
        except StopIteration:
            yield feature


def parse_gff3(
    gff: Path,
    gffutil_parse_args: Optional[GffutilsParseArgs] = GffutilsParseArgs(),
    gffutil_transform_func: Optional[Callable[[GffutilsFeature], GffutilsFeature]] = None,
    db_fn: Optional[str] = ":memory:",
) -> Iterator[Feature]:
    """Parses a GFF3 file using gffutils.

    Args:
        gff: Path to a GFF3. Must be local.
        gffutil_parse_args: Parsing arguments to pass to gffutils.
        gffutil_transform_func: Function that transforms feature keys. Can be necessary in cases where IDs are not
            unique.
        db_fn: Location to write a gffutils database. Defaults to `:memory:`, which means the database will be built
            transiently. This value can be set to a file location if memory is a concern, or if you want to retain
            the gffutils database. It will not be cleaned up.

    Raises:
        EmptyGFF3Exception: if the file contains no features.

    Yields:
        Top-level :class:`~inscripta.codonmap.gene.feature.Feature` trees, ordered by sequence and start.
    """
    try:
        db = gffutils.create_db(str(gff), db_fn, transform=gffutil_transform_func, **gffutil_parse_args.__dict__)
    except EmptyInputError:
        raise EmptyGFF3Exception("Parsing this GFF3 led to zero features. Is it empty or corrupted?")
    if sum(db.count_features_of_type(i) for i in db.featuretypes()) == 0:
        raise EmptyGFF3Exception("Parsing this GFF3 led to zero features. Is it empty or corrupted?")
    logger.info(f"Parsed {gff}")
    for i in db.featuretypes():
        logger.info(f"Found feature type {i} with {db.count_features_of_type(i)} features")
    for feature in _find_all_top_level_features(db):
        yield _convert_feature(db, feature)
