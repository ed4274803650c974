"""
Command-line interface for CodonMap.

Parses a GFF3 file, maps every transcript and writes a JSON file keyed by transcript identifier.

Example:
    $ codonmap annotation.gff3 mappings.json
"""
import logging
from pathlib import Path
from typing import Optional, TextIO

import click

from inscripta.codonmap import __version__
from inscripta.codonmap.exc import CodonMapException
from inscripta.codonmap.gene.collections import map_transcripts
from inscripta.codonmap.io.gff3.parser import GffutilsParseArgs, parse_gff3
from inscripta.codonmap.io.writer import write_mappings_json

logger = logging.getLogger(__name__)


@click.command()
@click.version_option(version=__version__, prog_name="codonmap")
@click.argument("gff3", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output", type=click.File("w"))
@click.option(
    "--db-fn",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the intermediate gffutils database to this file instead of memory.",
)
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indentation.")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress non-error output.")
def main(gff3: Path, output: TextIO, db_fn: Optional[str], indent: int, verbose: bool, quiet: bool) -> None:
    """Map the genomic coordinates of every transcript in GFF3 to protein positions and write them to OUTPUT."""
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    try:
        features = parse_gff3(gff3, GffutilsParseArgs(), db_fn=db_fn or ":memory:")
        mappings = map_transcripts(features)
    except CodonMapException as e:
        raise click.ClickException(str(e))
    write_mappings_json(mappings, output, indent=indent)
    logger.info(f"Wrote {len(mappings)} mappings to {output.name}")


if __name__ == "__main__":
    main()
