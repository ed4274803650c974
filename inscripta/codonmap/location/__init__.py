from inscripta.codonmap.location.strand import Strand  # noqa: F401
