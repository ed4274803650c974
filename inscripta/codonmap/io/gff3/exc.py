from inscripta.codonmap.io.exc import CodonMapIOException


class GFF3ParserError(CodonMapIOException):
    """
    Raised when there is a parsing exception.
    """

    pass


class EmptyGFF3Exception(GFF3ParserError):
    """
    Raised when parsing produces an empty GFF3.
    """

    pass
