"""
I/O exceptions.
"""
from inscripta.codonmap.exc import CodonMapException


class CodonMapIOException(CodonMapException):
    pass


class InvalidInputError(CodonMapIOException):
    pass
