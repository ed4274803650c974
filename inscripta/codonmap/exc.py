class CodonMapException(Exception):
    """
    Base exception class for CodonMap.
    """

    pass


class ValidationException(CodonMapException):
    """
    Raised when a feature handed to the mapper violates a precondition. No partial result is produced.
    """

    pass


class InvalidStrandException(ValidationException):
    """
    Raised when an operation is performed on an invalid strand -- usually this is when an operation
    is strand-specific but the provided strand is unstranded or not a strand at all.
    """

    pass


class NullReferenceNameException(ValidationException):
    """
    Raised when a transcript does not name the reference sequence its coordinates are relative to.
    """

    pass


class InvalidPhaseException(ValidationException):
    """
    Raised when the phase of the first CDS in transcription order is not one of 0, 1 or 2.
    """

    pass
