class RimfetchException(Exception):
    """Fatal setup problem; aborts the run with a non-zero exit status."""


class InvalidDirectory(RimfetchException):
    pass


class ModListNotFound(RimfetchException):
    pass


class MissingPathArgument(RimfetchException):
    pass
