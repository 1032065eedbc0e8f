class GreenRunError(Exception):
    """Base exception for GreenRun."""

    pass


class InvalidEstimateRequestError(GreenRunError):
    """Raised when a payload cannot be turned into an estimate request."""

    pass


class ExportError(GreenRunError):
    """Raised when an estimate cannot be written to disk."""

    pass
