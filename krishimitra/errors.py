"""
Error kinds surfaced to callers of the advisory engine and its collaborators.

  NotFound            — unknown variety/category id (user-input error)
  InvalidInput        — out-of-domain numeric value; names the offending field
  UpstreamUnavailable — weather or advice service failed
"""


class AdvisoryError(Exception):
    """Base class; `kind` is the stable name used in API error bodies."""

    kind = "AdvisoryError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message}


class NotFoundError(AdvisoryError):
    kind = "NotFound"


class InvalidInputError(AdvisoryError):
    kind = "InvalidInput"

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["field"] = self.field
        return d


class UpstreamUnavailableError(AdvisoryError):
    kind = "UpstreamUnavailable"
