"""Exceptions raised by doh-resolver."""


class DoHError(Exception):
    """Base class for doh-resolver errors."""


class QueryValidationError(DoHError):
    """Request rejected before any lookup (missing name, unsupported type)."""


class ResolutionError(DoHError):
    """The resolver backend failed to answer.

    Every cause (NXDOMAIN, no answer, timeout, malformed address) ends up
    here; callers report them all the same way.
    """

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ResolutionError":
        message = str(exc).strip() or type(exc).__name__
        return cls(message)
