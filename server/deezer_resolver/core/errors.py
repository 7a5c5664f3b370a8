"""Internal failure types for the resolution paths.

These never reach callers of the public operations: every resolution
catches ``ResolverError`` and returns ``None`` instead.
"""


class ResolverError(Exception):
    """Base class for a failed resolution step."""


class FetchError(ResolverError):
    """Transport failure, non-2xx status, or a body that is not the expected format."""


class ExtractionError(ResolverError):
    """The fetched document does not carry the expected data."""
