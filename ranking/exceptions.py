"""Ranking specific exceptions."""


class RankingError(Exception):
    """Base class for errors raised while building a page view ranking.

    Every subclass is terminal for the request that raised it.
    """


class CredentialParseError(RankingError):
    """Raised when the service account credential can't be decoded."""


class AuthError(RankingError):
    """Raised when the credential can't be exchanged for an access token."""


class PathFilterError(RankingError):
    """Raised when an `includes_paths` segment is not a usable regular expression."""


class ReportFetchError(RankingError):
    """Raised when the reporting client can't be built or the report query fails."""


class FormatError(RankingError):
    """Raised when a report response doesn't have the expected shape."""
