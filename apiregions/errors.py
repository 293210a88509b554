"""Exception hierarchy for apiregions."""

from __future__ import annotations


class ApiRegionsError(Exception):
    """Base exception for api region errors."""

    pass


class ArtifactIdParseError(ApiRegionsError, ValueError):
    """A string could not be parsed into an ArtifactId."""

    pass


class RegionLinkError(ApiRegionsError):
    """A region cannot be linked into a chain."""

    pass
