"""
API regions: layered visibility tiers over exported packages.

A region groups uniquely-named package exports and free-form properties.
Regions are chained root first, each seeing its ancestors' exports:

- Region: one tier, with its own exports and properties
- ApiRegions: the ordered chain that links regions together
- ApiExport: an exported package descriptor
- ArtifactId: Maven coordinate used for the feature-origins property
"""

from apiregions.artifacts import KEY_FEATURE_ORIGINS, ArtifactId
from apiregions.collection import ApiRegions
from apiregions.config import ApiRegionsConfig, configure_logging
from apiregions.errors import ApiRegionsError, ArtifactIdParseError, RegionLinkError
from apiregions.exports import ApiExport, DeprecationInfo
from apiregions.region import ExportsView, Region

__all__ = [
    "KEY_FEATURE_ORIGINS",
    "ApiExport",
    "ApiRegions",
    "ApiRegionsConfig",
    "ApiRegionsError",
    "ArtifactId",
    "ArtifactIdParseError",
    "DeprecationInfo",
    "ExportsView",
    "Region",
    "RegionLinkError",
    "configure_logging",
]
