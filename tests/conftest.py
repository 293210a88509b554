"""
Shared test fixtures.

Fixtures:
    export_factory  — builds ApiExport values with a default package name
    chain           — ApiRegions holding global -> internal -> deprecated
"""

import pytest

from apiregions import ApiExport, ApiRegions, Region


@pytest.fixture
def export_factory():
    def _make(name="org.example.api", **kwargs):
        return ApiExport(name=name, **kwargs)

    return _make


@pytest.fixture
def chain(export_factory):
    """Three linked regions, each exporting one package."""
    regions = ApiRegions()
    for region_name, package in (
        ("global", "org.example.api"),
        ("internal", "org.example.impl"),
        ("deprecated", "org.example.legacy"),
    ):
        region = Region(region_name)
        region.add(export_factory(package))
        regions.add(region)
    return regions
