"""
Ordered chain of API regions.

ApiRegions owns the regions of one feature and is the only place that
links them: every region added becomes the child of the previous tail.
Names are unique within a collection.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from apiregions.config import ApiRegionsConfig
from apiregions.errors import RegionLinkError
from apiregions.exports import ApiExport
from apiregions.region import Region

LOG = logging.getLogger("apiregions.collection")


class ApiRegions:
    """
    Registry of regions keyed by name, kept in chain order (root first).
    """

    def __init__(self, config: Optional[ApiRegionsConfig] = None) -> None:
        self._config = config or ApiRegionsConfig()
        self._regions: List[Region] = []
        self._by_name: Dict[str, Region] = {}

    def add(self, region: Region) -> bool:
        """
        Append a region to the end of the chain.

        Args:
            region: A standalone region

        Returns:
            False if a region with the same name is already present

        Raises:
            RegionLinkError: If the region already belongs to a collection
                or is linked into a chain
        """
        if region.name in self._by_name:
            LOG.debug("Region %s already registered", region.name)
            return False
        if region._owner is not None or region.parent is not None or region.child is not None:
            raise RegionLinkError(f"Region {region.name!r} is already part of a chain")

        if self._regions:
            tail = self._regions[-1]
            tail._set_child(region)
            region._set_parent(tail)
            LOG.debug("Linked region %s -> %s", tail.name, region.name)

        self._regions.append(region)
        self._by_name[region.name] = region
        region._owner = self
        return True

    def remove(self, name: str) -> Optional[Region]:
        """
        Unlink a region and join its neighbours.

        Returns:
            The removed region (now standalone), or None if unknown
        """
        region = self._by_name.pop(name, None)
        if region is None:
            return None

        parent, child = region.parent, region.child
        if parent is not None:
            parent._set_child(child)
        if child is not None:
            child._set_parent(parent)
        region._set_parent(None)
        region._set_child(None)
        region._owner = None

        self._regions.remove(region)
        LOG.debug("Removed region %s", name)
        return region

    def get_by_name(self, name: str) -> Optional[Region]:
        return self._by_name.get(name)

    def get_global_region(self) -> Optional[Region]:
        return self._by_name.get(self._config.global_region)

    def list_regions(self) -> Tuple[Region, ...]:
        return tuple(self._regions)

    def region_names(self) -> List[str]:
        return [r.name for r in self._regions]

    def resolve_export(self, region_name: str, package: str) -> Optional[ApiExport]:
        """
        Find the export for ``package`` visible from a region.

        The closest declaration wins: the region itself first, then each
        ancestor toward the root.
        """
        region = self._by_name.get(region_name)
        while region is not None:
            export = region.get_export_by_name(package)
            if export is not None:
                return export
            region = region.parent
        return None

    def __len__(self) -> int:
        return len(self._regions)

    def __iter__(self) -> Iterator[Region]:
        return iter(list(self._regions))

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiRegions):
            return False
        return self._regions == other._regions

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ApiRegions({self.region_names()!r})"
