"""
API region model.

A region is a named tier of exported packages. Regions form a linear chain
(root first) where each region sees its own exports plus everything its
ancestors export:

    global  ->  internal  ->  deprecated
    (root)                    (leaf)

Links are assigned by ApiRegions; a standalone region has no parent or
child. Equality is local: two regions are equal when name, exports and
properties match, whatever chain they sit in.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Tuple

from apiregions.artifacts import KEY_FEATURE_ORIGINS, ArtifactId
from apiregions.config import DEFAULT_GLOBAL_REGION
from apiregions.exports import ApiExport

if TYPE_CHECKING:
    from apiregions.collection import ApiRegions

LOG = logging.getLogger("apiregions.region")


class Region:
    """
    Named set of unique exports plus free-form properties.

    Not thread-safe: callers serialise add/remove on a region.
    """

    GLOBAL = DEFAULT_GLOBAL_REGION
    """Name of the global region."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._exports: List[ApiExport] = []
        self._properties: Dict[str, str] = {}
        self._parent: Optional[Region] = None
        self._child: Optional[Region] = None
        # collection that linked this region, if any
        self._owner: Optional[ApiRegions] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def properties(self) -> Dict[str, str]:
        """Live, modifiable property map."""
        return self._properties

    @property
    def parent(self) -> Optional[Region]:
        return self._parent

    @property
    def child(self) -> Optional[Region]:
        return self._child

    def _set_parent(self, region: Optional[Region]) -> None:
        self._parent = region

    def _set_child(self, region: Optional[Region]) -> None:
        self._child = region

    def add(self, export: ApiExport) -> bool:
        """
        Add an export unless one with the same name is already present.

        Args:
            export: The export to add

        Returns:
            True if the export was added, False for a duplicate name
        """
        if self.get_export_by_name(export.name) is not None:
            LOG.debug("Region %s already exports %s", self._name, export.name)
            return False
        self._exports.append(export)
        return True

    def remove(self, export: ApiExport) -> bool:
        """
        Remove an export equal to ``export`` in every field.

        A stored export that shares the name but differs elsewhere is kept.

        Returns:
            True if an export was removed
        """
        try:
            self._exports.remove(export)
        except ValueError:
            LOG.debug("Region %s has no export equal to %r", self._name, export)
            return False
        return True

    def is_empty(self) -> bool:
        """True if this region has no exports of its own."""
        return not self._exports

    def list_exports(self) -> ExportsView:
        """Read-only live view of this region's exports, in insertion order."""
        return ExportsView(self._exports)

    def list_all_exports(self) -> Tuple[ApiExport, ...]:
        """
        Exports of all ancestors followed by this region's own.

        The root-most ancestor comes first. Names redeclared further down the
        chain are not deduplicated.
        """
        inherited: Tuple[ApiExport, ...] = ()
        if self._parent is not None:
            inherited = self._parent.list_all_exports()
        return inherited + tuple(self._exports)

    def get_export_by_name(self, name: str) -> Optional[ApiExport]:
        for export in self._exports:
            if export.name == name:
                return export
        return None

    def get_feature_origins(self) -> Tuple[ArtifactId, ...]:
        """
        Artifact ids of the features this region originates from.

        Raises:
            ArtifactIdParseError: If a stored id is malformed
        """
        origins = self._properties.get(KEY_FEATURE_ORIGINS)
        if origins is None or not origins.strip():
            return ()
        # dict keeps first-seen order
        seen: Dict[ArtifactId, None] = {}
        for origin in origins.split(","):
            origin = origin.strip()
            if origin:
                seen[ArtifactId.parse(origin)] = None
        return tuple(seen)

    def set_feature_origins(self, *feature_origins: Optional[ArtifactId]) -> None:
        """Store the given ids, or drop the property when none remain."""
        ids = _distinct(o.to_mvn_id() for o in feature_origins if o is not None)
        origins = ",".join(ids)
        if origins.strip():
            self._properties[KEY_FEATURE_ORIGINS] = origins
        else:
            self._properties.pop(KEY_FEATURE_ORIGINS, None)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return False
        return (
            self._name == other._name
            and self._exports == other._exports
            and self._properties == other._properties
        )

    def __hash__(self) -> int:
        return hash(
            (
                self._name,
                tuple(self._exports),
                frozenset(self._properties.items()),
            )
        )

    def __repr__(self) -> str:
        return (
            f"Region(exports={self._exports!r}, properties={self._properties!r}, "
            f"name={self._name!r})"
        )


def _distinct(values: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(values))


class ExportsView(Sequence):
    """
    Read-only sequence backed by a region's export list.

    Later adds and removes on the region show through the view.
    """

    __slots__ = ("_exports",)

    def __init__(self, exports: List[ApiExport]) -> None:
        self._exports = exports

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return tuple(self._exports[index])
        return self._exports[index]

    def __len__(self) -> int:
        return len(self._exports)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sequence) and not isinstance(other, str):
            return tuple(self._exports) == tuple(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ExportsView({self._exports!r})"
