"""
Exported package descriptors.

An ApiExport names a Java package made visible by a region. Regions treat
exports as opaque values: they key them by ``name`` and compare them by
full value equality, so every field here takes part in ``==`` and ``hash``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from apiregions.artifacts import ArtifactId


class DeprecationInfo(BaseModel):
    """Deprecation notice attached to an export."""

    model_config = ConfigDict(frozen=True)

    msg: str
    since: Optional[str] = None
    for_removal: Optional[str] = None


class ApiExport(BaseModel):
    """
    Immutable description of an exported package.

    Examples:
        >>> e = ApiExport(name="org.apache.sling.api", toggle="new-api")
        >>> e.name
        'org.apache.sling.api'
        >>> e == ApiExport(name="org.apache.sling.api")
        False
    """

    model_config = ConfigDict(frozen=True)

    name: str
    toggle: Optional[str] = None
    previous_artifact_id: Optional[ArtifactId] = None
    previous_package_version: Optional[str] = None
    deprecation: Optional[DeprecationInfo] = None
    properties: Tuple[Tuple[str, str], ...] = ()

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("export name cannot be empty")
        return v

    @field_validator("previous_artifact_id", mode="before")
    @classmethod
    def _parse_artifact_id(cls, v: Any) -> Any:
        if isinstance(v, str):
            return ArtifactId.parse(v)
        return v

    @field_validator("properties", mode="before")
    @classmethod
    def _sorted_properties(cls, v: Any) -> Any:
        # Sorted pairs keep equality independent of insertion order
        if isinstance(v, Mapping):
            return tuple(sorted((str(k), str(val)) for k, val in v.items()))
        if v is None:
            return ()
        return tuple(sorted(tuple(pair) for pair in v))

    def get_property(self, key: str) -> Optional[str]:
        for k, v in self.properties:
            if k == key:
                return v
        return None

    def __str__(self) -> str:
        return self.name
