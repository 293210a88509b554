"""
Maven artifact identifiers.

Regions record which features contributed them as a list of artifact ids
stored under the reserved ``feature-origins`` property. This module parses
and formats those ids.

Formats:
    group:artifact:version
    group:artifact:type:version
    group:artifact:type:classifier:version
    mvn:group/artifact/version[/type[/classifier]]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from apiregions.errors import ArtifactIdParseError

KEY_FEATURE_ORIGINS = "feature-origins"
"""Property key holding the comma separated feature origins of a region."""

DEFAULT_TYPE = "jar"

MVN_URL_PREFIX = "mvn:"


@dataclass(frozen=True)
class ArtifactId:
    """
    Immutable Maven coordinate.

    Examples:
        >>> ArtifactId.parse("org.apache.sling:api:2.0")
        ArtifactId('org.apache.sling:api:2.0')

        >>> ArtifactId.parse("mvn:g/a/1.0/zip/src").to_mvn_id()
        'g:a:zip:src:1.0'
    """

    group_id: str
    artifact_id: str
    version: str
    type: str = DEFAULT_TYPE
    classifier: Optional[str] = None

    def __post_init__(self) -> None:
        for field_name in ("group_id", "artifact_id", "version", "type"):
            if not getattr(self, field_name):
                raise ArtifactIdParseError(f"{field_name} cannot be empty")
        if self.classifier == "":
            object.__setattr__(self, "classifier", None)

    @classmethod
    def parse(cls, s: str) -> "ArtifactId":
        """
        Parse an artifact id from either the coordinate or the mvn URL form.

        Raises:
            ArtifactIdParseError: If the string is empty or malformed
        """
        if s is None or not s.strip():
            raise ArtifactIdParseError("Empty artifact id")
        s = s.strip()
        if s.startswith(MVN_URL_PREFIX):
            return cls.from_mvn_url(s)
        return cls.from_mvn_id(s)

    @classmethod
    def from_mvn_id(cls, s: str) -> "ArtifactId":
        parts = s.strip().split(":")
        if len(parts) == 3:
            group_id, artifact_id, version = parts
            return cls(group_id, artifact_id, version)
        if len(parts) == 4:
            group_id, artifact_id, type_, version = parts
            return cls(group_id, artifact_id, version, type=type_)
        if len(parts) == 5:
            group_id, artifact_id, type_, classifier, version = parts
            return cls(group_id, artifact_id, version, type=type_, classifier=classifier)
        raise ArtifactIdParseError(f"Malformed artifact id: {s!r}")

    @classmethod
    def from_mvn_url(cls, s: str) -> "ArtifactId":
        s = s.strip()
        if not s.startswith(MVN_URL_PREFIX):
            raise ArtifactIdParseError(f"Not an mvn URL: {s!r}")
        path = s[len(MVN_URL_PREFIX):]
        # mvn:http://repo!group/artifact/version
        if "!" in path:
            path = path.split("!", 1)[1]
        parts = path.split("/")
        if not 3 <= len(parts) <= 5:
            raise ArtifactIdParseError(f"Malformed mvn URL: {s!r}")
        group_id, artifact_id, version = parts[:3]
        type_ = parts[3] if len(parts) > 3 else DEFAULT_TYPE
        classifier = parts[4] if len(parts) > 4 else None
        return cls(group_id, artifact_id, version, type=type_, classifier=classifier)

    def to_mvn_id(self) -> str:
        """Canonical coordinate form, omitting the type when it is the default."""
        parts = [self.group_id, self.artifact_id]
        if self.classifier:
            parts.extend((self.type, self.classifier))
        elif self.type != DEFAULT_TYPE:
            parts.append(self.type)
        parts.append(self.version)
        return ":".join(parts)

    def to_mvn_url(self) -> str:
        parts = [self.group_id, self.artifact_id, self.version]
        if self.classifier or self.type != DEFAULT_TYPE:
            parts.append(self.type)
        if self.classifier:
            parts.append(self.classifier)
        return MVN_URL_PREFIX + "/".join(parts)

    def __lt__(self, other: "ArtifactId") -> bool:
        if not isinstance(other, ArtifactId):
            return NotImplemented
        return self.to_mvn_id() < other.to_mvn_id()

    def __str__(self) -> str:
        return self.to_mvn_id()

    def __repr__(self) -> str:
        return f"ArtifactId({self.to_mvn_id()!r})"
