from pydantic.dataclasses import dataclass

from .artifact_info import ArtifactInfo
from .dependency_scope import DependencyScope

@dataclass(frozen=True)
class DependencyGraphFile:
    scopes: list[DependencyScope]

# On-disk layout of one snapshot entry. Field names and order are the file's keys.
@dataclass(frozen=True)
class ArtifactRecord:
    group: str
    name: str
    version: str
    pomLocation: str | None
    fileLocation: str

    @classmethod
    def from_artifact_info(cls, info: ArtifactInfo) -> "ArtifactRecord":
        return cls(
            group=info.group,
            name=info.name,
            version=info.version,
            pomLocation=info.descriptor_location,
            fileLocation=info.binary_location,
        )

    def to_artifact_info(self) -> ArtifactInfo:
        return ArtifactInfo(
            group=self.group,
            name=self.name,
            version=self.version,
            descriptor_location=self.pomLocation,
            binary_location=self.fileLocation,
        )
