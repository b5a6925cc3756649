from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class ArtifactInfo:
    group: str
    name: str
    version: str
    descriptor_location: str | None
    binary_location: str
