from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class ResolvedArtifact:
    group: str
    name: str
    version: str
    file_location: str

    @property
    def coordinate(self) -> str:
        return f"{self.group}:{self.name}:{self.version}"
