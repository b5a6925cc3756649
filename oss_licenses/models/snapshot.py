from dataclasses import dataclass

from .artifact_info import ArtifactInfo

@dataclass(frozen=True)
class Snapshot:
    artifacts: frozenset[ArtifactInfo] = frozenset()
