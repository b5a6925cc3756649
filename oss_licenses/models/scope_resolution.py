from dataclasses import dataclass

from .artifact_info import ArtifactInfo


@dataclass(frozen=True)
class Resolved:
    scope: str
    artifacts: frozenset[ArtifactInfo]


@dataclass(frozen=True)
class Failed:
    scope: str
    cause: Exception


ScopeResolution = Resolved | Failed


def contribution(result: ScopeResolution) -> frozenset[ArtifactInfo]:
    match result:
        case Resolved(artifacts=artifacts):
            return artifacts
        case Failed():
            # a failed scope contributes nothing; the rest of the pass carries on
            return frozenset()
